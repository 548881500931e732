class DomainError(Exception):
    pass


class ValidationError(DomainError):
    pass


class ArgumentError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class NoMatchError(DomainError):
    pass


class DuplicateTitleError(DomainError):
    pass


class ConfigurationError(DomainError):
    pass
