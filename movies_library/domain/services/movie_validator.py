from typing import List

from movies_library.domain.models.movie import Movie

REQUIRED_FIELDS = ("title", "director")


def validation_errors(movie: Movie) -> List[str]:
    """Names of required fields that are missing or blank"""
    errors = []
    for field in REQUIRED_FIELDS:
        value = getattr(movie, field)
        if value is None or not value.strip():
            errors.append(field)
    return errors


def is_valid(movie: Movie) -> bool:
    return not validation_errors(movie)
