from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from movies_library.domain.models.movie import Movie


class MatchMode(str, Enum):
    EXACT = "exact"
    CONTAINS = "contains"


class MovieFilter(BaseModel):
    """Store-independent predicate over a single Movie field.

    Only ``title`` and ``id`` are filterable. ``EXACT`` compares for equality,
    ``CONTAINS`` is a case-sensitive substring test.
    """

    model_config = ConfigDict(frozen=True)

    field: str
    value: str
    mode: MatchMode = MatchMode.EXACT

    @classmethod
    def by_title(cls, title: str) -> "MovieFilter":
        return cls(field="title", value=title)

    @classmethod
    def title_contains(cls, fragment: str) -> "MovieFilter":
        return cls(field="title", value=fragment, mode=MatchMode.CONTAINS)

    @classmethod
    def by_id(cls, movie_id: str) -> "MovieFilter":
        return cls(field="id", value=movie_id)

    def matches(self, movie: Movie) -> bool:
        actual: Optional[str] = getattr(movie, self.field)
        if actual is None:
            return False
        if self.mode is MatchMode.CONTAINS:
            return self.value in actual
        return actual == self.value
