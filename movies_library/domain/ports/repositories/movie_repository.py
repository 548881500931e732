from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from movies_library.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def add(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def add_many(self, movies: Sequence[Movie]) -> List[Movie]:
        pass

    @abstractmethod
    async def delete(self, title: Optional[str]) -> None:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def get_all(self) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_title(self, title: Optional[str]) -> Optional[Movie]:
        pass

    @abstractmethod
    async def search_by_title_fragment(self, fragment: Optional[str]) -> List[Movie]:
        pass

    @abstractmethod
    async def delete_all(self) -> int:
        pass
