from typing import List, Optional

from movies_library.domain.exceptions import DuplicateTitleError, ValidationError
from movies_library.domain.models.movie import Movie
from movies_library.domain.models.movie_filter import MovieFilter
from movies_library.domain.ports.repositories.movie_repository import MovieRepository
from movies_library.domain.ports.services.logger import LoggerPort
from movies_library.domain.ports.services.movies_library_controller_port import MoviesLibraryControllerPort
from movies_library.domain.services.movie_validator import is_valid, validation_errors
from movies_library.infrastructure.logging.std_logger_adapter import StdLoggerAdapter

INVALID_MOVIE_MESSAGE = "Movie is not valid."


class MoviesLibraryController(MoviesLibraryControllerPort):
    """Validation gate in front of the movie repository.

    Add and update reject movies without a title or director and refuse to
    create a second movie with an existing title. Every other operation is
    handed to the repository unchanged, including its errors.
    """

    def __init__(self, movie_repository: MovieRepository, logger: Optional[LoggerPort] = None):
        self.movie_repository = movie_repository
        self.logger = logger or StdLoggerAdapter(__name__)

    def _ensure_valid(self, movie: Movie) -> None:
        if not is_valid(movie):
            missing = ", ".join(validation_errors(movie))
            self.logger.warning(f"Rejected movie '{movie.title}': missing {missing}")
            raise ValidationError(INVALID_MOVIE_MESSAGE)

    async def add(self, movie: Movie) -> Movie:
        self._ensure_valid(movie)

        existing_movie = await self.movie_repository.get_by_title(movie.title)
        if existing_movie:
            raise DuplicateTitleError(f"Movie with title '{movie.title}' already exists")

        created_movie = await self.movie_repository.add(movie)
        self.logger.info(f"Added movie '{created_movie.title}' ({created_movie.id})")
        return created_movie

    async def update(self, movie: Movie) -> Movie:
        self._ensure_valid(movie)

        title_conflict = await self.movie_repository.get_by_title(movie.title)
        # a movie without an id is matched by title, so the hit is the target itself
        if title_conflict and movie.id and not MovieFilter.by_id(movie.id).matches(title_conflict):
            raise DuplicateTitleError(f"Movie with title '{movie.title}' already exists")

        updated_movie = await self.movie_repository.update(movie)
        self.logger.info(f"Updated movie '{updated_movie.title}'")
        return updated_movie

    async def delete(self, title: Optional[str]) -> None:
        await self.movie_repository.delete(title)
        self.logger.info(f"Deleted movie '{title}'")

    async def get_all(self) -> List[Movie]:
        return await self.movie_repository.get_all()

    async def get_by_title(self, title: Optional[str]) -> Optional[Movie]:
        return await self.movie_repository.get_by_title(title)

    async def search_by_title_fragment(self, fragment: Optional[str]) -> List[Movie]:
        movies = await self.movie_repository.search_by_title_fragment(fragment)
        self.logger.debug(f"Fragment '{fragment}' matched {len(movies)} movie(s)")
        return movies
