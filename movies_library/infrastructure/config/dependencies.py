from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from movies_library.applications.controllers.movies_library_controller import MoviesLibraryController
from movies_library.domain.ports.repositories.movie_repository import MovieRepository
from movies_library.domain.ports.services.logger import LoggerPort
from movies_library.domain.ports.services.movies_library_controller_port import MoviesLibraryControllerPort
from movies_library.infrastructure.adapters.repositories.motor_movie_repository import MotorMovieRepository
from movies_library.infrastructure.config.settings import Settings
from movies_library.infrastructure.logging.logger import setup_logging
from movies_library.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from movies_library.infrastructure.persistence import database


def get_logger() -> LoggerPort:
    return StdLoggerAdapter(__name__)


def get_settings() -> Settings:
    return Settings()


def get_movies_collection() -> AsyncIOMotorCollection:
    return database.get_movies_collection()


def get_movie_repository(collection: Optional[AsyncIOMotorCollection] = None) -> MovieRepository:
    return MotorMovieRepository(collection if collection is not None else get_movies_collection())


def get_movies_library_controller(repository: Optional[MovieRepository] = None) -> MoviesLibraryControllerPort:
    return MoviesLibraryController(repository or get_movie_repository(), logger=get_logger())


def configure_logging(settings: Optional[Settings] = None) -> None:
    setup_logging(level=(settings or get_settings()).LOG_LEVEL)
