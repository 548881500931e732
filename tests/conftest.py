from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from docker.errors import DockerException
from motor.motor_asyncio import AsyncIOMotorClient
from testcontainers.mongodb import MongoDbContainer

from movies_library.applications.controllers.movies_library_controller import MoviesLibraryController
from movies_library.domain.ports.repositories.movie_repository import MovieRepository
from movies_library.domain.ports.services.logger import LoggerPort
from movies_library.infrastructure.adapters.repositories.motor_movie_repository import MotorMovieRepository
from movies_library.infrastructure.config.settings import Settings
from movies_library.infrastructure.persistence import database

TEST_DATABASE = "movies_library_test"


@pytest.fixture
def mock_movie_repository():
    """Mock movie repository for controller testing"""
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)


def start_mongo_container():
    """Running MongoDB container, or None when no Docker daemon is reachable"""
    try:
        container = MongoDbContainer("mongo:7.0")
        container.start()
    except DockerException:
        return None
    return container


@pytest.fixture(scope="session")
def mongo_url():
    """Start a MongoDB container once per test session"""
    container = start_mongo_container()
    if container is None:
        pytest.skip("Docker is not available")
    yield container.get_connection_url()
    container.stop()


class BaseIntegrationTest:
    """Base class for integration tests against a real MongoDB"""

    @pytest_asyncio.fixture
    async def mongo_client(self, mongo_url):
        client = AsyncIOMotorClient(mongo_url)
        yield client
        client.close()

    @pytest_asyncio.fixture
    async def movies_collection(self, mongo_client):
        """Empty movies collection for each test"""
        database.set_client(mongo_client, Settings(_env_file=None, DATABASE_NAME=TEST_DATABASE))
        await database.clear_database()
        yield database.get_movies_collection()
        await database.clear_database()
        database.close_client()

    @pytest.fixture
    def repository(self, movies_collection):
        return MotorMovieRepository(movies_collection)

    @pytest.fixture
    def controller(self, repository, mock_logger):
        return MoviesLibraryController(repository, logger=mock_logger)
