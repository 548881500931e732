from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from movies_library.domain.exceptions import ConfigurationError
from movies_library.infrastructure.config.settings import Settings


class _ClientStore:
    client: Optional[AsyncIOMotorClient] = None
    settings: Optional[Settings] = None


def set_client(client: AsyncIOMotorClient, settings: Optional[Settings] = None) -> None:
    _ClientStore.client = client
    _ClientStore.settings = settings or _ClientStore.settings


def _get_settings() -> Settings:
    if _ClientStore.settings is None:
        _ClientStore.settings = Settings()
    return _ClientStore.settings


def get_client() -> AsyncIOMotorClient:
    if _ClientStore.client is None:
        settings = _get_settings()
        if not settings.MONGODB_URL:
            raise ConfigurationError("MONGODB_URL is not configured")
        _ClientStore.client = AsyncIOMotorClient(settings.MONGODB_URL)
    return _ClientStore.client


def get_database() -> AsyncIOMotorDatabase:
    return get_client()[_get_settings().DATABASE_NAME]


def get_movies_collection() -> AsyncIOMotorCollection:
    return get_database()[_get_settings().MOVIES_COLLECTION]


async def clear_database() -> None:
    """Drop every collection of the configured database"""
    database = get_database()
    for name in await database.list_collection_names():
        await database.drop_collection(name)


def close_client() -> None:
    if _ClientStore.client is not None:
        _ClientStore.client.close()
        _ClientStore.client = None
