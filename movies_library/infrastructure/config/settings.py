from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    MONGODB_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "movies_library"
    MOVIES_COLLECTION: str = "movies"
    LOG_LEVEL: str = "INFO"
