# config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """ Application settings loaded from environment variables (or a .env file). """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # API
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    database_file: str = "students.db"
    pool_size: int = 5

    log_level: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    """ Get cached application settings. """
    return Settings()


settings = get_settings()
