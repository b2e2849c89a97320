# storefront/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Every setting has a default, so the API boots with no .env at all.
    The one override the storefront normally needs is PORT.
    """

    PROJECT_NAME: str = "Storefront API"
    API_PREFIX: str = "/api"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # The storefront UI may be served from anywhere
    CORS_ORIGINS: list[str] = ["*"]

    # Directory with the storefront's static files (mounted at "/")
    STATIC_DIR: str = "public"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Process-wide Settings instance, read from the environment once.
    """
    return Settings()
