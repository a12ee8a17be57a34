# marketplace/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./marketplace.db")
    APP_NAME: str = "Ticket Marketplace API"
    APP_DESC: str = "Founders post tickets, professionals pick them up"
    APP_VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"

    # Comma separated, "*" keeps CORS fully open
    CORS_ORIGINS: str = "*"

    HOST: str = "0.0.0.0"
    PORT: int = 3001
    LOG_LEVEL: str = "INFO"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
