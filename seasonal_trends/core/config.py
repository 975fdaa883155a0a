from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List, Optional
import os


class Settings(BaseSettings):
    # Application settings
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = os.getenv("ENV", "development")
    API_V1_STR: str = "/api/v1"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Redis settings
    REDIS_ENABLED: bool = os.getenv("REDIS_ENABLED", "false").lower() == "true"
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    REDIS_KEY_PREFIX: str = "resale-admin:"
    REDIS_SOCKET_TIMEOUT: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5.0"))

    # Seasonal trends settings
    SEASONAL_TRENDS_CACHE_TTL: int = 30 * 60
    MAX_FORECAST_HORIZON: int = 365
    DEFAULT_PERIOD: str = "12m"
    DEFAULT_FORECAST_PERIOD: int = 30
    DEFAULT_CATEGORY: str = "all"
    CACHE_MEMORY_MAX_ITEMS: int = 1000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() in ["prod", "production"]

    @property
    def REDIS_CONNECTION_PARAMS(self) -> dict:
        """Keyword arguments passed to ``redis.asyncio.Redis.from_url``"""
        return {
            "decode_responses": True,
            "socket_timeout": self.REDIS_SOCKET_TIMEOUT,
            "socket_connect_timeout": self.REDIS_SOCKET_TIMEOUT,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
