from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PRODUCER_HOST: str = "0.0.0.0"
    PRODUCER_PORT: int = 9091
    PRODUCER_BASE_URL: str = "http://localhost:9091"

    GENERATION_ENABLED: bool = True
    GENERATION_INTERVAL: float = 10.0

    POLL_INTERVAL: float = 1.0
    HTTP_TIMEOUT: float = 5.0
    DELIVERY_CONCURRENCY: int = 1

    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
