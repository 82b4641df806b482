from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_version: str = "0.1.0"
    cors_origins: list[str] = ["*"]

    # Services
    product_service_name: str = "Product Service"
    user_service_name: str = "User Service"
    service_host: str = "0.0.0.0"
    product_service_port: int = 3001
    user_service_port: int = 3002

    # Store behaviour — see UpdateMode for the two partial-update policies
    partial_update_mode: Literal["truthy", "present"] = "truthy"

    # Demo authentication (illustrative only)
    demo_password: str = "password123"

    # Client gateway
    product_service_url: str = "http://localhost:3001"
    user_service_url: str = "http://localhost:3002"
    gateway_timeout: float = 10.0
    health_check_interval: float = 30.0

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_store: str = "INFO"            # in-memory record stores
    log_level_gateway: str = "INFO"          # client gateway + health monitor

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
