from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)

# Defaults applied when neither the caller nor the environment provide a value
DEFAULT_BASE_URL = "https://the-one-api.dev"
DEFAULT_PAGE_SIZE = 100
DEFAULT_RETRIES = 2
DEFAULT_RETRY_DELAY_MS = 200
DEFAULT_SORT_DIRECTION = "asc"
DEFAULT_REQUEST_TIMEOUT = 30.0


class ClientSettings(BaseSettings):
    """Client configuration loaded from constructor arguments or ONE_API_* env vars."""

    access_token: str = ""
    base_url: str = DEFAULT_BASE_URL
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    default_retries: int = Field(default=DEFAULT_RETRIES, ge=0)
    default_retry_delay_ms: int = Field(default=DEFAULT_RETRY_DELAY_MS, ge=0)
    default_sort_direction: Literal["asc", "desc"] = DEFAULT_SORT_DIRECTION
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                 # Root
    log_level_http: str = "WARNING"         # httpx / httpcore — outbound HTTP
    log_level_client: str = "INFO"          # one_api_sdk fetch / retry messages

    model_config = SettingsConfigDict(
        env_prefix="ONE_API_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> ClientSettings:
    """Cached settings instance — reads .env once."""
    return ClientSettings()
