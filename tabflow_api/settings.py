from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from tabflow_api.backup_schema.constants import MAX_PAYLOAD_SIZE


class Settings(BaseSettings):
    """
    App settings.

    Notes:
    - Identity-provider settings (GOOGLE_CLIENT_ID, ...) live in
      `GoogleAuthConfig`, loaded once at startup.
    - Override via env vars, e.g. `APP_LOG_LEVEL=DEBUG`.
    """

    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")

    log_level: str = "INFO"
    max_payload_bytes: int = MAX_PAYLOAD_SIZE


@lru_cache
def get_settings() -> Settings:
    return Settings()
