"""Configuration from environment variables. No hardcoded secrets."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_TOKENINFO_URL = "https://oauth2.googleapis.com/tokeninfo"


class ConfigurationError(ValueError):
    """Raised at startup when required configuration is missing or unusable."""


def _getenv(key: str) -> str | None:
    return os.environ.get(key)


def _getenv_int(key: str, default: int) -> int:
    raw = os.environ.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class GoogleAuthConfig:
    """
    Google OAuth configuration from environment.

    Required:
        GOOGLE_CLIENT_ID: The extension's registered OAuth client id; used as
            the expected audience / authorized party.

    Optional:
        GOOGLE_TOKENINFO_URL: Token introspection endpoint (must be https).
        GOOGLE_TOKENINFO_TIMEOUT_SECONDS: Timeout for the introspection call (default 10).
    """

    client_id: str
    tokeninfo_url: str = DEFAULT_TOKENINFO_URL
    timeout_seconds: int = 10

    def __post_init__(self) -> None:
        if not self.client_id:
            raise ConfigurationError("GOOGLE_CLIENT_ID must be set")
        if not self.tokeninfo_url.startswith("https://"):
            raise ConfigurationError("GOOGLE_TOKENINFO_URL must use https")

    @property
    def expected_audience(self) -> str:
        return self.client_id

    @classmethod
    def from_environ(cls) -> GoogleAuthConfig:
        # Missing or blank client id is rejected by __post_init__.
        timeout = _getenv_int("GOOGLE_TOKENINFO_TIMEOUT_SECONDS", 10)
        return cls(
            client_id=_strip_or_none(_getenv("GOOGLE_CLIENT_ID")) or "",
            tokeninfo_url=_strip_or_none(_getenv("GOOGLE_TOKENINFO_URL")) or DEFAULT_TOKENINFO_URL,
            timeout_seconds=timeout if timeout > 0 else 10,
        )


def _strip_or_none(s: str | None) -> str | None:
    if s is None:
        return None
    t = s.strip()
    return t if t else None
