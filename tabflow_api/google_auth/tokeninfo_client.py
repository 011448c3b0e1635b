"""
Thin client for Google's OAuth2 tokeninfo (introspection) endpoint.

Background for newcomers:
    An OAuth access token issued by Google is opaque to us: we cannot read
    claims out of it ourselves. Instead we hand it back to Google at the
    tokeninfo endpoint, which answers with the claims it actually issued
    (``azp``/``aud``, ``sub``, ``exp``, ``email`` ...) or with an error such
    as ``{"error": "invalid_token", "error_description": "Invalid Value"}``.

    The token travels as a query parameter, so the request URL must never be
    logged. ``configure_app_logging`` silences urllib3's request-line logging
    for that reason.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import requests


@dataclass(frozen=True)
class TokenInfo:
    """Decoded tokeninfo answer: either claims, or the provider's error text."""

    claims: dict[str, Any] = field(default_factory=dict)
    error_text: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error_text is not None


class TokenInfoClient:
    """
    One GET per call, no retries, no caching.

    Raises ``requests.RequestException`` on transport failures and provider
    outages (5xx), and ``ValueError`` when a 200 answer is not a JSON object.
    """

    def __init__(self, url: str, timeout_seconds: int) -> None:
        self._url = url
        self._timeout = timeout_seconds

    def introspect(self, access_token: str) -> TokenInfo:
        resp = requests.get(
            self._url,
            params={"access_token": access_token},
            timeout=self._timeout,
        )
        if resp.status_code >= 500:
            resp.raise_for_status()

        if resp.status_code != 200:
            return TokenInfo(error_text=_error_text(resp))

        body = resp.json()
        if not isinstance(body, dict):
            raise ValueError("tokeninfo response is not a JSON object")
        if "error" in body or "error_description" in body:
            return TokenInfo(error_text=_describe(body))
        return TokenInfo(claims=body)


def _error_text(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return ""
    return _describe(body) if isinstance(body, dict) else ""


def _describe(body: dict[str, Any]) -> str:
    parts = [body.get("error"), body.get("error_description")]
    return " ".join(str(p) for p in parts if p)
