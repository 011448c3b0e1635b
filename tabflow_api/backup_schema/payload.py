"""Decode a raw backup payload before it reaches the validators."""

from __future__ import annotations

import json
import logging
from typing import Any

from .constants import MAX_PAYLOAD_SIZE

logger = logging.getLogger(__name__)

PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
INVALID_JSON = "INVALID_JSON"


class PayloadError(Exception):
    """Raised when a payload is too large or is not JSON. Do not log the payload."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "code": self.code}


def payload_too_large(max_bytes: int) -> PayloadError:
    return PayloadError(PAYLOAD_TOO_LARGE, f"Payload exceeds {max_bytes} bytes")


def decode_backup_payload(raw: bytes | str, max_bytes: int = MAX_PAYLOAD_SIZE) -> Any:
    """
    Enforce the size bound, then decode UTF-8 JSON.

    Returns the decoded value of unknown shape; pass it to
    ``validate_with_diagnostics`` or ``is_backup_document`` next.
    """
    data = raw.encode("utf-8") if isinstance(raw, str) else raw
    if len(data) > max_bytes:
        logger.info("Payload rejected: size=%d limit=%d", len(data), max_bytes)
        raise payload_too_large(max_bytes)

    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        # RecursionError: pathologically nested arrays/objects.
        logger.info("Payload rejected: %s", type(e).__name__)
        raise PayloadError(INVALID_JSON, "Invalid JSON format") from None
