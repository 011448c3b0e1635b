from __future__ import annotations

import json
import logging

from fastapi import Request

logger = logging.getLogger(__name__)

AUTHORIZATION_HEADER = "Authorization"
BEARER_SCHEME = "bearer"
BODY_TOKEN_FIELD = "accessToken"


def bearer_from_header(request: Request) -> str | None:
    """
    Extract the token from `Authorization: Bearer <token>`.

    - Scheme is matched case-insensitively.
    - Anything other than exactly two space-separated parts is treated as absent.
    """

    raw = request.headers.get(AUTHORIZATION_HEADER)
    if not raw:
        return None

    parts = raw.split(" ")
    if len(parts) == 2 and parts[0].lower() == BEARER_SCHEME and parts[1]:
        return parts[1]

    logger.info("Malformed Authorization header path=%s method=%s", request.url.path, request.method)
    return None


async def extract_access_token(request: Request) -> str | None:
    """
    Header first, then an `accessToken` string field in a JSON body.

    A body that is not JSON is ignored rather than rejected.
    """

    token = bearer_from_header(request)
    if token:
        return token

    body = await request.body()
    if not body:
        return None
    try:
        parsed = json.loads(body)
    except (UnicodeDecodeError, ValueError, RecursionError):
        return None

    if isinstance(parsed, dict):
        value = parsed.get(BODY_TOKEN_FIELD)
        if isinstance(value, str) and value:
            return value
    return None
