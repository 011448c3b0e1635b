from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from tabflow_api.backup_schema import decode_backup_payload, validate_with_diagnostics
from tabflow_api.backup_schema.payload import payload_too_large
from tabflow_api.google_auth import VerifiedIdentity
from tabflow_api.schemas.api import BackupValidationOut, ErrorOut
from tabflow_api.security.dependencies import get_app_settings, require_identity
from tabflow_api.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/backups", tags=["backups"])


def _declared_length(request: Request) -> int | None:
    raw = request.headers.get("content-length")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


async def _read_limited(request: Request, max_bytes: int) -> bytes:
    """
    Buffer the body chunk by chunk, stopping as soon as it passes ``max_bytes``.

    Chunked uploads carry no Content-Length, so the header check alone
    does not bound them.
    """
    declared = _declared_length(request)
    if declared is not None and declared > max_bytes:
        raise payload_too_large(max_bytes)

    chunks: list[bytes] = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > max_bytes:
            logger.info("Payload rejected while streaming: limit=%d", max_bytes)
            raise payload_too_large(max_bytes)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "/validate",
    response_model=BackupValidationOut,
    responses={
        400: {"model": ErrorOut},
        401: {"model": ErrorOut},
        403: {"model": ErrorOut},
        413: {"model": ErrorOut},
        422: {"model": BackupValidationOut},
    },
)
async def validate_backup(
    request: Request,
    identity: VerifiedIdentity = Depends(require_identity),
    settings: Settings = Depends(get_app_settings),
):
    """
    Check an import/sync payload before it is accepted.

    Storing the document is the caller's job; this route only answers
    "accepted" or "rejected with reasons".
    """
    raw = await _read_limited(request, settings.max_payload_bytes)
    document = decode_backup_payload(raw, settings.max_payload_bytes)
    result = validate_with_diagnostics(document)

    if not result.valid:
        logger.info(
            "Backup rejected user=%s code=%s errors=%d",
            identity.internal_user_id[:8],
            result.code.value if result.code else None,
            len(result.errors),
        )
        return JSONResponse(status_code=422, content=result.to_dict())

    return BackupValidationOut(valid=True, session_count=len(document["sessions"]))
