from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from tabflow_api.google_auth import GoogleTokenVerifier
from tabflow_api.schemas.api import AuthSuccessOut, ErrorOut
from tabflow_api.security.auth import extract_access_token
from tabflow_api.security.dependencies import get_verifier
from tabflow_api.security.errors import missing_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/google",
    response_model=AuthSuccessOut,
    responses={400: {"model": ErrorOut}, 401: {"model": ErrorOut}, 403: {"model": ErrorOut}},
)
async def auth_google(
    request: Request,
    verifier: GoogleTokenVerifier = Depends(get_verifier),
) -> AuthSuccessOut:
    """Exchange a Google access token for the stable internal user id."""
    token = await extract_access_token(request)
    if token is None:
        logger.info("Auth rejected: no token provided")
        raise missing_token()

    identity = await run_in_threadpool(verifier.verify, token)
    return AuthSuccessOut(user_id=identity.internal_user_id, auth_provider=identity.provider.value)
