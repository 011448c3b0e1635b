from __future__ import annotations

from fastapi import Depends, Request

from tabflow_api.google_auth import GoogleTokenVerifier, VerifiedIdentity
from tabflow_api.security.auth import bearer_from_header
from tabflow_api.security.errors import missing_token
from tabflow_api.settings import Settings, get_settings


def get_verifier(request: Request) -> GoogleTokenVerifier:
    verifier = getattr(request.app.state, "token_verifier", None)
    if verifier is None:
        raise RuntimeError("Token verifier not configured. Did app startup run?")
    return verifier


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def require_identity(
    request: Request,
    verifier: GoogleTokenVerifier = Depends(get_verifier),
) -> VerifiedIdentity:
    """
    Identity gate for data routes.

    Only the Authorization header is consulted: the body of a data route is the
    payload being validated, not a credential carrier. VerificationError
    propagates to the app's exception handler.
    """

    token = bearer_from_header(request)
    if token is None:
        raise missing_token()

    identity = verifier.verify(token)
    request.state.identity = identity
    return identity
