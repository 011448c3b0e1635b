"""
Standalone utility to verify Google OAuth access tokens.

This package has no dependency on other tabflow_api packages. Build a
GoogleTokenVerifier once (it fails fast on missing configuration) and call
verify() with a bearer token to get a VerifiedIdentity.
"""

from .config import ConfigurationError, GoogleAuthConfig
from .errors import ErrorCode, VerificationError
from .identity import AuthProvider, VerifiedIdentity, derive_internal_user_id
from .verifier import GoogleTokenVerifier, verify_access_token

__all__ = [
    "AuthProvider",
    "ConfigurationError",
    "ErrorCode",
    "GoogleAuthConfig",
    "GoogleTokenVerifier",
    "VerificationError",
    "VerifiedIdentity",
    "derive_internal_user_id",
    "verify_access_token",
]
