"""
Verify a Google OAuth access token and derive the caller's identity.

Background for newcomers:
    The browser extension obtains an access token from Google and sends it
    as ``Authorization: Bearer <token>``. Nothing inside that string is
    trusted. We ask Google's tokeninfo endpoint about it and then check,
    against Google's own answer:

    1. Google did not report an **error** (expired, revoked, garbage).
    2. The **authorized party** (``azp``, falling back to ``aud``) is exactly
       our client id. A token minted for some other application must not
       open our API, even though Google considers it perfectly valid.
    3. It has not **expired** (``exp`` / ``expires_in``).
    4. It names a **subject** (``sub``), the stable Google account id.

    Only then do we hash ``google:<sub>`` into the internal user id the rest
    of the system keys data on.
"""

from __future__ import annotations

import logging
import time
from typing import Any

from .config import GoogleAuthConfig
from .errors import ErrorCode, VerificationError
from .identity import AuthProvider, VerifiedIdentity
from .tokeninfo_client import TokenInfoClient

logger = logging.getLogger(__name__)

_EXPIRY_MARKERS = ("expired", "expiry", "used too late")


def _is_expiry_text(text: str) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in _EXPIRY_MARKERS)


def _parse_epoch(value: Any) -> int | None:
    """
    tokeninfo returns numbers as strings (``"exp": "1700000000"``).
    Raises ValueError for values that are neither.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("boolean is not a timestamp")
    return int(value)


def _check_claims(claims: dict[str, Any], expected_audience: str) -> VerifiedIdentity:
    """Apply audience, lifetime and subject checks to a provider answer."""
    audience = claims.get("azp") or claims.get("aud")
    if not isinstance(audience, str) or audience != expected_audience:
        raise VerificationError(ErrorCode.INVALID_AUDIENCE)

    exp = _parse_epoch(claims.get("exp"))
    if exp is not None and exp < int(time.time()):
        raise VerificationError(ErrorCode.EXPIRED_TOKEN)
    expires_in = _parse_epoch(claims.get("expires_in"))
    if expires_in is not None and expires_in <= 0:
        raise VerificationError(ErrorCode.EXPIRED_TOKEN)

    sub = claims.get("sub")
    if not isinstance(sub, str) or not sub.strip():
        raise VerificationError(ErrorCode.INVALID_TOKEN, "Token missing subject")

    email = claims.get("email")
    return VerifiedIdentity.from_subject(
        sub,
        provider=AuthProvider.GOOGLE,
        email=email if isinstance(email, str) and email else None,
        email_verified=claims.get("email_verified") in (True, "true"),
    )


class GoogleTokenVerifier:
    """
    Verifies Google access tokens against the tokeninfo endpoint.

    Holds no per-token state: one outbound call per ``verify`` and nothing
    cached between calls, so one instance can serve concurrent requests.
    """

    def __init__(
        self,
        config: GoogleAuthConfig | None = None,
        client: TokenInfoClient | None = None,
    ) -> None:
        self._config = config or GoogleAuthConfig.from_environ()
        self._client = client or TokenInfoClient(
            self._config.tokeninfo_url,
            self._config.timeout_seconds,
        )

    @property
    def config(self) -> GoogleAuthConfig:
        return self._config

    def verify(self, access_token: str) -> VerifiedIdentity:
        """
        Verify ``access_token`` and return the caller's identity.

        Raises VerificationError, and nothing else, when the token cannot be
        trusted. Transport failures, timeouts and malformed provider answers
        surface as ``VERIFICATION_FAILED``.
        """
        if not isinstance(access_token, str) or not access_token.strip():
            logger.info("Token verification failed code=%s", ErrorCode.INVALID_TOKEN.value)
            raise VerificationError(ErrorCode.INVALID_TOKEN, "Token is empty")

        try:
            identity = self._verify(access_token.strip())
        except VerificationError as e:
            logger.info("Token verification failed code=%s", e.code.value)
            raise
        except Exception as e:
            # Request exceptions embed the URL, and the URL carries the token:
            # log the class name only and drop the exception context.
            logger.warning("Token verification error: %s", type(e).__name__, exc_info=False)
            raise VerificationError(ErrorCode.VERIFICATION_FAILED) from None

        logger.info("Token verified user=%s", identity.internal_user_id[:8])
        return identity

    def _verify(self, access_token: str) -> VerifiedIdentity:
        info = self._client.introspect(access_token)
        if info.is_error:
            if _is_expiry_text(info.error_text or ""):
                raise VerificationError(ErrorCode.EXPIRED_TOKEN)
            raise VerificationError(ErrorCode.INVALID_TOKEN)
        return _check_claims(info.claims, self._config.expected_audience)


def verify_access_token(access_token: str, config: GoogleAuthConfig | None = None) -> VerifiedIdentity:
    """
    Convenience function: verify a bearer token and return its identity.

    Builds a ``GoogleTokenVerifier`` (loading config from the environment if
    ``config`` is None). Services should build one verifier at startup and
    reuse it so that missing configuration fails there, not per request.
    """
    return GoogleTokenVerifier(config=config).verify(access_token)
