"""Identity produced after verifying a Google access token."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum


class AuthProvider(str, Enum):
    GOOGLE = "google"


def derive_internal_user_id(provider: AuthProvider, subject: str) -> str:
    """
    Stable internal user id: SHA-256 hex digest of ``"<provider>:<subject>"``.

    The same external account always maps to the same id, and the provider's
    raw subject cannot be read back out of it. No per-deployment key is mixed
    in, so anyone who knows a subject can recompute its id.
    """
    return hashlib.sha256(f"{provider.value}:{subject}".encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class VerifiedIdentity:
    """
    Result of a successful token verification.

    Derived per call and never stored by the verifier.
    """

    internal_user_id: str
    """64-char hex id derived from (provider, provider_subject)."""

    provider_subject: str
    """Raw ``sub`` from the provider. Keep server-side; never return it to clients."""

    provider: AuthProvider = AuthProvider.GOOGLE

    email: str | None = None
    """Email claim, if the token carried the email scope."""

    email_verified: bool = False

    @classmethod
    def from_subject(
        cls,
        subject: str,
        *,
        provider: AuthProvider = AuthProvider.GOOGLE,
        email: str | None = None,
        email_verified: bool = False,
    ) -> VerifiedIdentity:
        return cls(
            internal_user_id=derive_internal_user_id(provider, subject),
            provider_subject=subject,
            provider=provider,
            email=email,
            email_verified=email_verified,
        )

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict that is safe to send to clients."""
        return {
            "userId": self.internal_user_id,
            "authProvider": self.provider.value,
            "email": self.email,
        }
