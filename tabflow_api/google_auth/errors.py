"""Closed failure taxonomy for token verification."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_TOKEN = "INVALID_TOKEN"
    EXPIRED_TOKEN = "EXPIRED_TOKEN"
    INVALID_AUDIENCE = "INVALID_AUDIENCE"
    VERIFICATION_FAILED = "VERIFICATION_FAILED"


_DEFAULT_MESSAGES = {
    ErrorCode.INVALID_TOKEN: "Invalid token",
    ErrorCode.EXPIRED_TOKEN: "Token has expired",
    ErrorCode.INVALID_AUDIENCE: "Token was not issued for this application",
    ErrorCode.VERIFICATION_FAILED: "Token verification failed",
}


class VerificationError(Exception):
    """
    Raised when a token cannot be trusted. Do not log the token.

    Callers branch on ``code``; ``message`` is safe to return to clients.
    """

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = code
        self.message = message or _DEFAULT_MESSAGES[code]
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "code": self.code.value}
