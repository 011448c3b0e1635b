from __future__ import annotations


class ApiError(Exception):
    """Request-scoped failure rendered as ``{"error", "code"}`` with ``status_code``."""

    def __init__(self, status_code: int, code: str, message: str) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "code": self.code}


def missing_token() -> ApiError:
    return ApiError(
        400,
        "MISSING_TOKEN",
        "Access token required. Provide via Authorization header or request body.",
    )
