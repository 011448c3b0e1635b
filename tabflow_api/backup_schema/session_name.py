"""Session name rule, usable on its own (rename, save) or inside is_session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import MAX_SESSION_NAME_LENGTH, MIN_SESSION_NAME_LENGTH

INVALID_SESSION_NAME = "INVALID_SESSION_NAME"


@dataclass(frozen=True)
class NameCheck:
    valid: bool
    error: str | None = None
    code: str | None = None


def validate_session_name(name: Any) -> NameCheck:
    """
    Validate a session name.

    Leading/trailing whitespace is stripped first, so ``"   "`` is empty.
    Length is counted in characters (code points).
    """
    if not isinstance(name, str):
        return NameCheck(False, "Session name must be a string", INVALID_SESSION_NAME)

    trimmed = name.strip()
    if len(trimmed) < MIN_SESSION_NAME_LENGTH:
        return NameCheck(False, "Session name cannot be empty", INVALID_SESSION_NAME)
    if len(trimmed) > MAX_SESSION_NAME_LENGTH:
        return NameCheck(
            False,
            f"Session name must be {MAX_SESSION_NAME_LENGTH} characters or less",
            INVALID_SESSION_NAME,
        )
    return NameCheck(True)
