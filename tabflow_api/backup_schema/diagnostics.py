"""
Exhaustive validation of a backup document.

Unlike ``is_backup_document``, this does not stop at the first bad session:
every session is checked and each failing one is reported by index, so an
import screen can show all problems at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .constants import SUPPORTED_SCHEMA_VERSIONS
from .guards import is_array, is_integer, is_object, is_string, is_supported_version
from .validators import is_session


class ValidationCode(str, Enum):
    INVALID_SCHEMA = "INVALID_SCHEMA"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    errors: tuple[str, ...] = field(default_factory=tuple)
    code: ValidationCode | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "code": self.code.value if self.code else None,
        }


def _version_text(version: int | float) -> str:
    # Huge ints cannot be converted to str past the interpreter's digit limit.
    if -10**9 < version < 10**9:
        return str(int(version))
    return "(out of range)"


def _supported_versions_text() -> str:
    return ", ".join(str(v) for v in sorted(SUPPORTED_SCHEMA_VERSIONS))


def validate_with_diagnostics(data: Any) -> ValidationResult:
    """
    Validate ``data`` and collect every top-level and per-session problem.

    Order: version, timestamp, sessions. A missing or non-array ``sessions``
    ends validation there; otherwise one ``"Invalid session at index {i}"``
    is recorded per failing session. ``valid`` always agrees with
    ``is_backup_document(data)``.
    """
    errors: list[str] = []
    unsupported_version = False

    if not is_object(data):
        return _result(["Import data must be a JSON object"], unsupported_version)

    version = data.get("version")
    if not is_integer(version):
        errors.append("Missing or invalid 'version' field")
    elif not is_supported_version(version):
        unsupported_version = True
        errors.append(
            f"Unsupported 'version' {_version_text(version)}; supported versions: {_supported_versions_text()}"
        )

    if not is_string(data.get("timestamp")):
        errors.append("Missing or invalid 'timestamp' field")

    sessions = data.get("sessions")
    if not is_array(sessions):
        errors.append("Missing or invalid 'sessions' array")
        return _result(errors, unsupported_version)

    for index, session in enumerate(sessions):
        if not is_session(session):
            errors.append(f"Invalid session at index {index}")

    return _result(errors, unsupported_version)


def _result(errors: list[str], unsupported_version: bool) -> ValidationResult:
    if not errors:
        return ValidationResult(valid=True)
    code = ValidationCode.UNSUPPORTED_VERSION if unsupported_version else ValidationCode.INVALID_SCHEMA
    return ValidationResult(valid=False, errors=tuple(errors), code=code)
