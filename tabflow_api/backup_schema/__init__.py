"""
Validation of exported/imported backup documents (sessions -> groups -> tabs).

Two entry points over the same rules:

* ``is_backup_document(data)`` - boolean guard, stops at the first failure.
* ``validate_with_diagnostics(data)`` - reports every problem found.

Both are pure and synchronous; nothing here touches storage or the network.
"""

from .constants import MAX_PAYLOAD_SIZE, MAX_SESSION_NAME_LENGTH, SUPPORTED_SCHEMA_VERSIONS
from .diagnostics import ValidationCode, ValidationResult, validate_with_diagnostics
from .payload import PayloadError, decode_backup_payload
from .session_name import NameCheck, validate_session_name
from .validators import is_backup_document, is_group, is_session, is_tab_snapshot

__all__ = [
    "MAX_PAYLOAD_SIZE",
    "MAX_SESSION_NAME_LENGTH",
    "SUPPORTED_SCHEMA_VERSIONS",
    "NameCheck",
    "PayloadError",
    "ValidationCode",
    "ValidationResult",
    "decode_backup_payload",
    "is_backup_document",
    "is_group",
    "is_session",
    "is_tab_snapshot",
    "validate_session_name",
    "validate_with_diagnostics",
]
