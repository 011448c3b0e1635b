"""Limits shared with the extension's export/import code."""

# Session names are checked after trimming leading/trailing whitespace.
MIN_SESSION_NAME_LENGTH = 1
MAX_SESSION_NAME_LENGTH = 50

# 5 MiB; enforced before a payload is decoded.
MAX_PAYLOAD_SIZE = 5 * 1024 * 1024

SUPPORTED_SCHEMA_VERSIONS = frozenset({1})
