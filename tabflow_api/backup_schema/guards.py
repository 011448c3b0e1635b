"""Type-guard predicates for decoded JSON values of unknown shape."""

from __future__ import annotations

import math
from typing import Any

from .constants import SUPPORTED_SCHEMA_VERSIONS


def is_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_number(value: Any) -> bool:
    """
    True for finite ints and floats.

    ``bool`` is an ``int`` subclass in Python but ``true`` is not a number in
    JSON, so it is rejected. ``json.loads`` accepts ``NaN`` and ``Infinity``
    literals; both are rejected here.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    # Ints are exact and always finite; math.isfinite would overflow on huge ones.
    return isinstance(value, int) or math.isfinite(value)


def is_integer(value: Any) -> bool:
    """True for ints and for integral floats such as ``1.7e12``."""
    if not is_number(value):
        return False
    return isinstance(value, int) or float(value).is_integer()


def is_supported_version(value: Any) -> bool:
    return is_integer(value) and int(value) in SUPPORTED_SCHEMA_VERSIONS
