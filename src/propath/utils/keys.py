"""Index classification and canonical key forms."""

from __future__ import annotations

import math
import re
from typing import Any

__all__ = ["MAX_SAFE_INTEGER", "is_index", "is_number", "to_key"]

MAX_SAFE_INTEGER = 2**53 - 1

_UNSIGNED_INTEGER = re.compile(r"(?:0|[1-9][0-9]*)")


def is_number(value: Any) -> bool:
    """Return True for ints and floats, excluding ``bool``."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_index(key: Any, length: int = MAX_SAFE_INTEGER) -> bool:
    """Check whether ``key`` is usable as a non-negative integer index.

    Accepts ints, integral floats, and unsigned decimal strings without
    leading zeros (``"0"`` itself is allowed). The value must be below
    ``length``.

    Args:
        key: The candidate key.
        length: Exclusive upper bound, ``MAX_SAFE_INTEGER`` by default.

    Returns:
        True if ``key`` is a valid index, False otherwise.
    """
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return 0 <= key < length
    if isinstance(key, float):
        return key.is_integer() and 0 <= key < length
    if isinstance(key, str):
        # fullmatch on str rejects a trailing "\n" that $ would let through
        return _UNSIGNED_INTEGER.fullmatch(key) is not None and int(key) < length
    return False


def to_key(value: Any) -> Any:
    """Canonicalize a numeric value into its string property-key form.

    Strings and other non-numeric values are returned unchanged.
    """
    if isinstance(value, str) or not is_number(value):
        return value
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer():
        return str(int(value))
    return repr(value)
