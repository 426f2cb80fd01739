"""Path existence checks."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from propath.access import lookup, lookup_own
from propath.errors import PathParseError
from propath.path import StringPath, classify_path
from propath.tokenizer import is_deep_key
from propath.types import MISSING, SparseList
from propath.utils.keys import is_index
from propath.utils.sequences import is_arguments

__all__ = ["has", "has_in", "resolve_has_keys"]

_logger = logging.getLogger(__name__)


def resolve_has_keys(object: Any, path: Any) -> tuple[Any, ...]:
    """Normalize ``path`` into the key sequence an existence check walks.

    The policy has two steps. A string that uses path syntax is tokenized
    only when looking it up directly on ``object`` yields ``None`` or nothing;
    otherwise the raw value becomes a one-key sequence, so a flat key such as
    ``"a.b"`` stored on ``object`` is found directly. The direct lookup sees
    inherited attributes too, even for :func:`has`; the walk afterwards
    decides whether the member is own. A malformed deep string also falls
    back to the raw key.
    """
    shape = classify_path(path)
    if not isinstance(shape, StringPath):
        return shape.keys()
    if not is_deep_key(shape.text):
        return shape.as_single_key().keys()

    direct = lookup(object, shape.text)
    if direct is not None and direct is not MISSING:
        return shape.as_single_key().keys()
    try:
        return shape.keys()
    except PathParseError as exc:
        _logger.debug("Treating malformed path as a flat key: %s", exc)
        return shape.as_single_key().keys()


def _is_sparse_index(container: Any, key: Any) -> bool:
    if not (isinstance(container, (list, tuple, SparseList)) or is_arguments(container)):
        return False
    return is_index(key) and int(key) < len(container)


def _walk(object: Any, path: Any, read: Callable[[Any, Any], Any]) -> bool:
    keys = resolve_has_keys(object, path)
    if not keys:
        return False

    current = object
    for key in keys:
        value = read(current, key)
        if value is MISSING and not _is_sparse_index(current, key):
            return False
        current = value
    return True


def has(object: Any, path: Any) -> bool:
    """Check whether ``path`` names an own member reachable from ``object``.

    ``path`` may be a single key, a list/tuple of keys, or a dotted/bracketed
    string. Index keys on lists, tuples, :class:`~propath.types.SparseList`
    and arguments-like objects count as present when they are within the
    declared length, even if the slot is a hole. Walking past a hole fails.

    Never raises.

    Example:
        has({"a": {"b": None}}, "a.b")  # True
        has(SparseList.of(MISSING, MISSING, 3), 1)  # True
        has([1, 2, 3], 5)  # False
    """
    return _walk(object, path, lookup_own)


def has_in(object: Any, path: Any) -> bool:
    """Like :func:`has`, but inherited attributes such as methods also count."""
    return _walk(object, path, lookup)
