"""Single-step lookups and the ``get`` accessor.

Two lookup flavours back every traversal in the library:

* ``lookup_own`` reads only *own* members: mapping keys, filled sequence
  slots, and instance attributes. Existence checks are built on it.
* ``lookup`` additionally falls back to ``getattr`` for string keys, so
  inherited members such as methods are reachable. ``get`` and ``invoke``
  are built on it.

Both return :data:`~propath.types.MISSING` when nothing is found and never
raise for missing members.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from propath.path import StringPath, classify_path
from propath.tokenizer import is_deep_key
from propath.types import MISSING, Arguments, SparseList
from propath.utils.keys import is_index, is_number, to_key

__all__ = ["get", "has_own", "lookup", "lookup_own"]


def _mapping_keys(key: Any) -> Iterator[Any]:
    yield key
    if is_number(key):
        yield to_key(key)
    elif isinstance(key, str) and is_index(key):
        yield int(key)


def _lookup_mapping(container: Mapping[Any, Any], key: Any) -> Any:
    for candidate in _mapping_keys(key):
        try:
            if candidate in container:
                return container[candidate]
        except TypeError:
            # unhashable key
            return MISSING
    return MISSING


def _lookup_index(container: Any, key: Any) -> Any:
    if not is_index(key, len(container)):
        return MISSING
    index = int(key)
    if isinstance(container, SparseList) and not container.has_index(index):
        return MISSING
    return container[index]


def _lookup_attribute(container: Any, key: Any) -> Any:
    if not isinstance(key, str):
        return MISSING
    try:
        namespace = vars(container)
    except TypeError:
        namespace = None
    if namespace is not None:
        return namespace.get(key, MISSING)
    for klass in type(container).__mro__:
        if key in getattr(klass, "__slots__", ()):
            return getattr(container, key, MISSING)
    return MISSING


def lookup_own(container: Any, key: Any) -> Any:
    """Read ``key`` from ``container`` if it is an own member.

    Args:
        container: Mapping, sequence, arguments-like wrapper, or object.
        key: The key token. Mapping lookups also try the canonical string
            form of numeric keys and the int form of index strings.

    Returns:
        The stored value (which may be ``None``) or ``MISSING``.
    """
    if container is None or container is MISSING:
        return MISSING
    if isinstance(container, Mapping):
        return _lookup_mapping(container, key)
    if isinstance(container, (Sequence, Arguments)):
        return _lookup_index(container, key)
    return _lookup_attribute(container, key)


def has_own(container: Any, key: Any) -> bool:
    """Return True if ``key`` is an own member of ``container``."""
    return lookup_own(container, key) is not MISSING


def lookup(container: Any, key: Any) -> Any:
    """Read ``key`` from ``container``, including inherited attributes."""
    value = lookup_own(container, key)
    if value is not MISSING or container is None or container is MISSING:
        return value
    if isinstance(key, str):
        return getattr(container, key, MISSING)
    return MISSING


def get(object: Any, path: Any, default: Any = None) -> Any:
    """Resolve ``path`` against ``object``, returning ``default`` if unreachable.

    A string path is first tried as one flat key; only when that finds
    nothing and the string uses path syntax is it tokenized. Lists and tuples
    are key sequences; any other value is a single key. An empty key sequence
    resolves to ``object`` itself.

    Args:
        object: The structure to read from.
        path: Single key, key sequence, or dotted/bracketed string.
        default: Returned when a step is missing, an intermediate value is
            ``None``, or the final value is missing. A stored ``None`` at the
            end of the path is returned as ``None``.

    Raises:
        PathParseError: If a deep string path has malformed brackets.
    """
    shape = classify_path(path)
    if isinstance(shape, StringPath) and (
        lookup(object, shape.text) is not MISSING or not is_deep_key(shape.text)
    ):
        keys = shape.as_single_key().keys()
    else:
        keys = shape.keys()

    current = object
    for key in keys:
        if current is None or current is MISSING:
            return default
        current = lookup(current, key)
    return default if current is MISSING else current
