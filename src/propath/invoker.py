"""Invoke callables found at a path."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from propath.access import get, has_own
from propath.path import StringPath, classify_path
from propath.types import MISSING
from propath.utils.keys import is_number, to_key
from propath.utils.sequences import flatten_args, last

__all__ = [
    "find_callable",
    "invoke",
    "member_key",
    "method",
    "resolve_callable",
    "resolve_invoke_keys",
]


def resolve_invoke_keys(object: Any, path: Any) -> tuple[Any, ...]:
    """Normalize ``path`` into the key sequence ``invoke`` resolves.

    A string that is directly an own key of ``object`` stays whole; any
    other string is tokenized. Numbers are single keys, lists and tuples are
    used as given, and any other value is wrapped as a single raw key.
    """
    shape = classify_path(path)
    if isinstance(shape, StringPath) and has_own(object, shape.text):
        return shape.as_single_key().keys()
    return shape.keys()


def member_key(token: Any) -> Any:
    """Canonical key for the member to invoke: numbers via ``to_key``, else ``str``."""
    if is_number(token):
        return to_key(token)
    return str(None if token is MISSING else token)


def find_callable(object: Any, keys: tuple[Any, ...]) -> Callable[..., Any] | None:
    """Resolve ``keys`` to a callable, or ``None`` if the path does not reach one.

    The parent is found by walking all keys but the last (the parent is
    ``object`` itself for a one-key path); the member is then read from the
    parent, so attribute members come back bound to it.
    """
    parent_keys = keys[:-1]
    parent = get(object, list(parent_keys)) if parent_keys else object
    if parent is None:
        return None

    func = get(parent, [member_key(last(keys))])
    if not callable(func):
        return None
    return func


def resolve_callable(object: Any, path: Any) -> Callable[..., Any] | None:
    """Resolve any path form on ``object`` to a callable, or ``None`` on a miss."""
    if object is None:
        return None
    return find_callable(object, resolve_invoke_keys(object, path))


def invoke(object: Any, path: Any, *args: Any) -> Any:
    """Invoke the callable at ``path`` of ``object``.

    List and tuple arguments are flattened one level, so
    ``invoke(obj, "a.b", [1, 2])`` calls ``obj["a"]["b"](1, 2)``. Attribute
    members are looked up on the parent and therefore arrive bound to it.

    Args:
        object: The structure to query. ``None`` yields ``None``.
        path: Single key, key sequence, or dotted/bracketed string.
        *args: Arguments for the callable.

    Returns:
        The callable's result, or ``None`` if the path does not reach a
        callable.

    Raises:
        PathParseError: If ``path`` is a malformed string path.
    """
    flat_args = flatten_args(args)
    func = resolve_callable(object, path)
    if func is None:
        return None
    return func(*flat_args)


def method(path: Any, *args: Any) -> Callable[[Any], Any]:
    """Return a function that invokes ``path`` on its argument with ``args``.

    Example:
        upper = method("name.upper")
        upper({"name": "ada"})  # "ADA"
    """

    def invoker(object: Any) -> Any:
        return invoke(object, path, *args)

    return invoker
