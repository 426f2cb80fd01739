"""String path tokenizer: dot, bracket and quoted segment notation."""

from __future__ import annotations

import functools
from typing import Any

from propath.errors import PathParseError
from propath.utils.keys import is_index

__all__ = ["is_deep_key", "to_path"]

_CACHE_SIZE = 500
_DELIMITERS = frozenset(".[]")
_QUOTES = frozenset("'\"")


def is_deep_key(key: Any) -> bool:
    """Return True if ``key`` is a string using multi-segment path syntax.

    Only strings containing ``.``, ``[`` or ``]`` are deep keys. ``"a"`` and
    ``"123"`` are flat; ``"a.b"``, ``"a[0]"``, ``"a['b.c']"`` and ``"a]"``
    are deep. A stray ``]`` tokenizes as an ordinary character.
    """
    if not isinstance(key, str):
        return False
    return any(ch in _DELIMITERS for ch in key)


def to_path(path: str) -> list[str | int]:
    """Parse a string path into an ordered list of key tokens.

    Plain segments are separated by ``.``. Bracket segments hold either a
    quoted literal (``['b.c']``) or an index (``[0]``, which becomes an int).
    A backslash before ``.``, ``[`` or ``]`` in a plain segment makes it
    literal. Empty segments are dropped.

    Args:
        path: The dotted/bracketed path string.

    Returns:
        A new list of tokens; mutating it does not affect later calls.

    Raises:
        PathParseError: On an unterminated ``[`` or quote. A ``]`` outside a
            bracket segment is an ordinary character.
    """
    return list(_tokenize(path))


@functools.lru_cache(maxsize=_CACHE_SIZE)
def _tokenize(path: str) -> tuple[str | int, ...]:
    tokens: list[str | int] = []
    segment: list[str] = []
    i = 0
    n = len(path)

    def flush() -> None:
        if segment:
            tokens.append("".join(segment))
            segment.clear()

    while i < n:
        ch = path[i]
        if ch == "\\" and i + 1 < n and path[i + 1] in _DELIMITERS:
            segment.append(path[i + 1])
            i += 2
            continue
        if ch == ".":
            flush()
            i += 1
            continue
        if ch == "[":
            flush()
            token, i = _read_bracket(path, i)
            if token is not None:
                tokens.append(token)
            continue
        segment.append(ch)
        i += 1

    flush()
    return tuple(tokens)


def _read_bracket(path: str, start: int) -> tuple[str | int | None, int]:
    """Read the bracket segment opening at ``start``.

    Returns the token (``None`` for empty unquoted brackets) and the index
    just past the closing ``]``.
    """
    n = len(path)
    i = start + 1
    content: list[str] = []
    quote: str | None = None
    quoted = False

    while i < n:
        ch = path[i]
        if quote is not None:
            if ch == "\\" and i + 1 < n:
                content.append(path[i + 1])
                i += 2
                continue
            if ch == quote:
                quote = None
            else:
                content.append(ch)
            i += 1
            continue
        if ch in _QUOTES and not content and not quoted:
            quote = ch
            quoted = True
            i += 1
            continue
        if ch == "]":
            raw = "".join(content)
            if quoted:
                return raw, i + 1
            if not raw:
                return None, i + 1
            return (int(raw) if is_index(raw) else raw), i + 1
        content.append(ch)
        i += 1

    if quote is not None:
        raise PathParseError(path, start, f"unterminated {quote} quote in bracket segment")
    raise PathParseError(path, start, "unterminated '['")
