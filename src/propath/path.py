"""Path input shapes and their normalization to key sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from propath.tokenizer import to_path

__all__ = ["KeySequence", "PathShape", "SingleKey", "StringPath", "classify_path"]


@dataclass(frozen=True)
class SingleKey:
    """One key used as-is: a number, or any other hashable value."""

    key: Any

    def keys(self) -> tuple[Any, ...]:
        return (self.key,)


@dataclass(frozen=True)
class KeySequence:
    """An explicit ordered sequence of keys."""

    items: tuple[Any, ...]

    def keys(self) -> tuple[Any, ...]:
        return self.items


@dataclass(frozen=True)
class StringPath:
    """A string in dot/bracket notation.

    ``keys()`` tokenizes; ``as_single_key()`` keeps the whole string as one
    key for direct lookups of flat keys that contain delimiters.
    """

    text: str

    def keys(self) -> tuple[Any, ...]:
        return tuple(to_path(self.text))

    def as_single_key(self) -> SingleKey:
        return SingleKey(self.text)


PathShape = Union[SingleKey, KeySequence, StringPath]


def classify_path(path: Any) -> PathShape:
    """Sort a raw path value into its tagged shape.

    Lists and tuples are key sequences, strings are string paths, and
    everything else is a single key.
    """
    if isinstance(path, (SingleKey, KeySequence, StringPath)):
        return path
    if isinstance(path, (list, tuple)):
        return KeySequence(tuple(path))
    if isinstance(path, str):
        return StringPath(path)
    return SingleKey(path)
