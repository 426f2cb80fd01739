"""Sequence helpers: last element, argument flattening, arguments-like check."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from propath.types import MISSING, Arguments

__all__ = ["flatten_args", "is_arguments", "last"]


def last(sequence: Sequence[Any]) -> Any:
    """Return the final element of ``sequence``, or ``MISSING`` when empty."""
    if not sequence:
        return MISSING
    return sequence[-1]


def is_arguments(value: Any) -> bool:
    """Return True iff ``value`` is an arguments-like wrapper.

    Arguments-like objects expose positional values and a ``length`` but are
    not ordered sequences themselves.
    """
    return isinstance(value, Arguments)


def flatten_args(args: Sequence[Any]) -> list[Any]:
    """Flatten lists and tuples in ``args`` by exactly one level."""
    flat: list[Any] = []
    for arg in args:
        if isinstance(arg, (list, tuple)):
            flat.extend(arg)
        else:
            flat.append(arg)
    return flat
