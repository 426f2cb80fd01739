"""Container types the path engine understands beyond builtins."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

__all__ = ["MISSING", "Arguments", "SparseList"]


class _MissingType:
    """Sentinel for "no value present", distinct from a stored ``None``."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _MissingType()


class SparseList(Sequence):
    """A read-only sequence with a declared length and possibly empty slots.

    Slots in ``[0, length)`` that were never given a value are holes: they
    count toward ``len()`` but reading one yields :data:`MISSING`.

    Example:
        SparseList.of(MISSING, MISSING, 3)  # two holes, then 3
    """

    __slots__ = ("_length", "_items")

    def __init__(self, length: int, items: Mapping[int, Any] | None = None) -> None:
        if isinstance(length, bool) or not isinstance(length, int) or length < 0:
            raise ValueError(f"length must be a non-negative int, got {length!r}")
        stored: dict[int, Any] = {}
        for index, value in (items or {}).items():
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < length:
                raise ValueError(f"index {index!r} out of range for length {length}")
            stored[index] = value
        self._length = length
        self._items = stored

    @classmethod
    def of(cls, *values: Any) -> SparseList:
        """Build from positional values, treating :data:`MISSING` as a hole."""
        return cls(
            len(values),
            {i: value for i, value in enumerate(values) if value is not MISSING},
        )

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> SparseList:
        return cls.of(*values)

    def has_index(self, index: int) -> bool:
        """Whether ``index`` holds a stored value (holes report ``False``)."""
        return index in self._items

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return SparseList.of(*(self[i] for i in range(*index.indices(self._length))))
        if index < 0:
            index += self._length
        if not 0 <= index < self._length:
            raise IndexError("SparseList index out of range")
        return self._items.get(index, MISSING)

    def __iter__(self) -> Iterator[Any]:
        for i in range(self._length):
            yield self._items.get(i, MISSING)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseList):
            return NotImplemented
        return self._length == other._length and self._items == other._items

    def __hash__(self) -> int:
        return hash((self._length, tuple(sorted(self._items.items(), key=lambda kv: kv[0]))))

    def __repr__(self) -> str:
        body = ", ".join("<hole>" if v is MISSING else repr(v) for v in self)
        return f"SparseList([{body}])"


class Arguments:
    """Array-like wrapper around positional values.

    Indexable by position and sized through ``length``, but deliberately not a
    :class:`collections.abc.Sequence`, so it is treated as an arguments-like
    object rather than an ordered sequence.
    """

    __slots__ = ("_values",)

    def __init__(self, *values: Any) -> None:
        self._values: tuple[Any, ...] = values

    @property
    def length(self) -> int:
        return len(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Arguments):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Arguments{self._values!r}"
