"""A result holding no value, one value, or two values."""

from __future__ import annotations

from itertools import chain, islice
from typing import Callable, Generic, Iterable, Iterator, Tuple, TypeVar

T = TypeVar("T")
U = TypeVar("U")

MAX_VALUES = 2


class Ternary(Generic[T]):
    """Zero, one or two search results.

    At most two real cards match any parent descriptor, so anything beyond the
    second value is dropped when results are merged.
    """

    __slots__ = ("_values",)

    def __init__(self, *values: T):
        if len(values) > MAX_VALUES:
            raise ValueError(f"Ternary holds at most {MAX_VALUES} values, got {len(values)}")
        self._values: Tuple[T, ...] = tuple(values)

    @classmethod
    def none(cls) -> "Ternary[T]":
        return cls()

    @classmethod
    def of(cls, values: Iterable[T]) -> "Ternary[T]":
        return cls(*islice(values, MAX_VALUES))

    @property
    def values(self) -> Tuple[T, ...]:
        return self._values

    def is_none(self) -> bool:
        return not self._values

    def is_one(self) -> bool:
        return len(self._values) == 1

    def is_two(self) -> bool:
        return len(self._values) == 2

    def and_(self, other: "Ternary[T]") -> "Ternary[T]":
        return Ternary.of(chain(self, other))

    def and_then(self, search: Callable[[], "Ternary[T]"]) -> "Ternary[T]":
        """Merge in ``search()`` only while this result is not yet saturated."""
        if self.is_two():
            return self
        return self.and_(search())

    def map(self, fn: Callable[[T], "U"]) -> "Ternary[U]":
        return Ternary(*(fn(v) for v in self._values))

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __bool__(self) -> bool:
        return bool(self._values)

    def __eq__(self, other):
        if isinstance(other, Ternary):
            return self._values == other._values
        return NotImplemented

    def __hash__(self):
        return hash(self._values)

    def __repr__(self) -> str:
        if not self._values:
            return "Ternary.none()"
        return f"Ternary({', '.join(repr(v) for v in self._values)})"

