"""Where a card sits on the board, and how many cards cover it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

NUMBER_OF_COLUMNS_IN_TABLEAU = 8
NUMBER_OF_RESERVE_SLOTS = 4
NUMBER_OF_FOUNDATION_STACKS = 4


class DepotKind(Enum):
    RESERVE = "reserve"
    FOUNDATION = "foundation"
    TABLEAU = "tableau"


DepotKey = Tuple[DepotKind, int]


class _ByDistance:
    """Ordering shared by all locations: cheaper to reach sorts first."""

    __slots__ = ()

    @property
    def distance(self) -> int:
        raise NotImplementedError

    def __lt__(self, other):
        if not isinstance(other, _ByDistance):
            return NotImplemented
        return self.distance < other.distance

    def __le__(self, other):
        if not isinstance(other, _ByDistance):
            return NotImplemented
        return self.distance <= other.distance

    def __gt__(self, other):
        if not isinstance(other, _ByDistance):
            return NotImplemented
        return self.distance > other.distance

    def __ge__(self, other):
        if not isinstance(other, _ByDistance):
            return NotImplemented
        return self.distance >= other.distance


@dataclass(frozen=True, eq=True)
class ReserveLocation(_ByDistance):
    position: int

    kind = DepotKind.RESERVE

    @property
    def depth(self) -> int:
        # a slot holds one card, nothing ever covers it
        return 0

    @property
    def distance(self) -> int:
        return self.depth

    @property
    def key(self) -> DepotKey:
        return (self.kind, self.position)

    def __str__(self) -> str:
        return f"reserve {self.position}"


@dataclass(frozen=True, eq=True)
class FoundationLocation(_ByDistance):
    position: int
    depth: int = 0

    kind = DepotKind.FOUNDATION

    @property
    def distance(self) -> int:
        return self.depth

    @property
    def key(self) -> DepotKey:
        return (self.kind, self.position)

    def __str__(self) -> str:
        return f"foundation {self.position} depth {self.depth}"


@dataclass(frozen=True, eq=True)
class TableauLocation(_ByDistance):
    position: int
    depth: int = 0

    kind = DepotKind.TABLEAU

    @property
    def distance(self) -> int:
        return self.depth

    @property
    def key(self) -> DepotKey:
        return (self.kind, self.position)

    def covering_locations(self) -> List["TableauLocation"]:
        """Locations of the cards stacked on top of this one, top card first."""
        return [TableauLocation(self.position, d) for d in range(self.depth)]

    def __str__(self) -> str:
        return f"column {self.position} depth {self.depth}"


CardLocation = Union[ReserveLocation, FoundationLocation, TableauLocation]
