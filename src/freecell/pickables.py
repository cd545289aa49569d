"""Validated, not yet executed picks and moves.

None of these values touch the board. They describe what a depot said was
legal at the moment they were produced; :mod:`freecell.game` re-checks them
against the current board before carrying them out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from freecell.common import Card
from freecell.locations import CardLocation, TableauLocation


@dataclass(frozen=True)
class PickableCard:
    card: Card
    location: CardLocation

    @property
    def distance(self) -> int:
        return self.location.distance


@dataclass(frozen=True)
class PickableStack:
    """A run of ``size`` cards on top of a column.

    ``deepest_card`` is the bottom card of the run (the one that lands on the
    destination's top card) and ``location`` is where it currently sits.
    """

    deepest_card: Card
    size: int
    location: TableauLocation

    @property
    def distance(self) -> int:
        return self.location.distance

    @property
    def top_location(self) -> TableauLocation:
        return TableauLocation(self.location.position, 0)


@dataclass(frozen=True)
class CardMove:
    pick: PickableCard
    to: CardLocation

    @property
    def card(self) -> Card:
        return self.pick.card

    @property
    def from_location(self) -> CardLocation:
        return self.pick.location

    def __str__(self) -> str:
        return f"{self.card} from {self.from_location} to {self.to}"


@dataclass(frozen=True)
class StackMove:
    pick: PickableStack
    to: TableauLocation

    @property
    def size(self) -> int:
        return self.pick.size

    @property
    def from_location(self) -> TableauLocation:
        return self.pick.location

    def __str__(self) -> str:
        return f"{self.size} cards from {self.pick.deepest_card} in {self.from_location} to {self.to}"


Move = Union[CardMove, StackMove]


def rank_stack_picks(picks: List[PickableStack]) -> List[PickableStack]:
    """Cheapest first; at equal distance prefer the larger stack."""
    return sorted(picks, key=lambda p: (p.distance, -p.size))
