"""What a renderer should draw for each card slot on the board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Tuple

from freecell.aggregates import Foundation, Reserve, Tableau
from freecell.common import Card
from freecell.errors import InvalidLocationError
from freecell.locations import CardLocation, FoundationLocation, ReserveLocation, TableauLocation


class Shown(Enum):
    REVEALED = "revealed"
    HIDDEN = "hidden"
    BLANK = "blank"


@dataclass(frozen=True)
class SlotView:
    shown: Shown
    card: Optional[Card] = None


BLANK_SLOT = SlotView(Shown.BLANK)
HIDDEN_SLOT = SlotView(Shown.HIDDEN)


@dataclass(frozen=True)
class BoardView:
    """Per-slot visibility for the whole board.

    ``tableau`` is row-major from the base of the columns, every row padded to
    the number of columns, with as many rows as the tallest column.
    """

    reserve: Tuple[SlotView, ...]
    foundation: Tuple[SlotView, ...]
    tableau: Tuple[Tuple[SlotView, ...], ...]

    def revealed_cards(self) -> List[Card]:
        slots = list(self.reserve) + list(self.foundation) + [s for row in self.tableau for s in row]
        return [s.card for s in slots if s.shown is Shown.REVEALED]


def _check_depth(location: CardLocation, size: int) -> None:
    if location.depth < 0 or location.depth >= size:
        raise InvalidLocationError(location)


def build_view(
    tableau: Tableau,
    reserve: Reserve,
    foundation: Foundation,
    locations: Iterable[CardLocation],
    reveal_all: bool = False,
) -> BoardView:
    reserve_shown: Set[int] = set()
    foundation_shown: Dict[int, int] = {}
    tableau_shown: Set[Tuple[int, int]] = set()

    for loc in locations:
        if isinstance(loc, ReserveLocation):
            reserve_shown.add(reserve[loc.position].position)
        elif isinstance(loc, FoundationLocation):
            _check_depth(loc, len(foundation[loc.position]))
            # one slot per stack: the first requested depth wins
            foundation_shown.setdefault(loc.position, loc.depth)
        elif isinstance(loc, TableauLocation):
            _check_depth(loc, len(tableau[loc.position]))
            tableau_shown.add((loc.position, loc.depth))
        else:
            raise InvalidLocationError(loc)

    reserve_row = []
    for slot in reserve:
        if slot.card is None:
            reserve_row.append(BLANK_SLOT)
        elif reveal_all or slot.position in reserve_shown:
            reserve_row.append(SlotView(Shown.REVEALED, slot.card))
        else:
            reserve_row.append(HIDDEN_SLOT)

    foundation_row = []
    for stack in foundation:
        if not stack.cards:
            foundation_row.append(BLANK_SLOT)
        elif stack.position in foundation_shown:
            foundation_row.append(SlotView(Shown.REVEALED, stack.card_at(foundation_shown[stack.position])))
        elif reveal_all:
            foundation_row.append(SlotView(Shown.REVEALED, stack.top_card()))
        else:
            foundation_row.append(HIDDEN_SLOT)

    rows = []
    for base_index in range(tableau.height()):
        row = []
        for col in tableau:
            if base_index >= len(col):
                row.append(BLANK_SLOT)
                continue
            depth = len(col) - 1 - base_index
            if reveal_all or (col.position, depth) in tableau_shown:
                row.append(SlotView(Shown.REVEALED, col.cards[base_index]))
            else:
                row.append(HIDDEN_SLOT)
        rows.append(tuple(row))

    return BoardView(tuple(reserve_row), tuple(foundation_row), tuple(rows))
