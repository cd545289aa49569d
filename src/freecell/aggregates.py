"""Fixed groups of containers: the tableau, the reserve and the foundation."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar

from freecell.common import Card, ProximateCard
from freecell.depots import CardHolder, Column, FoundationStack, ReserveSlot
from freecell.errors import (
    InvalidLayoutError,
    InvalidLocationError,
    NoSuchColumn,
    NoSuchFoundationStack,
    NoSuchReserveSlot,
)
from freecell.locations import (
    NUMBER_OF_COLUMNS_IN_TABLEAU,
    NUMBER_OF_FOUNDATION_STACKS,
    NUMBER_OF_RESERVE_SLOTS,
    CardLocation,
    DepotKind,
)
from freecell.pickables import CardMove, PickableCard, PickableStack, StackMove
from freecell.ternary import Ternary

H = TypeVar("H", bound=CardHolder)


class _Aggregate(Generic[H]):
    kind: DepotKind
    size: int
    missing: Type[InvalidLocationError]

    def __init__(self, children: Sequence[H]):
        if len(children) != self.size:
            raise InvalidLayoutError(f"{type(self).__name__} needs {self.size} containers, got {len(children)}")
        self._children: List[H] = list(children)

    def __getitem__(self, position: int) -> H:
        # negative indices are a caller bug, not a wrap-around
        if isinstance(position, bool) or not isinstance(position, int) or not 0 <= position < self.size:
            raise self.missing(position)
        return self._children[position]

    def __iter__(self) -> Iterator[H]:
        return iter(self._children)

    def __len__(self) -> int:
        return self.size

    def card_count(self) -> int:
        return sum(len(child) for child in self._children)

    def get_valid_card_picks(self) -> List[PickableCard]:
        picks = []
        for child in self._children:
            pick = child.try_get_card_pick()
            if pick is not None:
                picks.append(pick)
        return picks

    def get_valid_card_puts(self, pick: PickableCard) -> List[CardMove]:
        moves = []
        for child in self._children:
            if child.key == pick.location.key:
                continue
            move = child.try_get_card_move(pick)
            if move is not None:
                moves.append(move)
        return moves

    def _iter_prox_locations(self, descriptor: ProximateCard) -> Iterator[CardLocation]:
        for child in self._children:
            for depth in child.find_prox_pair(descriptor):
                yield child.location(depth)

    def find_prox_pair(self, descriptor: ProximateCard) -> Ternary[CardLocation]:
        """Locations of every card in this group matching ``descriptor``."""
        return Ternary.of(self._iter_prox_locations(descriptor))


class Tableau(_Aggregate[Column]):
    kind = DepotKind.TABLEAU
    size = NUMBER_OF_COLUMNS_IN_TABLEAU
    missing = NoSuchColumn

    @classmethod
    def from_columns(cls, columns: Iterable[Iterable[Card]]) -> "Tableau":
        return cls([Column(pos, cards) for pos, cards in enumerate(columns)])

    def top_cards(self) -> List[Card]:
        return [col.top_card() for col in self._children if col.cards]

    def get_valid_stack_picks(self) -> List[PickableStack]:
        picks = []
        for col in self._children:
            pick = col.largest_stack_pick()
            if pick is not None:
                picks.append(pick)
        return picks

    def get_valid_stack_puts(self, pick: PickableStack) -> List[StackMove]:
        moves = []
        for col in self._children:
            if col.position == pick.location.position:
                continue
            move = col.can_put_stack(pick)
            if move is not None:
                moves.append(move)
        return moves

    def empty_columns(self) -> int:
        return sum(1 for col in self._children if not col.cards)

    def height(self) -> int:
        return max((len(col) for col in self._children), default=0)


class Reserve(_Aggregate[ReserveSlot]):
    kind = DepotKind.RESERVE
    size = NUMBER_OF_RESERVE_SLOTS
    missing = NoSuchReserveSlot

    @classmethod
    def empty(cls) -> "Reserve":
        return cls([ReserveSlot(pos) for pos in range(cls.size)])

    def free_slots(self) -> int:
        return sum(1 for slot in self._children if slot.card is None)

    def first_free_slot(self) -> Optional[ReserveSlot]:
        for slot in self._children:
            if slot.card is None:
                return slot
        return None


class Foundation(_Aggregate[FoundationStack]):
    kind = DepotKind.FOUNDATION
    size = NUMBER_OF_FOUNDATION_STACKS
    missing = NoSuchFoundationStack

    @classmethod
    def empty(cls) -> "Foundation":
        return cls([FoundationStack(pos) for pos in range(cls.size)])
