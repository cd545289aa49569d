"""Card containers: tableau columns, reserve slots and foundation stacks.

Every container answers the same single-card questions: what can be lifted
from here, would this card be accepted here, and where are the cards matching
a descriptor. Columns also answer them for multi-card runs. Nothing here
mutates until a move has been fully validated; ``take_card_from`` and
``take_stack_from`` check both ends first and only then pick and place.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple, Union

from freecell.common import NUMBER_OF_CARDS_IN_PACK, Card, ProximateCard
from freecell.errors import (
    ColumnFullError,
    EmptyColumnError,
    EmptyFoundationStackError,
    EmptyReserveSlotError,
    IllegalPlacementError,
    InsufficientCardsError,
    InvalidStackError,
    ReserveSlotOccupied,
    SelfMoveError,
    StaleMoveError,
)
from freecell.locations import (
    CardLocation,
    DepotKey,
    DepotKind,
    FoundationLocation,
    ReserveLocation,
    TableauLocation,
)
from freecell.pickables import CardMove, PickableCard, PickableStack, StackMove
from freecell.ternary import Ternary

# worst case: every card stacked in one column, twice over
MAX_NUMBER_OF_CARDS_IN_COLUMN = NUMBER_OF_CARDS_IN_PACK * 2


class CardHolder:
    """Behaviour shared by every container that holds single cards."""

    kind: DepotKind

    def __init__(self, position: int):
        self.position = position

    # ----- State -----
    def _cards_bottom_up(self) -> List[Card]:
        raise NotImplementedError

    def __len__(self) -> int:
        return len(self._cards_bottom_up())

    def __iter__(self) -> Iterator[Card]:
        """Iterate from the bottom card to the top card."""
        return iter(list(self._cards_bottom_up()))

    def __bool__(self) -> bool:
        return len(self) > 0

    @property
    def key(self) -> DepotKey:
        return (self.kind, self.position)

    def top_card(self) -> Optional[Card]:
        cards = self._cards_bottom_up()
        return cards[-1] if cards else None

    def card_at(self, depth: int) -> Card:
        cards = self._cards_bottom_up()
        if depth < 0 or depth >= len(cards):
            raise IndexError(f"Invalid depth {depth} for {self.kind.value} {self.position}")
        return cards[len(cards) - 1 - depth]

    def location(self, depth: int = 0) -> CardLocation:
        raise NotImplementedError

    def snapshot(self) -> Tuple[Card, ...]:
        return tuple(self._cards_bottom_up())

    def restore(self, cards: Iterable[Card]) -> None:
        raise NotImplementedError

    # ----- Rules -----
    def accepts(self, card: Card) -> bool:
        raise NotImplementedError

    def _placement_error(self, card: Card) -> Exception:
        return IllegalPlacementError(f"{card} cannot be placed on {self.kind.value} {self.position}")

    def _empty_error(self) -> Exception:
        raise NotImplementedError

    # ----- Single-card holder -----
    def try_get_card_pick(self) -> Optional[PickableCard]:
        top = self.top_card()
        if top is None:
            return None
        return PickableCard(top, self.location(0))

    def try_get_card_move(self, pick: PickableCard) -> Optional[CardMove]:
        if not self.accepts(pick.card):
            return None
        return CardMove(pick, self.location(0))

    def pick_card(self) -> Card:
        cards = self._cards_bottom_up()
        if not cards:
            raise self._empty_error()
        return self._pop()

    def take_card_from(self, other: "CardHolder") -> None:
        """Move the top card of ``other`` onto this container.

        Raises before touching either container if ``other`` is empty or this
        container does not accept the card.
        """
        if other is self:
            raise SelfMoveError(f"Cannot move a card from {self.kind.value} {self.position} onto itself")
        card = other.top_card()
        if card is None:
            raise other._empty_error()
        if not self.accepts(card):
            raise self._placement_error(card)
        self._push(other.pick_card())

    def _pop(self) -> Card:
        raise NotImplementedError

    def _push(self, card: Card) -> None:
        raise NotImplementedError

    # ----- Parent search -----
    def find_prox_pair(self, descriptor: ProximateCard) -> Ternary[int]:
        """Depths (from the top) of cards matching ``descriptor``."""
        depths = (
            depth
            for depth, card in enumerate(reversed(self._cards_bottom_up()))
            if descriptor.matches(card)
        )
        return Ternary.of(depths)

    def __repr__(self) -> str:
        inner = " ".join(str(c) for c in self._cards_bottom_up())
        return f"{type(self).__name__}({self.position}: {inner})"


class Column(CardHolder):
    """One tableau pile. The last card of ``cards`` is the top card."""

    kind = DepotKind.TABLEAU

    def __init__(self, position: int, cards: Iterable[Card] = ()):
        super().__init__(position)
        self.cards: List[Card] = list(cards)
        if len(self.cards) > MAX_NUMBER_OF_CARDS_IN_COLUMN:
            raise ColumnFullError(f"Column {position} cannot hold {len(self.cards)} cards")

    def _cards_bottom_up(self) -> List[Card]:
        return self.cards

    def location(self, depth: int = 0) -> TableauLocation:
        return TableauLocation(self.position, depth)

    def restore(self, cards: Iterable[Card]) -> None:
        self.cards = list(cards)

    @staticmethod
    def is_playable_pair(parent: Card, child: Card) -> bool:
        return parent.is_opposing_color(child) and parent.is_playable_pair_bigger(child)

    def accepts(self, card: Card) -> bool:
        top = self.top_card()
        return top is None or self.is_playable_pair(top, card)

    def _empty_error(self) -> Exception:
        return EmptyColumnError(self.position)

    def _check_room(self, count: int) -> None:
        if len(self.cards) + count > MAX_NUMBER_OF_CARDS_IN_COLUMN:
            raise ColumnFullError(f"Column {self.position} cannot take {count} more cards")

    def _pop(self) -> Card:
        return self.cards.pop()

    def _push(self, card: Card) -> None:
        self._check_room(1)
        self.cards.append(card)

    def take_card_from(self, other: CardHolder) -> None:
        self._check_room(1)
        super().take_card_from(other)

    # ----- Stack holder -----
    def can_pick_stack(self, pick_size: int) -> Optional[PickableStack]:
        if pick_size < 1 or pick_size > len(self.cards):
            return None
        run = self.cards[-pick_size:]
        for parent, child in zip(run, run[1:]):
            if not self.is_playable_pair(parent, child):
                return None
        return PickableStack(run[0], pick_size, self.location(pick_size - 1))

    def largest_stack_pick(self) -> Optional[PickableStack]:
        best = None
        for n in range(1, len(self.cards) + 1):
            pick = self.can_pick_stack(n)
            if pick is None:
                # a broken pair stays inside every larger run
                break
            best = pick
        return best

    def can_put_stack(self, pick: PickableStack) -> Optional[StackMove]:
        if not self.accepts(pick.deepest_card):
            return None
        return StackMove(pick, self.location(0))

    def pick_stack(self, pick: PickableStack) -> List[Card]:
        """Remove the top ``pick.size`` cards, deepest card first."""
        count = len(self.cards)
        if count < pick.size:
            raise InsufficientCardsError(pick.size, count)
        picked = self.cards[count - pick.size:]
        del self.cards[count - pick.size:]
        return picked

    def take_stack_from(self, other: "Column", pick: PickableStack) -> None:
        if other is self:
            raise SelfMoveError(f"Cannot move a stack from column {self.position} onto itself")
        if len(other) < pick.size:
            raise InsufficientCardsError(pick.size, len(other))
        current = other.can_pick_stack(pick.size)
        if current is None:
            raise InvalidStackError(f"Top {pick.size} cards of column {other.position} are not a playable run")
        if current.deepest_card != pick.deepest_card:
            raise StaleMoveError(
                f"Column {other.position} no longer holds a run starting at {pick.deepest_card}"
            )
        if not self.accepts(pick.deepest_card):
            raise self._placement_error(pick.deepest_card)
        self._check_room(pick.size)
        self.cards.extend(other.pick_stack(pick))


class ReserveSlot(CardHolder):
    """A free cell holding at most one card."""

    kind = DepotKind.RESERVE

    def __init__(self, position: int, card: Optional[Card] = None):
        super().__init__(position)
        self.card = card

    def _cards_bottom_up(self) -> List[Card]:
        return [] if self.card is None else [self.card]

    def location(self, depth: int = 0) -> ReserveLocation:
        return ReserveLocation(self.position)

    def restore(self, cards: Iterable[Card]) -> None:
        cards = list(cards)
        if len(cards) > 1:
            raise ValueError(f"Reserve slot {self.position} holds one card, got {len(cards)}")
        self.card = cards[0] if cards else None

    def accepts(self, card: Card) -> bool:
        return self.card is None

    def _placement_error(self, card: Card) -> Exception:
        return ReserveSlotOccupied(self.position)

    def _empty_error(self) -> Exception:
        return EmptyReserveSlotError(self.position)

    def _pop(self) -> Card:
        card, self.card = self.card, None
        return card

    def _push(self, card: Card) -> None:
        if self.card is not None:
            raise ReserveSlotOccupied(self.position)
        self.card = card


class FoundationStack(CardHolder):
    """Builds up by suit from whatever card starts it."""

    kind = DepotKind.FOUNDATION

    def __init__(self, position: int, cards: Iterable[Card] = ()):
        super().__init__(position)
        self.cards: List[Card] = list(cards)

    def _cards_bottom_up(self) -> List[Card]:
        return self.cards

    def location(self, depth: int = 0) -> FoundationLocation:
        return FoundationLocation(self.position, depth)

    def restore(self, cards: Iterable[Card]) -> None:
        self.cards = list(cards)

    def accepts(self, card: Card) -> bool:
        top = self.top_card()
        if top is None:
            return True
        return top.is_same_suit(card) and top.is_playable_pair_smaller(card)

    def _empty_error(self) -> Exception:
        return EmptyFoundationStackError(self.position)

    def _pop(self) -> Card:
        return self.cards.pop()

    def _push(self, card: Card) -> None:
        self.cards.append(card)


Depot = Union[Column, ReserveSlot, FoundationStack]
