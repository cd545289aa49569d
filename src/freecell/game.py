"""The game orchestrator: legal picks, legal puts, parent hints and moves."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from freecell.aggregates import Foundation, Reserve, Tableau, _Aggregate
from freecell.common import NUMBER_OF_CARDS_IN_PACK, Card, UndoManager
from freecell.deals import Layout, parse_layout
from freecell.depots import CardHolder, Column, Depot
from freecell.errors import (
    CardConservationError,
    IllegalPlacementError,
    MoveCapacityError,
    SelfMoveError,
    StaleMoveError,
)
from freecell.locations import CardLocation, DepotKey, DepotKind, TableauLocation
from freecell.pickables import CardMove, PickableCard, PickableStack, StackMove
from freecell.view import BoardView, build_view

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParentLocations:
    """The two cards a card could be played onto, or none for a King."""

    locations: Tuple[CardLocation, ...] = ()

    @property
    def is_king(self) -> bool:
        return not self.locations

    def min_distance(self) -> Optional[int]:
        if self.is_king:
            return None
        return min(loc.distance for loc in self.locations)

    def best(self) -> Optional[CardLocation]:
        if self.is_king:
            return None
        return min(self.locations, key=lambda loc: loc.distance)

    def __iter__(self):
        return iter(self.locations)


ParentLocations.KING = ParentLocations()


@dataclass(frozen=True)
class ParentHint:
    card: Card
    location: TableauLocation
    parents: ParentLocations

    def sort_key(self):
        # kings have nowhere to go, list them last
        distance = self.parents.min_distance()
        return (self.parents.is_king, 0 if distance is None else distance)


class Game:
    """A FreeCell board: eight columns, four reserve slots, four foundation stacks.

    Queries never mutate. ``move_card`` and ``move_stack`` re-validate the move
    against the board as it is now, raise a :class:`freecell.errors.GameError`
    without touching anything if it no longer holds, and otherwise apply it as
    a single pick and place.
    """

    def __init__(
        self,
        tableau: Tableau,
        reserve: Optional[Reserve] = None,
        foundation: Optional[Foundation] = None,
        enforce_move_capacity: bool = True,
    ):
        self.tableau = tableau
        self.reserve = reserve if reserve is not None else Reserve.empty()
        self.foundation = foundation if foundation is not None else Foundation.empty()
        self.enforce_move_capacity = enforce_move_capacity
        self.undo_mgr = UndoManager()
        self._aggregates: Dict[DepotKind, _Aggregate] = {
            DepotKind.RESERVE: self.reserve,
            DepotKind.FOUNDATION: self.foundation,
            DepotKind.TABLEAU: self.tableau,
        }

    @classmethod
    def from_layout(cls, columns: Layout, require_full_deck: bool = True, **kwargs) -> "Game":
        """Build a game from eight columns of (rank, suit) pairs, top card last."""
        parsed = parse_layout(columns, require_full_deck=require_full_deck)
        return cls(Tableau.from_columns(parsed), **kwargs)

    # ----- Container lookup -----
    def depot(self, key: DepotKey) -> Depot:
        kind, position = key
        return self._aggregates[kind][position]

    def resolve(self, location: CardLocation) -> Depot:
        return self.depot(location.key)

    def card_at(self, location: CardLocation) -> Card:
        return self.resolve(location).card_at(location.depth)

    def depots(self) -> Iterable[Depot]:
        for aggregate in (self.reserve, self.foundation, self.tableau):
            yield from aggregate

    # ----- Board facts -----
    def all_cards(self) -> List[Card]:
        cards: List[Card] = []
        for depot in self.depots():
            cards.extend(depot)
        return cards

    def card_count(self) -> int:
        return sum(len(depot) for depot in self.depots())

    def is_won(self) -> bool:
        return self.foundation.card_count() == NUMBER_OF_CARDS_IN_PACK

    def move_capacity(self, to_empty_column: bool = False) -> int:
        """Largest run that can move at once using free cells and empty columns."""
        empty_cols = self.tableau.empty_columns()
        if to_empty_column and empty_cols > 0:
            empty_cols -= 1  # destination empty column is not a helper
        return (self.reserve.free_slots() + 1) * 2 ** empty_cols

    # ----- Parent search -----
    def find_parents(self, card: Card) -> ParentLocations:
        """Find the two cards ``card`` could be played onto.

        Every non-King card has exactly two possible parents somewhere on the
        board. Finding anything else means cards were lost or duplicated, so
        this raises :class:`CardConservationError` instead of returning.
        """
        descriptor = card.parent_descriptor()
        if descriptor is None:
            return ParentLocations.KING

        found = (
            self.tableau.find_prox_pair(descriptor)
            .and_(self.foundation.find_prox_pair(descriptor))
            .and_(self.reserve.find_prox_pair(descriptor))
        )
        if not found.is_two():
            logger.error("Found %d cards matching %s for %s, expected 2", len(found), descriptor, card)
            raise CardConservationError(
                f"Unable to find two cards matching {descriptor} for {card}; found {list(found)}"
            )
        return ParentLocations(found.values)

    def find_parents_for_top_cards(self) -> List[ParentHint]:
        hints = []
        for col in self.tableau:
            pick = col.try_get_card_pick()
            if pick is None:
                continue
            hints.append(ParentHint(pick.card, pick.location, self.find_parents(pick.card)))
        return sorted(hints, key=ParentHint.sort_key)

    # ----- Picks and puts -----
    def get_valid_card_picks(self) -> List[PickableCard]:
        return (
            self.reserve.get_valid_card_picks()
            + self.foundation.get_valid_card_picks()
            + self.tableau.get_valid_card_picks()
        )

    def get_valid_stack_picks(self) -> List[PickableStack]:
        return self.tableau.get_valid_stack_picks()

    def get_valid_card_puts(self, pick: PickableCard) -> List[CardMove]:
        return (
            self.reserve.get_valid_card_puts(pick)
            + self.foundation.get_valid_card_puts(pick)
            + self.tableau.get_valid_card_puts(pick)
        )

    def get_valid_stack_puts(self, pick: PickableStack) -> List[StackMove]:
        return self.tableau.get_valid_stack_puts(pick)

    # ----- Moves -----
    def _checkout(self, source_loc: CardLocation, target_loc: CardLocation) -> Tuple[Depot, Depot]:
        source = self.resolve(source_loc)
        target = self.resolve(target_loc)
        if source is target:
            raise SelfMoveError(f"Source and destination are both {source.kind.value} {source.position}")
        return source, target

    def _snapshot(self, *depots: CardHolder):
        return [(depot, depot.snapshot()) for depot in depots]

    def _push_undo(self, snap) -> None:
        def restore(snap=snap):
            for depot, cards in snap:
                depot.restore(cards)
        self.undo_mgr.push(restore)

    def move_card(self, move: CardMove) -> None:
        source, target = self._checkout(move.from_location, move.to)
        top = source.top_card()
        if top is not None and top != move.card:
            logger.debug("Rejected stale move %s: top card is now %s", move, top)
            raise StaleMoveError(f"{source.kind.value} {source.position} no longer has {move.card} on top")
        snap = self._snapshot(source, target)
        target.take_card_from(source)
        self._push_undo(snap)
        logger.debug("Moved %s", move)

    def move_stack(self, move: StackMove) -> None:
        source, target = self._checkout(move.from_location, move.to)
        if not isinstance(source, Column) or not isinstance(target, Column):
            raise IllegalPlacementError("Stacks only move between tableau columns")
        if self.enforce_move_capacity:
            capacity = self.move_capacity(to_empty_column=not target.cards)
            if move.size > capacity:
                logger.debug("Rejected %s: capacity is %d", move, capacity)
                raise MoveCapacityError(move.size, capacity)
        snap = self._snapshot(source, target)
        target.take_stack_from(source, move.pick)
        self._push_undo(snap)
        logger.debug("Moved %s", move)

    def can_undo(self) -> bool:
        return self.undo_mgr.can_undo()

    def undo(self) -> bool:
        undone = self.undo_mgr.undo()
        if undone:
            logger.debug("Undid last move")
        return undone

    # ----- Rendering contract -----
    def reveal(self, locations: Iterable[CardLocation] = ()) -> BoardView:
        return build_view(self.tableau, self.reserve, self.foundation, locations)

    def reveal_all(self) -> BoardView:
        return build_view(self.tableau, self.reserve, self.foundation, (), reveal_all=True)

    def top_cards(self) -> Sequence[Card]:
        return self.tableau.top_cards()
