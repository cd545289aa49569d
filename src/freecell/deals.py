"""Initial layouts: parsing, validating and dealing the tableau."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union

from freecell.common import NUMBER_OF_CARDS_IN_PACK, Card, Suit, make_deck
from freecell.errors import InvalidLayoutError
from freecell.locations import NUMBER_OF_COLUMNS_IN_TABLEAU

RawCard = Union[Card, str, Tuple[int, Union[Suit, int, str]]]
Layout = Sequence[Iterable[RawCard]]

# Eight columns, first dealt card first; the last card of each column is on top.
SAMPLE_LAYOUT: Tuple[Tuple[str, ...], ...] = (
    ("2H", "10C", "QD", "JC", "6C", "3H", "3D"),
    ("6S", "4C", "3C", "7S", "9D", "8H", "AH"),
    ("AC", "9S", "QH", "KH", "2D", "2S", "4H"),
    ("6D", "5S", "10D", "QC", "7D", "5H", "10H"),
    ("6H", "KS", "7H", "7C", "5D", "JS"),
    ("10S", "AS", "3S", "KD", "JD", "JH"),
    ("5C", "KC", "9C", "4D", "QS", "8D"),
    ("4S", "8C", "8S", "2C", "AD", "9H"),
)


def to_card(raw: RawCard) -> Card:
    if isinstance(raw, Card):
        return raw
    try:
        if isinstance(raw, str):
            return Card.from_text(raw)
        rank, suit = raw
        if isinstance(suit, str):
            suit = Suit.from_letter(suit)
        return Card(rank, suit)
    except (TypeError, ValueError) as exc:
        raise InvalidLayoutError(f"Cannot read card {raw!r}: {exc}") from exc


def parse_layout(columns: Layout, require_full_deck: bool = True) -> List[List[Card]]:
    """Normalise a layout into eight lists of Cards, validating it on the way.

    Raises :class:`InvalidLayoutError` on the wrong number of columns, an
    unreadable or duplicated card, or (with ``require_full_deck``) a deal that
    is not the whole pack.
    """
    columns = list(columns)
    if len(columns) != NUMBER_OF_COLUMNS_IN_TABLEAU:
        raise InvalidLayoutError(
            f"Layout needs {NUMBER_OF_COLUMNS_IN_TABLEAU} columns, got {len(columns)}"
        )

    parsed = [[to_card(raw) for raw in col] for col in columns]

    seen = set()
    for col in parsed:
        for card in col:
            if card in seen:
                raise InvalidLayoutError(f"{card} is dealt more than once")
            seen.add(card)

    if require_full_deck and len(seen) != NUMBER_OF_CARDS_IN_PACK:
        raise InvalidLayoutError(f"Layout holds {len(seen)} cards, a full deal needs {NUMBER_OF_CARDS_IN_PACK}")
    return parsed


def deal_columns(deck: Iterable[Card]) -> List[List[Card]]:
    columns: List[List[Card]] = [[] for _ in range(NUMBER_OF_COLUMNS_IN_TABLEAU)]
    for idx, card in enumerate(deck):
        columns[idx % NUMBER_OF_COLUMNS_IN_TABLEAU].append(card)
    return columns


def new_game(seed: Optional[int] = None, **kwargs):
    """Deal a shuffled pack into a fresh game; the same seed gives the same deal."""
    from freecell.game import Game

    return Game.from_layout(deal_columns(make_deck(shuffle=True, seed=seed)), **kwargs)


def sample_game(**kwargs):
    from freecell.game import Game

    return Game.from_layout(SAMPLE_LAYOUT, **kwargs)
