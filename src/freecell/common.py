# common.py - card model shared by every part of the engine
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, List, Optional

ACE = 1
JACK = 11
QUEEN = 12
KING = 13

RANKS = range(ACE, KING + 1)
NUMBER_OF_CARDS_IN_PACK = 52


class Color(Enum):
    RED = "red"
    BLACK = "black"

    def opposite(self) -> "Color":
        return Color.BLACK if self is Color.RED else Color.RED


class Suit(IntEnum):
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3

    @property
    def color(self) -> Color:
        return Color.RED if is_red(self) else Color.BLACK

    @property
    def symbol(self) -> str:
        return SUITS[self]

    @property
    def letter(self) -> str:
        return self.name[0]

    def opposing_suits(self) -> List["Suit"]:
        return [s for s in Suit if s.color is not self.color]

    @classmethod
    def from_letter(cls, letter: str) -> "Suit":
        key = letter.strip().upper()
        for suit in cls:
            if suit.letter == key or suit.symbol == letter.strip():
                return suit
        raise ValueError(f"Unknown suit {letter!r}")


SUITS = ["♠", "♥", "♦", "♣"]  # indexed by Suit
RANK_TO_TEXT = {1: "A", 11: "J", 12: "Q", 13: "K"}
for _r in range(2, 11):
    RANK_TO_TEXT[_r] = str(_r)
TEXT_TO_RANK = {v: k for k, v in RANK_TO_TEXT.items()}


def is_red(suit) -> bool:
    return suit in (Suit.HEARTS, Suit.DIAMONDS)


@dataclass(frozen=True)
class ProximateCard:
    """Describes any card of the given colour and rank.

    Exactly two real cards match a descriptor, one per suit of the colour.
    """

    color: Color
    rank: int

    def matches(self, card: "Card") -> bool:
        return card.color is self.color and card.rank == self.rank

    def candidates(self) -> List["Card"]:
        return [Card(self.rank, s) for s in Suit if s.color is self.color]

    def __str__(self) -> str:
        return f"{RANK_TO_TEXT[self.rank]} {self.color.value}"


@dataclass(frozen=True)
class Card:
    """An immutable playing card. Only one of each exists on a board."""

    rank: int
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, int) or isinstance(self.rank, bool) or self.rank not in RANKS:
            raise ValueError(f"Card rank must be in 1..13, got {self.rank!r}")
        try:
            suit = Suit(self.suit)
        except ValueError:
            raise ValueError(f"Card suit must be one of {list(Suit)}, got {self.suit!r}") from None
        object.__setattr__(self, "suit", suit)

    @classmethod
    def from_text(cls, text: str) -> "Card":
        """Parse short forms like ``"10H"``, ``"AS"`` or ``"Q♦"``."""
        text = text.strip()
        if len(text) < 2:
            raise ValueError(f"Cannot parse card {text!r}")
        rank_txt, suit_txt = text[:-1].upper(), text[-1]
        if rank_txt in TEXT_TO_RANK:
            rank = TEXT_TO_RANK[rank_txt]
        elif rank_txt.isdigit():
            rank = int(rank_txt)
        else:
            raise ValueError(f"Cannot parse rank of card {text!r}")
        return cls(rank, Suit.from_letter(suit_txt))

    @property
    def color(self) -> Color:
        return self.suit.color

    def is_same_suit(self, other: "Card") -> bool:
        return self.suit == other.suit

    def is_opposing_color(self, other: "Card") -> bool:
        return self.color is not other.color

    def is_playable_pair_smaller(self, other: "Card") -> bool:
        return self.rank + 1 == other.rank

    def is_playable_pair_bigger(self, other: "Card") -> bool:
        return other.rank + 1 == self.rank

    def parent_descriptor(self) -> Optional[ProximateCard]:
        """Return the descriptor of cards this one may be played onto, None for a King."""
        if self.rank == KING:
            return None
        return ProximateCard(self.color.opposite(), self.rank + 1)

    def matches(self, descriptor: ProximateCard) -> bool:
        return descriptor.matches(self)

    def __str__(self) -> str:
        return f"{RANK_TO_TEXT[self.rank]}{SUITS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_TO_TEXT[self.rank]}{self.suit.letter})"


def make_deck(shuffle: bool = True, seed: Optional[int] = None) -> List[Card]:
    d = [Card(rank, suit) for suit in Suit for rank in RANKS]
    if shuffle:
        random.Random(seed).shuffle(d)
    return d


class UndoManager:
    """
    Store undo callables. After each successful move, push a function
    that will restore the prior state.
    """
    def __init__(self):
        self._stack: List[Callable[[], None]] = []

    def push(self, undo_fn: Callable[[], None]):
        self._stack.append(undo_fn)

    def can_undo(self) -> bool:
        return len(self._stack) > 0

    def undo(self) -> bool:
        if self._stack:
            fn = self._stack.pop()
            fn()
            return True
        return False

    def clear(self):
        del self._stack[:]
