import pytest

from freecell.common import (
    KING,
    Card,
    Color,
    ProximateCard,
    Suit,
    UndoManager,
    make_deck,
)


@pytest.mark.parametrize(
    "rank, suit",
    [
        (0, Suit.SPADES),
        (14, Suit.HEARTS),
        (True, Suit.CLUBS),
        ("1", Suit.CLUBS),
        (1, 4),
        (5, "H"),
    ],
)
def test_card_rejects_invalid_rank_or_suit(rank, suit) -> None:
    with pytest.raises(ValueError):
        Card(rank, suit)


def test_card_accepts_suit_index() -> None:
    card = Card(3, 2)
    assert card.suit is Suit.DIAMONDS
    assert card == Card(3, Suit.DIAMONDS)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10H", Card(10, Suit.HEARTS)),
        ("AS", Card(1, Suit.SPADES)),
        ("as", Card(1, Suit.SPADES)),
        ("Q♦", Card(12, Suit.DIAMONDS)),
        ("KC", Card(KING, Suit.CLUBS)),
        ("7♣", Card(7, Suit.CLUBS)),
    ],
)
def test_card_from_text(text: str, expected: Card) -> None:
    assert Card.from_text(text) == expected


@pytest.mark.parametrize("text", ["", "H", "ZZ", "14H", "5X"])
def test_card_from_text_rejects_garbage(text: str) -> None:
    with pytest.raises(ValueError):
        Card.from_text(text)


def test_card_text_forms() -> None:
    card = Card(10, Suit.HEARTS)
    assert str(card) == "10♥"
    assert repr(card) == "Card(10H)"
    assert card.color is Color.RED
    assert Card(12, Suit.CLUBS).color is Color.BLACK


def test_playable_pair_helpers() -> None:
    six = Card(6, Suit.SPADES)
    seven = Card(7, Suit.HEARTS)
    assert six.is_playable_pair_smaller(seven)
    assert seven.is_playable_pair_bigger(six)
    assert not seven.is_playable_pair_smaller(six)
    assert six.is_opposing_color(seven)
    assert not six.is_same_suit(seven)


def test_parent_descriptor() -> None:
    assert Card(5, Suit.HEARTS).parent_descriptor() == ProximateCard(Color.BLACK, 6)
    assert Card(12, Suit.SPADES).parent_descriptor() == ProximateCard(Color.RED, 13)
    assert Card(KING, Suit.DIAMONDS).parent_descriptor() is None


def test_proximate_card_has_two_candidates() -> None:
    descriptor = ProximateCard(Color.RED, 4)
    candidates = descriptor.candidates()
    assert candidates == [Card(4, Suit.HEARTS), Card(4, Suit.DIAMONDS)]
    assert all(descriptor.matches(c) for c in candidates)
    assert not descriptor.matches(Card(4, Suit.CLUBS))
    assert Card(4, Suit.HEARTS).matches(descriptor)


def test_suit_helpers() -> None:
    assert Suit.from_letter("h") is Suit.HEARTS
    assert Suit.from_letter("♣") is Suit.CLUBS
    assert Suit.SPADES.opposing_suits() == [Suit.HEARTS, Suit.DIAMONDS]
    with pytest.raises(ValueError):
        Suit.from_letter("X")


def test_make_deck_is_a_full_pack() -> None:
    deck = make_deck(shuffle=False)
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert deck[0] == Card(1, Suit.SPADES)


def test_make_deck_seed_is_reproducible() -> None:
    assert make_deck(seed=7) == make_deck(seed=7)
    assert make_deck(seed=7) != make_deck(seed=8)
    assert sorted(make_deck(seed=7), key=lambda c: (c.suit, c.rank)) == make_deck(shuffle=False)


def test_undo_manager_runs_last_pushed_first() -> None:
    calls = []
    mgr = UndoManager()
    assert not mgr.can_undo()
    assert mgr.undo() is False
    mgr.push(lambda: calls.append("first"))
    mgr.push(lambda: calls.append("second"))
    assert mgr.undo() is True
    assert calls == ["second"]
    mgr.clear()
    assert not mgr.can_undo()
