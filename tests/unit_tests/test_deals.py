import pytest

from freecell.common import Card, Suit, make_deck
from freecell.deals import SAMPLE_LAYOUT, deal_columns, new_game, parse_layout, to_card
from freecell.errors import InvalidLayoutError


def test_sample_layout_is_a_full_deal() -> None:
    parsed = parse_layout(SAMPLE_LAYOUT)
    assert [len(col) for col in parsed] == [7, 7, 7, 7, 6, 6, 6, 6]
    assert {c for col in parsed for c in col} == set(make_deck(shuffle=False))
    # the last card listed is the top card
    assert parsed[1][-1] == Card(1, Suit.HEARTS)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10H", Card(10, Suit.HEARTS)),
        ((10, "H"), Card(10, Suit.HEARTS)),
        ((1, Suit.SPADES), Card(1, Suit.SPADES)),
        ((13, 3), Card(13, Suit.CLUBS)),
        (Card(2, Suit.DIAMONDS), Card(2, Suit.DIAMONDS)),
    ],
)
def test_to_card_forms(raw, expected) -> None:
    assert to_card(raw) == expected


@pytest.mark.parametrize("raw", ["ZZ", (0, "H"), (5, "X"), (5,), 42])
def test_to_card_rejects(raw) -> None:
    with pytest.raises(InvalidLayoutError):
        to_card(raw)


def test_parse_layout_rejections() -> None:
    with pytest.raises(InvalidLayoutError):
        parse_layout(SAMPLE_LAYOUT[:7])

    duplicated = [list(col) for col in SAMPLE_LAYOUT]
    duplicated[0][0] = "3D"
    with pytest.raises(InvalidLayoutError, match="more than once"):
        parse_layout(duplicated)

    partial = [list(col) for col in SAMPLE_LAYOUT]
    partial[0].pop()
    with pytest.raises(InvalidLayoutError):
        parse_layout(partial)
    assert len(parse_layout(partial, require_full_deck=False)[0]) == 6


def test_deal_columns_round_robin() -> None:
    deck = make_deck(shuffle=False)
    columns = deal_columns(deck)
    assert [len(c) for c in columns] == [7, 7, 7, 7, 6, 6, 6, 6]
    assert columns[0][:2] == [deck[0], deck[8]]
    assert columns[7][-1] == deck[47]


def test_new_game_is_reproducible_per_seed() -> None:
    a = new_game(5)
    b = new_game(5)
    assert [col.cards for col in a.tableau] == [col.cards for col in b.tableau]
    assert a.card_count() == 52
    assert new_game(5, enforce_move_capacity=False).enforce_move_capacity is False
