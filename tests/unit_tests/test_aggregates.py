import pytest

from freecell.aggregates import Foundation, Reserve, Tableau
from freecell.common import Card, Color, ProximateCard
from freecell.depots import Column, ReserveSlot
from freecell.errors import InvalidLayoutError, NoSuchColumn, NoSuchFoundationStack, NoSuchReserveSlot
from freecell.locations import FoundationLocation, ReserveLocation, TableauLocation
from freecell.pickables import PickableCard


def _tableau(*columns):
    cols = [[Card.from_text(t) for t in col] for col in columns]
    cols += [[] for _ in range(8 - len(cols))]
    return Tableau.from_columns(cols)


@pytest.mark.parametrize(
    "aggregate, position, error",
    [
        (Tableau.from_columns([[]] * 8), 8, NoSuchColumn),
        (Tableau.from_columns([[]] * 8), -1, NoSuchColumn),
        (Tableau.from_columns([[]] * 8), True, NoSuchColumn),
        (Reserve.empty(), 4, NoSuchReserveSlot),
        (Foundation.empty(), "0", NoSuchFoundationStack),
    ],
)
def test_out_of_range_positions(aggregate, position, error) -> None:
    with pytest.raises(error) as err:
        aggregate[position]
    assert err.value.position == position


def test_aggregate_sizes_are_fixed() -> None:
    with pytest.raises(InvalidLayoutError):
        Tableau([Column(i) for i in range(7)])
    with pytest.raises(InvalidLayoutError):
        Reserve([ReserveSlot(i) for i in range(5)])
    assert len(Reserve.empty()) == 4
    assert len(Foundation.empty()) == 4


def test_tableau_picks_and_puts() -> None:
    tableau = _tableau(["9S", "8H"], ["9C"], ["KD", "QS", "JH"])
    assert [p.card for p in tableau.get_valid_card_picks()] == [
        Card.from_text("8H"),
        Card.from_text("9C"),
        Card.from_text("JH"),
    ]
    pick = PickableCard(Card.from_text("8H"), TableauLocation(0, 0))
    destinations = [m.to for m in tableau.get_valid_card_puts(pick)]
    # own column is skipped, 9C accepts, empty columns accept
    assert destinations == [TableauLocation(1, 0)] + [TableauLocation(i, 0) for i in range(3, 8)]


def test_tableau_stack_picks_and_puts() -> None:
    tableau = _tableau(["KC"], ["5S", "KD", "QS", "JH"], ["QC"])
    picks = tableau.get_valid_stack_picks()
    assert [(p.location.position, p.size) for p in picks] == [(0, 1), (1, 3), (2, 1)]
    run = picks[1]
    puts = tableau.get_valid_stack_puts(run)
    assert [m.to.position for m in puts] == [3, 4, 5, 6, 7]


def test_tableau_counts() -> None:
    tableau = _tableau(["KC"], ["5S", "KD", "QS"])
    assert tableau.empty_columns() == 6
    assert tableau.height() == 3
    assert tableau.card_count() == 4
    assert tableau.top_cards() == [Card.from_text("KC"), Card.from_text("QS")]


def test_reserve_free_slots() -> None:
    reserve = Reserve.empty()
    assert reserve.free_slots() == 4
    reserve[0].card = Card.from_text("AS")
    assert reserve.free_slots() == 3
    assert reserve.first_free_slot().position == 1
    for slot in reserve:
        slot.card = Card.from_text("2S")
    assert reserve.first_free_slot() is None


def test_find_prox_pair_across_children() -> None:
    tableau = _tableau(["6S", "2H"], [], ["6C"])
    found = tableau.find_prox_pair(ProximateCard(Color.BLACK, 6))
    assert found.values == (TableauLocation(0, 1), TableauLocation(2, 0))

    reserve = Reserve.empty()
    reserve[3].card = Card.from_text("6D")
    assert reserve.find_prox_pair(ProximateCard(Color.RED, 6)).values == (ReserveLocation(3),)

    foundation = Foundation.empty()
    foundation[2].cards = [Card.from_text("5H"), Card.from_text("6H"), Card.from_text("7H")]
    assert foundation.find_prox_pair(ProximateCard(Color.RED, 6)).values == (FoundationLocation(2, 1),)
