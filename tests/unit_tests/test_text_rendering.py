import pytest

from freecell import ui
from freecell.common import Card, Suit
from freecell.deals import sample_game
from freecell.locations import FoundationLocation, ReserveLocation, TableauLocation
from freecell.pickables import CardMove, PickableCard


@pytest.mark.parametrize(
    "card, glyph",
    [
        (Card(1, Suit.SPADES), "\U0001F0A1"),
        (Card(10, Suit.HEARTS), "\U0001F0BA"),
        (Card(11, Suit.DIAMONDS), "\U0001F0CB"),
        (Card(12, Suit.HEARTS), "\U0001F0BD"),
        (Card(13, Suit.CLUBS), "\U0001F0DE"),
    ],
)
def test_card_glyph(card, glyph) -> None:
    assert ui.card_glyph(card) == glyph


def test_every_card_has_its_own_glyph() -> None:
    glyphs = {ui.card_glyph(Card(r, s)) for s in Suit for r in range(1, 14)}
    assert len(glyphs) == 52
    assert ui.CARD_BACK_GLYPH not in glyphs


def test_format_game_layout() -> None:
    game = sample_game()
    lines = ui.format_game(game).split("\n")
    assert lines[0] == "▯ ▯ ▯ ▯   ▯ ▯ ▯ ▯"
    assert lines[1] == ""
    # 7 tableau rows then the trailing newline
    assert len(lines) == 2 + 7 + 1
    first_row = lines[2]
    assert first_row.startswith(" " + ui.card_glyph(Card(2, Suit.HEARTS)) + " ")
    assert first_row.count(" ") == 8
    last_row = lines[8]
    assert last_row.strip() == " ".join(ui.card_glyph(Card.from_text(t)) for t in ("3D", "AH", "4H", "10H"))


def test_format_view_hidden_and_revealed() -> None:
    game = sample_game()
    game.move_card(CardMove(PickableCard(Card.from_text("AH"), TableauLocation(1, 0)), ReserveLocation(0)))
    game.move_card(CardMove(PickableCard(Card.from_text("3D"), TableauLocation(0, 0)), FoundationLocation(0)))
    text = ui.format_view(game.reveal([ReserveLocation(0)]))
    top = text.split("\n")[0]
    assert top.startswith(ui.card_glyph(Card.from_text("AH")) + " " + ui.EMPTY_SLOT_GLYPH)
    assert ui.CARD_BACK_GLYPH in top
    assert ui.card_glyph(Card.from_text("3D")) not in text


def test_plain_format() -> None:
    game = sample_game()
    text = ui.format_view(game.reveal([TableauLocation(3, 0)]), plain=True)
    lines = text.split("\n")
    assert lines[0] == " ..  ..  ..  ..    ..  ..  ..  .."
    assert "10♥" in lines[8]
    assert " ##" in lines[2]


def test_board_renderer_slot_layout() -> None:
    renderer = ui.BoardRenderer(card_size="Small", back_color="Red")
    assert (renderer.card_w, renderer.card_h) == (75, 105)
    assert renderer.back_rgb == ui.BACK_RGB["Red"]
    rects = renderer.slot_rects(sample_game().reveal_all(), 1024)
    # top row of 8 then a 7 x 8 tableau grid
    assert len(rects) == 8 + 7 * 8
    xs = renderer.column_x(1024)
    assert [r.x for _, r in rects[:8]] == xs
    assert rects[8][1].y > rects[0][1].bottom
    assert rects[16][1].y - rects[8][1].y == renderer.fan_y
