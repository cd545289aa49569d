# ui.py - text and pygame rendering of a BoardView
import pygame
from typing import Dict, List, Optional, Tuple

from freecell import config
from freecell.common import RANK_TO_TEXT, SUITS, Card, QUEEN, KING, is_red
from freecell.view import BoardView, Shown, SlotView

# ---------- Text glyphs ----------
# Unicode playing cards: one block per suit, skipping the Knight at 0xC
_GLYPH_BASE = {0: 0x1F0A0, 1: 0x1F0B0, 2: 0x1F0C0, 3: 0x1F0D0}
CARD_BACK_GLYPH = "\U0001F0A0"
EMPTY_SLOT_GLYPH = "▯"
BLANK_GLYPH = " "


def card_glyph(card: Card) -> str:
    offset = card.rank + 1 if card.rank in (QUEEN, KING) else card.rank
    return chr(_GLYPH_BASE[card.suit] + offset)


def _slot_text(slot: SlotView, empty: str, plain: bool) -> str:
    if slot.shown is Shown.REVEALED:
        return f"{str(slot.card):>3}" if plain else card_glyph(slot.card)
    if slot.shown is Shown.HIDDEN:
        return " ##" if plain else CARD_BACK_GLYPH
    if plain:
        return " .." if empty != BLANK_GLYPH else "   "
    return empty


def format_view(view: BoardView, plain: bool = False) -> str:
    """Reserve, foundation, then the tableau grid from the base of each column."""
    top = "".join(_slot_text(s, EMPTY_SLOT_GLYPH, plain) + " " for s in view.reserve)
    top += "  "
    top += "".join(_slot_text(s, EMPTY_SLOT_GLYPH, plain) + " " for s in view.foundation)
    lines = [top.rstrip(), ""]
    for row in view.tableau:
        lines.append((" " + "".join(_slot_text(s, BLANK_GLYPH, plain) + " " for s in row)).rstrip())
    return "\n".join(lines) + "\n"


def format_game(game, plain: bool = False) -> str:
    return format_view(game.reveal_all(), plain=plain)


# ---------- Pygame rendering ----------
TABLE_BG = (2, 100, 40)
BLACK = (20, 20, 20)
WHITE = (245, 245, 245)
RED = (200, 20, 20)
GOLD = (230, 190, 80)
LIGHT = (220, 220, 220)
BACK_RGB = {"Blue": (34, 96, 200), "Grey": (120, 120, 130), "Red": (170, 30, 40)}

CARD_RADIUS = 10
CARD_GAP_X = 18
TOP_BAR_H = 60

# Fonts are initialized via setup_fonts() AFTER pygame.init()
FONT_UI = None
FONT_TITLE = None
FONT_CORNER_RANK = None
FONT_CORNER_SUIT = None


def setup_fonts():
    global FONT_UI, FONT_TITLE, FONT_CORNER_RANK, FONT_CORNER_SUIT
    name = pygame.font.get_default_font()
    FONT_UI = pygame.font.SysFont(name, 26, bold=True)
    FONT_TITLE = pygame.font.SysFont(name, 44, bold=True)
    FONT_CORNER_RANK = pygame.font.SysFont(name, 28, bold=True)
    # Suit glyphs need a Unicode-capable font
    FONT_CORNER_SUIT = pygame.font.SysFont("Segoe UI Symbol", 26, bold=True)


def draw_suit_shape(surface, center, suit_index, color, size=42):
    x, y = center
    if suit_index == 2:  # ♦ diamond
        half = size // 2
        points = [(x, y - half), (x + half, y), (x, y + half), (x - half, y)]
        pygame.draw.polygon(surface, color, points)
    elif suit_index == 1:  # ♥ heart
        r = size // 3
        pygame.draw.circle(surface, color, (x - r, y - r), r)
        pygame.draw.circle(surface, color, (x + r, y - r), r)
        tri = [(x - 2 * r, y - r), (x + 2 * r, y - r), (x, y + 2 * r)]
        pygame.draw.polygon(surface, color, tri)
    elif suit_index == 0:  # ♠ spade
        r = size // 3
        pygame.draw.circle(surface, color, (x - r, y), r)
        pygame.draw.circle(surface, color, (x + r, y), r)
        tri = [(x - 2 * r, y), (x + 2 * r, y), (x, y - 2 * r)]
        pygame.draw.polygon(surface, color, tri)
        stem_w = max(6, size // 6)
        pygame.draw.rect(surface, color, (x - stem_w // 2, y + r, stem_w, size // 2))
    else:  # ♣ club
        r = size // 3
        pygame.draw.circle(surface, color, (x, y - r), r)
        pygame.draw.circle(surface, color, (x - r, y + r // 3), r)
        pygame.draw.circle(surface, color, (x + r, y + r // 3), r)
        stem_w = max(6, size // 6)
        pygame.draw.rect(surface, color, (x - stem_w // 2, y + r, stem_w, size // 2))


class BoardRenderer:
    """Draws a BoardView: faces for revealed slots, backs for hidden, outlines for blank."""

    def __init__(self, card_size: Optional[str] = None, back_color: Optional[str] = None):
        settings = config.get_current_settings()
        self.card_w, self.card_h = config.card_dimensions(card_size or settings["card_size"])
        self.back_rgb = BACK_RGB.get(back_color or settings["back_color"], BACK_RGB["Blue"])
        self.fan_y = max(24, self.card_h // 5)
        self._face_cache: Dict[Card, pygame.Surface] = {}
        self._back_cache: Optional[pygame.Surface] = None

    # ----- Surfaces -----
    def card_surface(self, card: Card) -> pygame.Surface:
        if card in self._face_cache:
            return self._face_cache[card]
        w, h = self.card_w, self.card_h
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.rect(surf, WHITE, (0, 0, w, h), border_radius=CARD_RADIUS)
        pygame.draw.rect(surf, BLACK, (0, 0, w, h), width=3, border_radius=CARD_RADIUS)
        color = RED if is_red(card.suit) else BLACK
        margin = 10
        rtxt = FONT_CORNER_RANK.render(RANK_TO_TEXT[card.rank], True, color)
        stxt = FONT_CORNER_SUIT.render(SUITS[card.suit], True, color)
        surf.blit(rtxt, (margin, margin))
        surf.blit(stxt, (margin, margin + rtxt.get_height() - 2))
        r180 = pygame.transform.rotate(rtxt, 180)
        s180 = pygame.transform.rotate(stxt, 180)
        surf.blit(r180, (w - margin - r180.get_width(), h - margin - r180.get_height() - s180.get_height() + 2))
        surf.blit(s180, (w - margin - s180.get_width(), h - margin - s180.get_height()))
        draw_suit_shape(surf, (w // 2, h // 2), int(card.suit), color, size=min(56, w // 2))
        self._face_cache[card] = surf
        return surf

    def back_surface(self) -> pygame.Surface:
        if self._back_cache is not None:
            return self._back_cache
        w, h = self.card_w, self.card_h
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.rect(surf, WHITE, (0, 0, w, h), border_radius=CARD_RADIUS)
        pygame.draw.rect(surf, BLACK, (0, 0, w, h), width=3, border_radius=CARD_RADIUS)
        inset = 8
        inner_rect = pygame.Rect(inset, inset, w - 2 * inset, h - 2 * inset)
        pygame.draw.rect(surf, self.back_rgb, inner_rect, border_radius=8)
        for i in range(-h, w, 12):
            pygame.draw.line(surf, LIGHT, (i, 8), (i + h, h - 8), 1)
        self._back_cache = surf
        return surf

    # ----- Layout -----
    def column_x(self, screen_w: int) -> List[int]:
        total_w = 8 * self.card_w + 7 * CARD_GAP_X
        left_x = max(10, (screen_w - total_w) // 2)
        return [left_x + i * (self.card_w + CARD_GAP_X) for i in range(8)]

    def slot_rects(self, view: BoardView, screen_w: int, top_y: int = TOP_BAR_H + 40) -> List[Tuple[SlotView, pygame.Rect]]:
        """Every slot of ``view`` with the rect it is drawn in, in drawing order."""
        xs = self.column_x(screen_w)
        out = []
        # top row: reserve on the left half, foundation on the right half
        for i, slot in enumerate(list(view.reserve) + list(view.foundation)):
            out.append((slot, pygame.Rect(xs[i], top_y, self.card_w, self.card_h)))
        base_y = top_y + self.card_h + 26
        for row_idx, row in enumerate(view.tableau):
            for col_idx, slot in enumerate(row):
                r = pygame.Rect(xs[col_idx], base_y + row_idx * self.fan_y, self.card_w, self.card_h)
                out.append((slot, r))
        return out

    def draw(self, screen: pygame.Surface, view: BoardView, top_y: int = TOP_BAR_H + 40):
        for slot, rect in self.slot_rects(view, screen.get_width(), top_y):
            if slot.shown is Shown.REVEALED:
                screen.blit(self.card_surface(slot.card), rect.topleft)
            elif slot.shown is Shown.HIDDEN:
                screen.blit(self.back_surface(), rect.topleft)
            elif rect.y < top_y + self.card_h:
                pygame.draw.rect(screen, (255, 255, 255), rect, width=2, border_radius=CARD_RADIUS)


# ---------- Base Scene ----------
class Scene:
    def __init__(self, app):
        self.app = app
        self.next_scene = None
        self.quit_requested = False

    def handle_event(self, e): pass
    def update(self, dt): pass
    def draw(self, screen): pass

    def draw_top_bar(self, screen, title, extra=""):
        pygame.draw.rect(screen, (0, 0, 0), (0, 0, screen.get_width(), TOP_BAR_H))
        t = FONT_TITLE.render(title, True, WHITE)
        screen.blit(t, (20, 6))
        if extra:
            s = FONT_UI.render(extra, True, GOLD)
            screen.blit(s, (screen.get_width() - s.get_width() - 20, TOP_BAR_H - s.get_height() - 6))
