# hint_scene.py - step through parent hints for the top cards of a game
import pygame
from typing import List

from freecell import ui
from freecell.locations import TableauLocation
from freecell.view import BoardView


def hint_view(game, hint) -> BoardView:
    """Reveal the hinted card, its best parent and whatever covers that parent."""
    locations = [hint.location]
    best = hint.parents.best()
    if best is not None:
        locations.append(best)
        if isinstance(best, TableauLocation):
            locations.extend(best.covering_locations())
    return game.reveal(locations)


def describe_hint(hint) -> str:
    best = hint.parents.best()
    if best is None:
        return f"{hint.card} ({hint.location}) is a King: no parent"
    return f"{hint.card} ({hint.location}) -> {best}, distance {best.distance}"


class HintScene(ui.Scene):
    def __init__(self, app, game, hints: List, renderer: ui.BoardRenderer = None):
        super().__init__(app)
        self.game = game
        self.hints = list(hints)
        self.index = 0
        self.renderer = renderer or ui.BoardRenderer()

    def current_view(self) -> BoardView:
        if not self.hints:
            return self.game.reveal()
        return hint_view(self.game, self.hints[self.index])

    def handle_event(self, e):
        if e.type != pygame.KEYDOWN:
            return
        if e.key == pygame.K_ESCAPE:
            self.quit_requested = True
        elif not self.hints:
            return
        elif e.key in (pygame.K_SPACE, pygame.K_RIGHT):
            self.index = (self.index + 1) % len(self.hints)
        elif e.key == pygame.K_LEFT:
            self.index = (self.index - 1) % len(self.hints)

    def draw(self, screen):
        screen.fill(ui.TABLE_BG)
        if self.hints:
            extra = f"{self.index + 1}/{len(self.hints)}  {describe_hint(self.hints[self.index])}"
        else:
            extra = "No cards in the tableau"
        self.draw_top_bar(screen, "FreeCell Hints", extra)
        self.renderer.draw(screen, self.current_view())
