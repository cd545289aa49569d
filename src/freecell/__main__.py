# __main__.py - entry point: deal a board and show where each top card can go
import logging
import os
import pygame
from freecell import config
from freecell import ui
from freecell.deals import new_game, sample_game
from freecell.hint_scene import HintScene, describe_hint, hint_view

logger = logging.getLogger(__name__)

SCREEN_W, SCREEN_H = 1280, 800


def _initial_window_size():
    info = pygame.display.Info()
    # Keep a safety margin so the window never hides under taskbar
    margin_w, margin_h = 120, 140
    w = min(SCREEN_W, max(640, info.current_w - margin_w))
    h = min(SCREEN_H, max(480, info.current_h - margin_h))
    return w, h


def _deal(settings):
    kwargs = {"enforce_move_capacity": settings["enforce_move_capacity"]}
    seed_txt = os.environ.get("FREECELL_SEED", "").strip()
    if seed_txt:
        try:
            seed = int(seed_txt)
        except ValueError:
            logger.warning("Ignoring FREECELL_SEED=%r, using the sample deal", seed_txt)
        else:
            logger.info("Dealing seeded game %d", seed)
            return new_game(seed, **kwargs)
    return sample_game(**kwargs)


def main():
    settings = config.load_settings()
    logging.basicConfig(
        level=getattr(logging, settings["log_level"]),
        format="%(levelname)s %(name)s: %(message)s",
    )

    game = _deal(settings)
    hints = game.find_parents_for_top_cards()
    for hint in hints:
        logger.info("Hint: %s", describe_hint(hint))

    headless = os.environ.get("FREECELL_HEADLESS", "").strip() in ("1", "true", "yes")
    if headless:
        print(ui.format_game(game))
        for hint in hints:
            print(describe_hint(hint))
            print(ui.format_view(hint_view(game, hint)))
        return

    # Center window and init
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()

    w, h = _initial_window_size()
    screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
    pygame.display.set_caption("FreeCell Hints")
    ui.setup_fonts()
    clock = pygame.time.Clock()

    scene = HintScene(app=None, game=game, hints=hints)

    running = True
    while running:
        dt = clock.tick(60) / 1000.0
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode(e.size, pygame.RESIZABLE)
            else:
                scene.handle_event(e)
        if scene.quit_requested:
            running = False
        if scene.next_scene is not None:
            scene = scene.next_scene
        scene.update(dt)
        scene.draw(screen)
        pygame.display.flip()
    pygame.quit()


if __name__ == "__main__":
    main()
