"""Window, event loop and keyboard mapping for the game."""

from __future__ import annotations

import argparse
import os

import pygame

from .constants import WINDOW_HEIGHT, WINDOW_WIDTH
from .game import Game, Key
from .render import TITLE, draw

FRAMES_PER_SECOND = 30

_KEYMAP: dict[int, Key] = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_q: Key.Q,
    pygame.K_e: Key.E,
    pygame.K_z: Key.Z,
    pygame.K_c: Key.C,
    pygame.K_m: Key.M,
    pygame.K_f: Key.F,
    pygame.K_y: Key.Y,
    pygame.K_n: Key.N,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.RETURN,
    pygame.K_KP_ENTER: Key.RETURN,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def translate_key(event_key: int) -> Key:
    """Map a pygame key code to the game's key; unknown keys become Key.OTHER."""
    return _KEYMAP.get(event_key, Key.OTHER)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed or Exit is chosen."""
    parser = argparse.ArgumentParser(
        prog="skirmish", description="Two-player turn-based strategy game."
    )
    parser.parse_args(argv)

    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    try:
        surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = Game()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    game.handle_key_press(translate_key(event.key))
                    if game.quit_requested:
                        return 0
            draw(surface, game)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    finally:
        pygame.quit()