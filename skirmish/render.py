"""Drawing of every game screen onto a pygame surface."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

import pygame

from .board import GameBoard
from .constants import (
    BOARD_SIZE,
    CELL_SIZE,
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_GRAY,
    COLOR_GREEN,
    COLOR_LIGHT_BLUE,
    COLOR_PINK,
    COLOR_PURPLE,
    COLOR_RED,
    COLOR_WHITE,
    COLOR_YELLOW,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    Color,
)
from .game import MENU_ITEMS, Game, GameState
from .players import HumanPlayer
from .units import Position, Unit

TITLE = "Strategy Game"

BOARD_ORIGIN = 50
HEALTH_BAR_WIDTH = CELL_SIZE - 10
HEALTH_BAR_HEIGHT = 6

HELP_LINES = (
    "Goal:",
    "Destroy all enemy units.",
    "",
    "Controls:",
    "WASD - move the cursor",
    "QEZC - move the cursor diagonally",
    "Enter - select / confirm an action",
    "M - move mode",
    "F - attack mode",
    "Esc - cancel / back",
    "",
    "Units:",
    "Warrior - close combat, high defence",
    "Archer - ranged combat, medium defence",
    "Mage - ranged combat, low defence",
    "",
    "Press any key to return to the menu",
)
_HELP_HEADINGS = frozenset({0, 3, 11})


@lru_cache(maxsize=None)
def _load_font(size: int, bold: bool) -> pygame.font.Font:
    font = pygame.font.Font(None, size)
    font.set_bold(bold)
    return font


def _font(size: int, bold: bool = False) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _load_font.cache_clear()
    return _load_font(size, bold)


def _text(
    surface: pygame.Surface,
    text: str,
    position: tuple[int, int],
    color: Color,
    size: int,
    bold: bool = False,
) -> None:
    if not text:
        return
    rendered = _font(size, bold).render(text, True, color)
    surface.blit(rendered, position)


def _cell_rect(cell: Position) -> pygame.Rect:
    x, y = cell
    return pygame.Rect(
        BOARD_ORIGIN + x * CELL_SIZE, BOARD_ORIGIN + y * CELL_SIZE, CELL_SIZE, CELL_SIZE
    )


def draw(surface: pygame.Surface, game: Game) -> None:
    """Clear the surface and draw the screen for the game's current state."""
    surface.fill(COLOR_WHITE)
    if game.state is GameState.MAIN_MENU:
        draw_main_menu(surface, game)
    elif game.state is GameState.GAME_PLAY:
        draw_game_play(surface, game)
    elif game.state is GameState.GAME_OVER:
        draw_game_over(surface, game)
    elif game.state is GameState.HELP_SCREEN:
        draw_help_screen(surface)


def draw_main_menu(surface: pygame.Surface, game: Game) -> None:
    """Title, menu items with the selected one highlighted, and a hint."""
    _text(surface, TITLE, (WINDOW_WIDTH // 2 - 175, 100), COLOR_BLUE, 48, bold=True)
    for index, item in enumerate(MENU_ITEMS):
        color = COLOR_RED if index == game.selected_menu_item else COLOR_BLACK
        _text(surface, item, (WINDOW_WIDTH // 2 - 100, 200 + index * 50), color, 36)
    _text(
        surface,
        "Use the arrows and Enter to choose",
        (WINDOW_WIDTH // 2 - 150, WINDOW_HEIGHT - 50),
        COLOR_GRAY,
        18,
    )


def draw_game_play(surface: pygame.Surface, game: Game) -> None:
    """Board, the current player's status and whose turn it is."""
    draw_board(surface, game.board, game.all_units())
    player = game.current_player
    draw_status(surface, player)
    if player.player_number == 1:
        turn_text, color = "Player 1's turn (Blue)", COLOR_BLUE
    else:
        turn_text, color = "Player 2's turn (Red)", COLOR_RED
    _text(surface, turn_text, (WINDOW_WIDTH - 250, 20), color, 24, bold=True)


def draw_game_over(surface: pygame.Surface, game: Game) -> None:
    """Announce the winner, or a draw, and the choices that follow."""
    winner = game.winner()
    if winner == 1:
        message, color = "Player 1 (Blue) wins!", COLOR_BLUE
    elif winner == 2:
        message, color = "Player 2 (Red) wins!", COLOR_RED
    else:
        message, color = "Draw!", COLOR_PURPLE
    _text(surface, message, (WINDOW_WIDTH // 2 - 200, 150), color, 48, bold=True)
    _text(surface, "New game (Enter)", (WINDOW_WIDTH // 2 - 100, 250), COLOR_BLACK, 36)
    _text(surface, "Menu (Esc)", (WINDOW_WIDTH // 2 - 70, 300), COLOR_BLACK, 36)


def draw_help_screen(surface: pygame.Surface) -> None:
    """The rules and controls, with section headings in red."""
    _text(surface, "Help", (WINDOW_WIDTH // 2 - 100, 50), COLOR_BLUE, 48, bold=True)
    y = 120
    for index, line in enumerate(HELP_LINES):
        if index in _HELP_HEADINGS:
            _text(surface, line, (50, y), COLOR_RED, 20)
            y += 30
        else:
            _text(surface, line, (50, y), COLOR_BLACK, 20)
            y += 25


def draw_board(surface: pygame.Surface, board: GameBoard, units: Iterable[Unit]) -> None:
    """Grid, highlighted cells, living units with health bars, and the cursor."""
    end = BOARD_ORIGIN + BOARD_SIZE * CELL_SIZE
    for i in range(BOARD_SIZE + 1):
        offset = BOARD_ORIGIN + i * CELL_SIZE
        pygame.draw.line(surface, COLOR_GRAY, (BOARD_ORIGIN, offset), (end, offset))
        pygame.draw.line(surface, COLOR_GRAY, (offset, BOARD_ORIGIN), (offset, end))

    for cells, fill in (
        (board.reachable_cells, COLOR_LIGHT_BLUE),
        (board.attackable_cells, COLOR_PINK),
    ):
        for cell in sorted(cells):
            rect = _cell_rect(cell)
            pygame.draw.rect(surface, fill, rect)
            pygame.draw.rect(surface, COLOR_GRAY, rect, 1)

    for unit in units:
        if unit.is_alive():
            _draw_unit(surface, unit)

    pygame.draw.rect(surface, COLOR_YELLOW, _cell_rect(board.cursor_pos), 2)


def _draw_unit(surface: pygame.Surface, unit: Unit) -> None:
    rect = _cell_rect(unit.position)
    symbol_pos = (rect.x + CELL_SIZE // 2 - 15, rect.y + CELL_SIZE // 2 - 15)
    font = _font(30)
    try:
        rendered = font.render(unit.symbol, True, unit.color)
    except (pygame.error, UnicodeError):
        rendered = font.render(unit.name[0], True, unit.color)
    surface.blit(rendered, symbol_pos)

    bar = pygame.Rect(rect.x + 5, rect.y + 5, HEALTH_BAR_WIDTH, HEALTH_BAR_HEIGHT)
    pygame.draw.rect(surface, COLOR_RED, bar)
    green_width = int(unit.health / unit.max_health * HEALTH_BAR_WIDTH)
    if green_width > 0:
        pygame.draw.rect(
            surface, COLOR_GREEN, pygame.Rect(bar.x, bar.y, green_width, HEALTH_BAR_HEIGHT)
        )
    pygame.draw.rect(surface, COLOR_BLACK, bar, 1)


def draw_status(surface: pygame.Surface, player: HumanPlayer) -> None:
    """The player's status line above the board and unit summaries below it."""
    color = COLOR_BLUE if player.player_number == 1 else COLOR_RED
    _text(surface, player.status, (50, 20), color, 20)
    y = BOARD_ORIGIN + BOARD_SIZE * CELL_SIZE + 20
    for summary in player.unit_summaries():
        _text(surface, summary, (50, y), color, 20)
        y += 20