import pygame
import pytest

from skirmish.board import GameBoard
from skirmish.constants import (
    CELL_SIZE,
    COLOR_BLACK,
    COLOR_BLUE,
    COLOR_GREEN,
    COLOR_LIGHT_BLUE,
    COLOR_PINK,
    COLOR_PURPLE,
    COLOR_RED,
    COLOR_WHITE,
    COLOR_YELLOW,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from skirmish.game import Game, GameState, Key
from skirmish.render import (
    draw,
    draw_board,
    draw_game_over,
    draw_game_play,
    draw_help_screen,
    draw_main_menu,
    draw_status,
)
from skirmish.units import create_unit


@pytest.fixture
def surface():
    canvas = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    canvas.fill(COLOR_WHITE)
    return canvas


def _colors(surface, left, top, right, bottom):
    return {
        tuple(surface.get_at((x, y)))[:3]
        for x in range(left, right)
        for y in range(top, bottom)
    }


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _cell_origin(cell):
    return 50 + cell[0] * CELL_SIZE, 50 + cell[1] * CELL_SIZE


def test_draw_clears_to_white(surface):
    surface.fill(COLOR_BLACK)
    draw(surface, Game())
    assert _pixel(surface, 0, 0) == COLOR_WHITE
    assert _pixel(surface, WINDOW_WIDTH - 1, WINDOW_HEIGHT - 1) == COLOR_WHITE


def test_main_menu_highlights_selected_item(surface):
    game = Game()
    draw_main_menu(surface, game)
    assert COLOR_RED in _colors(surface, 300, 200, 700, 245)
    second = _colors(surface, 300, 250, 700, 295)
    assert COLOR_RED not in second
    assert COLOR_BLACK in second


def test_main_menu_highlight_follows_selection(surface):
    game = Game()
    game.handle_menu_input(Key.DOWN)
    draw(surface, game)
    assert COLOR_RED not in _colors(surface, 300, 200, 700, 245)
    assert COLOR_RED in _colors(surface, 300, 250, 700, 295)


def test_help_screen_has_red_heading_and_blue_title(surface):
    draw_help_screen(surface)
    assert COLOR_RED in _colors(surface, 50, 120, 400, 150)
    assert COLOR_BLUE in _colors(surface, 300, 50, 600, 100)


def test_draw_dispatches_help_screen(surface):
    game = Game()
    game.state = GameState.HELP_SCREEN
    draw(surface, game)
    assert COLOR_RED in _colors(surface, 50, 120, 400, 150)


def test_reachable_cells_are_highlighted(surface):
    game = Game()
    warrior = game.players[0].units[0]
    game.board.calculate_reachable_cells(warrior, game.all_units())
    draw_board(surface, game.board, game.all_units())
    x, y = _cell_origin((2, 2))
    assert _pixel(surface, x + 25, y + 25) == COLOR_LIGHT_BLUE
    x, y = _cell_origin((9, 0))
    assert _pixel(surface, x + 25, y + 25) == COLOR_WHITE


def test_attackable_cells_are_highlighted(surface):
    board = GameBoard()
    attacker = create_unit("Warrior", 1, (4, 4))
    target = create_unit("Warrior", 2, (5, 4))
    units = [attacker, target]
    board.calculate_attackable_cells(attacker, units)
    draw_board(surface, board, units)
    x, y = _cell_origin((5, 4))
    assert _pixel(surface, x + 3, y + 45) == COLOR_PINK


def test_health_bar_shows_remaining_health(surface):
    board = GameBoard()
    healthy = create_unit("Warrior", 1, (1, 1))
    hurt = create_unit("Warrior", 2, (4, 4))
    hurt.take_damage(hurt.max_health // 2)
    draw_board(surface, board, [healthy, hurt])

    x, y = _cell_origin((1, 1))
    assert _pixel(surface, x + 35, y + 7) == COLOR_GREEN
    x, y = _cell_origin((4, 4))
    assert _pixel(surface, x + 10, y + 7) == COLOR_GREEN
    assert _pixel(surface, x + 35, y + 7) == COLOR_RED


def test_dead_units_are_not_drawn(surface):
    board = GameBoard()
    unit = create_unit("Archer", 1, (1, 1))
    unit.take_damage(unit.max_health)
    draw_board(surface, board, [unit])
    x, y = _cell_origin((1, 1))
    assert _colors(surface, x + 5, y + 5, x + 45, y + 45) == {COLOR_WHITE}


def test_cursor_is_drawn_where_the_board_cursor_is(surface):
    board = GameBoard()
    draw_board(surface, board, [])
    assert _pixel(surface, 51, 75) == COLOR_YELLOW

    board.move_cursor("D")
    surface.fill(COLOR_WHITE)
    draw_board(surface, board, [])
    assert _pixel(surface, 101, 75) == COLOR_YELLOW
    assert _pixel(surface, 51, 75) != COLOR_YELLOW


def test_status_uses_player_colour(surface):
    game = Game()
    draw_status(surface, game.players[0])
    assert COLOR_BLUE in _colors(surface, 50, 20, 450, 40)
    assert COLOR_RED not in _colors(surface, 50, 20, 450, 40)

    surface.fill(COLOR_WHITE)
    draw_status(surface, game.players[1])
    assert COLOR_RED in _colors(surface, 50, 20, 450, 40)


def test_status_lists_only_living_units(surface):
    game = Game()
    player = game.players[0]
    draw_status(surface, player)
    assert COLOR_BLUE in _colors(surface, 50, 570, 300, 590)

    for unit in player.units:
        unit.take_damage(unit.max_health)
    surface.fill(COLOR_WHITE)
    draw_status(surface, player)
    assert _colors(surface, 50, 570, 300, 600) == {COLOR_WHITE}


def test_game_play_turn_indicator_follows_turn(surface):
    game = Game()
    game.handle_menu_input(Key.RETURN)
    draw_game_play(surface, game)
    turn_region = _colors(surface, 550, 20, 800, 45)
    assert COLOR_BLUE in turn_region
    assert COLOR_RED not in turn_region

    game.end_turn()
    surface.fill(COLOR_WHITE)
    draw(surface, game)
    turn_region = _colors(surface, 550, 20, 800, 45)
    assert COLOR_RED in turn_region
    assert COLOR_BLUE not in turn_region


@pytest.mark.parametrize(
    ("loser", "colour"),
    [(1, COLOR_BLUE), (0, COLOR_RED)],
)
def test_game_over_message_uses_winner_colour(surface, loser, colour):
    game = Game()
    for unit in game.players[loser].units:
        unit.take_damage(unit.max_health)
    draw_game_over(surface, game)
    assert colour in _colors(surface, 200, 150, 700, 200)


def test_game_over_draw_is_purple(surface):
    game = Game()
    for player in game.players:
        player.units.clear()
    game.state = GameState.GAME_OVER
    draw(surface, game)
    message = _colors(surface, 200, 150, 700, 200)
    assert COLOR_PURPLE in message
    assert COLOR_BLUE not in message
    assert COLOR_RED not in message