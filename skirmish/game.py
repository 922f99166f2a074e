"""Game flow: menus, turns, unit selection, movement and combat."""

from __future__ import annotations

from enum import Enum, auto

from .board import GameBoard
from .players import HumanPlayer
from .units import Unit, create_unit

MENU_ITEMS = ("New game", "Help", "Exit")

_CURSOR_KEYS = frozenset("WASDQEZC")

_STARTING_UNITS: tuple[tuple[int, str, tuple[int, int]], ...] = (
    (1, "Warrior", (1, 1)),
    (1, "Archer", (2, 1)),
    (1, "Mage", (3, 1)),
    (2, "Warrior", (8, 8)),
    (2, "Archer", (7, 8)),
    (2, "Mage", (6, 8)),
)


class GameState(Enum):
    """The screen the game is currently showing."""

    MAIN_MENU = auto()
    GAME_PLAY = auto()
    GAME_OVER = auto()
    HELP_SCREEN = auto()


class Key(str, Enum):
    """Keyboard input understood by the game."""

    W = "W"
    A = "A"
    S = "S"
    D = "D"
    Q = "Q"
    E = "E"
    Z = "Z"
    C = "C"
    M = "M"
    F = "F"
    Y = "Y"
    N = "N"
    UP = "UP"
    DOWN = "DOWN"
    RETURN = "RETURN"
    ESCAPE = "ESCAPE"
    OTHER = "OTHER"


def _turn_prompt(player_number: int) -> str:
    return f"Player {player_number}'s turn. Select unit with Enter."


def _selected_prompt(unit: Unit) -> str:
    return f"Selected {unit.name}. Press M to move or F to attack."


class Game:
    """Two human players taking turns on one board."""

    def __init__(self) -> None:
        self.state = GameState.MAIN_MENU
        self.board = GameBoard()
        self.players: list[HumanPlayer] = [HumanPlayer(1), HumanPlayer(2)]
        self.current_player_index = 0
        self.selected_unit: Unit | None = None
        self.is_selecting_target = False
        self.is_moving_unit = False
        self.selected_menu_item = 0
        self.quit_requested = False
        self.initialize_units()

    @property
    def current_player(self) -> HumanPlayer:
        return self.players[self.current_player_index]

    @property
    def enemy(self) -> HumanPlayer:
        return self.players[(self.current_player_index + 1) % 2]

    def initialize_units(self) -> None:
        """Give each player a warrior, an archer and a mage at their start cells."""
        for player_number, kind, position in _STARTING_UNITS:
            self.players[player_number - 1].add_unit(
                create_unit(kind, player_number, position)
            )

    def all_units(self) -> list[Unit]:
        """Every unit on the board, first player's units first."""
        return [unit for player in self.players for unit in player.units]

    def handle_key_press(self, key: Key) -> None:
        """Route a key to the handler for the current screen."""
        handlers = {
            GameState.MAIN_MENU: self.handle_menu_input,
            GameState.GAME_PLAY: self.handle_game_input,
            GameState.GAME_OVER: self.handle_game_over_input,
            GameState.HELP_SCREEN: self.handle_help_input,
        }
        handlers[self.state](key)

    def handle_menu_input(self, key: Key) -> None:
        count = len(MENU_ITEMS)
        if key in (Key.W, Key.UP):
            self.selected_menu_item = (self.selected_menu_item - 1) % count
        elif key in (Key.S, Key.DOWN):
            self.selected_menu_item = (self.selected_menu_item + 1) % count
        elif key is Key.RETURN:
            if self.selected_menu_item == 0:
                self.state = GameState.GAME_PLAY
                self.players[0].status = _turn_prompt(1)
            elif self.selected_menu_item == 1:
                self.state = GameState.HELP_SCREEN
            else:
                self.quit_requested = True

    def handle_game_input(self, key: Key) -> None:
        if key.value in _CURSOR_KEYS:
            self.board.move_cursor(key.value)
        elif key is Key.RETURN:
            self._confirm()
        elif key is Key.M:
            self._start_moving()
        elif key is Key.F:
            self._start_targeting()
        elif key is Key.ESCAPE:
            self._cancel()

    def _confirm(self) -> None:
        player = self.current_player
        cursor = self.board.cursor_pos
        if self.selected_unit is None:
            for unit in player.units:
                if unit.is_alive() and unit.position == cursor:
                    self.selected_unit = unit
                    player.status = _selected_prompt(unit)
                    break
        elif self.is_moving_unit:
            if self.board.is_cell_reachable(*cursor):
                unit = self.selected_unit
                unit.position = cursor
                self.board.clear_reachable_cells()
                self.is_moving_unit = False
                player.status = f"{unit.name} moved. Turn ended."
                self.end_turn()
        elif self.is_selecting_target:
            attacker = self.selected_unit
            ax, ay = attacker.position
            distance = abs(ax - cursor[0]) + abs(ay - cursor[1])
            if distance > attacker.attack_range:
                return
            enemy = self.enemy
            target = next(
                (u for u in enemy.units if u.is_alive() and u.position == cursor),
                None,
            )
            if target is None:
                return
            attacker.attack(target)
            self.board.clear_attackable_cells()
            self.is_selecting_target = False
            enemy.remove_dead_units()
            player.status = f"{attacker.name} attacked {target.name}"
            if self.check_game_over():
                return
            self.end_turn()

    def _start_moving(self) -> None:
        unit = self.selected_unit
        if unit is None or self.is_selecting_target or self.is_moving_unit:
            return
        self.is_moving_unit = True
        self.board.calculate_reachable_cells(unit, self.all_units())
        self.current_player.status = (
            f"Moving {unit.name}. Select destination and press Enter."
        )

    def _start_targeting(self) -> None:
        unit = self.selected_unit
        if unit is None or self.is_moving_unit or self.is_selecting_target:
            return
        self.is_selecting_target = True
        self.board.calculate_attackable_cells(unit, self.all_units())
        self.current_player.status = (
            f"Attacking with {unit.name}. Select target and press Enter."
        )

    def _cancel(self) -> None:
        player = self.current_player
        if self.is_moving_unit or self.is_selecting_target:
            self.board.clear_reachable_cells()
            self.board.clear_attackable_cells()
            self.is_selecting_target = False
            self.is_moving_unit = False
            player.status = _selected_prompt(self.selected_unit)
        elif self.selected_unit is not None:
            self.selected_unit = None
            player.status = "Select unit with Enter."
        else:
            self.state = GameState.MAIN_MENU

    def handle_game_over_input(self, key: Key) -> None:
        if key in (Key.Y, Key.RETURN):
            self.reset_game()
            self.state = GameState.GAME_PLAY
        elif key in (Key.N, Key.ESCAPE):
            self.state = GameState.MAIN_MENU

    def handle_help_input(self, key: Key) -> None:
        """Any key leaves the help screen."""
        self.state = GameState.MAIN_MENU

    def end_turn(self) -> None:
        """Drop the selection and pass the turn to the other player."""
        self.board.clear_reachable_cells()
        self.board.clear_attackable_cells()
        self.selected_unit = None
        self.is_selecting_target = False
        self.is_moving_unit = False
        self.current_player_index = (self.current_player_index + 1) % 2
        self.current_player.status = _turn_prompt(self.current_player_index + 1)

    def check_game_over(self) -> bool:
        """Switch to the game-over screen once a side has no living units."""
        if all(player.has_alive_units() for player in self.players):
            return False
        self.state = GameState.GAME_OVER
        return True

    def reset_game(self) -> None:
        """Start over with fresh players, units and board."""
        self.players = [HumanPlayer(1), HumanPlayer(2)]
        self.initialize_units()
        self.current_player_index = 0
        self.selected_unit = None
        self.is_selecting_target = False
        self.is_moving_unit = False
        self.board = GameBoard()
        self.players[0].status = _turn_prompt(1)

    def winner(self) -> int | None:
        """Number of the side with living units, or None for a draw."""
        for player in self.players:
            if player.has_alive_units():
                return player.player_number
        return None