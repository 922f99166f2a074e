"""Players who own units."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .units import Unit

if TYPE_CHECKING:
    from .board import GameBoard

DEFAULT_STATUS = "Your turn. Use WASD/QEZC to move, Enter to select."


class Player(ABC):
    """A side in the game and the units it commands."""

    def __init__(self) -> None:
        self.units: list[Unit] = []

    def add_unit(self, unit: Unit) -> None:
        self.units.append(unit)

    def has_alive_units(self) -> bool:
        return any(unit.is_alive() for unit in self.units)

    def remove_dead_units(self) -> None:
        """Drop every unit whose health has reached zero."""
        self.units = [unit for unit in self.units if unit.is_alive()]

    @abstractmethod
    def make_move(self, board: GameBoard, enemy: Player) -> None:
        """Take this player's turn."""


class HumanPlayer(Player):
    """A player controlled from the keyboard, with a status line."""

    def __init__(self, player_number: int) -> None:
        super().__init__()
        self.player_number = player_number
        self.status = DEFAULT_STATUS

    def make_move(self, board: GameBoard, enemy: Player) -> None:
        """Prompt for keyboard input; the move itself comes from key presses."""
        self.status = (
            f"Player {self.player_number}'s turn. Select unit with Enter."
        )

    def unit_summaries(self) -> list[str]:
        """One 'Name (HP: current/max)' line for each living unit."""
        return [
            f"{unit.name} (HP: {unit.health}/{unit.max_health})"
            for unit in self.units
            if unit.is_alive()
        ]