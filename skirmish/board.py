"""The game board: cursor, movement range and attack range."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from .constants import BOARD_SIZE
from .units import Position, Unit

_CURSOR_STEPS: dict[str, tuple[int, int]] = {
    "W": (0, -1),
    "A": (-1, 0),
    "S": (0, 1),
    "D": (1, 0),
    "Q": (-1, -1),
    "E": (1, -1),
    "Z": (-1, 1),
    "C": (1, 1),
}


def _on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


class GameBoard:
    """A square grid with a cursor and highlighted move and attack cells."""

    def __init__(self) -> None:
        self.cursor_pos: Position = (0, 0)
        self.reachable_cells: set[Position] = set()
        self.attackable_cells: set[Position] = set()

    def move_cursor(self, direction: str) -> None:
        """Step the cursor by a WASD/QEZC key; moves off the board are ignored."""
        step = _CURSOR_STEPS.get(direction)
        if step is None:
            return
        x, y = self.cursor_pos[0] + step[0], self.cursor_pos[1] + step[1]
        if _on_board(x, y):
            self.cursor_pos = (x, y)

    def calculate_reachable_cells(self, unit: Unit, all_units: Iterable[Unit]) -> None:
        """Mark free cells the unit can walk to within its movement range."""
        occupied = {
            other.position
            for other in all_units
            if other.is_alive() and other is not unit
        }
        if unit.can_move_diagonally:
            steps = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]
        else:
            steps = [(-1, 0), (0, -1), (0, 1), (1, 0)]

        self.reachable_cells = set()
        start = unit.position
        visited = {start}
        queue = deque([(start, unit.movement_range)])
        while queue:
            (x, y), remaining = queue.popleft()
            if remaining == 0:
                continue
            for dx, dy in steps:
                cell = (x + dx, y + dy)
                if not _on_board(*cell) or cell in visited or cell in occupied:
                    continue
                self.reachable_cells.add(cell)
                visited.add(cell)
                queue.append((cell, remaining - 1))

    def calculate_attackable_cells(self, unit: Unit, all_units: Iterable[Unit]) -> None:
        """Mark cells holding a living enemy within the unit's attack range."""
        ux, uy = unit.position
        self.attackable_cells = {
            other.position
            for other in all_units
            if other.is_alive()
            and other.player != unit.player
            and _on_board(*other.position)
            and abs(other.position[0] - ux) + abs(other.position[1] - uy) <= unit.attack_range
        }

    def clear_reachable_cells(self) -> None:
        self.reachable_cells = set()

    def clear_attackable_cells(self) -> None:
        self.attackable_cells = set()

    def is_cell_reachable(self, x: int, y: int) -> bool:
        return (x, y) in self.reachable_cells

    def is_cell_attackable(self, x: int, y: int) -> bool:
        return (x, y) in self.attackable_cells