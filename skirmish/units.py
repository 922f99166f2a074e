"""Combat units and the factory that builds them by name."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import (
    ARCHER_SYMBOL,
    COLOR_BLUE,
    COLOR_RED,
    MAGE_SYMBOL,
    WARRIOR_SYMBOL,
    Color,
)

Position = tuple[int, int]


def _team_color(player: int) -> Color:
    return COLOR_BLUE if player == 1 else COLOR_RED


@dataclass(eq=False)
class Unit:
    """A piece on the board belonging to one player."""

    name: str
    symbol: str
    color: Color
    player: int
    position: Position
    max_health: int
    attack_range: int
    damage: int
    movement_range: int
    can_move_diagonally: bool
    health: int = field(init=False)

    def __post_init__(self) -> None:
        self.health = self.max_health
        self.position = tuple(self.position)

    def attack(self, target: Unit) -> None:
        """Deal this unit's damage to another unit."""
        if target is not self:
            target.take_damage(self.damage)

    def take_damage(self, amount: int) -> None:
        """Lose health, never dropping below zero."""
        self.health = max(self.health - amount, 0)

    def is_alive(self) -> bool:
        return self.health > 0


class Warrior(Unit):
    """Close-combat unit with high health."""

    def __init__(self, player: int, position: Position) -> None:
        super().__init__(
            name="Warrior",
            symbol=WARRIOR_SYMBOL,
            color=_team_color(player),
            player=player,
            position=position,
            max_health=50,
            attack_range=1,
            damage=20,
            movement_range=3,
            can_move_diagonally=True,
        )


class Archer(Unit):
    """Ranged unit with medium health."""

    def __init__(self, player: int, position: Position) -> None:
        super().__init__(
            name="Archer",
            symbol=ARCHER_SYMBOL,
            color=_team_color(player),
            player=player,
            position=position,
            max_health=30,
            attack_range=3,
            damage=10,
            movement_range=2,
            can_move_diagonally=True,
        )


class Mage(Unit):
    """Long-range unit with low health and heavy damage."""

    def __init__(self, player: int, position: Position) -> None:
        super().__init__(
            name="Mage",
            symbol=MAGE_SYMBOL,
            color=_team_color(player),
            player=player,
            position=position,
            max_health=25,
            attack_range=4,
            damage=15,
            movement_range=1,
            can_move_diagonally=False,
        )


_UNIT_KINDS: dict[str, type[Unit]] = {
    "Warrior": Warrior,
    "Archer": Archer,
    "Mage": Mage,
}


def create_unit(kind: str, player: int, position: Position) -> Unit:
    """Build a unit of the named kind; raise ValueError for an unknown kind."""
    try:
        unit_class = _UNIT_KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown unit kind: {kind!r}") from None
    return unit_class(player, position)