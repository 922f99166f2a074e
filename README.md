# skirmish

A small two-player, hot-seat tactics game. Two armies of three units each
(a Warrior, an Archer and a Mage) face each other on a 10×10 grid. Players
take turns at the same keyboard; on each turn you either move one unit or
attack with it. The last side with units standing wins.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
skirmish
```

The command takes no options besides `--help`. It opens an 800×600 window
on a main menu with three items: New game, Help and Exit. Use the arrow
keys or `W`/`S` to pick one and `Enter` to confirm. Any key leaves the help
screen. Closing the window or choosing Exit ends the program.

### Controls during play

| Key             | Action                                                        |
|-----------------|---------------------------------------------------------------|
| `W` `A` `S` `D` | Move the cursor up, left, down, right                         |
| `Q` `E` `Z` `C` | Move the cursor diagonally                                    |
| `Enter`         | Select your unit under the cursor, or confirm a move / attack |
| `M`             | Enter move mode for the selected unit                         |
| `F`             | Enter attack mode for the selected unit                       |
| `Esc`           | Leave the current mode, deselect the unit, or go back to the menu |

Moving or attacking ends your turn. In move mode the cells the unit can
reach are highlighted in blue; in attack mode enemies within range are
highlighted in pink. Every unit has a health bar, and the current player's
status line and the health of their units are shown around the board.
Units whose health reaches zero are removed.

When one side has no units left, the game-over screen names the winner.
Press `Enter` (or `Y`) to start a fresh game, or `Esc` (or `N`) to return
to the menu.

### Units

| Unit    | Health | Damage | Attack range | Movement | Diagonal moves |
|---------|--------|--------|--------------|----------|----------------|
| Warrior | 50     | 20     | 1            | 3        | yes            |
| Archer  | 30     | 10     | 3            | 2        | yes            |
| Mage    | 25     | 15     | 4            | 1        | no             |

Attack range is measured as Manhattan distance. Movement is counted in
steps, and units cannot move through or onto cells held by other living
units.

## Using the game logic directly

The rules in `skirmish.game`, `skirmish.board`, `skirmish.players` and
`skirmish.units` do not depend on pygame, so they can be driven without a
window:

```python
from skirmish.game import Game, GameState, Key

game = Game()
game.handle_key_press(Key.RETURN)        # "New game" is selected by default
assert game.state is GameState.GAME_PLAY
print(game.current_player.status)        # Player 1's turn. Select unit with Enter.
```

- `skirmish.units.create_unit("Archer", 1, (2, 1))` builds a unit and
  raises `ValueError` for an unknown kind.
- `skirmish.board.GameBoard` moves its cursor with `move_cursor` and fills
  `reachable_cells` and `attackable_cells` through
  `calculate_reachable_cells` and `calculate_attackable_cells`.
- `Game.winner()` returns the number of the side that still has living
  units, or `None` when neither has.
- `skirmish.render` draws any game screen onto a pygame surface, and
  `skirmish.app.translate_key` maps pygame key codes to `Key` values.

## What it does not do

Both sides are played by people at the same keyboard: there is no computer
opponent and no network play. Games cannot be saved or loaded, and the
armies and starting positions are fixed.