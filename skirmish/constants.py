"""Board geometry, unit symbols and colours shared across the game."""

Color = tuple[int, int, int]

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
CELL_SIZE = 50
BOARD_SIZE = 10

WARRIOR_SYMBOL = "\N{FENCER}"
ARCHER_SYMBOL = "\N{BOW AND ARROW}"
MAGE_SYMBOL = "\N{MAGE}"

COLOR_RED: Color = (255, 0, 0)
COLOR_GREEN: Color = (0, 255, 0)
COLOR_BLUE: Color = (0, 0, 255)
COLOR_YELLOW: Color = (255, 255, 0)
COLOR_WHITE: Color = (255, 255, 255)
COLOR_BLACK: Color = (0, 0, 0)
COLOR_GRAY: Color = (200, 200, 200)
COLOR_LIGHT_BLUE: Color = (100, 100, 255)
COLOR_PINK: Color = (255, 100, 100)
COLOR_PURPLE: Color = (128, 0, 128)
COLOR_ORANGE: Color = (255, 165, 0)