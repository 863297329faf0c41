"""Game constants."""

GRID_COLUMNS, GRID_ROWS = 20, 20
CELL_SIZE = 25
TICK_RATE = 6

INITIAL_BODY = [(0, 0), (0, 1)]
INITIAL_DIRECTION = "right"
GROW_OFFSET = (1, 0)

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}

BACKGROUND_COLOR = "#00802f"
SNAKE_COLOR = "#ff0000"
FOOD_COLOR = "#ff0000"

HOST = "0.0.0.0"
PORT = 8765
