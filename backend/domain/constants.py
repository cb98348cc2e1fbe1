"""
Game constants for the snake arcade.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Screen coordinates: y grows downward
MOVE_DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Input symbols accepted for each direction (compared lowercase)
INPUT_SYMBOLS = {
    "w": UP, "up": UP,
    "s": DOWN, "down": DOWN,
    "a": LEFT, "left": LEFT,
    "d": RIGHT, "right": RIGHT,
}

# Board geometry (board units, not tiles)
TILE_SIZE = 25
BOARD_SIZE = 650
SPAWN_INSET = 100  # food/power-ups never spawn in the last four tiles
START_POSITION = (100, 100)
START_LENGTH = 3

# Timing
BASE_TICK_MS = 150
POWER_UP_DURATION_MS = 5000
FOOD_SPAWN_ATTEMPTS = 50

# Game status
STOPPED = "stopped"
RUNNING = "running"
PAUSED = "paused"
GAME_OVER = "game_over"
FINISHED = "finished"

# Host commands
START = "start"
PAUSE = "pause"
FINISH = "finish"
COMMANDS = (START, PAUSE, FINISH)

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
CYAN = (0, 255, 255)
LIGHT_GRAY = (192, 192, 192)
PURPLE = (128, 0, 128)
DARK_GREEN = (0, 50, 0)
