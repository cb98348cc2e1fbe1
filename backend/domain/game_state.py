"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional

from .constants import RUNNING


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Renderers and tests read snapshots; only the controller mutates the game.

    Attributes:
        tick_number: how many ticks the current run has taken
        status: one of stopped / running / paused / game_over / finished
        score: food eaten since the last start
        tick_interval_ms: delay until the next tick
        snake_positions: list of (x, y), head first
        direction: direction the snake is heading
        food, power_up: (x, y) of each item
        background_color: RGB tuple the board is painted with this tick
        effect: the active Effect, or None
        board_size, tile_size: board geometry in board units
        death_reason: 'wall' or 'self' after a crash
    """

    def __init__(
        self,
        tick_number: int,
        status: str,
        score: int,
        tick_interval_ms: int,
        snake_positions: List[Tuple[int, int]],
        direction: str,
        food: Tuple[int, int],
        power_up: Tuple[int, int],
        background_color: Tuple[int, int, int],
        board_size: int,
        tile_size: int,
        effect=None,
        death_reason: Optional[str] = None,
    ):
        self.tick_number = tick_number
        self.status = status
        self.score = score
        self.tick_interval_ms = tick_interval_ms
        self.snake_positions = snake_positions
        self.direction = direction
        self.food = food
        self.power_up = power_up
        self.background_color = background_color
        self.board_size = board_size
        self.tile_size = tile_size
        self.effect = effect
        self.death_reason = death_reason

    @property
    def running(self) -> bool:
        return self.status == RUNNING

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        P = power-up
        H = snake head
        o = snake body
        Rows run top to bottom, matching screen coordinates.
        """
        tiles = self.board_size // self.tile_size
        board = [['.' for _ in range(tiles)] for _ in range(tiles)]

        def place(position, marker):
            col, row = position[0] // self.tile_size, position[1] // self.tile_size
            if 0 <= col < tiles and 0 <= row < tiles:
                board[row][col] = marker

        place(self.food, 'F')
        place(self.power_up, 'P')
        # Tail first so the head stays visible when it overlaps the body
        for idx in range(len(self.snake_positions) - 1, -1, -1):
            place(self.snake_positions[idx], 'H' if idx == 0 else 'o')

        return "\n".join(' '.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, status={self.status}, "
            f"score={self.score}, length={len(self.snake_positions)}>"
        )
