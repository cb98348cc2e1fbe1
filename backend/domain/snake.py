"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple, Optional

from .constants import (
    INPUT_SYMBOLS,
    MOVE_DELTAS,
    OPPOSITE,
    RIGHT,
    START_LENGTH,
    START_POSITION,
    TILE_SIZE,
    BOARD_SIZE,
)


def parse_direction(symbol) -> Optional[str]:
    """
    Map an input symbol ("w", "UP", "left", ...) to a direction.

    Returns None for anything that is not one of the four directions.
    """
    if not isinstance(symbol, str):
        return None
    return INPUT_SYMBOLS.get(symbol.strip().lower())


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: the direction the head moves on the next tick
        death_reason: 'wall' or 'self' once the snake has crashed
        death_tick: the tick number when the snake crashed
    """

    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        tile_size: int = TILE_SIZE,
        positions: Optional[List[Tuple[int, int]]] = None,
        direction: str = RIGHT,
    ):
        self.board_size = board_size
        self.tile_size = tile_size
        self.positions = deque()
        self.direction = direction
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None
        if positions is None:
            self.reset()
            self.direction = direction
        else:
            self.positions = deque(positions)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    def __len__(self) -> int:
        return len(self.positions)

    def reset(self):
        start_x, start_y = START_POSITION
        self.positions = deque(
            (start_x - i * self.tile_size, start_y) for i in range(START_LENGTH)
        )
        self.direction = RIGHT
        self.death_reason = None
        self.death_tick = None

    def move(self):
        dx, dy = MOVE_DELTAS[self.direction]
        head_x, head_y = self.head
        self.positions.appendleft((head_x + dx * self.tile_size, head_y + dy * self.tile_size))
        self.positions.pop()

    def change_direction(self, symbol) -> bool:
        """
        Turn towards the direction named by `symbol`.

        Reversing straight into the neck is refused, as are unknown symbols.
        Returns True when the direction actually changed.
        """
        direction = parse_direction(symbol)
        if direction is None or direction == OPPOSITE[self.direction]:
            return False
        changed = direction != self.direction
        self.direction = direction
        return changed

    def grow(self):
        # The new segment sits on the tail and gets pulled forward by the next move
        self.positions.append(self.positions[-1])

    def occupies(self, position: Tuple[int, int]) -> bool:
        return tuple(position) in self.positions

    def collision_reason(self) -> Optional[str]:
        head_x, head_y = self.head
        if head_x < 0 or head_x >= self.board_size or head_y < 0 or head_y >= self.board_size:
            return "wall"
        for i in range(1, len(self.positions)):
            if self.positions[i] == self.head:
                return "self"
        return None

    def check_collision(self) -> bool:
        return self.collision_reason() is not None

    def check_food(self, food) -> bool:
        return self.head == food.position

    def check_power_up(self, power_up) -> bool:
        return self.head == power_up.position
