"""
Food entity - the single item the snake eats to grow and score.
"""

import random
from typing import Tuple, Optional

from .constants import FOOD_SPAWN_ATTEMPTS, SPAWN_INSET
from .snake import Snake


def random_tile(rng: random.Random, spawn_area: int, tile_size: int) -> Tuple[int, int]:
    """Return a uniformly random tile-aligned (x, y) inside [0, spawn_area)."""
    tiles = spawn_area // tile_size
    return (rng.randrange(tiles) * tile_size, rng.randrange(tiles) * tile_size)


class Food:
    """
    A single food cell placed away from the snake.

    Attributes:
        snake: the snake whose body the food must avoid
        position: current (x, y) of the food
        spawn_area: food only lands inside [0, spawn_area) on both axes
    """

    def __init__(self, snake: Snake, rng: Optional[random.Random] = None):
        self.snake = snake
        self.rng = rng or random.Random()
        self.spawn_area = snake.board_size - SPAWN_INSET
        self.position: Tuple[int, int] = (0, 0)

    @property
    def x(self) -> int:
        return self.position[0]

    @property
    def y(self) -> int:
        return self.position[1]

    def spawn(self) -> Tuple[int, int]:
        """
        Move the food to a random free cell.

        Gives up after FOOD_SPAWN_ATTEMPTS samples and keeps the last one,
        even if it lies on the snake, so a crowded board never stalls a tick.
        """
        for _ in range(FOOD_SPAWN_ATTEMPTS):
            self.position = random_tile(self.rng, self.spawn_area, self.snake.tile_size)
            if not self.snake.occupies(self.position):
                break
        return self.position

    def __repr__(self):
        return f"<Food at {self.position}>"
