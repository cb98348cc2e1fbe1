"""
PowerUp entity and the timed Effect it grants.
"""

import random
from dataclasses import dataclass
from typing import Tuple, Optional

from .constants import (
    DARK_GREEN,
    POWER_UP_DURATION_MS,
    PURPLE,
    SPAWN_INSET,
)
from .food import random_tile
from .snake import Snake


@dataclass(frozen=True)
class Effect:
    """A temporary change of tick interval and background tint."""

    name: str
    tick_interval_ms: int
    color: Tuple[int, int, int]
    expires_at_ms: float

    def is_expired(self, now_ms: float) -> bool:
        return now_ms >= self.expires_at_ms


# (name, tick interval, tint) for each effect a power-up can grant
EFFECT_PRESETS = (
    ("speed_boost", 100, PURPLE),
    ("slow_down", 200, DARK_GREEN),
)
EFFECT_COLORS = tuple(color for _, _, color in EFFECT_PRESETS)


class PowerUp:
    """
    A single power-up cell placed away from the snake.

    Unlike food, spawning retries until a free cell turns up. That loop cannot
    finish if the snake ever covers the whole spawn area.
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
        while True:
            self.position = random_tile(self.rng, self.spawn_area, self.snake.tile_size)
            if not self.snake.occupies(self.position):
                return self.position

    def activate_effect(self, now_ms: float) -> Effect:
        """Pick one of the presets at random; it lasts POWER_UP_DURATION_MS from now."""
        name, tick_interval_ms, color = EFFECT_PRESETS[self.rng.randrange(len(EFFECT_PRESETS))]
        return Effect(
            name=name,
            tick_interval_ms=tick_interval_ms,
            color=color,
            expires_at_ms=now_ms + POWER_UP_DURATION_MS,
        )

    def __repr__(self):
        return f"<PowerUp at {self.position}>"
