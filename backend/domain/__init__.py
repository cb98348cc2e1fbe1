"""
Domain entities for the snake arcade game engine.

This module contains the core game entities that are independent of
presentation concerns (window, drawing, input devices).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE
from .snake import Snake, parse_direction
from .food import Food
from .power_up import PowerUp, Effect, EFFECT_PRESETS, EFFECT_COLORS
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'Snake',
    'parse_direction',
    'Food',
    'PowerUp',
    'Effect',
    'EFFECT_PRESETS',
    'EFFECT_COLORS',
    'GameState',
]
