"""
Player implementations for the snake arcade.

Humans steer through the keyboard, which the host forwards straight to the
game; players here are automated drivers for demos and headless runs.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
