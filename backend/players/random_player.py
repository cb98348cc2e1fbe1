"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import MOVE_DELTAS, OPPOSITE, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding walls and its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> str:
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]
        tile = game_state.tile_size

        # Reversing is refused by the snake anyway
        candidates = sorted(VALID_MOVES - {OPPOSITE[game_state.direction]})

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move)
        valid_moves: List[str] = []
        for move in candidates:
            dx, dy = MOVE_DELTAS[move]
            new_x, new_y = head_x + dx * tile, head_y + dy * tile

            # Check wall collisions
            if (new_x < 0 or new_x >= game_state.board_size or
                    new_y < 0 or new_y >= game_state.board_size):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(candidates)

        return self.rng.choice(valid_moves)
