"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player steers the snake: each tick it may ask for a new direction
    given the current game state.
    """

    def get_move(self, game_state: GameState) -> Optional[str]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT", or None to keep going straight
        """
        raise NotImplementedError
