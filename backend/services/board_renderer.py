"""
Board Renderer for the snake arcade

Draws a GameState snapshot into a PIL (Pillow) image:
- Background in the current flicker color
- Food (red circle) and power-up (cyan square)
- Snake with a green head and light gray body
- Score overlay, or a centered "Game Over" panel when not running

Rendering never mutates the game; hosts may call it as often as they like.
"""

import logging
from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from domain.constants import CYAN, GREEN, LIGHT_GRAY, RED, WHITE
from domain.game_state import GameState

logger = logging.getLogger(__name__)

FONT_PATHS = (
    "/System/Library/Fonts/Helvetica.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "Arial.ttf",
)


def _load_font(size: int):
    for path in FONT_PATHS:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    logger.debug("No TrueType font found, using Pillow's default font")
    return ImageFont.load_default()


class BoardRenderer:
    """Render GameState snapshots as images"""

    def __init__(self):
        self.font_score = _load_font(16)
        self.font_title = _load_font(40)
        self.font_subtitle = _load_font(20)

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        size = state.board_size
        img = Image.new('RGB', (size, size), tuple(state.background_color))
        draw = ImageDraw.Draw(img)

        if state.running:
            self._draw_board(draw, state)
        else:
            self._draw_game_over(draw, state)

        return img

    def render_array(self, state: GameState) -> np.ndarray:
        """Render a frame as an (height, width, 3) uint8 array"""
        return np.array(self.render_frame(state))

    def _draw_board(self, draw: ImageDraw.ImageDraw, state: GameState):
        tile = state.tile_size

        food_x, food_y = state.food
        draw.ellipse([food_x, food_y, food_x + tile - 1, food_y + tile - 1], fill=RED)

        power_x, power_y = state.power_up
        self._draw_cell(draw, power_x, power_y, tile, CYAN)

        # Body first, head on top
        for i in range(len(state.snake_positions) - 1, -1, -1):
            pos_x, pos_y = state.snake_positions[i]
            self._draw_cell(draw, pos_x, pos_y, tile, GREEN if i == 0 else LIGHT_GRAY)

        draw.text((10, 8), f"Score: {state.score}", fill=WHITE, font=self.font_score)

    def _draw_game_over(self, draw: ImageDraw.ImageDraw, state: GameState):
        size = state.board_size
        self._draw_centered(draw, "Game Over", size // 2 - 40, self.font_title, size)
        self._draw_centered(draw, f"Your score: {state.score}", size // 2 + 10, self.font_subtitle, size)

    def _draw_centered(self, draw: ImageDraw.ImageDraw, text: str, y: int, font, width: int):
        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        draw.text((width // 2 - text_width // 2, y), text, fill=WHITE, font=font)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        x: int,
        y: int,
        size: int,
        color: Tuple[int, int, int],
    ):
        """Draw a single tile (snake segment or power-up)"""
        draw.rectangle([x, y, x + size - 1, y + size - 1], fill=color)
