"""
Pygame window that hosts the snake game.

The host owns everything the game core does not: the window, the
Start/Pause/Finish buttons, keyboard events and the timer that drives
ticks. It talks to the game only through commands, direction changes,
tick() and state snapshots.
"""

import logging
from typing import List, Optional, Tuple

import pygame

from config import GameSettings
from domain.constants import FINISH, PAUSE, START
from players import Player
from services.board_renderer import BoardRenderer

logger = logging.getLogger(__name__)

BUTTON_BAR_HEIGHT = 40
BUTTON_WIDTH = 90
BUTTON_GAP = 12
BUTTON_COLOR = (60, 60, 60)
BUTTON_TEXT = (230, 230, 230)
BAR_COLOR = (30, 30, 30)
FINISH_SCREEN_MS = 1500

COMMAND_KEYS = {
    "return": START,
    "enter": START,
    "p": PAUSE,
    "escape": FINISH,
    "q": FINISH,
}


def layout_buttons(board_size: int) -> List[Tuple[str, pygame.Rect]]:
    """Center the Start/Pause/Finish buttons in the bar below the board."""
    commands = (START, PAUSE, FINISH)
    total = len(commands) * BUTTON_WIDTH + (len(commands) - 1) * BUTTON_GAP
    left = (board_size - total) // 2
    top = board_size + 5
    return [
        (command, pygame.Rect(left + i * (BUTTON_WIDTH + BUTTON_GAP), top, BUTTON_WIDTH, BUTTON_BAR_HEIGHT - 10))
        for i, command in enumerate(commands)
    ]


class PygameHost:
    """Runs the window loop until the player finishes the game"""

    def __init__(
        self,
        game,
        settings: GameSettings,
        autopilot: Optional[Player] = None,
        renderer: Optional[BoardRenderer] = None,
    ):
        self.game = game
        self.settings = settings
        self.autopilot = autopilot
        self.renderer = renderer or BoardRenderer()
        self.buttons = layout_buttons(game.board_size)
        self._since_tick_ms = 0

    def run(self) -> int:
        """Play until Finish (or the window is closed). Returns the final score."""
        pygame.init()
        try:
            size = self.game.board_size
            screen = pygame.display.set_mode((size, size + BUTTON_BAR_HEIGHT))
            pygame.display.set_caption(self.settings.window_title)
            logger.info("Window open (%dx%d board, %d fps)", size, size, self.settings.fps)
            font = pygame.font.SysFont("arial", 18, bold=True)
            clock = pygame.time.Clock()

            while True:
                elapsed_ms = clock.tick(self.settings.fps)
                command = self._handle_events()
                if command == FINISH:
                    break
                if command is not None:
                    self.game.execute(command)
                    self._since_tick_ms = 0

                self._advance(elapsed_ms)
                self._draw(screen, font)
                pygame.display.flip()

            final_score = self.game.finish()
            logger.info("Showing final score %d before closing", final_score)
            self._draw(screen, font)
            pygame.display.flip()
            pygame.time.wait(FINISH_SCREEN_MS)
            return final_score
        finally:
            pygame.quit()

    def _handle_events(self) -> Optional[str]:
        """Apply direction keys; return the last command issued this frame."""
        command = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return FINISH
            if event.type == pygame.KEYDOWN:
                key_name = pygame.key.name(event.key)
                if key_name in COMMAND_KEYS:
                    command = COMMAND_KEYS[key_name]
                elif self.autopilot is None:
                    self.game.change_direction(key_name)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for button_command, rect in self.buttons:
                    if rect.collidepoint(event.pos):
                        command = button_command
            if command == FINISH:
                return command
        return command

    def _advance(self, elapsed_ms: int):
        """Tick the game whenever a full tick interval has passed."""
        if not self.game.running:
            self._since_tick_ms = 0
            return
        self._since_tick_ms += elapsed_ms
        while self.game.running and self._since_tick_ms >= self.game.tick_interval_ms:
            self._since_tick_ms -= self.game.tick_interval_ms
            if self.autopilot is not None:
                move = self.autopilot.get_move(self.game.get_current_state())
                if move is not None:
                    self.game.change_direction(move)
            self.game.tick()

    def _draw(self, screen, font):
        frame = self.renderer.render_array(self.game.get_current_state())
        # surfarray is indexed (x, y); Pillow arrays are (y, x)
        screen.blit(pygame.surfarray.make_surface(frame.swapaxes(0, 1)), (0, 0))

        size = self.game.board_size
        pygame.draw.rect(screen, BAR_COLOR, pygame.Rect(0, size, size, BUTTON_BAR_HEIGHT))
        for command, rect in self.buttons:
            pygame.draw.rect(screen, BUTTON_COLOR, rect, border_radius=4)
            label = font.render(command.capitalize(), True, BUTTON_TEXT)
            screen.blit(label, label.get_rect(center=rect.center))
