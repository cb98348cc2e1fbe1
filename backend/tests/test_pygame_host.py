"""
Tests for the pygame host's tick scheduling and button layout.

Windows and events go through SDL's dummy video driver.
"""

import os
import random
import sys
from unittest.mock import Mock, patch

import pygame
import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameSettings
from domain.constants import DOWN, FINISH, FINISHED, PAUSE, START, UP
from main import SimulatedClock, SnakeGame
from services.board_renderer import BoardRenderer
from services.pygame_host import BUTTON_BAR_HEIGHT, COMMAND_KEYS, PygameHost, layout_buttons


def make_host(autopilot=None, started=False):
    game = SnakeGame(clock=SimulatedClock(), rng=random.Random(1))
    if started:
        game.start()
        game.food.position = (500, 500)
        game.power_up.position = (525, 525)
    host = PygameHost(game, GameSettings(), autopilot=autopilot, renderer=Mock())
    return game, host


class TestLayoutButtons:
    def test_three_buttons_in_bar(self):
        """Start, Pause and Finish sit side by side below the board."""
        buttons = layout_buttons(650)
        assert [command for command, _ in buttons] == [START, PAUSE, FINISH]
        for _, rect in buttons:
            assert rect.top >= 650
            assert rect.bottom <= 650 + BUTTON_BAR_HEIGHT
            assert 0 <= rect.left and rect.right <= 650
        rects = [rect for _, rect in buttons]
        assert not rects[0].colliderect(rects[1])
        assert not rects[1].colliderect(rects[2])

    def test_command_keys(self):
        """Enter starts, P pauses, Escape finishes; W/A/S/D are left for steering."""
        assert COMMAND_KEYS["return"] == START
        assert COMMAND_KEYS["p"] == PAUSE
        assert COMMAND_KEYS["escape"] == FINISH
        assert not {"w", "a", "s", "d"} & set(COMMAND_KEYS)


class TestAdvance:
    """Tests for PygameHost._advance()."""

    def test_no_ticks_until_started(self):
        """Elapsed time is ignored while the game is stopped."""
        game, host = make_host()
        host._advance(1000)
        assert game.tick_number == 0

    def test_ticks_once_per_interval(self):
        """One tick per full tick interval; leftovers carry over."""
        game, host = make_host(started=True)
        host._advance(100)
        assert game.tick_number == 0
        host._advance(60)
        assert game.tick_number == 1
        host._advance(300)
        assert game.tick_number == 3

    def test_follows_effect_interval(self):
        """A faster effect interval produces more ticks for the same time."""
        game, host = make_host(started=True)
        game.tick_interval_ms = 100
        host._advance(300)
        assert game.tick_number == 3

    def test_autopilot_steers(self):
        """With an autopilot, its move is queued before each tick."""
        autopilot = Mock()
        autopilot.get_move.return_value = UP
        game, host = make_host(autopilot=autopilot, started=True)

        host._advance(150)

        autopilot.get_move.assert_called_once()
        assert game.snake.direction == UP
        assert game.snake.head == (100, 75)


@pytest.fixture
def event_queue():
    """An initialized display whose event queue starts empty."""
    pygame.display.init()
    pygame.event.clear()
    yield
    pygame.display.quit()


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def click(pos, button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def button_center(host, command):
    return next(rect.center for name, rect in host.buttons if name == command)


class TestHandleEvents:
    """Tests for PygameHost._handle_events()."""

    def test_letter_key_turns_snake(self, event_queue):
        """W queues an upward turn and issues no command."""
        game, host = make_host(started=True)
        pygame.event.post(key_down(pygame.K_w))
        assert host._handle_events() is None
        assert game._pending_direction == UP

    def test_arrow_key_turns_snake(self, event_queue):
        """Arrow keys steer like W/A/S/D."""
        game, host = make_host(started=True)
        pygame.event.post(key_down(pygame.K_DOWN))
        host._handle_events()
        assert game._pending_direction == DOWN

    def test_command_keys_issue_commands(self, event_queue):
        """Enter, P and Escape map to Start, Pause and Finish."""
        _, host = make_host()
        for key, command in ((pygame.K_RETURN, START), (pygame.K_p, PAUSE), (pygame.K_ESCAPE, FINISH)):
            pygame.event.post(key_down(key))
            assert host._handle_events() == command

    def test_turn_and_command_in_one_frame(self, event_queue):
        """A turn and a command in the same frame are both honored."""
        game, host = make_host(started=True)
        pygame.event.post(key_down(pygame.K_w))
        pygame.event.post(key_down(pygame.K_p))
        assert host._handle_events() == PAUSE
        assert game._pending_direction == UP

    def test_direction_keys_ignored_under_autopilot(self, event_queue):
        """While the autopilot steers, direction keys are dropped."""
        game, host = make_host(autopilot=Mock(), started=True)
        pygame.event.post(key_down(pygame.K_w))
        assert host._handle_events() is None
        assert game._pending_direction is None

    def test_button_clicks(self, event_queue):
        """A left click on a button issues its command."""
        _, host = make_host()
        for command in (START, PAUSE, FINISH):
            pygame.event.post(click(button_center(host, command)))
            assert host._handle_events() == command

    def test_clicks_outside_buttons_and_right_clicks_ignored(self, event_queue):
        """Clicks on the board or with another mouse button do nothing."""
        _, host = make_host()
        pygame.event.post(click((10, 10)))
        pygame.event.post(click(button_center(host, START), button=3))
        assert host._handle_events() is None

    def test_window_close_finishes(self, event_queue):
        """Closing the window counts as Finish."""
        _, host = make_host()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert host._handle_events() == FINISH


class TestRun:
    """Tests for PygameHost.run()."""

    def run_with_events(self, host, *frames):
        with patch.object(pygame.event, "get", side_effect=list(frames)), \
                patch.object(pygame.time, "wait") as wait:
            score = host.run()
        wait.assert_called_once()
        return score

    def test_window_close_returns_final_score(self):
        """Closing the window finishes the game and returns its score."""
        game, host = make_host(started=True)
        host.renderer = BoardRenderer()
        game.score = 4

        score = self.run_with_events(host, [pygame.event.Event(pygame.QUIT)])

        assert score == 4
        assert game.status == FINISHED

    def test_finish_button_after_pause(self):
        """Pause keeps the score; the Finish button then ends the session."""
        game, host = make_host(started=True)
        host.renderer = BoardRenderer()
        game.score = 2

        score = self.run_with_events(
            host,
            [key_down(pygame.K_p)],
            [click(button_center(host, FINISH))],
        )

        assert score == 2
        assert game.status == FINISHED
        assert game.tick_number == 0
