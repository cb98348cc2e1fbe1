import argparse
import json
import logging
import random
import threading
import time
from typing import Callable, Dict, Optional, Any

from config import load_settings
from domain.constants import (
    BASE_TICK_MS,
    BLACK,
    BOARD_SIZE,
    COMMANDS,
    FINISHED,
    GAME_OVER,
    OPPOSITE,
    PAUSE,
    PAUSED,
    RUNNING,
    START,
    STOPPED,
)
from domain.food import Food
from domain.game_state import GameState
from domain.power_up import EFFECT_COLORS, Effect, PowerUp
from domain.snake import Snake, parse_direction
from players import Player, RandomPlayer

logger = logging.getLogger(__name__)


def wall_clock_ms() -> float:
    return time.monotonic() * 1000.0


class SimulatedClock:
    """A clock that only moves when told to; used for headless runs."""

    def __init__(self, start_ms: float = 0.0):
        self.now_ms = start_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float):
        self.now_ms += ms


class SnakeGame:
    """
    Manages:
      - Snake, food and power-up
      - Score and game status
      - Tick interval and the active power-up effect
      - Start / Pause / Finish commands from the host

    The host calls tick() every `tick_interval_ms` while the game is running.
    Direction changes and commands may arrive between ticks; a lock keeps
    them from landing in the middle of one.
    """

    def __init__(
        self,
        board_size: int = BOARD_SIZE,
        base_tick_ms: int = BASE_TICK_MS,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ):
        self.board_size = board_size
        self.base_tick_ms = base_tick_ms
        self.clock = clock or wall_clock_ms
        self.rng = rng or random.Random()

        self.snake = Snake(board_size=board_size)
        self.food = Food(self.snake, rng=self.rng)
        self.power_up = PowerUp(self.snake, rng=self.rng)

        self.status = STOPPED
        self.score = 0
        self.tick_number = 0
        self.tick_interval_ms = base_tick_ms
        self.active_effect: Optional[Effect] = None
        self.background_color = BLACK
        self.flicker_on = False

        self._pending_direction: Optional[str] = None
        self._lock = threading.RLock()

        self.food.spawn()
        self.power_up.spawn()

    @property
    def running(self) -> bool:
        return self.status == RUNNING

    # --------------------------------------------------
    # Commands
    # --------------------------------------------------

    def execute(self, command: str):
        """Dispatch a host command ("start", "pause" or "finish")."""
        if command not in COMMANDS:
            raise ValueError(f"Unknown command {command!r}; expected one of {COMMANDS}")
        if command == START:
            return self.start()
        if command == PAUSE:
            return self.pause()
        return self.finish()

    def start(self) -> bool:
        """Reset the board and begin ticking. Returns False if already running."""
        with self._lock:
            if self.status not in (STOPPED, PAUSED, GAME_OVER):
                logger.debug("Ignoring start while %s", self.status)
                return False
            self.score = 0
            self.tick_number = 0
            self._pending_direction = None
            self.snake.reset()
            self.food.spawn()
            self.power_up.spawn()
            self.status = RUNNING
            logger.info("Game started (food at %s, power-up at %s)", self.food.position, self.power_up.position)
            return True

    def pause(self) -> bool:
        with self._lock:
            if self.status != RUNNING:
                logger.debug("Ignoring pause while %s", self.status)
                return False
            self.status = PAUSED
            logger.info("Game paused at score %d", self.score)
            return True

    def finish(self) -> int:
        """Stop for good and report the final score; the host ends the process."""
        with self._lock:
            self.status = FINISHED
            logger.info("Game Over. Your score: %d", self.score)
            return self.score

    # --------------------------------------------------
    # Input
    # --------------------------------------------------

    def change_direction(self, symbol) -> bool:
        """
        Queue a turn for the next tick.

        The request is checked against the direction the snake is moving now;
        a reversal or an unknown symbol is dropped. Among accepted requests
        between two ticks, the last one wins.
        """
        direction = parse_direction(symbol)
        with self._lock:
            if direction is None or direction == OPPOSITE[self.snake.direction]:
                return False
            self._pending_direction = direction
            return True

    # --------------------------------------------------
    # Game loop
    # --------------------------------------------------

    def tick(self) -> GameState:
        """
        Execute one tick:
          1) Apply the queued turn and move
          2) Eat food (score + grow + respawn)
          3) Take the power-up (respawn + install its effect)
          4) Expire the effect once its time is up
          5) Check collisions (game over)
          6) Flicker the background while an effect tint is set
        """
        with self._lock:
            if self.status != RUNNING:
                return self.get_current_state()

            self.tick_number += 1
            if self._pending_direction is not None:
                self.snake.change_direction(self._pending_direction)
                self._pending_direction = None

            self.snake.move()

            if self.snake.check_food(self.food):
                self.score += 1
                self.snake.grow()
                self.food.spawn()
                logger.debug("Food eaten, score %d, new food at %s", self.score, self.food.position)

            if self.snake.check_power_up(self.power_up):
                self.power_up.spawn()
                self._install_effect(self.power_up.activate_effect(self.clock()))

            if self.active_effect is not None and self.active_effect.is_expired(self.clock()):
                self._clear_effect()

            reason = self.snake.collision_reason()
            if reason is not None:
                self.snake.death_reason = reason
                self.snake.death_tick = self.tick_number
                self.status = GAME_OVER
                logger.info("Game over (%s) at tick %d with score %d", reason, self.tick_number, self.score)

            effect_color = self.active_effect.color if self.active_effect else BLACK
            if effect_color in EFFECT_COLORS:
                self.flicker_on = not self.flicker_on
                self.background_color = effect_color if self.flicker_on else BLACK

            return self.get_current_state()

    def _install_effect(self, effect: Effect):
        self.active_effect = effect
        self.tick_interval_ms = effect.tick_interval_ms
        logger.debug("Power-up %s active until %.0f ms", effect.name, effect.expires_at_ms)

    def _clear_effect(self):
        logger.debug("Effect %s expired", self.active_effect.name)
        self.active_effect = None
        self.tick_interval_ms = self.base_tick_ms
        self.background_color = BLACK
        self.flicker_on = False

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        with self._lock:
            return GameState(
                tick_number=self.tick_number,
                status=self.status,
                score=self.score,
                tick_interval_ms=self.tick_interval_ms,
                snake_positions=list(self.snake.positions),
                direction=self.snake.direction,
                food=self.food.position,
                power_up=self.power_up.position,
                background_color=self.background_color,
                board_size=self.board_size,
                tile_size=self.snake.tile_size,
                effect=self.active_effect,
                death_reason=self.snake.death_reason,
            )


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    player: Player,
    max_ticks: int = 1000,
    board_size: int = BOARD_SIZE,
    base_tick_ms: int = BASE_TICK_MS,
    seed: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Play one game without a window, driven by `player`.

    Time is simulated: the clock advances by the current tick interval after
    every tick, so power-up effects expire exactly as they would on screen.

    Returns:
        A dictionary summarizing the game (final_score, ticks, death_reason, snake_length).
    """
    clock = SimulatedClock()
    game = SnakeGame(
        board_size=board_size,
        base_tick_ms=base_tick_ms,
        clock=clock,
        rng=random.Random(seed),
    )
    game.start()

    while game.running and game.tick_number < max_ticks:
        move = player.get_move(game.get_current_state())
        if move is not None:
            game.change_direction(move)
        game.tick()
        clock.advance(game.tick_interval_ms)

    death_reason = game.snake.death_reason
    final_score = game.finish()
    return {
        "final_score": final_score,
        "ticks": game.tick_number,
        "death_reason": death_reason,
        "snake_length": len(game.snake),
    }


# -------------------------------
# Main Entry Point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play the snake arcade game.")
    parser.add_argument("--board-size", type=int, default=None,
                        help="Board width/height in units (multiple of 25, default from SNAKE_BOARD_SIZE or 650)")
    parser.add_argument("--fps", type=int, default=None,
                        help="Window refresh rate (default from SNAKE_FPS or 60)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food/power-up placement and effects")
    parser.add_argument("--autopilot", action="store_true",
                        help="Let a random safe-move player steer the snake")
    parser.add_argument("--headless", action="store_true",
                        help="Run one autopilot game without a window and print a JSON summary")
    parser.add_argument("--max-ticks", type=int, default=1000,
                        help="Tick limit for --headless runs")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default from SNAKE_LOG_LEVEL or INFO)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings().with_overrides(
            board_size=args.board_size,
            fps=args.fps,
            log_level=args.log_level.upper() if args.log_level else None,
        )
    except ValueError as exc:
        raise SystemExit(f"Invalid configuration: {exc}")

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.headless:
        result = run_simulation(
            RandomPlayer(random.Random(args.seed)),
            max_ticks=args.max_ticks,
            board_size=settings.board_size,
            base_tick_ms=settings.base_tick_ms,
            seed=args.seed,
        )
        print(json.dumps(result, indent=2))
        return

    from services.pygame_host import PygameHost

    game = SnakeGame(
        board_size=settings.board_size,
        base_tick_ms=settings.base_tick_ms,
        rng=random.Random(args.seed),
    )
    autopilot = RandomPlayer(random.Random(args.seed)) if args.autopilot else None
    host = PygameHost(game, settings, autopilot=autopilot)
    final_score = host.run()
    print(f"Final Score {final_score}")
    raise SystemExit(0)


if __name__ == "__main__":
    main()
