"""
Runtime settings for the snake arcade.

Values come from SNAKE_* environment variables (a local .env file is loaded
first). Game rules such as tile size and effect presets stay in
domain/constants.py and are not configurable.
"""

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

from domain.constants import BASE_TICK_MS, BOARD_SIZE, SPAWN_INSET, TILE_SIZE

load_dotenv()

DEFAULT_FPS = 60
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_WINDOW_TITLE = "Snake Game"


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.

    Some shells/export flows set values like SNAKE_BOARD_SIZE="650".
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned


def _env_int(name: str, default: int) -> int:
    raw = _sanitize_env_value(os.getenv(name))
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@dataclass(frozen=True)
class GameSettings:
    board_size: int = BOARD_SIZE
    base_tick_ms: int = BASE_TICK_MS
    fps: int = DEFAULT_FPS
    log_level: str = DEFAULT_LOG_LEVEL
    window_title: str = DEFAULT_WINDOW_TITLE

    def validate(self) -> "GameSettings":
        if self.board_size <= SPAWN_INSET or self.board_size % TILE_SIZE != 0:
            raise ValueError(
                f"board size must be a multiple of {TILE_SIZE} larger than {SPAWN_INSET}, "
                f"got {self.board_size}"
            )
        if self.base_tick_ms <= 0:
            raise ValueError(f"base tick must be positive, got {self.base_tick_ms}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        return self

    def with_overrides(self, **overrides) -> "GameSettings":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes).validate()


def load_settings() -> GameSettings:
    """Build settings from the environment, falling back to the defaults."""
    return GameSettings(
        board_size=_env_int("SNAKE_BOARD_SIZE", BOARD_SIZE),
        base_tick_ms=_env_int("SNAKE_BASE_TICK_MS", BASE_TICK_MS),
        fps=_env_int("SNAKE_FPS", DEFAULT_FPS),
        log_level=(_sanitize_env_value(os.getenv("SNAKE_LOG_LEVEL")) or DEFAULT_LOG_LEVEL).upper(),
        window_title=_sanitize_env_value(os.getenv("SNAKE_WINDOW_TITLE")) or DEFAULT_WINDOW_TITLE,
    ).validate()
