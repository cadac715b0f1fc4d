"""Game configuration constants and the difficulty table."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from snake_master.grid import Cell
from snake_master.snake import Direction, is_contiguous

logger = logging.getLogger(__name__)


class Difficulty(enum.Enum):
    """Named speed levels, declared from slowest to fastest."""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"
    INSANE = "insane"

    @classmethod
    def ordered(cls) -> list[Difficulty]:
        """Return all levels from slowest to fastest."""
        return list(cls)

    @classmethod
    def parse(cls, value: Difficulty | str) -> Difficulty:
        """Resolve a level from an enum member or a case-insensitive name."""
        if isinstance(value, Difficulty):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Difficulty must be a name, got {value!r}.")
        try:
            return cls(value.strip().lower())
        except ValueError:
            names = ", ".join(d.value for d in cls)
            raise ValueError(
                f"Unknown difficulty {value!r}; expected one of: {names}."
            ) from None


# Tick interval per level, in milliseconds.
DIFFICULTY_INTERVALS_MS: dict[Difficulty, int] = {
    Difficulty.EASY: 500,
    Difficulty.NORMAL: 300,
    Difficulty.HARD: 180,
    Difficulty.INSANE: 100,
}


def tick_interval_ms(level: Difficulty | str) -> int:
    """Look up the scheduler interval for a difficulty level."""
    return DIFFICULTY_INTERVALS_MS[Difficulty.parse(level)]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _as_cell(value: object, name: str) -> tuple[int, int]:
    """Validate an ``(x, z)`` pair given as a tuple or JSON list."""
    if (
        not isinstance(value, (tuple, list))
        or len(value) != 2
        or not all(_is_int(v) for v in value)
    ):
        raise ValueError(f"{name} must be an (x, z) pair of ints, got {value!r}.")
    return int(value[0]), int(value[1])


@dataclass(frozen=True)
class GameConfig:
    """Static configuration for a single play session.

    Cells are ``(x, z)`` pairs. Supports JSON serialization so a session can
    be reproduced from a file. Every validation failure raises ``ValueError``.
    """

    grid_size: int = 15
    initial_snake: tuple[tuple[int, int], ...] = ((7, 7),)
    initial_food: tuple[int, int] = (12, 12)
    initial_direction: Direction = Direction.RIGHT
    score_increment: int = 10
    food_max_attempts: int = 100
    difficulty: Difficulty = Difficulty.EASY
    seed: int | None = None
    intervals_ms: dict[Difficulty, int] = field(
        default_factory=lambda: dict(DIFFICULTY_INTERVALS_MS),
    )

    def __post_init__(self) -> None:
        for name in ("grid_size", "score_increment", "food_max_attempts"):
            if not _is_int(getattr(self, name)):
                raise ValueError(f"{name} must be an int.")
        if self.seed is not None and not (_is_int(self.seed) and self.seed >= 0):
            raise ValueError("seed must be a non-negative int or null.")
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.score_increment < 1:
            raise ValueError("score_increment must be at least 1.")
        if self.food_max_attempts < 1:
            raise ValueError("food_max_attempts must be at least 1.")

        # Normalize JSON-shaped and string inputs; frozen, so bypass __setattr__.
        if not isinstance(self.initial_snake, (tuple, list)) or not self.initial_snake:
            raise ValueError("initial_snake must contain at least 1 cell.")
        cells = tuple(_as_cell(c, "initial_snake cell") for c in self.initial_snake)
        food = _as_cell(self.initial_food, "initial_food")
        try:
            direction = Direction.parse(self.initial_direction)
        except ValueError as exc:
            raise ValueError(f"Invalid initial_direction: {exc}") from None
        object.__setattr__(self, "initial_snake", cells)
        object.__setattr__(self, "initial_food", food)
        object.__setattr__(self, "initial_direction", direction)
        object.__setattr__(self, "difficulty", Difficulty.parse(self.difficulty))
        object.__setattr__(self, "intervals_ms", self._parse_intervals(self.intervals_ms))

        for x, z in [*cells, food]:
            if not (0 <= x < self.grid_size and 0 <= z < self.grid_size):
                raise ValueError(
                    f"Cell ({x}, {z}) lies outside the {self.grid_size}x"
                    f"{self.grid_size} grid."
                )
        if len(set(cells)) != len(cells):
            raise ValueError("initial_snake must not overlap itself.")
        if not is_contiguous([Cell(*c) for c in cells]):
            raise ValueError(
                "initial_snake segments must be exactly one grid step apart."
            )
        if food in cells:
            raise ValueError("initial_food must not lie on the initial snake.")
        if len(cells) > 1:
            dx, dz = direction.value
            if (cells[0][0] + dx, cells[0][1] + dz) == cells[1]:
                raise ValueError(
                    f"initial_direction {direction.name} points into the "
                    "second segment of initial_snake."
                )

    @staticmethod
    def _parse_intervals(raw: object) -> dict[Difficulty, int]:
        if not isinstance(raw, dict):
            raise ValueError("intervals_ms must be a mapping of level to ms.")
        intervals = {Difficulty.parse(k): v for k, v in raw.items()}
        if not all(_is_int(ms) for ms in intervals.values()):
            raise ValueError("Tick intervals must be ints.")
        missing = [d.value for d in Difficulty if d not in intervals]
        if missing:
            raise ValueError(f"No tick interval configured for: {missing}.")
        if any(ms <= 0 for ms in intervals.values()):
            raise ValueError("Tick intervals must be positive.")
        return intervals

    def interval_for(self, level: Difficulty | str) -> int:
        """Tick interval in ms for *level* under this configuration."""
        return self.intervals_ms[Difficulty.parse(level)]

    def to_dict(self) -> dict:
        """Serialize to a plain, JSON-safe dict."""
        raw = asdict(self)
        raw["initial_snake"] = [list(c) for c in self.initial_snake]
        raw["initial_food"] = list(self.initial_food)
        raw["initial_direction"] = self.initial_direction.name
        raw["difficulty"] = self.difficulty.value
        raw["intervals_ms"] = {
            d.value: ms for d, ms in self.intervals_ms.items()
        }
        return raw

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        """Build a config from JSON-shaped data, rejecting unknown keys."""
        if not isinstance(raw, dict):
            raise ValueError("Config must be a JSON object.")
        unknown = sorted(set(raw) - {f.name for f in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}.")
        return cls(**raw)
