"""Tunable parameters for a simulation session."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Arena, food and timing configuration.

    Supports JSON serialization for reproducible runs.
    """

    # Arena
    width: int = 10
    height: int = 10
    spawn: tuple[int, int] = (3, 3)

    # Food
    max_food: int = 10
    food_spawn_every: int = 1

    # Timing (seconds per movement tick)
    tick_interval: float = 0.15

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.width < 4 or self.height < 4:
            raise ValueError("width and height must each be at least 4.")
        if self.max_food < 1:
            raise ValueError("max_food must be at least 1.")
        if self.food_spawn_every < 1:
            raise ValueError("food_spawn_every must be at least 1.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")

        # The spawn snake faces Up, so its second segment sits one row below.
        x, y = self.spawn
        if not (0 <= x < self.width and 1 <= y < self.height):
            raise ValueError(
                f"spawn {self.spawn} does not fit a {self.width}x{self.height} "
                "grid with its trailing segment."
            )

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["spawn"] = list(self.spawn)
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if "spawn" in raw:
            raw["spawn"] = tuple(raw["spawn"])
        return cls(**raw)
