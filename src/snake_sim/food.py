"""Food spawning and eating logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_sim.grid import Cell, Grid

logger = logging.getLogger(__name__)


class FoodManager:
    """Manages food placement on the grid.

    Each spawn attempt draws a single candidate cell from a seeded NumPy
    RNG. A candidate that lands on the snake (or on existing food) is
    dropped rather than redrawn, so crowded boards spawn food more slowly.
    """

    def __init__(
        self,
        grid: Grid,
        max_food: int = 10,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_food < 1:
            raise ValueError("max_food must be at least 1.")
        self.grid = grid
        self.max_food = max_food
        self.rng = rng if rng is not None else np.random.default_rng()
        self.positions: list[Cell] = []

    def __len__(self) -> int:
        return len(self.positions)

    def spawn_tick(self, snake_cells: Collection[Cell]) -> Cell | None:
        """Attempt one spawn. Returns the new food cell, or ``None``."""
        if len(self.positions) >= self.max_food:
            return None

        x = int(self.rng.integers(self.grid.width))
        y = int(self.rng.integers(self.grid.height))
        candidate = (x, y)
        if candidate in snake_cells or candidate in self.positions:
            return None

        self.positions.append(candidate)
        logger.debug("Spawned food at %s (%d live).", candidate, len(self.positions))
        return candidate

    def eat(self, head: Cell) -> bool:
        """Remove the food under *head*. Returns True if something was eaten."""
        if head in self.positions:
            self.positions.remove(head)
            logger.debug("Food eaten at %s.", head)
            return True
        return False

    def clear(self) -> None:
        """Remove all food."""
        self.positions.clear()

    def to_dict(self) -> dict:
        """Serialize food state to a dictionary."""
        return {
            "positions": [list(p) for p in self.positions],
            "max_food": self.max_food,
        }
