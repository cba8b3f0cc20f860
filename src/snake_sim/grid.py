"""Arena geometry for the snake simulation."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

# A grid coordinate as (x, y); y grows upward.
Cell = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in occupancy arrays."""

    EMPTY = 0
    HEAD = 1
    BODY = 2
    FOOD = 3


class Grid:
    """Fixed-size arena with bounds checking.

    Cells are addressed as ``(x, y)``. Occupancy arrays produced by
    :meth:`occupancy` are indexed ``[y, x]`` to match NumPy row ordering.
    """

    def __init__(self, width: int = 10, height: int = 10) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        self.width = width
        self.height = height

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the arena."""
        return 0 <= x < self.width and 0 <= y < self.height

    def occupancy(
        self,
        snake: Iterable[Cell] = (),
        food: Iterable[Cell] = (),
    ) -> np.ndarray:
        """Return an ``int8`` array of :class:`CellType` codes.

        The first snake cell is painted as the head. Food is painted first
        so the snake wins if the two ever overlap.
        """
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        for x, y in food:
            cells[y, x] = CellType.FOOD
        for i, (x, y) in enumerate(snake):
            cells[y, x] = CellType.HEAD if i == 0 else CellType.BODY
        return cells

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {"width": self.width, "height": self.height}
