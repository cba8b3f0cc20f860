"""Render-facing views of a :class:`~snake_sim.engine.FrameState`.

The simulation never deals in pixels. These helpers give a presentation
layer logical positions with a size category, a tile-to-screen mapping,
and a plain-text board for terminals.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snake_sim.grid import Cell, CellType, Grid

if TYPE_CHECKING:
    from snake_sim.engine import FrameState


class SizeCategory(enum.Enum):
    """Sprite size relative to one tile."""

    HEAD = 0.8
    BODY = 0.65
    FOOD = 0.8

    @property
    def scale(self) -> float:
        return self.value


@dataclass(frozen=True)
class RenderItem:
    x: int
    y: int
    category: SizeCategory


_GLYPHS: dict[int, str] = {
    CellType.EMPTY: ".",
    CellType.HEAD: "@",
    CellType.BODY: "o",
    CellType.FOOD: "*",
}


def render_items(frame: FrameState) -> list[RenderItem]:
    """List every occupied cell, food first, then head, then body."""
    items = [RenderItem(x, y, SizeCategory.FOOD) for x, y in frame.food]
    for i, (x, y) in enumerate(frame.snake):
        category = SizeCategory.HEAD if i == 0 else SizeCategory.BODY
        items.append(RenderItem(x, y, category))
    return items


def to_screen(
    cell: Cell,
    grid_size: tuple[int, int],
    window_size: tuple[float, float],
) -> tuple[float, float]:
    """Map a cell to the centre of its tile in a window centred on (0, 0)."""
    x, y = cell
    grid_w, grid_h = grid_size
    win_w, win_h = window_size
    tile_w = win_w / grid_w
    tile_h = win_h / grid_h
    px = x * tile_w - win_w / 2 + tile_w / 2
    py = y * tile_h - win_h / 2 + tile_h / 2
    return px, py


def occupancy(frame: FrameState, grid: Grid) -> np.ndarray:
    """Return the frame as a ``(height, width)`` array of :class:`CellType`."""
    return grid.occupancy(snake=frame.snake, food=frame.food)


def render_text(frame: FrameState, grid: Grid) -> str:
    """Draw the frame as text, highest ``y`` on the first line."""
    cells = occupancy(frame, grid)
    rows = ["".join(_GLYPHS[int(v)] for v in row) for row in cells[::-1]]
    return "\n".join(rows)
