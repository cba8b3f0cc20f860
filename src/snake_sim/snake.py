"""Snake body segments and heading state."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from snake_sim.grid import Cell


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) unit vectors; Up increases y."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the heading that would reverse this one."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """An ordered list of (x, y) segments plus the current heading.

    The head is ``segments[0]``; the tail is ``segments[-1]``. A new snake
    always has a head and one trailing segment placed opposite to its
    heading.
    """

    def __init__(self, head: Cell, direction: Direction = Direction.UP) -> None:
        dx, dy = direction.value
        x, y = head
        self.segments: list[Cell] = [(x, y), (x - dx, y - dy)]
        self.direction = direction

    @classmethod
    def from_cells(
        cls, cells: Iterable[Cell], direction: Direction = Direction.UP,
    ) -> Snake:
        """Build a snake from explicit segment cells, head first."""
        segments = [(int(x), int(y)) for x, y in cells]
        if len(segments) < 2:
            raise ValueError("Snake needs at least 2 segments.")
        snake = cls(segments[0], direction)
        snake.segments = segments
        return snake

    @property
    def head(self) -> Cell:
        """Return the head cell."""
        return self.segments[0]

    @property
    def tail(self) -> Cell:
        """Return the tail cell."""
        return self.segments[-1]

    def __len__(self) -> int:
        return len(self.segments)

    def request_direction(self, requested: Direction | None) -> None:
        """Change heading, ignoring 180° reversals and missing input."""
        if requested is None:
            return
        if requested != self.direction.opposite():
            self.direction = requested

    def next_head(self) -> Cell:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        x, y = self.head
        return x + dx, y + dy

    def occupies(self, cell: Cell) -> bool:
        """Check whether any segment sits on *cell*."""
        return cell in self.segments

    def append_segment(self, cell: Cell) -> None:
        """Attach a new tail segment at *cell*."""
        self.segments.append(cell)

    def clear(self) -> None:
        """Drop every segment."""
        self.segments.clear()

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "segments": [list(seg) for seg in self.segments],
            "direction": self.direction.name,
        }
