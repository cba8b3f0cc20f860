"""Translate pressed keys into a requested heading."""

from __future__ import annotations

from collections.abc import Collection

from snake_sim.snake import Direction

# Checked in order; the first direction with a pressed key wins.
PRECEDENCE: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.RIGHT,
    Direction.LEFT,
)

KEY_BINDINGS: dict[Direction, frozenset[str]] = {
    Direction.UP: frozenset({"up", "w"}),
    Direction.DOWN: frozenset({"down", "s"}),
    Direction.RIGHT: frozenset({"right", "d"}),
    Direction.LEFT: frozenset({"left", "a"}),
}


def sample_input(pressed: Collection[str]) -> Direction | None:
    """Return the requested direction for a set of pressed key names.

    Key names are case-insensitive; unknown keys are ignored.
    """
    keys = {k.lower() for k in pressed}
    for direction in PRECEDENCE:
        if keys & KEY_BINDINGS[direction]:
            return direction
    return None
