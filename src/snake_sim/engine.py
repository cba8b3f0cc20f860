"""Tick-based simulation engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from snake_sim.config import SimulationConfig
from snake_sim.food import FoodManager
from snake_sim.grid import Cell, Grid
from snake_sim.snake import Direction, Snake

logger = logging.getLogger(__name__)


class MoveOutcome(enum.Enum):
    """Result of advancing the snake by one cell."""

    CONTINUE = "continue"
    COLLIDED = "collided"


@dataclass
class SimulationState:
    """All mutable game state, owned by a single :class:`GameEngine`."""

    snake: Snake
    food: FoodManager
    growth_pending: bool = False
    last_tail_position: Cell | None = None
    tick: int = 0
    score: int = 0
    resets: int = 0


@dataclass(frozen=True)
class FrameState:
    """Immutable snapshot of the game after one tick."""

    tick: int
    snake: tuple[Cell, ...]
    food: tuple[Cell, ...]
    direction: Direction
    score: int
    just_reset: bool

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def length(self) -> int:
        return len(self.snake)

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation."""
        return {
            "tick": self.tick,
            "snake": [list(c) for c in self.snake],
            "food": [list(c) for c in self.food],
            "direction": self.direction.name,
            "score": self.score,
            "length": self.length,
            "just_reset": self.just_reset,
        }


def advance(state: SimulationState, grid: Grid) -> MoveOutcome:
    """Move the snake one cell along its heading.

    The new head is checked against the body as it was *before* the move,
    tail included, so the head may not enter the cell the tail is about to
    leave. Trailing segments copy their predecessor's pre-move cell. On
    collision the snake is left untouched.
    """
    snake = state.snake
    if not snake.segments:
        raise RuntimeError(
            "Cannot advance a snake with no segments; reset was skipped."
        )

    before = list(snake.segments)
    new_head = snake.next_head()

    if not grid.in_bounds(*new_head) or new_head in before:
        return MoveOutcome.COLLIDED

    snake.segments[0] = new_head
    for i in range(1, len(before)):
        snake.segments[i] = before[i - 1]
    state.last_tail_position = before[-1]
    return MoveOutcome.CONTINUE


def check_eat(state: SimulationState) -> None:
    """Consume food under the head and schedule one growth."""
    if state.food.eat(state.snake.head):
        state.growth_pending = True
        state.score += 1


def apply_growth(state: SimulationState) -> None:
    """Append a tail segment where the old tail was, if growth is pending."""
    if not state.growth_pending:
        return
    state.growth_pending = False
    if state.last_tail_position is None:
        return
    state.snake.append_segment(state.last_tail_position)
    logger.debug(
        "Snake grew to %d at %s.", len(state.snake), state.last_tail_position,
    )


class GameEngine:
    """Single-snake, tick-based simulation engine.

    The engine owns the grid and the :class:`SimulationState`. Each call to
    :meth:`tick` runs input, movement, eating, growth, game-over handling
    and food spawning in that fixed order and returns a :class:`FrameState`.
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config or SimulationConfig()
        self.config = cfg
        self.grid = Grid(width=cfg.width, height=cfg.height)
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.state = SimulationState(
            snake=Snake(cfg.spawn, Direction.UP),
            food=FoodManager(self.grid, max_food=cfg.max_food, rng=self.rng),
        )

    @property
    def snake(self) -> Snake:
        return self.state.snake

    @property
    def food(self) -> FoodManager:
        return self.state.food

    def tick(self, input_direction: Direction | None = None) -> FrameState:
        """Advance the simulation by one step."""
        state = self.state
        state.tick += 1

        state.snake.request_direction(input_direction)

        outcome = advance(state, self.grid)
        if outcome is MoveOutcome.COLLIDED:
            logger.info(
                "Snake collided at tick %d with length %d.",
                state.tick, len(state.snake),
            )
            self.reset()
            return self.snapshot(just_reset=True)

        check_eat(state)
        apply_growth(state)

        if state.tick % self.config.food_spawn_every == 0:
            state.food.spawn_tick(state.snake.segments)

        return self.snapshot()

    def reset(self) -> None:
        """Discard all food and segments and respawn the snake."""
        state = self.state
        state.food.clear()
        state.snake.clear()
        state.snake = Snake(self.config.spawn, Direction.UP)
        state.growth_pending = False
        state.last_tail_position = None
        state.score = 0
        state.resets += 1
        logger.info("Game reset (%d so far).", state.resets)

    def snapshot(self, just_reset: bool = False) -> FrameState:
        """Return an immutable view of the current state."""
        state = self.state
        return FrameState(
            tick=state.tick,
            snake=tuple(state.snake.segments),
            food=tuple(state.food.positions),
            direction=state.snake.direction,
            score=state.score,
            just_reset=just_reset,
        )
