"""Fixed-rate driver separating frame cadence from simulation cadence."""

from __future__ import annotations

import logging
from collections.abc import Collection

from snake_sim.controls import sample_input
from snake_sim.engine import FrameState, GameEngine
from snake_sim.snake import Direction

logger = logging.getLogger(__name__)


class GameLoop:
    """Feeds per-frame input into an engine ticking at a fixed interval.

    Input is sampled on every :meth:`frame`; the most recent non-empty
    sample is handed to the engine when the next tick fires, then
    discarded. At most one tick fires per frame.
    """

    def __init__(
        self,
        engine: GameEngine,
        tick_interval: float | None = None,
    ) -> None:
        interval = (
            tick_interval if tick_interval is not None
            else engine.config.tick_interval
        )
        if interval <= 0:
            raise ValueError("tick_interval must be positive.")
        self.engine = engine
        self.tick_interval = interval
        self.latest_frame: FrameState = engine.snapshot()
        self._elapsed = 0.0
        self._sampled: Direction | None = None

    @property
    def pending_direction(self) -> Direction | None:
        return self._sampled

    def frame(
        self, dt: float, pressed: Collection[str] = (),
    ) -> FrameState | None:
        """Process one render frame lasting *dt* seconds.

        Returns the new :class:`FrameState` if a tick fired, else ``None``.
        """
        if dt < 0:
            raise ValueError("dt must be non-negative.")

        requested = sample_input(pressed)
        if requested is not None:
            self._sampled = requested

        self._elapsed += dt
        if self._elapsed < self.tick_interval:
            return None

        # Missed whole intervals are dropped rather than replayed.
        self._elapsed = (self._elapsed - self.tick_interval) % self.tick_interval
        frame = self.engine.tick(self._sampled)
        self._sampled = None
        self.latest_frame = frame
        return frame
