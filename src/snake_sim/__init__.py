"""Snake Sim — tick-based snake simulation core."""

from snake_sim.config import SimulationConfig
from snake_sim.controls import sample_input
from snake_sim.engine import FrameState, GameEngine, MoveOutcome, SimulationState
from snake_sim.food import FoodManager
from snake_sim.grid import Cell, CellType, Grid
from snake_sim.loop import GameLoop
from snake_sim.snake import Direction, Snake

__all__ = [
    "Cell",
    "CellType",
    "Direction",
    "FoodManager",
    "FrameState",
    "GameEngine",
    "GameLoop",
    "Grid",
    "MoveOutcome",
    "SimulationConfig",
    "SimulationState",
    "Snake",
    "sample_input",
]
