"""Tests for the FoodManager module."""

import numpy as np
import pytest

from snake_sim.food import FoodManager
from snake_sim.grid import Grid


class TestFoodManagerInit:
    def test_default(self):
        manager = FoodManager(Grid())
        assert manager.max_food == 10
        assert manager.positions == []

    def test_invalid_max_food(self):
        with pytest.raises(ValueError, match="at least 1"):
            FoodManager(Grid(), max_food=0)


class TestFoodSpawning:
    def test_spawn_in_bounds(self):
        grid = Grid(width=6, height=5)
        manager = FoodManager(grid, rng=np.random.default_rng(0))
        for _ in range(50):
            cell = manager.spawn_tick([])
            if cell is not None:
                assert grid.in_bounds(*cell)

    def test_never_spawns_on_snake(self):
        grid = Grid(width=4, height=4)
        snake = {(x, y) for x in range(4) for y in range(3)}
        manager = FoodManager(grid, max_food=1, rng=np.random.default_rng(7))
        spawned = 0
        for _ in range(500):
            cell = manager.spawn_tick(snake)
            if cell is not None:
                assert cell not in snake
                spawned += 1
                manager.clear()
        assert spawned > 0

    def test_full_board_spawns_nothing(self):
        grid = Grid(width=4, height=4)
        snake = [(x, y) for x in range(4) for y in range(4)]
        manager = FoodManager(grid, rng=np.random.default_rng(1))
        for _ in range(50):
            assert manager.spawn_tick(snake) is None
        assert len(manager) == 0

    def test_respects_cap(self):
        manager = FoodManager(
            Grid(), max_food=2, rng=np.random.default_rng(42),
        )
        for _ in range(200):
            manager.spawn_tick([])
        assert len(manager.positions) == 2
        assert manager.spawn_tick([]) is None

    def test_no_duplicate_food(self):
        manager = FoodManager(
            Grid(width=4, height=4), max_food=10,
            rng=np.random.default_rng(3),
        )
        for _ in range(300):
            manager.spawn_tick([])
        assert len(set(manager.positions)) == len(manager.positions)

    def test_spawn_deterministic(self):
        """Same seed produces same food positions."""
        assert self._spawn_with_seed(42) == self._spawn_with_seed(42)

    @staticmethod
    def _spawn_with_seed(seed: int) -> list[tuple[int, int]]:
        manager = FoodManager(Grid(), rng=np.random.default_rng(seed))
        for _ in range(5):
            manager.spawn_tick([(3, 3), (3, 2)])
        return manager.positions


class TestFoodEating:
    def test_eat_existing(self):
        manager = FoodManager(Grid())
        manager.positions.extend([(1, 1), (2, 2)])
        assert manager.eat((1, 1))
        assert manager.positions == [(2, 2)]

    def test_eat_nothing(self):
        manager = FoodManager(Grid())
        manager.positions.append((1, 1))
        assert not manager.eat((0, 0))
        assert manager.positions == [(1, 1)]


class TestFoodSerialization:
    def test_to_dict(self):
        manager = FoodManager(Grid(), max_food=3)
        manager.positions.append((4, 2))
        d = manager.to_dict()
        assert d["max_food"] == 3
        assert d["positions"] == [[4, 2]]
