"""Tests for the Snake module."""

import pytest

from snake_sim.snake import Direction, Snake


class TestDirection:
    def test_opposites(self):
        assert Direction.UP.opposite() == Direction.DOWN
        assert Direction.DOWN.opposite() == Direction.UP
        assert Direction.LEFT.opposite() == Direction.RIGHT
        assert Direction.RIGHT.opposite() == Direction.LEFT

    def test_opposite_is_involution(self):
        for direction in Direction:
            assert direction.opposite().opposite() == direction

    def test_up_increases_y(self):
        assert Direction.UP.value == (0, 1)
        assert Direction.RIGHT.value == (1, 0)


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake((3, 3))
        assert snake.head == (3, 3)
        assert snake.segments == [(3, 3), (3, 2)]
        assert snake.direction == Direction.UP
        assert len(snake) == 2

    def test_trailing_segment_opposite_to_heading(self):
        snake = Snake((5, 5), Direction.RIGHT)
        assert snake.tail == (4, 5)

    def test_from_cells(self):
        cells = [(5, 5), (5, 4), (4, 4)]
        snake = Snake.from_cells(cells, Direction.UP)
        assert snake.segments == cells
        assert snake.tail == (4, 4)

    def test_from_cells_requires_two_segments(self):
        with pytest.raises(ValueError, match="at least 2"):
            Snake.from_cells([(1, 1)])


class TestSnakeDirection:
    def test_reversal_ignored_for_every_heading(self):
        for current in Direction:
            snake = Snake((5, 5), current)
            snake.request_direction(current.opposite())
            assert snake.direction == current

    def test_non_reversal_applied_for_every_pair(self):
        for current in Direction:
            for requested in Direction:
                if requested == current.opposite():
                    continue
                snake = Snake((5, 5), current)
                snake.request_direction(requested)
                assert snake.direction == requested

    def test_no_input_keeps_heading(self):
        snake = Snake((5, 5), Direction.LEFT)
        snake.request_direction(None)
        assert snake.direction == Direction.LEFT


class TestSnakeQueries:
    def test_next_head(self):
        snake = Snake((5, 5), Direction.UP)
        assert snake.next_head() == (5, 6)
        snake.request_direction(Direction.LEFT)
        assert snake.next_head() == (4, 5)

    def test_occupies(self):
        snake = Snake((5, 5))
        assert snake.occupies((5, 5))
        assert snake.occupies((5, 4))
        assert not snake.occupies((0, 0))

    def test_append_and_clear(self):
        snake = Snake((5, 5))
        snake.append_segment((5, 3))
        assert len(snake) == 3
        snake.clear()
        assert len(snake) == 0


class TestSnakeSerialization:
    def test_to_dict(self):
        d = Snake((5, 5)).to_dict()
        assert d["segments"] == [[5, 5], [5, 4]]
        assert d["direction"] == "UP"
