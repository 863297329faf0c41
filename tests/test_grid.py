"""Tests for GridState - body movement, growth, collisions and food placement."""

import random
from collections import deque

import pytest

from grid_snake.grid import GridFullError, GridState, LogicError
from grid_snake.models import Direction


class FirstChoice(random.Random):
    def choice(self, seq):
        return seq[0]


class LastChoice(random.Random):
    def choice(self, seq):
        return seq[-1]


def make_grid(body, food=(0, 0), **kwargs):
    return GridState(body, food=food, **kwargs)


class TestMovement:
    def test_advance_right_shifts_head_and_drops_tail(self):
        grid = make_grid([(5, 5), (5, 6)])
        grid.advance(Direction.RIGHT)
        assert list(grid.body) == [(6, 5), (5, 5)]

    @pytest.mark.parametrize("direction,expected", [
        (Direction.UP, (5, 4)),
        (Direction.DOWN, (5, 6)),
        (Direction.LEFT, (4, 5)),
        (Direction.RIGHT, (6, 5)),
    ])
    def test_advance_offsets(self, direction, expected):
        grid = make_grid([(5, 5), (4, 5)])
        assert grid.advance(direction) == expected
        assert grid.head == expected
        assert len(grid) == 2

    def test_body_is_deque(self):
        assert isinstance(make_grid([(5, 5), (5, 6)]).body, deque)

    def test_empty_body_raises(self):
        grid = make_grid([])
        with pytest.raises(LogicError):
            grid.head
        with pytest.raises(LogicError):
            grid.tail
        with pytest.raises(LogicError):
            grid.advance(Direction.UP)


class TestGrowth:
    def test_grow_appends_one_cell(self):
        grid = make_grid([(5, 5), (5, 6)])
        grid.grow()
        assert len(grid) == 3
        assert list(grid.body)[:2] == [(5, 5), (5, 6)]
        assert grid.tail == (6, 6)

    def test_growth_survives_next_advance(self):
        grid = make_grid([(5, 5), (5, 6)])
        grid.grow()
        grid.advance(Direction.UP)
        assert list(grid.body) == [(5, 4), (5, 5), (5, 6)]


class TestQueries:
    def test_check_eat(self):
        grid = make_grid([(5, 5), (5, 6)], food=(5, 5))
        assert grid.check_eat()
        assert grid.check_eat((5, 5))
        grid.advance(Direction.RIGHT)
        assert not grid.check_eat()

    def test_collision_when_head_revisits_body(self):
        grid = make_grid([(3, 3), (4, 3), (4, 4), (3, 4), (3, 3)])
        assert grid.collision()

    def test_no_collision_with_distinct_cells(self):
        grid = make_grid([(3, 3), (4, 3), (4, 4), (3, 4)])
        assert not grid.collision()

    @pytest.mark.parametrize("head,outside", [
        ((20, 5), True),
        ((19, 19), False),
        ((-1, 0), True),
        ((0, 0), False),
        ((5, 20), True),
        ((5, -1), True),
    ])
    def test_out_of_bounds(self, head, outside):
        grid = make_grid([head, (10, 10)], columns=20, rows=20)
        assert grid.out_of_bounds() is outside


class TestFoodPlacement:
    def test_free_cells_excludes_body(self):
        grid = make_grid([(5, 5), (5, 6)])
        free = grid.free_cells()
        assert len(free) == 20 * 20 - 2
        assert (5, 5) not in free
        assert (5, 6) not in free

    def test_first_and_last_free_cells_are_selectable(self):
        body = [(0, 0), (0, 1)]
        assert make_grid(body, rng=FirstChoice()).place_food() == (0, 2)
        assert make_grid(body, rng=LastChoice()).place_food() == (19, 19)

    def test_food_never_on_body(self):
        rng = random.Random(7)
        for _ in range(200):
            cells = rng.sample([(x, y) for x in range(5) for y in range(5)], 20)
            grid = make_grid(cells, columns=5, rows=5, rng=rng)
            food = grid.place_food()
            assert food not in grid.body
            assert grid.food == food

    def test_every_free_cell_reachable(self):
        grid = make_grid([(0, 0), (0, 1)], columns=2, rows=2, rng=random.Random(3))
        seen = {grid.place_food() for _ in range(100)}
        assert seen == {(1, 0), (1, 1)}

    def test_full_grid_raises(self):
        grid = make_grid([(0, 0), (1, 0)], columns=2, rows=1)
        with pytest.raises(GridFullError):
            grid.place_food()
        assert issubclass(GridFullError, LogicError)
