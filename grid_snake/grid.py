"""Snake body and food mechanics on a fixed grid."""

import random
from collections import deque
from typing import Iterable, Optional

from .constants import GRID_COLUMNS, GRID_ROWS, GROW_OFFSET
from .models import Cell, Direction


class LogicError(RuntimeError):
    """A grid invariant was broken."""


class GridFullError(LogicError):
    """No free cell is left to place food on."""


class GridState:
    """Owns the snake body (head first) and the food cell.

    Movement pushes a new head and drops the tail, so the body is kept in a
    deque. Cells between head and tail are just the trail the head left
    behind; nothing here checks that they are adjacent.
    """

    def __init__(
        self,
        body: Iterable[Cell],
        food: Cell,
        columns: int = GRID_COLUMNS,
        rows: int = GRID_ROWS,
        rng: Optional[random.Random] = None,
    ):
        self.body: deque[Cell] = deque(body)
        self.food = food
        self.columns = columns
        self.rows = rows
        self.rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        if not self.body:
            raise LogicError("snake has no body")
        return self.body[0]

    @property
    def tail(self) -> Cell:
        if not self.body:
            raise LogicError("snake has no body")
        return self.body[-1]

    def advance(self, direction: Direction) -> Cell:
        hx, hy = self.head
        dx, dy = direction.offset
        new_head = (hx + dx, hy + dy)
        self.body.appendleft(new_head)
        self.body.pop()
        return new_head

    def grow(self) -> Cell:
        tx, ty = self.tail
        dx, dy = GROW_OFFSET
        new_tail = (tx + dx, ty + dy)
        self.body.append(new_tail)
        return new_tail

    def check_eat(self, food: Optional[Cell] = None) -> bool:
        if food is None:
            food = self.food
        return self.head == food

    def collision(self) -> bool:
        head = self.head
        return any(cell == head for cell in list(self.body)[1:])

    def out_of_bounds(self) -> bool:
        x, y = self.head
        return x < 0 or x >= self.columns or y < 0 or y >= self.rows

    def free_cells(self) -> list[Cell]:
        occupied = set(self.body)
        return [
            (x, y)
            for x in range(self.columns)
            for y in range(self.rows)
            if (x, y) not in occupied
        ]

    def place_food(self) -> Cell:
        free = self.free_cells()
        if not free:
            raise GridFullError(f"no free cell on a {self.columns}x{self.rows} grid")
        self.food = self.rng.choice(free)
        return self.food
