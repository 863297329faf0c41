"""Game controller: turns ticks and input requests into grid updates."""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .constants import GRID_COLUMNS, GRID_ROWS, INITIAL_BODY, INITIAL_DIRECTION
from .grid import GridFullError, GridState
from .models import Direction, Snapshot

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    grid: GridState
    direction: Direction = Direction(INITIAL_DIRECTION)
    ended: bool = False
    won: bool = False


class GameController:
    def __init__(
        self,
        columns: int = GRID_COLUMNS,
        rows: int = GRID_ROWS,
        rng: Optional[random.Random] = None,
    ):
        self.columns = columns
        self.rows = rows
        self.rng = rng or random.Random()
        # First game always starts with food in the centre of the grid.
        self.state = self.new_state(food=(columns // 2, rows // 2))

    def new_state(self, food=None) -> GameState:
        grid = GridState(
            INITIAL_BODY,
            food=food,
            columns=self.columns,
            rows=self.rows,
            rng=self.rng,
        )
        if food is None:
            grid.place_food()
        return GameState(grid=grid, direction=Direction(INITIAL_DIRECTION))

    @property
    def grid(self) -> GridState:
        return self.state.grid

    @property
    def direction(self) -> Direction:
        return self.state.direction

    @property
    def ended(self) -> bool:
        return self.state.ended

    def tick(self):
        state = self.state
        if state.ended:
            return

        grid = state.grid
        if grid.check_eat():
            grid.grow()
            try:
                food = grid.place_food()
            except GridFullError:
                logger.info("Grid is full at length %d, game won", len(grid))
                state.ended = True
                state.won = True
                return
            logger.info("Food eaten, length %d, new food at %s", len(grid), food)

        grid.advance(state.direction)

        if grid.collision() or grid.out_of_bounds():
            state.ended = True
            logger.info("Game over at %s with length %d", grid.head, len(grid))

    def request_direction(self, direction: Direction) -> bool:
        """Change the heading for the next tick. Reversals are ignored."""
        if direction == self.state.direction.opposite:
            logger.debug("Ignoring reversal from %s to %s", self.state.direction.value, direction.value)
            return False
        self.state.direction = direction
        return True

    def request_restart(self) -> bool:
        if not self.state.ended:
            logger.debug("Ignoring restart while running")
            return False
        self.state = self.new_state()
        logger.info("Game restarted, food at %s", self.state.grid.food)
        return True

    def snapshot(self) -> Snapshot:
        state = self.state
        return Snapshot(
            body=tuple(state.grid.body),
            food=state.grid.food,
            direction=state.direction,
            ended=state.ended,
            won=state.won,
        )
