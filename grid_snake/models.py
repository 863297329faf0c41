"""Data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import DIRECTIONS, OPPOSITES

Cell = tuple[int, int]


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Cell:
        return DIRECTIONS[self.value]

    @property
    def opposite(self) -> "Direction":
        return Direction(OPPOSITES[self.value])

    @classmethod
    def parse(cls, value: object) -> Optional["Direction"]:
        """Map a client-supplied name to a Direction, or None if unknown."""
        if isinstance(value, str) and value.lower() in DIRECTIONS:
            return cls(value.lower())
        return None


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the game handed to renderers."""

    body: tuple[Cell, ...]
    food: Cell
    direction: Direction
    ended: bool
    won: bool = False

    def to_dict(self) -> dict:
        return {
            "body": [[x, y] for x, y in self.body],
            "food": list(self.food),
            "direction": self.direction.value,
            "ended": self.ended,
            "won": self.won,
        }
