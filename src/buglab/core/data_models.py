"""Core data models for the maze optimizer."""

from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .maze import Maze


# Score sentinels
UNSOLVABLE = -1  # No entrance->exit path, or the walker got stuck
DIVERGED = -2  # Walk exceeded its step bound


def is_valid_score(score: int) -> bool:
    """Return True if the score is a real step count."""
    return score >= 0


@dataclass(frozen=True)
class Point:
    """Integer grid coordinate (x is the column, y is the row)."""

    x: int
    y: int

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Direction:
    """Unit move with a fixed tie-break priority (higher wins)."""

    name: str
    delta: Point
    priority: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self.delta == other.delta

    def __hash__(self) -> int:
        return hash(self.delta)


class Directions:
    """The four walker directions."""

    LEFT = Direction("left", Point(-1, 0), 1)
    UP = Direction("up", Point(0, -1), 2)
    RIGHT = Direction("right", Point(1, 0), 3)
    DOWN = Direction("down", Point(0, 1), 4)

    ALL: Tuple[Direction, ...] = (UP, DOWN, LEFT, RIGHT)


@dataclass
class SolverState:
    """A maze together with its already computed score."""

    maze: 'Maze'
    score: int
