"""Fixed-size wall grid with a single entrance and exit."""

from collections import deque
import logging
from pathlib import Path
from typing import List, Optional, Union

import numpy as np

from .data_models import Point, Directions

logger = logging.getLogger(__name__)

WALL_SYMBOL = '#'
OPEN_SYMBOL = '.'
ENTRANCE_SYMBOL = 'S'
EXIT_SYMBOL = 'E'


class Maze:
    """Rectangular grid of wall/open cells.

    The entrance is always (0, 0) and the exit (width - 1, height - 1).
    Walls are stored in a boolean array indexed as ``walls[y, x]``.
    """

    def __init__(self, width: int, height: int, walls: Optional[np.ndarray] = None):
        """Initialize maze.

        Args:
            width: Number of columns
            height: Number of rows
            walls: Optional (height, width) boolean wall array. The array is
                copied; an empty grid is created if omitted.
        """
        assert width > 0 and height > 0, f"Maze dimensions must be positive, got {width}x{height}"

        self.width = width
        self.height = height

        if walls is None:
            self.walls = np.zeros((height, width), dtype=bool)
        else:
            assert walls.shape == (height, width), \
                f"Expected wall array shape {(height, width)}, got {walls.shape}"
            self.walls = np.array(walls, dtype=bool, copy=True)

        self._key = None

    @classmethod
    def empty(cls, width: int, height: int) -> 'Maze':
        """Create a maze without any walls."""
        return cls(width, height)

    @property
    def entrance(self) -> Point:
        return Point(0, 0)

    @property
    def exit(self) -> Point:
        return Point(self.width - 1, self.height - 1)

    def is_terminal(self, point: Point) -> bool:
        """Whether the point is the entrance or the exit."""
        return point == self.entrance or point == self.exit

    def in_bounds(self, point: Point) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def is_wall(self, point: Point) -> bool:
        assert self.in_bounds(point), f"Point {point} outside {self.width}x{self.height} maze"
        return bool(self.walls[point.y, point.x])

    def set_wall(self, point: Point, has_wall: bool = True) -> None:
        """Set or clear a wall in place.

        Only used while building a maze; mazes handed to a search structure
        are derived with ``with_wall`` instead.
        """
        assert self.in_bounds(point), f"Point {point} outside {self.width}x{self.height} maze"
        self.walls[point.y, point.x] = has_wall
        self._key = None

    def with_wall(self, point: Point) -> 'Maze':
        """Return a copy of this maze with an extra wall at ``point``."""
        child = self.copy()
        child.set_wall(point, True)
        return child

    def copy(self) -> 'Maze':
        return Maze(self.width, self.height, self.walls)

    @property
    def wall_count(self) -> int:
        return int(np.count_nonzero(self.walls))

    def placeable_cells(self) -> List[Point]:
        """Open, non-terminal cells in row-major order."""
        cells = []
        for y, x in zip(*np.nonzero(~self.walls)):
            point = Point(int(x), int(y))
            if not self.is_terminal(point):
                cells.append(point)
        return cells

    def has_path_to_exit(self) -> bool:
        """Breadth-first reachability from the entrance to the exit."""
        if self.is_wall(self.entrance) or self.is_wall(self.exit):
            return False

        visited = np.zeros_like(self.walls)
        visited[0, 0] = True
        queue = deque([self.entrance])

        while queue:
            current = queue.popleft()
            if current == self.exit:
                return True

            for direction in Directions.ALL:
                nxt = current + direction.delta
                if self.in_bounds(nxt) and not visited[nxt.y, nxt.x] and not self.walls[nxt.y, nxt.x]:
                    visited[nxt.y, nxt.x] = True
                    queue.append(nxt)

        return False

    def canonical_key(self) -> str:
        """Row-major string of '1' (wall) / '0' (open), one symbol per cell."""
        if self._key is None:
            codes = self.walls.ravel().astype(np.uint8) + ord('0')
            self._key = codes.tobytes().decode('ascii')
        return self._key

    def to_text(self) -> str:
        """Human-readable grid, one row per line, symbols space separated."""
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                point = Point(x, y)
                if point == self.entrance:
                    row.append(ENTRANCE_SYMBOL)
                elif point == self.exit:
                    row.append(EXIT_SYMBOL)
                elif self.walls[y, x]:
                    row.append(WALL_SYMBOL)
                else:
                    row.append(OPEN_SYMBOL)
            lines.append(''.join(f"{symbol} " for symbol in row))
        return '\n'.join(lines) + '\n'

    @classmethod
    def from_text(cls, text: str) -> 'Maze':
        """Parse the format produced by ``to_text``.

        Raises:
            ValueError: On empty input, ragged rows or unknown symbols
        """
        rows = [line.split() for line in text.splitlines() if line.strip()]
        if not rows:
            raise ValueError("Maze text is empty")

        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} cells, expected {width}")

        walls = np.zeros((len(rows), width), dtype=bool)
        for y, row in enumerate(rows):
            for x, symbol in enumerate(row):
                if symbol == WALL_SYMBOL:
                    walls[y, x] = True
                elif symbol not in (OPEN_SYMBOL, ENTRANCE_SYMBOL, EXIT_SYMBOL):
                    raise ValueError(f"Unknown maze symbol {symbol!r} at ({x}, {y})")

        return cls(width, len(rows), walls)

    def save(self, path: Union[str, Path]) -> None:
        """Write the human-readable grid to ``path``."""
        with open(path, 'w') as f:
            f.write(self.to_text())

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'Maze':
        with open(path, 'r') as f:
            return cls.from_text(f.read())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            self.canonical_key() == other.canonical_key()

    def __hash__(self) -> int:
        return hash((self.width, self.height, self.canonical_key()))

    def __repr__(self) -> str:
        return f"Maze({self.width}x{self.height}, walls={self.wall_count})"
