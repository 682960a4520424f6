"""Bug walk simulator.

The bug starts at the entrance and always moves to the in-bounds open
neighbor it has visited the fewest times. Ties are broken by keeping the
previous direction when possible, otherwise by the highest direction
priority. The number of moves needed to reach the exit is the maze score.

The walk is fully deterministic for a given maze, which is what makes
caching scores by canonical layout sound.
"""

import logging
from typing import Optional

import numpy as np

from buglab.core.data_models import Point, Direction, Directions, UNSOLVABLE, DIVERGED
from buglab.core.maze import Maze

logger = logging.getLogger(__name__)

WALL_VISITS = -1
STEPS_PER_CELL = 1000


def step_limit(width: int, height: int) -> int:
    """Maximum number of moves before a walk counts as diverged."""
    return width * height * STEPS_PER_CELL


def choose_direction(position: Point,
                     visit_counts: np.ndarray,
                     last_direction: Direction) -> Optional[Direction]:
    """Pick the next move from ``position``.

    Args:
        position: Current bug position
        visit_counts: (height, width) visit counter, ``WALL_VISITS`` on walls
        last_direction: Direction of the previous move

    Returns:
        The chosen direction, or None if every neighbor is blocked
    """
    height, width = visit_counts.shape
    min_visits = None
    best = []

    for direction in Directions.ALL:
        nxt = position + direction.delta
        if not (0 <= nxt.x < width and 0 <= nxt.y < height):
            continue
        visits = visit_counts[nxt.y, nxt.x]
        if visits == WALL_VISITS:
            continue

        if min_visits is None or visits < min_visits:
            min_visits = visits
            best = [direction]
        elif visits == min_visits:
            best.append(direction)

    if not best:
        return None
    if last_direction in best:
        return last_direction
    return max(best, key=lambda d: d.priority)


def calculate_score(maze: Maze, max_steps: Optional[int] = None) -> int:
    """Run the bug walk and return its step count.

    Args:
        maze: Maze to evaluate
        max_steps: Divergence bound (defaults to ``step_limit`` for the maze)

    Returns:
        Number of moves, ``UNSOLVABLE`` or ``DIVERGED``
    """
    if not maze.has_path_to_exit():
        return UNSOLVABLE

    if max_steps is None:
        max_steps = step_limit(maze.width, maze.height)

    visit_counts = np.zeros((maze.height, maze.width), dtype=np.int64)
    visit_counts[maze.walls] = WALL_VISITS

    position = maze.entrance
    goal = maze.exit
    visit_counts[position.y, position.x] = 1
    last_direction = Directions.DOWN
    steps = 0

    while position != goal:
        if steps > max_steps:
            logger.debug(f"Walk diverged after {steps} steps on {maze!r}")
            return DIVERGED
        steps += 1

        direction = choose_direction(position, visit_counts, last_direction)
        if direction is None:
            return UNSOLVABLE

        last_direction = direction
        position = position + direction.delta
        visit_counts[position.y, position.x] += 1

    return steps
