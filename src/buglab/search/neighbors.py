"""Neighbor generation: derive layouts by adding walls."""

from collections import deque
from typing import Container, List

from buglab.core.maze import Maze


def single_wall_neighbors(maze: Maze) -> List[Maze]:
    """All layouts reachable by walling exactly one placeable cell."""
    return [maze.with_wall(point) for point in maze.placeable_cells()]


def generate_unique_candidates(maze: Maze, depth: int, visited: Container[str]) -> List[Maze]:
    """Layouts reachable by adding between 1 and ``depth`` walls.

    Layouts are expanded breadth-first and deduplicated within the call.
    Layouts whose canonical key is in ``visited`` are still expanded but not
    returned as candidates.

    Args:
        maze: Starting layout
        depth: Maximum number of walls to add
        visited: Canonical keys that must not be returned

    Returns:
        Candidate mazes in discovery order
    """
    candidates = []
    local_visited = {maze.canonical_key()}
    queue = deque([(maze, 0)])

    while queue:
        current, level = queue.popleft()
        for point in current.placeable_cells():
            child = current.with_wall(point)
            key = child.canonical_key()
            if key in local_visited:
                continue
            local_visited.add(key)

            if key not in visited:
                candidates.append(child)
            if level + 1 < depth:
                queue.append((child, level + 1))

    return candidates
