"""Tests for the bug walk simulator."""

import pytest
import numpy as np

from buglab.core.data_models import Point, Directions, UNSOLVABLE, DIVERGED
from buglab.core.maze import Maze
from buglab.simulation import calculate_score, choose_direction, step_limit


def maze_with_walls(width, height, walls):
    maze = Maze.empty(width, height)
    for x, y in walls:
        maze.set_wall(Point(x, y))
    return maze


class TestChooseDirection:
    """Test the tie-breaking move policy."""

    def test_strict_minimum_wins(self):
        counts = np.array([[0, 0, 0],
                           [3, 1, 0],
                           [0, 2, 0]], dtype=np.int64)
        # From (1, 1): up=0, down=2, left=3, right=0 -> up/right tie
        direction = choose_direction(Point(1, 1), counts, Directions.LEFT)
        assert direction == Directions.RIGHT

    def test_previous_direction_wins_ties(self):
        counts = np.zeros((3, 3), dtype=np.int64)
        assert choose_direction(Point(1, 1), counts, Directions.LEFT) == Directions.LEFT
        assert choose_direction(Point(1, 1), counts, Directions.UP) == Directions.UP

    def test_priority_breaks_ties_without_previous(self):
        counts = np.array([[0, 0, 0],
                           [0, 1, 0],
                           [0, 5, 0]], dtype=np.int64)
        # up, left, right tie at 0; previous move down is not among them
        assert choose_direction(Point(1, 1), counts, Directions.DOWN) == Directions.RIGHT

    def test_previous_direction_ignored_when_not_minimal(self):
        counts = np.array([[0, 4, 0],
                           [0, 1, 0],
                           [0, 0, 0]], dtype=np.int64)
        assert choose_direction(Point(1, 1), counts, Directions.UP) == Directions.DOWN

    def test_walls_are_skipped(self):
        counts = np.array([[1, -1],
                           [-1, 0]], dtype=np.int64)
        assert choose_direction(Point(0, 0), counts, Directions.DOWN) is None

    def test_boundary_is_skipped(self):
        counts = np.array([[1]], dtype=np.int64)
        assert choose_direction(Point(0, 0), counts, Directions.DOWN) is None


class TestCalculateScore:
    """Test full walk scoring."""

    def test_single_cell(self):
        assert calculate_score(Maze.empty(1, 1)) == 0

    def test_empty_two_by_two(self):
        assert calculate_score(Maze.empty(2, 2)) == 2

    def test_empty_three_by_three(self):
        assert calculate_score(Maze.empty(3, 3)) == 4

    def test_walk_backtracks_out_of_dead_end(self):
        # Bug heads down the left column, hits the dead end, returns and goes round
        maze = maze_with_walls(3, 3, [(1, 1), (1, 2)])
        assert calculate_score(maze) == 8

    def test_single_wall_detour(self):
        maze = maze_with_walls(3, 3, [(1, 2)])
        assert calculate_score(maze) == 6

    @pytest.mark.parametrize("width,height", [(2, 2), (3, 3), (5, 4), (7, 3), (1, 6), (6, 1)])
    def test_empty_grid_at_least_manhattan(self, width, height):
        score = calculate_score(Maze.empty(width, height))
        assert score >= (width - 1) + (height - 1)

    def test_no_path_is_unsolvable(self):
        maze = maze_with_walls(3, 3, [(1, 0), (1, 1), (1, 2)])
        assert calculate_score(maze) == UNSOLVABLE

    def test_walled_entrance_is_unsolvable(self):
        maze = maze_with_walls(4, 4, [(0, 0)])
        assert calculate_score(maze) == UNSOLVABLE

    def test_walled_exit_is_unsolvable(self):
        maze = maze_with_walls(4, 4, [(3, 3)])
        assert calculate_score(maze) == UNSOLVABLE

    def test_step_bound_diverges(self):
        maze = Maze.empty(3, 3)
        assert calculate_score(maze, max_steps=2) == DIVERGED
        assert calculate_score(maze, max_steps=3) == 4

    def test_step_limit(self):
        assert step_limit(29, 19) == 29 * 19 * 1000

    def test_deterministic(self):
        rng = np.random.default_rng(7)
        for _ in range(10):
            walls = rng.random((6, 8)) < 0.3
            walls[0, 0] = False
            walls[-1, -1] = False
            maze = Maze(8, 6, walls)
            first = calculate_score(maze)
            assert all(calculate_score(maze) == first for _ in range(3))
