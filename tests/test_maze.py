"""Tests for the maze grid model."""

import pytest
import numpy as np

from buglab.core.data_models import Point
from buglab.core.maze import Maze


class TestMazeBasics:
    """Test construction, bounds and wall access."""

    def test_empty_maze(self):
        maze = Maze.empty(4, 3)
        assert maze.width == 4
        assert maze.height == 3
        assert maze.walls.shape == (3, 4)
        assert maze.wall_count == 0
        assert maze.entrance == Point(0, 0)
        assert maze.exit == Point(3, 2)

    def test_constructor_walls(self):
        assert Maze(3, 2).wall_count == 0

        walls = np.zeros((2, 3), dtype=bool)
        walls[1, 1] = True
        maze = Maze(3, 2, walls)
        walls[0, 1] = True
        assert maze.wall_count == 1
        assert maze.is_wall(Point(1, 1))

    def test_bounds(self):
        maze = Maze.empty(4, 3)
        assert maze.in_bounds(Point(0, 0))
        assert maze.in_bounds(Point(3, 2))
        assert not maze.in_bounds(Point(4, 0))
        assert not maze.in_bounds(Point(0, 3))
        assert not maze.in_bounds(Point(-1, 0))

    def test_set_and_query_wall(self):
        maze = Maze.empty(3, 3)
        maze.set_wall(Point(2, 1))
        assert maze.is_wall(Point(2, 1))
        assert not maze.is_wall(Point(1, 2))
        maze.set_wall(Point(2, 1), False)
        assert not maze.is_wall(Point(2, 1))

    def test_out_of_bounds_access_is_rejected(self):
        maze = Maze.empty(3, 3)
        with pytest.raises(AssertionError):
            maze.is_wall(Point(-1, 0))
        with pytest.raises(AssertionError):
            maze.set_wall(Point(3, 0))

    def test_with_wall_does_not_mutate_parent(self):
        parent = Maze.empty(3, 3)
        child = parent.with_wall(Point(1, 1))
        assert child.is_wall(Point(1, 1))
        assert not parent.is_wall(Point(1, 1))
        assert parent.wall_count == 0

    def test_placeable_cells_exclude_terminals_and_walls(self):
        maze = Maze.empty(3, 2).with_wall(Point(1, 0))
        cells = maze.placeable_cells()
        assert Point(0, 0) not in cells
        assert Point(2, 1) not in cells
        assert Point(1, 0) not in cells
        assert cells == [Point(2, 0), Point(0, 1), Point(1, 1)]


class TestConnectivity:
    """Test breadth-first reachability."""

    def test_empty_maze_is_solvable(self):
        assert Maze.empty(5, 4).has_path_to_exit()

    def test_single_cell_maze(self):
        assert Maze.empty(1, 1).has_path_to_exit()

    def test_blocking_column(self):
        maze = Maze.empty(3, 3)
        for y in range(3):
            maze.set_wall(Point(1, y))
        assert not maze.has_path_to_exit()

    def test_walled_terminals(self):
        entrance_blocked = Maze.empty(3, 3)
        entrance_blocked.set_wall(Point(0, 0))
        assert not entrance_blocked.has_path_to_exit()

        exit_blocked = Maze.empty(3, 3)
        exit_blocked.set_wall(Point(2, 2))
        assert not exit_blocked.has_path_to_exit()

    def test_winding_path(self):
        maze = Maze.empty(3, 3)
        maze.set_wall(Point(1, 0))
        maze.set_wall(Point(1, 1))
        assert maze.has_path_to_exit()


class TestCanonicalKey:
    """Test the canonical layout representation."""

    def test_format(self):
        maze = Maze.empty(3, 2).with_wall(Point(2, 0))
        assert maze.canonical_key() == "001000"

    def test_identical_layouts_share_key(self):
        a = Maze.empty(4, 4).with_wall(Point(1, 2)).with_wall(Point(3, 0))
        b = Maze.empty(4, 4).with_wall(Point(3, 0)).with_wall(Point(1, 2))
        assert a.canonical_key() == b.canonical_key()
        assert a == b
        assert hash(a) == hash(b)

    def test_every_single_cell_difference_changes_key(self):
        base = Maze.empty(4, 3)
        keys = {base.canonical_key()}
        for point in base.placeable_cells():
            keys.add(base.with_wall(point).canonical_key())
        assert len(keys) == 1 + len(base.placeable_cells())

    def test_key_tracks_in_place_changes(self):
        maze = Maze.empty(3, 3)
        before = maze.canonical_key()
        maze.set_wall(Point(1, 1))
        assert maze.canonical_key() != before


class TestTextFormat:
    """Test human-readable export and parsing."""

    def test_to_text(self):
        maze = Maze.empty(3, 2).with_wall(Point(1, 0))
        assert maze.to_text() == "S # . \n. . E \n"

    def test_from_text_roundtrip(self):
        maze = Maze.empty(5, 4).with_wall(Point(2, 1)).with_wall(Point(0, 3))
        assert Maze.from_text(maze.to_text()) == maze

    def test_from_text_rejects_ragged_rows(self):
        with pytest.raises(ValueError):
            Maze.from_text("S . .\n. E\n")

    def test_from_text_rejects_unknown_symbols(self):
        with pytest.raises(ValueError):
            Maze.from_text("S x\n. E\n")

    def test_from_text_rejects_empty(self):
        with pytest.raises(ValueError):
            Maze.from_text("\n\n")

    def test_save_and_load(self, tmp_path):
        maze = Maze.empty(4, 3).with_wall(Point(1, 1))
        path = tmp_path / "maze.txt"
        maze.save(path)
        assert Maze.load(path) == maze
