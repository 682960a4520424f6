"""Tests for record persistence."""

import pytest
from omegaconf import OmegaConf

from buglab.core.data_models import Point
from buglab.core.maze import Maze
from buglab.records import RecordStore, create_record_store


class TestRecordStore:
    """Test the record persistence boundary."""

    @pytest.fixture
    def store(self, tmp_path):
        store = RecordStore(output_dir=tmp_path / "maze_outputs")
        store.setup()
        return store

    def test_setup_creates_directories(self, store):
        assert store.output_dir.is_dir()
        assert store.archive_dir.is_dir()

    def test_notify_writes_all_artifacts(self, store):
        maze = Maze.empty(3, 2).with_wall(Point(1, 0))
        store.notify_record(maze, 12)

        assert store.latest_best_path.read_text() == maze.to_text()
        assert store.archive_path(12).name == "maze_record_12.txt"
        assert store.archive_path(12).read_text() == maze.to_text()
        assert store.records_log_path.read_text() == "Record: 12\n"
        assert store.records_written == 1
        assert store.write_failures == 0

    def test_latest_best_is_overwritten_and_log_appended(self, store):
        first = Maze.empty(3, 3)
        second = Maze.empty(3, 3).with_wall(Point(1, 2))
        store.notify_record(first, 4)
        store.notify_record(second, 6)

        assert Maze.load(store.latest_best_path) == second
        assert Maze.load(store.archive_path(4)) == first
        assert Maze.load(store.archive_path(6)) == second
        assert store.records_log_path.read_text().splitlines() == ["Record: 4", "Record: 6"]

    def test_write_failures_are_not_raised(self, tmp_path):
        # Directories were never created, so every write fails
        store = RecordStore(output_dir=tmp_path / "missing")
        store.notify_record(Maze.empty(2, 2), 2)

        assert store.write_failures == 3
        assert store.records_written == 1

    def test_create_record_store_from_config(self, tmp_path):
        config = OmegaConf.create({
            'output_dir': str(tmp_path / "out"),
            'archive_subdir': 'history',
            'latest_best_filename': 'best.txt',
            'records_log_filename': 'log.txt',
            'archive_prefix': 'rec_'
        })
        store = create_record_store(config)

        assert store.archive_dir == tmp_path / "out" / "history"
        assert store.archive_dir.is_dir()
        assert store.latest_best_path.name == "best.txt"
        assert store.archive_path(3).name == "rec_3.txt"
