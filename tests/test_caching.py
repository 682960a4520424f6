"""Tests for the score cache."""

import pytest

from buglab.caching import ScoreCache
from buglab.core.data_models import Point
from buglab.core.maze import Maze
from buglab.simulation import calculate_score


class CountingSimulator:
    """Simulator stub that counts invocations."""

    def __init__(self):
        self.calls = 0

    def __call__(self, maze):
        self.calls += 1
        return calculate_score(maze)


class TestScoreCache:
    """Test memoization of simulator results."""

    @pytest.fixture
    def simulator(self):
        return CountingSimulator()

    def test_default_simulator(self):
        cache = ScoreCache()
        assert cache.score_for(Maze.empty(3, 3)) == 4

    def test_second_lookup_does_not_simulate(self, simulator):
        cache = ScoreCache(simulator)
        maze = Maze.empty(3, 3)

        first = cache.score_for(maze)
        second = cache.score_for(maze)

        assert first == second
        assert simulator.calls == 1

    def test_lookup_is_by_layout_not_identity(self, simulator):
        cache = ScoreCache(simulator)
        a = Maze.empty(3, 3).with_wall(Point(1, 1))
        b = Maze.empty(3, 3).with_wall(Point(1, 1))

        assert cache.score_for(a) == cache.score_for(b)
        assert simulator.calls == 1
        assert b in cache

    def test_different_layouts_are_simulated(self, simulator):
        cache = ScoreCache(simulator)
        cache.score_for(Maze.empty(3, 3))
        cache.score_for(Maze.empty(3, 3).with_wall(Point(1, 2)))

        assert simulator.calls == 2
        assert len(cache) == 2

    def test_statistics(self, simulator):
        cache = ScoreCache(simulator)
        maze = Maze.empty(2, 2)
        cache.score_for(maze)
        cache.score_for(maze)
        cache.score_for(maze)

        stats = cache.get_stats()
        assert stats['hits'] == 2
        assert stats['misses'] == 1
        assert stats['size'] == 1
        assert stats['hit_rate'] == pytest.approx(2 / 3)

        cache.reset_stats()
        assert cache.get_stats()['hits'] == 0
        assert len(cache) == 1

    def test_failure_scores_are_cached(self, simulator):
        cache = ScoreCache(simulator)
        blocked = Maze.empty(3, 3).with_wall(Point(0, 0))

        assert cache.score_for(blocked) == -1
        assert cache.score_for(blocked) == -1
        assert simulator.calls == 1
