"""In-memory score cache keyed by canonical maze layout."""

import logging
from typing import Any, Callable, Dict, Optional

from buglab.core.maze import Maze
from buglab.simulation import calculate_score

logger = logging.getLogger(__name__)


class ScoreCache:
    """Memoizes simulator results for the lifetime of a run.

    Entries are never evicted.
    """

    def __init__(self, simulator: Optional[Callable[[Maze], int]] = None):
        """Initialize score cache.

        Args:
            simulator: Scoring function, ``calculate_score`` by default
        """
        self.simulator = simulator or calculate_score
        self._scores: Dict[str, int] = {}

        # Statistics
        self.hits = 0
        self.misses = 0

    def score_for(self, maze: Maze) -> int:
        """Return the cached score for ``maze``, simulating on first sight."""
        key = maze.canonical_key()
        score = self._scores.get(key)
        if score is not None:
            self.hits += 1
            return score

        self.misses += 1
        score = self.simulator(maze)
        self._scores[key] = score
        return score

    def __contains__(self, maze: Maze) -> bool:
        return maze.canonical_key() in self._scores

    def __len__(self) -> int:
        return len(self._scores)

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, size and hit rate
        """
        total_requests = self.hits + self.misses
        return {
            'hits': self.hits,
            'misses': self.misses,
            'size': len(self._scores),
            'hit_rate': self.hits / max(total_requests, 1)
        }

    def reset_stats(self) -> None:
        self.hits = 0
        self.misses = 0
        logger.debug("Score cache statistics reset")
