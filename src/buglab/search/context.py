"""Shared solver state and search configuration.

A ``SolverContext`` owns everything a single run shares between the
strategy and the rest of the system: the best record, the score cache,
the global visited-layout set and the run statistics. It lives for
exactly one run.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Set

from omegaconf import DictConfig

from buglab.caching import ScoreCache
from buglab.core.data_models import is_valid_score
from buglab.core.maze import Maze
from buglab.records import RecordStore

logger = logging.getLogger(__name__)


class SearchAlgorithm(Enum):
    """The available search strategies."""
    GREEDY_DFS = "greedy_dfs"
    BEST_FIRST = "best_first"
    STOCHASTIC_HILL_CLIMB = "stochastic_hill_climb"


@dataclass
class SearchConfig:
    """Configuration for a search run."""
    algorithm: SearchAlgorithm = SearchAlgorithm.GREEDY_DFS
    deep_jump_depth: int = 2  # Walls added per deep jump; 1 disables jumps
    accept_worse_probability: float = 0.02
    randomize_cell_order: bool = True
    random_seed: Optional[int] = 42
    max_iterations: Optional[int] = None  # None runs until exhausted
    show_progress: bool = True

    @classmethod
    def from_config(cls, config: DictConfig) -> 'SearchConfig':
        """Build from the ``search`` and ``display`` sections of the run config."""
        search_cfg = config.get('search', {})
        display_cfg = config.get('display', {})
        return cls(
            algorithm=SearchAlgorithm(search_cfg.get('algorithm', 'greedy_dfs')),
            deep_jump_depth=int(search_cfg.get('deep_jump_depth', 2)),
            accept_worse_probability=float(search_cfg.get('accept_worse_probability', 0.02)),
            randomize_cell_order=bool(search_cfg.get('randomize_cell_order', True)),
            random_seed=search_cfg.get('random_seed', 42),
            max_iterations=search_cfg.get('max_iterations'),
            show_progress=bool(display_cfg.get('show_progress', True))
        )


@dataclass
class SearchStatistics:
    """Counters collected during a run."""
    states_expanded: int = 0
    candidates_generated: int = 0
    candidates_evaluated: int = 0
    duplicates_skipped: int = 0
    deep_jumps_attempted: int = 0
    deep_jumps_successful: int = 0
    records_found: int = 0
    resets: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'states_expanded': self.states_expanded,
            'candidates_generated': self.candidates_generated,
            'candidates_evaluated': self.candidates_evaluated,
            'duplicates_skipped': self.duplicates_skipped,
            'deep_jumps_attempted': self.deep_jumps_attempted,
            'deep_jumps_successful': self.deep_jumps_successful,
            'records_found': self.records_found,
            'resets': self.resets
        }


@dataclass
class SearchResult:
    """Summary returned when a strategy stops."""
    best_score: int
    best_maze: Maze
    iterations: int = 0
    termination_reason: str = "unknown"
    statistics: Dict[str, Any] = field(default_factory=dict)
    cache_stats: Dict[str, Any] = field(default_factory=dict)


class SolverContext:
    """Best record, score cache and visited set for one run."""

    def __init__(self,
                 width: int,
                 height: int,
                 record_store: Optional[RecordStore] = None,
                 cache: Optional[ScoreCache] = None):
        """Initialize the context and emit the empty maze as the first record.

        Args:
            width: Maze width
            height: Maze height
            record_store: Persistence target for records (None keeps records in memory only)
            cache: Score cache to share (a new one is created if None)
        """
        self.width = width
        self.height = height
        self.record_store = record_store
        self.cache = cache if cache is not None else ScoreCache()
        self.visited: Set[str] = set()
        self.statistics = SearchStatistics()

        initial_maze = self.empty_maze()
        initial_score = self.cache.score_for(initial_maze)
        self.best_score = initial_score
        self.best_maze = initial_maze
        self._notify(initial_maze, initial_score)

        logger.info(f"Solver context initialized for {width}x{height} maze, "
                    f"initial score {initial_score}")

    def empty_maze(self) -> Maze:
        return Maze.empty(self.width, self.height)

    def score_for(self, maze: Maze) -> int:
        """Score a maze through the cache."""
        self.statistics.candidates_evaluated += 1
        return self.cache.score_for(maze)

    def offer_record(self, maze: Maze, score: int) -> bool:
        """Record ``maze`` if its score strictly beats the best so far.

        Returns:
            True if a new record was set
        """
        if not is_valid_score(score) or score <= self.best_score:
            return False

        self.best_score = score
        self.best_maze = maze
        self.statistics.records_found += 1
        self._notify(maze, score)
        return True

    def is_visited(self, maze: Maze) -> bool:
        return maze.canonical_key() in self.visited

    def mark_visited(self, maze: Maze) -> bool:
        """Add the maze to the global visited set.

        Returns:
            True if the layout had not been seen before
        """
        key = maze.canonical_key()
        if key in self.visited:
            return False
        self.visited.add(key)
        return True

    def build_result(self, iterations: int, termination_reason: str) -> SearchResult:
        return SearchResult(
            best_score=self.best_score,
            best_maze=self.best_maze,
            iterations=iterations,
            termination_reason=termination_reason,
            statistics=self.statistics.to_dict(),
            cache_stats=self.cache.get_stats()
        )

    def _notify(self, maze: Maze, score: int) -> None:
        if self.record_store is None:
            logger.info(f"Record found: {score}")
            return
        self.record_store.notify_record(maze, score)
