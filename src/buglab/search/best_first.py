"""Best-first exploration of wall layouts.

Always expands the highest-scoring layout seen so far and enqueues every
unseen single-wall neighbor, improving or not.
"""

import heapq
import itertools
import logging
import random
from typing import List, Optional, Tuple

from buglab.core.data_models import SolverState
from buglab.search.context import SearchConfig, SearchResult, SolverContext
from buglab.search.neighbors import single_wall_neighbors
from buglab.search.progress import ProgressDisplay

logger = logging.getLogger(__name__)


class BestFirstSolver:
    """Priority-queue search ordered by descending score."""

    def __init__(self,
                 context: SolverContext,
                 config: Optional[SearchConfig] = None,
                 display: Optional[ProgressDisplay] = None):
        self.context = context
        self.config = config or SearchConfig()
        self.display = display or ProgressDisplay(self.config.show_progress)
        self.rng = random.Random(self.config.random_seed)

        # Entries are (-score, insertion order, state); ties pop FIFO
        self.queue: List[Tuple[int, int, SolverState]] = []
        self._counter = itertools.count()

    def push(self, state: SolverState) -> None:
        heapq.heappush(self.queue, (-state.score, next(self._counter), state))

    def pop(self) -> SolverState:
        return heapq.heappop(self.queue)[2]

    def solve(self) -> SearchResult:
        """Explore until the queue is empty or the iteration cap is hit."""
        initial_maze = self.context.empty_maze()
        self.push(SolverState(initial_maze, self.context.best_score))
        self.context.mark_visited(initial_maze)

        iterations = 0
        termination_reason = "exhausted"
        max_iterations = self.config.max_iterations

        while self.queue:
            if max_iterations is not None and iterations >= max_iterations:
                termination_reason = "max_iterations"
                break

            state = self.pop()
            iterations += 1
            self.display.status(self.context.best_score, "Processing state with score",
                                state.score, spinner=True)
            self.expand(state)

        self.display.clear()
        logger.info(f"Best-first search finished after {iterations} states ({termination_reason}), "
                    f"best score {self.context.best_score}")
        return self.context.build_result(iterations, termination_reason)

    def expand(self, state: SolverState) -> int:
        """Score and enqueue every unseen neighbor of ``state``.

        Returns:
            Number of states enqueued
        """
        self.context.statistics.states_expanded += 1

        children = single_wall_neighbors(state.maze)
        if self.config.randomize_cell_order:
            self.rng.shuffle(children)

        enqueued = 0
        for child in children:
            if self.context.is_visited(child):
                self.context.statistics.duplicates_skipped += 1
                continue

            self.context.statistics.candidates_generated += 1
            score = self.context.score_for(child)
            self.context.offer_record(child, score)
            self.push(SolverState(child, score))
            self.context.mark_visited(child)
            enqueued += 1

        return enqueued
