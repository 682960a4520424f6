"""Greedy depth-first search with deep-jump recovery.

States live on an explicit stack. Expanding a state pushes every neighbor
that strictly improves on it, best last so it is explored next. When no
single wall improves, a deep jump looks up to ``deep_jump_depth`` walls
ahead and commits only if some resulting layout beats the pre-jump score.
Abandoned branches are never revisited.
"""

import logging
from typing import List, Optional

from buglab.core.data_models import SolverState
from buglab.search.context import SearchConfig, SearchResult, SolverContext
from buglab.search.neighbors import generate_unique_candidates
from buglab.search.progress import ProgressDisplay

logger = logging.getLogger(__name__)


class GreedyDFSSolver:
    """Stack-based greedy ascent over wall additions."""

    def __init__(self,
                 context: SolverContext,
                 config: Optional[SearchConfig] = None,
                 display: Optional[ProgressDisplay] = None):
        self.context = context
        self.config = config or SearchConfig()
        self.display = display or ProgressDisplay(self.config.show_progress)
        self.stack: List[SolverState] = []

    def solve(self) -> SearchResult:
        """Explore until the stack is empty or the iteration cap is hit."""
        initial_maze = self.context.empty_maze()
        self.stack.append(SolverState(initial_maze, self.context.best_score))
        self.context.mark_visited(initial_maze)

        iterations = 0
        termination_reason = "exhausted"
        max_iterations = self.config.max_iterations

        while self.stack:
            if max_iterations is not None and iterations >= max_iterations:
                termination_reason = "max_iterations"
                break

            state = self.stack.pop()
            iterations += 1
            self.display.status(self.context.best_score, "Processing state with score", state.score)
            self.expand(state)

        self.display.clear()
        logger.info(f"Greedy DFS finished after {iterations} states ({termination_reason}), "
                    f"best score {self.context.best_score}")
        return self.context.build_result(iterations, termination_reason)

    def expand(self, state: SolverState) -> bool:
        """Push the improving successors of ``state``.

        Returns:
            True if at least one improving successor was pushed
        """
        self.context.statistics.states_expanded += 1

        if self._push_improvements(state, depth=1):
            return True

        if self.config.deep_jump_depth <= 1:
            return False

        self.display.clear()
        logger.info("Dead end found. Attempting deep jump...")
        self.context.statistics.deep_jumps_attempted += 1

        improved = self._push_improvements(state, depth=self.config.deep_jump_depth)
        if improved:
            self.context.statistics.deep_jumps_successful += 1
        return improved

    def _push_improvements(self, state: SolverState, depth: int) -> bool:
        candidates = generate_unique_candidates(state.maze, depth, self.context.visited)
        self.context.statistics.candidates_generated += len(candidates)
        if not candidates:
            return False

        is_deep = depth > 1
        if is_deep:
            logger.info(f"Evaluating {len(candidates)} new states...")

        improvements = []
        for index, candidate in enumerate(candidates, 1):
            if is_deep:
                self.display.bar(index, len(candidates))
            score = self.context.score_for(candidate)
            if score > state.score:
                improvements.append(SolverState(candidate, score))

        if is_deep:
            self.display.clear()
            if improvements:
                logger.info(f"Jump successful: found {len(improvements)} improvements.")
            else:
                logger.info("Jump unsuccessful: returning.")

        if not improvements:
            return False

        # Ascending, so the best state ends on top of the stack
        improvements.sort(key=lambda s: s.score)
        for improved in improvements:
            self.context.offer_record(improved.maze, improved.score)
            self.stack.append(improved)
            self.context.mark_visited(improved.maze)

        return True
