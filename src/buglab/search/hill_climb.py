"""Stochastic hill climbing over wall additions.

Keeps a single current layout. Each step adds one wall: with probability
``accept_worse_probability`` a random one, otherwise the one giving the
best score. The walk restarts from the empty maze once no wall can be
added or every candidate is unsolvable. Revisiting layouts is allowed, so
the global visited set is not consulted.
"""

import logging
import random
from typing import Optional

from buglab.core.data_models import UNSOLVABLE
from buglab.core.maze import Maze
from buglab.search.context import SearchConfig, SearchResult, SolverContext
from buglab.search.neighbors import single_wall_neighbors
from buglab.search.progress import ProgressDisplay

logger = logging.getLogger(__name__)


class StochasticHillClimber:
    """Greedy wall addition with random escapes."""

    def __init__(self,
                 context: SolverContext,
                 config: Optional[SearchConfig] = None,
                 display: Optional[ProgressDisplay] = None):
        self.context = context
        self.config = config or SearchConfig()
        self.display = display or ProgressDisplay(self.config.show_progress)
        self.rng = random.Random(self.config.random_seed)

        self.current: Maze = context.empty_maze()
        self.current_score: int = context.best_score

    def reset(self) -> None:
        """Restart from the empty maze."""
        self.current = self.context.empty_maze()
        self.current_score = self.context.score_for(self.current)
        self.context.statistics.resets += 1
        logger.debug("Hill climber reset to empty maze")

    def step(self) -> Maze:
        """Add one wall to the current maze.

        Returns:
            The new current maze
        """
        candidates = single_wall_neighbors(self.current)
        if not candidates:
            self.reset()
            return self.current

        if self.config.randomize_cell_order:
            self.rng.shuffle(candidates)
        self.context.statistics.candidates_generated += len(candidates)

        if self.rng.random() < self.config.accept_worse_probability:
            self.current = self.rng.choice(candidates)
        else:
            best_maze = None
            best_score = UNSOLVABLE
            for candidate in candidates:
                score = self.context.score_for(candidate)
                if score > best_score:
                    best_maze, best_score = candidate, score

            if best_maze is None:
                self.reset()
                return self.current
            self.current = best_maze

        self.context.statistics.states_expanded += 1
        self.current_score = self.context.score_for(self.current)
        self.context.offer_record(self.current, self.current_score)
        return self.current

    def solve(self) -> SearchResult:
        """Climb until the iteration cap is hit; without a cap, run forever."""
        iterations = 0
        max_iterations = self.config.max_iterations

        while max_iterations is None or iterations < max_iterations:
            iterations += 1
            self.display.status(self.context.best_score, "Run", iterations, spinner=True)
            self.step()

        self.display.clear()
        logger.info(f"Hill climbing stopped after {iterations} runs, "
                    f"best score {self.context.best_score}")
        return self.context.build_result(iterations, "max_iterations")
