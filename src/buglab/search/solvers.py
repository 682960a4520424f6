"""Strategy selection.

The strategy set is closed; one is picked per run from ``SearchAlgorithm``.
"""

import logging
from typing import Dict, Optional, Type, Union

from buglab.search.best_first import BestFirstSolver
from buglab.search.context import SearchAlgorithm, SearchConfig, SolverContext
from buglab.search.greedy_dfs import GreedyDFSSolver
from buglab.search.hill_climb import StochasticHillClimber
from buglab.search.progress import ProgressDisplay

logger = logging.getLogger(__name__)

Solver = Union[GreedyDFSSolver, BestFirstSolver, StochasticHillClimber]

_SOLVERS: Dict[SearchAlgorithm, Type] = {
    SearchAlgorithm.GREEDY_DFS: GreedyDFSSolver,
    SearchAlgorithm.BEST_FIRST: BestFirstSolver,
    SearchAlgorithm.STOCHASTIC_HILL_CLIMB: StochasticHillClimber,
}


def create_solver(context: SolverContext,
                  config: Optional[SearchConfig] = None,
                  display: Optional[ProgressDisplay] = None) -> Solver:
    """Factory function to create the configured search strategy.

    Args:
        context: Shared solver context for the run
        config: Search configuration (defaults if None)
        display: Progress display (built from ``config.show_progress`` if None)

    Returns:
        Strategy instance ready to ``solve()``
    """
    config = config or SearchConfig()
    solver_cls = _SOLVERS[config.algorithm]
    logger.info(f"Using {config.algorithm.value} search")
    return solver_cls(context, config, display)
