"""Search strategies for maze layout optimization.

Three interchangeable strategies grow a maze one wall at a time, score
each layout with the bug walk and keep the best record found so far.
"""

from .context import SearchAlgorithm, SearchConfig, SearchResult, SearchStatistics, SolverContext
from .greedy_dfs import GreedyDFSSolver
from .best_first import BestFirstSolver
from .hill_climb import StochasticHillClimber
from .neighbors import single_wall_neighbors, generate_unique_candidates
from .progress import ProgressDisplay
from .solvers import create_solver

__all__ = [
    'SearchAlgorithm',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'SolverContext',
    'GreedyDFSSolver',
    'BestFirstSolver',
    'StochasticHillClimber',
    'single_wall_neighbors',
    'generate_unique_candidates',
    'ProgressDisplay',
    'create_solver'
]
