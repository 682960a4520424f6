"""CLI command implementations."""

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from buglab.config import load_config, validate_config, ConfigValidationError
from buglab.core.data_models import is_valid_score
from buglab.core.maze import Maze
from buglab.records import create_record_store
from buglab.search import SearchConfig, SearchResult, SolverContext, create_solver
from buglab.simulation import calculate_score

from .utils import current_memory_usage, print_summary

logger = logging.getLogger(__name__)


class MazeOptimizer:
    """Wires configuration, persistence and the selected strategy for one run."""

    def __init__(self, config_overrides: Optional[List[str]] = None,
                 config_values: Optional[Dict[str, Any]] = None):
        """Initialize the optimizer.

        Args:
            config_overrides: List of configuration overrides
            config_values: Dotted keys assigned after the overrides are composed
        """
        try:
            self.config = load_config(overrides=config_overrides or [], values=config_values)
        except Exception as e:
            logger.error(f"Failed to load configuration: {e}")
            raise

        maze_cfg = self.config.get('maze', {})
        self.width = int(maze_cfg.get('width', 29))
        self.height = int(maze_cfg.get('height', 19))
        self.search_config = SearchConfig.from_config(self.config)

        self.record_store = create_record_store(self.config.get('records', {}))
        self.context = SolverContext(self.width, self.height, self.record_store)
        self.solver = create_solver(self.context, self.search_config)

        logger.info(f"Maze optimizer initialized: {self.width}x{self.height}, "
                    f"algorithm={self.search_config.algorithm.value}")

    def run(self) -> SearchResult:
        return self.solver.solve()

    def summarize(self, result: SearchResult, total_time: float) -> Dict[str, Any]:
        return {
            'algorithm': self.search_config.algorithm.value,
            'width': self.width,
            'height': self.height,
            'best_score': result.best_score,
            'iterations': result.iterations,
            'termination_reason': result.termination_reason,
            'statistics': result.statistics,
            'cache_stats': result.cache_stats,
            'total_time': total_time,
            'memory_bytes': current_memory_usage(),
            'write_failures': self.record_store.write_failures,
            'latest_best_path': str(self.record_store.latest_best_path)
        }


def build_run_overrides(args) -> List[str]:
    """Translate ``run`` flags into configuration overrides."""
    overrides = []
    if getattr(args, 'algorithm', None):
        overrides.append(f"search.algorithm={args.algorithm}")
    if getattr(args, 'width', None) is not None:
        overrides.append(f"maze.width={args.width}")
    if getattr(args, 'height', None) is not None:
        overrides.append(f"maze.height={args.height}")
    if getattr(args, 'deep_jump_depth', None) is not None:
        overrides.append(f"search.deep_jump_depth={args.deep_jump_depth}")
    if getattr(args, 'accept_worse_probability', None) is not None:
        overrides.append(f"search.accept_worse_probability={args.accept_worse_probability}")
    if getattr(args, 'seed', None) is not None:
        overrides.append(f"search.random_seed={args.seed}")
    if getattr(args, 'no_shuffle', False):
        overrides.append("search.randomize_cell_order=false")
    if getattr(args, 'no_progress', False) or getattr(args, 'quiet', False):
        overrides.append("display.show_progress=false")
    if getattr(args, 'max_iterations', None) is not None:
        overrides.append(f"search.max_iterations={args.max_iterations}")

    # Global config overrides go last so they win
    if getattr(args, 'config', None):
        overrides.extend(args.config)
    return overrides


def build_run_values(args) -> Dict[str, Any]:
    """Values from ``run`` flags that are assigned verbatim rather than parsed."""
    values = {}
    if getattr(args, 'output_dir', None):
        values['records.output_dir'] = args.output_dir
    return values


def run_command(args) -> int:
    """Handle run command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        optimizer = MazeOptimizer(build_run_overrides(args), build_run_values(args))
    except ConfigValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    start_time = time.perf_counter()
    result = optimizer.run()
    total_time = time.perf_counter() - start_time

    if not args.quiet:
        print_summary(optimizer.summarize(result, total_time))

    return 0


def score_command(args) -> int:
    """Handle score command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    maze_path = Path(args.maze_file)
    if not maze_path.exists():
        logger.error(f"Maze file not found: {maze_path}")
        return 1

    try:
        maze = Maze.load(maze_path)
    except ValueError as e:
        logger.error(f"Invalid maze file {maze_path}: {e}")
        return 1

    score = calculate_score(maze, max_steps=args.max_steps)
    print(f"Maze: {maze_path.name} ({maze.width}x{maze.height}, {maze.wall_count} walls)")
    print(f"Score: {score}")
    return 0 if is_valid_score(score) else 1


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    overrides = getattr(args, 'config', None) or []
    try:
        if args.config_action == 'show':
            config = load_config(overrides=overrides, validate=False)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = load_config(overrides=overrides, validate=False)
                validate_config(config)
                print("Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
