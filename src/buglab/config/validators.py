"""Configuration validation for the maze optimizer."""

import logging
from omegaconf import DictConfig

logger = logging.getLogger(__name__)

VALID_ALGORITHMS = ('greedy_dfs', 'best_first', 'stochastic_hill_climb')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_maze_config(config.get('maze', {}))
        validate_search_config(config.get('search', {}))
        validate_records_config(config.get('records', {}))
        validate_display_config(config.get('display', {}))

        logger.debug("Configuration validation passed")

    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_maze_config(maze_config: DictConfig) -> None:
    """Validate maze dimensions."""
    if not maze_config:
        return

    for key in ('width', 'height'):
        value = maze_config.get(key, 1)
        if not _is_int(value) or value < 1:
            raise ConfigValidationError(f"maze.{key} must be positive integer, got {value}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search strategy parameters."""
    if not search_config:
        return

    algorithm = search_config.get('algorithm', 'greedy_dfs')
    if algorithm not in VALID_ALGORITHMS:
        raise ConfigValidationError(
            f"search.algorithm must be one of {', '.join(VALID_ALGORITHMS)}, got {algorithm}"
        )

    depth = search_config.get('deep_jump_depth', 2)
    if not _is_int(depth) or depth < 1:
        raise ConfigValidationError(f"search.deep_jump_depth must be integer >= 1, got {depth}")

    probability = search_config.get('accept_worse_probability', 0.02)
    if isinstance(probability, bool) or not isinstance(probability, (int, float)) \
            or not 0 <= probability <= 1:
        raise ConfigValidationError(
            f"search.accept_worse_probability must be between 0 and 1, got {probability}"
        )

    seed = search_config.get('random_seed', 42)
    if seed is not None and not _is_int(seed):
        raise ConfigValidationError(f"search.random_seed must be integer or null, got {seed}")

    max_iterations = search_config.get('max_iterations')
    if max_iterations is not None and (not _is_int(max_iterations) or max_iterations < 1):
        raise ConfigValidationError(
            f"search.max_iterations must be positive integer or null, got {max_iterations}"
        )


def validate_records_config(records_config: DictConfig) -> None:
    """Validate record output paths."""
    if not records_config:
        return

    for key in ('output_dir', 'archive_subdir', 'latest_best_filename', 'records_log_filename'):
        value = records_config.get(key, 'default')
        if not isinstance(value, str) or not value.strip():
            raise ConfigValidationError(f"records.{key} must be non-empty string, got {value!r}")


def validate_display_config(display_config: DictConfig) -> None:
    """Validate display settings."""
    if not display_config:
        return

    show_progress = display_config.get('show_progress', True)
    if not isinstance(show_progress, bool):
        raise ConfigValidationError(f"display.show_progress must be boolean, got {show_progress}")
