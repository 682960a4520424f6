"""Main CLI entry point for the maze optimizer."""

import sys
import argparse
import logging
from typing import List, Optional

from . import commands
from .utils import setup_logging

ALGORITHM_CHOICES = ['greedy_dfs', 'best_first', 'stochastic_hill_climb']


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='buglab',
        description='Bug maze optimizer - grow wall layouts that keep the bug walking longest',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  buglab run                                    # Greedy DFS with packaged defaults
  buglab run --algorithm best_first --seed 7    # Best-first search
  buglab run --max-iterations 500 --no-progress # Bounded run
  buglab score maze_outputs/best_record.txt     # Score a saved maze
  buglab config show                            # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        action='append',
        help='Configuration override (e.g., search.deep_jump_depth=3); repeatable'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Run command
    run_parser = subparsers.add_parser(
        'run',
        help='Search for long-walk maze layouts',
        description='Run one search strategy and persist every new record'
    )

    run_parser.add_argument(
        '--algorithm', '-a',
        choices=ALGORITHM_CHOICES,
        help='Search strategy (default: from configuration)'
    )

    run_parser.add_argument('--width', type=int, help='Maze width')
    run_parser.add_argument('--height', type=int, help='Maze height')

    run_parser.add_argument(
        '--deep-jump-depth',
        type=int,
        help='Walls added per deep jump in greedy DFS (1 disables)'
    )

    run_parser.add_argument(
        '--accept-worse-probability',
        type=float,
        help='Random move probability for hill climbing'
    )

    run_parser.add_argument('--seed', type=int, help='Random seed for cell shuffling')

    run_parser.add_argument(
        '--no-shuffle',
        action='store_true',
        help='Visit cells in row-major order'
    )

    run_parser.add_argument(
        '--no-progress',
        action='store_true',
        help='Disable the console status line'
    )

    run_parser.add_argument(
        '--max-iterations',
        type=int,
        help='Stop after this many expanded states'
    )

    run_parser.add_argument(
        '--output-dir', '-o',
        type=str,
        help='Directory for record files'
    )

    # Score command
    score_parser = subparsers.add_parser(
        'score',
        help='Score a saved maze',
        description='Run the bug walk on a maze file written by a previous run'
    )

    score_parser.add_argument('maze_file', type=str, help='Path to maze text file')

    score_parser.add_argument(
        '--max-steps',
        type=int,
        help='Divergence bound (default: width * height * 1000)'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect optimizer configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser('show', help='Show current configuration')
    config_subparsers.add_parser('validate', help='Validate configuration')

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'run':
            return commands.run_command(parsed_args)
        if parsed_args.command == 'score':
            return commands.score_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
