"""Command-line interface for the maze optimizer."""

from .main import main_cli
from .commands import run_command, score_command, config_command
from .utils import setup_logging

__all__ = [
    'main_cli',
    'run_command',
    'score_command',
    'config_command',
    'setup_logging'
]
