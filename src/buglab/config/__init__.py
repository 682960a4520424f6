"""Configuration management for the maze optimizer.

This module provides Hydra-based configuration loading with runtime
override strings and validation.
"""

from .config_manager import ConfigManager, load_config
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'validate_config',
    'ConfigValidationError'
]
