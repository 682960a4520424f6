"""Deterministic bug-walk scoring."""

from .bug_simulator import calculate_score, choose_direction, step_limit

__all__ = [
    'calculate_score',
    'choose_direction',
    'step_limit'
]
