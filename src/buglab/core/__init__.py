"""Core data models for the maze optimizer."""

from .data_models import (
    Point, Direction, Directions, SolverState,
    UNSOLVABLE, DIVERGED, is_valid_score
)
from .maze import Maze

__all__ = [
    'Point',
    'Direction',
    'Directions',
    'SolverState',
    'UNSOLVABLE',
    'DIVERGED',
    'is_valid_score',
    'Maze'
]
