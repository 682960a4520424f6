"""Maze layout optimizer for the deterministic bug walk.

Searches for wall layouts that maximize the number of steps a
least-visited-neighbor walker needs to get from the entrance to the exit.
"""

__version__ = "0.1.0"
