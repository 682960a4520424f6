"""Score caching for the maze optimizer.

Scores are memoized by canonical maze layout so that repeated exploration
of the same layout never reruns the bug walk.
"""

from .score_cache import ScoreCache

__all__ = [
    'ScoreCache'
]
