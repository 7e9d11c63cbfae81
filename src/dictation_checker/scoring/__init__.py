"""
Scoring Module

Reductions of an alignment (and its diff) to scalar statistics.
"""

from .stats import (
    WordStats,
    CharStats,
    score_alignment,
    count_chars,
)

__all__ = [
    "WordStats",
    "CharStats",
    "score_alignment",
    "count_chars",
]
