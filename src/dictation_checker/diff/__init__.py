"""
Diff Module

Character-level feedback streams:
- expand_alignment: word alignment -> diff tokens (final check)
- live_feedback: char-by-char walk of the reference (while typing)
"""

from .base import (
    TokenStatus,
    CORRECT,
    WRONG,
    WRONG_CAPITALIZATION,
    MISSING,
    EXTRA,
    PUNCTUATION,
    WORD_BOUNDARY,
    CHAR_SPACE,
    TOKEN_STATUSES,
    SEPARATOR_STATUSES,
    MISSING_CHAR,
    DiffToken,
    render_plain,
    statuses,
)
from .expander import (
    find_truncation,
    expand_alignment,
    expand_op,
)
from .live import live_feedback

__all__ = [
    # Statuses
    "TokenStatus",
    "CORRECT",
    "WRONG",
    "WRONG_CAPITALIZATION",
    "MISSING",
    "EXTRA",
    "PUNCTUATION",
    "WORD_BOUNDARY",
    "CHAR_SPACE",
    "TOKEN_STATUSES",
    "SEPARATOR_STATUSES",
    "MISSING_CHAR",
    # Tokens
    "DiffToken",
    "render_plain",
    "statuses",
    # Expansion
    "find_truncation",
    "expand_alignment",
    "expand_op",
    "live_feedback",
]
