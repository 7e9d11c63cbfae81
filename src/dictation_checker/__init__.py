"""
Dictation Checker

Scores a typed transcription of a spoken German sentence against its
reference transcript.

Usage:
    from dictation_checker import compare, normalize_user_text

    result = compare("Ich führe den Hund aus.", "ich fuehre den Hun aus")
    print(result.stats)          # WordStats(correct_words=4, wrong_words=1, ...)
    for token in result.diff:
        print(token.char, token.status)

Modules:
- text_frontend: Digraph repair, punctuation/space/case cleaning, word forms
- alignment: Word-level edit-distance alignment (match 0, sub 3, ins 2, del 2)
- diff: Character-level diff tokens and live (per keystroke) feedback
- scoring: Word and character statistics
- session: Caller-owned history of checked sentences
"""

from . import text_frontend
from . import alignment
from . import diff
from . import scoring

from .alignment import (
    ComparisonOptions,
    AlignmentCosts,
    AlignmentOp,
    Alignment,
    align_words,
)
from .diff import DiffToken, expand_alignment, live_feedback
from .scoring import WordStats, CharStats, score_alignment
from .text_frontend import NormalizedText, WordForm, clean_text, normalize_digraphs

# High-level API
from .api import (
    ComparisonResult,
    normalize_user_text,
    compare,
    calculate_word_stats,
    compare_live,
    compare_many,
)
from .session import SessionTally, SessionSummary, SentenceResult

__all__ = [
    # Modules
    "text_frontend",
    "alignment",
    "diff",
    "scoring",
    # Building blocks
    "ComparisonOptions",
    "AlignmentCosts",
    "AlignmentOp",
    "Alignment",
    "align_words",
    "DiffToken",
    "expand_alignment",
    "live_feedback",
    "WordStats",
    "CharStats",
    "score_alignment",
    "NormalizedText",
    "WordForm",
    "clean_text",
    "normalize_digraphs",
    # High-level API
    "ComparisonResult",
    "normalize_user_text",
    "compare",
    "calculate_word_stats",
    "compare_live",
    "compare_many",
    # Session
    "SessionTally",
    "SessionSummary",
    "SentenceResult",
]

# Version
__version__ = "0.1.0"
