"""
Character-level diff tokens.

A diff is a flat sequence of (char, status) tokens that a renderer can walk
without knowing anything about the alignment behind it.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Literal

TokenStatus = Literal[
    "correct",
    "wrong",
    "wrong-capitalization",
    "missing",
    "extra",
    "punctuation",
    "word-boundary",
    "char-space",
]

CORRECT = "correct"
WRONG = "wrong"
WRONG_CAPITALIZATION = "wrong-capitalization"
MISSING = "missing"
EXTRA = "extra"
PUNCTUATION = "punctuation"
WORD_BOUNDARY = "word-boundary"
CHAR_SPACE = "char-space"

TOKEN_STATUSES = (
    CORRECT,
    WRONG,
    WRONG_CAPITALIZATION,
    MISSING,
    EXTRA,
    PUNCTUATION,
    WORD_BOUNDARY,
    CHAR_SPACE,
)

# Statuses that only separate content
SEPARATOR_STATUSES = frozenset({WORD_BOUNDARY, CHAR_SPACE})

MISSING_CHAR = "_"


@dataclass(frozen=True)
class DiffToken:
    """
    A single rendered character with its feedback status.

    Attributes:
        char: The character to show ("_" for missing, " " for separators)
        status: One of TOKEN_STATUSES
    """
    char: str
    status: TokenStatus

    def to_dict(self) -> Dict[str, Any]:
        return {"char": self.char, "status": self.status}

    def __repr__(self):
        return f"DiffToken({self.char!r}, {self.status})"


def word_boundary() -> DiffToken:
    return DiffToken(" ", WORD_BOUNDARY)


def char_space() -> DiffToken:
    return DiffToken(" ", CHAR_SPACE)


def missing_char() -> DiffToken:
    return DiffToken(MISSING_CHAR, MISSING)


def render_plain(tokens: Iterable[DiffToken]) -> str:
    """Concatenate token chars, e.g. for logging or quick inspection."""
    return "".join(t.char for t in tokens)


def statuses(tokens: Iterable[DiffToken]) -> List[str]:
    return [t.status for t in tokens]
