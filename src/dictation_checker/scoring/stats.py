"""
Word and character statistics.

Word score: matches are correct; substitutions and deletions are wrong;
insertions count for neither, so typing an extra word never lowers the
share of reference words reproduced. total_words is always the reference
word count.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional
import logging

from ..alignment.base import Alignment, MATCH, SUBSTITUTE, DELETE
from ..diff.base import (
    DiffToken,
    CORRECT,
    WRONG,
    WRONG_CAPITALIZATION,
    EXTRA,
    MISSING,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordStats:
    """
    Word-level score of one comparison.

    Attributes:
        correct_words: Reference words reproduced exactly
        wrong_words: Reference words substituted or missing
        total_words: Number of reference words
    """
    correct_words: int = 0
    wrong_words: int = 0
    total_words: int = 0

    @property
    def accuracy(self) -> float:
        """Share of reference words reproduced (0.0 for an empty reference)."""
        if self.total_words == 0:
            return 0.0
        return self.correct_words / self.total_words

    def to_dict(self) -> Dict[str, Any]:
        return {
            "correct_words": self.correct_words,
            "wrong_words": self.wrong_words,
            "total_words": self.total_words,
        }


@dataclass(frozen=True)
class CharStats:
    """
    Character-level counts over a diff.

    Attributes:
        correct: Chars marked correct
        wrong: Chars marked wrong or wrong-capitalization
        extra: Chars of extra words
        missing: Missing-char placeholders
        total: Number of reference characters (spaces excluded)
    """
    correct: int = 0
    wrong: int = 0
    extra: int = 0
    missing: int = 0
    total: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "correct": self.correct,
            "wrong": self.wrong,
            "extra": self.extra,
            "missing": self.missing,
            "total": self.total,
        }


def score_alignment(alignment: Alignment, total_words: Optional[int] = None) -> WordStats:
    """
    Reduce an alignment to word statistics.

    Args:
        alignment: Word alignment
        total_words: Reference word count; recovered from the alignment
            when None (every reference word appears in exactly one op)

    Returns:
        WordStats
    """
    correct = 0
    wrong = 0
    for op in alignment:
        if op.op == MATCH:
            correct += 1
        elif op.op in (SUBSTITUTE, DELETE):
            wrong += 1

    if total_words is None:
        total_words = len(alignment.ref_words)

    return WordStats(correct_words=correct, wrong_words=wrong, total_words=total_words)


def count_chars(tokens: Iterable[DiffToken], alignment: Optional[Alignment] = None) -> CharStats:
    """
    Count character statuses in a diff.

    Args:
        tokens: Diff tokens from expand_alignment
        alignment: The alignment the diff came from; used for the total
            reference character count (0 when omitted)

    Returns:
        CharStats
    """
    counts = {CORRECT: 0, WRONG: 0, EXTRA: 0, MISSING: 0}
    for token in tokens:
        status = WRONG if token.status == WRONG_CAPITALIZATION else token.status
        if status in counts:
            counts[status] += 1

    total = sum(len(w) for w in alignment.ref_words) if alignment is not None else 0

    return CharStats(
        correct=counts[CORRECT],
        wrong=counts[WRONG],
        extra=counts[EXTRA],
        missing=counts[MISSING],
        total=total,
    )
