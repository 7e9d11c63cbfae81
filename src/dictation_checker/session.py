"""
Session history for a dictation exercise.

The engine itself keeps no state. A caller that wants a running score over
a lesson owns a SessionTally and records each checked sentence into it.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import logging

from .alignment.base import ComparisonOptions
from .api import ComparisonResult, OptionsLike, compare

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentenceResult:
    """
    One checked sentence.

    Attributes:
        sentence_index: Position of the sentence in the lesson
        reference: Reference sentence
        user_input: Raw user input
        comparison: Full comparison result
        options: Options the sentence was checked with
    """
    sentence_index: int
    reference: str
    user_input: str
    comparison: ComparisonResult
    options: ComparisonOptions

    @property
    def stats(self):
        return self.comparison.stats


@dataclass(frozen=True)
class SessionSummary:
    """
    Totals over all recorded sentences.

    Attributes:
        total_correct_words: Sum of correct words
        total_wrong_words: Sum of wrong words
        total_words: Sum of reference words
        accuracy_percent: 100 * correct / total rounded half-up, 0 when empty
        sentence_count: Number of recorded sentences
    """
    total_correct_words: int = 0
    total_wrong_words: int = 0
    total_words: int = 0
    accuracy_percent: int = 0
    sentence_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_correct_words": self.total_correct_words,
            "total_wrong_words": self.total_wrong_words,
            "total_words": self.total_words,
            "accuracy_percent": self.accuracy_percent,
            "sentence_count": self.sentence_count,
        }


class SessionTally:
    """
    Caller-owned record of checked sentences.

    Not thread-safe: one tally belongs to one session.

    Example:
        >>> tally = SessionTally()
        >>> _ = tally.record(0, "Ich gehe nach Hause.", "ich gehe nach hause")
        >>> tally.overall().accuracy_percent
        100
    """

    def __init__(self, options: OptionsLike = None):
        self.options = ComparisonOptions.coerce(options)
        self._results: List[SentenceResult] = []

    def __len__(self) -> int:
        return len(self._results)

    def record(
        self,
        sentence_index: int,
        reference: str,
        user_input: str,
        options: OptionsLike = None,
    ) -> SentenceResult:
        """
        Compare one sentence and store the result.

        Args:
            sentence_index: Position of the sentence in the lesson
            reference: Reference sentence
            user_input: Raw user input
            options: Overrides the tally's options for this sentence

        Returns:
            The stored SentenceResult
        """
        used = self.options if options is None else ComparisonOptions.coerce(options)
        result = SentenceResult(
            sentence_index=sentence_index,
            reference=reference,
            user_input=user_input,
            comparison=compare(reference, user_input, used),
            options=used,
        )
        self._results.append(result)
        logger.debug(f"Recorded sentence {sentence_index}: {result.stats}")
        return result

    def overall(self) -> SessionSummary:
        """Totals and rounded accuracy over all recorded sentences."""
        if not self._results:
            return SessionSummary()

        correct = sum(r.stats.correct_words for r in self._results)
        wrong = sum(r.stats.wrong_words for r in self._results)
        total = sum(r.stats.total_words for r in self._results)
        # Half-up rounding, so 12.5% reads as 13%
        accuracy = int(correct * 100 / total + 0.5) if total > 0 else 0

        return SessionSummary(
            total_correct_words=correct,
            total_wrong_words=wrong,
            total_words=total,
            accuracy_percent=accuracy,
            sentence_count=len(self._results),
        )

    def results(self) -> List[SentenceResult]:
        """Copy of the recorded results."""
        return list(self._results)

    def get(self, index: int) -> Optional[SentenceResult]:
        """Result at position index, or None."""
        if 0 <= index < len(self._results):
            return self._results[index]
        return None

    def clear(self) -> None:
        self._results.clear()
