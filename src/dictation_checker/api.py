"""
High-level API for comparing a typed transcription with its reference.

Provides the call surface used by the practice UI:

    normalize_user_text(raw)                  -> str
    compare(reference, user_input, options)   -> ComparisonResult
    calculate_word_stats(reference, user_input, options) -> WordStats
    compare_live(reference, user_input, options) -> List[DiffToken]
    compare_many(pairs, options)              -> List[ComparisonResult]

Every call is independent: nothing is cached or shared between calls, so
comparisons can run concurrently.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union
import logging

from .alignment.base import Alignment, AlignmentCosts, ComparisonOptions, INSERT
from .alignment.sequence import align_words
from .diff.base import DiffToken
from .diff.expander import expand_alignment
from .diff.live import live_feedback
from .scoring.stats import CharStats, WordStats, count_chars, score_alignment
from .text_frontend.digraphs import normalize_digraphs
from .text_frontend.frontend import folded_words, prepare_words

logger = logging.getLogger(__name__)

OptionsLike = Union[ComparisonOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class ComparisonResult:
    """
    Result of one comparison.

    Attributes:
        diff: Character-level diff tokens for rendering
        stats: Word-level score
        char_stats: Character-level counts over the diff
        alignment: Word alignment the diff was built from
    """
    diff: Tuple[DiffToken, ...]
    stats: WordStats
    char_stats: CharStats
    alignment: Alignment

    @property
    def is_perfect(self) -> bool:
        """All reference words correct and nothing extra typed."""
        counts = self.alignment.counts()
        return (
            self.stats.correct_words == self.stats.total_words
            and counts[INSERT] == 0
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "diff": [t.to_dict() for t in self.diff],
            "stats": self.stats.to_dict(),
            "char_stats": self.char_stats.to_dict(),
            "alignment": self.alignment.to_dict(),
        }


def normalize_user_text(raw) -> str:
    """
    Repair ASCII digraph spellings in raw user input.

    Call this on the user side only; reference text is assumed correct.
    Returns "" for anything that is not a non-empty string.
    """
    return normalize_digraphs(raw)


def compare(
    reference: str,
    user_input: str,
    options: OptionsLike = None,
    costs: Optional[AlignmentCosts] = None,
) -> ComparisonResult:
    """
    Compare user input against the reference sentence.

    Alignment always runs on case-folded words; ignore_case only decides
    whether case-only differences are rendered "correct" or
    "wrong-capitalization".

    Args:
        reference: Reference sentence (used verbatim, no digraph repair)
        user_input: Raw user input (digraph-normalized here)
        options: ComparisonOptions, a partial mapping, or None for defaults
        costs: Alignment cost model (default: match 0, sub 3, ins 2, del 2)

    Returns:
        ComparisonResult with diff, word stats, char stats and alignment

    Example:
        >>> result = compare("Guten Tag.", "guten schoenen Tag")
        >>> result.stats
        WordStats(correct_words=2, wrong_words=0, total_words=2)
    """
    options = ComparisonOptions.coerce(options)

    ref_forms = prepare_words(reference, options)
    user_forms = prepare_words(normalize_digraphs(user_input), options)

    alignment = align_words(folded_words(ref_forms), folded_words(user_forms), costs)
    diff = expand_alignment(alignment, ref_forms, user_forms, options)
    stats = score_alignment(alignment, total_words=len(ref_forms))
    char_stats = count_chars(diff, alignment)

    logger.debug(
        f"Compared {len(ref_forms)} reference / {len(user_forms)} user words: "
        f"{stats.correct_words} correct, {stats.wrong_words} wrong"
    )

    return ComparisonResult(
        diff=tuple(diff),
        stats=stats,
        char_stats=char_stats,
        alignment=alignment,
    )


def calculate_word_stats(
    reference: str,
    user_input: str,
    options: OptionsLike = None,
) -> WordStats:
    """Word statistics only, without building the diff."""
    options = ComparisonOptions.coerce(options)
    ref_forms = prepare_words(reference, options)
    user_forms = prepare_words(normalize_digraphs(user_input), options)
    alignment = align_words(folded_words(ref_forms), folded_words(user_forms))
    return score_alignment(alignment, total_words=len(ref_forms))


def compare_live(
    reference: str,
    user_input: str,
    options: OptionsLike = None,
) -> List[DiffToken]:
    """
    Keystroke-level feedback for partially typed input.

    Args:
        reference: Reference sentence
        user_input: Raw user input so far (digraph-normalized here)
        options: ComparisonOptions, a partial mapping, or None

    Returns:
        Diff tokens, one per reference character
    """
    options = ComparisonOptions.coerce(options)
    return live_feedback(reference, normalize_digraphs(user_input), options)


def compare_many(
    pairs: Iterable[Tuple[str, str]],
    options: OptionsLike = None,
    max_workers: Optional[int] = None,
) -> List[ComparisonResult]:
    """
    Compare several (reference, user_input) pairs, e.g. a whole session.

    Comparisons share no state, so they run in a thread pool.

    Args:
        pairs: Iterable of (reference, user_input)
        options: Applied to every pair
        max_workers: Thread pool size (executor default when None)

    Returns:
        Results in input order
    """
    options = ComparisonOptions.coerce(options)
    pairs = list(pairs)
    if not pairs:
        return []

    logger.info(f"Comparing {len(pairs)} sentence(s)")
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda pair: compare(pair[0], pair[1], options), pairs))
