"""
Text cleaning for comparison.

Punctuation stripping, whitespace collapsing, case folding and word
splitting. Reference text goes through here untouched by digraph repair;
user text is expected to be digraph-normalized by the caller first.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import re
import logging

from ..alignment.base import ComparisonOptions

logger = logging.getLogger(__name__)


# Sentence punctuation plus the quotation mark styles a transcript may use
_QUOTE_CODEPOINTS = (
    0x0022, 0x0027,                          # ASCII double and single quote
    0x2018, 0x2019, 0x201A, 0x201B,          # single curly and low-9 quotes
    0x201C, 0x201D, 0x201E, 0x201F,          # double curly and low-9 quotes
    0x2039, 0x203A, 0x00AB, 0x00BB,          # guillemets
    0x275B, 0x275C, 0x275D, 0x275E,          # heavy ornament quotes
    0x300C, 0x300D, 0x300E, 0x300F,          # CJK corner brackets
)

PUNCTUATION_CHARS = ".,!?;:()" + "".join(chr(cp) for cp in _QUOTE_CODEPOINTS)

_PUNCT_TABLE = str.maketrans("", "", PUNCTUATION_CHARS)
_RE_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class NormalizedText:
    """
    Cleaned text together with its word tokens.

    Attributes:
        text: Cleaned string (single spaces, trimmed)
        words: Maximal runs of non-whitespace characters in text
    """
    text: str
    words: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.words)


def is_punctuation(char: str) -> bool:
    """Check if char is one of the stripped punctuation marks."""
    return len(char) == 1 and char in PUNCTUATION_CHARS


def strip_punctuation(text: str) -> str:
    """Remove punctuation wherever it occurs, not just at word edges."""
    return text.translate(_PUNCT_TABLE)


def normalize_spaces(text: str) -> str:
    """Collapse whitespace runs to one space and trim."""
    return _RE_WHITESPACE.sub(" ", text).strip()


def normalize_case(text: str, ignore_case: bool = True) -> str:
    return text.lower() if ignore_case else text


def split_into_words(text: str) -> List[str]:
    """Split on whitespace runs, dropping empty tokens."""
    return [w for w in _RE_WHITESPACE.split(text) if w]


def clean_text(text: str, options: Optional[ComparisonOptions] = None) -> NormalizedText:
    """
    Clean text for word-level comparison.

    Args:
        text: Input text (None is treated as "")
        options: ComparisonOptions; defaults apply when None

    Returns:
        NormalizedText with cleaned string and word tokens
    """
    options = options or ComparisonOptions()

    cleaned = text or ""
    if options.ignore_punctuation:
        cleaned = strip_punctuation(cleaned)
    cleaned = normalize_case(cleaned, options.ignore_case)
    cleaned = normalize_spaces(cleaned)

    return NormalizedText(text=cleaned, words=tuple(split_into_words(cleaned)))
