"""
Word preparation for alignment.

Alignment decisions are made on case-folded words, but feedback is rendered
with the capitalization the text really has. Each word is therefore kept as
a WordForm pairing both spellings, so the two can never drift apart by index.
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

from ..alignment.base import ComparisonOptions
from .cleaning import clean_text
from .digraphs import normalize_digraphs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WordForm:
    """
    A word token in both spellings.

    Attributes:
        folded: Lowercased form, used for alignment
        display: Form as typed (punctuation already removed)
    """
    folded: str
    display: str

    def __len__(self) -> int:
        return len(self.display)

    def __str__(self) -> str:
        return self.display


def prepare_words(text: str, options: Optional[ComparisonOptions] = None) -> List[WordForm]:
    """
    Clean text and split it into paired word forms.

    Args:
        text: Reference text or (already digraph-normalized) user text
        options: ComparisonOptions; only ignore_punctuation matters here,
            since both spellings are always produced

    Returns:
        One WordForm per word, in order
    """
    options = options or ComparisonOptions()
    display = clean_text(
        text,
        ComparisonOptions(ignore_case=False, ignore_punctuation=options.ignore_punctuation),
    )
    return [WordForm(folded=word.lower(), display=word) for word in display.words]


def prepare_user_words(text: str, options: Optional[ComparisonOptions] = None) -> List[WordForm]:
    """Digraph-normalize user input, then prepare its words."""
    return prepare_words(normalize_digraphs(text), options)


def folded_words(forms: List[WordForm]) -> List[str]:
    return [f.folded for f in forms]


def display_words(forms: List[WordForm]) -> List[str]:
    return [f.display for f in forms]
