"""
Live feedback while the user is still typing.

Unlike the word-level diff, this walks the reference one character at a
time and consumes user characters in order, so it can be refreshed on every
keystroke. Reference punctuation is shown as-is with the "punctuation"
status; the user never has to type it.
"""

from typing import List, Optional
import logging

from ..alignment.base import ComparisonOptions
from ..text_frontend.cleaning import is_punctuation
from .base import (
    DiffToken,
    CORRECT,
    WRONG,
    PUNCTUATION,
    word_boundary,
    missing_char,
)

logger = logging.getLogger(__name__)


def live_feedback(
    reference: str,
    user_text: str,
    options: Optional[ComparisonOptions] = None,
) -> List[DiffToken]:
    """
    Character-by-character feedback against the reference.

    User text should already be digraph-normalized.

    Args:
        reference: Reference sentence
        user_text: What the user has typed so far
        options: ComparisonOptions; ignore_case controls char equality

    Returns:
        One token per reference character: "punctuation", "word-boundary",
        "correct" (reference char), "wrong" (user char) or "missing" ("_")
    """
    options = options or ComparisonOptions()
    reference = reference or ""
    user_text = user_text or ""

    tokens: List[DiffToken] = []
    pos = 0

    for ref_ch in reference:
        if is_punctuation(ref_ch):
            tokens.append(DiffToken(ref_ch, PUNCTUATION))
            continue
        if ref_ch.isspace():
            tokens.append(word_boundary())
            continue

        # User punctuation and spacing carry no information here
        while pos < len(user_text) and (is_punctuation(user_text[pos]) or user_text[pos].isspace()):
            pos += 1

        if pos >= len(user_text):
            tokens.append(missing_char())
            continue

        user_ch = user_text[pos]
        pos += 1
        if options.ignore_case:
            same = ref_ch.lower() == user_ch.lower()
        else:
            same = ref_ch == user_ch
        tokens.append(DiffToken(ref_ch, CORRECT) if same else DiffToken(user_ch, WRONG))

    return tokens
