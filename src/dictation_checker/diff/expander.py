"""
Expansion of a word alignment into a character-level diff.

Per alignment op:
- match:  user chars "correct" (or "wrong-capitalization" when case matters
          and only the case differs)
- sub:    user chars "wrong", with missing "_" padding when the user word
          is a truncation (exact prefix or suffix) of the reference word
- del:    one "missing" "_" per reference char, "char-space" in between
- ins:    user chars "extra"

A "word-boundary" token separates consecutive ops.
"""

from dataclasses import replace
from typing import List, Optional, Sequence, Tuple
import logging

from ..alignment.base import (
    Alignment,
    AlignmentOp,
    ComparisonOptions,
    MATCH,
    SUBSTITUTE,
    DELETE,
    INSERT,
)
from ..text_frontend.frontend import WordForm
from .base import (
    DiffToken,
    CORRECT,
    WRONG,
    WRONG_CAPITALIZATION,
    EXTRA,
    word_boundary,
    char_space,
    missing_char,
)

logger = logging.getLogger(__name__)


def find_truncation(ref_word: str, user_word: str) -> Tuple[int, int]:
    """
    Detect a truncated word.

    If user_word is a proper suffix of ref_word, the user dropped the start
    of the word; if it is a proper prefix, the user dropped the end. The
    suffix check wins when both hold.

    Args:
        ref_word: Reference word
        user_word: Word typed by the user

    Returns:
        (missing_prefix, missing_suffix) character counts; (0, 0) when the
        user word is not a truncation

    Example:
        >>> find_truncation("führen", "führ")
        (0, 2)
        >>> find_truncation("führen", "ren")
        (3, 0)
    """
    if not user_word or len(user_word) >= len(ref_word):
        return 0, 0
    missing = len(ref_word) - len(user_word)
    if ref_word.endswith(user_word):
        return missing, 0
    if ref_word.startswith(user_word):
        return 0, missing
    return 0, 0


def _substituted_char_status(user_ch: str, ref_ch: str, ignore_case: bool) -> str:
    """Status for one char of a wrong word, against the reference char at the same position."""
    if not ignore_case and user_ch != ref_ch and user_ch.lower() == ref_ch.lower():
        return WRONG_CAPITALIZATION
    return WRONG


def _expand_match(ref: WordForm, user: WordForm, ignore_case: bool, out: List[DiffToken]) -> None:
    # Folded forms are equal, so any display difference is capitalization only.
    if not ignore_case and user.display != ref.display:
        out.extend(DiffToken(ch, WRONG_CAPITALIZATION) for ch in user.display)
        return
    out.extend(DiffToken(ch, CORRECT) for ch in user.display)


def _expand_substitution(ref: WordForm, user: WordForm, ignore_case: bool, out: List[DiffToken]) -> None:
    if ignore_case:
        missing_prefix, missing_suffix = find_truncation(ref.folded, user.folded)
    else:
        missing_prefix, missing_suffix = find_truncation(ref.display, user.display)

    for k in range(missing_prefix):
        if k > 0:
            out.append(char_space())
        out.append(missing_char())

    ref_text = ref.display
    for c, ch in enumerate(user.display):
        ref_ch = ref_text[c] if c < len(ref_text) else ""
        out.append(DiffToken(ch, _substituted_char_status(ch, ref_ch, ignore_case)))

    for _ in range(missing_suffix):
        out.append(char_space())
        out.append(missing_char())


def _expand_deletion(ref: WordForm, out: List[DiffToken]) -> None:
    for k in range(len(ref.display)):
        if k > 0:
            out.append(char_space())
        out.append(missing_char())


def _expand_insertion(user: WordForm, out: List[DiffToken]) -> None:
    for ch in user.display:
        out.append(DiffToken(ch, EXTRA))


def _lookup_form(
    forms: Sequence[WordForm],
    index: Optional[int],
    word: str,
    side: str,
) -> WordForm:
    """Find the paired form for an op word, checking it belongs to the op."""
    if index is None:
        # Hand-built ops carry no index; the word is all we have.
        return WordForm(folded=word.lower(), display=word)
    if not 0 <= index < len(forms):
        raise ValueError(f"{side} index {index} out of range for {len(forms)} word forms")
    form = forms[index]
    if word not in (form.folded, form.display):
        raise ValueError(
            f"{side} word '{word}' does not match word form '{form.display}' at index {index}"
        )
    return form


def expand_alignment(
    alignment: Alignment,
    ref_forms: Sequence[WordForm],
    user_forms: Sequence[WordForm],
    options: Optional[ComparisonOptions] = None,
) -> List[DiffToken]:
    """
    Turn a word alignment into a renderable character diff.

    Args:
        alignment: Alignment computed on the folded words
        ref_forms: Reference word forms (same order as aligned reference words)
        user_forms: User word forms (same order as aligned user words)
        options: ComparisonOptions; ignore_case decides between "correct"
            and "wrong-capitalization" for case-only differences

    Returns:
        List of DiffToken

    Raises:
        ValueError: If an op index does not point at a matching word form
    """
    options = options or ComparisonOptions()
    ignore_case = options.ignore_case
    tokens: List[DiffToken] = []

    for k, op in enumerate(alignment):
        if k > 0:
            tokens.append(word_boundary())

        if op.op == MATCH:
            ref = _lookup_form(ref_forms, op.ref_index, op.ref_word, "reference")
            user = _lookup_form(user_forms, op.user_index, op.user_word, "user")
            _expand_match(ref, user, ignore_case, tokens)
        elif op.op == SUBSTITUTE:
            ref = _lookup_form(ref_forms, op.ref_index, op.ref_word, "reference")
            user = _lookup_form(user_forms, op.user_index, op.user_word, "user")
            _expand_substitution(ref, user, ignore_case, tokens)
        elif op.op == DELETE:
            ref = _lookup_form(ref_forms, op.ref_index, op.ref_word, "reference")
            _expand_deletion(ref, tokens)
        elif op.op == INSERT:
            user = _lookup_form(user_forms, op.user_index, op.user_word, "user")
            _expand_insertion(user, tokens)
        else:
            raise ValueError(f"Unknown alignment op: {op.op}")

    logger.debug(f"Expanded {len(alignment)} ops into {len(tokens)} diff tokens")
    return tokens


def expand_op(op: AlignmentOp, options: Optional[ComparisonOptions] = None) -> List[DiffToken]:
    """Expand a single op on its own words, without word forms."""
    bare = replace(op, ref_index=None, user_index=None)
    return expand_alignment(Alignment(ops=[bare]), [], [], options)
