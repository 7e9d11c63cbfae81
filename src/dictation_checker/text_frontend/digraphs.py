"""
German Digraph Normalization

Repairs ASCII stand-ins typed on keyboards without German keys:
- "ae", "oe", "ue" -> "ä", "ö", "ü" (all case variants)
- "B" after a vowel -> "ß"

Rules are an ordered table evaluated once per call. Each rule is a single
regex pass whose guard sees the text as it stood when that rule started, so
a later rule may depend on an earlier correction but no rule re-fires on
its own output.

Examples:
    "tuer"    -> "tür"
    "TUER"    -> "TÜR"
    "TuEr"    -> "Tür"
    "Bau"     -> "Bau"      (vowel before the digraph blocks it)
    "StraBe"  -> "Straße"
    "aBc"     -> "aBc"      (B inside a consonant cluster)
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Pattern, Tuple
import re
import logging

logger = logging.getLogger(__name__)


GERMAN_VOWELS = frozenset("aeiouäöü")
GERMAN_SPECIAL_CHARS = frozenset("äöüßÄÖÜ")

# ß counts as a consonant for the umlaut guard
_CONSONANTS = frozenset("bcdfghjklmnpqrstvwxyzßBCDFGHJKLMNPQRSTVWXYZ")


Guard = Callable[[str, int, int], bool]
Replacement = Callable[["re.Match"], str]


@dataclass(frozen=True)
class SubstitutionRule:
    """
    One entry of the normalization table.

    Attributes:
        name: Short identifier used in debug logs
        pattern: Compiled regex matching the surrogate spelling
        guard: (text, start, end) -> bool, decides whether a match converts
        replacement: Builds the replacement string from the match
    """
    name: str
    pattern: Pattern
    guard: Guard
    replacement: Replacement

    def apply(self, text: str) -> Tuple[str, int]:
        """Apply this rule once over text. Returns (new_text, num_replaced)."""
        hits = 0

        def _substitute(match) -> str:
            nonlocal hits
            if self.guard(match.string, match.start(), match.end()):
                hits += 1
                return self.replacement(match)
            return match.group(0)

        return self.pattern.sub(_substitute, text), hits


# =============================================================================
# Guards
# =============================================================================

def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _after_boundary_or_consonant(text: str, start: int, end: int) -> bool:
    """Digraph starts the string, follows a non-word char, or follows a consonant."""
    if start == 0:
        return True
    prev = text[start - 1]
    return prev in _CONSONANTS or not _is_word_char(prev)


def _sharp_s_context(text: str, start: int, end: int) -> bool:
    """B follows a lowercase vowel and precedes a boundary, whitespace or vowel."""
    if start == 0 or text[start - 1] not in GERMAN_VOWELS:
        return False
    if end == len(text):
        return True
    nxt = text[end]
    return nxt.isspace() or nxt in GERMAN_VOWELS or not _is_word_char(nxt)


# =============================================================================
# Replacements
# =============================================================================

def _umlaut(lower: str, upper: str) -> Replacement:
    """
    Build an umlaut replacement.

    The umlaut is uppercase when the first digraph letter is uppercase and
    either the second one is too ("UE" -> "Ü") or the digraph does not sit
    after a lowercase letter ("Ue" at word start -> "Ü", "fUe" -> "fü").
    """
    def replace(match) -> str:
        first, second = match.group(0)
        start = match.start()
        prev = match.string[start - 1] if start > 0 else ""
        if first.isupper() and (second.isupper() or not prev.islower()):
            return upper
        return lower
    return replace


def _constant(value: str) -> Replacement:
    return lambda match: value


# Order matters: umlauts first, then ß (which may follow a fresh umlaut).
DIGRAPH_RULES: Tuple[SubstitutionRule, ...] = (
    SubstitutionRule("ae", re.compile(r"[aA][eE]"), _after_boundary_or_consonant, _umlaut("ä", "Ä")),
    SubstitutionRule("oe", re.compile(r"[oO][eE]"), _after_boundary_or_consonant, _umlaut("ö", "Ö")),
    SubstitutionRule("ue", re.compile(r"[uU][eE]"), _after_boundary_or_consonant, _umlaut("ü", "Ü")),
    SubstitutionRule("sharp_s", re.compile(r"B"), _sharp_s_context, _constant("ß")),
)


def normalize_digraphs(text) -> str:
    """
    Convert ASCII digraph spellings to German umlauts and ß.

    Total function: anything that is not a non-empty string yields "".

    Args:
        text: Raw user-typed text

    Returns:
        Text with surrogates resolved; all other characters unchanged
    """
    if not text or not isinstance(text, str):
        return ""

    result = text
    for rule in DIGRAPH_RULES:
        result, hits = rule.apply(result)
        if hits:
            logger.debug(f"Digraph rule '{rule.name}' replaced {hits} occurrence(s)")
    return result


def is_vowel(char: str) -> bool:
    """Check if char is a lowercase German vowel (umlauts included)."""
    return char in GERMAN_VOWELS


def has_german_chars(text: str) -> bool:
    """Check if text contains any of ä, ö, ü, ß, Ä, Ö, Ü."""
    return bool(text) and any(ch in GERMAN_SPECIAL_CHARS for ch in text)


def get_character_mappings() -> List[Dict[str, str]]:
    """Surrogate spellings understood by normalize_digraphs, for help displays."""
    return [
        {"input": "ae", "output": "ä", "description": "ae → ä"},
        {"input": "oe", "output": "ö", "description": "oe → ö"},
        {"input": "ue", "output": "ü", "description": "ue → ü"},
        {"input": "Ae", "output": "Ä", "description": "Ae → Ä"},
        {"input": "Oe", "output": "Ö", "description": "Oe → Ö"},
        {"input": "Ue", "output": "Ü", "description": "Ue → Ü"},
        {"input": "B (after vowel)", "output": "ß", "description": "vowel + B → vowel + ß"},
    ]
