"""
Text Frontend Module

Everything that happens to a string before it is aligned:
- Digraph repair of user input ("tuer" -> "tür", "StraBe" -> "Straße")
- Punctuation stripping, whitespace collapsing, case folding
- Word splitting into paired folded/display forms

Reference text is never digraph-normalized; it is assumed to be correct.
"""

# Digraph normalization
from .digraphs import (
    SubstitutionRule,
    DIGRAPH_RULES,
    normalize_digraphs,
    is_vowel,
    has_german_chars,
    get_character_mappings,
)

# Cleaning
from .cleaning import (
    PUNCTUATION_CHARS,
    NormalizedText,
    is_punctuation,
    strip_punctuation,
    normalize_spaces,
    normalize_case,
    split_into_words,
    clean_text,
)

# Word forms
from .frontend import (
    WordForm,
    prepare_words,
    prepare_user_words,
    folded_words,
    display_words,
)

__all__ = [
    # Digraphs
    "SubstitutionRule",
    "DIGRAPH_RULES",
    "normalize_digraphs",
    "is_vowel",
    "has_german_chars",
    "get_character_mappings",
    # Cleaning
    "PUNCTUATION_CHARS",
    "NormalizedText",
    "is_punctuation",
    "strip_punctuation",
    "normalize_spaces",
    "normalize_case",
    "split_into_words",
    "clean_text",
    # Word forms
    "WordForm",
    "prepare_words",
    "prepare_user_words",
    "folded_words",
    "display_words",
]
