"""
Tests for text cleaning and word preparation.

Tests cover:
- Punctuation stripping (including quotation mark styles)
- Whitespace collapsing and case folding
- clean_text with each option combination
- WordForm preparation for reference and user text
"""

import pytest

from dictation_checker.alignment.base import ComparisonOptions
from dictation_checker.text_frontend.cleaning import (
    PUNCTUATION_CHARS,
    NormalizedText,
    clean_text,
    is_punctuation,
    normalize_spaces,
    split_into_words,
    strip_punctuation,
)
from dictation_checker.text_frontend.frontend import (
    WordForm,
    display_words,
    folded_words,
    prepare_user_words,
    prepare_words,
)


class TestPunctuation:
    """Tests for punctuation helpers."""

    def test_strip_sentence_punctuation(self):
        assert strip_punctuation("Hallo, Welt!") == "Hallo Welt"
        assert strip_punctuation("Wie geht's? (Gut.)") == "Wie gehts Gut"

    def test_strip_inside_words(self):
        """Test marks inside a token are removed, not just at the edges."""
        assert strip_punctuation("z.B.") == "zB"

    def test_strip_german_quotes(self):
        assert strip_punctuation("„Guten Tag“, sagte er.") == "Guten Tag sagte er"

    def test_strip_guillemets_and_corner_brackets(self):
        assert strip_punctuation("«Bonjour» »hallo« 「こんにちは」") == "Bonjour hallo こんにちは"

    def test_hyphen_is_kept(self):
        """Test characters outside the set survive."""
        assert strip_punctuation("E-Mail") == "E-Mail"

    def test_is_punctuation(self):
        assert is_punctuation(".")
        assert is_punctuation("“")
        assert not is_punctuation("a")
        assert not is_punctuation("")
        assert not is_punctuation("..")

    def test_every_listed_char_is_punctuation(self):
        assert all(is_punctuation(c) for c in PUNCTUATION_CHARS)


class TestWhitespace:
    """Tests for whitespace handling."""

    def test_normalize_spaces(self):
        assert normalize_spaces("  a   b \t c \n ") == "a b c"

    def test_split_into_words(self):
        assert split_into_words("  a  b ") == ["a", "b"]
        assert split_into_words("") == []


class TestCleanText:
    """Tests for clean_text()."""

    def test_defaults(self):
        result = clean_text("  Ich gehe,  nach Hause. ")
        assert isinstance(result, NormalizedText)
        assert result.text == "ich gehe nach hause"
        assert result.words == ("ich", "gehe", "nach", "hause")
        assert len(result) == 4

    def test_preserve_case(self):
        result = clean_text("Ich gehe.", ComparisonOptions(ignore_case=False))
        assert result.words == ("Ich", "gehe")

    def test_keep_punctuation(self):
        result = clean_text("Ich gehe.", ComparisonOptions(ignore_punctuation=False))
        assert result.words == ("ich", "gehe.")

    def test_lone_punctuation_token_disappears(self):
        """Test a token made only of punctuation leaves no empty word."""
        result = clean_text("Ja - nein ! doch")
        assert result.words == ("ja", "-", "nein", "doch")

    @pytest.mark.parametrize("text", ["", "   ", "...!?", None])
    def test_empty_results(self, text):
        result = clean_text(text)
        assert result.text == ""
        assert result.words == ()

    def test_no_digraph_repair(self):
        """Test clean_text leaves ASCII digraphs alone."""
        assert clean_text("Tuer").words == ("tuer",)


class TestPrepareWords:
    """Tests for WordForm preparation."""

    def test_reference_forms(self, sample_reference, sample_reference_words):
        forms = prepare_words(sample_reference)
        assert folded_words(forms) == sample_reference_words
        assert display_words(forms) == ["Ich", "führe", "den", "Hund", "aus"]

    def test_forms_keep_case_when_case_ignored(self, default_options):
        """Test display spelling is kept even with ignore_case on."""
        forms = prepare_words("Haus", default_options)
        assert forms == [WordForm(folded="haus", display="Haus")]

    def test_keep_punctuation_option(self):
        forms = prepare_words("Haus.", ComparisonOptions(ignore_punctuation=False))
        assert forms[0].display == "Haus."

    def test_user_forms_are_digraph_normalized(self):
        forms = prepare_user_words("Die Tuer, bitte")
        assert display_words(forms) == ["Die", "Tür", "bitte"]
        assert folded_words(forms) == ["die", "tür", "bitte"]

    def test_word_form_str_and_len(self):
        form = WordForm(folded="tür", display="Tür")
        assert str(form) == "Tür"
        assert len(form) == 3

    def test_empty(self):
        assert prepare_words("") == []
        assert prepare_user_words(None) == []
