"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides:
- src/ on sys.path, so tests run without installing the package
- Shared option fixtures
- Sample sentences used across unit and integration tests
"""

import pytest
import sys
from pathlib import Path

# Add src to path (for imports like dictation_checker.alignment)
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


# =============================================================================
# Options fixtures
# =============================================================================

@pytest.fixture
def default_options():
    """Default ComparisonOptions (case-insensitive, punctuation stripped)."""
    from dictation_checker.alignment.base import ComparisonOptions
    return ComparisonOptions()


@pytest.fixture
def case_sensitive_options():
    """ComparisonOptions with capitalization errors reported."""
    from dictation_checker.alignment.base import ComparisonOptions
    return ComparisonOptions(ignore_case=False)


# =============================================================================
# Sample data
# =============================================================================

@pytest.fixture
def sample_reference():
    """Reference sentence with punctuation and an umlaut."""
    return "Ich führe den Hund aus."


@pytest.fixture
def sample_reference_words():
    """Folded, punctuation-free words of sample_reference."""
    return ["ich", "führe", "den", "hund", "aus"]


@pytest.fixture
def lesson_sentences():
    """(reference, user_input) pairs for a short lesson."""
    return [
        ("Guten Tag!", "guten tag"),
        ("Wie geht es Ihnen?", "wie geht es ihnen"),
        ("Die Tür ist offen.", "die tuer ist offen"),
        ("Ich heiße Anna.", "ich heisse"),
    ]
