"""Unit tests for text normalization and tokenization."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from services.text_processing import normalize_text, tokenize


class TestNormalizeText:
    """Test suite for normalize_text."""

    def test_collapses_whitespace_runs(self):
        assert normalize_text("one\n\ntwo\t three    four") == "one two three four"

    def test_strips_leading_and_trailing_whitespace(self):
        assert normalize_text("  \n hello world \t\n") == "hello world"

    def test_empty_input(self):
        assert normalize_text("") == ""

    def test_whitespace_only_input_is_empty(self):
        """Whitespace-only documents normalize to empty and get skipped."""
        assert normalize_text(" \n\t \r\n ") == ""


class TestTokenize:
    """Test suite for tokenize."""

    def test_strips_punctuation_and_lowercases(self):
        assert tokenize("Hello, World! 123") == ["hello", "world", "123"]

    def test_drops_short_tokens(self):
        assert tokenize("I am on a big ship") == ["big", "ship"]

    def test_keeps_duplicates_in_order(self):
        assert tokenize("sleep well, sleep deep, sleep") == ["sleep", "well", "sleep", "deep", "sleep"]

    def test_keeps_turkish_letters(self):
        assert tokenize("Nasıl uyuyabilirim? Güneş, çiçek, şöyle") == [
            "nasıl", "uyuyabilirim", "güneş", "çiçek", "şöyle"
        ]

    def test_other_accents_split_words(self):
        """Letters outside the accepted set act as separators."""
        assert tokenize("café naïve") == ["caf"]

    def test_punctuation_inside_words_splits(self):
        assert tokenize("well-being e-mail") == ["well", "being", "mail"]

    def test_empty_input(self):
        assert tokenize("") == []

    def test_symbols_and_mixed_case(self):
        assert tokenize("Metabolism, sleep & routine!") == ["metabolism", "sleep", "routine"]
