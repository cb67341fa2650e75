"""
Language Detector for Ohara AI backend.

Binary classifier deciding whether a question should be answered in Turkish or
English. Any Turkish-specific letter in the text marks it as Turkish; everything
else falls back to English. There is no confidence score and no third language.
"""

import logging

logger = logging.getLogger(__name__)


class LanguageDetector:
    """Classify text as Turkish or English by character-set presence."""

    # Locale tags
    TURKISH = "tr"
    ENGLISH = "en"

    # Letters that appear in Turkish but not in English, both cases
    TURKISH_CHARS = frozenset("çğıöşüÇĞİÖŞÜ")

    def detect(self, text: str) -> str:
        """
        Detect the locale of a piece of text.

        Args:
            text: Arbitrary text, usually the user's question

        Returns:
            "tr" if any Turkish-specific letter is present, otherwise "en"
        """
        language = self.TURKISH if any(c in self.TURKISH_CHARS for c in text) else self.ENGLISH
        logger.debug(f"Detected language: {language}")
        return language
