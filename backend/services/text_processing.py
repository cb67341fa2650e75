"""Text normalization and tokenization shared by indexing and retrieval."""
import re
from typing import List

# Turkish letters kept by the tokenizer alongside ASCII letters and digits
ACCENTED_LETTERS = "ığüşöçİĞÜŞÖÇ"

MIN_TOKEN_LENGTH = 3

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_TOKEN_CHARS = re.compile(f"[^a-z0-9{ACCENTED_LETTERS}\\s]")


def normalize_text(text: str) -> str:
    """
    Collapse every whitespace run to a single space and trim the ends.

    An empty result means the document carries no usable text and should be
    skipped by the caller.
    """
    return _WHITESPACE_RUN.sub(" ", text).strip()


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase lexical tokens for overlap scoring.

    Characters outside a-z, 0-9, whitespace and the accented letter set are
    replaced with spaces; tokens shorter than three characters are dropped.
    Duplicates and order are preserved.

    Args:
        text: Question or chunk text

    Returns:
        List of tokens
    """
    cleaned = _NON_TOKEN_CHARS.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]
