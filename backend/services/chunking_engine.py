"""Chunking engine that slices documents into fixed-size word windows."""
import logging
from typing import List

from models.chunk import Chunk
from models.document import Document
from config import WORDS_PER_CHUNK, MIN_CHUNK_WORDS

logger = logging.getLogger(__name__)

class ChunkingEngine:
    """Segments normalized text into non-overlapping word-count windows."""

    def __init__(self, words_per_chunk: int = WORDS_PER_CHUNK, min_words: int = MIN_CHUNK_WORDS):
        """
        Initialize ChunkingEngine.

        Args:
            words_per_chunk: Number of words per window
            min_words: Windows with this many words or fewer are discarded

        Raises:
            ValueError: If words_per_chunk is not positive
        """
        if words_per_chunk <= 0:
            raise ValueError(f"words_per_chunk must be positive, got {words_per_chunk}")

        self.words_per_chunk = words_per_chunk
        self.min_words = min_words

    def chunk_text(self, text: str) -> List[str]:
        """
        Split normalized text into consecutive word windows.

        The last window may be shorter than words_per_chunk; any window with
        min_words words or fewer is dropped, so short trailing remainders and
        very short documents produce nothing.

        Args:
            text: Normalized text (single spaces between words)

        Returns:
            Ordered list of chunk texts
        """
        words = text.split()
        chunks = []

        for start in range(0, len(words), self.words_per_chunk):
            window = words[start:start + self.words_per_chunk]
            if len(window) > self.min_words:
                chunks.append(" ".join(window))

        return chunks

    def chunk_document(self, document: Document, text: str) -> List[Chunk]:
        """
        Chunk a document's normalized text into Chunk records.

        Args:
            document: Source document, used for the chunk source identifiers
            text: Normalized text of the document

        Returns:
            Chunks with sources "{filename}#{index}", index counted per file
        """
        chunks = [
            Chunk(text=chunk_text, source=f"{document.filename}#{idx}")
            for idx, chunk_text in enumerate(self.chunk_text(text))
        ]
        logger.debug(f"Chunked {document.filename} into {len(chunks)} chunks")
        return chunks
