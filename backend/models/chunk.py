"""Chunk data models."""
from dataclasses import dataclass

@dataclass(frozen=True)
class Chunk:
    """Represents a document chunk for retrieval."""
    text: str  # Normalized words joined by single spaces
    source: str  # Format: "{filename}#{chunk_index}"

@dataclass(frozen=True)
class ScoredChunk:
    """Chunk with lexical overlap score from retrieval."""
    chunk: Chunk
    score: int  # Question tokens found in the chunk, counted per chunk occurrence

    @property
    def text(self) -> str:
        return self.chunk.text

    @property
    def source(self) -> str:
        return self.chunk.source
