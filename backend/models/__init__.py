"""Data models for Ohara AI backend."""
from .document import Document
from .chunk import Chunk, ScoredChunk
from .api import ChatRequest, ChatResponse, ResponseMetadata, TokenUsage, UsedChunk

__all__ = [
    "Document",
    "Chunk",
    "ScoredChunk",
    "ChatRequest",
    "ChatResponse",
    "ResponseMetadata",
    "TokenUsage",
    "UsedChunk",
]
