"""Request and response schemas for the chat API."""
from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    """Incoming chat question."""
    question: Optional[str] = None

    @field_validator("question", mode="before")
    @classmethod
    def coerce_scalar(cls, value: Any) -> Any:
        """Accept numbers and booleans as question text; falsy values count as empty."""
        if isinstance(value, bool):
            return "true" if value else ""
        if isinstance(value, (int, float)):
            return str(value) if value else ""
        return value


class UsedChunk(BaseModel):
    """Reference to a chunk that was placed in the prompt."""
    source: str
    score: int


class TokenUsage(BaseModel):
    input: int
    output: int


class ResponseMetadata(BaseModel):
    """Generation and retrieval details for a single answer."""
    model_used: str
    persona: str
    tokens: TokenUsage
    prompt_tokens: int = Field(description="Prompt size estimated locally with tiktoken")
    latency_ms: int
    chunks_retrieved: int


class ChatResponse(BaseModel):
    """Answer returned by POST /chat."""
    answer: str
    language: str
    used_chunks: List[UsedChunk]
    metadata: ResponseMetadata
