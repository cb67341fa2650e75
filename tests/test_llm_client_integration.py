"""Integration tests for LLMClient with Groq API.

These tests require a valid GROQ_API_KEY in the environment.
They will be skipped if the API key is not available.
"""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
import os
from models.chunk import Chunk, ScoredChunk
from services.llm_client import LLMClient, LLMResponse
from services.persona import MULTILINGUAL


@pytest.mark.skipif(
    not os.getenv("GROQ_API_KEY"),
    reason="GROQ_API_KEY not set in environment"
)
class TestLLMClientIntegration:
    """Integration tests for LLMClient with real Groq API."""

    @pytest.fixture
    def client(self):
        return LLMClient()

    def test_generate_with_persona_prompt(self, client):
        chunks = [ScoredChunk(
            chunk=Chunk(text="Adults need seven to nine hours of sleep per night.", source="sleep.txt#0"),
            score=2
        )]
        prompt = MULTILINGUAL.build_prompt("How many hours of sleep do adults need?", "en", chunks)

        response = client.generate(prompt=prompt, system_prompt=MULTILINGUAL.system_prompt, max_tokens=60)

        assert isinstance(response, LLMResponse)
        assert len(response.text) > 0
        assert response.tokens_input > 0
        assert response.tokens_output > 0
        assert response.model_used == "llama-3.1-8b-instant"
