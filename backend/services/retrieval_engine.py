"""Retrieval engine scoring chunks by lexical overlap with the question."""
import logging
from typing import List

from config import TOP_K
from models.chunk import ScoredChunk
from services.index_builder import IndexStore
from services.text_processing import tokenize

logger = logging.getLogger(__name__)


class RetrievalEngine:
    """Rank indexed chunks by term overlap with a question and return the top K."""

    def __init__(self, index_store: IndexStore):
        """
        Initialize the retrieval engine.

        Args:
            index_store: Holder of the current ChunkIndex
        """
        self.index_store = index_store
        logger.info("Initialized RetrievalEngine")

    def retrieve(self, question: str, top_k: int = TOP_K) -> List[ScoredChunk]:
        """
        Retrieve the chunks sharing the most tokens with the question.

        Scoring and selection:
        1. Tokenize the question into a set of tokens
        2. Score each chunk: walk its token sequence and count tokens that are
           in the question set (a token repeated in the chunk counts each time)
        3. Stable sort by score descending, so ties keep index order
        4. If the best score is 0 nothing overlaps; return the first top_k
           chunks of the index in their original order instead
        5. Otherwise return the first top_k scored chunks

        Args:
            question: User question
            top_k: Maximum number of chunks to return (default: 4)

        Returns:
            List of scored chunks; empty for an empty index or top_k <= 0
        """
        # Single read of the handle; a concurrent rebuild cannot mix two indexes
        index = self.index_store.index

        if not index or top_k <= 0:
            return []

        question_tokens = set(tokenize(question))

        scored = [
            ScoredChunk(chunk=chunk, score=self._score(question_tokens, chunk.text))
            for chunk in index
        ]

        ranked = sorted(scored, key=lambda scored_chunk: scored_chunk.score, reverse=True)

        # Scores are non-negative, so a zero top score means every score is zero
        if ranked[0].score == 0:
            logger.info("No token overlap with any chunk, falling back to index order")
            return scored[:top_k]

        results = ranked[:top_k]
        logger.info(
            f"Retrieved {len(results)} chunks "
            f"(top score: {results[0].score}, sources: {[r.source for r in results]})"
        )
        return results

    @staticmethod
    def _score(question_tokens: set, chunk_text: str) -> int:
        return sum(1 for token in tokenize(chunk_text) if token in question_tokens)
