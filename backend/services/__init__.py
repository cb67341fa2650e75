"""Services for Ohara AI backend."""
from .text_processing import normalize_text, tokenize
from .document_loader import DocumentLoader
from .chunking_engine import ChunkingEngine
from .index_builder import ChunkIndex, IndexBuilder, IndexStore
from .retrieval_engine import RetrievalEngine
from .language_detector import LanguageDetector
from .persona import Persona, PERSONAS, get_persona
from .llm_client import LLMClient, LLMResponse, LLMError, LLMClientError

__all__ = ['normalize_text', 'tokenize', 'DocumentLoader', 'ChunkingEngine', 'ChunkIndex', 'IndexBuilder', 'IndexStore', 'RetrievalEngine', 'LanguageDetector', 'Persona', 'PERSONAS', 'get_persona', 'LLMClient', 'LLMResponse', 'LLMError', 'LLMClientError']
