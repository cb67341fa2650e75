"""Configuration management for Ohara AI backend."""
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API Keys
GROQ_API_KEY = os.getenv("GROQ_API_KEY")

# Server Configuration
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")  # "json" or "text"

# CORS Configuration
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

# Document Configuration
DOCS_DIRECTORY = os.getenv(
    "DOCS_DIRECTORY",
    str(Path(__file__).parent.parent / "docs")
)

# Chunking Configuration
WORDS_PER_CHUNK = int(os.getenv("WORDS_PER_CHUNK", "350"))
MIN_CHUNK_WORDS = int(os.getenv("MIN_CHUNK_WORDS", "20"))  # windows with <= this many words are dropped

# Retrieval Configuration
TOP_K = int(os.getenv("TOP_K", "4"))

# Generation Configuration
GENERATION_MODEL = os.getenv("GENERATION_MODEL", "llama-3.1-8b-instant")
MAX_TOKENS = int(os.getenv("MAX_TOKENS", "400"))
TEMPERATURE = float(os.getenv("TEMPERATURE", "0.2"))
PERSONA = os.getenv("PERSONA", "multilingual")

# Logging Configuration
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
