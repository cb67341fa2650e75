"""
Index build report for Ohara AI backend.

This script:
1. Loads every .txt and .docx file from the documents directory
2. Normalizes and chunks each one
3. Prints how many chunks every file contributed

Useful for checking a documents directory before starting the API.

Usage:
    python build_index.py [docs_directory]
"""
import sys
import logging
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent))

from services.document_loader import DocumentLoader
from services.chunking_engine import ChunkingEngine
from services.index_builder import IndexBuilder, IndexStore
from config import DOCS_DIRECTORY, WORDS_PER_CHUNK

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """Build the index once and log a per-file summary."""
    argv = sys.argv[1:] if argv is None else argv
    docs_directory = argv[0] if argv else DOCS_DIRECTORY

    try:
        logger.info("=" * 60)
        logger.info(f"Building index from {docs_directory}")
        logger.info("=" * 60)

        builder = IndexBuilder(DocumentLoader(docs_directory), ChunkingEngine())
        index = IndexStore().build_index(builder)

        if not index.files:
            logger.error("No documents indexed! Check that the directory exists and contains .txt or .docx files")
            return 1

        for filename, chunk_count in index.files:
            logger.info(f"  - {filename}: {chunk_count} chunks")

        logger.info("=" * 60)
        logger.info(f"Files indexed: {len(index.files)}")
        logger.info(f"Total chunks: {len(index)} ({WORDS_PER_CHUNK} words per chunk)")
        logger.info("=" * 60)
        return 0

    except KeyboardInterrupt:
        logger.warning("Index build interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
