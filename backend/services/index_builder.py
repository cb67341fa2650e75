"""In-memory chunk index: building it and swapping it in."""
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from models.chunk import Chunk
from services.chunking_engine import ChunkingEngine
from services.document_loader import DocumentLoader
from services.text_processing import normalize_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChunkIndex:
    """
    Immutable, ordered collection of chunks produced by one build.

    Attributes:
        chunks: Chunks in file enumeration order, then chunk order within a file
        files: (filename, chunk_count) for every file that was decoded
    """
    chunks: Tuple[Chunk, ...] = ()
    files: Tuple[Tuple[str, int], ...] = ()

    def __len__(self) -> int:
        return len(self.chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.chunks)

    def sources(self) -> List[str]:
        """Return the source identifier of every chunk, in index order."""
        return [chunk.source for chunk in self.chunks]


class IndexBuilder:
    """Scans a document collection and assembles a ChunkIndex."""

    def __init__(self, document_loader: DocumentLoader, chunking_engine: ChunkingEngine):
        """
        Initialize IndexBuilder.

        Args:
            document_loader: Source of decoded documents
            chunking_engine: Splits normalized text into chunks
        """
        self.document_loader = document_loader
        self.chunking_engine = chunking_engine

    def build(self) -> ChunkIndex:
        """
        Decode, normalize and chunk every supported document.

        Documents whose normalized text is empty are skipped. Decode failures
        are handled (logged and skipped) by the loader.

        Returns:
            A new ChunkIndex
        """
        chunks: List[Chunk] = []
        files: List[Tuple[str, int]] = []

        for document in self.document_loader.load_documents():
            text = normalize_text(document.text)
            if not text:
                logger.debug(f"Skipping {document.filename}: no text after normalization")
                continue

            file_chunks = self.chunking_engine.chunk_document(document, text)
            chunks.extend(file_chunks)
            files.append((document.filename, len(file_chunks)))
            logger.info(f"Added {len(file_chunks)} chunks for {document.filename}")

        logger.info(f"Total chunk count: {len(chunks)}")
        return ChunkIndex(chunks=tuple(chunks), files=tuple(files))


class IndexStore:
    """
    Owns the handle to the process-wide ChunkIndex.

    Readers take the current index with a single attribute read; a rebuild
    assigns a whole new ChunkIndex, so nobody sees a partially built one.
    """

    def __init__(self, index: Optional[ChunkIndex] = None):
        self._index = index if index is not None else ChunkIndex()
        self._ready = index is not None

    @property
    def index(self) -> ChunkIndex:
        return self._index

    @property
    def ready(self) -> bool:
        """True once an index has been installed."""
        return self._ready

    def replace(self, index: ChunkIndex) -> None:
        """Swap in a new index, discarding the previous one."""
        self._index = index
        self._ready = True
        logger.info(f"Installed index with {len(index)} chunks")

    def build_index(self, builder: IndexBuilder) -> ChunkIndex:
        """
        Build a fresh index and replace the current one with it.

        Safe to call repeatedly; each call fully replaces the previous index.

        Args:
            builder: IndexBuilder configured for the document collection

        Returns:
            The newly installed index
        """
        index = builder.build()
        self.replace(index)
        return index
