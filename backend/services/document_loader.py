"""Document loading service for plain text and Word files."""
import logging
import os
from typing import Iterator, List

import docx  # python-docx
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from models.document import Document

logger = logging.getLogger(__name__)

class DocumentLoader:
    """Loads and extracts raw text from .txt and .docx files."""

    SUPPORTED_EXTENSIONS = (".txt", ".docx")

    def __init__(self, docs_directory: str = "docs"):
        """
        Initialize DocumentLoader.

        Args:
            docs_directory: Path to directory containing the source documents
        """
        self.docs_directory = docs_directory

    def list_files(self) -> List[str]:
        """
        List supported files in the documents directory.

        Returns:
            Filenames with a supported extension, sorted by name
        """
        if not os.path.isdir(self.docs_directory):
            logger.error(f"Documents directory not found: {self.docs_directory}")
            return []

        files = [
            f for f in sorted(os.listdir(self.docs_directory))
            if os.path.splitext(f)[1].lower() in self.SUPPORTED_EXTENSIONS
            and os.path.isfile(os.path.join(self.docs_directory, f))
        ]
        logger.info(f"Found {len(files)} supported files in {self.docs_directory}")
        return files

    def load_documents(self) -> Iterator[Document]:
        """
        Load every supported file from the documents directory.

        Files that fail to decode are logged and skipped.

        Yields:
            Document objects in filename order
        """
        for filename in self.list_files():
            filepath = os.path.join(self.docs_directory, filename)
            logger.info(f"Reading file: {filename}")

            try:
                document = self.load_file(filepath)
            except Exception as e:
                logger.error(f"Error loading {filename}: {str(e)}", exc_info=True)
                # Skip unreadable file and continue
                continue

            yield document

    def load_file(self, filepath: str) -> Document:
        """
        Decode a single supported file.

        Args:
            filepath: Full path to the file

        Returns:
            Document with the raw extracted text

        Raises:
            ValueError: If the extension is not supported
        """
        filename = os.path.basename(filepath)
        extension = os.path.splitext(filename)[1].lower()

        if extension == ".txt":
            text = self._load_txt(filepath)
        elif extension == ".docx":
            text = self._load_docx(filepath)
        else:
            raise ValueError(f"Unsupported file type: {filename}")

        return Document(filename=filename, text=text)

    def _load_txt(self, filepath: str) -> str:
        with open(filepath, "r", encoding="utf-8") as f:
            return f.read()

    def _load_docx(self, filepath: str) -> str:
        """
        Extract raw text from a Word document.

        Paragraphs and table cells are emitted in the order they appear in
        the body, one line per paragraph.
        """
        word_document = docx.Document(filepath)
        return "\n".join(self._block_texts(word_document.element.body, word_document))

    def _block_texts(self, container, parent) -> Iterator[str]:
        """Yield paragraph texts under a body or table cell element, in order."""
        for child in container.iterchildren():
            if child.tag == qn("w:p"):
                yield Paragraph(child, parent).text
            elif child.tag == qn("w:tbl"):
                for row in Table(child, parent).rows:
                    seen = []
                    for cell in row.cells:
                        # Merged cells repeat across the row
                        if any(cell._tc is tc for tc in seen):
                            continue
                        seen.append(cell._tc)
                        yield from self._block_texts(cell._tc, cell)
