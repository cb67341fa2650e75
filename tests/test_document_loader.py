"""Unit tests for DocumentLoader."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import docx
import pytest
from services.document_loader import DocumentLoader


def write_docx(path: Path, paragraphs, table_rows=None) -> None:
    word_document = docx.Document()
    for paragraph in paragraphs:
        word_document.add_paragraph(paragraph)
    if table_rows:
        table = word_document.add_table(rows=len(table_rows), cols=len(table_rows[0]))
        for r, row in enumerate(table_rows):
            for c, value in enumerate(row):
                table.cell(r, c).text = value
    word_document.save(str(path))


class TestDocumentLoader:
    """Test suite for DocumentLoader class."""

    @pytest.fixture
    def docs_dir(self, tmp_path):
        (tmp_path / "b_notes.txt").write_text("Sleep notes\nline two", encoding="utf-8")
        (tmp_path / "a_guide.TXT").write_text("Upper case extension", encoding="utf-8")
        (tmp_path / "image.png").write_bytes(b"\x89PNG")
        (tmp_path / "readme.md").write_text("not indexed", encoding="utf-8")
        write_docx(tmp_path / "c_report.docx", ["First paragraph", "Second paragraph"])
        return tmp_path

    def test_list_files_filters_and_sorts(self, docs_dir):
        loader = DocumentLoader(str(docs_dir))
        assert loader.list_files() == ["a_guide.TXT", "b_notes.txt", "c_report.docx"]

    def test_list_files_skips_directories(self, docs_dir):
        (docs_dir / "folder.txt").mkdir()
        loader = DocumentLoader(str(docs_dir))
        assert "folder.txt" not in loader.list_files()

    def test_missing_directory_returns_empty(self, tmp_path):
        loader = DocumentLoader(str(tmp_path / "missing"))
        assert loader.list_files() == []
        assert list(loader.load_documents()) == []

    def test_load_txt_file(self, docs_dir):
        loader = DocumentLoader(str(docs_dir))
        document = loader.load_file(str(docs_dir / "b_notes.txt"))

        assert document.filename == "b_notes.txt"
        assert document.text == "Sleep notes\nline two"

    def test_load_docx_file(self, docs_dir):
        loader = DocumentLoader(str(docs_dir))
        document = loader.load_file(str(docs_dir / "c_report.docx"))

        assert document.filename == "c_report.docx"
        assert "First paragraph" in document.text
        assert "Second paragraph" in document.text

    def test_load_docx_includes_table_text(self, tmp_path):
        write_docx(tmp_path / "table.docx", ["Intro"], [["Hours", "Quality"], ["8", "good"]])
        document = DocumentLoader(str(tmp_path)).load_file(str(tmp_path / "table.docx"))

        for value in ("Intro", "Hours", "Quality", "8", "good"):
            assert value in document.text

    def test_load_docx_keeps_body_order(self, tmp_path):
        """Table text stays between the paragraphs that surround it."""
        word_document = docx.Document()
        word_document.add_paragraph("before")
        table = word_document.add_table(rows=1, cols=2)
        table.cell(0, 0).text = "left"
        table.cell(0, 1).text = "right"
        word_document.add_paragraph("after")
        word_document.save(str(tmp_path / "ordered.docx"))

        document = DocumentLoader(str(tmp_path)).load_file(str(tmp_path / "ordered.docx"))

        assert document.text.split() == ["before", "left", "right", "after"]

    def test_load_docx_merged_cell_text_once(self, tmp_path):
        word_document = docx.Document()
        table = word_document.add_table(rows=1, cols=3)
        merged = table.cell(0, 0).merge(table.cell(0, 1))
        merged.text = "merged"
        table.cell(0, 2).text = "single"
        word_document.save(str(tmp_path / "merged.docx"))

        document = DocumentLoader(str(tmp_path)).load_file(str(tmp_path / "merged.docx"))

        assert document.text.split() == ["merged", "single"]

    def test_load_unsupported_file_raises(self, docs_dir):
        loader = DocumentLoader(str(docs_dir))
        with pytest.raises(ValueError, match="Unsupported file type"):
            loader.load_file(str(docs_dir / "readme.md"))

    def test_load_documents_in_order(self, docs_dir):
        loader = DocumentLoader(str(docs_dir))
        filenames = [d.filename for d in loader.load_documents()]
        assert filenames == ["a_guide.TXT", "b_notes.txt", "c_report.docx"]

    def test_corrupt_docx_is_skipped(self, docs_dir, caplog):
        (docs_dir / "broken.docx").write_bytes(b"this is not a zip archive")
        loader = DocumentLoader(str(docs_dir))

        with caplog.at_level("ERROR"):
            filenames = [d.filename for d in loader.load_documents()]

        assert "broken.docx" not in filenames
        assert filenames == ["a_guide.TXT", "b_notes.txt", "c_report.docx"]
        assert any("broken.docx" in record.getMessage() for record in caplog.records)

    def test_invalid_utf8_txt_is_skipped(self, docs_dir):
        (docs_dir / "latin1.txt").write_bytes("caf\xe9".encode("latin-1"))
        loader = DocumentLoader(str(docs_dir))

        filenames = [d.filename for d in loader.load_documents()]

        assert "latin1.txt" not in filenames
        assert len(filenames) == 3
