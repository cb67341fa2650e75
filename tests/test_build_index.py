"""Tests for the build_index report script."""
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import build_index


def test_reports_indexed_files(tmp_path, caplog):
    (tmp_path / "sleep.txt").write_text(" ".join(["rest"] * 400), encoding="utf-8")

    with caplog.at_level("INFO"):
        exit_code = build_index.main([str(tmp_path)])

    assert exit_code == 0
    messages = [record.getMessage() for record in caplog.records]
    assert any("sleep.txt: 2 chunks" in message for message in messages)
    assert any("Total chunks: 2" in message for message in messages)


def test_empty_directory_fails(tmp_path):
    assert build_index.main([str(tmp_path)]) == 1
