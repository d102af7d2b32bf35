from __future__ import annotations

"""
Unit tests for the FileSystem Infrastructure Layer.
"""

import os
from pathlib import Path

import pytest

from fileexplorer.infra.fs import DirectorySourceSink, check_existing_output_files, normalize_path, safe_mkdir


def test_sink_writes_utf8_with_lf_endings(tmp_path: Path) -> None:
    out = tmp_path / "gen" / "nested"
    sink = DirectorySourceSink(str(out))

    written = sink.add_source("FileExplorer_Files.py", "class Files:\n    Café_txt = 1\n")

    assert written == str(out / "FileExplorer_Files.py")
    assert (out / "FileExplorer_Files.py").read_bytes() == "class Files:\n    Café_txt = 1\n".encode("utf-8")


def test_sink_dry_run_writes_nothing(tmp_path: Path) -> None:
    sink = DirectorySourceSink(str(tmp_path / "gen"), dry_run=True)

    written = sink.add_source("FileExplorer_Files.py", "x = 1\n")

    assert written.endswith("FileExplorer_Files.py")
    assert not (tmp_path / "gen").exists()


def test_check_existing_output_files(tmp_path: Path) -> None:
    (tmp_path / "a.py").write_text("", encoding="utf-8")

    existing = check_existing_output_files(str(tmp_path), ["a.py", "b.py"])

    assert existing == [str(tmp_path / "a.py")]


def test_safe_mkdir_reports_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    ok, err = safe_mkdir(str(blocker / "sub"))

    assert ok is False
    assert err


def test_normalize_path_fallback(tmp_path: Path) -> None:
    assert normalize_path("  ", str(tmp_path)) == os.path.abspath(str(tmp_path))


def test_normalize_path_expands_user() -> None:
    assert normalize_path("~/gen", "/unused") == os.path.abspath(os.path.expanduser("~/gen"))


def test_prepare_rejects_existing_files(tmp_path: Path) -> None:
    (tmp_path / "FileExplorer_Files.py").write_text("old", encoding="utf-8")
    sink = DirectorySourceSink(str(tmp_path))

    with pytest.raises(FileExistsError, match="overwrite=False"):
        sink.prepare(["FileExplorer_Files.py", "FileExplorer_Other.py"])


def test_prepare_allows_existing_files_with_overwrite_or_dry_run(tmp_path: Path) -> None:
    (tmp_path / "FileExplorer_Files.py").write_text("old", encoding="utf-8")

    DirectorySourceSink(str(tmp_path), overwrite=True).prepare(["FileExplorer_Files.py"])
    DirectorySourceSink(str(tmp_path), dry_run=True).prepare(["FileExplorer_Files.py"])
