from __future__ import annotations

"""
Unit tests for the CLI Application Controller (in-process).

Verifies exit codes, configuration layering, collision handling and
the rendered outputs.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from fileexplorer.interface.cli.app import main


def _write_manifest(tmp_path: Path, data: Dict[str, Any]) -> Path:
    path = tmp_path / "files.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def manifest(tmp_path: Path) -> Path:
    return _write_manifest(tmp_path, {
        "defaults": {"type_name": "App.Files", "relative_to": "assets", "browse_from": "assets"},
        "files": [
            "/proj/assets/images/logo.png",
            "/proj/assets/images/icons/close.png",
            "/proj/assets/2bad.txt",
        ],
    })


def test_generates_python_unit(tmp_path: Path, manifest: Path, capsys) -> None:
    out = tmp_path / "gen"

    code = main(["-m", str(manifest), "-o", str(out)])

    assert code == 0
    text = (out / "FileExplorer_Files.py").read_text(encoding="utf-8")
    assert 'Logo_png = os.path.join("images", "logo.png")' in text
    stdout = capsys.readouterr().out
    assert "Constants emitted: 2" in stdout
    assert "FE0001" in stdout


def test_manifest_settings_select_target(tmp_path: Path) -> None:
    path = _write_manifest(tmp_path, {
        "settings": {"target": "csharp", "hint_prefix": "Paths_"},
        "defaults": {"type_name": "Files", "relative_to": "assets", "browse_from": "assets"},
        "files": ["/proj/assets/a.txt"],
    })
    out = tmp_path / "gen"

    assert main(["-m", str(path), "-o", str(out)]) == 0

    text = (out / "Paths_Files.cs").read_text(encoding="utf-8")
    assert text.startswith("// <auto-generated/>\nnamespace FileExplorer\n")


def test_cli_overrides_manifest_settings(tmp_path: Path) -> None:
    path = _write_manifest(tmp_path, {
        "settings": {"target": "csharp"},
        "defaults": {"type_name": "A.B", "relative_to": "assets", "browse_from": "assets"},
        "files": ["/proj/assets/a.txt"],
    })
    out = tmp_path / "gen"

    assert main(["-m", str(path), "-o", str(out), "-t", "python"]) == 0
    assert (out / "FileExplorer_B.py").exists()


def test_existing_output_aborts_without_overwrite(tmp_path: Path, manifest: Path, capsys) -> None:
    out = tmp_path / "gen"
    out.mkdir()
    target = out / "FileExplorer_Files.py"
    target.write_text("old", encoding="utf-8")

    assert main(["-m", str(manifest), "-o", str(out)]) == 1
    assert target.read_text(encoding="utf-8") == "old"
    assert "overwrite=False" in capsys.readouterr().err

    assert main(["-m", str(manifest), "-o", str(out), "--overwrite"]) == 0
    assert target.read_text(encoding="utf-8") != "old"


def test_dry_run_writes_nothing(tmp_path: Path, manifest: Path, capsys) -> None:
    out = tmp_path / "gen"

    assert main(["-m", str(manifest), "-o", str(out), "--dry-run", "--print"]) == 0

    assert not out.exists()
    stdout = capsys.readouterr().out
    assert "===== FileExplorer_Files.py =====" in stdout
    assert "class Files:" in stdout


def test_json_output(tmp_path: Path, manifest: Path, capsys) -> None:
    assert main(["-m", str(manifest), "-o", str(tmp_path / "gen"), "--json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is True
    assert payload["summary"]["skipped_invalid"] == 1
    assert payload["units"][0]["hint_name"] == "FileExplorer_Files.py"
    assert payload["diagnostics"][0]["id"] == "FE0001"


def test_dump_config(tmp_path: Path, manifest: Path, capsys) -> None:
    assert main(["-m", str(manifest), "--namespace", "Game", "--dump-config"]) == 0

    cfg = json.loads(capsys.readouterr().out)
    assert cfg["default_namespace"] == "Game"
    assert cfg["target"] == "python"


def test_missing_manifest_argument(capsys) -> None:
    assert main([]) == 2
    assert "manifest is required" in capsys.readouterr().err


def test_unreadable_manifest(tmp_path: Path, capsys) -> None:
    assert main(["-m", str(tmp_path / "absent.json")]) == 2


def test_malformed_manifest(tmp_path: Path, capsys) -> None:
    path = tmp_path / "bad.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert main(["-m", str(path)]) == 2
    assert "Manifest root must be an object" in capsys.readouterr().err


def test_type_names_sharing_an_output_file_fail_without_writing(tmp_path: Path, capsys) -> None:
    path = _write_manifest(tmp_path, {
        "defaults": {"relative_to": "assets", "browse_from": "assets"},
        "files": [
            {"path": "/proj/assets/a.png", "type_name": "App.Files"},
            {"path": "/proj/assets/b.png", "type_name": "Lib.Files"},
        ],
    })
    out = tmp_path / "gen"

    assert main(["-m", str(path), "-o", str(out)]) == 1

    assert not (out / "FileExplorer_Files.py").exists()
    assert "App.Files, Lib.Files" in capsys.readouterr().err


def test_existing_output_check_runs_before_any_write(tmp_path: Path, capsys) -> None:
    path = _write_manifest(tmp_path, {
        "defaults": {"relative_to": "assets", "browse_from": "assets"},
        "files": [
            {"path": "/proj/assets/a.png", "type_name": "App.First"},
            {"path": "/proj/assets/b.png", "type_name": "App.Second"},
        ],
    })
    out = tmp_path / "gen"
    out.mkdir()
    (out / "FileExplorer_Second.py").write_text("old", encoding="utf-8")

    assert main(["-m", str(path), "-o", str(out)]) == 1

    assert not (out / "FileExplorer_First.py").exists()
    assert "overwrite=False" in capsys.readouterr().err
