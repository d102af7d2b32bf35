from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and validates exit codes,
stream output and the generated files, including that the generated
Python module is importable and resolves to the expected paths.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "fileexplorer" / "main.py"


def run_cli(args: List[str], cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process with 'src' on PYTHONPATH.

    Args:
        args: Command line arguments (excluding interpreter and script).
        cwd: Optional working directory for the subprocess.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_generated_module_resolves_paths(tmp_path: Path) -> None:
    manifest = tmp_path / "files.json"
    manifest.write_text(json.dumps({
        "defaults": {"type_name": "App.Files", "relative_to": "assets", "browse_from": "assets"},
        "files": [
            "/proj/assets/images/logo.png",
            "/proj/assets/images/icons/close.png",
            "/proj/assets/readme.md",
        ],
    }), encoding="utf-8")
    out = tmp_path / "gen"

    result = run_cli(["-m", str(manifest), "-o", str(out)])

    assert result.returncode == 0, result.stderr
    assert "Generation completed." in result.stdout

    namespace: dict = {}
    source = (out / "FileExplorer_Files.py").read_text(encoding="utf-8")
    exec(compile(source, "FileExplorer_Files.py", "exec"), namespace)
    files = namespace["Files"]

    assert files.Images.Logo_png == os.path.join("images", "logo.png")
    assert files.Images.Icons.Close_png == os.path.join("images", "icons", "close.png")
    assert files.Readme_md == "readme.md"


def test_help_exits_cleanly() -> None:
    result = run_cli(["--help"])

    assert result.returncode == 0
    assert "--manifest" in result.stdout


def test_bad_manifest_exit_code(tmp_path: Path) -> None:
    result = run_cli(["-m", str(tmp_path / "missing.json")])

    assert result.returncode == 2
    assert "ERROR" in result.stderr
