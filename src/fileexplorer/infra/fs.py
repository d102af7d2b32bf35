from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path resolution for CLI inputs and persistence of generated source units.
The generation core never touches the disk; everything that reads or
writes files on behalf of the CLI lives here.
"""

import logging
import os
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def check_existing_output_files(output_dir: str, names: List[str]) -> List[str]:
    """
    Identify naming collisions in the target output directory.

    Args:
        output_dir: Directory to inspect.
        names: List of filenames to check for existence.

    Returns:
        List[str]: Absolute paths of files that already exist.
    """
    existing: List[str] = []
    for n in names:
        full = os.path.join(output_dir, n)
        if os.path.exists(full):
            existing.append(full)
    return existing


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)

# -----------------------------------------------------------------------------
# SOURCE PERSISTENCE
# -----------------------------------------------------------------------------

class DirectorySourceSink:
    """
    Writes generated units as UTF-8 files into a single output directory.

    Hint names are used verbatim as file names. Unless overwrite is set,
    prepare() refuses to start when any target file already exists. With
    dry_run enabled the sink only reports the paths it would have written.
    """

    def __init__(self, output_dir: str, *, overwrite: bool = False, dry_run: bool = False):
        self.output_dir = output_dir
        self.overwrite = overwrite
        self.dry_run = dry_run

    def target_path(self, hint_name: str) -> str:
        return os.path.join(self.output_dir, hint_name)

    def prepare(self, hint_names: List[str]) -> None:
        """
        Collision pre-check run before anything is written.

        Raises:
            FileExistsError: If targets exist and overwrite is disabled.
        """
        if self.overwrite or self.dry_run:
            return

        existing = check_existing_output_files(self.output_dir, hint_names)
        if existing:
            logger.warning(f"Existing output files: {existing}")
            raise FileExistsError(
                f"Existing files detected and overwrite=False. Aborting. Files: {', '.join(existing)}"
            )

    def add_source(self, hint_name: str, text: str) -> str:
        """
        Persist one unit.

        Raises:
            OSError: If the directory cannot be created or the file written.
        """
        path = self.target_path(hint_name)
        if self.dry_run:
            logger.info(f"[dry-run] Would write {path}")
            return path

        ok, err = safe_mkdir(self.output_dir)
        if not ok:
            raise OSError(f"Cannot create output directory '{self.output_dir}': {err}")

        # newline="" keeps '\n' line endings on every platform
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        logger.info(f"Generated source written: {path}")
        return path
