from __future__ import annotations

"""
Path Normalizer.

Pure string helpers that turn absolute file paths into root-relative
segment tuples. Both '/' and '\\' are accepted on input, on every platform,
because manifests are routinely authored on one OS and built on another.
"""

import posixpath
from typing import Tuple

from fileexplorer.domain.errors import BasePathMismatchError

SEPARATOR = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def normalize_separators(path: str) -> str:
    """Convert every directory separator to the canonical '/'."""
    return path.replace("\\", SEPARATOR)


def split_file_name(path: str) -> Tuple[str, str]:
    """
    Split the file name of a path into (stem, extension).

    The extension keeps its leading dot. A trailing dot yields no
    extension, and a leading dot (".gitignore") is an extension with an
    empty stem.

    Args:
        path: File path or bare file name.

    Returns:
        Tuple[str, str]: Stem and extension.
    """
    name = posixpath.basename(normalize_separators(path))
    index = name.rfind(".")
    if index == -1:
        return name, ""
    if index == len(name) - 1:
        return name[:index], ""
    return name[:index], name[index:]


def make_relative(absolute_path: str, base_dir: str) -> Tuple[str, ...]:
    """
    Compute the directory segments of a file relative to a base directory.

    The base is matched as a plain substring of the file's directory; the
    portion following its last occurrence is split into non-empty
    segments. The file name itself is never part of the result.

    Args:
        absolute_path: Absolute path of the file.
        base_dir: Base directory expected to occur in the path.

    Returns:
        Tuple[str, ...]: Root-relative directory segments.

    Raises:
        ValueError: If base_dir is empty.
        BasePathMismatchError: If base_dir does not occur in the directory.
    """
    base = normalize_separators(base_dir)
    if not base:
        raise ValueError("Base directory must not be empty.")

    directory = posixpath.dirname(normalize_separators(absolute_path))

    index = directory.rfind(base)
    if index == -1:
        raise BasePathMismatchError(directory, base)

    remainder = directory[index + len(base):]
    return tuple(segment for segment in remainder.split(SEPARATOR) if segment)
