from __future__ import annotations

"""
File Descriptor Builder.

Maps one absolute path onto its dual-path File record: the design-time
segments that decide where the constant lives, and the runtime segments
that make up its value.
"""

import posixpath

from fileexplorer.core.analysis.paths import make_relative, normalize_separators, split_file_name
from fileexplorer.domain.models import File


def designtime_name_for(file_name: str) -> str:
    """Derive the identifier-safe name: 'logo.png' -> 'logo_png'."""
    stem, extension = split_file_name(file_name)
    return stem + extension.replace(".", "_")


def create_file(absolute_path: str, runtime_root: str, designtime_root: str) -> File:
    """
    Build the File record for an absolute path.

    Args:
        absolute_path: Absolute path of the input file.
        runtime_root: Base directory the emitted path is relative to.
        designtime_root: Base directory the generated tree browses from.

    Returns:
        File: The immutable descriptor.

    Raises:
        BasePathMismatchError: If either root does not occur in the path.
    """
    designtime_path = make_relative(absolute_path, designtime_root)
    runtime_path = make_relative(absolute_path, runtime_root)

    return File(
        designtime_path=designtime_path,
        runtime_path=runtime_path,
        designtime_name=designtime_name_for(absolute_path),
        runtime_name=posixpath.basename(normalize_separators(absolute_path)),
    )
