from __future__ import annotations

"""
Folder Tree Builder.

Groups validated files by their design-time path into a recursive Folder
structure. Child folders keep the order in which their segment value is
first seen in the input, so unchanged input always yields the same tree.
"""

from typing import Dict, List, Sequence

from fileexplorer.domain.models import File, Folder


def build_tree(name: str, files: Sequence[File], level: int = 0) -> Folder:
    """
    Build the folder for one grouping level.

    Files whose design-time path is longer than `level` are grouped by
    their segment at `level` and become child folders; files whose path
    ends exactly at `level` are attached to this folder.

    Args:
        name: Folder name (the root container name at level 0).
        files: Files belonging to this folder or below it.
        level: Current depth.

    Returns:
        Folder: The immutable subtree.
    """
    groups: Dict[str, List[File]] = {}
    here: List[File] = []

    for file in files:
        depth = len(file.designtime_path)
        if depth > level:
            groups.setdefault(file.designtime_path[level], []).append(file)
        elif depth == level:
            here.append(file)

    folders = tuple(build_tree(key, members, level + 1) for key, members in groups.items())
    return Folder(name=name, folders=folders, files=tuple(here))


def iter_files(folder: Folder):
    """Yield every file of a subtree, depth-first, in emission order."""
    for child in folder.folders:
        yield from iter_files(child)
    yield from folder.files


def count_files(folder: Folder) -> int:
    return sum(1 for _ in iter_files(folder))
