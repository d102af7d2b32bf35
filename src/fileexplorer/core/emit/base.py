from __future__ import annotations

"""
Base Definitions for Emission Strategies.

Provides the abstract interface shared by every target language. An
emitter renders a whole Folder tree into one source unit and is its own
pretty-printer: indentation is produced while walking the tree, so the
output is stable byte for byte.
"""

from abc import ABC, abstractmethod
from typing import List

from fileexplorer.domain.models import File, Folder

INDENT: str = "    "


class EmitterStrategy(ABC):
    """
    Abstract base class for target-specific code emission.
    """

    #: Target identifier used in configuration.
    name: str = ""

    #: Appended to the unit hint name when persisted.
    file_suffix: str = ""

    def render_unit(self, namespace: str, root: Folder) -> str:
        """
        Render a complete source unit for a group.

        Args:
            namespace: Namespace/module portion of the type name.
            root: Root folder of the group.

        Returns:
            str: Source text terminated by a single newline.
        """
        lines: List[str] = []
        self.render_header(namespace, lines)
        self.render_folder(root, lines, self.body_indent())
        self.render_footer(namespace, lines)
        return "\n".join(lines) + "\n"

    def body_indent(self) -> str:
        return ""

    @abstractmethod
    def render_header(self, namespace: str, lines: List[str]) -> None:
        """Append the unit preamble (namespace opening, imports)."""

    @abstractmethod
    def render_folder(self, folder: Folder, lines: List[str], indent: str) -> None:
        """Append the container declaration of a folder, recursively."""

    @abstractmethod
    def render_file(self, file: File, lines: List[str], indent: str) -> None:
        """Append the path-constant declaration of a file."""

    def render_footer(self, namespace: str, lines: List[str]) -> None:
        return None

    @abstractmethod
    def quote(self, segment: str) -> str:
        """Escape a raw path segment as a string literal."""
