from __future__ import annotations

"""
Python Emission Strategy.

Renders a Folder tree as nested classes holding `os.path.join` constants:

    class Files:
        class Images:
            Logo_png = os.path.join("images", "logo.png")
"""

import keyword
from typing import List

from fileexplorer.core.analysis.identifiers import format_identifier
from fileexplorer.core.emit.base import INDENT, EmitterStrategy
from fileexplorer.domain.models import File, Folder

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

# Names the compiler refuses as assignment targets
_RESERVED_NAMES = frozenset(["__debug__"])


def python_identifier(text: str) -> str:
    """Format an identifier, suffixing '_' when Python reserves the result (None, True, __debug__)."""
    name = format_identifier(text)
    if keyword.iskeyword(name) or name in _RESERVED_NAMES:
        return name + "_"
    return name


def _escape(ch: str) -> str:
    if ch in _ESCAPES:
        return _ESCAPES[ch]
    if ch.isprintable():
        return ch
    code = ord(ch)
    if code < 0x100:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


class PythonEmitter(EmitterStrategy):
    name = "python"
    file_suffix = ".py"

    def render_header(self, namespace: str, lines: List[str]) -> None:
        flat = " ".join(namespace.splitlines())
        lines.append("# <auto-generated> fileexplorer: do not edit by hand. </auto-generated>")
        lines.append(f'"""Generated path constants for namespace \'{self.quote(flat)[1:-1]}\'."""')
        lines.append("")
        lines.append("import os")
        lines.append("")
        lines.append("")

    def render_folder(self, folder: Folder, lines: List[str], indent: str) -> None:
        lines.append(f"{indent}class {python_identifier(folder.name)}:")
        inner = indent + INDENT
        start = len(lines)

        for child in folder.folders:
            self.render_folder(child, lines, inner)
        for file in folder.files:
            self.render_file(file, lines, inner)

        if len(lines) == start:
            lines.append(f"{inner}pass")

    def render_file(self, file: File, lines: List[str], indent: str) -> None:
        args = ", ".join(self.quote(segment) for segment in (*file.runtime_path, file.runtime_name))
        lines.append(f"{indent}{python_identifier(file.designtime_name)} = os.path.join({args})")

    def quote(self, segment: str) -> str:
        return '"' + "".join(_escape(ch) for ch in segment) + '"'
