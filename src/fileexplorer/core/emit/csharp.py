from __future__ import annotations

"""
C# Emission Strategy.

Renders a Folder tree as nested `public static partial class` declarations
inside a namespace block, with one `System.IO.Path.Combine` field per file.
Field names use the verbatim '@' prefix so reserved words stay legal.
"""

from typing import List

from fileexplorer.core.analysis.identifiers import format_identifier
from fileexplorer.core.emit.base import INDENT, EmitterStrategy
from fileexplorer.domain.models import File, Folder


class CSharpEmitter(EmitterStrategy):
    name = "csharp"
    file_suffix = ".cs"

    def body_indent(self) -> str:
        return INDENT

    def render_header(self, namespace: str, lines: List[str]) -> None:
        lines.append("// <auto-generated/>")
        lines.append(f"namespace {namespace}")
        lines.append("{")

    def render_footer(self, namespace: str, lines: List[str]) -> None:
        lines.append("}")

    def render_folder(self, folder: Folder, lines: List[str], indent: str) -> None:
        lines.append(f"{indent}public static partial class {format_identifier(folder.name)}")
        lines.append(f"{indent}{{")
        inner = indent + INDENT

        for child in folder.folders:
            self.render_folder(child, lines, inner)
        for file in folder.files:
            self.render_file(file, lines, inner)

        lines.append(f"{indent}}}")

    def render_file(self, file: File, lines: List[str], indent: str) -> None:
        args = ", ".join(self.quote(segment) for segment in (*file.runtime_path, file.runtime_name))
        name = format_identifier(file.designtime_name)
        lines.append(f"{indent}public static readonly string @{name} = System.IO.Path.Combine({args});")

    def quote(self, segment: str) -> str:
        return '@"' + segment.replace('"', '""') + '"'
