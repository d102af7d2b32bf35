from __future__ import annotations

"""
Generation Domain Data Models.

Defines the immutable structures that flow through a generation pass: the
raw host entries, the dual-path File records, the recursive Folder tree
and the generated source units handed back to the host.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from fileexplorer.domain.diagnostics import Diagnostic

# -----------------------------------------------------------------------------
# HOST INPUT
# -----------------------------------------------------------------------------

class OptionsLookup:
    """
    Read-only view over per-file build metadata.

    Absent keys and empty values are indistinguishable to callers: both
    come back as None, which the pipeline treats as "skip this file".
    """

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        self._values: Dict[str, str] = {}
        for key, value in (values or {}).items():
            if value is None:
                continue
            self._values[str(key)] = str(value)

    def get(self, key: str) -> Optional[str]:
        value = self._values.get(key)
        return value if value else None

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionsLookup):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"OptionsLookup({self._values!r})"


@dataclass(frozen=True)
class FileInput:
    """
    One eligible file as supplied by the host build system.

    Attributes:
        path: Absolute path of the file.
        options: Build metadata attached to the file.
    """
    path: str
    options: OptionsLookup = field(default_factory=OptionsLookup)

# -----------------------------------------------------------------------------
# TREE MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class File:
    """
    Leaf entry of the generated tree.

    Attributes:
        designtime_path: Segments relative to the browse-from base. Drives tree placement.
        runtime_path: Segments relative to the relative-to base. Drives the emitted value.
        designtime_name: Identifier-safe file name (extension dot replaced by '_').
        runtime_name: Literal file name including its extension.
    """
    designtime_path: Tuple[str, ...]
    runtime_path: Tuple[str, ...]
    designtime_name: str
    runtime_name: str


@dataclass(frozen=True)
class Folder:
    """
    Grouping level of the generated tree.

    Attributes:
        name: Shared segment value (the type name for the root).
        folders: Child folders, in first-seen order.
        files: Files whose design-time path terminates at this level.
    """
    name: str
    folders: Tuple["Folder", ...] = ()
    files: Tuple[File, ...] = ()

# -----------------------------------------------------------------------------
# OUTPUT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratedUnit:
    """
    One generated source unit, produced per distinct type name.

    Attributes:
        hint_name: Deterministic name under which the host stores the unit.
        type_name: Original dotted type name of the group.
        namespace: Namespace/module portion that wraps the root container.
        root_name: Name of the outer container.
        text: Rendered source text.
        constants: Number of path constants emitted.
    """
    hint_name: str
    type_name: str
    namespace: str
    root_name: str
    text: str
    constants: int = 0


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete generation pass.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        units: Generated units in first-seen type-name order.
        diagnostics: Warnings reported during the pass.
        written_files: Paths persisted by the output sink, if any.
        summary: Execution statistics.
    """
    ok: bool
    error: str = ""
    units: List[GeneratedUnit] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    written_files: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)
