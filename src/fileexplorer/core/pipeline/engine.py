from __future__ import annotations

"""
Core generation pipeline.

This module coordinates one generation pass:
1. Reads per-file metadata and skips entries with configuration gaps.
2. Builds dual-path File records, grouped by type name (first-seen order).
3. Validates identifiers per group and reports offending files.
4. Builds the Folder tree of each group.
5. Renders each tree through the configured emitter.
6. Rejects passes where two groups would share an output unit name.
7. Hands every unit to the optional source sink.

Groups are independent and may be processed on a thread pool; results are
always reassembled in first-seen order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

from fileexplorer.core.analysis.descriptors import create_file
from fileexplorer.core.analysis.identifiers import is_invalid_identifier, partition_files
from fileexplorer.core.analysis.tree_builder import build_tree, count_files
from fileexplorer.core.emit import EmitterStrategy, get_emitter
from fileexplorer.domain.config import (
    BROWSE_FROM_KEY,
    RELATIVE_TO_KEY,
    TYPE_NAME_KEY,
    GeneratorSettings,
)
from fileexplorer.domain.diagnostics import (
    BASE_PATH_NOT_FOUND,
    INVALID_TYPE_NAME,
    CollectingDiagnosticSink,
    Diagnostic,
    DiagnosticSink,
)
from fileexplorer.domain.errors import BasePathMismatchError
from fileexplorer.domain.models import File, FileInput, GeneratedUnit, GenerationResult

logger = logging.getLogger(__name__)


class SourceSink(Protocol):
    def prepare(self, hint_names: List[str]) -> None:
        """Called once before the first unit is added; raises OSError to abort."""

    def add_source(self, hint_name: str, text: str) -> Optional[str]:
        ...


@dataclass
class _GroupOutcome:
    unit: Optional[GeneratedUnit]
    skipped_invalid: int = 0


@dataclass
class _Collected:
    groups: Dict[str, List[File]] = field(default_factory=dict)
    files_total: int = 0
    skipped_config: int = 0
    skipped_base_path: int = 0

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_last(text: str, delimiter: str = ".") -> Tuple[Optional[str], str]:
    """
    Split a dotted type name at its last delimiter.

    Returns:
        Tuple[Optional[str], str]: (namespace or None, last component).
    """
    index = text.rfind(delimiter)
    if index == -1:
        return None, text
    return text[:index], text[index + 1:]


def run_generation(
        entries: Iterable[FileInput],
        settings: Optional[GeneratorSettings] = None,
        *,
        diagnostics: Optional[DiagnosticSink] = None,
        source_sink: Optional[SourceSink] = None,
) -> GenerationResult:
    """
    Execute a full generation pass over the host's file entries.

    Args:
        entries: File entries with their build metadata.
        settings: Emission and execution options.
        diagnostics: Sink for warnings. A collecting sink is used if omitted.
        source_sink: Optional destination receiving every generated unit.

    Returns:
        GenerationResult: Units, diagnostics and statistics of the pass.
    """
    settings = settings or GeneratorSettings()
    collector = CollectingDiagnosticSink()
    sink = _TeeSink(collector, diagnostics) if diagnostics is not None else collector

    try:
        emitter = get_emitter(settings.target)
    except ValueError as e:
        logger.error(str(e))
        return GenerationResult(ok=False, error=str(e))

    logger.info(f"Generation started (target={settings.target}).")

    collected = _collect_groups(entries, sink)
    outcomes = _run_groups(collected.groups, settings, emitter, sink)

    units = [o.unit for o in outcomes if o.unit is not None]
    summary = {
        "files_total": collected.files_total,
        "skipped_config": collected.skipped_config,
        "skipped_base_path": collected.skipped_base_path,
        "skipped_invalid": sum(o.skipped_invalid for o in outcomes),
        "emitted_constants": sum(u.constants for u in units),
        "groups": len(units),
    }

    duplicates = find_duplicate_hints(units)
    if duplicates:
        details = "; ".join(f"{hint} <- {', '.join(names)}" for hint, names in duplicates.items())
        msg = f"Several type names map to the same output unit: {details}"
        logger.error(msg)
        return GenerationResult(
            ok=False, error=msg, units=units,
            diagnostics=collector.diagnostics, summary=summary,
        )

    written: List[str] = []
    if source_sink is not None:
        try:
            source_sink.prepare([unit.hint_name for unit in units])
            for unit in units:
                location = source_sink.add_source(unit.hint_name, unit.text)
                if location:
                    written.append(location)
        except OSError as e:
            msg = f"Failed to persist generated sources: {e}"
            logger.error(msg)
            return GenerationResult(
                ok=False, error=msg, units=units,
                diagnostics=collector.diagnostics, written_files=written, summary=summary,
            )

    logger.info(
        f"Generation finished: {summary['groups']} unit(s), "
        f"{summary['emitted_constants']} constant(s), {len(collector)} warning(s)."
    )

    return GenerationResult(
        ok=True,
        units=units,
        diagnostics=collector.diagnostics,
        written_files=written,
        summary=summary,
    )


def generate_group(
        type_name: str,
        files: List[File],
        settings: GeneratorSettings,
        emitter: EmitterStrategy,
        sink: DiagnosticSink,
) -> Optional[GeneratedUnit]:
    """
    Validate, build and render a single type-name group.

    Returns:
        Optional[GeneratedUnit]: The unit, or None if the root name is unusable.
    """
    return _generate_group(type_name, files, settings, emitter, sink).unit


def find_duplicate_hints(units: Iterable[GeneratedUnit]) -> Dict[str, List[str]]:
    """
    Find output unit names claimed by more than one type name.

    Returns:
        Dict[str, List[str]]: hint name -> type names sharing it (first-seen order).
    """
    claims: Dict[str, List[str]] = {}
    for unit in units:
        claims.setdefault(unit.hint_name, []).append(unit.type_name)
    return {hint: names for hint, names in claims.items() if len(names) > 1}

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

class _TeeSink:
    """Forwards every diagnostic to the internal collector and the caller's sink."""

    def __init__(self, *sinks: DiagnosticSink):
        self._sinks = sinks

    def report(self, diagnostic: Diagnostic) -> None:
        for s in self._sinks:
            s.report(diagnostic)


def _collect_groups(entries: Iterable[FileInput], sink: DiagnosticSink) -> _Collected:
    collected = _Collected()

    for entry in entries:
        collected.files_total += 1

        type_name = entry.options.get(TYPE_NAME_KEY)
        relative_to = entry.options.get(RELATIVE_TO_KEY)
        browse_from = entry.options.get(BROWSE_FROM_KEY)

        if not type_name or not relative_to or not browse_from:
            collected.skipped_config += 1
            logger.debug(f"Skipping '{entry.path}': incomplete build metadata.")
            continue

        try:
            file = create_file(entry.path, relative_to, browse_from)
        except BasePathMismatchError as e:
            collected.skipped_base_path += 1
            sink.report(Diagnostic.create(BASE_PATH_NOT_FOUND, entry.path, e.base_dir))
            continue

        collected.groups.setdefault(type_name, []).append(file)

    return collected


def _run_groups(
        groups: Dict[str, List[File]],
        settings: GeneratorSettings,
        emitter: EmitterStrategy,
        sink: DiagnosticSink,
) -> List[_GroupOutcome]:
    items = list(groups.items())

    if settings.workers <= 1 or len(items) <= 1:
        return [_generate_group(name, files, settings, emitter, sink) for name, files in items]

    with ThreadPoolExecutor(max_workers=settings.workers) as executor:
        futures = [
            executor.submit(_generate_group, name, files, settings, emitter, sink)
            for name, files in items
        ]
        return [f.result() for f in futures]


def _generate_group(
        type_name: str,
        files: List[File],
        settings: GeneratorSettings,
        emitter: EmitterStrategy,
        sink: DiagnosticSink,
) -> _GroupOutcome:
    namespace, root_name = split_last(type_name)

    if is_invalid_identifier(root_name):
        sink.report(Diagnostic.create(INVALID_TYPE_NAME, type_name, len(files)))
        return _GroupOutcome(unit=None, skipped_invalid=len(files))

    valid, invalid = partition_files(files, sink)
    root = build_tree(root_name, valid)
    text = emitter.render_unit(namespace or settings.default_namespace, root)

    unit = GeneratedUnit(
        hint_name=f"{settings.hint_prefix}{root_name}{emitter.file_suffix}",
        type_name=type_name,
        namespace=namespace or settings.default_namespace,
        root_name=root_name,
        text=text,
        constants=count_files(root),
    )
    logger.debug(f"Rendered '{unit.hint_name}' with {unit.constants} constant(s).")
    return _GroupOutcome(unit=unit, skipped_invalid=len(invalid))
