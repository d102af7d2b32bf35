from __future__ import annotations

"""
Diagnostic Reporting Domain.

Provides the descriptor/diagnostic pair used to surface recoverable,
per-file problems to the user, and the sinks that collect them. Reporting
is append-only so sinks can be shared between concurrent group workers.
"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Protocol

logger = logging.getLogger(__name__)

SEVERITY_WARNING = "warning"

# -----------------------------------------------------------------------------
# DESCRIPTORS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DiagnosticDescriptor:
    """
    Static definition of a diagnostic kind.

    Attributes:
        id: Stable diagnostic code (e.g. 'FE0001').
        title: Short human-readable title.
        message_format: Template using positional '{0}', '{1}' placeholders.
        category: Grouping category.
        severity: Default severity of created diagnostics.
    """
    id: str
    title: str
    message_format: str
    category: str
    severity: str = SEVERITY_WARNING


@dataclass(frozen=True)
class Diagnostic:
    """A reported diagnostic. No source location is available at this stage."""
    id: str
    severity: str
    message: str
    category: str = ""

    @classmethod
    def create(cls, descriptor: DiagnosticDescriptor, *args: object) -> "Diagnostic":
        return cls(
            id=descriptor.id,
            severity=descriptor.severity,
            message=descriptor.message_format.format(*args),
            category=descriptor.category,
        )

    def __str__(self) -> str:
        return f"{self.severity} {self.id}: {self.message}"


INVALID_FILE_SEGMENT = DiagnosticDescriptor(
    id="FE0001",
    title="Invalid path segment",
    message_format="The path '{0}' contains some segments that are not valid as identifiers: {1}",
    category="Naming",
)

BASE_PATH_NOT_FOUND = DiagnosticDescriptor(
    id="FE0002",
    title="Base path not found",
    message_format="The path '{0}' does not contain the base directory '{1}'",
    category="Configuration",
)

INVALID_TYPE_NAME = DiagnosticDescriptor(
    id="FE0003",
    title="Invalid type name",
    message_format="The type name '{0}' does not end with a valid identifier; its {1} file(s) were skipped",
    category="Naming",
)

# -----------------------------------------------------------------------------
# SINKS
# -----------------------------------------------------------------------------

class DiagnosticSink(Protocol):
    def report(self, diagnostic: Diagnostic) -> None:
        ...


class CollectingDiagnosticSink:
    """
    Thread-safe sink that keeps every reported diagnostic and mirrors it
    to the application log.
    """

    def __init__(self, echo_to_log: bool = True) -> None:
        self._lock = threading.Lock()
        self._items: List[Diagnostic] = []
        self._echo_to_log = echo_to_log

    def report(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self._items.append(diagnostic)
        if self._echo_to_log:
            logger.warning(f"{diagnostic.id}: {diagnostic.message}")

    @property
    def diagnostics(self) -> List[Diagnostic]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
