from __future__ import annotations

"""
Unit tests for the Diagnostic Reporting Domain.
"""

import threading

from fileexplorer.domain.diagnostics import (
    BASE_PATH_NOT_FOUND,
    INVALID_FILE_SEGMENT,
    CollectingDiagnosticSink,
    Diagnostic,
)


def test_create_fills_template_and_copies_descriptor_fields() -> None:
    diagnostic = Diagnostic.create(INVALID_FILE_SEGMENT, "a/b-c/d.png", "'b-c'")

    assert diagnostic.id == "FE0001"
    assert diagnostic.severity == "warning"
    assert diagnostic.category == "Naming"
    assert diagnostic.message == (
        "The path 'a/b-c/d.png' contains some segments that are not valid as identifiers: 'b-c'"
    )
    assert str(diagnostic).startswith("warning FE0001: ")


def test_descriptor_codes_are_stable() -> None:
    assert INVALID_FILE_SEGMENT.id == "FE0001"
    assert BASE_PATH_NOT_FOUND.id == "FE0002"


def test_collecting_sink_is_safe_across_threads() -> None:
    sink = CollectingDiagnosticSink(echo_to_log=False)
    diagnostic = Diagnostic.create(BASE_PATH_NOT_FOUND, "/x", "assets")

    def worker() -> None:
        for _ in range(200):
            sink.report(diagnostic)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(sink) == 1600


def test_collecting_sink_returns_a_copy() -> None:
    sink = CollectingDiagnosticSink(echo_to_log=False)
    sink.report(Diagnostic.create(BASE_PATH_NOT_FOUND, "/x", "assets"))

    snapshot = sink.diagnostics
    snapshot.clear()

    assert len(sink.diagnostics) == 1
