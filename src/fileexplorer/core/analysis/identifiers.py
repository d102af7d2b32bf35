from __future__ import annotations

"""
Identifier Validation and Formatting.

Every design-time segment and design-time name ends up as a declaration
name in generated code, so each one must be made of letters, digits and
underscores and must not start with a digit. Files that break the rule are
reported once and left out of the tree; the rest of the pass carries on.
"""

import logging
from typing import Iterable, List, Tuple

from fileexplorer.core.analysis.paths import SEPARATOR
from fileexplorer.domain.diagnostics import INVALID_FILE_SEGMENT, Diagnostic, DiagnosticSink
from fileexplorer.domain.models import File

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# IDENTIFIER RULES
# -----------------------------------------------------------------------------

def is_invalid_identifier(text: str) -> bool:
    """
    Check a single segment against the identifier rules.

    Args:
        text: Segment to inspect.

    Returns:
        bool: True if the segment is empty, starts with a digit, or holds a
              character that is neither a letter, a digit nor '_'.
    """
    if not text:
        return True
    if text[0].isdecimal():
        return True
    return any(not (ch.isalpha() or ch.isdecimal() or ch == "_") for ch in text)


def format_identifier(text: str) -> str:
    """
    Upper-case the first character, leaving the rest untouched.

    A first character whose upper case spans several characters ('ß' ->
    'SS') is kept as is, so the result always has the input's length.
    """
    if not text:
        return text
    upper = text[0].upper()
    if len(upper) != 1:
        upper = text[0]
    return upper + text[1:]

# -----------------------------------------------------------------------------
# FILE VALIDATION
# -----------------------------------------------------------------------------

def find_invalid_segments(file: File) -> List[str]:
    """Return the design-time segments (and name) of a file that fail the rules."""
    candidates = list(file.designtime_path) + [file.designtime_name]
    return [segment for segment in candidates if is_invalid_identifier(segment)]


def runtime_display_path(file: File) -> str:
    return SEPARATOR.join(list(file.runtime_path) + [file.runtime_name])


def validate_file(file: File, sink: DiagnosticSink) -> bool:
    """
    Validate a file and report a diagnostic if it cannot be emitted.

    Runtime segments are opaque path strings and are never checked.

    Args:
        file: Descriptor to validate.
        sink: Destination for the FE0001 warning.

    Returns:
        bool: True if the file may be placed in the tree.
    """
    invalid = find_invalid_segments(file)
    if not invalid:
        return True

    quoted = ", ".join(f"'{segment}'" for segment in invalid)
    sink.report(Diagnostic.create(INVALID_FILE_SEGMENT, runtime_display_path(file), quoted))
    return False


def partition_files(files: Iterable[File], sink: DiagnosticSink) -> Tuple[List[File], List[File]]:
    """
    Split files into (valid, invalid), reporting each invalid file once.

    Input order is preserved in both lists.
    """
    valid: List[File] = []
    invalid: List[File] = []
    for file in files:
        if validate_file(file, sink):
            valid.append(file)
        else:
            invalid.append(file)

    if invalid:
        logger.debug(f"Excluded {len(invalid)} file(s) with invalid identifier segments.")
    return valid, invalid
