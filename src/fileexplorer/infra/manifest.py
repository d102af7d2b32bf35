from __future__ import annotations

"""
Build Manifest Adapter.

Stands in for the host build system: reads a JSON manifest listing the
input files and their build metadata, and turns it into FileInput entries.
Per-file metadata is layered over the manifest-wide defaults; short keys
('type_name', 'relative_to', 'browse_from') map onto the canonical
build-metadata names.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from fileexplorer.domain.config import METADATA_ALIASES
from fileexplorer.domain.models import FileInput, OptionsLookup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Manifest:
    """
    Parsed manifest content.

    Attributes:
        settings: Generator settings overrides (validated later).
        entries: File entries in manifest order.
    """
    settings: Dict[str, Any] = field(default_factory=dict)
    entries: List[FileInput] = field(default_factory=list)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_manifest(path: str) -> Manifest:
    """
    Read and parse a manifest file.

    Args:
        path: Location of the JSON manifest.

    Returns:
        Manifest: Parsed settings and entries.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a valid manifest.
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Manifest '{path}' is not valid JSON: {e}") from e

    manifest = parse_manifest(data)
    logger.debug(f"Loaded manifest '{path}' with {len(manifest.entries)} entries.")
    return manifest


def parse_manifest(data: Any) -> Manifest:
    """
    Convert decoded manifest JSON into a Manifest.

    Raises:
        ValueError: On structural problems.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Manifest root must be an object, received {type(data).__name__}.")

    settings = data.get("settings", {})
    if not isinstance(settings, dict):
        raise ValueError("Manifest 'settings' must be an object.")

    defaults = _canonical_metadata(data.get("defaults", {}), "defaults")

    files = data.get("files", [])
    if not isinstance(files, list):
        raise ValueError("Manifest 'files' must be a list.")

    entries: List[FileInput] = []
    for i, item in enumerate(files):
        entries.append(_parse_entry(item, i, defaults))

    return Manifest(settings=dict(settings), entries=entries)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parse_entry(item: Any, index: int, defaults: Dict[str, Any]) -> FileInput:
    if isinstance(item, str):
        if not item.strip():
            raise ValueError(f"Manifest 'files[{index}]' is an empty path.")
        return FileInput(path=item, options=OptionsLookup(defaults))

    if isinstance(item, dict):
        path = item.get("path")
        if not isinstance(path, str) or not path.strip():
            raise ValueError(f"Manifest 'files[{index}]' is missing a 'path'.")
        overrides = {k: v for k, v in item.items() if k != "path"}
        options = dict(defaults)
        options.update(_canonical_metadata(overrides, f"files[{index}]"))
        return FileInput(path=path, options=OptionsLookup(options))

    raise ValueError(
        f"Manifest 'files[{index}]' must be a path or an object, received {type(item).__name__}."
    )


def _canonical_metadata(values: Any, where: str) -> Dict[str, Any]:
    """Map alias keys to canonical metadata names; null values unset a key."""
    if not isinstance(values, dict):
        raise ValueError(f"Manifest '{where}' must be an object.")
    out: Dict[str, Any] = {}
    for key, value in values.items():
        out[METADATA_ALIASES.get(key, key)] = value
    return out
