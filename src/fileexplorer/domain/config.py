from __future__ import annotations

"""
Configuration Domain Management.

Holds the metadata key names understood by the generator, the supported
emission targets and the default session configuration (dict-based) that
the CLI merges with manifest settings and command-line overrides.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
METADATA_PREFIX = "build_metadata.AdditionalFiles."
TYPE_NAME_KEY = METADATA_PREFIX + "TypeName"
RELATIVE_TO_KEY = METADATA_PREFIX + "RelativeTo"
BROWSE_FROM_KEY = METADATA_PREFIX + "BrowseFrom"

# Short manifest aliases -> canonical metadata keys
METADATA_ALIASES: Dict[str, str] = {
    "type_name": TYPE_NAME_KEY,
    "relative_to": RELATIVE_TO_KEY,
    "browse_from": BROWSE_FROM_KEY,
}

DEFAULT_NAMESPACE = "FileExplorer"
DEFAULT_HINT_PREFIX = "FileExplorer_"
DEFAULT_TARGET = "python"
SUPPORTED_TARGETS: List[str] = ["python", "csharp"]


@dataclass(frozen=True)
class GeneratorSettings:
    """
    Immutable options for a single generation pass.

    Attributes:
        target: Emission target identifier ('python' or 'csharp').
        default_namespace: Namespace used when the type name has no dot.
        hint_prefix: Prefix of every generated unit's hint name.
        workers: Number of parallel group workers (1 = sequential).
    """
    target: str = DEFAULT_TARGET
    default_namespace: str = DEFAULT_NAMESPACE
    hint_prefix: str = DEFAULT_HINT_PREFIX
    workers: int = 1


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    base = os.getcwd()
    return {
        # IO Paths
        "manifest_path": "",
        "output_dir": os.path.join(base, "generated"),

        # Emission
        "target": DEFAULT_TARGET,
        "default_namespace": DEFAULT_NAMESPACE,
        "hint_prefix": DEFAULT_HINT_PREFIX,

        # Execution
        "workers": 1,
        "overwrite": False,
    }


def settings_from_config(cfg: Dict[str, Any]) -> GeneratorSettings:
    """Project a validated configuration dict onto GeneratorSettings."""
    return GeneratorSettings(
        target=cfg.get("target", DEFAULT_TARGET),
        default_namespace=cfg.get("default_namespace", DEFAULT_NAMESPACE),
        hint_prefix=cfg.get("hint_prefix", DEFAULT_HINT_PREFIX),
        workers=int(cfg.get("workers", 1)),
    )
