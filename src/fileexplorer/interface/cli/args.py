from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from fileexplorer.domain.config import SUPPORTED_TARGETS

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the fileexplorer CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="fileexplorer",
        description=(
            "Generate source code exposing project files as nested, "
            "compile-time checked path constants."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "-m", "--manifest",
        dest="manifest_path",
        default=None,
        help="JSON manifest listing input files and their build metadata.",
    )
    p.add_argument(
        "-o", "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory receiving the generated sources.",
    )

    # --- Emission ---
    p.add_argument(
        "-t", "--target",
        dest="target",
        default=None,
        choices=SUPPORTED_TARGETS,
        help="Language of the generated code (default: python).",
    )
    p.add_argument(
        "--namespace",
        dest="default_namespace",
        default=None,
        help="Namespace used for type names without a dot.",
    )
    p.add_argument(
        "--hint-prefix",
        dest="hint_prefix",
        default=None,
        help="File name prefix of generated units.",
    )
    p.add_argument(
        "-j", "--workers",
        dest="workers",
        type=int,
        default=None,
        help="Number of type-name groups generated in parallel.",
    )

    # --- Runtime Constraints and Safety ---
    p.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace generated files that already exist.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Generate in memory without writing any file.",
    )

    # --- Output and Diagnostics ---
    p.add_argument(
        "--print",
        dest="print_sources",
        action="store_true",
        help="Echo generated sources to stdout.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the generation result as JSON.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write the log to this (rotating) file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset (None = not given).
    """
    overrides: Dict[str, Any] = {}

    overrides["manifest_path"] = args.manifest_path
    overrides["output_dir"] = args.output_dir
    overrides["target"] = args.target
    overrides["default_namespace"] = args.default_namespace
    overrides["hint_prefix"] = args.hint_prefix
    overrides["workers"] = args.workers

    if args.overwrite:
        overrides["overwrite"] = True

    return overrides
