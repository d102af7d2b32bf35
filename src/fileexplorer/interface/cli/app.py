from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, manifest loading,
configuration merging (defaults < manifest settings < CLI overrides),
the generation pass with persistence through the output sink, and result
rendering.
"""

import dataclasses
import json
import os
import sys
from typing import Any, Dict, List, Optional

from fileexplorer.core.pipeline.engine import run_generation
from fileexplorer.core.pipeline.stages.validator import validate_config
from fileexplorer.domain.config import get_default_config, settings_from_config
from fileexplorer.domain.models import GenerationResult
from fileexplorer.infra.fs import DirectorySourceSink, normalize_path
from fileexplorer.infra.logging import LoggingConfig, configure_logging, get_logger
from fileexplorer.infra.manifest import Manifest, load_manifest
from fileexplorer.interface.cli import args as cli_args

logger = get_logger(__name__)

_CONFIG_KEYS = [
    "manifest_path", "output_dir", "target", "default_namespace",
    "hint_prefix", "workers", "overwrite",
]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad input, 130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    # 3. Manifest loading
    overrides = cli_args.args_to_overrides(args)
    manifest_path = overrides.get("manifest_path")
    if not manifest_path:
        print("ERROR: a manifest is required (-m/--manifest).", file=sys.stderr)
        return 2

    try:
        manifest = load_manifest(manifest_path)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot load manifest: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    # 4. Configuration hierarchy
    raw_conf = _merge_config(_merge_config(get_default_config(), manifest.settings), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Generation phase
    try:
        result = _run(manifest, clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Generation interrupted by user.")
        return 130

    # 6. Output rendering phase
    if args.print_sources:
        for unit in result.units:
            print(f"===== {unit.hint_name} =====")
            print(unit.text, end="")

    if args.json_output:
        print(json.dumps(dataclasses.asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, dry_run=bool(args.dry_run))

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# EXECUTION
# -----------------------------------------------------------------------------

def _run(manifest: Manifest, cfg: Dict[str, Any], *, dry_run: bool) -> GenerationResult:
    """Generate and persist the units through the output directory sink."""
    output_dir = normalize_path(cfg.get("output_dir"), os.getcwd())
    sink = DirectorySourceSink(output_dir, overwrite=cfg["overwrite"], dry_run=dry_run)
    return run_generation(manifest.entries, settings_from_config(cfg), source_sink=sink)

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in _CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult, *, dry_run: bool = False) -> None:
    """Print a short report of the pass to stdout (errors go to stderr)."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print("Generation completed" + (" (dry run)." if dry_run else "."))

    labels = {
        "files_total": "Files received",
        "emitted_constants": "Constants emitted",
        "skipped_config": "Skipped (missing metadata)",
        "skipped_base_path": "Skipped (base path not found)",
        "skipped_invalid": "Skipped (invalid identifiers)",
    }
    for key, label in labels.items():
        if key in result.summary:
            print(f"{label}: {result.summary[key]}")

    if result.written_files:
        print("\nGenerated units:")
        for path in result.written_files:
            print(f"  - {path}")

    if result.diagnostics:
        print("\nWarnings:")
        for diagnostic in result.diagnostics:
            print(f"  - {diagnostic}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
