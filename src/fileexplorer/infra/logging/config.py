from __future__ import annotations

"""
Build Log Settings.

The generator logs to stderr next to the build output and, on request,
to a rotating build log. Only two knobs come from the command line
(`--debug` and `--log-file`); everything else is fixed here.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted level names; anything else falls back to INFO
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

CONSOLE_FORMAT = "%(levelname)s | %(name)s | %(message)s"
BUILD_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(threadName)s | %(name)s | %(message)s"
BUILD_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

BUILD_LOG_MAX_BYTES = 512 * 1024
BUILD_LOG_BACKUPS = 3


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging setup of one generator run.

    Attributes:
        level: Minimum level name (see _LEVEL_MAP).
        console: Echo records to stderr.
        log_file: Optional rotating build log path.
        max_bytes: Size of a build log segment before rotation.
        backup_count: Rotated segments kept next to the build log.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = BUILD_LOG_MAX_BYTES
    backup_count: int = BUILD_LOG_BACKUPS

    @classmethod
    def for_cli(cls, *, debug: bool = False, log_file: Optional[str] = None) -> LoggingConfig:
        """Settings derived from the `--debug` and `--log-file` flags."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file or None)
