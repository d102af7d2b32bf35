from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared factories for host file entries.
3. Logging teardown so queue listeners never outlive a test.
"""

import os
import sys
from typing import Callable, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fileexplorer.domain.config import BROWSE_FROM_KEY, RELATIVE_TO_KEY, TYPE_NAME_KEY  # noqa: E402
from fileexplorer.domain.models import FileInput, OptionsLookup  # noqa: E402
from fileexplorer.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_logging():
    """Detach our handlers after every test (CLI tests configure logging)."""
    yield
    shutdown_logging()


@pytest.fixture
def make_entry() -> Callable[..., FileInput]:
    """
    Return a factory building FileInput entries with build metadata.

    Passing None for a metadata value leaves it out, simulating a
    configuration gap on the host side.
    """
    def _make(
            path: str,
            type_name: Optional[str] = "App.Files",
            relative_to: Optional[str] = "assets",
            browse_from: Optional[str] = "assets",
    ) -> FileInput:
        return FileInput(
            path=path,
            options=OptionsLookup({
                TYPE_NAME_KEY: type_name,
                RELATIVE_TO_KEY: relative_to,
                BROWSE_FROM_KEY: browse_from,
            }),
        )

    return _make
