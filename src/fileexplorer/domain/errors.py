from __future__ import annotations

"""
Domain Exceptions.
"""


class BasePathMismatchError(ValueError):
    """
    Raised when a configured base directory does not occur in a file's path.

    Attributes:
        path: Normalized directory portion of the file path.
        base_dir: Normalized base directory that was searched for.
    """

    def __init__(self, path: str, base_dir: str):
        super().__init__(f"Base directory '{base_dir}' not found in '{path}'")
        self.path = path
        self.base_dir = base_dir
