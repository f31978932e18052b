"""Input/output components for wordswap.

This package contains directory scanning and text file storage used by
substitution runs.
"""

from .scanner import ensure_root_directory, iter_files, looks_binary
from .storage import TextFileStore

__all__ = ["TextFileStore", "ensure_root_directory", "iter_files", "looks_binary"]
