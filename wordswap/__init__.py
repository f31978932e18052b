"""Top-level package for wordswap.

This package replaces tokens across every text file in a directory tree
according to an `old -> new` mapping. The main orchestration entry point is
`DirectorySubstitution`.
"""

from .runner import DirectorySubstitution

__all__ = ["DirectorySubstitution", "__version__"]

__version__ = "0.1.0"
