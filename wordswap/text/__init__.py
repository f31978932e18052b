"""Text transformation components.

This package provides the token substitution engine applied to every
scanned file.
"""

from .substitution import MATCH_MODES, MATCH_SUBSTRING, MATCH_WORD, TokenSubstituter

__all__ = ["MATCH_MODES", "MATCH_SUBSTRING", "MATCH_WORD", "TokenSubstituter"]
