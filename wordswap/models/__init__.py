"""Shared typed data models for wordswap.

This package contains dataclasses used across run modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import (
    OUTCOME_CHANGED,
    OUTCOME_SKIPPED_BINARY,
    OUTCOME_UNCHANGED,
    FileReport,
    RunReport,
    SubstitutionResult,
)

__all__ = [
    "OUTCOME_CHANGED",
    "OUTCOME_SKIPPED_BINARY",
    "OUTCOME_UNCHANGED",
    "FileReport",
    "RunReport",
    "SubstitutionResult",
]
