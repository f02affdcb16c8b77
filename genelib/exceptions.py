"""
Centralised exception hierarchy for GeneLib.

Caller-supplied strategies (cost, mutation, crossover) are free to raise
whatever they like; those errors propagate untouched.  The typed exceptions
below are reserved for conditions the engine itself cannot give a meaning
to, and carry a ``context`` mapping so callers can report the offending
values.
"""

from __future__ import annotations

from typing import Any


class GeneLibError(Exception):
    """Base class for all GeneLib specific exceptions."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


class GeneLibConfigError(GeneLibError):
    """Raised for configuration, profile or population sizing issues."""


class GeneLibRuntimeError(GeneLibError):
    """Raised for runtime orchestration issues."""


class ParentSelectionError(GeneLibRuntimeError):
    """Raised when a sampled parent index falls outside the population."""


__all__ = [
    "GeneLibError",
    "GeneLibConfigError",
    "GeneLibRuntimeError",
    "ParentSelectionError",
]
