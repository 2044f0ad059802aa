"""Exceptions raised across the analysis engine."""

from __future__ import annotations


class NucleoscopeError(Exception):
    """Base class for errors surfaced to callers as user-facing messages."""


class InvalidPattern(NucleoscopeError, ValueError):
    """A motif pattern could not be compiled as a regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid motif pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class RecordNotFound(NucleoscopeError, LookupError):
    """No parsed record matches the requested selector."""
