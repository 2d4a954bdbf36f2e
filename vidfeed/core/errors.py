"""Core error types for vidfeed."""

from __future__ import annotations


class SourceUnavailableError(RuntimeError):
    """Raised when a mirror or feed cannot provide usable videos."""

    def __init__(self, message: str, *, source: str | None = None, original: Exception | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.original = original
