"""Structural failures raised by the comps pipeline.

Messy cell data never raises; these only cover input that makes a mapping,
normalization or report meaningless.
"""
from __future__ import annotations


class SwiftCMAError(ValueError):
    """Base class; ``hint`` is a short user-facing suggestion (may be empty)."""

    def __init__(self, message: str, hint: str = "") -> None:
        super().__init__(message)
        self.hint = hint


class TableParseError(SwiftCMAError):
    def __init__(self, message: str, preview: str = "") -> None:
        super().__init__(message, hint="Export as CSV (comma-delimited) and ensure header row is present.")
        self.preview = preview


class EmptyTableError(SwiftCMAError):
    pass


class TableTooLargeError(SwiftCMAError):
    pass


class MappingError(SwiftCMAError):
    pass


class NoValidCompsError(SwiftCMAError):
    pass
