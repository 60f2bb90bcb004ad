"""
Exception hierarchy for the aroma wheel.

Lookups never raise: an unknown descriptor is an expected outcome and is
reported as ``None`` or an empty list. Exceptions are reserved for loading
catalog and colour files that are malformed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any


class AromaWheelError(Exception):
    """Base exception for all aroma wheel errors.

    Attributes:
        message: Human-readable error message
        details: Optional dictionary of additional error context
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CatalogError(AromaWheelError):
    """A catalog or colour file could not be turned into valid data.

    Raised for a missing top-level key, duplicate category names, duplicate
    subcategory names inside one category, or entries that fail model
    validation.

    Attributes:
        path: File the data was read from, if any
    """

    def __init__(
        self,
        message: str,
        path: Path | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.path = path

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message} ({self.path})"
        return self.message


__all__ = ["AromaWheelError", "CatalogError"]
