# tagstore/domain/errors.py
"""
Failure kinds that cross the core's boundary.

Duplicate tag names and duplicate post/tag pairs are not errors at all:
they are absorbed at the storage layer (``ON CONFLICT DO NOTHING``) and
never reach the caller.
"""
from __future__ import annotations

from typing import Any, List, Optional


class TagStoreError(Exception):
    """Base class for every failure raised by tagstore."""


class ValidationFailure(TagStoreError):
    """
    Caller-supplied data is malformed. Raised before anything touches storage.
    ``errors`` carries pydantic-style error dicts for the outer layer to render.
    """

    def __init__(self, message: str, errors: Optional[List[dict[str, Any]]] = None) -> None:
        self.errors = errors or []
        super().__init__(message)


class StorageFailure(TagStoreError):
    """
    Opaque storage failure (connection loss, constraint violation other than
    the two absorbed conflicts, transaction abort). The message names only the
    operation; the underlying cause is chained for diagnostics.
    """

    retryable: bool = False

    def __init__(self, operation: str, message: str = "storage failure") -> None:
        self.operation = operation
        super().__init__(f"{message} during {operation}")


class ResourceUnavailable(StorageFailure):
    """No pooled connection became free before the acquisition timeout."""

    retryable = True

    def __init__(self, operation: str) -> None:
        super().__init__(operation, message="no database connection available")
