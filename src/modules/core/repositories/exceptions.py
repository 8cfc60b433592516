"""Repository-level exceptions.

Repositories translate low-level ORM / database errors into these types so
the Service Layer can react to *what* went wrong without inspecting driver
specific error codes.
"""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for repository-related errors."""


class ConflictError(RepositoryError):
    """A unique constraint would be (or was) violated by a write.

    ``detail`` carries the human-readable description produced by the
    store, e.g. ``"Product with this Slug already exists."``.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail
