"""Product domain exceptions.

Raised by the Service Layer when a request cannot be honoured.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductAlreadyExists(Exception):
    """A product with the same title or slug already exists.

    Covers RN-PRO-001.  Client-facing: the API answers ``400 Bad Request``
    with ``detail`` (the store's description of the conflict).
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ProductNotFound(Exception):
    """No product matches the requested identifier or slug."""

    def __init__(self, term: str) -> None:
        super().__init__(f"Product with id or slug '{term}' not found.")
        self.term = term
