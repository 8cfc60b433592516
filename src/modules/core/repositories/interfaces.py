"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

The capability set mirrors what a thin CRUD service needs:

- ``build``: in-memory construction, no I/O.
- ``save``: persist (insert or update), raising ``ConflictError``
  on uniqueness violations.
- ``list``: a ``limit`` / ``offset`` window over all rows.
- ``find_by``: equality look-up returning every match.
- ``get_by_id`` / ``preload``: single-row fetch, optionally merged with
  new field values.
- ``delete``: remove by primary key, returning the affected row count.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def build(self, data: Dict[str, Any]) -> T:
        """Construct an unsaved entity from ``data``."""

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self, limit: int, offset: int) -> List[T]:
        """Return at most ``limit`` entities after skipping ``offset``."""

    @abstractmethod
    def find_by(self, **predicate: Any) -> List[T]:
        """Return every entity whose fields equal ``predicate``."""

    @abstractmethod
    def preload(self, id: str, data: Dict[str, Any]) -> Optional[T]:
        """Fetch an entity and apply ``data`` on top of it, without saving.

        Returns ``None`` when no entity exists with the given ID.
        """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity."""

    @abstractmethod
    def delete(self, id: str) -> int:
        """Remove an entity by ID and return the number of rows affected."""
