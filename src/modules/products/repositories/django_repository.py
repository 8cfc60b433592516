"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern for reads: methods return
``None`` / empty lists instead of raising HTTP-level exceptions — the
Service Layer decides how to translate a missing entity into an API
response.  Writes that would break a unique constraint raise
``ConflictError``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.core.repositories.exceptions import ConflictError
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def build(self, data: Dict[str, Any]) -> Product:
        """Instantiate an unsaved ``Product`` (no database access)."""
        return Product(**data)

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def list(self, limit: int, offset: int) -> List[Product]:
        """Return a ``limit``-sized window of products starting at ``offset``."""
        return list(Product.objects.all()[offset : offset + limit])

    def find_by(self, **predicate: Any) -> List[Product]:
        """Return all products matching the given field look-ups.

        Examples::

            repo.find_by(id="0190...")
            repo.find_by(slug="classic_tee")
        """
        try:
            return list(Product.objects.filter(**predicate))
        except (ValueError, ValidationError):
            return []

    def preload(self, id: str, data: Dict[str, Any]) -> Optional[Product]:
        """Load a product and overlay ``data`` on it without persisting."""
        product = self.get_by_id(id)
        if product is None:
            return None
        for field, value in data.items():
            setattr(product, field, value)
        return product

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        Raises:
            ConflictError: if ``title`` or ``slug`` is already taken.
        """
        entity.normalise()
        self._ensure_unique(entity)
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError:
            # Lost a race with a concurrent insert; re-check to name the field.
            self._ensure_unique(entity)
            raise
        return entity

    @transaction.atomic
    def delete(self, id: str) -> int:
        """Hard-delete a product by ID.

        Returns the number of rows removed (``0`` when nothing matched).
        """
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, ValidationError):
            return 0
        return deleted

    @staticmethod
    def _ensure_unique(entity: Product) -> None:
        try:
            entity.validate_unique()
        except ValidationError as exc:
            raise ConflictError(" ".join(exc.messages)) from exc
