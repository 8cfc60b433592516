"""Product service layer (Use Cases).

Orchestrates the Product CRUD use-cases, delegating persistence to the
injected ``IProductRepository``.

Business rules enforced here:
- RN-PRO-001: title/slug uniqueness conflicts become ``ProductAlreadyExists``.
- Look-ups accept either a UUID or a slug.
- Updates merge only the supplied fields onto the persisted record.
- Every missing-record case raises ``ProductNotFound``.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

import structlog
from django.conf import settings
from django.db import transaction

from modules.core.repositories.exceptions import ConflictError
from modules.core.validators import is_valid_uuid
from modules.products.exceptions import ProductAlreadyExists, ProductNotFound

if TYPE_CHECKING:
    from modules.core.dtos import PaginationDTO
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

DEFAULT_OFFSET = 0


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(self, dto: CreateProductDTO) -> Product:
        """Persist a new product and return it with its generated id.

        Raises:
            ProductAlreadyExists: if title or slug is already taken.
        """
        with self._handle_db_exceptions(operation="create"):
            product = self._repo.build(dto.to_fields())
            product = self._repo.save(product)
        logger.info("product.created", product_id=str(product.id), slug=product.slug)
        return product

    @transaction.atomic
    def update(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to product ``id`` and persist it.

        Fields absent from ``dto`` keep their persisted values.

        Raises:
            ProductNotFound: if no product has this id (nothing is written).
            ProductAlreadyExists: if the new title or slug is already taken.
        """
        with self._handle_db_exceptions(operation="update", product_id=id):
            product = self._repo.preload(id, dto.changes())
            if product is None:
                raise ProductNotFound(id)
            product = self._repo.save(product)
        logger.info("product.updated", product_id=str(product.id))
        return product

    @transaction.atomic
    def remove(self, id: str) -> str:
        """Delete product ``id`` and return a confirmation message.

        Raises:
            ProductNotFound: if no row was deleted.
        """
        with self._handle_db_exceptions(operation="remove", product_id=id):
            affected = self._repo.delete(id)
            if affected == 0:
                raise ProductNotFound(id)
        logger.info("product.deleted", product_id=id)
        return f"Product with id '{id}' deleted successfully."

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self, pagination: Optional[PaginationDTO] = None) -> List[Product]:
        """Return one page of products (``limit`` defaults to 5, ``offset`` to 0)."""
        limit = settings.DEFAULT_PAGE_LIMIT
        offset = DEFAULT_OFFSET
        if pagination is not None:
            if pagination.limit is not None:
                limit = pagination.limit
            if pagination.offset is not None:
                offset = pagination.offset
        with self._handle_db_exceptions(operation="find_all"):
            return self._repo.list(limit=limit, offset=offset)

    def find_one(self, term: str) -> List[Product]:
        """Look products up by UUID when ``term`` is one, otherwise by slug.

        Raises:
            ProductNotFound: if nothing matches ``term``.
        """
        with self._handle_db_exceptions(operation="find_one", term=term):
            if is_valid_uuid(term):
                products = self._repo.find_by(id=term)
            else:
                products = self._repo.find_by(slug=term)
            if not products:
                raise ProductNotFound(term)
        return products

    # ------------------------------------------------------------------
    # Error translation
    # ------------------------------------------------------------------

    @contextmanager
    def _handle_db_exceptions(self, **context: Any) -> Iterator[None]:
        """Turn repository conflicts into ``ProductAlreadyExists``.

        Any other exception, including ``ProductNotFound``, propagates
        unchanged.
        """
        try:
            yield
        except ConflictError as exc:
            logger.error("product.conflict", detail=exc.detail, **context)
            raise ProductAlreadyExists(exc.detail) from exc
