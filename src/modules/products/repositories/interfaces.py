"""Product repository interface.

Extends ``IRepository[Product]``; the product catalog needs no look-ups
beyond the generic capability set, so this contract only pins the entity
type for the Service Layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""
