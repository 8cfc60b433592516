"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.

Responses are rendered by ``ProductSerializer``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

GenderValue = Literal["men", "women", "kid", "unisex"]


def _title_not_blank(v: Optional[str]) -> Optional[str]:
    if v is not None:
        v = v.strip()
        if not v:
            raise ValueError("Title must not be empty.")
    return v


def _price_not_negative(v: Optional[Decimal]) -> Optional[Decimal]:
    if v is not None and v < 0:
        raise ValueError("Price cannot be negative.")
    return v


def _stock_not_negative(v: Optional[int]) -> Optional[int]:
    if v is not None and v < 0:
        raise ValueError("Stock cannot be negative.")
    return v


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``title`` is a non-empty string.
    - ``price`` is not negative (RN-PRO-003).
    - ``stock`` is not negative (RN-PRO-004).

    ``slug`` is optional; the model derives it from ``title`` when absent.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    gender: GenderValue
    price: Decimal = Decimal("0")
    description: str = ""
    slug: Optional[str] = None
    stock: int = 0
    sizes: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        return _title_not_blank(v)

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _price_not_negative(v)

    @field_validator("stock")
    @classmethod
    def stock_must_not_be_negative(cls, v: Optional[int]) -> Optional[int]:
        return _stock_not_negative(v)

    def to_fields(self) -> Dict[str, Any]:
        """Return the model field values, omitting an unset slug."""
        return self.model_dump(exclude_none=True)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Every field is optional — only fields present in the payload are
    applied, everything else keeps its persisted value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: Optional[str] = None
    gender: Optional[GenderValue] = None
    price: Optional[Decimal] = None
    description: Optional[str] = None
    slug: Optional[str] = None
    stock: Optional[int] = None
    sizes: Optional[List[str]] = None
    tags: Optional[List[str]] = None

    @field_validator("title")
    @classmethod
    def title_must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        return _title_not_blank(v)

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: Optional[Decimal]) -> Optional[Decimal]:
        return _price_not_negative(v)

    @field_validator("stock")
    @classmethod
    def stock_must_not_be_negative(cls, v: Optional[int]) -> Optional[int]:
        return _stock_not_negative(v)

    def changes(self) -> Dict[str, Any]:
        """Return only the fields explicitly supplied with a non-null value."""
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }
