"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: validation, defaults, frozen immutability.
- UpdateProductDTO: optional fields, ``changes()`` semantics.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import CreateProductDTO, UpdateProductDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTOValid:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(title="Classic Tee", gender="men", price=Decimal("19.99"))
        assert dto.title == "Classic Tee"
        assert dto.gender == "men"
        assert dto.price == Decimal("19.99")

    def test_optional_fields_default(self):
        dto = CreateProductDTO(title="Classic Tee", gender="men")
        assert dto.price == Decimal("0")
        assert dto.description == ""
        assert dto.slug is None
        assert dto.stock == 0
        assert dto.sizes == []
        assert dto.tags == []

    def test_title_is_stripped(self):
        dto = CreateProductDTO(title="  Padded  ", gender="kid")
        assert dto.title == "Padded"

    def test_to_fields_omits_unset_slug(self):
        dto = CreateProductDTO(title="Classic Tee", gender="men")
        assert "slug" not in dto.to_fields()

    def test_to_fields_keeps_supplied_slug(self):
        dto = CreateProductDTO(title="Classic Tee", gender="men", slug="tee")
        assert dto.to_fields()["slug"] == "tee"


class TestCreateProductDTOValidation:
    def test_missing_title_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(gender="men")

    def test_blank_title_raises(self):
        with pytest.raises(ValidationError, match="Title must not be empty"):
            CreateProductDTO(title="   ", gender="men")

    def test_negative_price_raises(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            CreateProductDTO(title="Tee", gender="men", price=Decimal("-5.00"))

    def test_negative_stock_raises(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            CreateProductDTO(title="Tee", gender="men", stock=-1)

    def test_unknown_gender_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(title="Tee", gender="alien")

    def test_unknown_field_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(title="Tee", gender="men", colour="red")


class TestCreateProductDTOFrozen:
    def test_is_immutable(self):
        dto = CreateProductDTO(title="Tee", gender="men")
        with pytest.raises(ValidationError):
            dto.title = "Changed"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_all_fields_optional(self):
        dto = UpdateProductDTO()
        assert dto.title is None
        assert dto.price is None
        assert dto.changes() == {}

    def test_changes_only_include_supplied_fields(self):
        dto = UpdateProductDTO(title="Updated", price=Decimal("29.99"))
        assert dto.changes() == {"title": "Updated", "price": Decimal("29.99")}

    def test_changes_skip_explicit_nulls(self):
        dto = UpdateProductDTO(title="Updated", description=None)
        assert dto.changes() == {"title": "Updated"}

    def test_empty_lists_are_changes(self):
        dto = UpdateProductDTO(tags=[])
        assert dto.changes() == {"tags": []}

    def test_negative_price_raises(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            UpdateProductDTO(price=Decimal("-1.00"))

    def test_negative_stock_raises(self):
        with pytest.raises(ValidationError, match="Stock cannot be negative"):
            UpdateProductDTO(stock=-5)

    def test_is_immutable(self):
        dto = UpdateProductDTO(title="Test")
        with pytest.raises(ValidationError):
            dto.title = "Changed"
