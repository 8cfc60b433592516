"""Unit tests for the Product DRF serializer.

Covers:
- Field presence and read-only constraints.
- Serialization of a Product instance.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Gender, Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


def _make_product(**overrides) -> Product:
    defaults = {
        "title": "Classic Tee",
        "gender": Gender.MEN,
        "price": Decimal("19.99"),
        "stock": 10,
        "sizes": ["S", "M"],
        "tags": ["shirt"],
    }
    defaults.update(overrides)
    product = Product(**defaults)
    product.save()
    return product


class TestSerializerFields:
    def test_expected_fields(self):
        serializer = ProductSerializer()
        expected = {
            "id",
            "title",
            "slug",
            "description",
            "price",
            "stock",
            "sizes",
            "gender",
            "tags",
            "created_at",
            "updated_at",
        }
        assert set(serializer.fields.keys()) == expected

    def test_read_only_fields(self):
        serializer = ProductSerializer()
        for field_name in ("id", "created_at", "updated_at"):
            assert serializer.fields[field_name].read_only is True


class TestSerialization:
    def test_serializes_product(self):
        product = _make_product()
        data = ProductSerializer(product).data
        assert data["id"] == str(product.id)
        assert data["title"] == "Classic Tee"
        assert data["slug"] == "classic_tee"
        assert Decimal(data["price"]) == Decimal("19.99")
        assert data["stock"] == 10
        assert data["sizes"] == ["S", "M"]
        assert data["gender"] == "men"
        assert data["tags"] == ["shirt"]

    def test_serializes_many(self):
        products = [_make_product(title="A"), _make_product(title="B")]
        data = ProductSerializer(products, many=True).data
        assert [item["title"] for item in data] == ["A", "B"]
