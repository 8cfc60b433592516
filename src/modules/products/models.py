"""Product model with title/slug uniqueness.

Business rules implemented:
- RN-PRO-001: ``title`` and ``slug`` must be unique in the catalog.
- RN-PRO-002: ``slug`` is derived from ``title`` when omitted and is always
  normalised (lower-case, spaces and ``/`` to ``_``, apostrophes removed).
- RN-PRO-003: Price cannot be negative.
- RN-PRO-004: Stock cannot be negative.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel


def normalise_slug(value: str) -> str:
    """Lower-case ``value``, turn spaces and slashes into ``_``, drop apostrophes."""
    return (
        value.strip().lower().replace(" ", "_").replace("/", "_").replace("'", "")
    )


def normalise_tags(tags: list[str]) -> list[str]:
    """Lower-case and strip tags, dropping blanks and repeats (order kept)."""
    seen: list[str] = []
    for tag in tags:
        tag = tag.strip().lower()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


class Gender(models.TextChoices):
    MEN = "men", "Men"
    WOMEN = "women", "Women"
    KID = "kid", "Kid"
    UNISEX = "unisex", "Unisex"


class Product(BaseModel):
    """Product aggregate root.

    ``slug`` is the human-readable alternate key used by look-ups that do
    not carry a UUID.  ``unique=True`` on ``title`` and ``slug`` creates
    UNIQUE indexes — no additional index is needed.
    """

    title = models.CharField(max_length=255, unique=True)
    slug = models.CharField(max_length=255, unique=True, blank=True)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0"),
        validators=[MinValueValidator(Decimal("0"))],
    )
    stock = models.PositiveIntegerField(default=0)
    sizes = models.JSONField(default=list, blank=True)
    gender = models.CharField(max_length=10, choices=Gender.choices)
    tags = models.JSONField(default=list, blank=True)

    class Meta:
        db_table = "products"
        ordering = ["title"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Normalisation
    # ------------------------------------------------------------------

    def normalise(self) -> None:
        """Apply slug and tag normalisation in place (RN-PRO-002)."""
        if not self.slug:
            self.slug = self.title or ""
        self.slug = normalise_slug(self.slug)
        self.tags = normalise_tags(self.tags or [])

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        self.normalise()
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": "Stock cannot be negative."})

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        self.normalise()
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.slug} - {self.title}"
