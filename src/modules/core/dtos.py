"""Shared request DTOs.

- ``PaginationDTO``: ``limit`` / ``offset`` window for list endpoints.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class PaginationDTO(BaseModel):
    """Immutable pagination window.

    Both fields are optional; the service substitutes its defaults
    (``limit=5``, ``offset=0``) for whichever is missing.
    """

    model_config = ConfigDict(frozen=True)

    limit: Optional[int] = None
    offset: Optional[int] = None

    @field_validator("limit")
    @classmethod
    def limit_must_be_positive(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("Limit must be greater than zero.")
        return v

    @field_validator("offset")
    @classmethod
    def offset_must_be_non_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError("Offset cannot be negative.")
        return v
