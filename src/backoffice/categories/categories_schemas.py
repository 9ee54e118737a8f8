"""Pydantic schemas for the user category API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from .categories_models import Category


class CategoryPayload(BaseModel):
    name: str
    description: str = ""

    def to_domain(self, category_id: int | None = None) -> Category:
        return Category(id=category_id, name=self.name, description=self.description)


class CategoryResponse(BaseModel):
    id: int
    name: str
    description: str
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponse":
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            created_at=category.created_at,
        )
