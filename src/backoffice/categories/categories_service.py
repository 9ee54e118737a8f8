"""User category maintenance."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from ..exceptions import NilModelError, ensure_positive_id
from .categories_models import Category
from .categories_repository import CategoryRepository

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class CategoryService:
    repo: CategoryRepository

    def list_all(self) -> list[Category]:
        return list(self.repo.list_all())

    def get(self, category_id: int) -> Category:
        ensure_positive_id(category_id, entity="category")
        return self.repo.get_by_id(category_id)

    def create(self, category: Category | None) -> Category:
        if category is None:
            raise NilModelError("category is required")
        category.validate()
        created = self.repo.create(category)
        logger.info("category.create.success", category_id=created.id)
        return created

    def update(self, category: Category | None) -> Category:
        if category is None:
            raise NilModelError("category is required")
        ensure_positive_id(category.id, entity="category")
        category.validate()
        updated = self.repo.update(category)
        logger.info("category.update.success", category_id=updated.id)
        return updated

    def delete(self, category_id: int) -> None:
        ensure_positive_id(category_id, entity="category")
        self.repo.delete(category_id)
        logger.info("category.delete", category_id=category_id)
