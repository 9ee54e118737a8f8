"""User category repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import sqlalchemy as sa
from sqlalchemy.orm import Session

from ..db.db_models import CategoryModel
from ..exceptions import NotFoundError, ensure_positive_id, handle_sqlalchemy_errors
from .categories_models import Category

ENTITY = "category"


class CategoryRepository:
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create(self, category: Category) -> Category:
        row = CategoryModel(name=category.name, description=category.description)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY, operation="create"):
                session.add(row)
                session.commit()
            return self._to_domain(row)

    def get_by_id(self, category_id: int) -> Category:
        ensure_positive_id(category_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                row = session.get(CategoryModel, category_id)
            if row is None:
                raise NotFoundError(f"{ENTITY} '{category_id}' not found")
            return self._to_domain(row)

    def list_all(self) -> Sequence[Category]:
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                rows = session.execute(
                    sa.select(CategoryModel).order_by(CategoryModel.id)
                ).scalars().all()
            return [self._to_domain(row) for row in rows]

    def update(self, category: Category) -> Category:
        ensure_positive_id(category.id, entity=ENTITY)
        stmt = (
            sa.update(CategoryModel)
            .where(CategoryModel.id == category.id)
            .values(name=category.name, description=category.description)
            .execution_options(synchronize_session=False)
        )
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY, operation="update"):
                result = session.execute(stmt)
                if result.rowcount == 0:
                    raise NotFoundError(f"{ENTITY} '{category.id}' not found")
                stored = self._to_domain(session.get(CategoryModel, category.id))
                session.commit()
            return stored

    def delete(self, category_id: int) -> None:
        """Delete the category; its user links go with it."""
        ensure_positive_id(category_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY, operation="delete"):
                result = session.execute(
                    sa.delete(CategoryModel).where(CategoryModel.id == category_id)
                )
                session.commit()
            if result.rowcount == 0:
                raise NotFoundError(f"{ENTITY} '{category_id}' not found")

    @staticmethod
    def _to_domain(row: CategoryModel) -> Category:
        return Category(
            id=row.id,
            name=row.name,
            description=row.description,
            created_at=row.created_at,
        )
