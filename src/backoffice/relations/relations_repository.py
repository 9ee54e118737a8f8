"""Repositories for the user/category and user/contact join tables."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import sqlalchemy as sa
from sqlalchemy.orm import Session

from ..db.db_models import UserCategoryRelationModel, UserContactRelationModel
from ..db.transactions import Transaction, session_of
from ..exceptions import NotFoundError, ensure_positive_id, handle_sqlalchemy_errors
from .relations_models import UserCategoryRelation, UserContactRelation


class UserCategoryRelationRepository:
    entity = "user_category_relation"

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create(self, relation: UserCategoryRelation) -> UserCategoryRelation:
        with self._session_factory() as session:
            created = self._insert(session, relation)
            with handle_sqlalchemy_errors(entity=self.entity, operation="create"):
                session.commit()
            return created

    def create_tx(self, tx: Transaction, relation: UserCategoryRelation) -> UserCategoryRelation:
        return self._insert(session_of(tx), relation)

    def list_by_user(self, user_id: int) -> Sequence[UserCategoryRelation]:
        ensure_positive_id(user_id, entity=self.entity)
        model = UserCategoryRelationModel
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity):
                rows = session.execute(
                    sa.select(model).where(model.user_id == user_id).order_by(model.category_id)
                ).scalars().all()
            return [
                UserCategoryRelation(row.user_id, row.category_id, row.created_at) for row in rows
            ]

    def get(self, user_id: int, category_id: int) -> UserCategoryRelation:
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity):
                row = session.get(UserCategoryRelationModel, (user_id, category_id))
            if row is None:
                raise NotFoundError(f"{self.entity} '{user_id}/{category_id}' not found")
            return UserCategoryRelation(row.user_id, row.category_id, row.created_at)

    def exists(self, user_id: int, category_id: int) -> bool:
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity):
                row = session.get(UserCategoryRelationModel, (user_id, category_id))
            return row is not None

    def delete(self, user_id: int, category_id: int) -> None:
        model = UserCategoryRelationModel
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity, operation="delete"):
                result = session.execute(
                    sa.delete(model).where(
                        model.user_id == user_id, model.category_id == category_id
                    )
                )
                session.commit()
            if result.rowcount == 0:
                raise NotFoundError(
                    f"{self.entity} '{user_id}/{category_id}' not found"
                )

    def delete_all(self, user_id: int) -> int:
        """Remove every link of ``user_id``; returns how many were removed."""
        ensure_positive_id(user_id, entity=self.entity)
        model = UserCategoryRelationModel
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity, operation="delete"):
                result = session.execute(sa.delete(model).where(model.user_id == user_id))
                session.commit()
            return result.rowcount

    def _insert(self, session: Session, relation: UserCategoryRelation) -> UserCategoryRelation:
        row = UserCategoryRelationModel(user_id=relation.user_id, category_id=relation.category_id)
        with handle_sqlalchemy_errors(entity=self.entity, operation="create"):
            session.add(row)
            session.flush()
        return UserCategoryRelation(row.user_id, row.category_id, row.created_at)


class UserContactRelationRepository:
    entity = "user_contact_relation"

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create(self, relation: UserContactRelation) -> UserContactRelation:
        with self._session_factory() as session:
            created = self._insert(session, relation)
            with handle_sqlalchemy_errors(entity=self.entity, operation="create"):
                session.commit()
            return created

    def create_tx(self, tx: Transaction, relation: UserContactRelation) -> UserContactRelation:
        return self._insert(session_of(tx), relation)

    def list_by_user(self, user_id: int) -> Sequence[UserContactRelation]:
        ensure_positive_id(user_id, entity=self.entity)
        model = UserContactRelationModel
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity):
                rows = session.execute(
                    sa.select(model).where(model.user_id == user_id).order_by(model.contact_id)
                ).scalars().all()
            return [
                UserContactRelation(row.user_id, row.contact_id, row.created_at) for row in rows
            ]

    def get(self, user_id: int, contact_id: int) -> UserContactRelation:
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity):
                row = session.get(UserContactRelationModel, (user_id, contact_id))
            if row is None:
                raise NotFoundError(f"{self.entity} '{user_id}/{contact_id}' not found")
            return UserContactRelation(row.user_id, row.contact_id, row.created_at)

    def exists(self, user_id: int, contact_id: int) -> bool:
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity):
                row = session.get(UserContactRelationModel, (user_id, contact_id))
            return row is not None

    def delete(self, user_id: int, contact_id: int) -> None:
        model = UserContactRelationModel
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity, operation="delete"):
                result = session.execute(
                    sa.delete(model).where(model.user_id == user_id, model.contact_id == contact_id)
                )
                session.commit()
            if result.rowcount == 0:
                raise NotFoundError(f"{self.entity} '{user_id}/{contact_id}' not found")

    def delete_all(self, user_id: int) -> int:
        """Remove every link of ``user_id``; returns how many were removed."""
        ensure_positive_id(user_id, entity=self.entity)
        model = UserContactRelationModel
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=self.entity, operation="delete"):
                result = session.execute(sa.delete(model).where(model.user_id == user_id))
                session.commit()
            return result.rowcount

    def _insert(self, session: Session, relation: UserContactRelation) -> UserContactRelation:
        row = UserContactRelationModel(user_id=relation.user_id, contact_id=relation.contact_id)
        with handle_sqlalchemy_errors(entity=self.entity, operation="create"):
            session.add(row)
            session.flush()
        return UserContactRelation(row.user_id, row.contact_id, row.created_at)
