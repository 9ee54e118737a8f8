"""User repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable

import sqlalchemy as sa
from sqlalchemy.orm import Session

from ..db.db_models import UserModel
from ..db.transactions import SqlAlchemyTransaction, Transaction, begin_transaction, session_of
from ..db.versioning import VersionStamp, toggle_status, versioned_update
from ..exceptions import NotFoundError, ensure_positive_id, handle_sqlalchemy_errors
from .users_models import User

ENTITY = "user"


class UserRepository:
    """Persist users; ``user.password`` always carries the stored hash here."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def begin_tx(self) -> SqlAlchemyTransaction:
        with handle_sqlalchemy_errors(entity=ENTITY, operation="get"):
            return begin_transaction(self._session_factory)

    def create(self, user: User) -> User:
        with self._session_factory() as session:
            created = self._insert(session, user)
            with handle_sqlalchemy_errors(entity=ENTITY, operation="create"):
                session.commit()
            return created

    def create_tx(self, tx: Transaction, user: User) -> User:
        return self._insert(session_of(tx), user)

    def get_by_id(self, user_id: int) -> User:
        ensure_positive_id(user_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                row = session.get(UserModel, user_id)
            if row is None:
                raise NotFoundError(f"{ENTITY} '{user_id}' not found")
            return self._to_domain(row)

    def get_by_email(self, email: str) -> User:
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                row = session.execute(
                    sa.select(UserModel).where(UserModel.email == email)
                ).scalar_one_or_none()
            if row is None:
                raise NotFoundError(f"{ENTITY} with email '{email}' not found")
            return self._to_domain(row)

    def get_version_by_id(self, user_id: int) -> int:
        ensure_positive_id(user_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                version = session.execute(
                    sa.select(UserModel.version).where(UserModel.id == user_id)
                ).scalar_one_or_none()
            if version is None:
                raise NotFoundError(f"{ENTITY} '{user_id}' not found")
            return version

    def exists(self, user_id: int) -> bool:
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                found = session.execute(
                    sa.select(UserModel.id).where(UserModel.id == user_id)
                ).first()
            return found is not None

    def list_all(self) -> list[User]:
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                rows = session.execute(sa.select(UserModel).order_by(UserModel.id)).scalars().all()
            return [self._to_domain(row) for row in rows]

    def search_by_name(self, name: str) -> list[User]:
        """Case-insensitive substring match on ``username``."""
        pattern = f"%{name}%"
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                rows = (
                    session.execute(
                        sa.select(UserModel)
                        .where(UserModel.username.ilike(pattern))
                        .order_by(UserModel.id)
                    )
                    .scalars()
                    .all()
                )
            return [self._to_domain(row) for row in rows]

    def update(self, user: User) -> User:
        """Compare-and-swap on ``user.version``; returns the row as stored.

        An empty ``user.password`` keeps the stored hash.
        """
        ensure_positive_id(user.id, entity=ENTITY)
        changes = {
            "username": user.username,
            "email": user.email,
            "description": user.description,
            "status": user.status,
        }
        if user.password:
            changes["password_hash"] = user.password
        with self._session_factory() as session:
            versioned_update(session, UserModel, user.id, user.version, changes, entity=ENTITY)
            with handle_sqlalchemy_errors(entity=ENTITY, operation="update"):
                stored = self._to_domain(session.get(UserModel, user.id))
                session.commit()
            return stored

    def disable(self, user_id: int) -> VersionStamp | None:
        return self._toggle(user_id, False)

    def enable(self, user_id: int) -> VersionStamp | None:
        return self._toggle(user_id, True)

    def delete(self, user_id: int) -> None:
        ensure_positive_id(user_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY, operation="delete"):
                result = session.execute(sa.delete(UserModel).where(UserModel.id == user_id))
                session.commit()
            if result.rowcount == 0:
                raise NotFoundError(f"{ENTITY} '{user_id}' not found")

    def _toggle(self, user_id: int, target: bool) -> VersionStamp | None:
        ensure_positive_id(user_id, entity=ENTITY)
        with self._session_factory() as session:
            stamp = toggle_status(
                session, UserModel, user_id, column="status", target=target, entity=ENTITY
            )
            if stamp is not None:
                with handle_sqlalchemy_errors(entity=ENTITY, operation="update"):
                    session.commit()
            return stamp

    def _insert(self, session: Session, user: User) -> User:
        row = UserModel(
            username=user.username,
            email=user.email,
            password_hash=user.password,
            description=user.description,
            status=user.status,
            version=1,
        )
        with handle_sqlalchemy_errors(entity=ENTITY, operation="create"):
            session.add(row)
            session.flush()
        return self._to_domain(row)

    @staticmethod
    def _to_domain(row: UserModel) -> User:
        return User(
            id=row.id,
            username=row.username,
            email=row.email,
            password=row.password_hash,
            description=row.description,
            status=row.status,
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
