"""Database initialization helpers."""

from __future__ import annotations

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .db_models import Base, CategoryModel, utcnow

DEFAULT_CATEGORIES = [
    {"name": "Administrador", "description": "Acesso total ao back office"},
    {"name": "Vendedor", "description": "Registra vendas e clientes"},
    {"name": "Estoquista", "description": "Mantém produtos e fornecedores"},
]


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Make SQLite enforce foreign keys like PostgreSQL does."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, _record) -> None:  # pragma: no cover - driver hook
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(engine: Engine, session_factory: sessionmaker[Session], *, seed: bool = True) -> None:
    """Create tables and seed default user categories if the table is empty."""
    Base.metadata.create_all(engine)
    if not seed:
        return
    with session_factory() as session:
        _seed_categories(session)
        session.commit()


def _seed_categories(session: Session) -> None:
    if session.query(CategoryModel).count():
        return
    now = utcnow()
    for category in DEFAULT_CATEGORIES:
        session.add(
            CategoryModel(
                name=category["name"],
                description=category["description"],
                created_at=now,
            )
        )
