"""Application configuration builder."""

from __future__ import annotations

import os
from dataclasses import dataclass

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from .db.db_init import enable_sqlite_foreign_keys, init_db


@dataclass(slots=True)
class AppConfig:
    database_url: str
    engine: Engine
    session_factory: sessionmaker[Session]
    password_hash_iterations: int
    log_level: str


def _bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> AppConfig:
    """Load configuration from environment (SQLite by default)."""
    database_url = os.getenv("DATABASE_URL", "sqlite:///backoffice.db")
    engine = create_engine(database_url, future=True)
    enable_sqlite_foreign_keys(engine)
    session_factory: sessionmaker[Session] = sessionmaker(bind=engine, expire_on_commit=False)

    password_hash_iterations = int(os.getenv("PASSWORD_HASH_ITERATIONS", 390_000))
    log_level = os.getenv("LOG_LEVEL", "INFO")

    init_db(engine, session_factory, seed=_bool(os.getenv("SEED_CATEGORIES"), True))

    return AppConfig(
        database_url=database_url,
        engine=engine,
        session_factory=session_factory,
        password_hash_iterations=password_hash_iterations,
        log_level=log_level,
    )
