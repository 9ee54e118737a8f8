from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src.backoffice.config import AppConfig
from src.backoffice.db.db_init import enable_sqlite_foreign_keys, init_db
from src.backoffice.main import create_app


@pytest.fixture
def engine() -> Engine:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    enable_sqlite_foreign_keys(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker[Session]:
    """In-memory database with tables created and default categories seeded."""
    factory = sessionmaker(bind=engine, expire_on_commit=False)
    init_db(engine, factory)
    return factory


@pytest.fixture
def client(engine: Engine, session_factory: sessionmaker[Session]) -> TestClient:
    config = AppConfig(
        database_url="sqlite://",
        engine=engine,
        session_factory=session_factory,
        password_hash_iterations=1_000,
        log_level="WARNING",
    )
    return TestClient(create_app(config))
