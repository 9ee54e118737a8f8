from __future__ import annotations

import pytest
from sqlalchemy import func, select

from src.backoffice.db.db_models import CategoryModel
from src.backoffice.db.transactions import begin_transaction, session_of
from src.backoffice.exceptions import InvalidTransactionError


def count_categories(session_factory) -> int:
    with session_factory() as session:
        return session.execute(select(func.count()).select_from(CategoryModel)).scalar_one()


@pytest.mark.unit
def test_commit_persists_writes(session_factory) -> None:
    before = count_categories(session_factory)
    tx = begin_transaction(session_factory)
    session_of(tx).add(CategoryModel(name="Financeiro"))
    tx.commit()

    assert not tx.active
    assert count_categories(session_factory) == before + 1


@pytest.mark.unit
def test_rollback_discards_writes_and_is_repeatable(session_factory) -> None:
    before = count_categories(session_factory)
    tx = begin_transaction(session_factory)
    session = session_of(tx)
    session.add(CategoryModel(name="Financeiro"))
    session.flush()

    tx.rollback()
    tx.rollback()

    assert count_categories(session_factory) == before


@pytest.mark.unit
def test_finished_transaction_rejects_further_use(session_factory) -> None:
    tx = begin_transaction(session_factory)
    tx.commit()

    with pytest.raises(InvalidTransactionError):
        tx.commit()
    with pytest.raises(InvalidTransactionError):
        session_of(tx)


@pytest.mark.unit
def test_session_of_rejects_missing_or_foreign_transaction() -> None:
    class NotSqlAlchemy:
        def commit(self) -> None: ...

        def rollback(self) -> None: ...

    with pytest.raises(InvalidTransactionError):
        session_of(None)
    with pytest.raises(InvalidTransactionError):
        session_of(NotSqlAlchemy())
