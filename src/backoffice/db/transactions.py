"""Transactional boundary shared by repositories and the onboarding saga.

The coordinator hands out a :class:`Transaction`; repositories expose
``create_tx`` variants that write through the transaction's session instead
of committing on their own.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from sqlalchemy.orm import Session

from ..exceptions import InvalidTransactionError


class Transaction(Protocol):
    """Represents an atomic transactional boundary."""

    def commit(self) -> None:
        """Commit the current transaction."""

    def rollback(self) -> None:
        """Rollback the current transaction."""


class TransactionCoordinator(Protocol):
    """Something that can open a :class:`Transaction`."""

    def begin_tx(self) -> Transaction | None:
        """Open a new transaction."""


class SqlAlchemyTransaction:
    """Session-scoped transaction passed by reference into ``*_tx`` methods."""

    def __init__(self, session: Session) -> None:
        self._session = session
        self._session.begin()
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    @property
    def session(self) -> Session:
        if not self._active:
            raise InvalidTransactionError("transaction is no longer active")
        return self._session

    def commit(self) -> None:
        if not self._active:
            raise InvalidTransactionError("transaction is no longer active")
        # Stays active on failure so the caller can still roll back.
        self._session.commit()
        self._close()

    def rollback(self) -> None:
        if not self._active:
            return
        try:
            self._session.rollback()
        finally:
            self._close()

    def _close(self) -> None:
        self._active = False
        self._session.close()


def begin_transaction(session_factory: Callable[[], Session]) -> SqlAlchemyTransaction:
    """Open a session and start a transaction on it."""
    return SqlAlchemyTransaction(session_factory())


def session_of(tx: Transaction) -> Session:
    """Return the session bound to ``tx`` for ``*_tx`` repository writes."""
    if tx is None:
        raise InvalidTransactionError("transaction is required")
    session = getattr(tx, "session", None)
    if not isinstance(session, Session):
        raise InvalidTransactionError("transaction is not bound to a SQLAlchemy session")
    return session
