"""Domain level exceptions and helpers for repository layers."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterable, Iterator

from sqlalchemy import exc as sa_exc

__all__ = [
    "AppError",
    "FieldError",
    "InvalidDataError",
    "NilModelError",
    "ZeroIDError",
    "InvalidCredentialsError",
    "AccountDisabledError",
    "RepositoryError",
    "NotFoundError",
    "VersionConflictError",
    "ForeignKeyViolationError",
    "DuplicateError",
    "CreateError",
    "UpdateError",
    "DeleteError",
    "DatabaseOperationError",
    "TransactionError",
    "InvalidTransactionError",
    "CommitError",
    "RollbackError",
    "ensure_positive_id",
    "handle_sqlalchemy_errors",
]


class AppError(Exception):
    """Base class for application specific errors."""


@dataclass(frozen=True, slots=True)
class FieldError:
    """Single field validation failure."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class InvalidDataError(AppError):
    """Raised when an entity fails validation."""

    def __init__(self, message: str = "invalid data", errors: Iterable[FieldError] = ()) -> None:
        self.errors = list(errors)
        if self.errors:
            message = f"{message}: " + "; ".join(str(error) for error in self.errors)
        super().__init__(message)


class NilModelError(InvalidDataError):
    """Raised when a required sub-object is missing."""


class ZeroIDError(InvalidDataError):
    """Raised when an identifier is missing or not positive."""


class InvalidCredentialsError(AppError):
    """Raised when an email and password pair does not match a stored user."""


class AccountDisabledError(AppError):
    """Raised when the credentials match a disabled account."""


class RepositoryError(AppError):
    """Base class for persistence layer failures."""


class NotFoundError(RepositoryError):
    """Raised when a record could not be located."""


class VersionConflictError(RepositoryError):
    """Raised when optimistic locking preconditions fail."""


class ForeignKeyViolationError(RepositoryError):
    """Raised when a referenced row does not exist."""


class DuplicateError(RepositoryError):
    """Raised when a unique constraint is violated."""


class CreateError(RepositoryError):
    """Raised when an insert fails."""


class UpdateError(RepositoryError):
    """Raised when an update fails."""


class DeleteError(RepositoryError):
    """Raised when a delete fails."""


class DatabaseOperationError(RepositoryError):
    """Raised for unexpected database errors on reads."""


class TransactionError(AppError):
    """Base class for transaction lifecycle failures."""


class InvalidTransactionError(TransactionError):
    """Raised when the coordinator hands out no transaction."""


class CommitError(TransactionError):
    """Raised when committing a transaction fails."""


class RollbackError(TransactionError):
    """Raised when rolling back after a failure fails as well.

    Both the failure that triggered the rollback and the rollback failure are
    kept; ``__cause__`` points at ``original``.
    """

    def __init__(self, original: BaseException, rollback_error: BaseException) -> None:
        self.original = original
        self.rollback_error = rollback_error
        super().__init__(f"{original}; rollback error: {rollback_error}")


_OPERATION_ERRORS: dict[str, type[RepositoryError]] = {
    "create": CreateError,
    "update": UpdateError,
    "delete": DeleteError,
    "get": DatabaseOperationError,
}


@dataclass(slots=True)
class _EntityContext:
    """Internal helper describing the entity for error messages."""

    entity: str | None = None
    operation: str = "get"

    def format(self, message: str) -> str:
        if self.entity:
            return f"{self.entity}: {message}"
        return message


def ensure_positive_id(value: int | None, *, entity: str) -> int:
    """Reject missing or non-positive identifiers before any I/O."""

    if value is None or value <= 0:
        raise ZeroIDError(f"{entity}: id must be positive")
    return value


def _is_foreign_key_violation(exc: sa_exc.IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == "23503" or getattr(orig, "pgcode", None) == "23503":
        return True
    return "foreign key" in str(orig).lower()


def _is_unique_violation(exc: sa_exc.IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == "23505" or getattr(orig, "pgcode", None) == "23505":
        return True
    text = str(orig).lower()
    return "unique" in text or "duplicate" in text


def _translate_sqlalchemy_error(exc: Exception, *, context: _EntityContext) -> RepositoryError:
    if isinstance(exc, sa_exc.IntegrityError):
        if _is_foreign_key_violation(exc):
            return ForeignKeyViolationError(context.format("invalid foreign key"))
        if _is_unique_violation(exc):
            return DuplicateError(context.format("duplicate entry"))
    error_cls = _OPERATION_ERRORS.get(context.operation, DatabaseOperationError)
    return error_cls(context.format(f"{context.operation} failed: {exc}"))


@contextmanager
def handle_sqlalchemy_errors(*, entity: str | None = None, operation: str = "get") -> Iterator[None]:
    """Translate SQLAlchemy errors into domain specific ones."""

    context = _EntityContext(entity, operation)
    try:
        yield
    except sa_exc.SQLAlchemyError as exc:
        raise _translate_sqlalchemy_error(exc, context=context) from exc
