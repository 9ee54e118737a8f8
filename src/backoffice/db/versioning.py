"""Version compare-and-swap used by every mutable entity.

Each write is a single ``UPDATE ... WHERE id = :id AND version = :expected``
statement that bumps ``version`` by one. When no row comes back, a follow-up
existence check tells :class:`NotFoundError` apart from
:class:`VersionConflictError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

import sqlalchemy as sa
from sqlalchemy.orm import Session

from ..exceptions import NotFoundError, VersionConflictError, handle_sqlalchemy_errors
from .db_models import utcnow


@dataclass(frozen=True, slots=True)
class VersionStamp:
    version: int
    updated_at: datetime


def versioned_update(
    session: Session,
    model: Any,
    entity_id: int,
    expected_version: int,
    changes: dict[str, Any],
    *,
    entity: str,
) -> VersionStamp:
    """Apply ``changes`` only if the stored version equals ``expected_version``."""

    stmt = (
        sa.update(model)
        .where(model.id == entity_id, model.version == expected_version)
        .values(**changes, version=model.version + 1, updated_at=utcnow())
        .returning(model.version, model.updated_at)
        .execution_options(synchronize_session=False)
    )
    with handle_sqlalchemy_errors(entity=entity, operation="update"):
        row = session.execute(stmt).one_or_none()
        if row is None:
            exists = _exists(session, model, entity_id)

    if row is None:
        if not exists:
            raise NotFoundError(f"{entity} '{entity_id}' not found")
        raise VersionConflictError(
            f"{entity} '{entity_id}' version conflict: expected {expected_version}"
        )
    return VersionStamp(version=row.version, updated_at=row.updated_at)


def toggle_status(
    session: Session,
    model: Any,
    entity_id: int,
    *,
    column: str,
    target: bool,
    entity: str,
) -> VersionStamp | None:
    """Move ``column`` to ``target``; no write when it is already there.

    Returns the new stamp, or ``None`` when the row was already in the target
    state.
    """

    status_column = getattr(model, column)
    with handle_sqlalchemy_errors(entity=entity, operation="get"):
        row = session.execute(
            sa.select(model.version, status_column).where(model.id == entity_id)
        ).one_or_none()
    if row is None:
        raise NotFoundError(f"{entity} '{entity_id}' not found")

    version, current = row
    if bool(current) == target:
        return None
    return versioned_update(
        session, model, entity_id, version, {column: target}, entity=entity
    )


def _exists(session: Session, model: Any, entity_id: int) -> bool:
    stmt = sa.select(model.id).where(model.id == entity_id)
    return session.execute(stmt).first() is not None
