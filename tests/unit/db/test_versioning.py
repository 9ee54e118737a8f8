from __future__ import annotations

import pytest
from sqlalchemy.orm import Session, sessionmaker

from src.backoffice.db.db_models import UserModel
from src.backoffice.db.versioning import toggle_status, versioned_update
from src.backoffice.exceptions import NotFoundError, VersionConflictError


def insert_user(session_factory: sessionmaker[Session]) -> int:
    with session_factory() as session:
        row = UserModel(username="ana", email="ana@x.com", password_hash="hash")
        session.add(row)
        session.commit()
        return row.id


def read_row(session_factory: sessionmaker[Session], user_id: int) -> UserModel:
    with session_factory() as session:
        return session.get(UserModel, user_id)


@pytest.mark.unit
def test_versioned_update_bumps_version(session_factory) -> None:
    user_id = insert_user(session_factory)

    with session_factory() as session:
        stamp = versioned_update(
            session, UserModel, user_id, 1, {"username": "bia"}, entity="user"
        )
        session.commit()

    assert stamp.version == 2
    row = read_row(session_factory, user_id)
    assert row.username == "bia"
    assert row.version == 2


@pytest.mark.unit
def test_versioned_update_distinguishes_conflict_from_missing(session_factory) -> None:
    user_id = insert_user(session_factory)

    with session_factory() as session:
        with pytest.raises(VersionConflictError):
            versioned_update(session, UserModel, user_id, 5, {"username": "bia"}, entity="user")
        with pytest.raises(NotFoundError):
            versioned_update(session, UserModel, 404, 1, {"username": "bia"}, entity="user")

    assert read_row(session_factory, user_id).version == 1


@pytest.mark.unit
def test_toggle_status_is_idempotent(session_factory) -> None:
    user_id = insert_user(session_factory)

    with session_factory() as session:
        assert toggle_status(
            session, UserModel, user_id, column="status", target=True, entity="user"
        ) is None
        session.commit()
    assert read_row(session_factory, user_id).version == 1

    with session_factory() as session:
        stamp = toggle_status(
            session, UserModel, user_id, column="status", target=False, entity="user"
        )
        session.commit()
    assert stamp is not None and stamp.version == 2
    row = read_row(session_factory, user_id)
    assert row.status is False
    assert row.version == 2


@pytest.mark.unit
def test_toggle_status_on_missing_row(session_factory) -> None:
    with session_factory() as session:
        with pytest.raises(NotFoundError):
            toggle_status(session, UserModel, 77, column="status", target=False, entity="user")
