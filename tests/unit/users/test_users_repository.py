from __future__ import annotations

from dataclasses import replace

import pytest

from src.backoffice.exceptions import (
    DuplicateError,
    NotFoundError,
    VersionConflictError,
    ZeroIDError,
)
from src.backoffice.users.users_repository import UserRepository
from tests.helpers.builders import sample_user


def build_repo(session_factory) -> UserRepository:
    return UserRepository(session_factory)


@pytest.mark.unit
def test_create_assigns_id_and_initial_version(session_factory) -> None:
    repo = build_repo(session_factory)

    created = repo.create(sample_user(password="hashed-value"))

    assert created.id > 0
    assert created.version == 1
    assert created.created_at is not None
    assert repo.get_by_id(created.id).email == "ana@x.com"
    assert repo.get_by_email("ana@x.com").id == created.id
    assert repo.get_version_by_id(created.id) == 1
    assert repo.exists(created.id)
    assert not repo.exists(created.id + 1)


@pytest.mark.unit
def test_duplicate_email_is_reported(session_factory) -> None:
    repo = build_repo(session_factory)
    repo.create(sample_user(password="h"))

    with pytest.raises(DuplicateError):
        repo.create(sample_user(username="outra", password="h"))


@pytest.mark.unit
def test_create_tx_is_discarded_on_rollback(session_factory) -> None:
    repo = build_repo(session_factory)

    tx = repo.begin_tx()
    created = repo.create_tx(tx, sample_user(password="h"))
    tx.rollback()

    assert not repo.exists(created.id)


@pytest.mark.unit
def test_update_with_current_version(session_factory) -> None:
    repo = build_repo(session_factory)
    created = repo.create(sample_user(password="h"))

    updated = repo.update(replace(created, username="ana maria", password=""))

    assert updated.version == 2
    assert updated.username == "ana maria"
    assert updated.password == "h"
    stored = repo.get_by_id(created.id)
    assert stored.username == "ana maria"
    assert stored.password == "h"


@pytest.mark.unit
def test_second_update_with_same_version_conflicts(session_factory) -> None:
    repo = build_repo(session_factory)
    created = repo.create(sample_user(password="h"))
    first = replace(created, username="first")
    second = replace(created, username="second")

    repo.update(first)
    with pytest.raises(VersionConflictError):
        repo.update(second)

    stored = repo.get_by_id(created.id)
    assert stored.username == "first"
    assert stored.version == 2


@pytest.mark.unit
def test_update_missing_user_is_not_found(session_factory) -> None:
    repo = build_repo(session_factory)

    with pytest.raises(NotFoundError):
        repo.update(sample_user(id=42, password=""))


@pytest.mark.unit
def test_enable_disable_only_write_on_change(session_factory) -> None:
    repo = build_repo(session_factory)
    created = repo.create(sample_user(password="h"))

    assert repo.enable(created.id) is None
    assert repo.get_version_by_id(created.id) == 1

    stamp = repo.disable(created.id)
    assert stamp.version == 2
    assert repo.disable(created.id) is None
    assert repo.get_by_id(created.id).status is False

    assert repo.enable(created.id).version == 3


@pytest.mark.unit
def test_delete(session_factory) -> None:
    repo = build_repo(session_factory)
    created = repo.create(sample_user(password="h"))

    repo.delete(created.id)

    with pytest.raises(NotFoundError):
        repo.get_by_id(created.id)
    with pytest.raises(NotFoundError):
        repo.delete(created.id)


@pytest.mark.unit
def test_non_positive_ids_are_rejected_before_io(session_factory) -> None:
    repo = build_repo(session_factory)

    with pytest.raises(ZeroIDError):
        repo.get_by_id(0)
    with pytest.raises(ZeroIDError):
        repo.disable(-1)


@pytest.mark.unit
def test_list_all_and_search_by_name(session_factory) -> None:
    repo = build_repo(session_factory)
    ana = repo.create(sample_user(password="h"))
    bruno = repo.create(sample_user(username="Bruno Lima", email="bruno@x.com", password="h"))

    assert [user.id for user in repo.list_all()] == [ana.id, bruno.id]
    assert [user.id for user in repo.search_by_name("LIMA")] == [bruno.id]
    assert repo.search_by_name("nobody") == []
