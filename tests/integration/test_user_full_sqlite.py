from __future__ import annotations

import pytest
from sqlalchemy import func, select

from src.backoffice.addresses.addresses_repository import AddressRepository
from src.backoffice.contacts.contacts_repository import ContactRepository
from src.backoffice.db.db_models import (
    AddressModel,
    ContactModel,
    UserCategoryRelationModel,
    UserContactRelationModel,
    UserModel,
)
from src.backoffice.exceptions import ForeignKeyViolationError
from src.backoffice.relations.relations_repository import (
    UserCategoryRelationRepository,
    UserContactRelationRepository,
)
from src.backoffice.security.passwords import Pbkdf2PasswordHasher, verify_password
from src.backoffice.users.users_full_service import UserFullService
from src.backoffice.users.users_repository import UserRepository
from tests.helpers.builders import sample_user_full

TABLES = (
    UserModel,
    AddressModel,
    ContactModel,
    UserContactRelationModel,
    UserCategoryRelationModel,
)


def build_service(session_factory) -> UserFullService:
    users = UserRepository(session_factory)
    return UserFullService(
        coordinator=users,
        users=users,
        addresses=AddressRepository(session_factory),
        contacts=ContactRepository(session_factory),
        user_categories=UserCategoryRelationRepository(session_factory),
        user_contacts=UserContactRelationRepository(session_factory),
        hasher=Pbkdf2PasswordHasher(iterations=1_000),
    )


def row_counts(session_factory) -> dict[str, int]:
    with session_factory() as session:
        return {
            model.__tablename__: session.execute(
                select(func.count()).select_from(model)
            ).scalar_one()
            for model in TABLES
        }


def test_create_full_commits_every_part(session_factory) -> None:
    service = build_service(session_factory)

    result = service.create_full(sample_user_full(category_ids=(1,)))

    assert result.user.id > 0
    assert result.user.password != "Secret123"
    assert verify_password("Secret123", result.user.password)
    assert result.address.owner.id == result.user.id
    assert row_counts(session_factory) == {
        "users": 1,
        "addresses": 1,
        "contacts": 1,
        "user_contact_relations": 1,
        "user_category_relations": 1,
    }
    with session_factory() as session:
        relation = session.execute(select(UserCategoryRelationModel)).scalar_one()
        stored = session.get(UserModel, result.user.id)
    assert relation.category_id == 1
    assert stored.password_hash == result.user.password


def test_missing_category_leaves_no_rows(session_factory) -> None:
    service = build_service(session_factory)

    with pytest.raises(ForeignKeyViolationError):
        service.create_full(sample_user_full(category_ids=(99,)))

    assert set(row_counts(session_factory).values()) == {0}


def test_second_category_failure_discards_first(session_factory) -> None:
    service = build_service(session_factory)

    with pytest.raises(ForeignKeyViolationError):
        service.create_full(sample_user_full(category_ids=(1, 99)))

    assert set(row_counts(session_factory).values()) == {0}
