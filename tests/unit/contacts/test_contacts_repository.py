from __future__ import annotations

from dataclasses import replace

import pytest

from src.backoffice.contacts.contacts_repository import ContactRepository
from src.backoffice.domain.owner import OwnerRef
from src.backoffice.exceptions import NotFoundError, VersionConflictError
from tests.helpers.builders import sample_contact


@pytest.mark.unit
def test_create_get_and_list(session_factory) -> None:
    repo = ContactRepository(session_factory)

    created = repo.create(sample_contact(OwnerRef.supplier(5), contact_type="comercial"))

    stored = repo.get_by_id(created.id)
    assert stored.contact_type == "comercial"
    assert stored.owner == OwnerRef.supplier(5)
    assert [contact.id for contact in repo.list_by_owner(OwnerRef.supplier(5))] == [created.id]
    assert repo.list_by_owner(OwnerRef.client(5)) == []


@pytest.mark.unit
def test_update_and_toggle(session_factory) -> None:
    repo = ContactRepository(session_factory)
    created = repo.create(sample_contact(OwnerRef.client(1)))

    updated = repo.update(replace(created, contact_position="Compras", owner=None))
    assert updated.version == 2
    assert updated.contact_position == "Compras"
    assert updated.owner == OwnerRef.client(1)

    with pytest.raises(VersionConflictError):
        repo.update(created)

    assert repo.disable(created.id).version == 3
    assert repo.enable(created.id).version == 4
    assert repo.enable(created.id) is None
    assert repo.get_by_id(created.id).version == 4


@pytest.mark.unit
def test_delete_missing_contact(session_factory) -> None:
    with pytest.raises(NotFoundError):
        ContactRepository(session_factory).delete(321)
