"""Contact maintenance."""

from __future__ import annotations

from dataclasses import dataclass, replace

import structlog

from ..db.versioning import VersionStamp
from ..domain.owner import OwnerRef, resolve_update_owner
from ..exceptions import InvalidDataError, NilModelError, VersionConflictError, ensure_positive_id
from .contacts_models import Contact
from .contacts_repository import ContactRepository

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class ContactService:
    repo: ContactRepository

    def create(self, contact: Contact | None) -> Contact:
        if contact is None:
            raise NilModelError("contact is required")
        contact.validate()
        created = self.repo.create(contact)
        logger.info("contact.create.success", contact_id=created.id, owner=created.owner.kind.value)
        return created

    def get(self, contact_id: int) -> Contact:
        ensure_positive_id(contact_id, entity="contact")
        return self.repo.get_by_id(contact_id)

    def list_by_owner(self, owner: OwnerRef) -> list[Contact]:
        if errors := owner.errors():
            raise InvalidDataError(errors=errors)
        return list(self.repo.list_by_owner(owner))

    def update(self, contact: Contact | None) -> Contact:
        if contact is None:
            raise NilModelError("contact is required")
        ensure_positive_id(contact.id, entity="contact")
        if contact.version <= 0:
            raise VersionConflictError(f"contact '{contact.id}' version must be positive")
        stored = self.repo.get_by_id(contact.id)
        contact = replace(contact, owner=resolve_update_owner(stored.owner, contact.owner))
        contact.validate()

        try:
            updated = self.repo.update(contact)
        except VersionConflictError:
            logger.warning(
                "contact.update.version_conflict", contact_id=contact.id, expected=contact.version
            )
            raise
        logger.info("contact.update.success", contact_id=updated.id, version=updated.version)
        return updated

    def disable(self, contact_id: int) -> VersionStamp | None:
        ensure_positive_id(contact_id, entity="contact")
        return self.repo.disable(contact_id)

    def enable(self, contact_id: int) -> VersionStamp | None:
        ensure_positive_id(contact_id, entity="contact")
        return self.repo.enable(contact_id)

    def delete(self, contact_id: int) -> None:
        ensure_positive_id(contact_id, entity="contact")
        self.repo.delete(contact_id)
        logger.info("contact.delete", contact_id=contact_id)
