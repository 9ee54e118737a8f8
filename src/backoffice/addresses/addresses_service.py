"""Address maintenance."""

from __future__ import annotations

from dataclasses import dataclass, replace

import structlog

from ..db.versioning import VersionStamp
from ..domain.owner import OwnerRef, resolve_update_owner
from ..exceptions import InvalidDataError, NilModelError, VersionConflictError, ensure_positive_id
from .addresses_models import Address
from .addresses_repository import AddressRepository

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class AddressService:
    repo: AddressRepository

    def create(self, address: Address | None) -> Address:
        if address is None:
            raise NilModelError("address is required")
        address.validate()
        created = self.repo.create(address)
        logger.info("address.create.success", address_id=created.id, owner=created.owner.kind.value)
        return created

    def get(self, address_id: int) -> Address:
        ensure_positive_id(address_id, entity="address")
        return self.repo.get_by_id(address_id)

    def list_by_owner(self, owner: OwnerRef) -> list[Address]:
        if errors := owner.errors():
            raise InvalidDataError(errors=errors)
        return list(self.repo.list_by_owner(owner))

    def update(self, address: Address | None) -> Address:
        """Apply ``address`` against its expected version.

        The owner is fixed at creation; a missing owner keeps the stored one.
        """
        if address is None:
            raise NilModelError("address is required")
        ensure_positive_id(address.id, entity="address")
        if address.version <= 0:
            raise VersionConflictError(f"address '{address.id}' version must be positive")
        stored = self.repo.get_by_id(address.id)
        address = replace(address, owner=resolve_update_owner(stored.owner, address.owner))
        address.validate()

        try:
            updated = self.repo.update(address)
        except VersionConflictError:
            logger.warning(
                "address.update.version_conflict", address_id=address.id, expected=address.version
            )
            raise
        logger.info("address.update.success", address_id=updated.id, version=updated.version)
        return updated

    def disable(self, address_id: int) -> VersionStamp | None:
        ensure_positive_id(address_id, entity="address")
        return self.repo.disable(address_id)

    def enable(self, address_id: int) -> VersionStamp | None:
        ensure_positive_id(address_id, entity="address")
        return self.repo.enable(address_id)

    def delete(self, address_id: int) -> None:
        ensure_positive_id(address_id, entity="address")
        self.repo.delete(address_id)
        logger.info("address.delete", address_id=address_id)
