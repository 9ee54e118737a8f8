"""Pydantic schemas for the contact API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..domain.owner import OwnerRef
from .contacts_models import Contact


class ContactPayload(BaseModel):
    user_id: int | None = None
    client_id: int | None = None
    supplier_id: int | None = None
    contact_name: str
    contact_position: str = ""
    contact_description: str = ""
    email: str = ""
    phone: str = ""
    cell: str = ""
    contact_type: str = ""

    def owner(self) -> OwnerRef | None:
        if self.user_id is None and self.client_id is None and self.supplier_id is None:
            return None
        return OwnerRef.from_columns(self.user_id, self.client_id, self.supplier_id)

    def to_domain(self, **extra) -> Contact:
        return Contact(
            owner=self.owner(),
            contact_name=self.contact_name,
            contact_position=self.contact_position,
            contact_description=self.contact_description,
            email=self.email,
            phone=self.phone,
            cell=self.cell,
            contact_type=self.contact_type,
            **extra,
        )


class ContactUpdateRequest(ContactPayload):
    version: int = Field(description="Version the caller last read")
    is_active: bool = True


class ContactResponse(BaseModel):
    id: int
    user_id: int | None = None
    client_id: int | None = None
    supplier_id: int | None = None
    contact_name: str
    contact_position: str
    contact_description: str
    email: str
    phone: str
    cell: str
    contact_type: str
    is_active: bool
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, contact: Contact) -> "ContactResponse":
        return cls(
            id=contact.id,
            **contact.owner.as_columns(),
            contact_name=contact.contact_name,
            contact_position=contact.contact_position,
            contact_description=contact.contact_description,
            email=contact.email,
            phone=contact.phone,
            cell=contact.cell,
            contact_type=contact.contact_type,
            is_active=contact.is_active,
            version=contact.version,
            created_at=contact.created_at,
            updated_at=contact.updated_at,
        )
