"""Pydantic schemas for the address API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..domain.owner import OwnerRef
from .addresses_models import Address


class AddressPayload(BaseModel):
    user_id: int | None = None
    client_id: int | None = None
    supplier_id: int | None = None
    street: str
    street_number: str = ""
    complement: str = ""
    city: str
    state: str
    country: str = "Brasil"
    postal_code: str

    def owner(self) -> OwnerRef | None:
        if self.user_id is None and self.client_id is None and self.supplier_id is None:
            return None
        return OwnerRef.from_columns(self.user_id, self.client_id, self.supplier_id)

    def to_domain(self, **extra) -> Address:
        return Address(
            owner=self.owner(),
            street=self.street,
            street_number=self.street_number,
            complement=self.complement,
            city=self.city,
            state=self.state,
            country=self.country,
            postal_code=self.postal_code,
            **extra,
        )


class AddressUpdateRequest(AddressPayload):
    version: int = Field(description="Version the caller last read")
    is_active: bool = True


class AddressResponse(BaseModel):
    id: int
    user_id: int | None = None
    client_id: int | None = None
    supplier_id: int | None = None
    street: str
    street_number: str
    complement: str
    city: str
    state: str
    country: str
    postal_code: str
    is_active: bool
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, address: Address) -> "AddressResponse":
        return cls(
            id=address.id,
            **address.owner.as_columns(),
            street=address.street,
            street_number=address.street_number,
            complement=address.complement,
            city=address.city,
            state=address.state,
            country=address.country,
            postal_code=address.postal_code,
            is_active=address.is_active,
            version=address.version,
            created_at=address.created_at,
            updated_at=address.updated_at,
        )
