"""Pydantic schemas for the user API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ..addresses.addresses_schemas import AddressPayload, AddressResponse
from ..categories.categories_models import Category
from ..contacts.contacts_schemas import ContactPayload, ContactResponse
from .users_models import User, UserFull


class UserPayload(BaseModel):
    username: str
    email: str
    password: str
    description: str = ""

    def to_domain(self) -> User:
        return User(
            username=self.username,
            email=self.email,
            password=self.password,
            description=self.description,
        )


class CredentialsRequest(BaseModel):
    email: str
    password: str


class VersionResponse(BaseModel):
    id: int
    version: int


class CategoryRef(BaseModel):
    id: int


class UserFullRequest(BaseModel):
    user: UserPayload | None = None
    address: AddressPayload | None = None
    contact: ContactPayload | None = None
    categories: list[CategoryRef] = Field(default_factory=list)

    def to_domain(self) -> UserFull:
        return UserFull(
            user=self.user.to_domain() if self.user else None,
            address=self.address.to_domain() if self.address else None,
            contact=self.contact.to_domain() if self.contact else None,
            categories=[Category(id=ref.id) for ref in self.categories],
        )


class UserUpdateRequest(BaseModel):
    username: str
    email: str
    new_password: str | None = Field(default=None, description="New plaintext password, if changing")
    description: str = ""
    status: bool = True
    version: int = Field(description="Version the caller last read")


class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    description: str
    status: bool
    version: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            description=user.description,
            status=user.status,
            version=user.version,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserFullResponse(BaseModel):
    user: UserResponse
    address: AddressResponse
    contact: ContactResponse
    category_ids: list[int]

    @classmethod
    def from_domain(cls, full: UserFull) -> "UserFullResponse":
        return cls(
            user=UserResponse.from_domain(full.user),
            address=AddressResponse.from_domain(full.address),
            contact=ContactResponse.from_domain(full.contact),
            category_ids=[category.id for category in full.categories],
        )
