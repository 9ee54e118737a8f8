"""Polymorphic owner reference shared by addresses and contacts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..exceptions import FieldError, InvalidDataError

OWNER_FIELD = "user_id/client_id/supplier_id"
MSG_EXACTLY_ONE_OWNER = "exactly one of user_id, client_id, supplier_id must be set"
MSG_OWNER_IMMUTABLE = "owner cannot be changed"


class OwnerKind(str, Enum):
    USER = "user"
    CLIENT = "client"
    SUPPLIER = "supplier"

    @property
    def column(self) -> str:
        return f"{self.value}_id"


@dataclass(frozen=True, slots=True)
class OwnerRef:
    """Exactly one owning entity: a user, a client or a supplier."""

    kind: OwnerKind
    id: int

    @classmethod
    def user(cls, user_id: int) -> "OwnerRef":
        return cls(OwnerKind.USER, user_id)

    @classmethod
    def client(cls, client_id: int) -> "OwnerRef":
        return cls(OwnerKind.CLIENT, client_id)

    @classmethod
    def supplier(cls, supplier_id: int) -> "OwnerRef":
        return cls(OwnerKind.SUPPLIER, supplier_id)

    @classmethod
    def from_columns(
        cls,
        user_id: int | None = None,
        client_id: int | None = None,
        supplier_id: int | None = None,
    ) -> "OwnerRef":
        """Build the reference from three nullable columns.

        Zero or more than one populated column is rejected.
        """
        candidates = [
            (kind, value)
            for kind, value in (
                (OwnerKind.USER, user_id),
                (OwnerKind.CLIENT, client_id),
                (OwnerKind.SUPPLIER, supplier_id),
            )
            if value is not None
        ]
        if len(candidates) != 1:
            raise InvalidDataError(errors=[FieldError(OWNER_FIELD, MSG_EXACTLY_ONE_OWNER)])
        kind, value = candidates[0]
        return cls(kind, value)

    def as_columns(self) -> dict[str, int | None]:
        columns: dict[str, int | None] = {kind.column: None for kind in OwnerKind}
        columns[self.kind.column] = self.id
        return columns

    def errors(self) -> list[FieldError]:
        if self.id <= 0:
            return [FieldError(self.kind.column, "must be a positive id")]
        return []


def owner_errors(owner: OwnerRef | None) -> list[FieldError]:
    """Validation errors for an optional owner reference."""
    if owner is None:
        return [FieldError(OWNER_FIELD, MSG_EXACTLY_ONE_OWNER)]
    return owner.errors()


def resolve_update_owner(stored: OwnerRef, requested: OwnerRef | None) -> OwnerRef:
    """Owner to write on update: the stored one; a different request is rejected."""
    if requested is not None and requested != stored:
        raise InvalidDataError(errors=[FieldError(OWNER_FIELD, MSG_OWNER_IMMUTABLE)])
    return stored
