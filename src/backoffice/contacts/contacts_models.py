"""Contact domain dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..domain.owner import OwnerRef, owner_errors
from ..domain.validation import (
    MSG_INVALID_FORMAT,
    MSG_REQUIRED,
    is_blank,
    is_valid_cell,
    is_valid_email,
    is_valid_phone,
    length_error,
)
from ..exceptions import FieldError, InvalidDataError

CONTACT_TYPES = frozenset({"principal", "comercial", "financeiro", "tecnico", "pessoal"})


@dataclass(slots=True)
class Contact:
    contact_name: str
    contact_position: str = ""
    contact_description: str = ""
    email: str = ""
    phone: str = ""
    cell: str = ""
    contact_type: str = ""
    owner: OwnerRef | None = None
    is_active: bool = True
    id: int | None = None
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        errors = owner_errors(self.owner)

        if is_blank(self.contact_name):
            errors.append(FieldError("contact_name", MSG_REQUIRED))
        elif message := length_error(self.contact_name, min_len=3, max_len=100):
            errors.append(FieldError("contact_name", message))

        if message := length_error(self.contact_position, max_len=100):
            errors.append(FieldError("contact_position", message))
        if message := length_error(self.contact_description, max_len=255):
            errors.append(FieldError("contact_description", message))

        if self.email:
            if message := length_error(self.email, max_len=100):
                errors.append(FieldError("email", message))
            elif not is_valid_email(self.email):
                errors.append(FieldError("email", MSG_INVALID_FORMAT))

        if self.phone and not is_valid_phone(self.phone):
            errors.append(FieldError("phone", "invalid phone number"))
        if self.cell and not is_valid_cell(self.cell):
            errors.append(FieldError("cell", "invalid cell number"))
        if self.contact_type and self.contact_type not in CONTACT_TYPES:
            errors.append(FieldError("contact_type", "invalid contact type"))

        if errors:
            raise InvalidDataError(errors=errors)
