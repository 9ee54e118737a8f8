"""Address domain dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..domain.owner import OwnerRef, owner_errors
from ..domain.validation import (
    MSG_INVALID_FORMAT,
    MSG_REQUIRED,
    SUPPORTED_COUNTRIES,
    is_blank,
    is_valid_postal_code,
    is_valid_state,
    length_error,
)
from ..exceptions import FieldError, InvalidDataError


@dataclass(slots=True)
class Address:
    street: str
    city: str
    state: str
    country: str
    postal_code: str
    street_number: str = ""
    complement: str = ""
    owner: OwnerRef | None = None
    is_active: bool = True
    id: int | None = None
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        errors = owner_errors(self.owner)

        if is_blank(self.street):
            errors.append(FieldError("street", MSG_REQUIRED))
        elif message := length_error(self.street, min_len=3, max_len=100):
            errors.append(FieldError("street", message))

        if message := length_error(self.street_number, max_len=20):
            errors.append(FieldError("street_number", message))
        if message := length_error(self.complement, max_len=100):
            errors.append(FieldError("complement", message))

        if is_blank(self.city):
            errors.append(FieldError("city", MSG_REQUIRED))
        elif message := length_error(self.city, min_len=2, max_len=100):
            errors.append(FieldError("city", message))

        if is_blank(self.state):
            errors.append(FieldError("state", MSG_REQUIRED))
        elif not is_valid_state(self.state):
            errors.append(FieldError("state", "invalid state"))

        if is_blank(self.country):
            errors.append(FieldError("country", MSG_REQUIRED))
        elif self.country not in SUPPORTED_COUNTRIES:
            errors.append(FieldError("country", "unsupported country"))

        if is_blank(self.postal_code):
            errors.append(FieldError("postal_code", MSG_REQUIRED))
        elif not is_valid_postal_code(self.postal_code):
            errors.append(FieldError("postal_code", MSG_INVALID_FORMAT))

        if errors:
            raise InvalidDataError(errors=errors)
