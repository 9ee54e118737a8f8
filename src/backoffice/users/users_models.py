"""User domain dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..addresses.addresses_models import Address
from ..categories.categories_models import Category
from ..contacts.contacts_models import Contact
from ..domain.validation import (
    MSG_INVALID_FORMAT,
    MSG_REQUIRED,
    has_password_complexity,
    is_blank,
    is_valid_email,
    length_error,
)
from ..exceptions import FieldError, InvalidDataError, NilModelError

MSG_PASSWORD_COMPLEXITY = "must contain upper case, lower case letters and digits"


@dataclass(slots=True)
class User:
    username: str
    email: str
    password: str = field(default="", repr=False)
    description: str = ""
    status: bool = True
    id: int | None = None
    version: int = 1
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def validate(self) -> None:
        """Validate for creation: the plaintext password is mandatory."""
        errors = self._identity_errors()
        if is_blank(self.password):
            errors.append(FieldError("password", MSG_REQUIRED))
        else:
            errors.extend(_password_errors(self.password))
        if errors:
            raise InvalidDataError(errors=errors)

    def validate_for_update(self, new_password: str | None = None) -> None:
        """Validate for update; ``new_password`` is checked only when a change is requested."""
        errors = self._identity_errors()
        if new_password is not None:
            errors.extend(_password_errors(new_password))
        if errors:
            raise InvalidDataError(errors=errors)

    def _identity_errors(self) -> list[FieldError]:
        errors: list[FieldError] = []
        if is_blank(self.username):
            errors.append(FieldError("username", MSG_REQUIRED))
        elif message := length_error(self.username, min_len=3, max_len=50):
            errors.append(FieldError("username", message))

        if is_blank(self.email):
            errors.append(FieldError("email", MSG_REQUIRED))
        elif message := length_error(self.email, max_len=100):
            errors.append(FieldError("email", message))
        elif not is_valid_email(self.email):
            errors.append(FieldError("email", MSG_INVALID_FORMAT))
        return errors


def _password_errors(password: str) -> list[FieldError]:
    if message := length_error(password, min_len=8):
        return [FieldError("password", message)]
    if not has_password_complexity(password):
        return [FieldError("password", MSG_PASSWORD_COMPLEXITY)]
    return []


@dataclass(slots=True)
class UserFull:
    """User together with its address, contact and categories.

    Only used as the onboarding envelope; never persisted as such.
    """

    user: User | None
    address: Address | None
    contact: Contact | None
    categories: list[Category] = field(default_factory=list)

    def validate(self) -> None:
        missing = [
            name
            for name, part in (("user", self.user), ("address", self.address), ("contact", self.contact))
            if part is None
        ]
        if missing:
            raise NilModelError(
                "missing required data",
                errors=[FieldError(name, MSG_REQUIRED) for name in missing],
            )
        if not self.categories:
            raise InvalidDataError(errors=[FieldError("categories", "at least one category is required")])
        self.user.validate()
