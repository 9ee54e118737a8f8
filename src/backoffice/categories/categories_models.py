"""User category domain dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..domain.validation import MSG_REQUIRED, is_blank, length_error
from ..exceptions import FieldError, InvalidDataError


@dataclass(slots=True)
class Category:
    id: int | None = None
    name: str = ""
    description: str = ""
    created_at: datetime | None = None

    def validate(self) -> None:
        errors: list[FieldError] = []
        if is_blank(self.name):
            errors.append(FieldError("name", MSG_REQUIRED))
        elif message := length_error(self.name, min_len=2, max_len=100):
            errors.append(FieldError("name", message))
        if errors:
            raise InvalidDataError(errors=errors)
