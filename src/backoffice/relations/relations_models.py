"""Join rows linking users to categories and contacts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..exceptions import FieldError, InvalidDataError


def _positive(name: str, value: int | None) -> list[FieldError]:
    if value is None or value <= 0:
        return [FieldError(name, "must be a positive id")]
    return []


@dataclass(slots=True)
class UserCategoryRelation:
    user_id: int
    category_id: int
    created_at: datetime | None = None

    def validate(self) -> None:
        errors = _positive("user_id", self.user_id) + _positive("category_id", self.category_id)
        if errors:
            raise InvalidDataError(errors=errors)


@dataclass(slots=True)
class UserContactRelation:
    user_id: int
    contact_id: int
    created_at: datetime | None = None

    def validate(self) -> None:
        errors = _positive("user_id", self.user_id) + _positive("contact_id", self.contact_id)
        if errors:
            raise InvalidDataError(errors=errors)
