"""Field level validators shared by the entity ``validate`` methods."""

from __future__ import annotations

import re

MSG_REQUIRED = "required field"
MSG_INVALID_FORMAT = "invalid format"

BRAZILIAN_STATES = frozenset(
    {
        "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS", "MG", "PA",
        "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
    }
)
SUPPORTED_COUNTRIES = frozenset({"Brasil"})

_EMAIL_PATTERN = re.compile(
    r"^[A-Za-z0-9._%+\-]+@[A-Za-z0-9\-]+(\.[A-Za-z0-9\-]+)*\.[A-Za-z]{2,}$"
)
_POSTAL_CODE_PATTERN = re.compile(r"^\d{8}$")
_PHONE_PUNCTUATION = re.compile(r"[\s()\-]")


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(value: str) -> bool:
    if ".." in value:
        return False
    return bool(_EMAIL_PATTERN.fullmatch(value))


def is_valid_postal_code(value: str) -> bool:
    return bool(_POSTAL_CODE_PATTERN.fullmatch(value)) and value != "00000000"


def is_valid_state(value: str) -> bool:
    return value in BRAZILIAN_STATES


def _digits(value: str) -> str | None:
    stripped = _PHONE_PUNCTUATION.sub("", value)
    return stripped if stripped.isdigit() else None


def is_valid_phone(value: str) -> bool:
    """Landline: area code plus eight digits."""
    digits = _digits(value)
    return digits is not None and len(digits) == 10


def is_valid_cell(value: str) -> bool:
    """Mobile: area code plus nine digits."""
    digits = _digits(value)
    return digits is not None and len(digits) == 11


def has_password_complexity(value: str) -> bool:
    has_upper = any(char.isupper() for char in value)
    has_lower = any(char.islower() for char in value)
    has_digit = any(char.isdigit() for char in value)
    return has_upper and has_lower and has_digit


def length_error(value: str, *, min_len: int | None = None, max_len: int | None = None) -> str | None:
    """Return a message when ``value`` falls outside the allowed length."""
    if min_len is not None and len(value) < min_len:
        return f"minimum of {min_len} characters"
    if max_len is not None and len(value) > max_len:
        return f"maximum of {max_len} characters"
    return None
