"""Security utilities for the back office services."""

from .passwords import (
    PasswordHash,
    PasswordHasher,
    Pbkdf2PasswordHasher,
    verify_password,
)

__all__ = [
    "PasswordHash",
    "PasswordHasher",
    "Pbkdf2PasswordHasher",
    "verify_password",
]
