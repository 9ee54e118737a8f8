"""Utility helpers for hashing and verifying user passwords."""

from __future__ import annotations

import binascii
import hashlib
import hmac
import secrets
from dataclasses import dataclass
from typing import Protocol

DEFAULT_ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 390_000
SALT_BYTES = 16


class PasswordHasher(Protocol):
    """Turns a plaintext password into its stored representation."""

    def hash(self, password: str) -> str:
        """Return the encoded hash for ``password``."""


@dataclass(slots=True)
class PasswordHash:
    """Structured representation of a PBKDF2 hash entry."""

    algorithm: str
    iterations: int
    salt: bytes
    digest: bytes

    @classmethod
    def parse(cls, encoded: str) -> "PasswordHash":
        """Parse an encoded password hash string."""

        try:
            algorithm, iterations, salt_hex, digest_hex = encoded.split("$")
        except ValueError as exc:
            raise ValueError("invalid password hash format") from exc
        return cls(
            algorithm=algorithm,
            iterations=int(iterations),
            salt=binascii.unhexlify(salt_hex),
            digest=binascii.unhexlify(digest_hex),
        )

    def encode(self) -> str:
        return "$".join(
            (
                self.algorithm,
                str(self.iterations),
                binascii.hexlify(self.salt).decode("ascii"),
                binascii.hexlify(self.digest).decode("ascii"),
            )
        )

    def verify(self, password: str) -> bool:
        """Check ``password`` against the stored digest using constant time."""

        if self.algorithm != DEFAULT_ALGORITHM:
            raise ValueError(f"unsupported algorithm: {self.algorithm}")
        derived = _derive(password, self.salt, self.iterations)
        return hmac.compare_digest(derived, self.digest)


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


@dataclass(slots=True)
class Pbkdf2PasswordHasher:
    """Default :class:`PasswordHasher` backed by PBKDF2-SHA256."""

    iterations: int = DEFAULT_ITERATIONS

    def hash(self, password: str) -> str:
        if not password:
            raise ValueError("password must not be empty")
        salt = secrets.token_bytes(SALT_BYTES)
        return PasswordHash(
            algorithm=DEFAULT_ALGORITHM,
            iterations=self.iterations,
            salt=salt,
            digest=_derive(password, salt, self.iterations),
        ).encode()


def verify_password(password: str, encoded: str) -> bool:
    """Return ``True`` when ``password`` matches ``encoded`` hash."""

    if not encoded:
        return False
    return PasswordHash.parse(encoded).verify(password)


__all__ = [
    "PasswordHash",
    "PasswordHasher",
    "Pbkdf2PasswordHasher",
    "verify_password",
]
