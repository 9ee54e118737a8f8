"""User registration, lookup and maintenance."""

from __future__ import annotations

from dataclasses import dataclass, replace

import structlog

from ..db.versioning import VersionStamp
from ..domain.validation import MSG_INVALID_FORMAT, MSG_REQUIRED, is_blank, is_valid_email
from ..exceptions import (
    AccountDisabledError,
    FieldError,
    InvalidCredentialsError,
    InvalidDataError,
    NotFoundError,
    VersionConflictError,
    ensure_positive_id,
)
from ..security.passwords import PasswordHasher, verify_password
from .users_models import User
from .users_repository import UserRepository

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class UserService:
    repo: UserRepository
    hasher: PasswordHasher

    def create(self, user: User) -> User:
        """Validate ``user``, hash its plaintext password and store it."""
        user.validate()
        created = self.repo.create(replace(user, password=self.hasher.hash(user.password)))
        logger.info("user.create.success", user_id=created.id)
        return created

    def list_all(self) -> list[User]:
        return self.repo.list_all()

    def search_by_name(self, name: str) -> list[User]:
        if is_blank(name):
            raise InvalidDataError(errors=[FieldError("name", MSG_REQUIRED)])
        return self.repo.search_by_name(name.strip())

    def get(self, user_id: int) -> User:
        ensure_positive_id(user_id, entity="user")
        return self.repo.get_by_id(user_id)

    def get_by_email(self, email: str) -> User:
        email = _clean_email(email)
        return self.repo.get_by_email(email)

    def get_version(self, user_id: int) -> int:
        ensure_positive_id(user_id, entity="user")
        return self.repo.get_version_by_id(user_id)

    def check_credentials(self, email: str, password: str) -> User:
        """Return the active user owning ``email`` when ``password`` matches.

        Unknown emails and wrong passwords are indistinguishable to the caller.
        """
        email = _clean_email(email)
        try:
            user = self.repo.get_by_email(email)
        except NotFoundError:
            logger.info("user.credentials.rejected", reason="unknown_email")
            raise InvalidCredentialsError("invalid email or password") from None
        if not verify_password(password, user.password):
            logger.info("user.credentials.rejected", user_id=user.id, reason="password_mismatch")
            raise InvalidCredentialsError("invalid email or password")
        if not user.status:
            logger.info("user.credentials.rejected", user_id=user.id, reason="disabled")
            raise AccountDisabledError(f"user '{user.id}' is disabled")
        return user

    def update(self, user: User, *, new_password: str | None = None) -> User:
        """Validate and apply ``user`` against its expected version.

        ``user.password`` is ignored; the stored hash changes only when
        ``new_password`` is given, and then to a fresh hash of it.
        """
        user.validate_for_update(new_password)
        ensure_positive_id(user.id, entity="user")
        if user.version <= 0:
            raise VersionConflictError(f"user '{user.id}' version must be positive")
        password = self.hasher.hash(new_password) if new_password is not None else ""
        user = replace(user, password=password)

        try:
            updated = self.repo.update(user)
        except VersionConflictError:
            logger.warning("user.update.version_conflict", user_id=user.id, expected=user.version)
            raise
        logger.info(
            "user.update.success",
            user_id=updated.id,
            version=updated.version,
            password_changed=new_password is not None,
        )
        return updated

    def disable(self, user_id: int) -> VersionStamp | None:
        ensure_positive_id(user_id, entity="user")
        stamp = self.repo.disable(user_id)
        logger.info("user.disable", user_id=user_id, changed=stamp is not None)
        return stamp

    def enable(self, user_id: int) -> VersionStamp | None:
        ensure_positive_id(user_id, entity="user")
        stamp = self.repo.enable(user_id)
        logger.info("user.enable", user_id=user_id, changed=stamp is not None)
        return stamp

    def delete(self, user_id: int) -> None:
        ensure_positive_id(user_id, entity="user")
        self.repo.delete(user_id)
        logger.info("user.delete", user_id=user_id)


def _clean_email(email: str) -> str:
    if is_blank(email):
        raise InvalidDataError(errors=[FieldError("email", MSG_REQUIRED)])
    email = email.strip()
    if not is_valid_email(email):
        raise InvalidDataError(errors=[FieldError("email", MSG_INVALID_FORMAT)])
    return email
