"""All-or-nothing onboarding of a user with its address, contact and categories."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import NoReturn, Protocol

import structlog

from ..addresses.addresses_models import Address
from ..contacts.contacts_models import Contact
from ..db.transactions import Transaction, TransactionCoordinator
from ..domain.owner import OwnerRef
from ..exceptions import (
    CommitError,
    CreateError,
    InvalidTransactionError,
    NilModelError,
    RollbackError,
)
from ..relations.relations_models import UserCategoryRelation, UserContactRelation
from ..security.passwords import PasswordHasher
from .users_models import User, UserFull

logger = structlog.get_logger(__name__)


class UserTxWriter(Protocol):
    def create_tx(self, tx: Transaction, user: User) -> User: ...


class AddressTxWriter(Protocol):
    def create_tx(self, tx: Transaction, address: Address) -> Address: ...


class ContactTxWriter(Protocol):
    def create_tx(self, tx: Transaction, contact: Contact) -> Contact: ...


class UserCategoryTxWriter(Protocol):
    def create_tx(self, tx: Transaction, relation: UserCategoryRelation) -> UserCategoryRelation: ...


class UserContactTxWriter(Protocol):
    def create_tx(self, tx: Transaction, relation: UserContactRelation) -> UserContactRelation: ...


@dataclass(slots=True)
class UserFullService:
    """Create a :class:`UserFull` aggregate inside a single transaction.

    Writes are strictly ordered: user, address, contact, user/contact
    relation, then one user/category relation per category in input order.
    Any failure rolls the transaction back; a failing rollback is reported
    together with the original error as :class:`RollbackError`.
    """

    coordinator: TransactionCoordinator
    users: UserTxWriter
    addresses: AddressTxWriter
    contacts: ContactTxWriter
    user_categories: UserCategoryTxWriter
    user_contacts: UserContactTxWriter
    hasher: PasswordHasher

    def create_full(self, aggregate: UserFull | None) -> UserFull:
        if aggregate is None:
            raise NilModelError("user_full: aggregate is required")
        aggregate.validate()

        try:
            hashed = self.hasher.hash(aggregate.user.password)
        except Exception as exc:
            raise CreateError(f"user: password hashing failed: {exc}") from exc
        user = replace(aggregate.user, password=hashed)

        tx = self.coordinator.begin_tx()
        if tx is None:
            raise InvalidTransactionError("user_full: coordinator returned no transaction")

        logger.info(
            "user_full.create.start",
            username=user.username,
            categories=len(aggregate.categories),
        )
        try:
            created = self._write_all(tx, user, aggregate)
            try:
                tx.commit()
            except Exception as exc:
                raise CommitError(f"user_full: commit failed: {exc}") from exc
        except Exception as exc:
            self._abort(tx, exc)
        except BaseException:
            self._rollback_on_fault(tx)
            raise

        logger.info("user_full.create.success", user_id=created.user.id)
        return created

    def _write_all(self, tx: Transaction, user: User, aggregate: UserFull) -> UserFull:
        created_user = self.users.create_tx(tx, user)
        owner = OwnerRef.user(created_user.id)

        address = replace(aggregate.address, owner=owner)
        address.validate()
        created_address = self.addresses.create_tx(tx, address)

        contact = aggregate.contact
        if contact.owner is None:
            contact = replace(contact, owner=owner)
        contact.validate()
        created_contact = self.contacts.create_tx(tx, contact)

        contact_relation = UserContactRelation(user_id=created_user.id, contact_id=created_contact.id)
        contact_relation.validate()
        self.user_contacts.create_tx(tx, contact_relation)

        for category in aggregate.categories:
            relation = UserCategoryRelation(user_id=created_user.id, category_id=category.id)
            relation.validate()
            self.user_categories.create_tx(tx, relation)

        return UserFull(
            user=created_user,
            address=created_address,
            contact=created_contact,
            categories=list(aggregate.categories),
        )

    def _abort(self, tx: Transaction, error: Exception) -> NoReturn:
        try:
            tx.rollback()
        except Exception as rollback_exc:
            logger.error(
                "user_full.create.rollback_failed",
                error=str(error),
                rollback_error=str(rollback_exc),
            )
            raise RollbackError(error, rollback_exc) from error
        logger.warning(
            "user_full.create.rolled_back",
            error_type=type(error).__name__,
            error=str(error),
        )
        raise error

    @staticmethod
    def _rollback_on_fault(tx: Transaction) -> None:
        try:
            tx.rollback()
        except Exception:
            logger.exception("user_full.create.rollback_failed")
