"""Contact repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import sqlalchemy as sa
from sqlalchemy.orm import Session

from ..db.db_models import ContactModel
from ..db.transactions import Transaction, session_of
from ..db.versioning import VersionStamp, toggle_status, versioned_update
from ..domain.owner import OwnerRef
from ..exceptions import NotFoundError, ensure_positive_id, handle_sqlalchemy_errors
from .contacts_models import Contact

ENTITY = "contact"

_MUTABLE_FIELDS = (
    "contact_name",
    "contact_position",
    "contact_description",
    "email",
    "phone",
    "cell",
    "contact_type",
    "is_active",
)


class ContactRepository:
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create(self, contact: Contact) -> Contact:
        with self._session_factory() as session:
            created = self._insert(session, contact)
            with handle_sqlalchemy_errors(entity=ENTITY, operation="create"):
                session.commit()
            return created

    def create_tx(self, tx: Transaction, contact: Contact) -> Contact:
        return self._insert(session_of(tx), contact)

    def get_by_id(self, contact_id: int) -> Contact:
        ensure_positive_id(contact_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                row = session.get(ContactModel, contact_id)
            if row is None:
                raise NotFoundError(f"{ENTITY} '{contact_id}' not found")
            return self._to_domain(row)

    def list_by_owner(self, owner: OwnerRef) -> Sequence[Contact]:
        column = getattr(ContactModel, owner.kind.column)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                rows = session.execute(
                    sa.select(ContactModel).where(column == owner.id).order_by(ContactModel.id)
                ).scalars().all()
            return [self._to_domain(row) for row in rows]

    def update(self, contact: Contact) -> Contact:
        ensure_positive_id(contact.id, entity=ENTITY)
        changes = {name: getattr(contact, name) for name in _MUTABLE_FIELDS}
        with self._session_factory() as session:
            versioned_update(session, ContactModel, contact.id, contact.version, changes, entity=ENTITY)
            with handle_sqlalchemy_errors(entity=ENTITY, operation="update"):
                stored = self._to_domain(session.get(ContactModel, contact.id))
                session.commit()
            return stored

    def disable(self, contact_id: int) -> VersionStamp | None:
        return self._toggle(contact_id, False)

    def enable(self, contact_id: int) -> VersionStamp | None:
        return self._toggle(contact_id, True)

    def delete(self, contact_id: int) -> None:
        ensure_positive_id(contact_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY, operation="delete"):
                result = session.execute(
                    sa.delete(ContactModel).where(ContactModel.id == contact_id)
                )
                session.commit()
            if result.rowcount == 0:
                raise NotFoundError(f"{ENTITY} '{contact_id}' not found")

    def _toggle(self, contact_id: int, target: bool) -> VersionStamp | None:
        ensure_positive_id(contact_id, entity=ENTITY)
        with self._session_factory() as session:
            stamp = toggle_status(
                session, ContactModel, contact_id, column="is_active", target=target, entity=ENTITY
            )
            if stamp is not None:
                with handle_sqlalchemy_errors(entity=ENTITY, operation="update"):
                    session.commit()
            return stamp

    def _insert(self, session: Session, contact: Contact) -> Contact:
        row = ContactModel(
            **contact.owner.as_columns(),
            **{name: getattr(contact, name) for name in _MUTABLE_FIELDS},
            version=1,
        )
        with handle_sqlalchemy_errors(entity=ENTITY, operation="create"):
            session.add(row)
            session.flush()
        return self._to_domain(row)

    @staticmethod
    def _to_domain(row: ContactModel) -> Contact:
        return Contact(
            id=row.id,
            owner=OwnerRef.from_columns(row.user_id, row.client_id, row.supplier_id),
            contact_name=row.contact_name,
            contact_position=row.contact_position,
            contact_description=row.contact_description,
            email=row.email,
            phone=row.phone,
            cell=row.cell,
            contact_type=row.contact_type,
            is_active=row.is_active,
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
