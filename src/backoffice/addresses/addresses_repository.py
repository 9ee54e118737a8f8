"""Address repository backed by SQLAlchemy."""

from __future__ import annotations

from collections.abc import Callable, Sequence

import sqlalchemy as sa
from sqlalchemy.orm import Session

from ..db.db_models import AddressModel
from ..db.transactions import Transaction, session_of
from ..db.versioning import VersionStamp, toggle_status, versioned_update
from ..domain.owner import OwnerRef
from ..exceptions import NotFoundError, ensure_positive_id, handle_sqlalchemy_errors
from .addresses_models import Address

ENTITY = "address"

_MUTABLE_FIELDS = (
    "street",
    "street_number",
    "complement",
    "city",
    "state",
    "country",
    "postal_code",
    "is_active",
)


class AddressRepository:
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def create(self, address: Address) -> Address:
        with self._session_factory() as session:
            created = self._insert(session, address)
            with handle_sqlalchemy_errors(entity=ENTITY, operation="create"):
                session.commit()
            return created

    def create_tx(self, tx: Transaction, address: Address) -> Address:
        return self._insert(session_of(tx), address)

    def get_by_id(self, address_id: int) -> Address:
        ensure_positive_id(address_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                row = session.get(AddressModel, address_id)
            if row is None:
                raise NotFoundError(f"{ENTITY} '{address_id}' not found")
            return self._to_domain(row)

    def list_by_owner(self, owner: OwnerRef) -> Sequence[Address]:
        column = getattr(AddressModel, owner.kind.column)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY):
                rows = session.execute(
                    sa.select(AddressModel).where(column == owner.id).order_by(AddressModel.id)
                ).scalars().all()
            return [self._to_domain(row) for row in rows]

    def update(self, address: Address) -> Address:
        """Compare-and-swap on ``address.version``; returns the row as stored.

        Owner columns are never written.
        """
        ensure_positive_id(address.id, entity=ENTITY)
        changes = {name: getattr(address, name) for name in _MUTABLE_FIELDS}
        with self._session_factory() as session:
            versioned_update(session, AddressModel, address.id, address.version, changes, entity=ENTITY)
            with handle_sqlalchemy_errors(entity=ENTITY, operation="update"):
                stored = self._to_domain(session.get(AddressModel, address.id))
                session.commit()
            return stored

    def disable(self, address_id: int) -> VersionStamp | None:
        return self._toggle(address_id, False)

    def enable(self, address_id: int) -> VersionStamp | None:
        return self._toggle(address_id, True)

    def delete(self, address_id: int) -> None:
        ensure_positive_id(address_id, entity=ENTITY)
        with self._session_factory() as session:
            with handle_sqlalchemy_errors(entity=ENTITY, operation="delete"):
                result = session.execute(
                    sa.delete(AddressModel).where(AddressModel.id == address_id)
                )
                session.commit()
            if result.rowcount == 0:
                raise NotFoundError(f"{ENTITY} '{address_id}' not found")

    def _toggle(self, address_id: int, target: bool) -> VersionStamp | None:
        ensure_positive_id(address_id, entity=ENTITY)
        with self._session_factory() as session:
            stamp = toggle_status(
                session, AddressModel, address_id, column="is_active", target=target, entity=ENTITY
            )
            if stamp is not None:
                with handle_sqlalchemy_errors(entity=ENTITY, operation="update"):
                    session.commit()
            return stamp

    def _insert(self, session: Session, address: Address) -> Address:
        row = AddressModel(
            **address.owner.as_columns(),
            **{name: getattr(address, name) for name in _MUTABLE_FIELDS},
            version=1,
        )
        with handle_sqlalchemy_errors(entity=ENTITY, operation="create"):
            session.add(row)
            session.flush()
        return self._to_domain(row)

    @staticmethod
    def _to_domain(row: AddressModel) -> Address:
        return Address(
            id=row.id,
            owner=OwnerRef.from_columns(row.user_id, row.client_id, row.supplier_id),
            street=row.street,
            street_number=row.street_number,
            complement=row.complement,
            city=row.city,
            state=row.state,
            country=row.country,
            postal_code=row.postal_code,
            is_active=row.is_active,
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )
