from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from src.backoffice.domain.owner import OwnerRef
from src.backoffice.exceptions import (
    CommitError,
    CreateError,
    ForeignKeyViolationError,
    InvalidDataError,
    InvalidTransactionError,
    NilModelError,
    RollbackError,
)
from src.backoffice.users.users_full_service import UserFullService
from tests.helpers.builders import sample_user_full


class Fault(BaseException):
    """Stands in for an interrupt escaping the saga."""


@dataclass
class FakeTx:
    commit_error: Exception | None = None
    rollback_error: Exception | None = None
    committed: bool = False
    rolled_back: bool = False

    def commit(self) -> None:
        if self.commit_error is not None:
            raise self.commit_error
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True
        if self.rollback_error is not None:
            raise self.rollback_error


@dataclass
class FakeCoordinator:
    tx: FakeTx | None

    def begin_tx(self) -> FakeTx | None:
        return self.tx


@dataclass
class RecordingWriter:
    """Assigns ids to written entities and records the write order."""

    name: str
    journal: list[str]
    fail_with: BaseException | None = None
    written: list = field(default_factory=list)

    def create_tx(self, tx, entity):
        assert tx is not None
        if self.fail_with is not None:
            raise self.fail_with
        self.journal.append(self.name)
        if hasattr(entity, "id") and entity.id is None:
            entity.id = len(self.written) + 10
        self.written.append(entity)
        return entity


class FakeHasher:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[str] = []

    def hash(self, password: str) -> str:
        self.calls.append(password)
        if self.error is not None:
            raise self.error
        return f"hashed:{password}"


def build_service(tx: FakeTx | None = None, *, fail: dict[str, BaseException] | None = None, hasher=None):
    fail = fail or {}
    journal: list[str] = []
    writers = {
        name: RecordingWriter(name, journal, fail_with=fail.get(name))
        for name in ("users", "addresses", "contacts", "user_contacts", "user_categories")
    }
    service = UserFullService(
        coordinator=FakeCoordinator(tx if tx is not None else FakeTx()),
        hasher=hasher or FakeHasher(),
        **writers,
    )
    return service, writers, journal


@pytest.mark.unit
def test_create_full_writes_in_order_and_commits() -> None:
    tx = FakeTx()
    service, writers, journal = build_service(tx)

    result = service.create_full(sample_user_full(category_ids=(1, 3)))

    assert journal == [
        "users",
        "addresses",
        "contacts",
        "user_contacts",
        "user_categories",
        "user_categories",
    ]
    assert tx.committed and not tx.rolled_back
    assert result.user.password == "hashed:Secret123"
    assert result.address.owner == OwnerRef.user(result.user.id)
    assert result.contact.owner == OwnerRef.user(result.user.id)
    assert [relation.category_id for relation in writers["user_categories"].written] == [1, 3]
    assert writers["user_contacts"].written[0].contact_id == result.contact.id


@pytest.mark.unit
def test_create_full_keeps_explicit_contact_owner() -> None:
    service, _, _ = build_service()
    aggregate = sample_user_full()
    aggregate.contact.owner = OwnerRef.client(8)

    result = service.create_full(aggregate)

    assert result.contact.owner == OwnerRef.client(8)


@pytest.mark.unit
def test_create_full_does_not_return_caller_objects() -> None:
    service, _, _ = build_service()
    aggregate = sample_user_full()

    result = service.create_full(aggregate)

    assert result.user is not aggregate.user
    assert aggregate.user.password == "Secret123"


@pytest.mark.unit
def test_validation_failures_happen_before_any_io() -> None:
    hasher = FakeHasher()
    tx = FakeTx()
    service, _, journal = build_service(tx, hasher=hasher)
    aggregate = sample_user_full()
    aggregate.user.password = "weak"

    with pytest.raises(InvalidDataError):
        service.create_full(aggregate)
    with pytest.raises(NilModelError):
        service.create_full(None)

    assert hasher.calls == []
    assert journal == []
    assert not tx.rolled_back


@pytest.mark.unit
def test_hash_failure_aborts_before_transaction() -> None:
    tx = FakeTx()
    service, _, journal = build_service(tx, hasher=FakeHasher(ValueError("boom")))

    with pytest.raises(CreateError):
        service.create_full(sample_user_full())

    assert journal == []
    assert not tx.rolled_back and not tx.committed


@pytest.mark.unit
def test_missing_transaction_is_fatal() -> None:
    service, _, journal = build_service()
    service.coordinator = FakeCoordinator(None)

    with pytest.raises(InvalidTransactionError):
        service.create_full(sample_user_full())

    assert journal == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "step", ["users", "addresses", "contacts", "user_contacts", "user_categories"]
)
def test_each_failing_step_rolls_back(step: str) -> None:
    tx = FakeTx()
    error = ForeignKeyViolationError(f"{step} failed")
    service, _, journal = build_service(tx, fail={step: error})

    with pytest.raises(ForeignKeyViolationError) as exc_info:
        service.create_full(sample_user_full())

    assert exc_info.value is error
    assert tx.rolled_back
    assert not tx.committed
    assert step not in journal


@pytest.mark.unit
def test_rollback_failure_is_joined_with_original() -> None:
    tx = FakeTx(rollback_error=RuntimeError("connection lost"))
    original = ForeignKeyViolationError("category missing")
    service, _, _ = build_service(tx, fail={"user_categories": original})

    with pytest.raises(RollbackError) as exc_info:
        service.create_full(sample_user_full())

    error = exc_info.value
    assert error.original is original
    assert isinstance(error.rollback_error, RuntimeError)
    assert error.__cause__ is original
    assert "category missing" in str(error)
    assert "connection lost" in str(error)


@pytest.mark.unit
def test_commit_failure_rolls_back() -> None:
    tx = FakeTx(commit_error=RuntimeError("disk full"))
    service, _, _ = build_service(tx)

    with pytest.raises(CommitError) as exc_info:
        service.create_full(sample_user_full())

    assert tx.rolled_back
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.unit
def test_commit_and_rollback_failures_are_both_reported() -> None:
    tx = FakeTx(commit_error=RuntimeError("disk full"), rollback_error=RuntimeError("gone"))
    service, _, _ = build_service(tx)

    with pytest.raises(RollbackError) as exc_info:
        service.create_full(sample_user_full())

    assert isinstance(exc_info.value.original, CommitError)
    assert "disk full" in str(exc_info.value)
    assert "gone" in str(exc_info.value)


@pytest.mark.unit
def test_interrupt_rolls_back_and_propagates_unchanged() -> None:
    tx = FakeTx()
    fault = Fault()
    service, _, _ = build_service(tx, fail={"contacts": fault})

    with pytest.raises(Fault) as exc_info:
        service.create_full(sample_user_full())

    assert exc_info.value is fault
    assert tx.rolled_back


@pytest.mark.unit
def test_interrupt_survives_failing_rollback() -> None:
    tx = FakeTx(rollback_error=RuntimeError("gone"))
    fault = Fault()
    service, _, _ = build_service(tx, fail={"addresses": fault})

    with pytest.raises(Fault) as exc_info:
        service.create_full(sample_user_full())

    assert exc_info.value is fault


@pytest.mark.unit
def test_invalid_category_id_rolls_back() -> None:
    tx = FakeTx()
    service, _, journal = build_service(tx)

    with pytest.raises(InvalidDataError):
        service.create_full(sample_user_full(category_ids=(0,)))

    assert tx.rolled_back
    assert "user_categories" not in journal
