"""Linking users to categories and contacts after onboarding."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import structlog

from ..exceptions import DuplicateError, NotFoundError, ensure_positive_id
from ..users.users_repository import UserRepository

logger = structlog.get_logger(__name__)


class RelationRepository(Protocol):
    entity: str

    def create(self, relation: Any) -> Any: ...

    def get(self, user_id: int, target_id: int) -> Any: ...

    def exists(self, user_id: int, target_id: int) -> bool: ...

    def list_by_user(self, user_id: int) -> Sequence[Any]: ...

    def delete(self, user_id: int, target_id: int) -> None: ...

    def delete_all(self, user_id: int) -> int: ...


@dataclass(slots=True)
class UserRelationService:
    """Links between a user and one kind of target (category or contact).

    ``relation_cls`` is built as ``relation_cls(user_id, target_id)``.
    """

    repo: RelationRepository
    users: UserRepository
    relation_cls: type
    target: str

    def create(self, user_id: int, target_id: int) -> tuple[Any, bool]:
        """Link ``user_id`` to ``target_id``.

        Linking twice is not an error: the existing link comes back with
        ``False`` as the second element.
        """
        self._check_ids(user_id, target_id)
        try:
            created = self.repo.create(self.relation_cls(user_id, target_id))
        except DuplicateError:
            logger.info(f"{self.repo.entity}.create.exists", user_id=user_id, target_id=target_id)
            return self.repo.get(user_id, target_id), False
        logger.info(f"{self.repo.entity}.create.success", user_id=user_id, target_id=target_id)
        return created, True

    def list_by_user(self, user_id: int) -> list[Any]:
        ensure_positive_id(user_id, entity="user")
        if not self.users.exists(user_id):
            raise NotFoundError(f"user '{user_id}' not found")
        return list(self.repo.list_by_user(user_id))

    def exists(self, user_id: int, target_id: int) -> bool:
        self._check_ids(user_id, target_id)
        return self.repo.exists(user_id, target_id)

    def delete(self, user_id: int, target_id: int) -> None:
        self._check_ids(user_id, target_id)
        self.repo.delete(user_id, target_id)
        logger.info(f"{self.repo.entity}.delete", user_id=user_id, target_id=target_id)

    def delete_all(self, user_id: int) -> int:
        ensure_positive_id(user_id, entity="user")
        removed = self.repo.delete_all(user_id)
        logger.info(f"{self.repo.entity}.delete_all", user_id=user_id, removed=removed)
        return removed

    def _check_ids(self, user_id: int, target_id: int) -> None:
        ensure_positive_id(user_id, entity="user")
        ensure_positive_id(target_id, entity=self.target)
