"""Pydantic schemas for the user link routes."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from .relations_models import UserCategoryRelation, UserContactRelation


class UserCategoryRelationResponse(BaseModel):
    user_id: int
    category_id: int
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, relation: UserCategoryRelation) -> "UserCategoryRelationResponse":
        return cls(
            user_id=relation.user_id,
            category_id=relation.category_id,
            created_at=relation.created_at,
        )


class UserContactRelationResponse(BaseModel):
    user_id: int
    contact_id: int
    created_at: datetime | None = None

    @classmethod
    def from_domain(cls, relation: UserContactRelation) -> "UserContactRelationResponse":
        return cls(
            user_id=relation.user_id,
            contact_id=relation.contact_id,
            created_at=relation.created_at,
        )


class ExistsResponse(BaseModel):
    exists: bool


class DeletedResponse(BaseModel):
    deleted: int
