"""Database models and transaction helpers."""

from .db_models import (
    AddressModel,
    Base,
    CategoryModel,
    ContactModel,
    UserCategoryRelationModel,
    UserContactRelationModel,
    UserModel,
)
from .transactions import SqlAlchemyTransaction, Transaction, TransactionCoordinator

__all__ = [
    "AddressModel",
    "Base",
    "CategoryModel",
    "ContactModel",
    "SqlAlchemyTransaction",
    "Transaction",
    "TransactionCoordinator",
    "UserCategoryRelationModel",
    "UserContactRelationModel",
    "UserModel",
]
