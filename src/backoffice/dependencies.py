"""Dependency wiring helpers."""

from fastapi import FastAPI

from .addresses.addresses_api import router as addresses_router
from .addresses.addresses_repository import AddressRepository
from .addresses.addresses_service import AddressService
from .categories.categories_api import router as categories_router
from .categories.categories_repository import CategoryRepository
from .categories.categories_service import CategoryService
from .config import AppConfig
from .contacts.contacts_api import router as contacts_router
from .contacts.contacts_repository import ContactRepository
from .contacts.contacts_service import ContactService
from .relations.relations_api import router as relations_router
from .relations.relations_models import UserCategoryRelation, UserContactRelation
from .relations.relations_repository import (
    UserCategoryRelationRepository,
    UserContactRelationRepository,
)
from .relations.relations_service import UserRelationService
from .security.passwords import Pbkdf2PasswordHasher
from .users.users_api import router as users_router
from .users.users_full_service import UserFullService
from .users.users_repository import UserRepository
from .users.users_service import UserService


def include_routers(app: FastAPI, config: AppConfig) -> None:
    """Mount module routers and attach services."""
    hasher = Pbkdf2PasswordHasher(iterations=config.password_hash_iterations)
    user_repo = UserRepository(config.session_factory)
    address_repo = AddressRepository(config.session_factory)
    contact_repo = ContactRepository(config.session_factory)
    user_category_repo = UserCategoryRelationRepository(config.session_factory)
    user_contact_repo = UserContactRelationRepository(config.session_factory)

    user_full_service = UserFullService(
        coordinator=user_repo,
        users=user_repo,
        addresses=address_repo,
        contacts=contact_repo,
        user_categories=user_category_repo,
        user_contacts=user_contact_repo,
        hasher=hasher,
    )

    app.state.user_service = UserService(repo=user_repo, hasher=hasher)
    app.state.user_full_service = user_full_service
    app.state.address_service = AddressService(repo=address_repo)
    app.state.contact_service = ContactService(repo=contact_repo)
    app.state.category_service = CategoryService(repo=CategoryRepository(config.session_factory))
    app.state.user_category_service = UserRelationService(
        repo=user_category_repo,
        users=user_repo,
        relation_cls=UserCategoryRelation,
        target="category",
    )
    app.state.user_contact_service = UserRelationService(
        repo=user_contact_repo,
        users=user_repo,
        relation_cls=UserContactRelation,
        target="contact",
    )

    app.include_router(users_router)
    app.include_router(relations_router)
    app.include_router(addresses_router)
    app.include_router(contacts_router)
    app.include_router(categories_router)
