"""Routes linking a user to categories and contacts."""

from fastapi import APIRouter, Depends, Request, Response, status

from .relations_schemas import (
    DeletedResponse,
    ExistsResponse,
    UserCategoryRelationResponse,
    UserContactRelationResponse,
)
from .relations_service import UserRelationService

router = APIRouter(prefix="/users/{user_id}", tags=["user links"])


def get_user_category_service(request: Request) -> UserRelationService:
    try:
        return request.app.state.user_category_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("user category links are not configured") from exc


def get_user_contact_service(request: Request) -> UserRelationService:
    try:
        return request.app.state.user_contact_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("user contact links are not configured") from exc


@router.get("/categories", response_model=list[UserCategoryRelationResponse])
def list_user_categories(
    user_id: int, service: UserRelationService = Depends(get_user_category_service)
) -> list[UserCategoryRelationResponse]:
    return [UserCategoryRelationResponse.from_domain(r) for r in service.list_by_user(user_id)]


@router.post("/categories/{category_id}", response_model=UserCategoryRelationResponse)
def link_user_category(
    user_id: int,
    category_id: int,
    response: Response,
    service: UserRelationService = Depends(get_user_category_service),
) -> UserCategoryRelationResponse:
    relation, created = service.create(user_id, category_id)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return UserCategoryRelationResponse.from_domain(relation)


@router.get("/categories/{category_id}/exists", response_model=ExistsResponse)
def user_category_exists(
    user_id: int,
    category_id: int,
    service: UserRelationService = Depends(get_user_category_service),
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists(user_id, category_id))


@router.delete("/categories/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def unlink_user_category(
    user_id: int,
    category_id: int,
    service: UserRelationService = Depends(get_user_category_service),
) -> None:
    service.delete(user_id, category_id)


@router.delete("/categories", response_model=DeletedResponse)
def unlink_all_user_categories(
    user_id: int, service: UserRelationService = Depends(get_user_category_service)
) -> DeletedResponse:
    return DeletedResponse(deleted=service.delete_all(user_id))


@router.get("/contacts", response_model=list[UserContactRelationResponse])
def list_user_contacts(
    user_id: int, service: UserRelationService = Depends(get_user_contact_service)
) -> list[UserContactRelationResponse]:
    return [UserContactRelationResponse.from_domain(r) for r in service.list_by_user(user_id)]


@router.post("/contacts/{contact_id}", response_model=UserContactRelationResponse)
def link_user_contact(
    user_id: int,
    contact_id: int,
    response: Response,
    service: UserRelationService = Depends(get_user_contact_service),
) -> UserContactRelationResponse:
    relation, created = service.create(user_id, contact_id)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return UserContactRelationResponse.from_domain(relation)


@router.get("/contacts/{contact_id}/exists", response_model=ExistsResponse)
def user_contact_exists(
    user_id: int,
    contact_id: int,
    service: UserRelationService = Depends(get_user_contact_service),
) -> ExistsResponse:
    return ExistsResponse(exists=service.exists(user_id, contact_id))


@router.delete("/contacts/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def unlink_user_contact(
    user_id: int,
    contact_id: int,
    service: UserRelationService = Depends(get_user_contact_service),
) -> None:
    service.delete(user_id, contact_id)


@router.delete("/contacts", response_model=DeletedResponse)
def unlink_all_user_contacts(
    user_id: int, service: UserRelationService = Depends(get_user_contact_service)
) -> DeletedResponse:
    return DeletedResponse(deleted=service.delete_all(user_id))
