"""User routes: registration, lookup and maintenance."""

from fastapi import APIRouter, Depends, Query, Request, status

from .users_full_service import UserFullService
from .users_models import User
from .users_schemas import (
    CredentialsRequest,
    UserFullRequest,
    UserFullResponse,
    UserPayload,
    UserResponse,
    UserUpdateRequest,
    VersionResponse,
)
from .users_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(request: Request) -> UserService:
    try:
        return request.app.state.user_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("UserService is not configured") from exc


def get_user_full_service(request: Request) -> UserFullService:
    try:
        return request.app.state.user_full_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("UserFullService is not configured") from exc


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserPayload, service: UserService = Depends(get_user_service)) -> UserResponse:
    return UserResponse.from_domain(service.create(payload.to_domain()))


@router.get("", response_model=list[UserResponse])
def list_users(
    name: str | None = Query(default=None, description="Case-insensitive part of the username"),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    users = service.list_all() if name is None else service.search_by_name(name)
    return [UserResponse.from_domain(user) for user in users]


@router.post("/full", response_model=UserFullResponse, status_code=status.HTTP_201_CREATED)
def create_user_full(
    payload: UserFullRequest,
    service: UserFullService = Depends(get_user_full_service),
) -> UserFullResponse:
    created = service.create_full(payload.to_domain())
    return UserFullResponse.from_domain(created)


@router.get("/by-email", response_model=UserResponse)
def read_user_by_email(
    email: str = Query(...), service: UserService = Depends(get_user_service)
) -> UserResponse:
    return UserResponse.from_domain(service.get_by_email(email))


@router.post("/credentials", response_model=UserResponse)
def check_credentials(
    payload: CredentialsRequest, service: UserService = Depends(get_user_service)
) -> UserResponse:
    return UserResponse.from_domain(service.check_credentials(payload.email, payload.password))


@router.get("/{user_id}", response_model=UserResponse)
def read_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserResponse:
    return UserResponse.from_domain(service.get(user_id))


@router.get("/{user_id}/version", response_model=VersionResponse)
def read_user_version(user_id: int, service: UserService = Depends(get_user_service)) -> VersionResponse:
    return VersionResponse(id=user_id, version=service.get_version(user_id))


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    payload: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = User(
        id=user_id,
        username=payload.username,
        email=payload.email,
        description=payload.description,
        status=payload.status,
        version=payload.version,
    )
    return UserResponse.from_domain(service.update(user, new_password=payload.new_password))


@router.patch("/{user_id}/disable", response_model=UserResponse)
def disable_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserResponse:
    service.disable(user_id)
    return UserResponse.from_domain(service.get(user_id))


@router.patch("/{user_id}/enable", response_model=UserResponse)
def enable_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserResponse:
    service.enable(user_id)
    return UserResponse.from_domain(service.get(user_id))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    service.delete(user_id)
