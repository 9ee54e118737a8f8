"""User category routes."""

from fastapi import APIRouter, Depends, Request, status

from .categories_schemas import CategoryPayload, CategoryResponse
from .categories_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


def get_category_service(request: Request) -> CategoryService:
    try:
        return request.app.state.category_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("CategoryService is not configured") from exc


@router.get("", response_model=list[CategoryResponse])
def list_categories(service: CategoryService = Depends(get_category_service)) -> list[CategoryResponse]:
    return [CategoryResponse.from_domain(category) for category in service.list_all()]


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryPayload, service: CategoryService = Depends(get_category_service)
) -> CategoryResponse:
    return CategoryResponse.from_domain(service.create(payload.to_domain()))


@router.get("/{category_id}", response_model=CategoryResponse)
def read_category(
    category_id: int, service: CategoryService = Depends(get_category_service)
) -> CategoryResponse:
    return CategoryResponse.from_domain(service.get(category_id))


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    payload: CategoryPayload,
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    return CategoryResponse.from_domain(service.update(payload.to_domain(category_id)))


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)) -> None:
    service.delete(category_id)
