"""Address routes."""

from fastapi import APIRouter, Depends, Request, status

from ..domain.owner import OwnerRef
from .addresses_schemas import AddressPayload, AddressResponse, AddressUpdateRequest
from .addresses_service import AddressService

router = APIRouter(prefix="/addresses", tags=["addresses"])


def get_address_service(request: Request) -> AddressService:
    try:
        return request.app.state.address_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("AddressService is not configured") from exc


@router.post("", response_model=AddressResponse, status_code=status.HTTP_201_CREATED)
def create_address(
    payload: AddressPayload,
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    return AddressResponse.from_domain(service.create(payload.to_domain()))


@router.get("", response_model=list[AddressResponse])
def list_addresses(
    user_id: int | None = None,
    client_id: int | None = None,
    supplier_id: int | None = None,
    service: AddressService = Depends(get_address_service),
) -> list[AddressResponse]:
    owner = OwnerRef.from_columns(user_id, client_id, supplier_id)
    return [AddressResponse.from_domain(item) for item in service.list_by_owner(owner)]


@router.get("/{address_id}", response_model=AddressResponse)
def read_address(
    address_id: int, service: AddressService = Depends(get_address_service)
) -> AddressResponse:
    return AddressResponse.from_domain(service.get(address_id))


@router.put("/{address_id}", response_model=AddressResponse)
def update_address(
    address_id: int,
    payload: AddressUpdateRequest,
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    address = payload.to_domain(id=address_id, version=payload.version, is_active=payload.is_active)
    return AddressResponse.from_domain(service.update(address))


@router.patch("/{address_id}/disable", response_model=AddressResponse)
def disable_address(
    address_id: int, service: AddressService = Depends(get_address_service)
) -> AddressResponse:
    service.disable(address_id)
    return AddressResponse.from_domain(service.get(address_id))


@router.patch("/{address_id}/enable", response_model=AddressResponse)
def enable_address(
    address_id: int, service: AddressService = Depends(get_address_service)
) -> AddressResponse:
    service.enable(address_id)
    return AddressResponse.from_domain(service.get(address_id))


@router.delete("/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_address(address_id: int, service: AddressService = Depends(get_address_service)) -> None:
    service.delete(address_id)
