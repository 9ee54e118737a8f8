"""Contact routes."""

from fastapi import APIRouter, Depends, Request, status

from ..domain.owner import OwnerRef
from .contacts_schemas import ContactPayload, ContactResponse, ContactUpdateRequest
from .contacts_service import ContactService

router = APIRouter(prefix="/contacts", tags=["contacts"])


def get_contact_service(request: Request) -> ContactService:
    try:
        return request.app.state.contact_service  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - wiring error
        raise RuntimeError("ContactService is not configured") from exc


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
def create_contact(
    payload: ContactPayload,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    return ContactResponse.from_domain(service.create(payload.to_domain()))


@router.get("", response_model=list[ContactResponse])
def list_contacts(
    user_id: int | None = None,
    client_id: int | None = None,
    supplier_id: int | None = None,
    service: ContactService = Depends(get_contact_service),
) -> list[ContactResponse]:
    owner = OwnerRef.from_columns(user_id, client_id, supplier_id)
    return [ContactResponse.from_domain(item) for item in service.list_by_owner(owner)]


@router.get("/{contact_id}", response_model=ContactResponse)
def read_contact(
    contact_id: int, service: ContactService = Depends(get_contact_service)
) -> ContactResponse:
    return ContactResponse.from_domain(service.get(contact_id))


@router.put("/{contact_id}", response_model=ContactResponse)
def update_contact(
    contact_id: int,
    payload: ContactUpdateRequest,
    service: ContactService = Depends(get_contact_service),
) -> ContactResponse:
    contact = payload.to_domain(id=contact_id, version=payload.version, is_active=payload.is_active)
    return ContactResponse.from_domain(service.update(contact))


@router.patch("/{contact_id}/disable", response_model=ContactResponse)
def disable_contact(
    contact_id: int, service: ContactService = Depends(get_contact_service)
) -> ContactResponse:
    service.disable(contact_id)
    return ContactResponse.from_domain(service.get(contact_id))


@router.patch("/{contact_id}/enable", response_model=ContactResponse)
def enable_contact(
    contact_id: int, service: ContactService = Depends(get_contact_service)
) -> ContactResponse:
    service.enable(contact_id)
    return ContactResponse.from_domain(service.get(contact_id))


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(contact_id: int, service: ContactService = Depends(get_contact_service)) -> None:
    service.delete(contact_id)
