from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from app.models.contact import (
    ContactCreate,
    ContactListResponse,
    ContactResponse,
    ContactUpdate,
    MessageResponse,
)
from app.services.contact_service import ContactService

router = APIRouter(prefix="/api/contacts", tags=["Contacts"])

ERROR_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse, "description": "Contact not found"},
}


def get_contact_service(request: Request) -> ContactService:
    store = request.app.state.store
    return ContactService(store.get_contacts_collection())


# ✅ Get all contacts
@router.get("", response_model=ContactListResponse, summary="Get all contacts")
async def get_contacts(service: ContactService = Depends(get_contact_service)):
    contacts = await service.list_contacts()
    return {"contacts": contacts}


# ✅ Create a contact
@router.post(
    "",
    response_model=ContactResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new contact",
    responses={status.HTTP_400_BAD_REQUEST: {"model": MessageResponse, "description": "All fields are mandatory!"}},
)
async def create_contact(payload: Optional[ContactCreate] = None, service: ContactService = Depends(get_contact_service)):
    contact = await service.create_contact(payload or ContactCreate())
    return {"contact": contact}


# ✅ Get a contact by id
@router.get("/{contact_id}", response_model=ContactResponse, summary="Get a contact by ID", responses=ERROR_RESPONSES)
async def get_contact(contact_id: str, service: ContactService = Depends(get_contact_service)):
    contact = await service.get_contact(contact_id)
    return {"contact": contact}


# ✅ Update a contact
@router.put(
    "/{contact_id}",
    response_model=ContactResponse,
    summary="Update a contact",
    responses={
        **ERROR_RESPONSES,
        status.HTTP_400_BAD_REQUEST: {"model": MessageResponse, "description": "All fields are mandatory!"},
    },
)
async def update_contact(contact_id: str, changes: Optional[ContactUpdate] = None, service: ContactService = Depends(get_contact_service)):
    contact = await service.update_contact(contact_id, changes or ContactUpdate())
    return {"contact": contact}


# ✅ Delete a contact
@router.delete("/{contact_id}", response_model=MessageResponse, summary="Delete a contact", responses=ERROR_RESPONSES)
async def delete_contact(contact_id: str, service: ContactService = Depends(get_contact_service)):
    await service.delete_contact(contact_id)
    return {"message": "Contact deleted successfully"}
