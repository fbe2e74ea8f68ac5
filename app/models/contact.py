from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.utils.errors import ValidationError

REQUIRED_FIELDS = ("name", "email", "phone")
MISSING_FIELDS_MESSAGE = "All fields are mandatory!"


class ContactCreate(BaseModel):
    # Fields are optional here so a missing one yields our own 400, not a 422.
    model_config = ConfigDict(json_schema_extra={
        "example": {"name": "John Doe", "email": "john.doe@example.com", "phone": "+1234567890"}
    })

    name: Optional[str] = Field(default=None, description="The contact's full name")
    email: Optional[str] = Field(default=None, description="The contact's email address")
    phone: Optional[str] = Field(default=None, description="The contact's phone number")


class ContactUpdate(ContactCreate):
    model_config = ConfigDict(json_schema_extra={
        "example": {"name": "John Smith", "email": "john.smith@example.com", "phone": "+9876543210"}
    })


class Contact(BaseModel):
    id: str = Field(description="The auto-generated id of the contact")
    name: str
    email: str
    phone: str
    createdAt: datetime
    updatedAt: datetime

    @classmethod
    def from_document(cls, doc: dict) -> "Contact":
        return cls(
            id=str(doc["_id"]),
            name=doc["name"],
            email=doc["email"],
            phone=doc["phone"],
            createdAt=doc["createdAt"],
            updatedAt=doc["updatedAt"],
        )


class ContactResponse(BaseModel):
    contact: Contact


class ContactListResponse(BaseModel):
    contacts: List[Contact]


class MessageResponse(BaseModel):
    message: str


def validate_contact_fields(fields: dict) -> None:
    """Raise ValidationError unless name, email and phone are all non-empty strings."""
    for key in REQUIRED_FIELDS:
        value = fields.get(key)
        if not isinstance(value, str) or not value:
            raise ValidationError(MISSING_FIELDS_MESSAGE)
