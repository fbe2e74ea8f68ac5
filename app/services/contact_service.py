import logging
from datetime import datetime, timezone
from typing import List

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.models.contact import Contact, ContactCreate, ContactUpdate, validate_contact_fields
from app.utils.errors import NotFoundError, StoreError

log = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Contact not found"


def utcnow() -> datetime:
    # BSON dates keep milliseconds only
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_object_id(contact_id: str) -> ObjectId:
    try:
        return ObjectId(contact_id)
    except (InvalidId, TypeError):
        raise NotFoundError(NOT_FOUND_MESSAGE)


class ContactService:
    """CRUD operations over the contacts collection."""

    def __init__(self, collection):
        self.collection = collection

    async def list_contacts(self) -> List[Contact]:
        contacts = []
        try:
            async for doc in self.collection.find():
                contacts.append(Contact.from_document(doc))
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        return contacts

    async def create_contact(self, payload: ContactCreate) -> Contact:
        log.debug("Create contact request body: %s", payload.model_dump())
        fields = payload.model_dump(include={"name", "email", "phone"})
        validate_contact_fields(fields)

        now = utcnow()
        doc = {**fields, "createdAt": now, "updatedAt": now}
        try:
            result = await self.collection.insert_one(doc)
        except PyMongoError as e:
            raise StoreError(str(e)) from e

        doc["_id"] = result.inserted_id
        log.info("Created contact %s", result.inserted_id)
        return Contact.from_document(doc)

    async def get_contact(self, contact_id: str) -> Contact:
        doc = await self._find(parse_object_id(contact_id))
        return Contact.from_document(doc)

    async def update_contact(self, contact_id: str, changes: ContactUpdate) -> Contact:
        oid = parse_object_id(contact_id)
        existing = await self._find(oid)

        updates = changes.model_dump(include={"name", "email", "phone"}, exclude_unset=True)
        validate_contact_fields({**existing, **updates})

        try:
            doc = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": {**updates, "updatedAt": utcnow()}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise StoreError(str(e)) from e

        if doc is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        log.info("Updated contact %s", contact_id)
        return Contact.from_document(doc)

    async def delete_contact(self, contact_id: str) -> Contact:
        oid = parse_object_id(contact_id)
        try:
            doc = await self.collection.find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            raise StoreError(str(e)) from e

        if doc is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        log.info("Deleted contact %s", contact_id)
        return Contact.from_document(doc)

    async def _find(self, oid: ObjectId) -> dict:
        try:
            doc = await self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            raise StoreError(str(e)) from e
        if doc is None:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return doc
