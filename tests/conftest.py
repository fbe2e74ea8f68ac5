import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from app.config import Settings
from main import create_app


class InsertOneResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCursor:
    def __init__(self, docs):
        self._docs = iter(docs)

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            return next(self._docs)
        except StopIteration:
            raise StopAsyncIteration


class FakeCollection:
    """In-memory stand-in for the handful of Motor collection calls ContactService makes."""

    def __init__(self):
        self.docs = {}

    def find(self, filter=None):
        return FakeCursor([copy.deepcopy(doc) for doc in self.docs.values()])

    async def insert_one(self, doc):
        oid = ObjectId()
        self.docs[oid] = {**copy.deepcopy(doc), "_id": oid}
        return InsertOneResult(oid)

    async def find_one(self, filter):
        doc = self.docs.get(filter["_id"])
        return copy.deepcopy(doc) if doc else None

    async def find_one_and_update(self, filter, update, return_document=ReturnDocument.BEFORE):
        doc = self.docs.get(filter["_id"])
        if doc is None:
            return None
        before = copy.deepcopy(doc)
        doc.update(update["$set"])
        return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before

    async def find_one_and_delete(self, filter):
        return self.docs.pop(filter["_id"], None)


class BrokenCollection:
    def find(self, filter=None):
        raise PyMongoError("connection reset")

    async def insert_one(self, doc):
        raise PyMongoError("connection reset")

    async def find_one(self, filter):
        raise PyMongoError("connection reset")

    async def find_one_and_update(self, filter, update, return_document=None):
        raise PyMongoError("connection reset")

    async def find_one_and_delete(self, filter):
        raise PyMongoError("connection reset")


class FakeStore:
    def __init__(self, collection=None):
        self.collection = collection or FakeCollection()
        self.connected = False
        self.closed = False

    async def connect(self):
        self.connected = True

    def close(self):
        self.closed = True

    def get_contacts_collection(self):
        return self.collection


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def store(collection):
    return FakeStore(collection)


@pytest.fixture
def app(store):
    return create_app(settings=Settings(), store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def john():
    return {"name": "John Doe", "email": "john@example.com", "phone": "+1234567890"}
