import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.utils.errors import StoreError

log = logging.getLogger(__name__)

CONTACTS_COLLECTION = "contacts"


class MongoStore:
    """Owns the Motor client for one database.

    Nothing touches the network until ``connect()`` is awaited. ``close()``
    releases the client and can be called more than once.
    """

    def __init__(self, connection_string: Optional[str], database_name: str = "contacts"):
        self.connection_string = connection_string
        self.database_name = database_name
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_connected(self) -> bool:
        return self.db is not None

    async def connect(self) -> AsyncIOMotorDatabase:
        if not self.connection_string:
            raise StoreError("CONNECTION_STRING is not set")

        try:
            self.client = AsyncIOMotorClient(self.connection_string, tz_aware=True)
            self.db = self.client.get_default_database(default=self.database_name)
            await self.client.admin.command("ping")
        except PyMongoError as e:
            self.close()
            raise StoreError(f"Could not connect to MongoDB: {e}") from e

        # address raises when load balancing across several mongos routers
        host = ", ".join(f"{h}:{p}" for h, p in sorted(self.client.nodes)) or "unknown"
        log.info("MongoDB Connected: %s, Database: %s", host, self.db.name)
        return self.db

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
            log.info("MongoDB connection closed")
        self.client = None
        self.db = None

    def get_contacts_collection(self) -> AsyncIOMotorCollection:
        if self.db is None:
            raise StoreError("Store is not connected")
        return self.db[CONTACTS_COLLECTION]
