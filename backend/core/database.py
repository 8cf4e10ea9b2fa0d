"""Database connectivity layer for the employee directory."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from backend.core.config import Settings, settings
from backend.core.exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Lazily establishes the shared MongoDB connection.

    One client is created per process and reused by every request. Concurrent
    first callers wait on the same lock, so the connection (and the unique
    email index) is set up exactly once.
    """

    def __init__(self, config: Settings = settings) -> None:
        self.config = config
        self.mongodb: Optional[AsyncIOMotorClient] = None
        self._lock: Optional[asyncio.Lock] = None

    async def initialize(self) -> None:
        """Connect to MongoDB unless a connection is already established."""

        if self.mongodb is not None:
            return

        if self._lock is None:
            self._lock = asyncio.Lock()

        async with self._lock:
            if self.mongodb is not None:
                return

            logger.info("Connecting to MongoDB database %s", self.config.MONGODB_DATABASE)
            client = AsyncIOMotorClient(
                str(self.config.MONGODB_URL),
                serverSelectionTimeoutMS=self.config.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
                tz_aware=True,
            )
            try:
                await client.admin.command("ping")
            except PyMongoError as exc:
                client.close()
                logger.error("MongoDB connection error: %s", exc)
                raise StoreUnavailableError() from exc

            collection = client[self.config.MONGODB_DATABASE][self.config.MONGODB_COLLECTION]
            try:
                await collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
            except PyMongoError as exc:
                client.close()
                # Usually existing duplicate emails; retried on every request until cleaned up.
                logger.error(
                    "Could not build unique email index on %s.%s (duplicate emails already stored?): %s",
                    self.config.MONGODB_DATABASE,
                    self.config.MONGODB_COLLECTION,
                    exc,
                )
                raise StoreUnavailableError() from exc

            self.mongodb = client
            logger.info("Connected to MongoDB")

    async def employees(self) -> AsyncIOMotorCollection:
        """Return the employee collection, connecting first if needed."""

        await self.initialize()
        assert self.mongodb is not None
        return self.mongodb[self.config.MONGODB_DATABASE][self.config.MONGODB_COLLECTION]

    async def close(self) -> None:
        """Tear down the connection gracefully."""

        if self.mongodb is not None:
            logger.info("Closing MongoDB connection")
            self.mongodb.close()
            self.mongodb = None


# Singleton instance shared by the API and the CLI
database_manager = DatabaseManager()
