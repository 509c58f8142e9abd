"""
MongoDB connection wrapper built on Motor.

Provides:
- Connection lifecycle (connect, ping, close)
- Access to the configured database
"""

from typing import Optional

from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.utils.config import get_settings


class MongoConnection:
    """Async MongoDB connection for one database."""

    def __init__(self, uri: str = None, db_name: str = None, timeout_ms: int = None):
        """Initialize connection parameters; nothing is opened until connect()."""
        settings = get_settings()
        self.uri = uri or settings.mongodb_uri
        self.db_name = db_name or settings.mongodb_db
        self.timeout_ms = timeout_ms or settings.mongodb_timeout_ms

        self._client: Optional[AsyncIOMotorClient] = None

    async def connect(self):
        """Open the client and verify the server answers a ping."""
        if not self.uri:
            raise ValueError("MongoDB URI not configured")

        if self._client is None:
            logger.info(f"Connecting to MongoDB database '{self.db_name}'...")
            client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
            try:
                await client.admin.command("ping")
            except Exception:
                client.close()
                raise
            self._client = client
            logger.success("Connected to MongoDB successfully")

    def close(self):
        """Close MongoDB connection."""
        if self._client is not None:
            logger.info("Closing MongoDB connection...")
            self._client.close()
            self._client = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """Get the configured database. Requires connect() first."""
        if self._client is None:
            raise RuntimeError("MongoDB connection is not open")
        return self._client[self.db_name]
