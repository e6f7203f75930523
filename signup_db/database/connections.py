"""
Database connection management for MongoDB.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import ConfigurationError, PyMongoError

from signup_db.config import get_settings
from signup_db.core.exceptions import ConfigError, StoreError

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client(url: Optional[str] = None) -> AsyncIOMotorClient:
    """
    Get or create MongoDB client.

    Raises:
        ConfigError: If no URL is available or the URL is malformed
    """
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        url = url or settings.mongodb_url
        if not url:
            raise ConfigError("Missing environment variables. Ensure MONGODB_URL and MONGODB_DB are set.")
        try:
            _mongo_client = AsyncIOMotorClient(
                url,
                serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
            )
        except ConfigurationError as e:
            raise ConfigError("Invalid MongoDB connection URL", cause=e) from e
    return _mongo_client


async def verify_connection(client: AsyncIOMotorClient) -> None:
    """Ping the server so auth and reachability problems surface before any change."""
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        raise StoreError("ping", cause=e) from e


async def close_connections():
    """Close the MongoDB connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
