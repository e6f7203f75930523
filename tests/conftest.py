"""
Global test fixtures for the signup database bootstrap.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- A database wrapper that records collection validators
- Settings isolation (no env files, no cached settings)
"""

from typing import Any

import pytest
import pytest_asyncio
from pymongo.errors import OperationFailure

from signup_db.config import get_settings


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

class ValidatorRecordingDatabase:
    """
    Mock database that accepts collection validators.

    mongomock refuses create_collection options and has no collMod, so those
    two calls are recorded here. Indexes, documents and counts all go to the
    wrapped mongomock-motor database.
    """

    def __init__(self, db, name: str):
        self._db = db
        self.name = name
        self.validators: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, str]] = []
        self.failures: dict[str, Exception] = {}

    def __getitem__(self, name: str):
        return self._db[name]

    def calls_to(self, operation: str) -> list[tuple[str, str]]:
        return [c for c in self.calls if c[0] == operation]

    def fail(self, operation: str, error: Exception):
        self.failures[operation] = error

    async def list_collection_names(self) -> list[str]:
        return await self._db.list_collection_names()

    async def create_collection(self, name: str, **kwargs):
        self.calls.append(("create_collection", name))
        if "create_collection" in self.failures:
            raise self.failures["create_collection"]
        await self._db.create_collection(name)
        self.validators[name] = kwargs
        return self._db[name]

    async def command(self, command, **kwargs):
        name = command["collMod"]
        self.calls.append(("collMod", name))
        if "collMod" in self.failures:
            raise self.failures["collMod"]
        if name not in await self._db.list_collection_names():
            raise OperationFailure("ns does not exist", code=26)
        self.validators[name] = {k: v for k, v in command.items() if k != "collMod"}
        return {"ok": 1.0}


@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_signup_db(mock_async_mongo_client):
    """Provide an empty mock signup database that records validators."""
    yield ValidatorRecordingDatabase(mock_async_mongo_client["signup_test"], "signup_test")


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def clean_settings(monkeypatch, tmp_path):
    """
    Run with no MongoDB environment variables and no env files on disk.

    The settings cache is cleared before and after so each test reads
    its own environment.
    """
    for var in ("MONGODB_URL", "MONGODB_DB", "LOG_LEVEL", "SERVER_SELECTION_TIMEOUT_MS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
