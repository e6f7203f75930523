"""
Idempotent collection, index and seed reconciliation.

Every function re-reads live state from MongoDB and only creates what is
missing. Driver errors are wrapped in StoreError and never retried.
"""
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Sequence

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from signup_db.core.exceptions import StoreError
from signup_db.models.collection import CollectionSpec, IndexSpec
from signup_db.schemas.reconciliation import (
    ActionStatus,
    CollectionOutcome,
    IndexOutcome,
    SeedOutcome,
)

logger = logging.getLogger(__name__)


@contextmanager
def store_operation(operation: str, collection: str | None = None) -> Iterator[None]:
    """Translate driver failures inside the block into StoreError."""
    try:
        yield
    except PyMongoError as e:
        raise StoreError(operation, collection, cause=e) from e


async def ensure_collection(db: AsyncIOMotorDatabase, spec: CollectionSpec) -> CollectionOutcome:
    """
    Ensure a collection exists and carries the requested validator.

    Creates the collection when absent, otherwise re-applies the validator
    in place with collMod. Existing documents are never re-validated.

    Raises:
        StoreError: If listing, creating or modifying the collection fails
    """
    with store_operation("listCollections"):
        existing = await db.list_collection_names()

    options = spec.validation_options()

    if spec.name not in existing:
        with store_operation("create", spec.name):
            await db.create_collection(spec.name, **options)
        logger.info(f"✓ Created collection '{spec.name}' with schema validation")
        return CollectionOutcome(collection=spec.name, status=ActionStatus.CREATED)

    with store_operation("collMod", spec.name):
        await db.command({"collMod": spec.name, **options})
    logger.info(f"✓ Updated validator for existing collection '{spec.name}'")
    return CollectionOutcome(collection=spec.name, status=ActionStatus.UPDATED)


async def ensure_indexes(
    db: AsyncIOMotorDatabase,
    collection_name: str,
    specs: Sequence[IndexSpec],
) -> list[IndexOutcome]:
    """
    Ensure every index in ``specs`` exists on the collection, by name.

    An index whose name already exists is left alone even if its key,
    uniqueness or filter differ from the request. Changing a definition means
    dropping the index first.

    Raises:
        StoreError: If listing or building an index fails (e.g. a unique
            index over data that already holds duplicates)
    """
    collection = db[collection_name]

    with store_operation("listIndexes", collection_name):
        existing = set((await collection.index_information()).keys())

    outcomes: list[IndexOutcome] = []
    for spec in specs:
        if spec.name in existing:
            logger.info(f"• Index '{spec.name}' already exists on '{collection_name}'")
            outcomes.append(IndexOutcome(
                collection=collection_name,
                index_name=spec.name,
                status=ActionStatus.ALREADY_EXISTS,
            ))
            continue

        with store_operation("createIndexes", collection_name):
            await collection.create_index(spec.key, **spec.create_options())
        logger.info(f"✓ Created index '{spec.name}' on collection '{collection_name}'")
        outcomes.append(IndexOutcome(
            collection=collection_name,
            index_name=spec.name,
            status=ActionStatus.CREATED,
        ))

    return outcomes


async def seed_if_empty(
    db: AsyncIOMotorDatabase,
    collection_name: str,
    records: Sequence[dict[str, Any]],
) -> SeedOutcome:
    """
    Insert ``records`` in order, but only into an empty collection.

    The guard is the collection's estimated count, not per-record identity:
    any existing document, related or not, skips the whole seed.

    Raises:
        StoreError: If counting or inserting fails. Records inserted before
            the failure are left in place.
    """
    collection = db[collection_name]

    with store_operation("count", collection_name):
        existing_count = await collection.estimated_document_count()

    if existing_count > 0:
        logger.info(f"• {collection_name} already contains {existing_count} documents")
        return SeedOutcome.skipped_non_empty(collection_name, existing_count)

    # insert_many assigns _id in place; keep the caller's records untouched
    documents = [dict(record) for record in records]
    if documents:
        with store_operation("insert", collection_name):
            await collection.insert_many(documents, ordered=True)

    logger.info(f"✓ Seeded {collection_name} with {len(documents)} default records")
    return SeedOutcome.seeded(collection_name, len(documents))
