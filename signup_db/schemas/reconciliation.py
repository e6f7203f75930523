"""
Reconciliation outcome schemas.
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ActionStatus(str, Enum):
    """What a reconciliation step did."""
    CREATED = "created"
    UPDATED = "updated"
    ALREADY_EXISTS = "already_exists"
    SEEDED = "seeded"
    SKIPPED = "skipped"


class CollectionOutcome(BaseModel):
    """Result of ensuring one collection."""
    collection: str = Field(..., description="Collection name")
    status: ActionStatus = Field(..., description="created or updated")


class IndexOutcome(BaseModel):
    """Result of ensuring one index."""
    collection: str = Field(..., description="Collection name")
    index_name: str = Field(..., description="Index name")
    status: ActionStatus = Field(..., description="created or already_exists")


class SeedOutcome(BaseModel):
    """
    Result of seeding a reference collection.

    ``count`` is the number of inserted records when seeded, or the number of
    documents already present when skipped.
    """
    collection: str = Field(..., description="Collection name")
    status: ActionStatus = Field(..., description="seeded or skipped")
    count: int = Field(..., ge=0, description="Inserted or existing document count")

    @classmethod
    def seeded(cls, collection: str, count: int) -> "SeedOutcome":
        return cls(collection=collection, status=ActionStatus.SEEDED, count=count)

    @classmethod
    def skipped_non_empty(cls, collection: str, existing_count: int) -> "SeedOutcome":
        return cls(collection=collection, status=ActionStatus.SKIPPED, count=existing_count)

    @property
    def was_seeded(self) -> bool:
        return self.status == ActionStatus.SEEDED


class ReconciliationReport(BaseModel):
    """Everything one bootstrap run did, in execution order."""
    database: str = Field(..., description="Target database name")
    collections: list[CollectionOutcome] = Field(default=[], description="Collection outcomes")
    indexes: list[IndexOutcome] = Field(default=[], description="Index outcomes")
    seed: Optional[SeedOutcome] = Field(None, description="Seed outcome, if a seed collection is configured")

    @property
    def created_collections(self) -> list[str]:
        return [o.collection for o in self.collections if o.status == ActionStatus.CREATED]

    @property
    def created_indexes(self) -> list[str]:
        return [o.index_name for o in self.indexes if o.status == ActionStatus.CREATED]
