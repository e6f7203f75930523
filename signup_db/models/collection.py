"""
Declarative collection and index models.

Validators and partial filters are opaque documents handed to MongoDB as-is.
"""
from enum import Enum
from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ValidationLevel(str, Enum):
    """How strictly MongoDB applies a validator to writes."""
    OFF = "off"
    STRICT = "strict"
    MODERATE = "moderate"


class ValidationAction(str, Enum):
    """What MongoDB does with a write that fails validation."""
    ERROR = "error"
    WARN = "warn"


class CollectionSpec(BaseModel):
    """
    Desired state of one collection: its name and $jsonSchema validator.
    """
    name: str = Field(..., min_length=1, description="Collection name")
    validator: dict[str, Any] = Field(..., description="$jsonSchema document")
    validation_level: ValidationLevel = Field(
        default=ValidationLevel.MODERATE,
        description="Validation level (existing invalid documents stay writable under moderate)"
    )
    validation_action: ValidationAction = Field(
        default=ValidationAction.ERROR,
        description="Action on validation failure"
    )

    model_config = ConfigDict(use_enum_values=True)

    def validation_options(self) -> dict[str, Any]:
        """Options shared by create_collection and collMod."""
        return {
            "validator": {"$jsonSchema": self.validator},
            "validationLevel": self.validation_level,
            "validationAction": self.validation_action,
        }


class IndexSpec(BaseModel):
    """
    Desired index on a collection, identified by name.
    """
    key: list[tuple[str, Union[int, str]]] = Field(
        ...,
        min_length=1,
        description="Ordered (field, direction) pairs"
    )
    name: str = Field(..., min_length=1, description="Index name, unique per collection")
    unique: bool = Field(default=False, description="Enforce uniqueness")
    partial_filter_expression: Optional[dict[str, Any]] = Field(
        None,
        alias="partialFilterExpression",
        description="Restrict the index to matching documents"
    )

    model_config = ConfigDict(populate_by_name=True)

    def create_options(self) -> dict[str, Any]:
        """Keyword arguments for create_index."""
        options: dict[str, Any] = {"name": self.name}
        if self.unique:
            options["unique"] = True
        if self.partial_filter_expression is not None:
            options["partialFilterExpression"] = self.partial_filter_expression
        return options


class DatabaseManifest(BaseModel):
    """
    Everything one bootstrap run applies to a database.

    Collections are reconciled in list order, then indexes in mapping order,
    then the seed collection is filled if empty.
    """
    purpose: str = Field(..., description="What the database is for")
    collections: list[CollectionSpec] = Field(default=[], description="Collections to ensure")
    indexes: dict[str, list[IndexSpec]] = Field(
        default={},
        description="Index specs keyed by collection name"
    )
    seed_collection: Optional[str] = Field(None, description="Reference collection to seed")
    seed_records: Optional[Callable[[], list[dict[str, Any]]]] = Field(
        None,
        description="Builds the default records at seed time"
    )
