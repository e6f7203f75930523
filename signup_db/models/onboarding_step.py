"""
Onboarding step model for the onboarding_steps reference collection.
"""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OnboardingStep(BaseModel):
    """
    Onboarding step document as stored in MongoDB.
    """
    key: str = Field(..., min_length=1, description="Unique step identifier")
    order: int = Field(..., ge=0, description="Display order for the step")
    title: str = Field(..., description="Step title")
    description: Optional[str] = Field(None, description="Step description")
    is_required: bool = Field(default=True, alias="isRequired", description="Step must be completed")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
        description="Creation timestamp"
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="updatedAt",
        description="Last update timestamp"
    )

    model_config = ConfigDict(populate_by_name=True)

    def to_document(self) -> dict:
        """Serialize with the camelCase field names the validator expects."""
        return self.model_dump(by_alias=True)
