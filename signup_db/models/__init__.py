"""
Models - declarative database specs and stored document shapes.
"""
from signup_db.models.collection import (
    CollectionSpec,
    DatabaseManifest,
    IndexSpec,
    ValidationAction,
    ValidationLevel,
)
from signup_db.models.onboarding_step import OnboardingStep

__all__ = [
    "CollectionSpec",
    "DatabaseManifest",
    "IndexSpec",
    "ValidationAction",
    "ValidationLevel",
    "OnboardingStep",
]
