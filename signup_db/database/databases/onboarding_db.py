"""
Onboarding database configuration.
Stores user accounts and the step-wise onboarding reference data.

Structure:
- users: Accounts with credentials, OAuth identity and onboarding progress
- onboarding_steps: Ordered step definitions shown during onboarding (seeded)
"""
from datetime import datetime, timezone
from typing import Any

from signup_db.models.collection import CollectionSpec, DatabaseManifest, IndexSpec
from signup_db.models.onboarding_step import OnboardingStep


class Collections:
    """Collection names in the onboarding database."""
    USERS = "users"
    ONBOARDING_STEPS = "onboarding_steps"


USERS_SCHEMA: dict[str, Any] = {
    "bsonType": "object",
    "required": ["email", "passwordHash", "onboarding"],
    "additionalProperties": True,
    "properties": {
        "_id": {"bsonType": ["objectId"]},
        "email": {
            "bsonType": "string",
            "description": "User's email; unique, lowercased",
        },
        "username": {
            "bsonType": ["string", "null"],
            "description": "Optional username; unique if present",
        },
        "passwordHash": {
            "bsonType": ["string", "null"],
            "description": "BCrypt/Argon2 hashed password; null when OAuth-only",
        },
        "oauthProvider": {
            "bsonType": ["string", "null"],
            "enum": [None, "google", "apple"],
            "description": "OAuth provider name if used",
        },
        "oauthProviderId": {
            "bsonType": ["string", "null"],
            "description": "Provider's unique user ID if OAuth used",
        },
        "emailVerified": {
            "bsonType": "bool",
            "description": "Has the user verified their email",
        },
        "onboarding": {
            "bsonType": "object",
            "required": ["currentStep", "completedSteps"],
            "properties": {
                "currentStep": {
                    "bsonType": "int",
                    "minimum": 0,
                    "description": "Current onboarding step index",
                },
                "completedSteps": {
                    "bsonType": "array",
                    "items": {"bsonType": "string"},
                    "description": "List of completed step identifiers",
                },
                "startedAt": {"bsonType": ["date", "null"]},
                "completedAt": {"bsonType": ["date", "null"]},
            },
        },
        "createdAt": {"bsonType": "date"},
        "updatedAt": {"bsonType": "date"},
        "lastLoginAt": {"bsonType": ["date", "null"]},
        # Optional profile fields captured during onboarding
        "profile": {
            "bsonType": ["object", "null"],
            "additionalProperties": True,
            "properties": {
                "firstName": {"bsonType": ["string", "null"]},
                "lastName": {"bsonType": ["string", "null"]},
                "country": {"bsonType": ["string", "null"]},
                "timezone": {"bsonType": ["string", "null"]},
                "marketingOptIn": {"bsonType": ["bool", "null"]},
            },
        },
    },
}


ONBOARDING_STEPS_SCHEMA: dict[str, Any] = {
    "bsonType": "object",
    "required": ["key", "order", "title"],
    "additionalProperties": True,
    "properties": {
        "_id": {"bsonType": ["objectId"]},
        "key": {
            "bsonType": "string",
            "description": "Unique step identifier (e.g., 'account', 'profile', 'preferences')",
        },
        "order": {
            "bsonType": "int",
            "minimum": 0,
            "description": "Display order for the step",
        },
        "title": {"bsonType": "string"},
        "description": {"bsonType": ["string", "null"]},
        "isRequired": {"bsonType": "bool"},
        "createdAt": {"bsonType": "date"},
        "updatedAt": {"bsonType": "date"},
    },
}


# Index definitions for each collection
INDEXES: dict[str, list[IndexSpec]] = {
    Collections.USERS: [
        IndexSpec(key=[("email", 1)], name="uniq_email", unique=True),
        IndexSpec(
            key=[("username", 1)],
            name="uniq_username",
            unique=True,
            partial_filter_expression={"username": {"$type": "string"}},
        ),
        IndexSpec(
            key=[("oauthProvider", 1), ("oauthProviderId", 1)],
            name="oauth_provider_id",
            unique=True,
            partial_filter_expression={
                "oauthProvider": {"$type": "string"},
                "oauthProviderId": {"$type": "string"},
            },
        ),
        IndexSpec(key=[("onboarding.currentStep", 1)], name="onboarding_currentStep"),
        IndexSpec(key=[("createdAt", -1)], name="createdAt_desc"),
        IndexSpec(key=[("updatedAt", -1)], name="updatedAt_desc"),
    ],
    Collections.ONBOARDING_STEPS: [
        IndexSpec(key=[("key", 1)], name="uniq_key", unique=True),
        IndexSpec(key=[("order", 1)], name="order_asc"),
    ],
}


def default_onboarding_steps() -> list[dict[str, Any]]:
    """Build the default onboarding steps, all stamped with the same timestamp."""
    now = datetime.now(timezone.utc)
    steps = [
        OnboardingStep(
            key="account",
            order=0,
            title="Create Account",
            description="Set your email and password or use an OAuth provider.",
            is_required=True,
        ),
        OnboardingStep(
            key="profile",
            order=1,
            title="Complete Profile",
            description="Tell us about yourself to personalize your experience.",
            is_required=True,
        ),
        OnboardingStep(
            key="preferences",
            order=2,
            title="Preferences",
            description="Choose your interests and notification settings.",
            is_required=False,
        ),
        OnboardingStep(
            key="summary",
            order=3,
            title="Summary",
            description="Review and confirm your details.",
            is_required=True,
        ),
    ]
    return [
        step.model_copy(update={"created_at": now, "updated_at": now}).to_document()
        for step in steps
    ]


# Manifest for the bootstrap run
DB_MANIFEST = DatabaseManifest(
    purpose="User accounts and step-wise onboarding",
    collections=[
        CollectionSpec(name=Collections.USERS, validator=USERS_SCHEMA),
        CollectionSpec(name=Collections.ONBOARDING_STEPS, validator=ONBOARDING_STEPS_SCHEMA),
    ],
    indexes=INDEXES,
    seed_collection=Collections.ONBOARDING_STEPS,
    seed_records=default_onboarding_steps,
)
