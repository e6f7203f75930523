"""
Database module - MongoDB connection, reconciliation and database definitions.
"""
from signup_db.database.connections import (
    get_mongo_client,
    verify_connection,
    close_connections,
)
from signup_db.database.databases import onboarding_db
from signup_db.database.reconciler import ensure_collection, ensure_indexes, seed_if_empty
from signup_db.database.registry import reconcile

__all__ = [
    "get_mongo_client",
    "verify_connection",
    "close_connections",
    "onboarding_db",
    "ensure_collection",
    "ensure_indexes",
    "seed_if_empty",
    "reconcile",
]
