"""
Schemas - outcomes reported by a reconciliation run.
"""
from signup_db.schemas.reconciliation import (
    ActionStatus,
    CollectionOutcome,
    IndexOutcome,
    ReconciliationReport,
    SeedOutcome,
)

__all__ = [
    "ActionStatus",
    "CollectionOutcome",
    "IndexOutcome",
    "ReconciliationReport",
    "SeedOutcome",
]
