"""
Database bootstrap registry.
Applies a database manifest: collections, then indexes, then seed data.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from signup_db.core.exceptions import ConfigError
from signup_db.database.databases import onboarding_db
from signup_db.database.reconciler import ensure_collection, ensure_indexes, seed_if_empty
from signup_db.models.collection import DatabaseManifest
from signup_db.schemas.reconciliation import ReconciliationReport

logger = logging.getLogger(__name__)

# All database manifests, by name
ALL_DB_MANIFESTS = {
    "onboarding": onboarding_db.DB_MANIFEST,
}


def check_manifest(manifest: DatabaseManifest) -> None:
    """
    Reject manifests that would process a collection name twice.

    Raises:
        ConfigError: On duplicate collection names or a seed target with no records builder
    """
    seen: set[str] = set()
    for spec in manifest.collections:
        if spec.name in seen:
            raise ConfigError(
                f"Collection '{spec.name}' is declared more than once",
                details={"purpose": manifest.purpose},
            )
        seen.add(spec.name)

    if manifest.seed_collection and manifest.seed_records is None:
        raise ConfigError(
            f"Seed collection '{manifest.seed_collection}' has no seed records",
            details={"purpose": manifest.purpose},
        )


async def reconcile(db: AsyncIOMotorDatabase, manifest: DatabaseManifest) -> ReconciliationReport:
    """
    Bring the database in line with the manifest.

    Steps run one after another and stop at the first StoreError; whatever
    already ran stays applied.
    """
    check_manifest(manifest)

    report = ReconciliationReport(database=db.name)

    for spec in manifest.collections:
        report.collections.append(await ensure_collection(db, spec))

    for collection_name, specs in manifest.indexes.items():
        report.indexes.extend(await ensure_indexes(db, collection_name, specs))

    if manifest.seed_collection:
        report.seed = await seed_if_empty(
            db,
            manifest.seed_collection,
            manifest.seed_records(),
        )

    logger.info(f"Initialization complete on database '{db.name}'")
    return report
