"""
Signup database bootstrap.

Creates the onboarding collections with schema validation, ensures their
indexes and seeds the default onboarding steps. Safe to re-run.

Usage:
    signup-db-init [--url URL] [--db NAME] [--log-level LEVEL]

Environment Variables:
    MONGODB_URL: mongodb://<user>:<password>@<host>:<port>/?authSource=admin
    MONGODB_DB: Database name (e.g., myapp)
    LOG_LEVEL: Logging level (default: INFO)
"""
import argparse
import asyncio
import logging
from typing import Optional, Sequence

from signup_db.config import get_settings
from signup_db.core.exceptions import SignupDBError
from signup_db.database.connections import close_connections, get_mongo_client, verify_connection
from signup_db.database.registry import ALL_DB_MANIFESTS, reconcile
from signup_db.schemas.reconciliation import ReconciliationReport

logger = logging.getLogger("signup_db")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Initialize the signup/onboarding MongoDB database")
    parser.add_argument(
        "--url",
        default=None,
        help="MongoDB connection URL (default: MONGODB_URL)",
    )
    parser.add_argument(
        "--db",
        default=None,
        help="Target database name (default: MONGODB_DB)",
    )
    parser.add_argument(
        "--manifest",
        choices=sorted(ALL_DB_MANIFESTS),
        default="onboarding",
        help="Database manifest to apply",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


async def run(url: str, db_name: str, manifest_name: str = "onboarding") -> ReconciliationReport:
    """Connect, apply one manifest to the target database, and disconnect."""
    client = await get_mongo_client(url)
    try:
        await verify_connection(client)
        logger.info(f"Connected to MongoDB, initializing database '{db_name}'")
        return await reconcile(client[db_name], ALL_DB_MANIFESTS[manifest_name])
    finally:
        await close_connections()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)

    try:
        settings = get_settings()
    except SignupDBError as e:
        configure_logging(args.log_level or "INFO")
        logger.error(f"Initialization failed: {e}")
        return 1

    configure_logging(args.log_level or settings.log_level)

    try:
        url, db_name = settings.connection_params(url=args.url, db_name=args.db)
        asyncio.run(run(url, db_name, args.manifest))
    except SignupDBError as e:
        logger.error(f"Initialization failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
