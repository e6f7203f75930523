"""
Database definitions and collection constants.
"""
from signup_db.database.databases import onboarding_db

__all__ = ["onboarding_db"]
