"""
Core utilities - exceptions shared across the bootstrap.
"""
from signup_db.core.exceptions import ConfigError, SignupDBError, StoreError

__all__ = ["SignupDBError", "ConfigError", "StoreError"]
