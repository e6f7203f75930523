"""
Exception classes for the signup database bootstrap.
"""
from typing import Any, Dict, Optional


class SignupDBError(Exception):
    """Base exception for all bootstrap errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        result = self.message
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            result += f" [{details_str}]"
        if self.cause:
            result += f" (caused by: {self.cause})"
        return result


class ConfigError(SignupDBError):
    """Raised when connection parameters or declarative specs are missing or invalid."""

    pass


class StoreError(SignupDBError):
    """Raised when MongoDB rejects or fails an operation."""

    def __init__(
        self,
        operation: str,
        collection: Optional[str] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        details: Dict[str, Any] = {"operation": operation}
        if collection is not None:
            details["collection"] = collection
        super().__init__(f"MongoDB operation '{operation}' failed", details, cause)
        self.operation = operation
        self.collection = collection
