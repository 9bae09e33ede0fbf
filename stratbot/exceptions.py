"""Custom exception hierarchy for StratBot.

Exception Hierarchy:
    StratBotError (base)
    ├── ConfigurationError
    ├── ValidationError
    └── DataProviderError
        └── NotFoundError

Transport failures (connection errors, non-2xx responses, timeouts) are
raised by httpx and propagate untouched; they are not part of this hierarchy.
"""
from __future__ import annotations

from typing import Optional, Dict, Any, List


class StratBotError(Exception):
    """Base exception for all StratBot errors.

    Attributes:
        message: Human-readable error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for tool responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Configuration Errors
class ConfigurationError(StratBotError):
    """Raised when there's a configuration problem.

    Examples:
        - No language model API key available
        - Invalid configuration value
    """
    pass


# Validation Errors
class ValidationError(StratBotError):
    """Raised when a response body fails schema validation.

    Covers both bodies that are not valid JSON and JSON that does not
    conform to the expected schema.

    Attributes:
        errors: Structural diagnostic, one dict per failing path
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.field = field
        self.errors = errors or []
        details = details or {}
        if field:
            details["field"] = field
        if self.errors:
            details["errors"] = self.errors
        super().__init__(message, code, details)

    @property
    def paths(self) -> List[tuple]:
        """Location of every failing field, e.g. ``('records', 0, 'id')``."""
        return [tuple(err.get("loc", ())) for err in self.errors]


# Data Provider Errors
class DataProviderError(StratBotError):
    """Base class for data provider errors.

    Attributes:
        provider: Name of the provider that failed
    """

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.provider = provider
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, code, details)


class NotFoundError(DataProviderError):
    """Raised when a requested topic is known to be absent.

    Only raised when the full topic collection is already cached, so the
    absence is proven without a network call.
    """

    def __init__(
        self,
        message: str,
        topic_id: Optional[str] = None,
        provider: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.topic_id = topic_id
        details = details or {}
        if topic_id:
            details["topic_id"] = topic_id
        super().__init__(message, provider, code, details)


def get_error_response(error: Exception) -> Dict[str, Any]:
    """Convert any exception to an error response.

    Args:
        error: The exception to convert

    Returns:
        Dictionary suitable for reporting the failure to a caller
    """
    if isinstance(error, StratBotError):
        return error.to_dict()

    # For non-StratBot exceptions (httpx transport errors etc.)
    return {
        "error": error.__class__.__name__,
        "message": str(error),
        "details": {},
    }
