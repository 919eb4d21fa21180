"""Custom exception classes for the recommendation engine.

The engine is a pure computation and degrades gracefully on partial data, so
these are raised only at a few well-defined boundaries: profile arithmetic
that cannot proceed, catalog files that cannot be read and invalid
configuration.
"""

from typing import Optional, Any, Dict


class AppException(Exception):
    """Base exception class for all engine exceptions.

    Attributes:
        message: Human-readable error message.
        details: Optional additional error details.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize engine exception.

        Args:
            message: Error message.
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InputError(AppException):
    """Exception raised when a profile value makes a formula meaningless."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize input error.

        Args:
            message: Validation error message.
            field: Optional profile field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, details=details)


class CatalogError(AppException):
    """Exception raised when a meal catalog source cannot be read."""

    def __init__(self, message: str, source: Optional[str] = None):
        """Initialize catalog error.

        Args:
            message: Error message.
            source: Optional path or name of the catalog source.
        """
        details = {"source": source} if source else {}
        super().__init__(message, details=details)


class ConfigurationError(AppException):
    """Exception raised when engine configuration is invalid."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        """Initialize configuration error.

        Args:
            message: Configuration error message.
            config_key: Optional configuration key that is invalid.
        """
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, details=details)
