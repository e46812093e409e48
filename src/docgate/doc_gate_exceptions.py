"""Custom exceptions for the documentation delay gate."""

from typing import Any


class DocGateError(Exception):
    """Base exception for documentation gate operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class DocGateSettingsError(DocGateError):
    """Raised when gate settings are invalid."""
