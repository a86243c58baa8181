"""
Custom exceptions for the encapsulation exercise.
"""

from typing import Optional, Any, Dict


class EncapsulationError(Exception):
    """Base exception for all encapsulation-related errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(EncapsulationError):
    """Raised when a value is rejected by a validation helper."""
    pass


class ConfigurationError(EncapsulationError):
    """Raised when configuration is invalid."""
    pass
