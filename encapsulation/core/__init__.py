"""
Core module containing the encapsulated object model.
"""

from .grade import Grade
from .people import Student
from .messages import SecretMessage
from .temperature import Temperature
from .exceptions import EncapsulationError, ValidationError, ConfigurationError

__all__ = [
    # Entities
    "Grade",
    "Student",
    "SecretMessage",
    "Temperature",

    # Exceptions
    "EncapsulationError",
    "ValidationError",
    "ConfigurationError",
]
