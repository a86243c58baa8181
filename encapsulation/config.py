"""
Driver configuration.
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, field_validator

from .core.exceptions import ConfigurationError
from .core.temperature import ABSOLUTE_ZERO_CELSIUS


class DemoConfig(BaseModel):
    """Typed configuration for the demo driver."""

    model_config = ConfigDict(extra="forbid")

    log_level: str = "WARNING"
    student_name: str = Field("MARKCEL", min_length=1)
    student_id: int = 56
    student_gpa: float = 34.7
    celsius: float = Field(34.6, ge=ABSOLUTE_ZERO_CELSIUS)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level


def load_config(config: Optional[Dict[str, Any]] = None) -> DemoConfig:
    """Validate a plain config dict into a DemoConfig."""
    try:
        return DemoConfig(**(config or {}))
    except PydanticValidationError as e:
        raise ConfigurationError("Invalid driver configuration",
                                 error_code="invalid_config",
                                 details={'errors': e.errors()}) from e
