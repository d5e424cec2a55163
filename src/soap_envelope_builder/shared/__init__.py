"""Shared utilities for SOAP envelope building.

This module provides the configuration objects, exception hierarchy and
logging helpers used across the envelope, endpoint and CLI layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    SerializerConfig,
)
from .errors import (
    DuplicateBodyError,
    EnvelopeDefinitionError,
    SoapBuilderError,
    UnknownVersionError,
    VersionMismatchError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "SerializerConfig",
    "DuplicateBodyError",
    "EnvelopeDefinitionError",
    "SoapBuilderError",
    "UnknownVersionError",
    "VersionMismatchError",
    "CorrelationLogger",
    "get_logger",
]
