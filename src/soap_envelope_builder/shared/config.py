"""Configuration classes for SOAP envelope serialization.

This module provides immutable configuration objects that control how
envelopes are turned into XML text: compact or pretty-printed output, the
indentation unit, and the correlation ID attached to log records.
"""

import json
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, List, Optional

DEFAULT_INDENT = "  "


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class SerializerConfig:
    """Configuration for rendering an envelope to a string.

    Thread-safe due to frozen dataclass implementation. The indent is only
    used when ``pretty_print`` is enabled; compact output never contains
    indentation or inserted newlines.
    """

    pretty_print: bool = True
    indent: str = DEFAULT_INDENT
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate serializer configuration."""
        if not isinstance(self.pretty_print, bool):
            raise ConfigValidationError(
                "pretty_print must be a boolean", field_name="pretty_print"
            )
        if not isinstance(self.indent, str):
            raise ConfigValidationError(
                "indent must be a string",
                field_name="indent",
                suggestions=["Use a run of spaces such as '  '", "Use '\\t'"],
            )

    @classmethod
    def compact(cls) -> "SerializerConfig":
        """Create configuration producing single-line output."""
        return cls(pretty_print=False, indent="")

    @classmethod
    def pretty(cls, indent: str = DEFAULT_INDENT) -> "SerializerConfig":
        """Create configuration producing indented, one-tag-per-line output."""
        return cls(pretty_print=True, indent=indent)

    @property
    def effective_indent(self) -> str:
        """Indent string actually used while rendering."""
        return self.indent if self.pretty_print else ""

    def override(self, **kwargs: Any) -> "SerializerConfig":
        """Create a new configuration with specific overrides.

        Raises:
            ConfigValidationError: If a keyword does not name a field
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(kwargs) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {', '.join(unknown)}",
                suggestions=[f"Valid fields: {', '.join(sorted(known))}"],
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SerializerConfig":
        """Create configuration from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})
