"""Exception hierarchy for SOAP envelope construction and rendering.

All errors are raised synchronously while configuring or rendering a
builder; none of them leave partial output behind.
"""

from typing import Any, Optional


class SoapBuilderError(Exception):
    """Base exception for SOAP builder errors."""


class DuplicateBodyError(SoapBuilderError):
    """Raised when an envelope body (content or fault) is configured twice."""

    def __init__(self, message: str = "Body already set") -> None:
        super().__init__(message)


class VersionMismatchError(SoapBuilderError):
    """Raised when a fault method is called on a fault of the other SOAP version."""

    def __init__(self, method: str, required_version: str) -> None:
        super().__init__(f"{method} requires SOAP {required_version}")
        self.method = method
        self.required_version = required_version


class UnknownVersionError(SoapBuilderError):
    """Raised when no namespace URI or fault shape is known for a SOAP version."""

    def __init__(self, version: Any) -> None:
        super().__init__(f"Unknown SOAP version: {version}")
        self.version = version


class EnvelopeDefinitionError(SoapBuilderError):
    """Raised when a dictionary/JSON envelope definition is malformed."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path
