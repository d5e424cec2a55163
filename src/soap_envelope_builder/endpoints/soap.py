"""SOAP endpoint registry for mock services.

Handlers receive a :class:`SoapRequest` and return a :class:`SoapResponse`
whose body is typically produced by the envelope builder.

Example:
    >>> registry = SoapEndpointRegistry()
    >>> @registry.operation("/ws/ghost", "getGhost")
    ... def get_ghost(request):
    ...     return SoapResponse(body="<soapenv:Envelope/>")
    >>> registry.find("/ws/ghost", "getGhost").handler is get_ghost
    True
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from soap_envelope_builder.shared.logging import get_logger

logger = get_logger(__name__, component="soap_endpoints")

SOAP_XML_CONTENT_TYPES = {
    "1.1": "text/xml; charset=utf-8",
    "1.2": "application/soap+xml; charset=utf-8",
}


@dataclass(frozen=True)
class SoapRequest:
    """Incoming SOAP request.

    Attributes:
        headers: HTTP headers, each name mapping to all of its values
        soap_action: SOAPAction value identifying the operation
        body: Raw XML body, or None when the request had none
    """

    headers: Dict[str, List[str]]
    soap_action: str
    body: Optional[str] = None

    def header(self, name: str) -> Optional[str]:
        """Return the first value of a header, matched case-insensitively."""
        lowered = name.lower()
        for key, values in self.headers.items():
            if key.lower() == lowered and values:
                return values[0]
        return None


@dataclass(frozen=True)
class SoapResponse:
    """SOAP response returned by a handler."""

    status: int = 200
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    @classmethod
    def xml(cls, document: Any, status: int = 200,
            soap_version: Any = "1.2") -> "SoapResponse":
        """Build a response carrying a rendered envelope.

        The Content-Type follows the SOAP version: ``text/xml`` for 1.1 and
        ``application/soap+xml`` for 1.2.
        """
        version = str(getattr(soap_version, "value", soap_version))
        content_type = SOAP_XML_CONTENT_TYPES.get(version, SOAP_XML_CONTENT_TYPES["1.2"])
        return cls(status=status, headers={"Content-Type": content_type}, body=str(document))


SoapHandler = Callable[[SoapRequest], SoapResponse]


@dataclass(frozen=True)
class SoapEndpointDefinition:
    """A SOAP operation: where it lives, which action selects it, who handles it."""

    path: str
    soap_action: str
    handler: SoapHandler


class SoapEndpointRegistry:
    """Collects SOAP operations identified by path and SOAPAction."""

    def __init__(self) -> None:
        self._endpoints: List[SoapEndpointDefinition] = []

    @property
    def endpoints(self) -> List[SoapEndpointDefinition]:
        """Registered operations in registration order."""
        return list(self._endpoints)

    def operation(self, path: str, soap_action: str,
                  handler: Optional[SoapHandler] = None) -> Any:
        """Register a SOAP operation.

        Without ``handler`` this returns a decorator that registers the
        decorated function and returns it unchanged.
        """
        if handler is None:
            def decorator(func: SoapHandler) -> SoapHandler:
                self.operation(path, soap_action, func)
                return func
            return decorator

        self._endpoints.append(SoapEndpointDefinition(path, soap_action, handler))
        logger.debug(
            "Registered SOAP operation",
            extra={"path": path, "soap_action": soap_action},
        )
        return None

    def find(self, path: str, soap_action: str) -> Optional[SoapEndpointDefinition]:
        """Return the first operation registered for ``path`` and ``soap_action``."""
        for definition in self._endpoints:
            if definition.path == path and definition.soap_action == soap_action:
                return definition
        return None

    def __len__(self) -> int:
        return len(self._endpoints)


def soap_endpoints(block: Callable[[SoapEndpointRegistry], Any]) -> SoapEndpointRegistry:
    """Create a registry and let ``block`` register operations on it."""
    registry = SoapEndpointRegistry()
    block(registry)
    return registry
