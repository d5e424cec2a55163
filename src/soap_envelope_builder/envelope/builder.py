"""Envelope builder: the root of every SOAP message.

This module composes the namespace declarations, optional header and body of
an envelope and drives the single depth-first pass that renders the whole
tree to text.

Example:
    >>> def configure(envelope):
    ...     envelope.version = SoapVersion.V1_1
    ...     envelope.envelope_prefix = "soap"
    ...     envelope.namespaces(lambda ns: ns.ns("xmlns:ns", "http://example.com/api"))
    ...     envelope.body(lambda body: body.element(
    ...         "deleteGhostResponse", namespace="ns",
    ...         block=lambda response: response.element("success", content=True)))
    >>> envelope = soap_envelope(configure)
    >>> "<success>true</success>" in str(envelope)
    True
"""

from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from soap_envelope_builder.shared.errors import DuplicateBodyError, UnknownVersionError
from soap_envelope_builder.shared.logging import get_logger

from .content import DEFAULT_INDENT, ElementHolder, SoapComponent, end_line, indentation
from .fault import FaultBuilder
from .version import SoapVersion, fault_builder_for, namespace_for

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
DEFAULT_ENVELOPE_PREFIX = "soapenv"

logger = get_logger(__name__, component="envelope")

FaultBlock = Callable[[FaultBuilder], Any]


class NamespacesBuilder:
    """Ordered ``xmlns`` declarations rendered on the Envelope element."""

    def __init__(self) -> None:
        self._namespaces: Dict[str, str] = {}

    def ns(self, prefix: Union[str, Tuple[str, str]], uri: Optional[str] = None) -> None:
        """Declare a namespace.

        Args:
            prefix: Attribute name such as ``xmlns:ns``, or an
                ``(attribute, uri)`` pair
            uri: Namespace URI when ``prefix`` is a plain string
        """
        if isinstance(prefix, tuple):
            prefix, uri = prefix
        if uri is None:
            raise TypeError("ns() requires a URI")
        self._namespaces[prefix] = uri

    def get_namespaces(self) -> Dict[str, str]:
        """Return a copy of the declarations in insertion order."""
        return dict(self._namespaces)


class HeaderBuilder(ElementHolder, SoapComponent):
    """Children of the ``<prefix:Header>`` element."""

    def __init__(self, prefix: str = DEFAULT_ENVELOPE_PREFIX) -> None:
        super().__init__()
        self.prefix = prefix

    def serialize(self, parts: List[str], pretty: bool, indent: str, depth: int,
                  prefix: Optional[str] = None) -> None:
        tag = f"{prefix or self.prefix}:Header"
        line_prefix = indentation(pretty, indent, depth)
        parts.append(f"{line_prefix}<{tag}>")
        end_line(parts, pretty)
        self.serialize_content(parts, pretty, indent, depth + 1)
        parts.append(f"{line_prefix}</{tag}>")
        end_line(parts, pretty)


class BodyBuilder(ElementHolder):
    """Ordinary body content, optionally followed by an attached fault."""

    def __init__(self, version: Any) -> None:
        super().__init__()
        self._version = version
        self._fault: Optional[FaultBuilder] = None

    def get_fault(self) -> Optional[FaultBuilder]:
        return self._fault

    def fault(self, block: Optional[FaultBlock] = None) -> FaultBuilder:
        """Attach a fault rendered after this body's elements."""
        fault = fault_builder_for(self._version)
        if block is not None:
            block(fault)
        self._fault = fault
        return fault


BodyContent = Union[BodyBuilder, FaultBuilder]


class EnvelopeBuilder(SoapComponent):
    """Root builder for a SOAP envelope.

    The body is either ordinary content (:meth:`body`) or a fault
    (:meth:`fault`), set at most once. Rendering never mutates the builder,
    so the same envelope can be rendered repeatedly with identical output.

    ``version`` may be a :class:`SoapVersion` or any value accepted by
    :meth:`SoapVersion.parse`, such as ``"1.1"``.
    """

    def __init__(
        self,
        version: Any = SoapVersion.V1_2,
        envelope_prefix: str = DEFAULT_ENVELOPE_PREFIX,
        schemas_location: Optional[str] = None,
    ) -> None:
        self.version = version
        self.envelope_prefix = envelope_prefix
        self.schemas_location = schemas_location
        self._namespaces: Optional[NamespacesBuilder] = None
        self._header: Optional[HeaderBuilder] = None
        self._body: Optional[BodyContent] = None

    @property
    def has_body(self) -> bool:
        return self._body is not None

    def namespaces(self, block: Optional[Callable[[NamespacesBuilder], Any]] = None
                   ) -> NamespacesBuilder:
        """Replace the custom namespace declarations of the envelope."""
        self._namespaces = NamespacesBuilder()
        if block is not None:
            block(self._namespaces)
        return self._namespaces

    def header(self, block: Optional[Callable[[HeaderBuilder], Any]] = None
               ) -> HeaderBuilder:
        """Configure the header section."""
        self._header = HeaderBuilder(self.envelope_prefix)
        if block is not None:
            block(self._header)
        return self._header

    def body(self, block: Optional[Callable[[BodyBuilder], Any]] = None) -> BodyBuilder:
        """Configure the body with ordinary elements.

        Raises:
            DuplicateBodyError: If a body or fault has already been set
        """
        self._check_body_not_set("body")
        body = BodyBuilder(self.version)
        if block is not None:
            block(body)
        self._body = body
        return body

    def fault(self, block: Optional[FaultBlock] = None) -> FaultBuilder:
        """Configure the body as a fault shaped for the envelope's version.

        Raises:
            DuplicateBodyError: If a body or fault has already been set
            UnknownVersionError: If no fault shape exists for the version
        """
        self._check_body_not_set("fault")
        fault = fault_builder_for(self.version)
        if block is not None:
            block(fault)
        self._body = fault
        return fault

    def _check_body_not_set(self, operation: str) -> None:
        if self._body is not None:
            logger.warning(
                f"Rejected {operation}(): envelope body already set",
                extra={"operation": operation},
            )
            raise DuplicateBodyError()

    def resolve_namespace_uri(self) -> str:
        """Return the envelope namespace URI, honouring ``schemas_location``.

        Raises:
            UnknownVersionError: If the version is unknown and no override is set
        """
        if self.schemas_location is not None:
            return self.schemas_location
        try:
            return namespace_for(self.version)
        except UnknownVersionError:
            logger.warning(
                "No namespace URI for SOAP version",
                extra={"version": repr(self.version)},
            )
            raise

    def serialize(self, parts: List[str], pretty: bool, indent: str, depth: int) -> None:
        soap_ns = self.resolve_namespace_uri()
        prefix = self.envelope_prefix
        line_prefix = indentation(pretty, indent, depth)

        parts.append(XML_DECLARATION)
        end_line(parts, pretty)

        parts.append(f'{line_prefix}<{prefix}:Envelope xmlns:{prefix}="{soap_ns}"')
        if self._namespaces is not None:
            for attr, uri in self._namespaces.get_namespaces().items():
                parts.append(f' {attr}="{uri}"')
        parts.append(">")
        end_line(parts, pretty)

        if self._header is not None:
            self._header.serialize(parts, pretty, indent, depth + 1, prefix=prefix)
        self._serialize_body(parts, pretty, indent, depth + 1)

        parts.append(f"{line_prefix}</{prefix}:Envelope>")
        end_line(parts, pretty)

    def _serialize_body(self, parts: List[str], pretty: bool, indent: str, depth: int) -> None:
        prefix = self.envelope_prefix
        line_prefix = indentation(pretty, indent, depth)
        parts.append(f"{line_prefix}<{prefix}:Body>")
        end_line(parts, pretty)

        body = self._body
        if isinstance(body, BodyBuilder):
            body.serialize_content(parts, pretty, indent, depth + 1)
            attached = body.get_fault()
            if attached is not None:
                attached.serialize(parts, prefix, pretty, indent, depth + 1)
        elif isinstance(body, FaultBuilder):
            body.serialize(parts, prefix, pretty, indent, depth + 1)

        parts.append(f"{line_prefix}</{prefix}:Body>")
        end_line(parts, pretty)

    def render(self, pretty: bool = True, indent: str = DEFAULT_INDENT) -> str:
        """Render the complete document in one pass.

        Raises:
            UnknownVersionError: If no namespace URI can be resolved
        """
        logger.debug(
            "Rendering SOAP envelope",
            extra={"version": repr(self.version), "prefix": self.envelope_prefix,
                   "pretty": pretty},
        )
        parts: List[str] = []
        self.serialize(parts, pretty, indent if pretty else "", 0)
        document = "".join(parts)
        logger.debug("Rendered SOAP envelope", extra={"length": len(document)})
        return document

    def __str__(self) -> str:
        return self.render(pretty=False)

    def to_pretty_string(self, indent: str = DEFAULT_INDENT) -> str:
        return self.render(pretty=True, indent=indent)


def soap_envelope(
    block: Optional[Callable[[EnvelopeBuilder], Any]] = None,
    *,
    version: Any = SoapVersion.V1_2,
    envelope_prefix: str = DEFAULT_ENVELOPE_PREFIX,
    schemas_location: Optional[str] = None,
) -> EnvelopeBuilder:
    """Create and configure an :class:`EnvelopeBuilder`.

    Args:
        block: Callback receiving the new envelope for configuration
        version: SOAP version (default: SOAP 1.2)
        envelope_prefix: Prefix used for Envelope/Header/Body/Fault tags
        schemas_location: Overrides the envelope namespace URI

    Returns:
        The configured builder, ready to render
    """
    envelope = EnvelopeBuilder(version, envelope_prefix, schemas_location)
    if block is not None:
        block(envelope)
    return envelope
