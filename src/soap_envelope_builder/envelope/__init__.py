"""SOAP envelope building and serialization.

This package provides the typed builder that assembles a tree of named,
attributed, nested nodes and renders it to a SOAP 1.1 or SOAP 1.2 document.

Key Components:
    EnvelopeBuilder: Root builder with version, namespaces, header and body
    ElementBuilder: Individual element with attributes and one kind of content
    ListBuilder: Wrapper element for repeated children
    Soap11FaultBuilder / Soap12FaultBuilder: Version-specific fault shapes
    SoapXmlSerializer: Config-driven compact or pretty rendering
"""

from .builder import (
    BodyBuilder,
    EnvelopeBuilder,
    HeaderBuilder,
    NamespacesBuilder,
    soap_envelope,
)
from .content import ElementBuilder, ElementHolder, ListBuilder, SoapComponent
from .escaping import escape_xml, escape_xml_attr, format_value
from .fault import (
    FaultBuilder,
    FaultCode,
    FaultReason,
    Soap11FaultBuilder,
    Soap12FaultBuilder,
)
from .loader import envelope_from_dict, envelope_from_json, load_envelope
from .serializer import SoapXml, SoapXmlSerializer, to_xml
from .version import SOAP_NAMESPACES, SoapVersion, namespace_for

__all__ = [
    "BodyBuilder",
    "EnvelopeBuilder",
    "HeaderBuilder",
    "NamespacesBuilder",
    "soap_envelope",
    "ElementBuilder",
    "ElementHolder",
    "ListBuilder",
    "SoapComponent",
    "escape_xml",
    "escape_xml_attr",
    "format_value",
    "FaultBuilder",
    "FaultCode",
    "FaultReason",
    "Soap11FaultBuilder",
    "Soap12FaultBuilder",
    "envelope_from_dict",
    "envelope_from_json",
    "load_envelope",
    "SoapXml",
    "SoapXmlSerializer",
    "to_xml",
    "SOAP_NAMESPACES",
    "SoapVersion",
    "namespace_for",
]
