"""SOAP Envelope Builder.

A typed builder for SOAP 1.1 and SOAP 1.2 envelopes, aimed at mock services
and tests that need to hand back well-formed SOAP responses and faults.

Progressive API Disclosure:
- Level 1: Simple functions - soap_envelope(), to_xml()
- Level 2: Configured rendering - SoapXmlSerializer with SerializerConfig
- Level 3: Declarative definitions - envelope_from_dict(), load_envelope()
- Level 4: Endpoint registries - soap_endpoints(), endpoints()
"""

__version__ = "0.1.0"
__author__ = "SOAP Envelope Builder Team"

# Progressive API disclosure - Level 1: Simple functions
from .envelope import EnvelopeBuilder, SoapVersion, soap_envelope, to_xml

# Progressive API disclosure - Level 2: Configured rendering
from .envelope import SoapXml, SoapXmlSerializer
from .shared.config import SerializerConfig

# Progressive API disclosure - Level 3: Declarative definitions
from .envelope import envelope_from_dict, envelope_from_json, load_envelope

# Progressive API disclosure - Level 4: Endpoint registries
from .endpoints import endpoints, soap_endpoints

# Errors raised by every API level
from .shared.errors import (
    DuplicateBodyError,
    EnvelopeDefinitionError,
    SoapBuilderError,
    UnknownVersionError,
    VersionMismatchError,
)

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1: Simple building and rendering
    "soap_envelope",
    "to_xml",
    "EnvelopeBuilder",
    "SoapVersion",

    # Level 2: Configured rendering
    "SoapXml",
    "SoapXmlSerializer",
    "SerializerConfig",

    # Level 3: Declarative definitions
    "envelope_from_dict",
    "envelope_from_json",
    "load_envelope",

    # Level 4: Endpoint registries
    "endpoints",
    "soap_endpoints",

    # Errors
    "SoapBuilderError",
    "DuplicateBodyError",
    "VersionMismatchError",
    "UnknownVersionError",
    "EnvelopeDefinitionError",
]
