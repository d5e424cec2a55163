"""Endpoint registries consumed by mock HTTP/SOAP servers.

Handlers registered here typically render their response bodies with
:mod:`soap_envelope_builder.envelope`.
"""

from .module import EndpointModule, collect_endpoints
from .rest import (
    DynamicRequest,
    DynamicResponse,
    DynamicResponseBuilder,
    HttpMethod,
    ResponseOptions,
    RestEndpointDefinition,
    RestEndpointRegistry,
    endpoints,
)
from .soap import (
    SoapEndpointDefinition,
    SoapEndpointRegistry,
    SoapRequest,
    SoapResponse,
    soap_endpoints,
)

__all__ = [
    "EndpointModule",
    "collect_endpoints",
    "DynamicRequest",
    "DynamicResponse",
    "DynamicResponseBuilder",
    "HttpMethod",
    "ResponseOptions",
    "RestEndpointDefinition",
    "RestEndpointRegistry",
    "endpoints",
    "SoapEndpointDefinition",
    "SoapEndpointRegistry",
    "SoapRequest",
    "SoapResponse",
    "soap_endpoints",
]
