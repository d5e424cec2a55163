"""Endpoint modules group related REST and SOAP registrations."""

from typing import Iterable, Tuple

from .rest import RestEndpointRegistry
from .soap import SoapEndpointRegistry


class EndpointModule:
    """Base class for a bundle of endpoint registrations.

    Subclasses override whichever hook they need; both default to no-ops.

    Example:
        >>> class GhostModule(EndpointModule):
        ...     def configure_soap(self, registry):
        ...         registry.operation("/ws/ghost", "getGhost", lambda request: None)
        >>> rest, soap = collect_endpoints([GhostModule()])
        >>> len(soap), len(rest.endpoints)
        (1, 0)
    """

    def configure(self, registry: RestEndpointRegistry) -> None:
        """Register REST endpoints."""

    def configure_soap(self, registry: SoapEndpointRegistry) -> None:
        """Register SOAP operations."""


def collect_endpoints(
    modules: Iterable[EndpointModule],
) -> Tuple[RestEndpointRegistry, SoapEndpointRegistry]:
    """Run every module's hooks against fresh registries, in order."""
    rest = RestEndpointRegistry()
    soap = SoapEndpointRegistry()
    for module in modules:
        module.configure(rest)
        module.configure_soap(soap)
    return rest, soap
