"""Tests for endpoint modules."""

from soap_envelope_builder.endpoints.module import EndpointModule, collect_endpoints
from soap_envelope_builder.endpoints.rest import DynamicResponse
from soap_envelope_builder.endpoints.soap import SoapResponse


class GhostModule(EndpointModule):
    def configure(self, registry):
        registry.get("/api/ghosts", lambda request: DynamicResponse(body=[]))

    def configure_soap(self, registry):
        registry.operation("/ws/ghost", "getGhost", lambda request: SoapResponse())


class RestOnlyModule(EndpointModule):
    def configure(self, registry):
        registry.post("/api/ghosts", lambda request: DynamicResponse(status=201))


class TestCollectEndpoints:
    """Test modules are applied to shared registries."""

    def test_collects_in_order(self):
        rest, soap = collect_endpoints([GhostModule(), RestOnlyModule()])

        assert [d.path for d in rest.endpoints] == ["/api/ghosts", "/api/ghosts"]
        assert [d.method.value for d in rest.endpoints] == ["GET", "POST"]
        assert len(soap) == 1

    def test_default_hooks_do_nothing(self):
        rest, soap = collect_endpoints([EndpointModule()])

        assert rest.endpoints == []
        assert len(soap) == 0

    def test_no_modules(self):
        rest, soap = collect_endpoints([])

        assert rest.endpoints == [] and len(soap) == 0
