"""Tests for the SOAP endpoint registry."""

import pytest

from soap_envelope_builder.endpoints.soap import (
    SoapEndpointRegistry,
    SoapRequest,
    SoapResponse,
    soap_endpoints,
)
from soap_envelope_builder.envelope import SoapVersion, soap_envelope


def ghost_response(request):
    envelope = soap_envelope(lambda env: env.body(
        lambda body: body.element("getGhostResponse", namespace="ns")
    ))
    return SoapResponse.xml(envelope)


class TestSoapRequest:
    """Test request header lookups."""

    def test_header_case_insensitive(self):
        request = SoapRequest(
            headers={"Content-Type": ["text/xml", "charset=utf-8"]},
            soap_action="getGhost",
        )

        assert request.header("content-type") == "text/xml"
        assert request.header("X-Missing") is None
        assert request.body is None

    def test_header_without_values(self):
        request = SoapRequest(headers={"X-Empty": []}, soap_action="a")

        assert request.header("X-Empty") is None


class TestSoapResponse:
    """Test response construction."""

    def test_defaults(self):
        response = SoapResponse()

        assert response.status == 200
        assert response.headers == {}
        assert response.body is None

    @pytest.mark.parametrize("version, content_type", [
        ("1.1", "text/xml; charset=utf-8"),
        (SoapVersion.V1_1, "text/xml; charset=utf-8"),
        ("1.2", "application/soap+xml; charset=utf-8"),
        (SoapVersion.V1_2, "application/soap+xml; charset=utf-8"),
    ])
    def test_xml_content_type(self, version, content_type):
        response = SoapResponse.xml("<x/>", soap_version=version)

        assert response.headers == {"Content-Type": content_type}
        assert response.body == "<x/>"

    def test_xml_renders_envelope(self):
        envelope = soap_envelope()
        response = SoapResponse.xml(envelope, status=500)

        assert response.status == 500
        assert response.body == str(envelope)


class TestSoapEndpointRegistry:
    """Test operation registration and lookup."""

    def test_register_and_find(self):
        registry = SoapEndpointRegistry()
        registry.operation("/ws/ghost", "getGhost", ghost_response)

        definition = registry.find("/ws/ghost", "getGhost")
        assert definition.handler is ghost_response
        assert len(registry) == 1
        assert registry.find("/ws/ghost", "deleteGhost") is None
        assert registry.find("/ws/other", "getGhost") is None

    def test_decorator(self):
        registry = SoapEndpointRegistry()

        @registry.operation("/ws/ghost", "deleteGhost")
        def delete_ghost(request):
            return SoapResponse(status=204)

        assert registry.find("/ws/ghost", "deleteGhost").handler is delete_ghost
        assert delete_ghost(None).status == 204

    def test_first_registration_wins(self):
        registry = SoapEndpointRegistry()
        first = lambda request: SoapResponse(status=200)
        second = lambda request: SoapResponse(status=500)
        registry.operation("/ws", "a", first)
        registry.operation("/ws", "a", second)

        assert registry.find("/ws", "a").handler is first
        assert [d.handler for d in registry.endpoints] == [first, second]

    def test_endpoints_is_a_copy(self):
        registry = SoapEndpointRegistry()
        registry.endpoints.append("junk")

        assert registry.endpoints == []

    def test_handler_round_trip(self):
        registry = soap_endpoints(lambda r: r.operation("/ws/ghost", "getGhost", ghost_response))
        request = SoapRequest(headers={}, soap_action="getGhost", body="<Envelope/>")

        response = registry.find("/ws/ghost", request.soap_action).handler(request)

        assert response.status == 200
        assert response.headers["Content-Type"].startswith("application/soap+xml")
        assert "<ns:getGhostResponse/>" in response.body
