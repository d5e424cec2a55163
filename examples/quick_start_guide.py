#!/usr/bin/env python3
"""
Quick Start Guide for SOAP Envelope Builder.

This example walks through building a response envelope, a SOAP 1.2 fault,
a declarative JSON definition and a mock SOAP endpoint.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from soap_envelope_builder import (
    SerializerConfig,
    SoapBuilderError,
    SoapVersion,
    SoapXmlSerializer,
    envelope_from_dict,
    soap_envelope,
    soap_endpoints,
)
from soap_envelope_builder.endpoints import SoapRequest, SoapResponse

GHOST_NS = "http://org.khorum-oss.com/ghost-book"


def build_ghost_response(ghost_id):
    def configure(envelope):
        envelope.version = SoapVersion.V1_1
        envelope.envelope_prefix = "soap"
        envelope.namespaces(lambda ns: ns.ns("xmlns:ns", GHOST_NS))

        def body(content):
            ghost = content.element("getGhostResponse", namespace="ns").element("ghost")
            ghost.attribute("id", ghost_id)
            ghost.element("name", content="Lady Grey")
            ghost.optional("nickname")
            ghost.nillable("lastSeen")
            ghost.list("haunts", lambda haunts: (
                haunts.element("place", content="Library"),
                haunts.element("place", content="East Wing"),
            ))

        envelope.body(body)

    return soap_envelope(configure)


def quick_start_example():
    """Quick start example showing basic usage."""

    print("🚀 QUICK START - SOAP Envelope Builder")
    print("=" * 45)

    # Step 1: Build a response envelope
    print("\n📄 Step 1: Building a Response Envelope")
    print("-" * 30)

    envelope = build_ghost_response(7)
    print(envelope.to_pretty_string())

    # Step 2: Compact output for the wire
    print("\n📦 Step 2: Compact Output")
    print("-" * 30)

    serializer = SoapXmlSerializer(SerializerConfig.compact())
    document = serializer.to_xml(envelope)
    print(f"✅ {len(document)} characters, {len(document.encode())} bytes")


def fault_example():
    """Example showing a SOAP 1.2 fault with nested subcodes."""

    print("\n\n⚠️  FAULT EXAMPLE")
    print("=" * 35)

    envelope = soap_envelope(
        lambda env: env.fault(lambda fault: (
            fault.code("env:Sender", lambda code: code.subcode("ns:GhostNotFound")),
            fault.reason("No ghost with id 42"),
            fault.detail(lambda detail: detail.element("ghostId", namespace="ns", content=42)),
        )),
        envelope_prefix="env",
    )
    print(envelope.to_pretty_string())

    # Version-specific methods are checked when called
    try:
        soap_envelope().fault(lambda fault: fault.fault_code("soapenv:Server"))
    except SoapBuilderError as e:
        print(f"❌ Rejected as expected: {e}")


def definition_example():
    """Example showing an envelope built from a plain definition."""

    print("\n\n🗂️  DEFINITION EXAMPLE")
    print("=" * 35)

    envelope = envelope_from_dict({
        "version": "1.1",
        "fault": {
            "fault_code": "soapenv:Server",
            "fault_string": "Ghost registry unavailable",
        },
    })
    print(envelope.to_pretty_string(indent="\t"))


def endpoint_example():
    """Example showing a mock SOAP endpoint returning a rendered envelope."""

    print("\n\n🔌 ENDPOINT EXAMPLE")
    print("=" * 35)

    registry = soap_endpoints(lambda r: r.operation(
        "/ws/ghost", "getGhost",
        lambda request: SoapResponse.xml(build_ghost_response(7), soap_version="1.1"),
    ))

    request = SoapRequest(headers={"SOAPAction": ["getGhost"]}, soap_action="getGhost")
    response = registry.find("/ws/ghost", request.soap_action).handler(request)
    print(f"📋 Status: {response.status}")
    print(f"📋 Content-Type: {response.headers['Content-Type']}")
    print(f"📋 Body starts with: {response.body[:60]}...")


def main():
    """Main function."""
    try:
        quick_start_example()
        fault_example()
        definition_example()
        endpoint_example()

        print("\n✅ All examples completed successfully!")
        return 0

    except SoapBuilderError as e:
        print(f"\n❌ Example failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
