"""Tests for the serializer entry points."""

import pytest

from soap_envelope_builder.envelope.builder import EnvelopeBuilder, soap_envelope
from soap_envelope_builder.envelope.serializer import SoapXml, SoapXmlSerializer, to_xml
from soap_envelope_builder.shared.config import SerializerConfig
from soap_envelope_builder.shared.errors import UnknownVersionError


@pytest.fixture
def envelope():
    return soap_envelope(lambda env: env.body(
        lambda body: body.element("getGhost", lambda e: e.element("id", content=7))
    ))


class TestSoapXml:
    """Test the rendered document wrapper."""

    def test_str_and_len(self):
        xml = SoapXml("<a/>")

        assert str(xml) == "<a/>"
        assert len(xml) == 4

    def test_encode(self):
        assert SoapXml("é").encode() == "é".encode("utf-8")
        assert SoapXml("a").encode("ascii") == b"a"

    def test_equality(self):
        assert SoapXml("<a/>") == SoapXml("<a/>")


class TestSoapXmlSerializer:
    """Test config-driven rendering."""

    def test_default_is_pretty(self, envelope):
        serializer = SoapXmlSerializer()

        assert serializer.pretty_print is True
        assert serializer.indent == "  "
        assert serializer.serialize(envelope) == envelope.to_pretty_string()

    def test_compact(self, envelope):
        serializer = SoapXmlSerializer(SerializerConfig.compact())

        assert serializer.serialize(envelope) == str(envelope)
        assert "\n" not in serializer.serialize(envelope)

    def test_custom_indent(self, envelope):
        serializer = SoapXmlSerializer(SerializerConfig.pretty("    "))

        assert "\n        <getGhost>\n" in serializer.serialize(envelope)
        assert "\n            <id>7</id>\n" in serializer.serialize(envelope)

    def test_to_xml(self, envelope):
        result = SoapXmlSerializer().to_xml(envelope)

        assert isinstance(result, SoapXml)
        assert result.content == envelope.to_pretty_string()

    def test_errors_propagate(self):
        with pytest.raises(UnknownVersionError):
            SoapXmlSerializer().serialize(EnvelopeBuilder(version="9"))

    def test_correlation_id_on_logger(self):
        serializer = SoapXmlSerializer(SerializerConfig(correlation_id="req-9"))

        assert serializer.logger.correlation_id == "req-9"
        assert serializer.logger.component == "serializer"


class TestToXml:
    """Test the module-level convenience function."""

    def test_pretty_default(self, envelope):
        assert str(to_xml(envelope)) == envelope.to_pretty_string()

    def test_compact(self, envelope):
        assert str(to_xml(envelope, pretty_print=False)) == str(envelope)

    def test_indent(self, envelope):
        assert str(to_xml(envelope, indent="\t")) == envelope.to_pretty_string("\t")

    def test_any_indent_matches_pretty_string(self, envelope):
        """Test the serializer accepts the same indents as to_pretty_string."""
        assert str(to_xml(envelope, indent="--")) == envelope.to_pretty_string("--")
        assert "\n----<getGhost>\n" in str(to_xml(envelope, indent="--"))
