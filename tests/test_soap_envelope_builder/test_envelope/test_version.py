"""Tests for SOAP version parsing."""

import pytest

from soap_envelope_builder.envelope.fault import Soap11FaultBuilder, Soap12FaultBuilder
from soap_envelope_builder.envelope.version import SoapVersion, fault_builder_for, namespace_for
from soap_envelope_builder.shared.errors import UnknownVersionError


class TestSoapVersion:
    """Test version resolution from user input."""

    @pytest.mark.parametrize("value, expected", [
        ("1.1", SoapVersion.V1_1),
        ("1.2", SoapVersion.V1_2),
        (" 1.2 ", SoapVersion.V1_2),
        ("V1_1", SoapVersion.V1_1),
        (1.1, SoapVersion.V1_1),
        (SoapVersion.V1_2, SoapVersion.V1_2),
    ])
    def test_parse(self, value, expected):
        assert SoapVersion.parse(value) is expected

    @pytest.mark.parametrize("value", ["2.0", "", None, "v1_1"])
    def test_parse_unknown(self, value):
        with pytest.raises(UnknownVersionError):
            SoapVersion.parse(value)


class TestVersionLookups:
    """Test lookups accept versions in textual form."""

    def test_namespace_for(self):
        assert namespace_for("1.1") == "http://schemas.xmlsoap.org/soap/envelope/"
        assert namespace_for(SoapVersion.V1_2) == "http://www.w3.org/2003/05/soap-envelope"

    def test_namespace_for_unknown(self):
        with pytest.raises(UnknownVersionError):
            namespace_for("2.0")

    def test_fault_builder_for_text(self):
        assert isinstance(fault_builder_for("1.1"), Soap11FaultBuilder)
        assert isinstance(fault_builder_for("V1_2"), Soap12FaultBuilder)
