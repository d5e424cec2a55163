"""SOAP protocol versions and their envelope namespaces."""

from enum import Enum
from typing import Any, Dict, Type

from soap_envelope_builder.shared.errors import UnknownVersionError

from .fault import FaultBuilder, Soap11FaultBuilder, Soap12FaultBuilder


class SoapVersion(Enum):
    """SOAP protocol versions supported by the builder."""

    V1_1 = "1.1"   # faultcode / faultstring / faultactor / detail
    V1_2 = "1.2"   # Code / Reason / Node / Role / Detail

    @classmethod
    def parse(cls, value: Any) -> "SoapVersion":
        """Resolve ``"1.1"``, ``"V1_2"``, ``1.2`` or a member to a version.

        Raises:
            UnknownVersionError: If the value names no supported version
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text in (member.value, member.name):
                return member
        raise UnknownVersionError(value)


SOAP_NAMESPACES: Dict[SoapVersion, str] = {
    SoapVersion.V1_1: "http://schemas.xmlsoap.org/soap/envelope/",
    SoapVersion.V1_2: "http://www.w3.org/2003/05/soap-envelope",
}

_FAULT_BUILDERS: Dict[SoapVersion, Type[FaultBuilder]] = {
    SoapVersion.V1_1: Soap11FaultBuilder,
    SoapVersion.V1_2: Soap12FaultBuilder,
}


def namespace_for(version: Any) -> str:
    """Return the envelope namespace URI for a version or its textual form.

    Raises:
        UnknownVersionError: If the value names no supported version
    """
    return SOAP_NAMESPACES[SoapVersion.parse(version)]


def fault_builder_for(version: Any) -> FaultBuilder:
    """Create an empty fault builder shaped for ``version``.

    Accepts the same values as :meth:`SoapVersion.parse`.

    Raises:
        UnknownVersionError: If no fault shape is registered for the version
    """
    return _FAULT_BUILDERS[SoapVersion.parse(version)]()
