"""Version-specific SOAP fault builders.

Both fault shapes share a single configuration surface so that one callback
can be offered to callers before the envelope's version is known to them.
Methods that belong to the other protocol version raise
:class:`~soap_envelope_builder.shared.errors.VersionMismatchError` as soon as
they are called.

SOAP 1.1 faults use unprefixed ``faultcode``, ``faultstring``, ``faultactor``
and ``detail`` elements. SOAP 1.2 faults use prefixed ``Code``, ``Reason``,
``Node``, ``Role`` and ``Detail`` elements, with subcodes nested inside one
another.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from soap_envelope_builder.shared.errors import VersionMismatchError
from soap_envelope_builder.shared.logging import get_logger

from .content import ElementHolder, end_line, indentation, qualify
from .escaping import escape_xml, escape_xml_attr

DEFAULT_REASON_LANG = "en"

logger = get_logger(__name__, component="fault")


class FaultCode:
    """SOAP 1.2 fault code with an ordered chain of subcodes.

    Each subcode is nested one level deeper than the previous one:

        >>> code = FaultCode("env:Sender")
        >>> code.subcode("ValidationError", namespace="ns")
        >>> code.subcode("ns:MissingField")
        >>> code.subcodes
        ['ns:ValidationError', 'ns:MissingField']

    renders as ``Code/Value`` followed by ``Subcode/Value`` wrapping a second
    ``Subcode/Value``.
    """

    def __init__(self, value: Optional[str] = None,
                 subcodes: Optional[List[str]] = None) -> None:
        self.primary = value
        self.subcodes: List[str] = list(subcodes or [])

    def value(self, code: str, namespace: Optional[str] = None) -> None:
        """Set the primary code, e.g. ``env:Sender`` or ``env:Receiver``."""
        self.primary = qualify(code, namespace)

    def subcode(self, code: str, namespace: Optional[str] = None) -> None:
        """Append a subcode one level below the last one."""
        self.subcodes.append(qualify(code, namespace))


@dataclass
class FaultReason:
    """SOAP 1.2 fault reason; ``lang`` falls back to ``en`` when rendered."""

    text: Optional[str] = None
    lang: Optional[str] = None


FaultCodeBlock = Callable[[FaultCode], Any]
FaultReasonBlock = Callable[[FaultReason], Any]
DetailBlock = Callable[[ElementHolder], Any]


class FaultBuilder(ABC):
    """Common fault surface shared by both SOAP versions."""

    soap_version: str = ""

    def __init__(self) -> None:
        self._detail: Optional[ElementHolder] = None

    def detail(self, block: Optional[DetailBlock] = None) -> ElementHolder:
        """Configure the application-specific detail section (both versions)."""
        self._detail = ElementHolder()
        if block is not None:
            block(self._detail)
        return self._detail

    # SOAP 1.1 methods - raise on SOAP 1.2
    def fault_code(self, code: str) -> None:
        self._version_mismatch("fault_code", "1.1")

    def fault_string(self, reason: str) -> None:
        self._version_mismatch("fault_string", "1.1")

    def fault_actor(self, actor: str) -> None:
        self._version_mismatch("fault_actor", "1.1")

    # SOAP 1.2 methods - raise on SOAP 1.1
    def code(self, value: Optional[str] = None,
             block: Optional[FaultCodeBlock] = None) -> FaultCode:
        self._version_mismatch("code", "1.2")

    def reason(self, text: Optional[str] = None, lang: Optional[str] = None,
               block: Optional[FaultReasonBlock] = None) -> FaultReason:
        self._version_mismatch("reason", "1.2")

    def node(self, node: str) -> None:
        self._version_mismatch("node", "1.2")

    def role(self, role: str) -> None:
        self._version_mismatch("role", "1.2")

    def _version_mismatch(self, method: str, required_version: str) -> Any:
        logger.warning(
            f"Rejected {method} on a SOAP {self.soap_version} fault",
            extra={"method": method, "required_version": required_version},
        )
        raise VersionMismatchError(method, required_version)

    def serialize(self, parts: List[str], prefix: str, pretty: bool,
                  indent: str, depth: int) -> None:
        """Append ``<prefix:Fault>`` and its version-specific content to ``parts``."""
        line_prefix = indentation(pretty, indent, depth)
        parts.append(f"{line_prefix}<{prefix}:Fault>")
        end_line(parts, pretty)
        self._serialize_fault_content(parts, prefix, pretty, indent, depth + 1)
        parts.append(f"{line_prefix}</{prefix}:Fault>")
        end_line(parts, pretty)

    @abstractmethod
    def _serialize_fault_content(self, parts: List[str], prefix: str,
                                 pretty: bool, indent: str, depth: int) -> None:
        """Append the children of the Fault element."""

    def _serialize_detail(self, parts: List[str], detail_tag: str,
                          pretty: bool, indent: str, depth: int) -> None:
        if self._detail is None:
            return
        line_prefix = indentation(pretty, indent, depth)
        parts.append(f"{line_prefix}<{detail_tag}>")
        end_line(parts, pretty)
        self._detail.serialize_content(parts, pretty, indent, depth + 1)
        parts.append(f"{line_prefix}</{detail_tag}>")
        end_line(parts, pretty)

    @staticmethod
    def _text_element(parts: List[str], tag: str, text: str,
                      pretty: bool, indent: str, depth: int) -> None:
        parts.append(f"{indentation(pretty, indent, depth)}<{tag}>{escape_xml(text)}</{tag}>")
        end_line(parts, pretty)


class Soap11FaultBuilder(FaultBuilder):
    """SOAP 1.1 fault: ``faultcode``, ``faultstring``, ``faultactor``, ``detail``."""

    soap_version = "1.1"

    def __init__(self) -> None:
        super().__init__()
        self._fault_code: Optional[str] = None
        self._fault_string: Optional[str] = None
        self._fault_actor: Optional[str] = None

    def fault_code(self, code: str) -> None:
        """Set the fault code, typically ``<prefix>:Server`` or ``<prefix>:Client``."""
        self._fault_code = code

    def fault_string(self, reason: str) -> None:
        """Set the human-readable fault description."""
        self._fault_string = reason

    def fault_actor(self, actor: str) -> None:
        """Set the URI of the actor that caused the fault."""
        self._fault_actor = actor

    def _serialize_fault_content(self, parts: List[str], prefix: str,
                                 pretty: bool, indent: str, depth: int) -> None:
        if self._fault_code is not None:
            self._text_element(parts, "faultcode", self._fault_code, pretty, indent, depth)
        if self._fault_string is not None:
            self._text_element(parts, "faultstring", self._fault_string, pretty, indent, depth)
        if self._fault_actor is not None:
            self._text_element(parts, "faultactor", self._fault_actor, pretty, indent, depth)
        self._serialize_detail(parts, "detail", pretty, indent, depth)


class Soap12FaultBuilder(FaultBuilder):
    """SOAP 1.2 fault: ``Code``, ``Reason``, ``Node``, ``Role``, ``Detail``."""

    soap_version = "1.2"

    def __init__(self) -> None:
        super().__init__()
        self._code: Optional[FaultCode] = None
        self._reason: Optional[FaultReason] = None
        self._node: Optional[str] = None
        self._role: Optional[str] = None

    def code(self, value: Optional[str] = None,
             block: Optional[FaultCodeBlock] = None) -> FaultCode:
        """Set the fault code from a plain value and/or a configuring callback."""
        self._code = FaultCode(value)
        if block is not None:
            block(self._code)
        return self._code

    def reason(self, text: Optional[str] = None, lang: Optional[str] = None,
               block: Optional[FaultReasonBlock] = None) -> FaultReason:
        """Set the fault reason text and its language tag."""
        self._reason = FaultReason(text=text, lang=lang)
        if block is not None:
            block(self._reason)
        return self._reason

    def node(self, node: str) -> None:
        """Set the URI of the SOAP node that generated the fault."""
        self._node = node

    def role(self, role: str) -> None:
        """Set the URI of the role the node was operating in."""
        self._role = role

    def _serialize_fault_content(self, parts: List[str], prefix: str,
                                 pretty: bool, indent: str, depth: int) -> None:
        line_prefix = indentation(pretty, indent, depth)
        if self._code is not None:
            parts.append(f"{line_prefix}<{prefix}:Code>")
            end_line(parts, pretty)
            if self._code.primary is not None:
                self._text_element(parts, f"{prefix}:Value", self._code.primary,
                                   pretty, indent, depth + 1)
            self._serialize_subcodes(parts, self._code.subcodes, prefix,
                                     pretty, indent, depth + 1)
            parts.append(f"{line_prefix}</{prefix}:Code>")
            end_line(parts, pretty)

        if self._reason is not None:
            lang = escape_xml_attr(self._reason.lang or DEFAULT_REASON_LANG)
            text = escape_xml(self._reason.text or "")
            parts.append(f"{line_prefix}<{prefix}:Reason>")
            end_line(parts, pretty)
            parts.append(
                f'{indentation(pretty, indent, depth + 1)}'
                f'<{prefix}:Text xml:lang="{lang}">{text}</{prefix}:Text>'
            )
            end_line(parts, pretty)
            parts.append(f"{line_prefix}</{prefix}:Reason>")
            end_line(parts, pretty)

        if self._node is not None:
            self._text_element(parts, f"{prefix}:Node", self._node, pretty, indent, depth)
        if self._role is not None:
            self._text_element(parts, f"{prefix}:Role", self._role, pretty, indent, depth)
        self._serialize_detail(parts, f"{prefix}:Detail", pretty, indent, depth)

    def _serialize_subcodes(self, parts: List[str], subcodes: List[str], prefix: str,
                            pretty: bool, indent: str, depth: int) -> None:
        if not subcodes:
            return
        line_prefix = indentation(pretty, indent, depth)
        parts.append(f"{line_prefix}<{prefix}:Subcode>")
        end_line(parts, pretty)
        self._text_element(parts, f"{prefix}:Value", subcodes[0], pretty, indent, depth + 1)
        self._serialize_subcodes(parts, subcodes[1:], prefix, pretty, indent, depth + 1)
        parts.append(f"{line_prefix}</{prefix}:Subcode>")
        end_line(parts, pretty)
