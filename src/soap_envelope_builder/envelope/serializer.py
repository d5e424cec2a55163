"""Serializer entry points turning envelope builders into XML strings."""

from dataclasses import dataclass
from typing import Optional

from soap_envelope_builder.shared.config import DEFAULT_INDENT, SerializerConfig
from soap_envelope_builder.shared.logging import get_logger

from .builder import EnvelopeBuilder


@dataclass(frozen=True)
class SoapXml:
    """Rendered SOAP document, kept distinct from arbitrary strings."""

    content: str

    def __str__(self) -> str:
        return self.content

    def __len__(self) -> int:
        return len(self.content)

    def encode(self, encoding: str = "utf-8") -> bytes:
        """Return the document bytes, UTF-8 by default to match the declaration."""
        return self.content.encode(encoding)


class SoapXmlSerializer:
    """Render envelopes according to a :class:`SerializerConfig`.

    Example:
        >>> serializer = SoapXmlSerializer(SerializerConfig.compact())
        >>> serializer.serialize(EnvelopeBuilder()).startswith("<?xml")
        True
    """

    def __init__(self, config: Optional[SerializerConfig] = None) -> None:
        self.config = config or SerializerConfig()
        self.logger = get_logger(
            __name__, self.config.correlation_id, component="serializer"
        )

    @property
    def pretty_print(self) -> bool:
        return self.config.pretty_print

    @property
    def indent(self) -> str:
        return self.config.indent

    def serialize(self, envelope: EnvelopeBuilder) -> str:
        """Render ``envelope`` to a complete XML document string."""
        self.logger.debug(
            "Serializing envelope",
            extra={"pretty_print": self.config.pretty_print},
        )
        if self.config.pretty_print:
            return envelope.to_pretty_string(self.config.indent)
        return str(envelope)

    def to_xml(self, envelope: EnvelopeBuilder) -> SoapXml:
        """Render ``envelope`` and wrap the result in :class:`SoapXml`."""
        return SoapXml(self.serialize(envelope))


def to_xml(envelope: EnvelopeBuilder, pretty_print: bool = True,
           indent: str = DEFAULT_INDENT) -> SoapXml:
    """Render an envelope to :class:`SoapXml` with the given formatting."""
    config = SerializerConfig(pretty_print=pretty_print, indent=indent)
    return SoapXmlSerializer(config).to_xml(envelope)
