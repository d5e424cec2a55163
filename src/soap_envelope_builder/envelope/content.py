"""Element and list nodes that make up the content of a SOAP message.

Every container-like node (header, body, fault detail, element, list) is an
:class:`ElementHolder`: it owns an ordered sequence of children, and each
``element``/``optional``/``nillable``/``list`` call appends one new child and
hands it to an optional configuring callback. Children are serialized
depth-first in insertion order.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from .escaping import escape_xml, escape_xml_attr, format_value

DEFAULT_INDENT = "  "


def qualify(name: str, namespace: Optional[str] = None) -> str:
    """Join a namespace prefix and a local name as ``prefix:name``."""
    if namespace:
        return f"{namespace}:{name}"
    return name


def indentation(pretty: bool, indent: str, depth: int) -> str:
    """Leading whitespace for a tag line at ``depth``."""
    return indent * depth if pretty else ""


def end_line(parts: List[str], pretty: bool) -> None:
    """Terminate the current tag line when pretty-printing."""
    if pretty:
        parts.append("\n")


class SoapComponent(ABC):
    """A node that can render itself as compact or pretty-printed XML."""

    @abstractmethod
    def serialize(self, parts: List[str], pretty: bool, indent: str, depth: int) -> None:
        """Append this node's XML to ``parts``.

        Args:
            parts: Output buffer, joined once rendering is complete
            pretty: Whether to emit indentation and newlines
            indent: Indentation unit repeated ``depth`` times per line
            depth: Current nesting depth
        """

    def __str__(self) -> str:
        """Return compact XML without indentation or newlines."""
        parts: List[str] = []
        self.serialize(parts, False, "", 0)
        return "".join(parts)

    def to_pretty_string(self, indent: str = DEFAULT_INDENT) -> str:
        """Return XML with one tag per line, indented by ``indent`` per level."""
        parts: List[str] = []
        self.serialize(parts, True, indent, 0)
        return "".join(parts)


class ElementHolder:
    """Ordered container of child elements and lists."""

    def __init__(self) -> None:
        self.children: List[SoapChild] = []

    @property
    def has_children(self) -> bool:
        """Check if at least one child has been added."""
        return len(self.children) > 0

    def element(
        self,
        name: str,
        block: Optional["ElementBlock"] = None,
        *,
        namespace: Optional[str] = None,
        content: Any = None,
    ) -> "ElementBuilder":
        """Add a child element.

        Args:
            name: Tag name, may already carry a ``prefix:``
            block: Callback receiving the new element for configuration
            namespace: Prefix joined to ``name`` as ``namespace:name``
            content: Text content shortcut, applied before ``block`` runs

        Returns:
            The new element
        """
        return self._add_element(ElementBuilder(qualify(name, namespace)), block, content)

    def optional(
        self,
        name: str,
        block: Optional["ElementBlock"] = None,
        *,
        namespace: Optional[str] = None,
        content: Any = None,
    ) -> "ElementBuilder":
        """Add a child element that is omitted entirely when it has no content."""
        element = ElementBuilder(qualify(name, namespace), optional=True)
        return self._add_element(element, block, content)

    def nillable(
        self,
        name: str,
        block: Optional["ElementBlock"] = None,
        *,
        namespace: Optional[str] = None,
        content: Any = None,
    ) -> "ElementBuilder":
        """Add a child element rendered as ``<name xsi:nil="true"/>`` when empty."""
        element = ElementBuilder(qualify(name, namespace), nillable=True)
        return self._add_element(element, block, content)

    def list(
        self,
        name: str,
        block: Optional["ListBlock"] = None,
        *,
        namespace: Optional[str] = None,
    ) -> "ListBuilder":
        """Add a list container for repeated child elements."""
        container = ListBuilder(qualify(name, namespace))
        self.children.append(container)
        if block is not None:
            block(container)
        return container

    def _add_element(
        self,
        element: "ElementBuilder",
        block: Optional["ElementBlock"],
        content: Any,
    ) -> "ElementBuilder":
        if content is not None:
            element.content = content
        self.children.append(element)
        if block is not None:
            block(element)
        return element

    def serialize_content(
        self, parts: List[str], pretty: bool, indent: str, depth: int
    ) -> None:
        """Serialize all children in insertion order at ``depth``."""
        for child in self.children:
            child.serialize(parts, pretty, indent, depth)


class ElementBuilder(ElementHolder, SoapComponent):
    """A single XML element with attributes and one kind of content.

    Content is one of text (``content``), a CDATA section (``cdata``), raw
    unescaped markup (``raw_xml``) or child nodes. When more than one is set,
    CDATA wins over raw XML, which wins over children, which win over text.

    Example:
        >>> user = ElementBuilder("ns:User")
        >>> user.attribute("id", 123)
        >>> _ = user.element("name", content="John Doe")
        >>> _ = user.optional("nickname")
        >>> str(user)
        '<ns:User id="123"><name>John Doe</name></ns:User>'
    """

    def __init__(
        self,
        name: str,
        optional: bool = False,
        nillable: bool = False,
        content: Any = None,
    ) -> None:
        super().__init__()
        self._name = name
        self._optional = optional
        self._nillable = nillable
        self._attributes: Dict[str, str] = {}
        self.content: Any = content
        self.cdata: Optional[str] = None
        self.raw_xml: Optional[str] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_optional(self) -> bool:
        return self._optional

    @property
    def is_nillable(self) -> bool:
        return self._nillable

    @property
    def has_content(self) -> bool:
        """Check if any kind of content has been provided."""
        return (
            self.content is not None
            or self.cdata is not None
            or self.raw_xml is not None
            or self.has_children
        )

    def attribute(self, name: str, value: Any, namespace: Optional[str] = None) -> None:
        """Set an attribute, replacing any earlier value for the same name."""
        self._attributes[qualify(name, namespace)] = format_value(value)

    def attributes(self, *pairs: Tuple[str, Any], **named: Any) -> None:
        """Set several attributes from ``(name, value)`` pairs and keywords."""
        for name, value in pairs:
            self.attribute(name, value)
        for name, value in named.items():
            self.attribute(name, value)

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self._attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def serialize(self, parts: List[str], pretty: bool, indent: str, depth: int) -> None:
        has_content = self.has_content
        if self._optional and not has_content:
            return

        prefix = indentation(pretty, indent, depth)
        if self._nillable and not has_content:
            parts.append(f'{prefix}<{self._name} xsi:nil="true"/>')
            end_line(parts, pretty)
            return

        parts.append(f"{prefix}<{self._name}")
        for key, value in self._attributes.items():
            parts.append(f' {key}="{escape_xml_attr(value)}"')

        if not has_content:
            parts.append("/>")
            end_line(parts, pretty)
            return

        parts.append(">")
        if self.cdata is not None:
            parts.append(f"<![CDATA[{self.cdata}]]>")
        elif self.raw_xml is not None:
            end_line(parts, pretty)
            parts.append(self.raw_xml)
            end_line(parts, pretty)
            parts.append(prefix)
        elif self.has_children:
            end_line(parts, pretty)
            self.serialize_content(parts, pretty, indent, depth + 1)
            parts.append(prefix)
        else:
            parts.append(escape_xml(format_value(self.content)))
        parts.append(f"</{self._name}>")
        end_line(parts, pretty)


class ListBuilder(ElementHolder, SoapComponent):
    """Wrapper element for repeated children; self-closing when empty.

    Example:
        >>> users = ListBuilder("users")
        >>> _ = users.element("user", content="Alice")
        >>> _ = users.element("user", content="Bob")
        >>> print(users.to_pretty_string(), end="")
        <users>
          <user>Alice</user>
          <user>Bob</user>
        </users>
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def serialize(self, parts: List[str], pretty: bool, indent: str, depth: int) -> None:
        prefix = indentation(pretty, indent, depth)
        if not self.has_children:
            parts.append(f"{prefix}<{self._name}/>")
            end_line(parts, pretty)
            return

        parts.append(f"{prefix}<{self._name}>")
        end_line(parts, pretty)
        self.serialize_content(parts, pretty, indent, depth + 1)
        parts.append(f"{prefix}</{self._name}>")
        end_line(parts, pretty)


SoapChild = Union[ElementBuilder, ListBuilder]
ElementBlock = Callable[[ElementBuilder], Any]
ListBlock = Callable[[ListBuilder], Any]
