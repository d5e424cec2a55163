"""Escaping helpers for XML text content and attribute values."""

from typing import Any


def escape_xml(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for use as element text.

    The ampersand is replaced first so that the entities introduced by the
    later replacements are not escaped twice.

    >>> escape_xml("a < b & c")
    'a &lt; b &amp; c'
    """
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def escape_xml_attr(text: str) -> str:
    """Escape text for use inside a double-quoted attribute value.

    Applies :func:`escape_xml` and additionally replaces both quote
    characters.

    >>> escape_xml_attr('say "hi" & it\\'s')
    'say &quot;hi&quot; &amp; it&apos;s'
    """
    return (
        escape_xml(text)
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def format_value(value: Any) -> str:
    """Render a scalar the way it should appear on the wire.

    Booleans use the XML Schema lexical form (``true``/``false``); anything
    else goes through ``str``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
