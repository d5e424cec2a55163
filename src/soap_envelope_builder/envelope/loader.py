"""Build envelopes from plain dictionaries or JSON documents.

The definition format mirrors the builder API one-to-one::

    {
        "version": "1.1",
        "envelope_prefix": "soap",
        "namespaces": {"xmlns:ns": "http://example.com/api"},
        "header": [{"name": "ns:token", "content": "abc123"}],
        "body": [
            {"name": "ns:deleteGhostResponse", "children": [
                {"name": "success", "content": true}
            ]}
        ]
    }

``body`` may also be an object with ``children`` and an attached ``fault``.
A top-level ``fault`` object replaces the body; its keys are the fault
builder's method names, so a key of the wrong SOAP version raises
:class:`~soap_envelope_builder.shared.errors.VersionMismatchError`.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from soap_envelope_builder.shared.errors import EnvelopeDefinitionError
from soap_envelope_builder.shared.logging import get_logger

from .builder import DEFAULT_ENVELOPE_PREFIX, EnvelopeBuilder
from .content import ElementBuilder, ElementHolder
from .fault import FaultBuilder
from .version import SoapVersion

logger = get_logger(__name__, component="loader")

_ENVELOPE_KEYS = frozenset(
    ["version", "envelope_prefix", "schemas_location", "namespaces",
     "header", "body", "fault"]
)
_ELEMENT_KEYS = frozenset(
    ["name", "namespace", "kind", "content", "cdata", "raw_xml",
     "attributes", "children"]
)
_LIST_KEYS = frozenset(["name", "namespace", "kind", "children"])
_ELEMENT_KINDS = ("element", "optional", "nillable", "list")
_SIMPLE_FAULT_KEYS = ("fault_code", "fault_string", "fault_actor", "node", "role")
_FAULT_KEYS = frozenset(_SIMPLE_FAULT_KEYS + ("code", "reason", "detail"))


def envelope_from_dict(data: Mapping[str, Any]) -> EnvelopeBuilder:
    """Create an :class:`EnvelopeBuilder` from a definition mapping.

    Raises:
        EnvelopeDefinitionError: If the definition is structurally invalid
        UnknownVersionError: If ``version`` names no supported SOAP version
        VersionMismatchError: If the fault uses keys of the other version
        DuplicateBodyError: If both ``body`` and ``fault`` are given
    """
    _require_mapping(data, "$")
    _reject_unknown_keys(data, _ENVELOPE_KEYS, "$")

    envelope = EnvelopeBuilder(
        version=SoapVersion.parse(data.get("version", SoapVersion.V1_2)),
        envelope_prefix=_require_str(
            data.get("envelope_prefix", DEFAULT_ENVELOPE_PREFIX), "$.envelope_prefix"
        ),
        schemas_location=data.get("schemas_location"),
    )

    if "namespaces" in data:
        declarations = _require_mapping(data["namespaces"], "$.namespaces")
        namespaces = envelope.namespaces()
        for attr, uri in declarations.items():
            namespaces.ns(attr, _require_str(uri, f"$.namespaces.{attr}"))

    if "header" in data:
        _add_children(envelope.header(), data["header"], "$.header")

    if "body" in data:
        _apply_body(envelope, data["body"])

    if "fault" in data:
        _apply_fault(envelope.fault(), data["fault"], "$.fault")

    logger.debug(
        "Loaded envelope definition",
        extra={"version": envelope.version.value, "has_body": envelope.has_body},
    )
    return envelope


def envelope_from_json(text: str) -> EnvelopeBuilder:
    """Create an envelope from a JSON document."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise EnvelopeDefinitionError(f"invalid JSON: {e}") from e
    return envelope_from_dict(data)


def load_envelope(path: Union[str, Path]) -> EnvelopeBuilder:
    """Read a JSON definition file and build its envelope."""
    path = Path(path)
    return envelope_from_json(path.read_text(encoding="utf-8"))


def _apply_body(envelope: EnvelopeBuilder, body: Any) -> None:
    if isinstance(body, list):
        _add_children(envelope.body(), body, "$.body")
        return

    _require_mapping(body, "$.body")
    _reject_unknown_keys(body, frozenset(["children", "fault"]), "$.body")
    builder = envelope.body()
    _add_children(builder, body.get("children", []), "$.body.children")
    if "fault" in body:
        _apply_fault(builder.fault(), body["fault"], "$.body.fault")


def _add_children(holder: ElementHolder, entries: Any, path: str) -> None:
    if not isinstance(entries, list):
        raise EnvelopeDefinitionError("expected a list of elements", path)
    for index, entry in enumerate(entries):
        _add_child(holder, entry, f"{path}[{index}]")


def _add_child(holder: ElementHolder, entry: Any, path: str) -> None:
    _require_mapping(entry, path)
    kind = entry.get("kind", "element")
    if kind not in _ELEMENT_KINDS:
        raise EnvelopeDefinitionError(
            f"unknown kind {kind!r}, expected one of {', '.join(_ELEMENT_KINDS)}", path
        )
    if "name" not in entry:
        raise EnvelopeDefinitionError("missing 'name'", path)
    name = _require_str(entry["name"], f"{path}.name")
    namespace = entry.get("namespace")

    if kind == "list":
        _reject_unknown_keys(entry, _LIST_KEYS, path)
        container = holder.list(name, namespace=namespace)
        _add_children(container, entry.get("children", []), f"{path}.children")
        return

    _reject_unknown_keys(entry, _ELEMENT_KEYS, path)
    add = getattr(holder, kind)
    element: ElementBuilder = add(name, namespace=namespace, content=entry.get("content"))
    if "cdata" in entry:
        element.cdata = _require_str(entry["cdata"], f"{path}.cdata")
    if "raw_xml" in entry:
        element.raw_xml = _require_str(entry["raw_xml"], f"{path}.raw_xml")
    if "attributes" in entry:
        for attr, value in _require_mapping(entry["attributes"], f"{path}.attributes").items():
            element.attribute(attr, value)
    if "children" in entry:
        _add_children(element, entry["children"], f"{path}.children")


def _apply_fault(fault: FaultBuilder, data: Any, path: str) -> None:
    _require_mapping(data, path)
    _reject_unknown_keys(data, _FAULT_KEYS, path)

    for key in _SIMPLE_FAULT_KEYS:
        if key in data:
            getattr(fault, key)(_require_str(data[key], f"{path}.{key}"))

    if "code" in data:
        code = data["code"]
        if isinstance(code, str):
            fault.code(code)
        else:
            code = _require_mapping(code, f"{path}.code")
            _reject_unknown_keys(code, frozenset(["value", "subcodes"]), f"{path}.code")
            subcodes = code.get("subcodes", [])
            if not isinstance(subcodes, list):
                raise EnvelopeDefinitionError("expected a list of subcodes", f"{path}.code.subcodes")
            fault_code = fault.code(code.get("value"))
            for index, subcode in enumerate(subcodes):
                fault_code.subcode(_require_str(subcode, f"{path}.code.subcodes[{index}]"))

    if "reason" in data:
        reason = data["reason"]
        if isinstance(reason, str):
            fault.reason(reason)
        else:
            reason = _require_mapping(reason, f"{path}.reason")
            _reject_unknown_keys(reason, frozenset(["text", "lang"]), f"{path}.reason")
            fault.reason(reason.get("text"), reason.get("lang"))

    if "detail" in data:
        _add_children(fault.detail(), data["detail"], f"{path}.detail")


def _require_mapping(value: Any, path: str) -> Dict[str, Any]:
    if not isinstance(value, Mapping):
        raise EnvelopeDefinitionError("expected an object", path)
    return dict(value)


def _require_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise EnvelopeDefinitionError("expected a string", path)
    return value


def _reject_unknown_keys(data: Mapping[str, Any], allowed: frozenset, path: str) -> None:
    unknown: List[str] = sorted(set(data) - allowed)
    if unknown:
        raise EnvelopeDefinitionError(f"unknown keys: {', '.join(unknown)}", path)
