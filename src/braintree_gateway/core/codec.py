"""
XML marshalling for gateway records.

Records are plain dataclasses whose fields carry an :class:`XmlField` in
their metadata. One generic :func:`encode` / :func:`decode` pair walks that
table, so no record type needs hand-written marshalling code.
"""

from __future__ import annotations

import dataclasses
from functools import lru_cache
from typing import IO, Any, Dict, List, Optional, Tuple, Type, TypeVar, Union
from xml.etree import ElementTree
from xml.sax.saxutils import escape

from .errors import MalformedDocument, MissingField

__all__ = [
    "BOOLEAN",
    "INTEGER",
    "MAPPING",
    "RECORD",
    "SCALAR",
    "XmlField",
    "decode",
    "encode",
    "parse",
    "xml_field",
]

SCALAR = "scalar"
BOOLEAN = "boolean"
INTEGER = "integer"
RECORD = "record"
MAPPING = "mapping"

_METADATA_KEY = "xml"
_ENTITIES = {'"': "&quot;", "'": "&apos;"}

R = TypeVar("R")


@dataclasses.dataclass(frozen=True)
class XmlField:
    """
    How a single record attribute maps onto the wire.

    ``tag`` is the element written on encode and looked up first on decode.
    ``aliases`` are extra ElementTree paths tried on decode when the gateway
    answers with a different shape than it accepts, e.g. a customer's card
    comes back under ``credit-cards/credit-card``.
    """

    tag: str
    kind: str = SCALAR
    record: Optional[type] = None
    required: bool = False
    aliases: Tuple[str, ...] = ()


def xml_field(
    tag: str,
    *,
    kind: str = SCALAR,
    record: Optional[type] = None,
    required: bool = False,
    aliases: Tuple[str, ...] = (),
    default: Any = None,
) -> Any:
    if kind == RECORD and record is None:
        raise TypeError(f"Nested field <{tag}> needs a record type")
    spec = XmlField(tag=tag, kind=kind, record=record, required=required, aliases=aliases)
    return dataclasses.field(default=default, metadata={_METADATA_KEY: spec})


@lru_cache(maxsize=None)
def _schema(record_type: type) -> Tuple[Tuple[str, XmlField], ...]:
    if not dataclasses.is_dataclass(record_type):
        raise TypeError(f"{record_type!r} is not a gateway record")
    return tuple(
        (item.name, item.metadata[_METADATA_KEY])
        for item in dataclasses.fields(record_type)
        if _METADATA_KEY in item.metadata
    )


def _write_text(parts: List[str], tag: str, text: str, type_name: Optional[str] = None) -> None:
    if type_name is None:
        parts.append(f"<{tag}>{escape(text, _ENTITIES)}</{tag}>")
    else:
        parts.append(f'<{tag} type="{type_name}">{escape(text, _ENTITIES)}</{tag}>')


def _write_record(parts: List[str], record: Any, name: str) -> None:
    parts.append(f"<{name}>")
    for attr, spec in _schema(type(record)):
        value = getattr(record, attr)
        if value is None:
            continue
        if spec.kind == RECORD:
            _write_record(parts, value, spec.tag)
        elif spec.kind == MAPPING:
            # Keys become element names as-is; callers own their validity.
            parts.append(f"<{spec.tag}>")
            for key, item in value.items():
                _write_text(parts, key, str(item))
            parts.append(f"</{spec.tag}>")
        elif spec.kind == BOOLEAN:
            _write_text(parts, spec.tag, "true" if value else "false", "boolean")
        elif spec.kind == INTEGER:
            _write_text(parts, spec.tag, str(int(value)), "integer")
        else:
            _write_text(parts, spec.tag, str(value))
    parts.append(f"</{name}>")


def encode(record: Any, name: Optional[str] = None) -> str:
    """
    Serialize ``record`` into an XML string.

    The root element defaults to the record's ``xml_name``; ``name`` lets a
    caller place the record under a different element. Absent fields are
    omitted entirely rather than written as empty tags.
    """
    parts: List[str] = []
    _write_record(parts, record, name or record.xml_name)
    return "".join(parts)


def _find(element: ElementTree.Element, spec: XmlField) -> Optional[ElementTree.Element]:
    for path in (spec.tag,) + spec.aliases:
        child = element.find(path)
        if child is not None:
            return child
    return None


def _decode_value(child: ElementTree.Element, spec: XmlField) -> Any:
    if child.get("nil") == "true":
        return None
    text = child.text or ""
    if spec.kind == RECORD:
        return decode(child, spec.record)
    if spec.kind == MAPPING:
        # Duplicate keys: last one wins.
        return {item.tag: item.text or "" for item in child}
    if spec.kind == BOOLEAN:
        flag = text.strip().lower()
        if flag not in ("true", "false"):
            raise MalformedDocument(
                f"Element <{child.tag}> should hold a boolean, got {text!r}"
            )
        return flag == "true"
    if spec.kind == INTEGER:
        try:
            return int(text.strip())
        except ValueError as exc:
            raise MalformedDocument(
                f"Element <{child.tag}> should hold an integer, got {text!r}"
            ) from exc
    return text


def decode(element: ElementTree.Element, record_type: Type[R]) -> R:
    """
    Build a ``record_type`` instance from ``element``.

    Fields flagged ``required`` raise :class:`MissingField` when their
    element is absent; every other field decodes to ``None``.
    """
    values: Dict[str, Any] = {}
    for attr, spec in _schema(record_type):
        child = _find(element, spec)
        if child is None:
            if spec.required:
                raise MissingField(spec.tag)
            values[attr] = None
            continue
        values[attr] = _decode_value(child, spec)
    return record_type(**values)


def parse(source: Union[bytes, str, IO[bytes]]) -> ElementTree.Element:
    """
    Parse an XML document from bytes, text or a binary stream.
    """
    try:
        if isinstance(source, (bytes, str)):
            return ElementTree.fromstring(source)
        return ElementTree.parse(source).getroot()
    except ElementTree.ParseError as exc:
        raise MalformedDocument(f"Response body is not well-formed XML: {exc}") from exc
