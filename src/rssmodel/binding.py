# ABOUTME: Generic tag-driven mapper from ElementTree elements onto pydantic models.
# ABOUTME: Fields declare Element/Attr/CharData markers; matching is by local name.

import re
import typing
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic.fields import FieldInfo

M = TypeVar("M", bound=BaseModel)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Element:
    """Bind a field to the child element(s) with this local name."""

    tag: str


@dataclass(frozen=True)
class Attr:
    """Bind a field to the attribute with this local name."""

    name: str


@dataclass(frozen=True)
class CharData:
    """Bind a field to the element's own character data."""


Binding = Element | Attr | CharData


def local_name(name: str) -> str:
    """Strip a ``{namespace}`` or ``prefix:`` qualifier from a tag or attribute name."""
    return name.rpartition("}")[2].rpartition(":")[2]


def chardata(element: ET.Element) -> str:
    """Return the text directly inside ``element``, skipping text of its children."""
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


def to_int(text: str) -> int:
    """Leniently coerce ``text`` to a signed 64-bit integer.

    Empty, non-numeric and out of range values become 0.
    """
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return 0
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


def bind(model: type[M], element: ET.Element, base: M | None = None) -> M:
    """Build an instance of ``model`` from ``element``.

    Fields without a match keep their defaults, so absent elements and
    attributes decode to empty strings, zeros and empty tuples. When ``base``
    is given, ``element`` is decoded on top of it: matched scalars replace
    its values and sequences are extended. Repeated occurrences of a
    non-sequence record are merged this way, in document order.
    """
    values: dict[str, Any] = dict(base) if base is not None else {}
    children = [child for child in element if isinstance(child.tag, str)]

    for name, field in model.model_fields.items():
        binding = _binding_of(field)
        if binding is None:
            continue

        if isinstance(binding, Attr):
            raw = _attribute(element, binding.name)
            if raw is not None:
                values[name] = _coerce(field.annotation, raw)
        elif isinstance(binding, CharData):
            values[name] = _coerce(field.annotation, chardata(element))
        else:
            matches = [child for child in children if local_name(child.tag) == binding.tag]
            if not matches:
                continue
            item_type = _sequence_item(field.annotation)
            if item_type is not None:
                decoded = tuple(_convert(item_type, child) for child in matches)
                values[name] = tuple(values.get(name, ())) + decoded
            elif _is_model(field.annotation):
                current = values.get(name)
                for child in matches:
                    current = bind(field.annotation, child, current)
                values[name] = current
            else:
                values[name] = _coerce(field.annotation, chardata(matches[-1]))

    return model(**values)


def _binding_of(field: FieldInfo) -> Binding | None:
    for meta in field.metadata:
        if isinstance(meta, (Element, Attr, CharData)):
            return meta
    return None


def _attribute(element: ET.Element, name: str) -> str | None:
    for key, value in element.attrib.items():
        if local_name(key) == name:
            return value
    return None


def _sequence_item(annotation: Any) -> Any | None:
    if typing.get_origin(annotation) in (tuple, list):
        args = typing.get_args(annotation)
        if args:
            return args[0]
    return None


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _convert(annotation: Any, element: ET.Element) -> Any:
    if _is_model(annotation):
        return bind(annotation, element)
    return _coerce(annotation, chardata(element))


def _coerce(annotation: Any, text: str) -> Any:
    if annotation is int:
        return to_int(text)
    return text
