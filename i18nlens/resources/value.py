"""Format-independent value tree shared by all resource parsers."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any, Mapping, TypeAlias

from i18nlens.diagnostics.codes import RESOURCE_CYCLIC_VALUE
from i18nlens.resources.errors import ResourceParseError


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str


@dataclass(frozen=True, slots=True)
class NumberValue:
    """Number kept in its canonical text form (`1`, `1.5`, `-2`)."""

    text: str


@dataclass(frozen=True, slots=True)
class BoolValue:
    value: bool


@dataclass(frozen=True, slots=True)
class NullValue:
    pass


@dataclass(frozen=True, slots=True)
class ArrayValue:
    items: tuple[Value, ...] = ()


@dataclass(frozen=True, slots=True)
class ObjectValue:
    """Ordered key/value pairs. Keys may repeat; later pairs win when flattened."""

    entries: tuple[tuple[str, Value], ...] = ()


Value: TypeAlias = StringValue | NumberValue | BoolValue | NullValue | ArrayValue | ObjectValue
ScalarValue: TypeAlias = StringValue | NumberValue | BoolValue | NullValue

NULL = NullValue()


def render_scalar(value: ScalarValue) -> str | None:
    """Canonical text of a scalar; `None` for null."""
    match value:
        case StringValue(value=text):
            return text
        case NumberValue(text=text):
            return text
        case BoolValue(value=flag):
            return "true" if flag else "false"
        case NullValue():
            return None


def value_from_python(data: Any) -> Value:
    """Convert `json.loads`/`yaml.safe_load` output into a value tree.

    Raises `ResourceParseError` when a container contains itself, which a
    YAML alias such as `a: &x [*x]` produces.
    """
    return _convert(data, set())


def _convert(data: Any, open_containers: set[int]) -> Value:
    if data is None:
        return NULL
    if isinstance(data, bool):
        return BoolValue(data)
    if isinstance(data, int):
        return NumberValue(str(data))
    if isinstance(data, float):
        return NumberValue(repr(data))
    if isinstance(data, str):
        return StringValue(data)
    if isinstance(data, (datetime.date, datetime.datetime)):
        return StringValue(data.isoformat())
    if isinstance(data, (Mapping, list, tuple)):
        marker = id(data)
        if marker in open_containers:
            raise ResourceParseError(RESOURCE_CYCLIC_VALUE)
        open_containers.add(marker)
        converted = _convert_container(data, open_containers)
        open_containers.remove(marker)
        return converted
    return StringValue(str(data))


def _convert_container(data: Mapping | list | tuple, open_containers: set[int]) -> Value:
    if isinstance(data, Mapping):
        entries: list[tuple[str, Value]] = []
        for raw_key, raw_value in data.items():
            key = _key_text(raw_key)
            if key is None:
                continue
            entries.append((key, _convert(raw_value, open_containers)))
        return ObjectValue(tuple(entries))
    return ArrayValue(tuple(_convert(item, open_containers) for item in data))


def _key_text(raw_key: Any) -> str | None:
    if raw_key is None or isinstance(raw_key, (Mapping, list, tuple)):
        return None
    scalar = value_from_python(raw_key)
    return render_scalar(scalar)  # type: ignore[arg-type]
