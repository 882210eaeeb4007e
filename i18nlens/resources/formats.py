"""Resource format dispatch and file loading."""

from __future__ import annotations

import json
from enum import StrEnum
from pathlib import Path
from typing import Final

import yaml

from i18nlens.diagnostics.codes import RESOURCE_INVALID_JSON, RESOURCE_INVALID_YAML, RESOURCE_TOO_DEEP
from i18nlens.resources.array_literal import parse_array_literal
from i18nlens.resources.errors import ResourceParseError
from i18nlens.resources.flatten import flatten_value
from i18nlens.resources.value import Value, value_from_python


class ResourceFormat(StrEnum):
    JSON = "json"
    YAML = "yaml"
    ARRAY_LITERAL = "php"


EXTENSION_FORMATS: Final[dict[str, ResourceFormat]] = {
    ".json": ResourceFormat.JSON,
    ".yaml": ResourceFormat.YAML,
    ".yml": ResourceFormat.YAML,
    ".php": ResourceFormat.ARRAY_LITERAL,
}

RESOURCE_EXTENSIONS: Final[frozenset[str]] = frozenset(EXTENSION_FORMATS)


def resource_format_for_path(path: str | Path) -> ResourceFormat:
    """Pick a parser from the file extension. Unknown extensions parse as JSON."""
    suffix = Path(path).suffix.lower()
    return EXTENSION_FORMATS.get(suffix, ResourceFormat.JSON)


def is_resource_path(path: str | Path) -> bool:
    return Path(path).suffix.lower() in RESOURCE_EXTENSIONS


def parse_resource_text(text: str, resource_format: ResourceFormat) -> Value:
    """Parse resource file content into a value tree.

    Raises `ResourceParseError` when the content is not valid for the format,
    including nesting deeper than the interpreter recursion limit.
    """
    try:
        match resource_format:
            case ResourceFormat.YAML:
                return _parse_yaml(text)
            case ResourceFormat.ARRAY_LITERAL:
                return parse_array_literal(text)
            case _:
                return _parse_json(text)
    except RecursionError as exc:
        raise ResourceParseError(RESOURCE_TOO_DEEP) from exc


def read_resource_text(path: str | Path) -> str:
    """Read a resource file as UTF-8, dropping a leading BOM."""
    decoded = Path(path).read_bytes().decode("utf-8")
    return decoded.removeprefix("\ufeff")


def parse_resource_file(path: str | Path) -> Value:
    """Read and parse one resource file.

    Raises `OSError`/`UnicodeDecodeError` on read failures and
    `ResourceParseError` on parse failures.
    """
    text = read_resource_text(path)
    try:
        return parse_resource_text(text, resource_format_for_path(path))
    except ResourceParseError as exc:
        raise exc.with_path(str(path)) from exc


def load_translations(path: str | Path) -> dict[str, str]:
    """Parse and flatten one resource file into `{dotted.key: text}`."""
    value = parse_resource_file(path)
    try:
        return flatten_value(value)
    except RecursionError as exc:
        raise ResourceParseError(RESOURCE_TOO_DEEP, path=str(path)) from exc


def _parse_json(text: str) -> Value:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResourceParseError(RESOURCE_INVALID_JSON, exc.msg + ".", offset=exc.pos) from exc
    return value_from_python(data)


def _parse_yaml(text: str) -> Value:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        problem = getattr(exc, "problem", None)
        raise ResourceParseError(
            RESOURCE_INVALID_YAML,
            f"{problem}." if problem else None,
            offset=mark.index if mark is not None else None,
        ) from exc
    return value_from_python(data)
