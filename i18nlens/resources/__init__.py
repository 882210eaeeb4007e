"""Resource file parsing into a shared value tree, and flattening to dotted keys."""

from i18nlens.resources.array_literal import ArrayLiteralParser, parse_array_literal
from i18nlens.resources.errors import ResourceParseError
from i18nlens.resources.flatten import KEY_SEPARATOR, flatten_value, join_key
from i18nlens.resources.formats import (
    RESOURCE_EXTENSIONS,
    ResourceFormat,
    is_resource_path,
    load_translations,
    parse_resource_file,
    parse_resource_text,
    read_resource_text,
    resource_format_for_path,
)
from i18nlens.resources.value import (
    NULL,
    ArrayValue,
    BoolValue,
    NullValue,
    NumberValue,
    ObjectValue,
    StringValue,
    Value,
    render_scalar,
    value_from_python,
)

__all__ = [
    "KEY_SEPARATOR",
    "NULL",
    "RESOURCE_EXTENSIONS",
    "ArrayLiteralParser",
    "ArrayValue",
    "BoolValue",
    "NullValue",
    "NumberValue",
    "ObjectValue",
    "ResourceFormat",
    "ResourceParseError",
    "StringValue",
    "Value",
    "flatten_value",
    "is_resource_path",
    "join_key",
    "load_translations",
    "parse_array_literal",
    "parse_resource_file",
    "parse_resource_text",
    "read_resource_text",
    "render_scalar",
    "resource_format_for_path",
    "value_from_python",
]
