import pytest

from i18nlens.diagnostics import (
    RESOURCE_ARRAY_NOT_FOUND,
    RESOURCE_EXPECTED_TOKEN,
    RESOURCE_UNEXPECTED_EOF,
    RESOURCE_UNEXPECTED_TOKEN,
)
from i18nlens.resources import (
    ArrayValue,
    BoolValue,
    NumberValue,
    ObjectValue,
    ResourceParseError,
    StringValue,
    flatten_value,
    parse_array_literal,
)
from tests._shared_cases import NESTED_FLATTENED, NESTED_PHP


def test_parses_laravel_bracket_form() -> None:
    assert flatten_value(parse_array_literal(NESTED_PHP)) == NESTED_FLATTENED


def test_parses_legacy_array_call_form() -> None:
    source = "<?php\nreturn array(\n    'auth' => array('failed' => 'Nope'),\n);\n"

    assert flatten_value(parse_array_literal(source)) == {"auth.failed": "Nope"}


def test_scalar_values_keep_their_kind() -> None:
    value = parse_array_literal("['s' => 'x', 'n' => 42, 'b' => FALSE, 'c' => APP_NAME]")

    assert value == ObjectValue(
        (
            ("s", StringValue("x")),
            ("n", NumberValue("42")),
            ("b", BoolValue(False)),
            ("c", StringValue("APP_NAME")),
        )
    )


def test_array_without_keys_is_a_list() -> None:
    assert parse_array_literal("['a', 'b']") == ArrayValue((StringValue("a"), StringValue("b")))


def test_implicit_keys_count_only_implicit_items() -> None:
    value = parse_array_literal("['x', 'k' => 'v', 'y']")

    assert value == ObjectValue(
        (
            ("0", StringValue("x")),
            ("k", StringValue("v")),
            ("1", StringValue("y")),
        )
    )


def test_scalar_keys_are_stringified() -> None:
    value = parse_array_literal("[1 => 'one', 2.5 => 'half', true => 'yes']")

    assert flatten_value(value) == {"1": "one", "2.5": "half", "true": "yes"}


def test_null_and_array_keys_are_dropped_with_their_value() -> None:
    value = parse_array_literal("[null => 'a', ['x'] => 'b', 'kept' => 'c']")

    assert flatten_value(value) == {"kept": "c"}


def test_duplicate_keys_last_wins_after_flattening() -> None:
    value = parse_array_literal("['a' => 'first', 'a' => 'second']")

    assert value == ObjectValue((("a", StringValue("first")), ("a", StringValue("second"))))
    assert flatten_value(value) == {"a": "second"}


def test_commas_are_optional() -> None:
    value = parse_array_literal("['a' => 'x' 'b' => 'y',]")

    assert flatten_value(value) == {"a": "x", "b": "y"}


def test_end_of_input_closes_open_arrays() -> None:
    value = parse_array_literal("<?php return ['a' => 'x', 'nested' => ['b' => 'y'")

    assert flatten_value(value) == {"a": "x", "nested.b": "y"}


def test_text_before_first_array_is_skipped() -> None:
    source = "<?php\nnamespace App;\nuse Foo;\n$messages = ['k' => 'v'];\nreturn $messages;\n"

    assert flatten_value(parse_array_literal(source)) == {"k": "v"}


def test_missing_array_raises() -> None:
    with pytest.raises(ResourceParseError) as exc_info:
        parse_array_literal("<?php echo 'hi';")

    assert exc_info.value.code == RESOURCE_ARRAY_NOT_FOUND.code


def test_unexpected_token_raises_with_offset() -> None:
    with pytest.raises(ResourceParseError) as exc_info:
        parse_array_literal("['a' => ]")

    assert exc_info.value.code == RESOURCE_UNEXPECTED_TOKEN.code
    assert exc_info.value.offset == 8


def test_unexpected_end_after_arrow_raises() -> None:
    with pytest.raises(ResourceParseError) as exc_info:
        parse_array_literal("['a' =>")

    assert exc_info.value.code == RESOURCE_UNEXPECTED_EOF.code


def test_call_form_requires_parenthesis() -> None:
    with pytest.raises(ResourceParseError) as exc_info:
        parse_array_literal("array 'x'")

    assert exc_info.value.code == RESOURCE_EXPECTED_TOKEN.code
    assert "LPAREN" in str(exc_info.value)
