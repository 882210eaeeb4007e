"""Recursive-descent parser for PHP-style array literal resource files.

Accepts the conventional Laravel layout::

    <?php
    return [
        'common' => [
            'hello' => 'Hello',
        ],
    ];

and the older `array(...)` call form. Only the first array literal in the file
is parsed; everything before it is skipped.
"""

from __future__ import annotations

from i18nlens.diagnostics.codes import (
    RESOURCE_ARRAY_NOT_FOUND,
    RESOURCE_EXPECTED_TOKEN,
    RESOURCE_UNEXPECTED_EOF,
    RESOURCE_UNEXPECTED_TOKEN,
)
from i18nlens.lexer import Lexer, Token, TokenKind
from i18nlens.resources.errors import ResourceParseError
from i18nlens.resources.value import (
    NULL,
    ArrayValue,
    BoolValue,
    NumberValue,
    ObjectValue,
    StringValue,
    Value,
    render_scalar,
)

ARRAY_KEYWORD = "array"


class ArrayLiteralParser:
    """Single-token-lookahead parser over the array-literal lexer."""

    def __init__(self, source: str) -> None:
        self._lexer = Lexer(source)
        self._lookahead: Token | None = None

    @property
    def current(self) -> Token:
        if self._lookahead is None:
            self._lookahead = self._lexer.next_token()
        return self._lookahead

    def at(self, kind: TokenKind) -> bool:
        return self.current.kind == kind

    def at_array_start(self) -> bool:
        token = self.current
        if token.kind == TokenKind.LBRACKET:
            return True
        return token.kind == TokenKind.IDENTIFIER and token.value.lower() == ARRAY_KEYWORD

    def bump(self) -> Token:
        token = self.current
        if token.kind != TokenKind.EOF:
            self._lookahead = None
        return token

    def eat(self, kind: TokenKind) -> bool:
        if self.at(kind):
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind) -> Token:
        if self.at(kind):
            return self.bump()
        token = self.current
        raise ResourceParseError(
            RESOURCE_EXPECTED_TOKEN,
            f"`{kind.name}`, found `{token.kind.name}`.",
            offset=token.range.start.value,
        )

    def parse_root_array(self) -> Value:
        """Skip to the first array literal and parse it."""
        while not self.at(TokenKind.EOF):
            if self.at_array_start():
                return self.parse_array()
            self.bump()
        raise ResourceParseError(RESOURCE_ARRAY_NOT_FOUND)

    def parse_array(self) -> Value:
        opening = self.bump()
        if opening.kind == TokenKind.LBRACKET:
            end_kind = TokenKind.RBRACKET
        else:
            self.expect(TokenKind.LPAREN)
            end_kind = TokenKind.RPAREN

        items: list[tuple[str | None, Value]] = []
        while True:
            if self.eat(end_kind):
                break
            # An unclosed array at end of input keeps what was read.
            if self.at(TokenKind.EOF):
                break

            key_or_value = self.parse_value()
            if self.eat(TokenKind.ARROW):
                key = _key_text(key_or_value)
                value = self.parse_value()
                if key:
                    items.append((key, value))
            else:
                items.append((None, key_or_value))

            self.eat(TokenKind.COMMA)

        return _build_array(items)

    def parse_value(self) -> Value:
        if self.at_array_start():
            return self.parse_array()

        token = self.current
        match token.kind:
            case TokenKind.STRING:
                self.bump()
                return StringValue(token.value)
            case TokenKind.NUMBER:
                self.bump()
                return NumberValue(token.value)
            case TokenKind.IDENTIFIER:
                self.bump()
                return _identifier_value(token.value)
            case TokenKind.EOF:
                raise ResourceParseError(RESOURCE_UNEXPECTED_EOF, offset=token.range.start.value)
            case _:
                self.bump()
                raise ResourceParseError(
                    RESOURCE_UNEXPECTED_TOKEN,
                    f"`{token.kind.name}`.",
                    offset=token.range.start.value,
                )


def parse_array_literal(source: str) -> Value:
    """Parse the first array literal in `source` into a value tree."""
    return ArrayLiteralParser(source).parse_root_array()


def _identifier_value(name: str) -> Value:
    match name.lower():
        case "true":
            return BoolValue(True)
        case "false":
            return BoolValue(False)
        case "null":
            return NULL
        case _:
            return StringValue(name)


def _key_text(value: Value) -> str:
    if isinstance(value, (ArrayValue, ObjectValue)):
        return ""
    return render_scalar(value) or ""


def _build_array(items: list[tuple[str | None, Value]]) -> Value:
    if all(key is None for key, _ in items):
        return ArrayValue(tuple(value for _, value in items))

    entries: list[tuple[str, Value]] = []
    next_index = 0
    for key, value in items:
        if key is None:
            key = str(next_index)
            next_index += 1
        entries.append((key, value))
    return ObjectValue(tuple(entries))
