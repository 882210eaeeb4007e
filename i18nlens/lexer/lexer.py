"""Lexer for PHP-style array literals (`[...]`, `array(...)`)."""

from typing import Final

from i18nlens.lexer.tokens import Token, TokenFlags, TokenKind
from i18nlens.text import TextRange, TextSize, slice_text_range

ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

PUNCTUATION: Final[dict[str, TokenKind]] = {
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}


class Lexer:
    """Lexer that emits only significant tokens.

    Whitespace, `//` and `#` line comments, `/* */` block comments, statement
    terminators and any character outside the array-literal vocabulary
    (`<?php`, `$`, a lone `=`) are skipped.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        while True:
            self._skip_trivia()
            start = self._position
            if self.is_eof:
                return Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(start)))

            token = self._lex_token(start)
            if token is not None:
                return token

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self, start: int) -> Token | None:
        ch = self._current_char()

        if ch == "=" and self._peek_char() == ">":
            self._advance(2)
            return self._token(TokenKind.ARROW, start, "=>")

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            self._advance(1)
            return self._token(kind, start, ch)

        if ch == "'" or ch == '"':
            return self._lex_string(start)

        if ch.isdigit() or (ch == "-" and self._peek_char().isdigit()):
            return self._lex_number(start)

        if ch.isalpha() or ch == "_":
            return self._lex_identifier(start)

        # `;` and anything else outside the vocabulary.
        self._advance(1)
        return None

    def _lex_string(self, start: int) -> Token:
        flags = TokenFlags.NONE
        quote = self._current_char()
        self._advance(1)
        chars: list[str] = []
        closed = False

        while not self.is_eof:
            ch = self._current_char()
            self._advance(1)
            if ch == quote:
                closed = True
                break
            if ch == "\\":
                flags |= TokenFlags.HAS_ESCAPE
                if self.is_eof:
                    break
                escaped = self._current_char()
                self._advance(1)
                chars.append(ESCAPES.get(escaped, escaped))
                continue
            chars.append(ch)

        if not closed:
            flags |= TokenFlags.UNTERMINATED
        return self._token(TokenKind.STRING, start, "".join(chars), flags)

    def _lex_number(self, start: int) -> Token:
        if self._current_char() == "-":
            self._advance(1)
        saw_dot = False
        while not self.is_eof:
            ch = self._current_char()
            if ch.isdigit():
                self._advance(1)
                continue
            if ch == "." and not saw_dot and self._peek_char().isdigit():
                saw_dot = True
                self._advance(1)
                continue
            break
        return self._token(TokenKind.NUMBER, start, self._source[start : self._position])

    def _lex_identifier(self, start: int) -> Token:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_" or ch == "-":
                self._advance(1)
                continue
            break
        return self._token(TokenKind.IDENTIFIER, start, self._source[start : self._position])

    def _skip_trivia(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch.isspace():
                self._advance(1)
                continue
            if ch == "#" or (ch == "/" and self._peek_char() == "/"):
                self._consume_until("\n", consume_delimiter=False)
                continue
            if ch == "/" and self._peek_char() == "*":
                self._advance(2)
                self._consume_until("*/", consume_delimiter=True)
                continue
            break

    def _consume_until(self, delimiter: str, *, consume_delimiter: bool) -> None:
        index = self._source.find(delimiter, self._position)
        if index == -1:
            self._position = len(self._source)
            return
        self._position = index + len(delimiter) if consume_delimiter else index

    def _token(self, kind: TokenKind, start: int, value: str, flags: TokenFlags = TokenFlags.NONE) -> Token:
        return Token(
            kind=kind,
            range=TextRange.from_offsets(start, self._position),
            value=value,
            flags=flags,
        )

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the raw source text of a token (quotes and escapes included)."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)
