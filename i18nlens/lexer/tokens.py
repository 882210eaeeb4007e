"""Array-literal lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from i18nlens.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21  # quoted string, either quote style
    NUMBER = 22

    # -------------------------
    # Punctuation
    # -------------------------
    COMMA = 40  # ,
    ARROW = 41  # =>

    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    LPAREN = 64  # (
    RPAREN = 65  # )

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.IDENTIFIER, TokenKind.STRING, TokenKind.NUMBER)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    HAS_ESCAPE = 1 << 0
    UNTERMINATED = 1 << 1


@dataclass(frozen=True, slots=True)
class Token:
    """A single significant token. `value` is the decoded text for literals."""

    kind: TokenKind
    range: TextRange
    value: str = ""
    flags: TokenFlags = TokenFlags.NONE
