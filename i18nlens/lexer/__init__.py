"""Array-literal lexer."""

from i18nlens.lexer.lexer import Lexer, token_text
from i18nlens.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "token_text",
]
