from i18nlens.lexer import Lexer, Token, TokenFlags, TokenKind, token_text
from i18nlens.text import TextRange


def lex(text: str) -> list[Token]:
    return Lexer(text).lex()


def kinds(tokens: list[Token]) -> list[TokenKind]:
    return [token.kind for token in tokens]


def test_lexes_laravel_return_statement() -> None:
    tokens = lex("<?php return ['a' => 'b', 'n' => 1.5, 'x' => -2];")

    assert kinds(tokens) == [
        TokenKind.IDENTIFIER,
        TokenKind.IDENTIFIER,
        TokenKind.LBRACKET,
        TokenKind.STRING,
        TokenKind.ARROW,
        TokenKind.STRING,
        TokenKind.COMMA,
        TokenKind.STRING,
        TokenKind.ARROW,
        TokenKind.NUMBER,
        TokenKind.COMMA,
        TokenKind.STRING,
        TokenKind.ARROW,
        TokenKind.NUMBER,
        TokenKind.RBRACKET,
        TokenKind.EOF,
    ]
    assert tokens[0].value == "php"
    assert tokens[1].value == "return"
    assert tokens[9].value == "1.5"
    assert tokens[13].value == "-2"


def test_lexes_call_form_punctuation() -> None:
    tokens = lex("array('k' => array())")

    assert kinds(tokens) == [
        TokenKind.IDENTIFIER,
        TokenKind.LPAREN,
        TokenKind.STRING,
        TokenKind.ARROW,
        TokenKind.IDENTIFIER,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.RPAREN,
        TokenKind.EOF,
    ]


def test_string_escapes_are_decoded() -> None:
    tokens = lex(r"""'It\'s' "a\nb" 'back\\slash' 'unknown\x'""")

    assert [token.value for token in tokens[:-1]] == ["It's", "a\nb", "back\\slash", "unknownx"]
    assert all(token.flags & TokenFlags.HAS_ESCAPE for token in tokens[:-1])


def test_token_text_keeps_raw_source() -> None:
    source = r"'It\'s'"
    token = lex(source)[0]

    assert token_text(source, token) == source
    assert token.value == "It's"
    assert token.range == TextRange.from_offsets(0, len(source))


def test_unterminated_string_is_flagged() -> None:
    token = lex("'abc")[0]

    assert token.kind == TokenKind.STRING
    assert token.value == "abc"
    assert token.flags & TokenFlags.UNTERMINATED


def test_comments_and_unknown_characters_are_skipped() -> None:
    tokens = lex("// line\n# hash\n/* block\n comment */ $x = [ ; ]")

    assert kinds(tokens) == [
        TokenKind.IDENTIFIER,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.EOF,
    ]
    assert tokens[0].value == "x"
    assert tokens[0].range == TextRange.from_offsets(37, 38)


def test_identifiers_allow_hyphen_and_underscore() -> None:
    tokens = lex("_private some-name CONST_1")

    assert [token.value for token in tokens[:-1]] == ["_private", "some-name", "CONST_1"]
    assert all(token.kind == TokenKind.IDENTIFIER for token in tokens[:-1])


def test_lone_minus_is_not_a_number() -> None:
    tokens = lex("- 5")

    assert kinds(tokens) == [TokenKind.NUMBER, TokenKind.EOF]
    assert tokens[0].value == "5"


def test_eof_is_repeated() -> None:
    lexer = Lexer("")

    assert lexer.next_token().kind == TokenKind.EOF
    assert lexer.next_token().kind == TokenKind.EOF
    assert lexer.is_eof
