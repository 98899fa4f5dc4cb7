"""
Tests for the Plume lexer.
"""
import pytest

from plumelang.exceptions import LexerException
from plumelang.lexer import Lexer, Token, TokenKind, tokenize


def kinds(source: str) -> list[TokenKind]:
    return [tok.kind for tok in tokenize(source)]


def test_statement_tokens():
    """
    A declaration lexes into keyword, identifier, operator, literal and delimiter.
    """
    tokens = tokenize("let x = 12.5;")
    assert [(t.kind, t.text) for t in tokens] == [
        (TokenKind.LET, "let"),
        (TokenKind.IDENT, "x"),
        (TokenKind.ASSIGN, "="),
        (TokenKind.NUMBER, "12.5"),
        (TokenKind.SEMICOLON, ";"),
        (TokenKind.EOF, ""),
    ]


def test_lexemes_round_trip():
    """
    Each token's text reproduces its lexeme; strings drop their quotes.
    """
    source = 'print "hi there" + count * 3.25 / 7 - 1 == != < <= > >= ;'
    texts = []
    for tok in tokenize(source)[:-1]:
        texts.append(f'"{tok.text}"' if tok.kind == TokenKind.STRING else tok.text)
    assert " ".join(texts) == source


def test_operators_and_comparators():
    assert kinds("= == != < <= > >= + - * /")[:-1] == [
        TokenKind.ASSIGN, TokenKind.EQ, TokenKind.NE, TokenKind.LT, TokenKind.LE,
        TokenKind.GT, TokenKind.GE, TokenKind.PLUS, TokenKind.MINUS,
        TokenKind.MUL, TokenKind.DIV,
    ]


def test_less_equal_reads_equals_sign():
    """
    '<=' is the two-character comparator and '<<' is two '<' tokens.
    """
    assert kinds("a <= b") == [TokenKind.IDENT, TokenKind.LE, TokenKind.IDENT, TokenKind.EOF]
    assert kinds("<<") == [TokenKind.LT, TokenKind.LT, TokenKind.EOF]


def test_keywords_are_case_insensitive():
    tokens = tokenize("PRINT Let wHiLe ElseIf else END then If")
    assert [t.kind for t in tokens][:-1] == [
        TokenKind.PRINT, TokenKind.LET, TokenKind.WHILE, TokenKind.ELSEIF,
        TokenKind.ELSE, TokenKind.END, TokenKind.THEN, TokenKind.IF,
    ]
    assert tokens[0].text == "PRINT"


def test_identifiers_keep_case_and_digits():
    tokens = tokenize("Total2 letter x1y")
    assert [(t.kind, t.text) for t in tokens][:-1] == [
        (TokenKind.IDENT, "Total2"),
        (TokenKind.IDENT, "letter"),
        (TokenKind.IDENT, "x1y"),
    ]


def test_number_then_word():
    assert [(t.kind, t.text) for t in tokenize("12ab")][:-1] == [
        (TokenKind.NUMBER, "12"),
        (TokenKind.IDENT, "ab"),
    ]


def test_second_decimal_point_is_illegal():
    tokens = tokenize("1.2.3")
    assert [(t.kind, t.text) for t in tokens][:-1] == [
        (TokenKind.NUMBER, "1.2"),
        (TokenKind.ILLEGAL, "."),
        (TokenKind.NUMBER, "3"),
    ]


def test_illegal_characters_are_tokens():
    tokens = tokenize("x _ (")
    assert [(t.kind, t.text) for t in tokens][:-1] == [
        (TokenKind.IDENT, "x"),
        (TokenKind.ILLEGAL, "_"),
        (TokenKind.ILLEGAL, "("),
    ]


def test_string_spans_lines():
    tokens = tokenize('"a\nb" x')
    assert tokens[0].kind == TokenKind.STRING
    assert tokens[0].text == "a\nb"
    assert tokens[1].line == 2


def test_line_numbers():
    tokens = tokenize("let a = 1;\n\nprint a;")
    assert tokens[0].line == 1
    assert tokens[5].kind == TokenKind.PRINT
    assert tokens[5].line == 3


@pytest.mark.parametrize("source", ['print "abc', '"', 'let s = "open;\n'])
def test_unterminated_string(source):
    with pytest.raises(LexerException, match="Unclosed string"):
        tokenize(source)


@pytest.mark.parametrize("source", ["1.", "let x = 3.;", "4.a"])
def test_trailing_decimal_point(source):
    with pytest.raises(LexerException, match="Invalid number"):
        tokenize(source)


def test_bang_without_equals():
    with pytest.raises(LexerException, match="'!'"):
        tokenize("a ! b")


def test_eof_is_idempotent():
    lexer = Lexer("x")
    assert lexer.next_token().kind == TokenKind.IDENT
    for _ in range(3):
        assert lexer.next_token().kind == TokenKind.EOF


def test_has_more_does_not_consume():
    lexer = Lexer("  x  \n")
    assert lexer.has_more()
    assert lexer.has_more()
    assert lexer.next_token().text == "x"
    assert not lexer.has_more()
    assert lexer.next_token().kind == TokenKind.EOF


def test_empty_source():
    assert not Lexer("").has_more()
    assert kinds("") == [TokenKind.EOF]


def test_token_equality_ignores_line():
    assert Token(TokenKind.IDENT, "x", 1) == Token(TokenKind.IDENT, "x", 5)
    assert Token(TokenKind.IDENT, "x", 1) != Token(TokenKind.IDENT, "y", 1)
    assert Token(TokenKind.IDENT, "let", 1) != Token(TokenKind.LET, "let", 1)
