"""Lexer for Plume.

The lexer is pull-based: each call to :meth:`Lexer.next_token` skips any
leading whitespace and matches exactly one token at the cursor using a
combined regular expression of named groups. Keywords are recognised by
upper-casing an alphabetic word and looking it up, so ``PRINT``, ``print``
and ``Print`` are the same keyword while identifiers keep their original case.

Three lexemes are fatal (:class:`LexerException`): a ``!`` not followed by
``=``, a string literal with no closing quote and a number with a trailing
``.``. Any other unrecognised character becomes an ``ILLEGAL`` token, which
the parser rejects when it reaches it.

Once the end of input is reached every further call yields another ``EOF``
token.


File: lexer.py
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass, field
from enum import Enum

from plumelang.exceptions import LexerException


class TokenKind(str, Enum):
    """
    Closed set of token kinds.
    """

    EOF = "EOF"
    NUMBER = "NUMBER"
    IDENT = "IDENT"
    STRING = "STRING"
    SEMICOLON = "SEMICOLON"
    ILLEGAL = "ILLEGAL"

    # Keywords
    LET = "LET"
    PRINT = "PRINT"
    END = "END"
    IF = "IF"
    THEN = "THEN"
    WHILE = "WHILE"
    ELSEIF = "ELSEIF"
    ELSE = "ELSE"

    # Operators
    ASSIGN = "ASSIGN"
    PLUS = "PLUS"
    MINUS = "MINUS"
    MUL = "MUL"
    DIV = "DIV"

    # Comparators
    EQ = "EQ"
    NE = "NE"
    LT = "LT"
    LE = "LE"
    GT = "GT"
    GE = "GE"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


KEYWORDS = {
    "LET": TokenKind.LET,
    "PRINT": TokenKind.PRINT,
    "END": TokenKind.END,
    "IF": TokenKind.IF,
    "THEN": TokenKind.THEN,
    "WHILE": TokenKind.WHILE,
    "ELSEIF": TokenKind.ELSEIF,
    "ELSE": TokenKind.ELSE,
}

# Fixed spelling of every kind that has one, for error messages.
LEXEMES = {
    TokenKind.SEMICOLON: ";",
    TokenKind.ASSIGN: "=",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.MUL: "*",
    TokenKind.DIV: "/",
    TokenKind.EQ: "==",
    TokenKind.NE: "!=",
    TokenKind.LT: "<",
    TokenKind.LE: "<=",
    TokenKind.GT: ">",
    TokenKind.GE: ">=",
    **{kind: word.lower() for word, kind in KEYWORDS.items()},
}


@dataclass(frozen=True, repr=False)
class Token:
    """
    Represents a lexical token with a kind, its text and the line it starts on.

    Only the kind and the text take part in equality.
    """
    kind: TokenKind
    text: str
    line: int = field(default=1, compare=False)

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.kind.value}, {self.text!r}, line={self.line})"


token_specification: list[tuple[str, str]] = [
    ('SKIP',        r'\s+'),

    # Literals
    ('BAD_NUMBER',  r'[0-9]+\.(?![0-9])'),
    ('NUMBER',      r'[0-9]+(?:\.[0-9]+)?'),
    ('STRING',      r'"[^"]*"'),
    ('OPEN_STRING', r'"'),

    # Keywords and identifiers
    ('WORD',        r'[^\W\d_][^\W_]*'),

    # Delimiters
    ('SEMICOLON',   r';'),

    # Comparison operators; the two-character forms come first
    ('EQ',          r'=='),
    ('NE',          r'!='),
    ('BANG',        r'!'),
    ('GE',          r'>='),
    ('LE',          r'<='),
    ('GT',          r'>'),
    ('LT',          r'<'),

    # Assignment and arithmetic
    ('ASSIGN',      r'='),
    ('PLUS',        r'\+'),
    ('MINUS',       r'-'),
    ('MUL',         r'\*'),
    ('DIV',         r'/'),

    ('MISMATCH',    r'(?s:.)'),
]

_TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in token_specification)
)
_WHITESPACE = re.compile(r'\s*')


class Lexer:
    """
    Pull-based tokenizer over a source string.
    """

    def __init__(self, code: str, file: str = "<input>"):
        """
        Initialize the lexer.

        Parameters:
            code (str): The source code to tokenize.
            file (str): The name of the script, used in error messages.
        """
        self.code = code
        self.file = file
        self.position = 0
        self.line = 1

    def has_more(self) -> bool:
        """
        Report whether a token other than EOF remains, without consuming input.
        """
        return _WHITESPACE.match(self.code, self.position).end() < len(self.code)

    def next_token(self) -> Token:
        """
        Consume and return the next token.

        Raises:
            LexerException: On a bad '!', an unterminated string or a number
                with a trailing '.'.
        """
        while self.position < len(self.code):
            match_obj = _TOKEN_REGEX.match(self.code, self.position)
            kind = match_obj.lastgroup
            value = match_obj.group()
            line = self.line

            self.position = match_obj.end()
            self.line += value.count('\n')

            if kind == 'SKIP':
                continue
            if kind == 'BAD_NUMBER':
                raise LexerException(f"Invalid number '{value}'", line, self.file)
            if kind == 'OPEN_STRING':
                raise LexerException("Unclosed string literal", line, self.file)
            if kind == 'BANG':
                raise LexerException("Invalid token '!' (expected '!=')", line, self.file)

            if kind == 'STRING':
                return Token(TokenKind.STRING, value[1:-1], line)
            if kind == 'WORD':
                return Token(KEYWORDS.get(value.upper(), TokenKind.IDENT), value, line)
            if kind == 'MISMATCH':
                return Token(TokenKind.ILLEGAL, value, line)
            return Token(TokenKind[kind], value, line)

        return Token(TokenKind.EOF, "", self.line)


def tokenize(code: str, file: str = "<input>") -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): The name of the script.

    Returns:
        list[Token]: The tokens, terminated by a single EOF token.

    Raises:
        LexerException: If a malformed lexeme is encountered.
    """
    lexer = Lexer(code, file)
    tokens = []
    while True:
        token = lexer.next_token()
        tokens.append(token)
        if token.kind == TokenKind.EOF:
            return tokens
