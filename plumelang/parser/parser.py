"""
Main parser entry point for Plume.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The parser pulls tokens from a `Lexer` one at a
time and keeps a two-token window: the current token and one token of
lookahead. The actual parsing routines live in
`plumelang.parser.expressions` and `plumelang.parser.statements`.


File: parser.py
Version: 0.1.0
License: MIT
"""

from typing import Optional

from plumelang.lexer import LEXEMES, Lexer, Token, TokenKind
from plumelang.nodes import Clause, Condition, Expression, Program, Statement

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """Plume parser."""

    def __init__(self, lexer: Lexer, file: Optional[str] = None):
        """
        Initialize the parser over a lexer.

        Parameters:
            lexer (Lexer): The token source.
            file (str): The name of the script, defaults to the lexer's.
        """
        self.lexer = lexer
        self.source_file = file if file is not None else lexer.file
        self.curr_token = Token(TokenKind.ILLEGAL, "", 0)
        self.next_token = Token(TokenKind.ILLEGAL, "", 0)

    def advance(self) -> None:
        """
        Shift the window forward by one token.
        """
        self.curr_token = self.next_token
        self.next_token = self.lexer.next_token()

    def check(self, *token_kinds: TokenKind) -> bool:
        """
        Return True if the current token is any of the given kinds.
        """
        return self.curr_token.kind in token_kinds

    def eat(self, token_kind: TokenKind) -> Token:
        """
        Consume the current token if it matches the expected kind.

        Parameters:
            token_kind (TokenKind): The expected token kind.

        Returns:
            Token: The consumed token.

        Raises:
            SyntaxError: If the token does not match the expected kind.
        """
        tok = self.curr_token
        if tok.kind != token_kind:
            expd_value = LEXEMES.get(token_kind, token_kind.value)
            raise SyntaxError(
                f"Expected token '{expd_value}' of type {token_kind.value}, "
                f"but got value '{tok.text}' of type {tok.kind.value} "
                f"on line {tok.line} in {self.source_file}"
            )
        self.advance()
        return tok

    def error(self, expected: str) -> SyntaxError:
        """
        Build a syntax error for an unexpected current token.
        """
        tok = self.curr_token
        return SyntaxError(
            f"Expected {expected}, but got value '{tok.text}' of type {tok.kind.value} "
            f"on line {tok.line} in {self.source_file}"
        )


    # Expression wrappers
    def primary(self) -> Expression:
        """
        Parse a number literal or an identifier.
        """
        return _expr.parse_primary(self)

    def unary(self) -> Expression:
        """
        Parse a primary with an optional leading sign.
        """
        return _expr.parse_unary(self)

    def term(self) -> Expression:
        """
        Parse a term involving multiplication or division.
        """
        return _expr.parse_term(self)

    def expr(self) -> Expression:
        """
        Parse a string literal or an additive expression.
        """
        return _expr.parse_expr(self)

    def condition(self) -> Condition:
        """
        Parse a relational condition.
        """
        return _expr.parse_condition(self)


    # Statement wrappers
    def statement(self) -> Statement:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self, *terminators: TokenKind) -> Program:
        """
        Parse statements up to, but not including, one of the terminators.
        """
        return _stmt.parse_block(self, *terminators)

    def parse_print(self) -> Statement:
        """
        Parse a 'print' statement.
        """
        return _stmt.parse_print(self)

    def parse_let(self) -> Statement:
        """
        Parse a 'let' declaration.
        """
        return _stmt.parse_let(self)

    def parse_assignment(self) -> Statement:
        """
        Parse an assignment to an existing variable.
        """
        return _stmt.parse_assignment(self)

    def parse_if(self) -> Clause:
        """
        Parse an 'if', 'elseif' or 'else' clause and the rest of its chain.
        """
        return _stmt.parse_if(self)

    def parse_while(self) -> Statement:
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)


    def parse(self) -> Program:
        """
        Parse the full input into a program.

        Raises:
            SyntaxError: On the first grammar violation.
            LexerException: If the lexer meets a malformed lexeme.
        """
        # Prime both slots of the window.
        self.advance()
        self.advance()
        return self.block(TokenKind.EOF)
