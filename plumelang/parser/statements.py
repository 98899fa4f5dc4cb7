"""
Statement parsing utilities for Plume.

These functions operate on a `plumelang.parser.Parser` instance and
handle the statement forms of the language: output, declaration,
assignment, conditional chains and loops.


File: statements.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from plumelang.lexer import TokenKind
from plumelang.nodes import (
    Assign,
    Clause,
    ClauseKind,
    Declare,
    If,
    Print,
    Program,
    Statement,
    While,
)

if TYPE_CHECKING:
    from plumelang.parser import Parser


CLAUSE_KINDS = {
    TokenKind.IF: ClauseKind.IF,
    TokenKind.ELSEIF: ClauseKind.ELSEIF,
    TokenKind.ELSE: ClauseKind.ELSE,
}


def parse_block(parser: 'Parser', *terminators: TokenKind) -> Program:
    """
    Parse statements until one of the terminators is the current token.

    The terminator itself is left for the caller to consume.

    Args:
        parser: The parser instance.
        terminators: Token kinds that close the block.

    Returns:
        Program: The statements read.
    """
    statements = []
    while not parser.check(*terminators):
        statements.append(parser.statement())
    return Program(tuple(statements))


def parse_statement(parser: 'Parser') -> Statement:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Statement: The AST node.
    """
    tok = parser.curr_token
    if tok.kind == TokenKind.PRINT:
        return parser.parse_print()
    elif tok.kind == TokenKind.LET:
        return parser.parse_let()
    elif tok.kind == TokenKind.IDENT:
        return parser.parse_assignment()
    elif tok.kind == TokenKind.IF:
        return If(parser.parse_if(), tok.line)
    elif tok.kind == TokenKind.WHILE:
        return parser.parse_while()
    else:
        raise SyntaxError(
            f"Unexpected token '{tok.text}' of type {tok.kind.value} "
            f"on line {tok.line} "
            f"in {parser.source_file}"
        )


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression>;
    """
    tok = parser.eat(TokenKind.PRINT)
    expr_node = parser.expr()
    parser.eat(TokenKind.SEMICOLON)
    return Print(expr_node, tok.line)


def parse_let(parser: 'Parser') -> Declare:
    """
    Parse a variable declaration.

    Syntax:
        let <name> = <expression>;
    """
    tok = parser.eat(TokenKind.LET)
    name = parser.eat(TokenKind.IDENT).text
    parser.eat(TokenKind.ASSIGN)
    expr_node = parser.expr()
    parser.eat(TokenKind.SEMICOLON)
    return Declare(name, expr_node, tok.line)


def parse_assignment(parser: 'Parser') -> Assign:
    """
    Parse an assignment to a declared variable.

    Syntax:
        <name> = <expression>;
    """
    tok = parser.eat(TokenKind.IDENT)
    parser.eat(TokenKind.ASSIGN)
    expr_node = parser.expr()
    parser.eat(TokenKind.SEMICOLON)
    return Assign(tok.text, expr_node, tok.line)


def parse_if(parser: 'Parser') -> Clause:
    """
    Parse one clause of a conditional chain and, recursively, its tail.

    Syntax:
        if <condition> then <statements>
        [elseif <condition> then <statements>]...
        [else <statements>]
        end

    Only the leading 'if' clause consumes the closing 'end'; the clauses
    in its tail stop in front of it. An 'else' clause must be the last
    link of the chain.

    Args:
        parser: The parser instance.

    Returns:
        Clause: The head of the (remaining) chain.
    """
    tok = parser.curr_token
    kind = CLAUSE_KINDS[tok.kind]
    parser.advance()

    condition = None
    if kind != ClauseKind.ELSE:
        condition = parser.condition()
        parser.eat(TokenKind.THEN)

    body = parser.block(TokenKind.END, TokenKind.ELSEIF, TokenKind.ELSE)

    tail = None
    if parser.check(TokenKind.ELSEIF, TokenKind.ELSE):
        if kind == ClauseKind.ELSE:
            nxt = parser.curr_token
            raise SyntaxError(
                f"Unexpected '{nxt.text}' after 'else' clause "
                f"on line {nxt.line} in {parser.source_file}"
            )
        tail = parser.parse_if()

    if kind == ClauseKind.IF:
        parser.eat(TokenKind.END)

    return Clause(kind, condition, body, tail, tok.line)


def parse_while(parser: 'Parser') -> While:
    """
    Parse a 'while' loop.

    Syntax:
        while <condition> then <statements> end
    """
    tok = parser.eat(TokenKind.WHILE)
    condition = parser.condition()
    parser.eat(TokenKind.THEN)
    body = parser.block(TokenKind.END)
    parser.eat(TokenKind.END)
    return While(condition, body, tok.line)
