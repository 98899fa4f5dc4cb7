"""
Expression parsing utilities for Plume.

These functions operate on a `plumelang.parser.Parser` instance and
implement the recursive descent logic for expressions and conditions.
Binary operators fold to the left, so ``8 - 3 - 2`` parses as
``(8 - 3) - 2``; ``*`` and ``/`` bind tighter than ``+`` and ``-``.

A string literal is a complete expression by itself and can't be combined
with any operator.


File: expressions.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from plumelang.lexer import TokenKind
from plumelang.nodes import (
    BinaryOp,
    Condition,
    Expression,
    Identifier,
    NumberLiteral,
    StringLiteral,
    UnaryOp,
)
from plumelang.operations import Comparator, Operator

if TYPE_CHECKING:
    from plumelang.parser import Parser


ADDITIVE = {
    TokenKind.PLUS: Operator.ADD,
    TokenKind.MINUS: Operator.SUB,
}

MULTIPLICATIVE = {
    TokenKind.MUL: Operator.MUL,
    TokenKind.DIV: Operator.DIV,
}

COMPARATORS = {
    TokenKind.EQ: Comparator.EQ,
    TokenKind.NE: Comparator.NE,
    TokenKind.GT: Comparator.GT,
    TokenKind.GE: Comparator.GE,
    TokenKind.LT: Comparator.LT,
    TokenKind.LE: Comparator.LE,
}


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Expression:
    """Parse a number literal or an identifier."""
    tok = parser.curr_token
    if tok.kind == TokenKind.NUMBER:
        parser.advance()
        return NumberLiteral(tok.text, tok.line)
    if tok.kind == TokenKind.IDENT:
        parser.advance()
        return Identifier(tok.text, tok.line)
    raise parser.error("a number or identifier")


def parse_unary(parser: 'Parser') -> Expression:
    """Parse a primary with an optional '+' or '-' sign."""
    tok = parser.curr_token
    if tok.kind in ADDITIVE:
        parser.advance()
        return UnaryOp(ADDITIVE[tok.kind], parser.primary(), tok.line)
    return parser.primary()


def parse_term(parser: 'Parser') -> Expression:
    """Parse multiplication and division expressions."""
    result = parser.unary()
    while parser.curr_token.kind in MULTIPLICATIVE:
        op_tok = parser.curr_token
        parser.advance()
        result = BinaryOp(result, MULTIPLICATIVE[op_tok.kind], parser.unary(), op_tok.line)
    return result


def parse_expr(parser: 'Parser') -> Expression:
    """Parse a string literal, or addition and subtraction expressions."""
    tok = parser.curr_token
    if tok.kind == TokenKind.STRING:
        parser.advance()
        return StringLiteral(tok.text, tok.line)

    result = parser.term()
    while parser.curr_token.kind in ADDITIVE:
        op_tok = parser.curr_token
        parser.advance()
        result = BinaryOp(result, ADDITIVE[op_tok.kind], parser.term(), op_tok.line)
    return result


def parse_condition(parser: 'Parser') -> Condition:
    """Parse ``expression comparator expression``."""
    line = parser.curr_token.line
    left = parser.expr()
    tok = parser.curr_token
    if tok.kind not in COMPARATORS:
        raise parser.error("a comparison operator")
    parser.advance()
    right = parser.expr()
    return Condition(left, COMPARATORS[tok.kind], right, line)
