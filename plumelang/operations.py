"""Shared definitions for AST operator identifiers.

The parser labels arithmetic and comparison nodes with these members and the
interpreter dispatches on them, so the two cannot drift apart.


File: operations.py
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Operator(str, Enum):
    """
    Arithmetic operators. Unary nodes only ever carry ADD or SUB.
    """

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class Comparator(str, Enum):
    """
    Relational operators allowed in a condition.
    """

    EQ = "=="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


__all__ = ["Operator", "Comparator"]
