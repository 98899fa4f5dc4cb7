"""AST node types for Plume.

The parser builds one tree per run and nothing mutates it afterwards, so all
nodes are frozen dataclasses. Each node owns its children outright. Source
lines ride along for error messages but take no part in equality.

An ``if``/``elseif``/``else`` statement is a singly linked chain of
:class:`Clause` links rather than a class hierarchy: every link carries its
kind, a condition (absent only on the terminal ``else``), a body and the
optional next link.


File: nodes.py
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from plumelang.operations import Comparator, Operator


def _line():
    """Source line field, ignored by equality."""
    return field(default=0, compare=False)


# ---- Expressions ----

@dataclass(frozen=True)
class StringLiteral:
    """String literal, quotes stripped."""
    text: str
    line: int = _line()


@dataclass(frozen=True)
class NumberLiteral:
    """Number kept as its source text until arithmetic needs it."""
    text: str
    line: int = _line()


@dataclass(frozen=True)
class Identifier:
    """Variable reference."""
    name: str
    line: int = _line()


@dataclass(frozen=True)
class BinaryOp:
    """Arithmetic on two operands."""
    left: 'Expression'
    op: Operator
    right: 'Expression'
    line: int = _line()


@dataclass(frozen=True)
class UnaryOp:
    """Sign applied to a single operand."""
    op: Operator
    operand: 'Expression'
    line: int = _line()


Literal = Union[StringLiteral, NumberLiteral]
Expression = Union[Literal, Identifier, BinaryOp, UnaryOp]


@dataclass(frozen=True)
class Condition:
    """Comparison between two expressions."""
    left: Expression
    comparator: Comparator
    right: Expression
    line: int = _line()


# ---- Statements ----

@dataclass(frozen=True)
class Program:
    """Ordered, flat sequence of statements."""
    statements: tuple['Statement', ...] = ()

    def __iter__(self) -> Iterator['Statement']:
        return iter(self.statements)

    def __len__(self) -> int:
        return len(self.statements)

    def __getitem__(self, index: int) -> 'Statement':
        return self.statements[index]


@dataclass(frozen=True)
class Print:
    """Output one line."""
    expr: Expression
    line: int = _line()


@dataclass(frozen=True)
class Declare:
    """`let` declaration with its initial value."""
    name: str
    expr: Expression
    line: int = _line()


@dataclass(frozen=True)
class Assign:
    """Assignment to a declared variable."""
    name: str
    expr: Expression
    line: int = _line()


class ClauseKind(str, Enum):
    """Which keyword opened a clause."""
    IF = "if"
    ELSEIF = "elseif"
    ELSE = "else"


@dataclass(frozen=True)
class Clause:
    """One link of an if/elseif/else chain."""
    kind: ClauseKind
    condition: Optional[Condition]
    body: Program
    tail: Optional['Clause'] = None
    line: int = _line()


@dataclass(frozen=True)
class If:
    """Conditional statement holding the head of its chain."""
    chain: Clause
    line: int = _line()


@dataclass(frozen=True)
class While:
    """Loop re-testing its condition before every pass."""
    condition: Condition
    body: Program
    line: int = _line()


Statement = Union[Print, Declare, Assign, If, While]


# ---- Debug output ----

def format_tree(program: Program) -> str:
    """
    Render a program as an indented outline, two spaces per nesting level.

    The walk keeps its own stack, so long operator chains (which nest one
    level per operator) do not exhaust the interpreter's call depth.

    Parameters:
        program (Program): The parsed program.

    Returns:
        str: One node per line, e.g. ``block`` / ``  print`` / ``    hello``.
    """
    lines = []
    stack = [(program, 0)]
    while stack:
        node, level = stack.pop()
        label, children = _outline(node)
        if label is None:
            child_level = level
        else:
            lines.append('  ' * level + label)
            child_level = level + 1
        stack.extend((child, child_level) for child in reversed(children))
    return '\n'.join(lines)


def _outline(node) -> tuple[Optional[str], list]:
    """Label of a node and the children printed beneath it."""
    match node:
        case str():
            return node, []
        case Program(statements):
            return 'block', list(statements)
        case Print(expr):
            return 'print', [expr]
        case Declare(name, expr):
            return 'let', [name, expr]
        case Assign(name, expr):
            return 'assign', [name, expr]
        case If(chain):
            return None, [chain]
        case Clause(kind, condition, body, tail):
            return kind.value, [c for c in (condition, body, tail) if c is not None]
        case While(condition, body):
            return 'while', [condition, body]
        case Condition(left, comparator, right):
            return comparator.value, [left, right]
        case BinaryOp(left, op, right):
            return op.value, [left, right]
        case UnaryOp(op, operand):
            return op.value, [operand]
        case StringLiteral(text) | NumberLiteral(text):
            return text, []
        case Identifier(name):
            return name, []
    raise TypeError(f"Unknown AST node: {node!r}")
