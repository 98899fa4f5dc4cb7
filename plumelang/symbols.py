"""Symbol resolution.

A single read-only pass over the program, run before anything executes. Every
``let`` registers its name in one flat table, including declarations nested
in ``if``/``elseif``/``else`` and ``while`` bodies, and every assignment
must name something already registered earlier in source order.

Identifiers read inside expressions are not checked here; the interpreter
catches reads of unassigned variables on its own.


File: symbols.py
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Optional

from plumelang.exceptions import UndeclaredVariableException
from plumelang.nodes import Assign, Clause, Declare, If, Program, While


@dataclass(frozen=True)
class Symbol:
    """A declared name and the line of its first declaration."""
    name: str
    line: int = 0


class SymbolTable:
    """Flat table of declared names."""

    def __init__(self, file: str = "<input>"):
        self.file = file
        self.symbols: dict[str, Symbol] = {}

    def __contains__(self, name: str) -> bool:
        """
        Return True if the name has been declared.
        """
        return name in self.symbols

    def define(self, name: str, line: int = 0) -> Symbol:
        """
        Register a name. Redeclaring keeps the first declaration.
        """
        return self.symbols.setdefault(name, Symbol(name, line))

    def lookup(self, name: str) -> Optional[Symbol]:
        """
        Return the symbol for a name, or None if it was never declared.
        """
        return self.symbols.get(name)

    def names(self) -> list[str]:
        """
        Declared names, in declaration order.
        """
        return list(self.symbols)

    def resolve(self, program: Program) -> 'SymbolTable':
        """
        Walk a program, registering declarations and checking assignments.

        Returns:
            SymbolTable: This table, for chaining.

        Raises:
            UndeclaredVariableException: If a variable is assigned before any
                'let' for it has been seen.
        """
        for stmt in program:
            match stmt:
                case Declare(name, _, line):
                    self.define(name, line)
                case Assign(name, _, line):
                    if self.lookup(name) is None:
                        raise UndeclaredVariableException(name, line, self.file)
                case If(chain):
                    self._resolve_chain(chain)
                case While(_, body):
                    self.resolve(body)
        return self

    def _resolve_chain(self, clause: Optional[Clause]) -> None:
        """
        Resolve the body of every clause in a conditional chain.
        """
        while clause is not None:
            self.resolve(clause.body)
            clause = clause.tail
