"""Interpreter.

This is a tree-walk interpreter for evaluating the AST produced by the parser.

1. Execution Model
Statements are executed in order via `execute()`, expressions are evaluated via
`eval_expr()` and conditions via `eval_condition()`. Nested `if`/`while` bodies
are executed recursively.

2. Environment
The interpreter keeps one flat dictionary `vars` mapping variable names to their
current value. There is no block scope: a `let` inside a loop body stays visible
after the loop. Every value is stored as text, whether it came from a string or
a number literal.

3. Declarations
Writes are checked against the `SymbolTable` built by the resolver before the
program runs; reads are checked against `vars`. The two can disagree: a name can
be declared (further down, or in a branch not yet taken) yet still unassigned.

4. Expression Evaluation
Literals evaluate to their text verbatim. Arithmetic and comparisons parse their
operands as single-precision numbers and format arithmetic results back to text,
see `plumelang.floats`. Unary minus negates, unary plus returns the operand's
numeric value.

5. Error Handling
Every runtime fault is raised as a typed exception with the line and file
attached, and aborts the run.


File: interpreter.py
Version: 0.1.0
License: MIT
"""

from typing import Optional

from plumelang import floats
from plumelang.exceptions import (
    InvalidNumberException,
    UndeclaredVariableException,
    UndefinedVariableException,
    UnknownOpException,
)
from plumelang.nodes import (
    Assign,
    BinaryOp,
    Clause,
    ClauseKind,
    Condition,
    Declare,
    Expression,
    Identifier,
    If,
    NumberLiteral,
    Print,
    Program,
    StringLiteral,
    UnaryOp,
    While,
)
from plumelang.operations import Comparator, Operator
from plumelang.symbols import SymbolTable


class Interpreter:
    """Tree-walk interpreter for Plume."""

    def __init__(self, file: str, symbols: Optional[SymbolTable] = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The name of the script, used in error messages.
            symbols (SymbolTable): Declarations gathered by the resolver. A fresh
                table is created when omitted; `run()` fills it.
        """
        self.vars: dict[str, str] = {}
        self.file = file
        self.symbols = symbols if symbols is not None else SymbolTable(file)

    def run(self, program: Program) -> None:
        """
        Resolve declarations, then execute the program.
        """
        self.symbols.resolve(program)
        self.execute(program)

    def to_number(self, text: str, line: int) -> float:
        """
        Parse a value for arithmetic or comparison.

        Raises:
            InvalidNumberException: If the text is not numeric.
        """
        try:
            return floats.parse_number(text)
        except ValueError:
            raise InvalidNumberException(text, line, self.file) from None

    def eval_expr(self, node: Expression) -> str:
        """
        Recursively evaluate an expression node and return its value as text.

        Raises:
            UndefinedVariableException: If a variable is read before assignment.
            InvalidNumberException: If arithmetic meets non-numeric text.
            UnknownOpException: If an unrecognized operator is encountered.
        """
        match node:
            case StringLiteral(text) | NumberLiteral(text):
                return text

            case Identifier(name, line):
                if name in self.vars:
                    return self.vars[name]
                raise UndefinedVariableException(name, line, self.file)

            case BinaryOp():
                return self.eval_binary(node)

            case UnaryOp(op, operand, line):
                value = self.to_number(self.eval_expr(operand), line)
                match op:
                    case Operator.ADD:
                        return floats.format_number(value)
                    case Operator.SUB:
                        return floats.format_number(-value)
                    case _:
                        raise UnknownOpException(op, line, self.file)

        raise RuntimeError(f"Invalid expression node: {node!r}")

    def eval_binary(self, node: BinaryOp) -> str:
        """
        Evaluate a chain of binary operations and return the result as text.

        Left-associative chains nest one level per operator down the left
        side, so the left spine is collected with a loop, its leftmost operand
        evaluated, and the operators then applied from the innermost outwards.

        Raises:
            InvalidNumberException: If an operand is not numeric.
            UnknownOpException: If an unrecognized operator is encountered.
        """
        spine = []
        while isinstance(node, BinaryOp):
            spine.append(node)
            node = node.left
        value = self.eval_expr(node)

        for binary in reversed(spine):
            lhs = self.to_number(value, binary.line)
            rhs = self.to_number(self.eval_expr(binary.right), binary.line)
            match binary.op:
                case Operator.ADD:
                    term = floats.add(lhs, rhs)
                case Operator.SUB:
                    term = floats.sub(lhs, rhs)
                case Operator.MUL:
                    term = floats.mul(lhs, rhs)
                case Operator.DIV:
                    term = floats.div(lhs, rhs)
                case _:
                    raise UnknownOpException(binary.op, binary.line, self.file)
            value = floats.format_number(term)
        return value

    def eval_condition(self, condition: Condition) -> bool:
        """
        Evaluate both sides numerically and compare them.
        """
        line = condition.line
        lhs = self.to_number(self.eval_expr(condition.left), line)
        rhs = self.to_number(self.eval_expr(condition.right), line)
        match condition.comparator:
            case Comparator.EQ:
                return lhs == rhs
            case Comparator.NE:
                return lhs != rhs
            case Comparator.GT:
                return lhs > rhs
            case Comparator.GE:
                return lhs >= rhs
            case Comparator.LT:
                return lhs < rhs
            case Comparator.LE:
                return lhs <= rhs
        raise UnknownOpException(condition.comparator, line, self.file)

    def store(self, name: str, value: str, line: int) -> None:
        """
        Write a variable, provided the resolver saw a declaration for it.

        Raises:
            UndeclaredVariableException: If the name was never declared.
        """
        if self.symbols.lookup(name) is None:
            raise UndeclaredVariableException(name, line, self.file)
        self.vars[name] = value

    def execute_chain(self, clause: Optional[Clause]) -> None:
        """
        Run the first clause of a conditional chain whose test passes.
        """
        while clause is not None:
            if clause.kind == ClauseKind.ELSE or self.eval_condition(clause.condition):
                self.execute(clause.body)
                return
            clause = clause.tail

    def execute(self, statements: Program) -> None:
        """
        Executes a sequence of statements.

        Raises:
            TypeError: For unknown statement types.
        """
        for stmt in statements:
            match stmt:
                case Print(expr_node):
                    print(self.eval_expr(expr_node))

                case Declare(name, expr_node, line) | Assign(name, expr_node, line):
                    self.store(name, self.eval_expr(expr_node), line)

                case If(chain):
                    self.execute_chain(chain)

                case While(cond_node, body):
                    while self.eval_condition(cond_node):
                        self.execute(body)

                case _:
                    raise TypeError(f"Unknown statement type: {stmt!r} in {self.file}")
