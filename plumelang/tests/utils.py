"""
Utility functions shared across Plume Language tests.
"""
from pathlib import Path
import sys

from plumelang.interpreter import Interpreter
from plumelang.lexer import Lexer
from plumelang.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    parser = Parser(Lexer(source, "<test>"))
    return parser.parse()


def run_source(source: str) -> Interpreter:
    """
    Parse, resolve and run source code and return the interpreter instance.
    """
    ast = parse_source(source)
    interpreter = Interpreter("<test>")
    interpreter.run(ast)
    return interpreter
