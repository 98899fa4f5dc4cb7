"""
Plume Language Interpreter

This is the main entry point for the Plume language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer turns the source into tokens, pulled one at a time by the Parser.
3. The Parser builds the AST for the whole program.
4. The SymbolTable checks that every assignment targets a declared variable.
5. The Interpreter walks the AST, evaluating expressions and executing statements.

Any fault in any stage aborts the run before (or during) execution.

Set PLUMEDEBUG in the environment to dump tokens, the AST and the declared
symbols before the program runs.
"""
import os
import sys

from plumelang.interpreter import Interpreter
from plumelang.lexer import Lexer, tokenize
from plumelang.nodes import format_tree
from plumelang.parser import Parser
from plumelang.symbols import SymbolTable


def print_usage():
    """
    Print usage.
    """
    print()
    print("Plume Language Interpreter")
    print()
    print("Usage:")
    print("    plume <script.plm>")
    print()
    print("Arguments:")
    print("    <script.plm>")
    print("        Path to a Plume source file to execute.")
    print()
    print("Example:")
    print("    plume hello.plm")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print(tokens, ast, symbols):
    """
    Print tokenized source, AST and declared symbols
    """
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print("\nAST:\n")
    print(format_tree(ast))
    print("\nSymbols:\n")
    for name in symbols.names():
        print(name)
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a Plume script, returning the process exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()

        parser = Parser(Lexer(code, script_name))
        ast = parser.parse()

        symbols = SymbolTable(script_name).resolve(ast)

        if os.environ.get('PLUMEDEBUG'):
            debug_print(tokenize(code, script_name), ast, symbols)

        Interpreter(script_name, symbols).execute(ast)
    except Exception as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def entrypoint():
    """
    Console script hook.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    entrypoint()
