"""Errors.

Every fault in Plume is fatal: the lexer, parser, resolver and interpreter
raise one of these and nothing downstream tries to recover.


File: exceptions.py
Version: 0.1.0
License: MIT
"""


def _located(message, line=None, file=None):
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class LexerException(Exception):
    """
    Error for malformed lexemes (bad '!', unterminated string, bad number).
    """
    def __init__(self, reason, line=None, file=None):
        self.reason = reason
        self.line = line
        super().__init__(_located(reason, line, file))


class UndeclaredVariableException(Exception):
    """
    Error for writes to a variable that was never declared with 'let'.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        self.line = line
        message = f"Variable '{varname}' assigned before declaration"
        super().__init__(_located(message, line, file))


class UndefinedVariableException(Exception):
    """
    Error for variables read before they hold a value.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        self.line = line
        message = f"Variable '{varname}' used before assignment"
        super().__init__(_located(message, line, file))


class InvalidNumberException(Exception):
    """
    Error for non-numeric text reaching arithmetic or a comparison.
    """
    def __init__(self, text, line=None, file=None):
        self.text = text
        self.line = line
        message = f"Invalid number '{text}'"
        super().__init__(_located(message, line, file))


class UnknownOpException(Exception):
    """
    Error for unknown operations.
    """
    def __init__(self, op, line=None, file=None):
        self.op = op
        self.line = line
        message = f"Unknown operation '{op}'"
        super().__init__(_located(message, line, file))
