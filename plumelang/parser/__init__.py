"""Parser package for Plume.

The parser is split into expression and statement modules to keep the
grammar readable. The :class:`Parser` class is exposed at the package level
for convenience.


File: __init__.py
Version: 0.1.0
License: MIT
"""

from .parser import Parser

__all__ = ["Parser"]
