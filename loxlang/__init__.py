"""loxlang: a tree-walking interpreter for a small Lox-style scripting language.

Source text flows through :func:`loxlang.lexer.tokenize`, the recursive
descent :class:`loxlang.parser.Parser`, and finally the
:class:`loxlang.interpreter.Interpreter`.


File: __init__.py
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
