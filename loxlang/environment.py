"""Lexical environments for loxlang.

An environment maps variable names to values and links to the scope that
encloses it. Blocks and function calls create a child of the scope they
run in (for calls, of the function's closure), and function values keep a
reference to the environment they were defined in. Links only point from
child to parent, so chains are acyclic.


File: environment.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Any

from loxlang.exceptions import UndefinedVariableException
from loxlang.lexer import Token


class Environment:
    """A single scope in the environment chain."""

    def __init__(self, enclosing: Environment | None = None):
        self.values: dict[str, Any] = {}
        self.enclosing = enclosing

    def define(self, name: str, value: Any) -> None:
        """
        Bind ``name`` in this scope, replacing any existing local binding.
        """
        self.values[name] = value

    def get(self, name: Token) -> Any:
        """
        Look ``name`` up in this scope, then in the enclosing ones.

        Raises:
            UndefinedVariableException: If no scope in the chain binds it.
        """
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise UndefinedVariableException(name)

    def assign(self, name: Token, value: Any) -> None:
        """
        Overwrite the nearest existing binding of ``name``.

        Assignment never creates a binding.

        Raises:
            UndefinedVariableException: If no scope in the chain binds it.
        """
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.enclosing is not None:
            self.enclosing.assign(name, value)
            return
        raise UndefinedVariableException(name)

    def __repr__(self) -> str:
        depth = 0
        scope = self.enclosing
        while scope is not None:
            depth += 1
            scope = scope.enclosing
        return f"Environment({sorted(self.values)}, depth={depth})"
