"""Callable values for loxlang.

User-defined functions pair a function declaration with the environment
it was defined in. Native functions wrap a host procedure. Both satisfy
:class:`LoxCallable`, which is all the interpreter needs to make a call.


File: callables.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

from loxlang.environment import Environment
from loxlang.values import Returning, to_f32

if TYPE_CHECKING:
    from loxlang.interpreter import Interpreter
    from loxlang.nodes import Function


class LoxCallable(ABC):
    """Anything that can appear as the callee of a call expression."""

    @abstractmethod
    def arity(self) -> int:
        """Number of arguments the callable expects."""

    @abstractmethod
    def call(self, interpreter: Interpreter, arguments: list[Any]) -> Any:
        """Invoke the callable and return its result."""


class LoxFunction(LoxCallable):
    """Runtime representation of a user-defined function."""

    def __init__(self, declaration: Function, closure: Environment):
        self.name = declaration.name
        self.params = declaration.params
        self.body = declaration.body
        self.closure = closure

    def arity(self) -> int:
        return len(self.params)

    def call(self, interpreter: Interpreter, arguments: list[Any]) -> Any:
        """
        Run the body in a fresh scope whose parent is the closure.

        The caller has already checked the argument count.
        """
        environment = Environment(self.closure)
        for param, argument in zip(self.params, arguments):
            environment.define(param.lexeme, argument)

        outcome = interpreter.execute_block(self.body, environment)
        if isinstance(outcome, Returning):
            return outcome.value
        return None

    def __str__(self) -> str:
        return f"<fn {self.name.lexeme}>"

    __repr__ = __str__


class NativeFunction(LoxCallable):
    """A function provided by the host rather than written in loxlang."""

    def __init__(self, name: str, function: Callable[[Interpreter, list[Any]], Any]):
        self.name = name
        self.function = function

    def arity(self) -> int:
        # Not enforced at call sites.
        return 0

    def call(self, interpreter: Interpreter, arguments: list[Any]) -> Any:
        return self.function(interpreter, arguments)

    def __str__(self) -> str:
        return f"<native fn {self.name}>"

    __repr__ = __str__


def _clock(_interpreter, _arguments) -> float:
    return to_f32(float(time.time_ns() // 1_000_000))


def _input(_interpreter, _arguments) -> str:
    line = sys.stdin.readline()
    if line.endswith('\n'):
        line = line[:-1]
    return line


def native_globals() -> list[NativeFunction]:
    """
    Native functions every interpreter seeds its globals with.

    Returns:
        list[NativeFunction]: ``clock`` (milliseconds since the epoch) and
        ``input`` (one line of standard input, newline stripped).
    """
    return [
        NativeFunction('clock', _clock),
        NativeFunction('input', _input),
    ]
