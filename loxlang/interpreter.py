"""Interpreter.

This is a tree-walk interpreter for the statement trees produced by the parser. It supports
arithmetic, string concatenation, variables, blocks, conditionals, loops, output statements,
and first-class functions with closures.

1. Execution Model
The interpreter evaluates the syntax tree in a top-down, recursive manner. Statements are
executed via `execute()`, and expressions are evaluated using `evaluate()`. Each is a single
`match` over the closed set of node classes in `loxlang.nodes`.

2. Environment
The interpreter holds `globals`, created once and seeded with native functions, and
`environment`, the scope currently executing. Blocks and calls swap `environment` for a
child scope in `execute_block()` and always restore it on the way out, errors included.

3. Expression Evaluation
Operands are evaluated left to right. Arithmetic and comparison operators require numbers;
`+` also joins two strings. Numeric results are rounded to single precision. `and`/`or`
short-circuit and yield an operand, not a boolean. Division by zero follows IEEE-754
instead of raising.

4. Control Flow
`execute()` returns None when a statement completes normally, or a `Returning` outcome
after a `return`. Blocks, `if` and `while` hand a `Returning` straight back to their caller
and the function call that ran the body turns it into the call's value.

5. Error Handling
Runtime errors, such as undefined variables, operands of the wrong type, calling something
that is not a function, or calling with the wrong number of arguments, are raised as
`LoxRuntimeError`. `interpret()` reports them and moves on to the next top-level statement.


File: interpreter.py
Version: 0.1.0
License: MIT
"""

import math
from typing import Any, Iterable

from loxlang.callables import LoxCallable, LoxFunction, NativeFunction, native_globals
from loxlang.diagnostics import Reporter
from loxlang.environment import Environment
from loxlang.exceptions import LoxRuntimeError
from loxlang.lexer import Token
from loxlang.nodes import (
    Assign,
    Binary,
    Block,
    Call,
    Expr,
    Expression,
    Function,
    Grouping,
    If,
    Literal,
    Logical,
    Print,
    Return,
    Stmt,
    Unary,
    Var,
    Variable,
    While,
)
from loxlang.values import Returning, is_number, is_truthy, stringify, to_f32, type_name


class Interpreter:
    """Tree-walk interpreter for loxlang."""

    def __init__(self, file: str = '<script>', reporter: Reporter | None = None):
        """Initialize the interpreter."""
        self.file = file
        self.reporter = reporter if reporter is not None else Reporter()
        self.globals = Environment()
        for native in native_globals():
            self.globals.define(native.name, native)
        self.environment = self.globals

    def interpret(self, statements: Iterable[Stmt]) -> bool:
        """
        Execute top-level statements in order.

        A runtime error abandons only the statement it occurred in; it is
        reported and execution continues with the next statement.

        Returns:
            bool: True if no runtime error occurred.
        """
        succeeded = True
        for stmt in statements:
            try:
                outcome = self.execute(stmt)
            except LoxRuntimeError as error:
                self.reporter.runtime_error(error)
                succeeded = False
                continue
            if isinstance(outcome, Returning):
                # Only reachable from hand-built trees; the parser rejects it.
                break
        return succeeded

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, stmt: Stmt) -> Returning | None:
        """
        Execute a single statement.

        Parameters:
            stmt (Stmt): The statement node.

        Returns:
            Returning | None: A `Returning` outcome if a `return` executed.

        Raises:
            LoxRuntimeError: If evaluating a contained expression fails.
        """
        match stmt:
            case Expression(expression):
                self.evaluate(expression)
            case Print(expression):
                value = self.evaluate(expression)
                print(stringify(value))
            case Var(name, initializer):
                value = None if initializer is None else self.evaluate(initializer)
                self.environment.define(name.lexeme, value)
            case Block(statements):
                return self.execute_block(statements, Environment(self.environment))
            case If(condition, then_branch, else_branch):
                if is_truthy(self.evaluate(condition)):
                    return self.execute(then_branch)
                if else_branch is not None:
                    return self.execute(else_branch)
            case While(condition, body):
                while is_truthy(self.evaluate(condition)):
                    outcome = self.execute(body)
                    if outcome is not None:
                        return outcome
            case Function(name):
                self.environment.define(name.lexeme, LoxFunction(stmt, self.environment))
            case Return(_, value):
                return Returning(None if value is None else self.evaluate(value))
            case _:
                raise TypeError(f"Unknown statement type: {type(stmt).__name__} in {self.file}")
        return None

    def execute_block(self, statements: Iterable[Stmt], environment: Environment) -> Returning | None:
        """
        Execute statements with `environment` as the current scope.

        Stops at the first `Returning` outcome and returns it. The previous
        scope is restored however the block is left.
        """
        previous = self.environment
        self.environment = environment
        try:
            for stmt in statements:
                outcome = self.execute(stmt)
                if outcome is not None:
                    return outcome
            return None
        finally:
            self.environment = previous

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def evaluate(self, expr: Expr) -> Any:
        """
        Recursively evaluate an expression node and return its computed value.

        Parameters:
            expr (Expr): The expression node.

        Returns:
            The evaluated value: a float, str, bool, None or callable.

        Raises:
            LoxRuntimeError: For undefined variables, operands of the wrong
                type, and bad calls.
        """
        match expr:
            case Literal(value):
                return value
            case Grouping(inner):
                return self.evaluate(inner)
            case Variable(name):
                return self.environment.get(name)
            case Assign(name, value_expr):
                value = self.evaluate(value_expr)
                self.environment.assign(name, value)
                return value
            case Logical(left_expr, operator, right_expr):
                left = self.evaluate(left_expr)
                if operator.type == 'OR':
                    if is_truthy(left):
                        return left
                elif not is_truthy(left):
                    return left
                return self.evaluate(right_expr)
            case Unary(operator, right_expr):
                right = self.evaluate(right_expr)
                if operator.type == 'BANG':
                    return not is_truthy(right)
                _check_number_operand(operator, right)
                return -right
            case Binary(left_expr, operator, right_expr):
                left = self.evaluate(left_expr)
                right = self.evaluate(right_expr)
                return _binary(operator, left, right)
            case Call():
                return self._call(expr)
        raise TypeError(f"Invalid expression node: {expr!r}")

    def _call(self, expr: Call) -> Any:
        callee = self.evaluate(expr.callee)
        arguments = [self.evaluate(argument) for argument in expr.arguments]

        if not isinstance(callee, LoxCallable):
            raise LoxRuntimeError(expr.paren, "Can only call functions.")
        if not isinstance(callee, NativeFunction) and len(arguments) != callee.arity():
            raise LoxRuntimeError(
                expr.paren,
                f"Expected {callee.arity()} arguments but got {len(arguments)}."
            )
        return callee.call(self, arguments)


def _binary(operator: Token, left: Any, right: Any) -> Any:
    """Apply a binary operator to two evaluated operands."""
    if operator.type == 'PLUS':
        if is_number(left) and is_number(right):
            return to_f32(left + right)
        if isinstance(left, str) and isinstance(right, str):
            return left + right
        raise LoxRuntimeError(
            operator,
            f"Unsupported types for +: {type_name(left)} and {type_name(right)}."
        )

    _check_number_operands(operator, left, right)
    match operator.type:
        # Arithmetic
        case 'MINUS':
            return to_f32(left - right)
        case 'MUL':
            return to_f32(left * right)
        case 'DIV':
            return to_f32(_divide(left, right))
        # Comparison
        case 'GT':
            return left > right
        case 'GE':
            return left >= right
        case 'LT':
            return left < right
        case 'LE':
            return left <= right
        case 'EQ':
            return left == right
        case 'NE':
            return left != right
    raise LoxRuntimeError(operator, f"Unknown binary operator '{operator.lexeme}'.")


def _divide(left: float, right: float) -> float:
    """IEEE-754 division; Python raises on a zero divisor instead."""
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _check_number_operand(operator: Token, operand: Any) -> None:
    if not is_number(operand):
        raise LoxRuntimeError(operator, "Operand must be a number.")


def _check_number_operands(operator: Token, left: Any, right: Any) -> None:
    if not (is_number(left) and is_number(right)):
        raise LoxRuntimeError(operator, "Operands must be numbers.")
