"""Syntax tree nodes for loxlang.

The node set is closed: expressions and statements are immutable
dataclasses, and the interpreter and printer dispatch on them with
``match``. Child sequences are tuples, so a tree never shares a mutable
list with another tree and function bodies can be kept by reference in
runtime function values.


File: nodes.py
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loxlang.lexer import Token


class Expr:
    """Base class for expression nodes."""

    __slots__ = ()


class Stmt:
    """Base class for statement nodes."""

    __slots__ = ()


# ------------------------------------------------------------------
# Expressions
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Literal(Expr):
    value: Any


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Logical(Expr):
    """Short-circuiting ``and``/``or``."""

    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Call(Expr):
    """A call; ``paren`` is the closing parenthesis, used for error lines."""

    callee: Expr
    paren: Token
    arguments: tuple[Expr, ...]


# ------------------------------------------------------------------
# Statements
# ------------------------------------------------------------------

@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Expr | None


@dataclass(frozen=True)
class Block(Stmt):
    statements: tuple[Stmt, ...]


@dataclass(frozen=True)
class If(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Stmt | None


@dataclass(frozen=True)
class While(Stmt):
    condition: Expr
    body: Stmt


@dataclass(frozen=True)
class Function(Stmt):
    name: Token
    params: tuple[Token, ...]
    body: tuple[Stmt, ...]


@dataclass(frozen=True)
class Return(Stmt):
    keyword: Token
    value: Expr | None
