"""AST printer for loxlang.

Renders syntax trees as parenthesized prefix forms, which makes grouping
and precedence explicit::

    1 - 2 * 3 + 4   ->   (+ (- 1 (* 2 3)) 4)

Used by the CLI's debug dump and by the parser tests.


File: printer.py
Version: 0.1.0
License: MIT
"""

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
from loxlang.values import stringify


def _parenthesize(name: str, *parts: str) -> str:
    return "(" + " ".join((name, *parts)) + ")"


def format_expr(node: Expr) -> str:
    """
    Convert an expression back to a readable string for debugging.

    Args:
        node (Expr): An expression node.

    Returns:
        str: A string representation of the expression.
    """
    match node:
        case Literal(value):
            return f'"{value}"' if isinstance(value, str) else stringify(value)
        case Variable(name):
            return name.lexeme
        case Assign(name, value):
            return _parenthesize("=", name.lexeme, format_expr(value))
        case Grouping(inner):
            return _parenthesize("group", format_expr(inner))
        case Unary(operator, right):
            return _parenthesize(operator.lexeme, format_expr(right))
        case Binary(left, operator, right) | Logical(left, operator, right):
            return _parenthesize(operator.lexeme, format_expr(left), format_expr(right))
        case Call(callee, _, arguments):
            return _parenthesize("call", format_expr(callee), *(format_expr(a) for a in arguments))
        case _:
            return f"<expr {type(node).__name__}>"


def format_stmt(node: Stmt) -> str:
    """
    Convert a statement back to a readable string for debugging.
    """
    match node:
        case Expression(expression):
            return _parenthesize("expr", format_expr(expression))
        case Print(expression):
            return _parenthesize("print", format_expr(expression))
        case Var(name, None):
            return _parenthesize("var", name.lexeme)
        case Var(name, initializer):
            return _parenthesize("var", name.lexeme, format_expr(initializer))
        case Block(statements):
            return _parenthesize("block", *(format_stmt(s) for s in statements))
        case If(condition, then_branch, None):
            return _parenthesize("if", format_expr(condition), format_stmt(then_branch))
        case If(condition, then_branch, else_branch):
            return _parenthesize(
                "if", format_expr(condition), format_stmt(then_branch), format_stmt(else_branch)
            )
        case While(condition, body):
            return _parenthesize("while", format_expr(condition), format_stmt(body))
        case Function(name, params, body):
            params_text = "(" + " ".join(p.lexeme for p in params) + ")"
            return _parenthesize("fun", name.lexeme, params_text, *(format_stmt(s) for s in body))
        case Return(_, None):
            return "(return)"
        case Return(_, value):
            return _parenthesize("return", format_expr(value))
        case _:
            return f"<stmt {type(node).__name__}>"
