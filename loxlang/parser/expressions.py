"""
Expression parsing utilities for loxlang.

These functions operate on a `loxlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. Each precedence
level parses the next tighter level and then loops over its own
operators, which makes every binary level left-associative.


File: expressions.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.nodes import (
    Assign,
    Binary,
    Call,
    Expr,
    Grouping,
    Literal,
    Logical,
    Unary,
    Variable,
)

if TYPE_CHECKING:
    from loxlang.parser import Parser


MAX_ARGUMENTS = 255


# ---- Entry point ----

def parse_expression(parser: 'Parser') -> Expr:
    """Parse an expression starting from the lowest-precedence rule."""
    return parser.assignment()


def parse_assignment(parser: 'Parser') -> Expr:
    """
    Parse an assignment.

    Syntax:
        <identifier> = <assignment> | <logic_or>

    The target is parsed as an ordinary expression first; only a bare
    variable may stand left of '='. Anything else is reported without
    aborting the statement.
    """
    expr = parser.logic_or()

    if parser.match('ASSIGN'):
        equals = parser.previous()
        value = parser.assignment()
        if isinstance(expr, Variable):
            return Assign(expr.name, value)
        parser.error(equals, "Invalid assignment target.")

    return expr


def parse_logic_or(parser: 'Parser') -> Expr:
    """Parse logical OR expressions using the 'or' keyword."""
    expr = parser.logic_and()
    while parser.match('OR'):
        operator = parser.previous()
        expr = Logical(expr, operator, parser.logic_and())
    return expr


def parse_logic_and(parser: 'Parser') -> Expr:
    """Parse logical AND expressions using the 'and' keyword."""
    expr = parser.equality()
    while parser.match('AND'):
        operator = parser.previous()
        expr = Logical(expr, operator, parser.equality())
    return expr


def parse_equality(parser: 'Parser') -> Expr:
    """Parse equality expressions (==, !=)."""
    expr = parser.comparison()
    while parser.match('NE', 'EQ'):
        operator = parser.previous()
        expr = Binary(expr, operator, parser.comparison())
    return expr


def parse_comparison(parser: 'Parser') -> Expr:
    """Parse comparison expressions (<, >, <=, >=)."""
    expr = parser.term()
    while parser.match('GT', 'GE', 'LT', 'LE'):
        operator = parser.previous()
        expr = Binary(expr, operator, parser.term())
    return expr


def parse_term(parser: 'Parser') -> Expr:
    """Parse addition and subtraction expressions."""
    expr = parser.factor()
    while parser.match('MINUS', 'PLUS'):
        operator = parser.previous()
        expr = Binary(expr, operator, parser.factor())
    return expr


def parse_factor(parser: 'Parser') -> Expr:
    """Parse multiplication and division expressions."""
    expr = parser.unary()
    while parser.match('DIV', 'MUL'):
        operator = parser.previous()
        expr = Binary(expr, operator, parser.unary())
    return expr


def parse_unary(parser: 'Parser') -> Expr:
    """Parse prefix negation and logical not, which nest to the right."""
    if parser.match('BANG', 'MINUS'):
        operator = parser.previous()
        return Unary(operator, parser.unary())
    return parser.call()


def parse_call(parser: 'Parser') -> Expr:
    """
    Parse a call chain.

    Syntax:
        <primary> ( "(" <arguments>? ")" )*
    """
    expr = parser.primary()
    while parser.match('LPAREN'):
        expr = _finish_call(parser, expr)
    return expr


def _finish_call(parser: 'Parser', callee: Expr) -> Call:
    arguments = []
    if not parser.check('RPAREN'):
        while True:
            if len(arguments) == MAX_ARGUMENTS:
                parser.error(parser.curr_token, f"Can't have more than {MAX_ARGUMENTS} arguments.")
            arguments.append(parser.expression())
            if not parser.match('COMMA'):
                break
    paren = parser.eat('RPAREN', "Expect ')' after arguments.")
    return Call(callee, paren, tuple(arguments))


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Expr:
    """Parse a literal, variable, or parenthesized expression."""
    if parser.match('FALSE'):
        return Literal(False)
    if parser.match('TRUE'):
        return Literal(True)
    if parser.match('NULL'):
        return Literal(None)

    if parser.match('NUMBER', 'STRING'):
        return Literal(parser.previous().literal)

    if parser.match('ID'):
        return Variable(parser.previous())

    if parser.match('LPAREN'):
        expr = parser.expression()
        parser.eat('RPAREN', "Expect ')' after expression.")
        return Grouping(expr)

    raise parser.error(parser.curr_token, "Expect expression.")
