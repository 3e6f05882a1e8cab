"""Statement parsing utilities for loxlang.

These functions operate on a `loxlang.parser.parser.Parser` instance and
handle the various statement forms in the language such as blocks,
conditionals, loops, and function definitions. ``for`` loops are lowered
here into ``while`` loops, so the interpreter never sees them.


File: statements.py
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from loxlang.exceptions import LoxParseError
from loxlang.nodes import (
    Block,
    Expression,
    Function,
    If,
    Literal,
    Print,
    Return,
    Stmt,
    Var,
    While,
)

if TYPE_CHECKING:
    from loxlang.parser import Parser


MAX_PARAMETERS = 255


def parse_declaration(parser: 'Parser') -> Stmt | None:
    """
    Parse a declaration.

    Syntax:
        fun <function> | <var_declaration> | <statement>

    Args:
        parser: The parser instance.

    Returns:
        Stmt | None: The declaration, or None if it was malformed. Errors
        have already been reported and the parser resynchronized.
    """
    start = parser.position
    try:
        if parser.match('FUNC'):
            return parser.function('function')
        if parser.match('VAR'):
            return parser.var_declaration()
        return parser.statement()
    except LoxParseError:
        parser.synchronize(start)
        return None


def parse_var_declaration(parser: 'Parser') -> Var:
    """
    Parse a `var` declaration.

    Syntax:
        var <identifier> ( = <expression> )? ;

    Args:
        parser: The parser instance.

    Returns:
        Var: the declaration; the initializer is None when omitted.
    """
    name = parser.eat('ID', "Expect variable name.")
    initializer = None
    if parser.match('ASSIGN'):
        initializer = parser.expression()
    parser.eat('SEMICOLON', "Expect ';' after variable declaration.")
    return Var(name, initializer)


def parse_function(parser: 'Parser', kind: str) -> Function:
    """
    Parse a function definition.

    Syntax:
        fun <name>(<params>) { <block> }

    Args:
        parser: The parser instance.
        kind: Describes the construct in error messages.

    Returns:
        Function: the function declaration.
    """
    name = parser.eat('ID', f"Expect {kind} name.")
    parser.eat('LPAREN', f"Expect '(' after {kind} name.")
    params = []
    if not parser.check('RPAREN'):
        while True:
            if len(params) == MAX_PARAMETERS:
                parser.error(parser.curr_token, f"Can't have more than {MAX_PARAMETERS} parameters.")
            params.append(parser.eat('ID', "Expect parameter name."))
            if not parser.match('COMMA'):
                break
    parser.eat('RPAREN', "Expect ')' after parameters.")

    parser.eat('LBRACE', f"Expect '{{' before {kind} body.")
    parser.function_depth += 1
    try:
        body = parser.block()
    finally:
        parser.function_depth -= 1
    return Function(name, tuple(params), tuple(body))


def parse_statement(parser: 'Parser') -> Stmt:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Stmt: representing the AST node.
    """
    if parser.match('FOR'):
        return parser.for_statement()
    if parser.match('IF'):
        return parser.if_statement()
    if parser.match('PRINT'):
        return parser.print_statement()
    if parser.match('RETURN'):
        return parser.return_statement()
    if parser.match('WHILE'):
        return parser.while_statement()
    if parser.match('LBRACE'):
        return Block(tuple(parser.block()))
    return parser.expression_statement()


def parse_for(parser: 'Parser') -> Stmt:
    """
    Parse a 'for' loop.

    Syntax:
        for ( <var_declaration> | <expression_statement> | ; <expression>? ; <expression>? ) <statement>

    The loop is lowered to::

        { <initializer> while (<condition> or true) { <body> <increment>; } }

    leaving out the parts that are absent.

    Args:
        parser: The parser instance.

    Returns:
        Stmt: the lowered loop.
    """
    parser.eat('LPAREN', "Expect '(' after 'for'.")

    if parser.match('SEMICOLON'):
        initializer = None
    elif parser.match('VAR'):
        initializer = parser.var_declaration()
    else:
        initializer = parser.expression_statement()

    condition = None
    if not parser.check('SEMICOLON'):
        condition = parser.expression()
    parser.eat('SEMICOLON', "Expect ';' after loop condition.")

    increment = None
    if not parser.check('RPAREN'):
        increment = parser.expression()
    parser.eat('RPAREN', "Expect ')' after for clauses.")

    body = parser.statement()

    if increment is not None:
        body = Block((body, Expression(increment)))
    if condition is None:
        condition = Literal(True)
    body = While(condition, body)
    if initializer is not None:
        body = Block((initializer, body))
    return body


def parse_if(parser: 'Parser') -> If:
    """
    Parse a conditional 'if' statement with an optional else branch.

    Syntax:
        if ( <condition> ) <statement> ( else <statement> )?

    An 'else' binds to the nearest preceding 'if'.

    Args:
        parser: The parser instance.

    Returns:
        If: representing the AST node.
    """
    parser.eat('LPAREN', "Expect '(' after 'if'.")
    condition = parser.expression()
    parser.eat('RPAREN', "Expect ')' after if condition.")

    then_branch = parser.statement()
    else_branch = None
    if parser.match('ELSE'):
        else_branch = parser.statement()
    return If(condition, then_branch, else_branch)


def parse_print(parser: 'Parser') -> Print:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression> ;
    """
    value = parser.expression()
    parser.eat('SEMICOLON', "Expect ';' after value.")
    return Print(value)


def parse_return(parser: 'Parser') -> Return:
    """
    Parse a 'return' statement.

    Syntax:
        return <expression>? ;

    A return outside any function body is reported, but parsing goes on.

    Args:
        parser: The parser instance.

    Returns:
        Return: representing the AST node.
    """
    keyword = parser.previous()
    if parser.function_depth == 0:
        parser.error(keyword, "Can't return from top-level code.")

    value = None
    if not parser.check('SEMICOLON'):
        value = parser.expression()
    parser.eat('SEMICOLON', "Expect ';' after return value.")
    return Return(keyword, value)


def parse_while(parser: 'Parser') -> While:
    """
    Parse a 'while' loop.

    Syntax:
        while ( <condition> ) <statement>
    """
    parser.eat('LPAREN', "Expect '(' after 'while'.")
    condition = parser.expression()
    parser.eat('RPAREN', "Expect ')' after condition.")
    return While(condition, parser.statement())


def parse_block(parser: 'Parser') -> list[Stmt]:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <declaration>* }

    The opening brace has already been consumed.

    Args:
        parser: The parser instance.

    Returns:
        list: the statements of the block.
    """
    statements = []
    while not parser.check('RBRACE') and not parser.is_at_end():
        stmt = parser.declaration()
        if stmt is not None:
            statements.append(stmt)
    parser.eat('RBRACE', "Expect '}' after block.")
    return statements


def parse_expression_statement(parser: 'Parser') -> Expression:
    """
    Parse an expression evaluated for its side effects.

    Syntax:
        <expression> ;
    """
    expr = parser.expression()
    parser.eat('SEMICOLON', "Expect ';' after expression.")
    return Expression(expr)
