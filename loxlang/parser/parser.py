"""
Main parser entry point for loxlang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process and owns error recovery. The actual parsing
routines are split across `loxlang.parser.expressions` and
`loxlang.parser.statements`.


File: parser.py
Version: 0.1.0
License: MIT
"""

from loxlang.exceptions import LoxParseError
from loxlang.lexer import Token

from . import expressions as _expr
from . import statements as _stmt


# Tokens that begin a declaration or statement; recovery resumes at them.
SYNC_TOKENS = frozenset({
    'CLASS', 'FUNC', 'VAR', 'FOR', 'IF', 'WHILE', 'PRINT', 'RETURN',
})


class Parser:
    """loxlang parser."""

    def __init__(self, tokens: list[Token], file: str = '<script>', reporter=None):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): Token instances, the last of which is EOF.
            file (str): The name of the script.
            reporter (Reporter | None): Receives parse errors as they occur.
        """
        self.tokens = tokens
        self.position = 0
        self.curr_token = self.tokens[self.position]
        self.source_file = file
        self.reporter = reporter
        self.errors: list[LoxParseError] = []
        # Nesting depth of function bodies, for rejecting top-level return.
        self.function_depth = 0

    @property
    def had_error(self) -> bool:
        """
        Whether any parse error was reported.
        """
        return bool(self.errors)

    # Token navigation
    def is_at_end(self) -> bool:
        """
        Whether the current token is EOF.
        """
        return self.curr_token.type == 'EOF'

    def check(self, token_type: str) -> bool:
        """
        Whether the current token has the given type.
        """
        return self.curr_token.type == token_type

    def previous(self) -> Token:
        """
        Return the most recently consumed token.
        """
        return self.tokens[self.position - 1]

    def advance(self) -> Token:
        """
        Consume the current token and return it. Never moves past EOF.
        """
        if not self.is_at_end():
            self.position += 1
            self.curr_token = self.tokens[self.position]
        return self.previous()

    def match(self, *token_types: str) -> bool:
        """
        Consume the current token if it has any of the given types.
        """
        if self.curr_token.type in token_types:
            self.advance()
            return True
        return False

    def eat(self, token_type: str, message: str) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.
            message (str): Reported when the token does not match.

        Raises:
            LoxParseError: If the token does not match the expected type.
        """
        if self.check(token_type):
            return self.advance()
        raise self.error(self.curr_token, message)

    def error(self, token: Token, message: str) -> LoxParseError:
        """
        Report a parse error and return it.

        Callers raise the result when they cannot continue the current
        production; non-fatal problems are only reported.
        """
        error = LoxParseError(token, message, self.source_file)
        self.errors.append(error)
        if self.reporter is not None:
            self.reporter.error(token, message)
        return error

    def synchronize(self, start: int) -> None:
        """
        Discard tokens up to the next statement boundary.

        Parameters:
            start (int): Position the failed declaration started at. If
                nothing was consumed since, one token is skipped so the
                parser always makes progress.
        """
        if self.position == start:
            self.advance()
        while not self.is_at_end():
            if self.previous().type == 'SEMICOLON':
                return
            if self.curr_token.type in SYNC_TOKENS:
                return
            self.advance()

    # Expression wrappers
    def expression(self):
        """
        Parse a full expression.
        """
        return _expr.parse_expression(self)

    def assignment(self):
        """
        Parse a right-associative assignment.
        """
        return _expr.parse_assignment(self)

    def logic_or(self):
        """
        Parse a logical OR expression.
        """
        return _expr.parse_logic_or(self)

    def logic_and(self):
        """
        Parse a logical AND expression.
        """
        return _expr.parse_logic_and(self)

    def equality(self):
        """
        Parse an equality expression using '==' or '!='.
        """
        return _expr.parse_equality(self)

    def comparison(self):
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def term(self):
        """
        Parse an addition or subtraction expression.
        """
        return _expr.parse_term(self)

    def factor(self):
        """
        Parse a multiplication or division expression.
        """
        return _expr.parse_factor(self)

    def unary(self):
        """
        Parse a prefix '!' or '-' expression.
        """
        return _expr.parse_unary(self)

    def call(self):
        """
        Parse a primary expression followed by any number of calls.
        """
        return _expr.parse_call(self)

    def primary(self):
        """
        Parse a literal, variable, or parenthesized group.
        """
        return _expr.parse_primary(self)

    # Statement wrappers
    def declaration(self):
        """
        Parse a declaration, recovering from any parse error inside it.
        """
        return _stmt.parse_declaration(self)

    def var_declaration(self):
        """
        Parse a 'var' declaration.
        """
        return _stmt.parse_var_declaration(self)

    def function(self, kind: str):
        """
        Parse a function declaration after its 'fun' keyword.
        """
        return _stmt.parse_function(self, kind)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def for_statement(self):
        """
        Parse a 'for' loop and lower it to a 'while' loop.
        """
        return _stmt.parse_for(self)

    def if_statement(self):
        """
        Parse an 'if' conditional statement.
        """
        return _stmt.parse_if(self)

    def print_statement(self):
        """
        Parse a 'print' statement used for output.
        """
        return _stmt.parse_print(self)

    def return_statement(self):
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def while_statement(self):
        """
        Parse a 'while' loop.
        """
        return _stmt.parse_while(self)

    def block(self):
        """
        Parse the statements of a block after its opening brace.
        """
        return _stmt.parse_block(self)

    def expression_statement(self):
        """
        Parse an expression followed by a semicolon.
        """
        return _stmt.parse_expression_statement(self)

    def parse(self) -> list:
        """
        Parse the full input into a list of statements.

        Malformed declarations are reported and skipped; check
        :attr:`had_error` before interpreting the result.
        """
        statements = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements
