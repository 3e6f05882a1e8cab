"""Lexer for loxlang.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, lexeme, literal value and source line number.

Tokens cover literals (numbers, strings, booleans, null), keywords (``var``,
``fun``, ``while`` …), operators and delimiters. ``//`` comments run to the
end of the line and are skipped. Characters that do not start any token and
unterminated strings are reported and skipped, so scanning always produces
a token list ending in ``EOF``.


File: lexer.py
Version: 0.1.0
License: MIT
"""

import re

from loxlang.values import to_f32


KEYWORDS = {
    'and': 'AND',
    'class': 'CLASS',
    'else': 'ELSE',
    'false': 'FALSE',
    'for': 'FOR',
    'fun': 'FUNC',
    'if': 'IF',
    'null': 'NULL',
    'or': 'OR',
    'print': 'PRINT',
    'return': 'RETURN',
    'super': 'SUPER',
    'this': 'THIS',
    'true': 'TRUE',
    'var': 'VAR',
    'while': 'WHILE',
}


class Token:
    """
    Represents a lexical token with a type, lexeme and optional literal.
    """
    def __init__(self, type_, lexeme, literal, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            lexeme (str): The source text of the token.
            literal (Any): The typed value for literal-bearing tokens.
            line (int): The line the token starts on.
        """
        self.type = type_
        self.lexeme = lexeme
        self.literal = literal
        self.line = line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.lexeme!r}, {self.literal!r}, line={self.line})"


TOKEN_SPECIFICATION = [
    # Literals
    ('NUMBER',       r'\d+(?:\.\d+)?'),
    ('STRING',       r'"[^"]*"'),
    ('UNTERMINATED', r'"[^"]*\Z'),

    # Identifiers and keywords
    ('ID',           r'[A-Za-z_][A-Za-z0-9_]*'),

    # Delimiters
    ('LPAREN',       r'\('),
    ('RPAREN',       r'\)'),
    ('LBRACE',       r'\{'),
    ('RBRACE',       r'\}'),
    ('COMMA',        r','),
    ('DOT',          r'\.'),
    ('SEMICOLON',    r';'),

    # Comments
    ('COMMENT',      r'//[^\n]*'),

    # Arithmetic operators
    ('PLUS',         r'\+'),
    ('MINUS',        r'-'),
    ('MUL',          r'\*'),
    ('DIV',          r'/'),

    # Comparison and assignment
    ('NE',           r'!='),
    ('EQ',           r'=='),
    ('GE',           r'>='),
    ('LE',           r'<='),
    ('BANG',         r'!'),
    ('ASSIGN',       r'='),
    ('GT',           r'>'),
    ('LT',           r'<'),

    # Miscellaneous
    ('NEWLINE',      r'\n'),
    ('SKIP',         r'[ \t\r]+'),
    ('MISMATCH',     r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


def tokenize(code: str, reporter=None) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        reporter (Reporter | None): Receives lexical errors. When omitted,
            lexical errors raise instead.

    Returns:
        list[Token]: A list of Token instances terminated by an EOF token.

    Raises:
        SyntaxError: On a lexical error when no reporter is given.
    """
    tokens = []
    line_num = 1

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() - code.rfind('\n', 0, match_obj.start())

        if kind == 'NEWLINE':
            line_num += 1
            continue
        if kind in ('SKIP', 'COMMENT'):
            continue
        if kind == 'MISMATCH':
            _lex_error(reporter, line_num, column, f"Unexpected character '{value}'.")
            continue
        if kind == 'UNTERMINATED':
            _lex_error(reporter, line_num, column, "Unterminated string.")
            line_num += value.count('\n')
            continue

        if kind == 'NUMBER':
            tokens.append(Token('NUMBER', value, to_f32(float(value)), line_num))
        elif kind == 'STRING':
            # A string token is reported on the line it starts on
            tokens.append(Token('STRING', value, value[1:-1], line_num))
            line_num += value.count('\n')
        elif kind == 'ID':
            type_ = KEYWORDS.get(value, 'ID')
            literal = {'TRUE': True, 'FALSE': False}.get(type_)
            tokens.append(Token(type_, value, literal, line_num))
        else:
            tokens.append(Token(kind, value, None, line_num))

    tokens.append(Token('EOF', '', None, line_num))
    return tokens


def _lex_error(reporter, line, column, message):
    if reporter is None:
        raise SyntaxError(f"{message} on line {line}")
    reporter.report(line, column, f"Error: {message}")
