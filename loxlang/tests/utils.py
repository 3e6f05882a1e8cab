"""
Utility functions shared across loxlang tests.
"""
from loxlang.diagnostics import Reporter
from loxlang.interpreter import Interpreter
from loxlang.lexer import Token, tokenize
from loxlang.parser import Parser


def token(type_: str, lexeme: str, line: int = 1) -> Token:
    """
    Build a token without scanning source.
    """
    return Token(type_, lexeme, None, line)


def parse_with_parser(source: str) -> tuple[list, Parser]:
    """
    Parse source code and return the statements along with the parser,
    so tests can inspect reported errors.
    """
    reporter = Reporter(echo=False)
    parser = Parser(tokenize(source, reporter), '<test>', reporter)
    return parser.parse(), parser


def parse_source(source: str) -> list:
    """
    Parse source code that is expected to be well formed.
    """
    statements, parser = parse_with_parser(source)
    assert not parser.errors, [error.message for error in parser.errors]
    return statements


def run_source(source: str) -> tuple[Interpreter, Reporter]:
    """
    Parse and interpret source code, returning the interpreter and the
    reporter that collected any runtime errors.
    """
    statements = parse_source(source)
    reporter = Reporter(echo=False)
    interpreter = Interpreter('<test>', reporter)
    interpreter.interpret(statements)
    return interpreter, reporter


def messages(reporter: Reporter) -> list[str]:
    """
    Return the text of every diagnostic the reporter collected.
    """
    return [diagnostic.message for diagnostic in reporter.diagnostics]
