"""
Tests for runtime error handling in loxlang
"""
from loxlang.diagnostics import Diagnostic, Reporter
from loxlang.interpreter import Interpreter
from loxlang.nodes import Literal, Print, Return

from loxlang.tests.utils import messages, parse_source, run_source, token


def test_failed_statement_prints_nothing_and_next_runs(capsys):
    """
    Test that a runtime error abandons only its own statement.
    """
    statements = parse_source("print 1; print nope; print 3;")
    reporter = Reporter(echo=False)
    succeeded = Interpreter('<test>', reporter).interpret(statements)
    assert capsys.readouterr().out.strip().splitlines() == ['1', '3']
    assert succeeded is False
    assert messages(reporter) == ["Runtime error: Undefined variable 'nope'."]


def test_successful_run_returns_true(capsys):
    """
    Test the success result of interpret.
    """
    statements = parse_source('print "ok";')
    assert Interpreter('<test>').interpret(statements) is True
    assert capsys.readouterr().out == 'ok\n'


def test_partial_argument_evaluation_is_not_printed(capsys):
    """
    Test that output already produced stays, but the failed print does not happen.
    """
    source = (
        "fun trace(v) { print v; return v; }\n"
        "print trace(1) + trace(\"two\");\n"
    )
    _, reporter = run_source(source)
    assert capsys.readouterr().out.strip().splitlines() == ['1', 'two']
    assert reporter.diagnostics[0].line == 2


def test_error_inside_function_restores_scope(capsys):
    """
    Test that an error deep in a call unwinds to the global scope.
    """
    interpreter, reporter = run_source(
        "fun f() { var local = 1; return nope; }\n"
        "f();\n"
        "print local;\n"
    )
    assert capsys.readouterr().out == ''
    assert messages(reporter) == [
        "Runtime error: Undefined variable 'nope'.",
        "Runtime error: Undefined variable 'local'.",
    ]
    assert interpreter.environment is interpreter.globals


def test_top_level_return_in_built_tree_ends_program(capsys):
    """
    Test the fallback for a return the parser would have rejected.
    """
    statements = [
        Print(Literal(1.0)),
        Return(token('RETURN', 'return'), Literal(2.0)),
        Print(Literal(3.0)),
    ]
    assert Interpreter('<test>').interpret(statements) is True
    assert capsys.readouterr().out.strip().splitlines() == ['1']


def test_runtime_errors_written_to_stream(capsys):
    """
    Test the text of a reported runtime error.
    """
    run_statements = parse_source("\n\nprint -nil_value;")
    Interpreter('<test>', Reporter()).interpret(run_statements)
    assert capsys.readouterr().err == "[line 3] Runtime error: Undefined variable 'nil_value'.\n"


def test_diagnostic_formatting():
    """
    Test how diagnostics render with and without a column.
    """
    assert str(Diagnostic(3, None, "message")) == "[line 3] message"
    assert str(Diagnostic(3, 5, "message")) == "[line 3:5] message"


def test_reporter_replay(capsys):
    """
    Test that held-back diagnostics can be written later.
    """
    reporter = Reporter(echo=False)
    reporter.error(token('SEMICOLON', ';', line=2), "Expect expression.")
    reporter.error(token('EOF', '', line=4), "Expect '}' after block.")
    assert capsys.readouterr().err == ''
    reporter.replay()
    assert capsys.readouterr().err.splitlines() == [
        "[line 2] Error at ';': Expect expression.",
        "[line 4] Error at end: Expect '}' after block.",
    ]
    assert reporter.had_error
