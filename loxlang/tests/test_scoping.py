"""
Tests for scoping rules in loxlang
"""
from loxlang.tests.utils import messages, run_source


def test_inner_block_shadows_outer(capsys):
    """
    Test that a block's var never changes the outer binding.
    """
    run_source("var a = 1; { var a = 2; print a; } print a;")
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['2', '1']


def test_block_assignment_updates_outer(capsys):
    """
    Test that assignment inside a block writes the enclosing binding.
    """
    run_source("var a = 1; { a = 2; } print a;")
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['2']


def test_closure_sees_later_assignment(capsys):
    """
    Test that closures capture the environment, not a snapshot of it.
    """
    run_source("var a = 1; fun f() { print a; } a = 2; f();")
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['2']


def test_assignment_to_undefined_creates_nothing(capsys):
    """
    Test that assigning an undeclared name fails and leaves no binding behind.
    """
    interpreter, reporter = run_source("a = 1;\nprint a;")
    assert capsys.readouterr().out == ''
    assert messages(reporter) == ["Runtime error: Undefined variable 'a'."] * 2
    assert [diagnostic.line for diagnostic in reporter.diagnostics] == [1, 2]
    assert 'a' not in interpreter.globals.values


def test_var_without_initializer_is_null(capsys):
    """
    Test the default value of a declaration.
    """
    run_source("var a; print a;")
    assert capsys.readouterr().out.strip().splitlines() == ['null']


def test_redeclaration_overwrites(capsys):
    """
    Test that a second var of the same name in one scope replaces the first.
    """
    run_source("var a = 1; var a = a + 1; print a;")
    assert capsys.readouterr().out.strip().splitlines() == ['2']


def test_scope_restored_after_error_in_block(capsys):
    """
    Test that leaving a block through an error restores the outer scope.
    """
    interpreter, reporter = run_source(
        'var a = "outer"; { var a = "inner"; print missing; } print a;'
    )
    assert capsys.readouterr().out.strip().splitlines() == ['outer']
    assert messages(reporter) == ["Runtime error: Undefined variable 'missing'."]
    assert interpreter.environment is interpreter.globals


def test_functions_have_fresh_env(capsys):
    """
    Test that each call gets its own locals.
    """
    source = (
        "fun inner() { var x = 1; return x; }\n"
        "fun outer() { var x = 2; return inner() + x; }\n"
        "print outer();\n"
    )
    run_source(source)
    assert capsys.readouterr().out.strip().splitlines() == ['3']


def test_scoping_is_lexical(capsys):
    """
    Test that functions resolve names where they were written, not where called.
    """
    source = (
        'var x = "global";\n'
        "fun show() { print x; }\n"
        'fun caller() { var x = "local"; show(); }\n'
        "caller();\n"
    )
    run_source(source)
    assert capsys.readouterr().out.strip().splitlines() == ['global']
