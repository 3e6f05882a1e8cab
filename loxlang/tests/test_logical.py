"""
Tests for 'and' and 'or' in loxlang
"""
from loxlang.tests.utils import run_source


def test_division_not_evaluated_when_short_circuited(capsys):
    """
    Test that the right operand is skipped once the result is known.
    """
    _, reporter = run_source("print false and (1/0);\nprint true or (1/0);")
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['false', 'true']
    assert not reporter.had_error


def test_right_operand_side_effects_skipped(capsys):
    """
    Test short-circuiting with an observable right operand.
    """
    source = (
        'fun boom() { print "evaluated"; return true; }\n'
        "print false and boom();\n"
        "print true or boom();\n"
        "print true and boom();\n"
    )
    run_source(source)
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['false', 'true', 'evaluated', 'true']


def test_logical_operators_return_operands(capsys):
    """
    Test that and/or yield one of their operands rather than a boolean.
    """
    run_source('print null or "default"; print 1 and 2; print null and 2; print 0 or 1;')
    captured = capsys.readouterr().out.strip().splitlines()
    assert captured == ['default', '2', 'null', '0']


def test_undefined_name_in_skipped_operand(capsys):
    """
    Test that a skipped operand can reference an undefined variable.
    """
    _, reporter = run_source("print false and missing;")
    assert capsys.readouterr().out.strip().splitlines() == ['false']
    assert not reporter.had_error
