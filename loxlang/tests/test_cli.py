"""
Tests for the lox command line entry point
"""
import lox
from loxlang.tests.utils import parse_with_parser


def write_script(tmp_path, source: str) -> str:
    """
    Write a script to a temporary file and return its path.
    """
    path = tmp_path / "script.lox"
    path.write_text(source, encoding="utf-8")
    return str(path)


def test_runs_script(tmp_path, capsys):
    """
    Test that a well formed script runs and exits cleanly.
    """
    path = write_script(tmp_path, 'var greeting = "hi"; print greeting + "!";')
    assert lox.main(['lox', path]) == 0
    assert capsys.readouterr().out == "hi!\n"


def test_parse_error_prevents_execution(tmp_path, capsys):
    """
    Test that nothing runs when the script failed to parse.
    """
    path = write_script(tmp_path, "print 1;\nprint ;\n")
    assert lox.main(['lox', path]) == lox.EX_DATAERR
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err == "[line 2] Error at ';': Expect expression.\n"


def test_lexical_error_prevents_execution(tmp_path, capsys):
    """
    Test that scanning errors also stop the run.
    """
    path = write_script(tmp_path, "print 1; @")
    assert lox.main(['lox', path]) == lox.EX_DATAERR
    assert capsys.readouterr().out == ''


def test_runtime_error_exit_status(tmp_path, capsys):
    """
    Test that runtime errors are reported and set the exit status.
    """
    path = write_script(tmp_path, 'print "before";\nprint 1 + null;\nprint "after";')
    assert lox.main(['lox', path]) == lox.EX_SOFTWARE
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ['before', 'after']
    assert "[line 2] Runtime error: Unsupported types for +: number and null." in captured.err


def test_unbounded_recursion_is_fatal(tmp_path, capsys):
    """
    Test that exhausting the host stack ends the run.
    """
    path = write_script(tmp_path, "fun f() { f(); }\nf();\nprint 1;")
    assert lox.main(['lox', path]) == lox.EX_SOFTWARE
    captured = capsys.readouterr()
    assert captured.out == ''
    assert "stack overflow" in captured.err


def test_missing_script(tmp_path, capsys):
    """
    Test a script path that does not exist.
    """
    assert lox.main(['lox', str(tmp_path / "missing.lox")]) == lox.EX_NOINPUT
    assert "missing.lox" in capsys.readouterr().err


def test_usage(capsys):
    """
    Test help and bad invocations.
    """
    assert lox.main(['lox', '--help']) == 0
    assert "Usage:" in capsys.readouterr().out
    assert lox.main(['lox', 'a.lox', 'b.lox']) == lox.EX_USAGE
    assert "Usage:" in capsys.readouterr().out


def test_debug_dump(tmp_path, capsys, monkeypatch):
    """
    Test that LOXDEBUG prints tokens and trees before running.
    """
    monkeypatch.setenv('LOXDEBUG', '1')
    path = write_script(tmp_path, "print 1 + 2;")
    assert lox.main(['lox', path]) == 0
    out = capsys.readouterr().out
    assert "Token(PRINT, 'print', None, line=1)" in out
    assert "(print (+ 1 2))" in out
    assert out.rstrip().endswith("3")


def test_incomplete_input_detection():
    """
    Test which parse failures the REPL treats as unfinished input.
    """
    assert lox.is_incomplete(parse_with_parser("fun f() {")[1])
    assert lox.is_incomplete(parse_with_parser("print 1")[1])
    assert not lox.is_incomplete(parse_with_parser("print ;")[1])
    assert not lox.is_incomplete(parse_with_parser("print 1;")[1])


def test_repl_buffers_multiline_input(capsys, monkeypatch):
    """
    Test that the REPL keeps reading until a block is closed.
    """
    lines = iter(["var a = 1;", "{", "print a + 1;", "}", "print ;", "exit"])
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(lines)

    monkeypatch.setattr('builtins.input', fake_input)
    lox.run_repl()
    captured = capsys.readouterr()
    assert captured.out.splitlines()[-1] == '2'
    assert prompts == ['>>> ', '>>> ', '... ', '... ', '>>> ', '>>> ']
    assert captured.err == "[line 1] Error at ';': Expect expression.\n"


def test_repl_keeps_state_and_stops_at_eof(capsys, monkeypatch):
    """
    Test that definitions persist between lines and end of input leaves the REPL.
    """
    lines = iter(["fun sq(x) { return x * x; }", "print sq(4);"])

    def fake_input(_prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr('builtins.input', fake_input)
    lox.run_repl()
    assert '16' in capsys.readouterr().out.splitlines()
