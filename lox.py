"""
Lox Language Interpreter

This is the main entry point for the loxlang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into statement trees following the language grammar.
4. If nothing was reported so far, the Interpreter walks the trees, evaluating
   expressions and executing statements.
"""
import os
import sys

from loxlang.diagnostics import Reporter
from loxlang.interpreter import Interpreter
from loxlang.lexer import tokenize
from loxlang.parser import Parser
from loxlang.printer import format_stmt

# Exit statuses, following sysexits.h
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70


def print_usage():
    """
    Print usage.
    """
    print()
    print("Lox Language Interpreter")
    print()
    print("Usage:")
    print("    lox <script.lox>")
    print()
    print("Arguments:")
    print("    <script.lox>")
    print("        Path to a Lox source file to execute.")
    print()
    print("Example:")
    print("    lox hello.lox")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    LOXDEBUG")
    print("        When set, print the tokens and syntax trees before running.")


def debug_print_tokens_ast(tokens, statements):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print("\nAST:\n")
    for stmt in statements:
        print(format_stmt(stmt))
    print(" ")


def run_script(script_name: str) -> int:
    """
    Run a Lox script and return the process exit status.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return EX_NOINPUT

    reporter = Reporter()
    tokens = tokenize(code, reporter)
    parser = Parser(tokens, script_name, reporter)
    statements = parser.parse()

    if os.environ.get('LOXDEBUG'):
        debug_print_tokens_ast(tokens, statements)

    if reporter.had_error:
        return EX_DATAERR

    interpreter = Interpreter(script_name, reporter)
    try:
        succeeded = interpreter.interpret(statements)
    except RecursionError:
        print("Fatal: stack overflow.", file=sys.stderr)
        return EX_SOFTWARE
    return 0 if succeeded else EX_SOFTWARE


def is_incomplete(parser: Parser) -> bool:
    """
    Whether every parse error happened at end of input, meaning more lines may finish the code.
    """
    return parser.had_error and all(error.token.type == 'EOF' for error in parser.errors)


def run_repl():
    """
    Run the interactive REPL
    """
    print("Lox Language Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>", Reporter())
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)

            # Hold errors back until we know the input is not just unfinished
            reporter = Reporter(echo=False)
            tokens = tokenize("\n".join(buffer), reporter)
            parser = Parser(tokens, "<stdin>", reporter)
            statements = parser.parse()
            if is_incomplete(parser) and len(reporter.diagnostics) == len(parser.errors):
                continue
            buffer.clear()

            if reporter.had_error:
                reporter.replay()
                continue
            interpreter.interpret(statements)
        except RecursionError:
            print("Fatal: stack overflow.", file=sys.stderr)
            buffer.clear()
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1 and not args[0].startswith('-'):
        return run_script(args[0])
    print_usage()
    return EX_USAGE


def cli() -> int:
    """
    Console-script wrapper around :func:`main`.
    """
    return main(sys.argv)


if __name__ == "__main__":
    sys.exit(main(sys.argv))
