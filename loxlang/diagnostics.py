"""Diagnostics reporting for loxlang.

Every lexical, parse and runtime error ends up in :meth:`Reporter.report`
as a ``(line, column, message)`` triple. The reporter prints it and keeps a
record, so callers decide whether to go on (for instance, never interpret a
program that failed to parse) by asking the reporter rather than consulting
process-wide state.


File: diagnostics.py
Version: 0.1.0
License: MIT
"""

import sys
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem."""

    line: int
    column: int | None
    message: str

    def __str__(self) -> str:
        where = f"line {self.line}" if self.column is None else f"line {self.line}:{self.column}"
        return f"[{where}] {self.message}"


class Reporter:
    """Collects diagnostics and writes them to a text stream."""

    def __init__(self, stream=None, echo: bool = True):
        """
        Initialize the reporter.

        Parameters:
            stream (TextIO | None): Destination for diagnostics, defaults to
                ``sys.stderr`` at the time of reporting.
            echo (bool): When false, diagnostics are only recorded and can be
                written later with :meth:`replay`.
        """
        self.stream = stream
        self.echo = echo
        self.diagnostics: list[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        """
        Whether anything has been reported.
        """
        return bool(self.diagnostics)

    def report(self, line: int, column: int | None, message: str) -> None:
        """
        Record a diagnostic and print it when echoing is enabled.
        """
        diagnostic = Diagnostic(line, column, message)
        self.diagnostics.append(diagnostic)
        if self.echo:
            self._write(diagnostic, self.stream)

    def error(self, token, message: str) -> None:
        """
        Report a parse error located at ``token``.
        """
        if token.type == 'EOF':
            self.report(token.line, None, f"Error at end: {message}")
        else:
            self.report(token.line, None, f"Error at '{token.lexeme}': {message}")

    def runtime_error(self, error) -> None:
        """
        Report a :class:`loxlang.exceptions.LoxRuntimeError`.
        """
        self.report(error.line, None, f"Runtime error: {error.message}")

    def replay(self, stream=None) -> None:
        """
        Write every recorded diagnostic to ``stream``.
        """
        for diagnostic in self.diagnostics:
            self._write(diagnostic, stream if stream is not None else self.stream)

    @staticmethod
    def _write(diagnostic: Diagnostic, stream) -> None:
        print(diagnostic, file=stream if stream is not None else sys.stderr)
