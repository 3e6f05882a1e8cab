"""Errors.

Parse errors and runtime errors both carry the offending token so the
reporter can point at the right line. Neither is used for ``return``:
that travels as a :class:`loxlang.values.Returning` outcome.


File: exceptions.py
Version: 0.1.0
License: MIT
"""


class LoxParseError(Exception):
    """
    Error for token sequences that do not match the grammar.
    """
    def __init__(self, token, message, file=None):
        self.token = token
        self.message = message
        text = f"{message} on line {token.line}"
        if file is not None:
            text += f" in {file}"
        super().__init__(text)


class LoxRuntimeError(Exception):
    """
    Error raised while evaluating expressions or executing statements.
    """
    def __init__(self, token, message):
        self.token = token
        self.message = message
        super().__init__(f"{message} on line {token.line}")

    @property
    def line(self) -> int:
        """
        Line of the token the error is reported at.
        """
        return self.token.line


class UndefinedVariableException(LoxRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, name):
        super().__init__(name, f"Undefined variable '{name.lexeme}'.")
