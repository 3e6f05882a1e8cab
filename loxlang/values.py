"""Runtime values for loxlang.

Values are plain Python objects: ``float`` numbers, ``str`` strings,
``bool``, ``None`` for null, and the callables in
:mod:`loxlang.callables`. This module holds the operations every part of
the runtime agrees on, plus the outcome used to carry ``return`` out of
nested statements.

Numbers are single precision. Python has no binary32 scalar, so every
literal and every arithmetic result is passed through :func:`to_f32`,
which keeps it a ``float`` holding an exactly representable binary32
value.


File: values.py
Version: 0.1.0
License: MIT
"""

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

# Largest finite binary32 value, and the point past which rounding gives inf
F32_MAX = (2.0 - 2.0 ** -23) * 2.0 ** 127
_F32_OVERFLOW = 2.0 ** 128 - 2.0 ** 103


@dataclass(frozen=True)
class Returning:
    """Outcome of a statement that executed ``return``."""

    value: Any


def to_f32(value: float) -> float:
    """
    Round ``value`` to the nearest binary32 number.
    """
    try:
        return struct.unpack('f', struct.pack('f', value))[0]
    except OverflowError:
        # struct refuses to round finite values up to infinity
        if abs(value) < _F32_OVERFLOW:
            return math.copysign(F32_MAX, value)
        return math.copysign(math.inf, value)


def is_number(value: Any) -> bool:
    """
    Whether ``value`` is a number. Booleans are not.
    """
    return isinstance(value, float)


def is_truthy(value: Any) -> bool:
    """
    ``null`` and ``false`` are falsy; everything else is truthy.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def format_number(value: float) -> str:
    """
    Render a binary32 number in plain decimal notation.

    Uses the fewest significant digits that read back as the same binary32
    value, and never an exponent: ``16777216``, ``0.3``, ``0.00000015``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    for digits in range(1, 10):
        text = f"{value:.{digits - 1}e}"
        if to_f32(float(text)) == value:
            break
    plain = format(Decimal(text), 'f')
    if '.' in plain:
        plain = plain.rstrip('0').rstrip('.')
    return plain


def stringify(value: Any) -> str:
    """
    Render a value the way ``print`` shows it.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def type_name(value: Any) -> str:
    """
    Name of the kind of ``value``, for error messages.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    return "function"
