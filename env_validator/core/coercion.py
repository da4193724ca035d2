"""
Coercion of raw environment strings into typed values.

Both parsers raise ValueError on input outside their literal grammar;
the engine turns that into a type-mismatch entry in the report.
"""

import math
import re
from typing import Union

BOOLEAN_LITERALS = {"true": True, "false": False}

_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")
_PREFIXED_INT = re.compile(r"0[xob][0-9a-f]+", re.IGNORECASE)


def parse_number(raw: str) -> Union[int, float]:
    """
    Parse a numeric environment value.

    Decimal integers become int, other decimal or exponent forms and
    infinities become float, and 0x/0o/0b literals become int. Only ASCII
    digits are accepted; integers too long to convert overflow to infinity.

    Raises:
        ValueError: If the value is not a number (NaN included)
    """
    text = raw.strip()
    if not text or "_" in text or not text.isascii():
        raise ValueError(f"not a number: {raw!r}")

    if _DECIMAL_INT.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Beyond the interpreter's int digit limit; parsed as float below
            pass
    if _PREFIXED_INT.fullmatch(text):
        return int(text, 0)

    value = float(text)
    if math.isnan(value):
        raise ValueError(f"not a number: {raw!r}")
    return value


def parse_boolean(raw: str) -> bool:
    """
    Parse a boolean environment value.

    Only the exact literals "true" and "false" are accepted.

    Raises:
        ValueError: For any other string
    """
    try:
        return BOOLEAN_LITERALS[raw]
    except KeyError:
        raise ValueError(f"not a boolean: {raw!r}") from None
