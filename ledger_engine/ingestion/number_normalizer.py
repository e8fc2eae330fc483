"""
Numeric normalization for spreadsheet cells.

Cells arrive as whatever the spreadsheet decoder produced: floats, ints,
text with separators and currency symbols, blanks or NaN. Everything is
coerced to a float and nothing here ever raises.
"""

import math
import numbers
import re
from typing import Any

# Anything that is not a digit, a decimal point or a minus sign
_RE_NON_NUMERIC = re.compile(r"[^0-9.\-]")

# Leading numeric prefix, read the way a lenient float parser does
_RE_LEADING_NUMBER = re.compile(r"^-?(?:\d+(?:\.\d*)?|\.\d+)")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value == ""


def normalize_number(value: Any) -> float:
    """
    Coerce an arbitrary cell value into a finite float.

    Args:
        value: Raw cell value (None, blank, number or text like "1,500.00 SAR")

    Returns:
        Parsed amount, or 0.0 when nothing numeric can be read

    Example:
        >>> normalize_number("1,500.75 SAR")
        1500.75
        >>> normalize_number("abc")
        0.0
    """
    if _is_blank(value):
        return 0.0

    # Numeric cells skip the text round trip; large floats stringify in
    # exponent form and would lose their magnitude
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    text = str(value).strip()
    # Drop separators, currency symbols and letters
    text = _RE_NON_NUMERIC.sub("", text)

    match = _RE_LEADING_NUMBER.match(text)
    if not match:
        return 0.0

    number = float(match.group(0))
    if math.isinf(number):
        return 0.0
    return number
