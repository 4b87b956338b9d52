"""
Numeric Coercion

Tolerant parsing for numeric roster and contract fields. Provider feeds
deliver salaries and contract lengths as numbers, numeric strings, empty
strings or not at all; every one of those must resolve to a usable number
so a single bad record never aborts a franchise's cap report.
"""

import math
import re
from typing import Any

# Leading numeric prefix, e.g. "12.5" in "12.5M" or "-3" in "-3 yrs"
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Any) -> float:
    """
    Coerce a loosely-typed value to a finite float.

    Args:
        value: Raw field value (int, float, str, None, ...)

    Returns:
        Parsed number, or 0.0 when the value is missing, malformed or not finite

    Examples:
        - 1_000_000 → 1000000.0
        - "425000" → 425000.0
        - "12.5M" → 12.5 (leading numeric prefix)
        - "N/A", None, True, float("nan") → 0.0
    """
    # bool is an int subclass; flags are never amounts
    if isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0

    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if not match:
            return 0.0
        number = float(match.group(0))
        return number if math.isfinite(number) else 0.0

    return 0.0


def parse_int(value: Any) -> int:
    """Coerce a loosely-typed value to an int, truncating toward zero."""
    return int(parse_number(value))


def is_finite_number(value: Any) -> bool:
    """True for real numbers (not booleans) that are neither NaN nor infinite."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value)
