from __future__ import annotations

import math
from typing import Any

# Bot API передаёт идентификаторы как JSON numbers, т.е. IEEE-754 double.
MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER


def is_safe_integer(value: Any) -> bool:
    """
    Check that value is an integer exactly representable as IEEE-754 double.

    Args:
        value: Any candidate value (int, float or anything else).
    Returns:
        bool: True for non-bool `int` and integral finite `float` within
        `[-(2**53 - 1), 2**53 - 1]`, False otherwise.
    Assumptions:
        `bool` is a subclass of `int` but never a valid identifier.
    Raises:
        None.
    Side Effects:
        None.
    """
    if type(value) is bool:  # noqa: E721
        return False
    if isinstance(value, int):
        return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return False
        return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER
    return False


def to_safe_integer(value: Any) -> int | None:
    """
    Convert safe integer value into plain `int`.

    Args:
        value: Any candidate value.
    Returns:
        int | None: Exact integer value, or None when value is not a safe integer.
    Assumptions:
        Integral floats (e.g. `10.0`) are accepted the same way JSON parsers accept them.
    Raises:
        None.
    Side Effects:
        None.
    """
    if not is_safe_integer(value):
        return None
    return int(value)
