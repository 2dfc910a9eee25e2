"""Lenient integer coercion for year and STATE arguments."""

import math
from typing import Any


def coerce_int(value: Any, label: str = "value") -> int:
    """
    Coerce *value* to ``int``, truncating toward zero.

    Accepts ints, floats and numeric strings such as ``"2013"`` or
    ``"1.0"``.

    Args:
        value: Value to coerce.
        label: Name used in the error message, e.g. ``'year'``.

    Raises:
        ValueError: For values that are not numeric, or not finite.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid {label}: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        pass

    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {label}: {value!r}")
    if not math.isfinite(number):
        raise ValueError(f"Invalid {label}: {value!r}")
    return int(number)
