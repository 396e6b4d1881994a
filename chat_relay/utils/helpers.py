"""General helper functions used across the application."""

from __future__ import annotations

import math
from typing import Any, Optional


def to_finite_number(value: Any) -> Optional[float]:
    """Return ``value`` as a float, or ``None`` when it is not a finite number.

    Integers, floats and numeric strings are accepted.  ``None``, booleans,
    anything unparsable, NaN, infinities and integers too large for a
    float all count as absent.
    """
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None


def to_text(value: Any) -> str:
    """Stringify ``value``, treating ``None`` as empty text."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def optional_text(value: Any) -> Optional[str]:
    """Return ``value`` as text when it is truthy, else ``None``."""
    return to_text(value) if value else None
