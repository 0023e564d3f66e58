"""Lenient numeric parsing for values typed into the customer and supply forms.

Blank, unparseable, negative or non-finite input becomes ``0`` instead of an
error; this is the only place that decides what a bad number means.
"""

from __future__ import annotations

import logging
import math
from typing import Any


def parse_non_negative_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            logging.debug(f"Treating unparseable amount '{value}' as 0")
            return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def parse_non_negative_int(value: Any) -> int:
    """Parse a unit count; fractional input is truncated toward zero."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) and value > 0 else 0
    text = str(value).strip()
    if not text:
        return 0
    try:
        return max(int(text), 0)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        logging.debug(f"Treating unparseable count '{value}' as 0")
        return 0
    return int(number) if math.isfinite(number) and number > 0 else 0


def parse_optional_non_negative_float(value: Any) -> float | None:
    """Like :func:`parse_non_negative_float` but keeps blank input as ``None``."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_non_negative_float(value)
