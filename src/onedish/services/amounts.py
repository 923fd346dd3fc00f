"""
Amount parsing and formatting.

Ingredient amounts are free text. Only three forms are understood:
  - simple fractions   "1/2"
  - mixed numbers      "1 1/2"
  - plain numbers      "2", "2.5", ".5"
Anything else ("to taste", "a pinch", "") parses to None and is passed
through untouched by the scaler.

Display values are rounded to the nearest quarter: "1/4", "1/2", "3/4".
"""

import logging
import math
import re
from typing import Optional

from ..constants import EPSILON

logger = logging.getLogger(__name__)

_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_MIXED_RE = re.compile(r"^(\d+)\s+(\d+)/(\d+)$")
_NUMBER_RE = re.compile(r"^(?:\d+(?:\.\d*)?|\.\d+)$")

_QUARTER_FRACTIONS = {0: "", 1: "1/4", 2: "1/2", 3: "3/4"}


def is_close(a: float, b: float) -> bool:
    """Whether two amounts are equal within EPSILON."""
    return abs(a - b) <= EPSILON


def round_to_step(value: float, step: float) -> float:
    """Round half-up to the nearest multiple of `step` (1, 0.5, 0.25, ...)."""
    return math.floor(value / step + 0.5 + EPSILON) * step


def _evaluate(trimmed: str) -> Optional[float]:
    match = _FRACTION_RE.match(trimmed)
    if match:
        whole, num, den = 0, int(match.group(1)), int(match.group(2))
    else:
        match = _MIXED_RE.match(trimmed)
        if not match:
            return float(trimmed) if _NUMBER_RE.match(trimmed) else None
        whole, num, den = (int(g) for g in match.groups())

    if den == 0:
        logger.debug(f"Zero denominator in amount '{trimmed}'")
        return None
    return whole + num / den


def parse_amount(text: Optional[str]) -> Optional[float]:
    """Parse a free-text amount into a number, or None when it is not numeric."""
    if text is None:
        return None

    try:
        value = _evaluate(text.strip())
    except (OverflowError, ValueError):
        # Digit strings too long to convert
        value = None
    if value is not None and not math.isfinite(value):
        value = None
    if value is None:
        logger.debug(f"Not a numeric amount: '{text[:40]}'")
    return value


def format_amount(value: float) -> str:
    """Format a number as a kitchen-friendly amount rounded to the nearest quarter."""
    if value <= 0:
        return "0"

    quarters = int(round_to_step(value, 0.25) * 4 + EPSILON)
    whole, rem = divmod(quarters, 4)
    fraction = _QUARTER_FRACTIONS[rem]

    if whole == 0 and fraction:
        return fraction
    if whole > 0 and fraction:
        return f"{whole} {fraction}"
    return str(whole)
