"""Clamping, step quantization and display formatting for inline inputs.

These rules are shared by the gesture state machine and by the browser
script, which applies the same arithmetic: half-up rounding (``Math.round``)
and ``toFixed(1)`` style one-decimal display.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def round_half_up(x: float) -> float:
    """Round to the nearest integer, halves toward +infinity."""
    return float(math.floor(x + 0.5))


def clamp(value: float, min_value: Optional[float] = None, max_value: Optional[float] = None) -> float:
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def quantize(value: float, step: float) -> float:
    """Snap value to the nearest multiple of step."""
    return round_half_up(value / step) * step


def constrain(
    candidate: float,
    step: float,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    """
    Clamp a candidate to the bounds, then quantize it to the step.

    When a bound is not itself a multiple of step, quantizing can land one
    step outside the range; the result is then pulled back to the nearest
    multiple inside it, or to the bound when no multiple fits.
    """
    value = quantize(clamp(candidate, min_value, max_value), step)
    if min_value is not None and value < min_value:
        value = math.ceil(round(min_value / step, 9)) * step
    if max_value is not None and value > max_value:
        value = math.floor(round(max_value / step, 9)) * step
    return clamp(value, min_value, max_value)


def is_integral(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value)


def to_fixed_1(value: float) -> str:
    """One digit after the decimal point, rounding ties away from zero."""
    if not math.isfinite(value):
        return str(value)
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def format_display(value: float, step: float) -> str:
    """Text shown in the field after a drag, wheel tick or edit."""
    if step == 1:
        if not math.isfinite(value):
            return str(value)
        return str(int(round_half_up(value)))
    return to_fixed_1(value)


def format_initial(value: float, step: float) -> str:
    """Text shown in the field when it is first rendered."""
    if is_integral(step) and is_integral(value):
        return str(int(round_half_up(value)))
    text = f"{value:.7g}"
    if "." not in text and "e" not in text and math.isfinite(value):
        text += ".0"
    return text


def parse_display(text: str) -> float:
    """
    Read the leading number out of field text, like ``parseFloat``.

    Returns 0.0 when there is no number to read.
    """
    match = _NUMBER_PREFIX.match(text or "")
    if match is None:
        return 0.0
    value = float(match.group(0))
    if math.isnan(value):
        return 0.0
    return value
