"""Formatting rule for inline outputs.

A computed result is first classified into one of three variants, then the
variant is rendered to text:

    Empty         None                   -> ""
    Numeric(v)    integral               -> "6"
                  non-integral           -> "42.1"   (round(x, 1), one decimal)
    Text(s)       anything else          -> str(result)
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Numeric:
    value: float


@dataclass(frozen=True)
class Text:
    text: str


InlineValue = Union[Empty, Numeric, Text]


def classify(result: Any) -> InlineValue:
    """Wrap a computed result in its formatting variant."""
    if result is None:
        return Empty()
    # bool is an int subclass, but True/False are not quantities
    if isinstance(result, bool):
        return Text(str(result))
    if isinstance(result, numbers.Real):
        return Numeric(float(result))
    return Text(str(result))


def render_text(value: InlineValue) -> str:
    """Text for a classified value."""
    if isinstance(value, Empty):
        return ""
    if isinstance(value, Text):
        return value.text
    if isinstance(value, Numeric):
        return _format_number(value.value)
    raise TypeError(f"Not an inline value: {value!r}")


def format_inline(result: Any) -> str:
    """Classify and render a computed result in one call."""
    return render_text(classify(result))


def _format_number(x: float) -> str:
    if not math.isfinite(x):
        return str(x)
    if x == math.floor(x):
        return str(int(x))
    rounded = round(x, 1)
    if rounded == 0:
        rounded = 0.0
    return f"{rounded:.1f}"
