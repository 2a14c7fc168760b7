"""Inline numeric inputs: declaration, value rules and gesture handling."""

from .gesture import ControlState, GestureController, GestureSession, GestureState
from .numeric import (
    DEFAULT_SENSITIVITY,
    DEFAULT_STEP,
    InlineNumericInput,
    inline_numeric_input,
)
from .quantize import clamp, constrain, format_display, format_initial, parse_display, quantize

__all__ = [
    "ControlState",
    "DEFAULT_SENSITIVITY",
    "DEFAULT_STEP",
    "GestureController",
    "GestureSession",
    "GestureState",
    "InlineNumericInput",
    "clamp",
    "constrain",
    "format_display",
    "format_initial",
    "inline_numeric_input",
    "parse_display",
    "quantize",
]
