"""Declaration of inline numeric inputs."""

import math
from dataclasses import dataclass
from typing import Optional

from htmltools import Tag, TagList, tags

from ..assets import inline_dependency
from ..exceptions import InvalidBoundsError, InvalidStepError
from .quantize import format_initial

DEFAULT_STEP = 0.1
DEFAULT_SENSITIVITY = 0.1

CONTROL_CLASS = "inline-interactive-number"


@dataclass(frozen=True)
class InlineNumericInput:
    """
    A number embedded in running text that can be dragged, scrolled or typed.

    Renders as a plain ``<input type="number">``, so Shiny's number input
    binding reports its initial value; the attached dependency adds the
    gesture handlers, which push every change with ``Shiny.setInputValue``.
    """

    input_id: str
    value: float = 0.0
    min: Optional[float] = None
    max: Optional[float] = None
    step: float = DEFAULT_STEP
    sensitivity: float = DEFAULT_SENSITIVITY

    def __post_init__(self):
        for name in ("step", "sensitivity"):
            amount = getattr(self, name)
            if not (amount > 0) or not math.isfinite(amount):
                raise InvalidStepError(self.input_id, name, amount)
        if self.min is not None and self.max is not None and self.min > self.max:
            raise InvalidBoundsError(self.input_id, self.min, self.max)

    @property
    def display_value(self) -> str:
        return format_initial(self.value, self.step)

    @property
    def bounded(self) -> bool:
        return self.min is not None or self.max is not None

    def to_tag(self) -> Tag:
        return tags.input(
            type="number",
            id=self.input_id,
            class_=CONTROL_CLASS,
            value=self.display_value,
            min=_attr(self.min),
            max=_attr(self.max),
            step=_attr(self.step),
            data_sensitivity=_attr(self.sensitivity),
        )

    def tagify(self) -> TagList:
        return TagList(inline_dependency(), self.to_tag()).tagify()

    def to_dict(self) -> dict:
        return {
            "input_id": self.input_id,
            "value": self.value,
            "min": self.min,
            "max": self.max,
            "step": self.step,
            "sensitivity": self.sensitivity,
        }


def inline_numeric_input(
    input_id: str,
    value: float = 0,
    min: Optional[float] = None,
    max: Optional[float] = None,
    step: float = DEFAULT_STEP,
    sensitivity: float = DEFAULT_SENSITIVITY,
) -> InlineNumericInput:
    """
    Create an inline numeric input field.

    Args:
        input_id: Id used to read the value in server code (``input[input_id]()``)
        value: Initial value
        min: Minimum value allowed (None for no minimum)
        max: Maximum value allowed (None for no maximum)
        step: Step size; dragged and scrolled values snap to multiples of it
        sensitivity: Value change per pixel of vertical drag

    Returns:
        A tagifiable fragment to place inside a paragraph.

    Example:
        ui.page_fluid(ui.p("Let x = ", inline_numeric_input("x")))
    """
    return InlineNumericInput(
        input_id=input_id,
        value=float(value),
        min=None if min is None else float(min),
        max=None if max is None else float(max),
        step=float(step),
        sensitivity=float(sensitivity),
    )


def _attr(value: Optional[float]) -> Optional[str]:
    if value is None:
        return None
    if math.isfinite(value) and value == math.floor(value):
        return str(int(value))
    return repr(value)
