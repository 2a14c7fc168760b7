"""
Gesture state machine for inline numeric inputs.

This is the reference model of what ``static/inline.js`` does in the
browser: it turns pointer drags, wheel ticks and typed text into values
and pushes each one to the input channel as soon as it is computed.

States:
    idle      no drag in progress
    dragging  a pointer went down on a control and has not been released

Example:
    sent = []
    gestures = GestureController(lambda id, v: sent.append((id, v)))
    gestures.add_control(inline_numeric_input("side", 5, min=0.1, max=20))
    gestures.pointer_down("side", y=300)
    gestures.pointer_move(y=276.3)     # 23.7px up * 0.1 -> 7.37 -> 7.4
    gestures.pointer_up()
    sent  # [("side", 7.4)]
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from ..exceptions import DuplicateIdError, UnknownControlError
from .numeric import InlineNumericInput
from .quantize import clamp, constrain, format_display, parse_display

logger = logging.getLogger(__name__)

DRAG_CURSOR = "ew-resize"
DEFAULT_CURSOR = "default"


class GestureState(Enum):
    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass
class ControlState:
    """Client-side view of one rendered control: its metadata and field text."""

    descriptor: InlineNumericInput
    text: str
    dragging: bool = False

    @classmethod
    def from_descriptor(cls, descriptor: InlineNumericInput) -> "ControlState":
        return cls(descriptor=descriptor, text=descriptor.display_value)

    @property
    def control_id(self) -> str:
        return self.descriptor.input_id

    @property
    def value(self) -> float:
        """The number currently shown, 0 if the text does not parse."""
        return parse_display(self.text)


@dataclass(frozen=True)
class GestureSession:
    """An active drag: which control, where it started, and from what value."""

    control_id: str
    origin_y: float
    origin_value: float


class GestureController:
    """
    Drives every inline control on one page.

    Only one drag can be active at a time; a pointer-down while a drag is in
    progress is ignored. Move and release events are handled no matter where
    the pointer is, the way the page-level listeners in the browser are.
    """

    def __init__(
        self,
        set_value: Callable[[str, float], None],
        controls: Iterable[InlineNumericInput] = (),
    ):
        """
        Args:
            set_value: Input channel, called as ``set_value(input_id, value)``
            controls: Controls rendered on the page
        """
        self._set_value = set_value
        self._controls: dict[str, ControlState] = {}
        self._session: Optional[GestureSession] = None
        self.cursor = DEFAULT_CURSOR
        for descriptor in controls:
            self.add_control(descriptor)

    def add_control(self, descriptor: InlineNumericInput) -> ControlState:
        if descriptor.input_id in self._controls:
            raise DuplicateIdError(descriptor.input_id)
        state = ControlState.from_descriptor(descriptor)
        self._controls[descriptor.input_id] = state
        return state

    def control(self, control_id: str) -> ControlState:
        try:
            return self._controls[control_id]
        except KeyError:
            raise UnknownControlError(control_id) from None

    @property
    def state(self) -> GestureState:
        return GestureState.IDLE if self._session is None else GestureState.DRAGGING

    @property
    def session(self) -> Optional[GestureSession]:
        return self._session

    # Drag

    def pointer_down(self, control_id: str, y: float) -> bool:
        """
        Start a drag on a control (mouse-down or touch-start).

        Returns:
            False if a drag was already active and this press was ignored.
        """
        control = self.control(control_id)
        if self._session is not None:
            logger.debug(
                "Ignoring press on %s while dragging %s", control_id, self._session.control_id
            )
            return False
        self._session = GestureSession(
            control_id=control_id, origin_y=y, origin_value=control.value
        )
        control.dragging = True
        self.cursor = DRAG_CURSOR
        return True

    def pointer_move(self, y: float) -> Optional[float]:
        """
        Move the pointer during a drag. Upward movement increases the value.

        Returns:
            The value pushed to the channel, or None when no drag is active.
        """
        session = self._session
        if session is None:
            return None
        control = self._controls[session.control_id]
        d = control.descriptor
        delta = session.origin_y - y
        candidate = session.origin_value + delta * d.sensitivity
        value = constrain(candidate, d.step, d.min, d.max)
        self._commit(control, value)
        return value

    def pointer_up(self) -> bool:
        """End the drag, wherever the pointer was released."""
        session = self._session
        if session is None:
            return False
        self._controls[session.control_id].dragging = False
        self._session = None
        self.cursor = DEFAULT_CURSOR
        return True

    # Wheel and typing

    def wheel(self, control_id: str, delta_y: float) -> Optional[float]:
        """
        Move a control by one step per wheel tick.

        Scrolling up (negative delta) increases the value. A tick with no
        vertical component changes nothing.
        """
        control = self.control(control_id)
        if delta_y == 0:
            return None
        d = control.descriptor
        step = d.step if delta_y < 0 else -d.step
        value = clamp(control.value + step, d.min, d.max)
        self._commit(control, value)
        return value

    def text_edit(self, control_id: str, raw: str) -> float:
        """
        Apply text typed into a control.

        The value is reformatted but not clamped to the control's bounds.
        """
        control = self.control(control_id)
        value = parse_display(raw)
        self._commit(control, value)
        return value

    def _commit(self, control: ControlState, value: float) -> None:
        control.text = format_display(value, control.descriptor.step)
        self._set_value(control.control_id, value)
