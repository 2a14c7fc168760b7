"""Exceptions for the tangle package."""


class TangleError(Exception):
    """Base exception for all tangle errors."""

    pass


class InvalidBoundsError(TangleError, ValueError):
    """Minimum bound is greater than the maximum bound."""

    def __init__(self, input_id: str, min_value: float, max_value: float):
        self.input_id = input_id
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"Input {input_id!r} has min {min_value} greater than max {max_value}"
        )


class InvalidStepError(TangleError, ValueError):
    """Step or drag sensitivity is not a positive number."""

    def __init__(self, input_id: str, name: str, value: float):
        self.input_id = input_id
        self.name = name
        self.value = value
        super().__init__(f"Input {input_id!r} needs a positive {name}, got {value}")


class DuplicateIdError(TangleError, ValueError):
    """A control id was registered twice with one gesture controller."""

    def __init__(self, element_id: str):
        self.element_id = element_id
        super().__init__(f"Duplicate inline input id: {element_id}")


class UnknownControlError(TangleError, KeyError):
    """Gesture event targets a control that is not tracked."""

    def __init__(self, control_id: str):
        self.control_id = control_id
        super().__init__(f"No inline input with id: {control_id}")
