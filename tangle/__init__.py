"""
Tangle - inline interactive numbers for Shiny apps.

A number embedded in a sentence can be dragged, scrolled or typed to change
it, and computed values elsewhere in the text re-render as it changes.

Submodules:
    tangle.controls - Inline numeric inputs and their gesture state machine
    tangle.outputs - Inline outputs, the inline renderer and the formatting rule
    tangle.demos - Example apps, runnable with ``python -m tangle.demos``

Example:
    from shiny import App, ui
    from tangle import inline_numeric_input, inline_output, render_inline

    app_ui = ui.page_fluid(
        ui.p("When you have", inline_numeric_input("amount", 5, min=0, max=10),
             "items, the total cost is", inline_output("cost")),
    )

    def server(input, output, session):
        @render_inline
        def cost():
            return input.amount() * 9.99

    app = App(app_ui, server)
"""

from .assets import inline_dependency
from .controls import InlineNumericInput, GestureController, inline_numeric_input
from .outputs import format_inline, inline_output, render_inline, render_inline_html
from .exceptions import TangleError

__all__ = [
    # Declarations
    "inline_numeric_input",
    "inline_output",
    "InlineNumericInput",
    "render_inline",
    "inline_dependency",
    # Formatting and gestures
    "format_inline",
    "render_inline_html",
    "GestureController",
    # Errors
    "TangleError",
]

__version__ = "0.1.0"
