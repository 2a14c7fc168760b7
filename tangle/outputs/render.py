"""Inline output placeholders and the renderer that fills them."""

import logging
from typing import Any, Optional

from htmltools import Tag, TagList, tags
from shiny import ui
from shiny.render.renderer import Jsonifiable, Renderer

from ..assets import inline_dependency
from .formatting import format_inline

logger = logging.getLogger(__name__)

SLOT_CLASS = "inline-interactive-slot"
OUTPUT_CLASS = "inline-interactive-output"


def inline_output(output_id: str) -> TagList:
    """
    Create an output element that can be embedded inline within text.

    Example:
        ui.p("The result is", inline_output("result"))
    """
    return TagList(
        inline_dependency(),
        ui.output_ui(output_id, inline=True).add_class(SLOT_CLASS),
    )


def inline_tag(result: Any) -> Optional[Tag]:
    """The formatted span for a computed result, or None when there is nothing to show."""
    text = format_inline(result)
    if text == "":
        return None
    return tags.span(text, class_=OUTPUT_CLASS)


def render_inline_html(result: Any) -> str:
    """HTML for a computed result: a formatted span, or "" for None."""
    tag = inline_tag(result)
    return "" if tag is None else str(tag)


class render_inline(Renderer[Any]):
    """
    Render a computed value inline, formatted for running text.

    Integral numbers show without a decimal point, other numbers with one
    decimal place, None clears the output and anything else shows as text.
    Errors raised by the function reach the page through Shiny's usual
    output error display; ``req()`` clears the output silently.

    Example:
        @render_inline
        def cost():
            return input.amount() * 9.99
    """

    def auto_output_ui(self) -> TagList:
        return inline_output(self.output_id)

    async def transform(self, value: Any) -> Jsonifiable:
        html = render_inline_html(value)
        logger.debug("Rendered %s: %s", self.output_id, html)
        return {"deps": [], "html": html}
