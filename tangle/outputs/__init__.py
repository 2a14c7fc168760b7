"""Inline outputs: placeholders, the inline renderer and the formatting rule."""

from .formatting import Empty, InlineValue, Numeric, Text, classify, format_inline, render_text
from .render import inline_output, inline_tag, render_inline, render_inline_html

__all__ = [
    "Empty",
    "InlineValue",
    "Numeric",
    "Text",
    "classify",
    "format_inline",
    "inline_output",
    "inline_tag",
    "render_inline",
    "render_inline_html",
    "render_text",
]
