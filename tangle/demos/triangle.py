"""
Triangle calculator: three side lengths, and the perimeter,
semi-perimeter and area (Heron's formula) that follow from them.
"""

import math
from typing import Optional

from shiny import App, reactive, req, ui

from .. import inline_numeric_input, inline_output, render_inline

SIDE_BOUNDS = {"min": 0.1, "max": 20, "step": 0.1}

TITLE = "tangle: Triangle Area"


def is_valid_triangle(a: float, b: float, c: float) -> bool:
    """Triangle inequality."""
    return (a + b > c) and (b + c > a) and (a + c > b)


def heron_area(a: float, b: float, c: float) -> float:
    s = (a + b + c) / 2
    return math.sqrt(s * (s - a) * (s - b) * (s - c))


def triangle_measures(a: float, b: float, c: float) -> Optional[dict[str, float]]:
    """Perimeter, semi-perimeter and area, or None when the sides cannot close."""
    if not is_valid_triangle(a, b, c):
        return None
    perimeter = a + b + c
    return {
        "perimeter": perimeter,
        "semi_perimeter": perimeter / 2,
        "area": heron_area(a, b, c),
    }


app_ui = ui.page_fluid(
    ui.h1(TITLE),
    ui.h4("Interactive Triangle Calculator"),
    ui.p(
        "Consider a triangle with sides of length ",
        inline_numeric_input("side_a", 5, **SIDE_BOUNDS),
        ", ",
        inline_numeric_input("side_b", 4, **SIDE_BOUNDS),
        ", and ",
        inline_numeric_input("side_c", 3, **SIDE_BOUNDS),
        " units.",
    ),
    ui.hr(),
    ui.p("The triangle's perimeter is ", inline_output("perimeter"), " units"),
    ui.p("Its semi-perimeter is ", inline_output("semi_perimeter"), " units"),
    ui.p(
        "Using Heron's formula, the area is ",
        inline_output("area"),
        " square units",
    ),
    title=TITLE,
)


def server(input, output, session):
    @reactive.calc
    def measures():
        a = req(input.side_a())
        b = req(input.side_b())
        c = req(input.side_c())
        return req(triangle_measures(a, b, c))

    @render_inline
    def perimeter():
        return measures()["perimeter"]

    @render_inline
    def semi_perimeter():
        return measures()["semi_perimeter"]

    @render_inline
    def area():
        return measures()["area"]


app = App(app_ui, server)
