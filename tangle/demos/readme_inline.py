"""Smallest inline demo: a quantity and the price it adds up to."""

from shiny import App, ui

from .. import inline_numeric_input, inline_output, render_inline

UNIT_PRICE = 9.99

TITLE = "tangle: Demo Inline"


def total_cost(amount: float) -> float:
    return amount * UNIT_PRICE


app_ui = ui.page_fluid(
    ui.h1(TITLE),
    ui.p(
        "When you have",
        inline_numeric_input("amount", 5, min=0, max=10),
        "items, the total cost is",
        inline_output("cost"),
    ),
    title=TITLE,
)


def server(input, output, session):
    @render_inline
    def cost():
        return total_cost(input.amount())


app = App(app_ui, server)
