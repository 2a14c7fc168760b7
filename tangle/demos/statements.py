"""Text statements: cookies to calories, and speed and time to distance."""

from shiny import App, reactive, req, ui

from .. import inline_numeric_input, inline_output, render_inline

CALORIES_PER_COOKIE = 50
DAILY_CALORIES = 2100

TITLE = "tangle: Inline Interactive Statements"


def cookie_calories(cookies: float) -> float:
    return cookies * CALORIES_PER_COOKIE


def daily_share(calories: float) -> float:
    """Percent of the recommended daily intake."""
    return 100 * calories / DAILY_CALORIES


def travel_distance(speed: float, hours: float) -> float:
    return speed * hours


app_ui = ui.page_fluid(
    ui.h1(TITLE),
    ui.h3("Cookies"),
    ui.p(
        "When you eat",
        inline_numeric_input("cookies", value=2, min=2, max=100, step=1),
        "cookies, you will consume",
        inline_output("calories"),
        "calories.",
        "That's ",
        inline_output("daily_percent"),
        "% of your recommended daily calories.",
    ),
    ui.h3("Travel Time"),
    ui.p(
        "A car traveling at",
        inline_numeric_input("speed", value=49, min=0, max=200),
        "km/h for",
        inline_numeric_input("time", value=3.1, min=0, max=24),
        "hours will travel",
        inline_output("distance"),
        "kilometers.",
    ),
    title=TITLE,
)


def server(input, output, session):
    @reactive.calc
    def consumed():
        return cookie_calories(req(input.cookies()))

    @render_inline
    def calories():
        return consumed()

    @render_inline
    def daily_percent():
        return daily_share(consumed())

    @render_inline
    def distance():
        return travel_distance(req(input.speed()), req(input.time()))


app = App(app_ui, server)
