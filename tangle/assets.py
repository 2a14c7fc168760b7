"""The shared stylesheet and gesture script for inline widgets."""

from pathlib import Path

from htmltools import HTMLDependency

STATIC_DIR = Path(__file__).parent / "static"

DEPENDENCY_NAME = "inline-interactive"
DEPENDENCY_VERSION = "0.1.0"


def inline_dependency() -> HTMLDependency:
    """
    Styling and drag/wheel/edit handlers shared by every inline widget.

    Each widget attaches this dependency. When a page renders, htmltools
    keeps one copy per name and version, so the files are included once
    however many widgets the page holds.
    """
    return HTMLDependency(
        DEPENDENCY_NAME,
        DEPENDENCY_VERSION,
        source={"subdir": str(STATIC_DIR)},
        script={"src": "inline.js"},
        stylesheet={"href": "inline.css"},
    )
