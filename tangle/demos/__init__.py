"""Example apps, runnable with ``python -m tangle.demos <name>``."""

from importlib import import_module
from types import ModuleType

DEMOS = {
    "readme": "readme_inline",
    "triangle": "triangle",
    "statements": "statements",
}


def load_demo(name: str) -> ModuleType:
    """Import a demo module by short name; its Shiny app is ``module.app``."""
    if name not in DEMOS:
        raise KeyError(f"Unknown demo {name!r}; choose from {', '.join(DEMOS)}")
    return import_module(f"{__name__}.{DEMOS[name]}")


__all__ = ["DEMOS", "load_demo"]
