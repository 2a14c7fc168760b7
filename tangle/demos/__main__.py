"""Run a bundled demo app.

Usage:
    # Start the triangle calculator and open a browser
    python -m tangle.demos triangle

    # Custom settings
    python -m tangle.demos statements --host 0.0.0.0 --port 9000 --no-browser
"""

import argparse
import logging

from shiny import run_app

from . import DEMOS, load_demo

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def main() -> None:
    """Entry point for running a demo from the command line."""
    parser = argparse.ArgumentParser(
        description="Run a tangle demo app",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("demo", nargs="?", default="readme", choices=sorted(DEMOS))
    parser.add_argument("--host", default=DEFAULT_HOST, help="Host to bind to")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to bind to")
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open a browser window",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    demo = load_demo(args.demo)
    logging.info("Starting demo %r: %s", args.demo, demo.TITLE)
    run_app(demo.app, host=args.host, port=args.port, launch_browser=not args.no_browser)


if __name__ == "__main__":
    main()
