"""
Application Entry
=================
Renders the escape-time picture to standard output.

Why is this file needed?
------------------------
It is the single root shared by the console script, `python -m mandelascii`
and the development bootstrap (run.py). It:
1. Sets up logging on stderr, quiet by default.
2. Writes the full grid to stdout.
"""
import logging
import sys

from mandelascii.logging_config import setup_logging
from mandelascii.renderer import write


def main() -> None:
    # Use logging.DEBUG to see render timings during development
    setup_logging(level=logging.WARNING)

    write(sys.stdout)


if __name__ == "__main__":
    main()
