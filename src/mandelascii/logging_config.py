"""
Logging Configuration
=====================
Render timings and degenerate-cell counts are logged at DEBUG by the
renderer. Stdout is the picture itself, so diagnostics must go elsewhere:
the console handler defaults to stderr and an optional file handler can
capture a full DEBUG trace of a run.
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configures the logger for the 'mandelascii' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        stream: Optional stream for the console handler (default: sys.stderr).
    """
    # Get the logger for our package
    logger = logging.getLogger("mandelascii")
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on repeated calls
    if logger.hasHandlers():
        logger.handlers.clear()

    # 1. Console Handler (stderr)
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
