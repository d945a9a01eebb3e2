"""Logging configuration for the bank simulator."""

import logging
import sys

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]
HANDLER_MARKER = "_bank_sim_handler"


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the CLI.

    Log records go to stderr so they never mix with the menu output on stdout.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace only the handler installed by a previous call
    for handler in root_logger.handlers[:]:
        if getattr(handler, HANDLER_MARKER, False):
            root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    setattr(console_handler, HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    logging.getLogger("bank_sim").setLevel(log_level)
