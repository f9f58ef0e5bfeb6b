"""
logging_config.py – Logger setup for command-line use.

Library modules only create loggers; handlers are attached here.
"""

from __future__ import annotations
import logging
import sys


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """
    Configure the 'baroalt' logger.

    Parameters
    ----------
    level    : logging level (e.g. logging.DEBUG)
    log_file : optional path to also write the log to
    """
    logger = logging.getLogger("baroalt")
    logger.setLevel(level)

    # avoid duplicate handlers on repeated setup
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
