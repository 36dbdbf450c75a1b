import sys
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = "<level>{message}</level>"


def setup_console_logging(level: str = "INFO", colorize: Optional[bool] = None) -> None:
    """
    Operator-facing status lines: start in yellow, ok in green,
    warnings in yellow, errors in red.
    """
    if colorize is None:
        colorize = sys.stdout.isatty()
    logger.remove()
    logger.level("INFO", color="<yellow><bold>")
    logger.level("SUCCESS", color="<green>")
    logger.level("WARNING", color="<yellow>")
    logger.level("ERROR", color="<red>")
    logger.add(
        lambda msg: print(msg, end=""),
        level=level.upper(),
        format=CONSOLE_FORMAT,
        colorize=colorize,
    )
