"""
Unified output system using Loguru.
Every user-facing message goes to the log file and to the terminal.
"""

import sys
from pathlib import Path

from loguru import logger

from .console import get_console


def setup_loguru(
    log_file: Path, level: str = "INFO", console_output: bool = False
) -> None:
    """
    Configure loguru with a rotating file sink and an optional stderr sink.

    Args:
        log_file: Path to log file
        level: Minimum level for logging (DEBUG, INFO, WARNING, ERROR)
        console_output: Also emit log records on stderr
    """
    # Remove default handler
    logger.remove()

    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,  # Keep 5 backup files
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    if console_output:
        logger.add(
            sys.stderr,
            level=level,
            format="<level>{level}</level>: {message}",
        )

    logger.debug(f"Loguru initialized: {log_file} (level={level})")


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to file AND prints for the user.

    Use this instead of print() for user-facing messages that should also be logged.
    Warnings and errors are printed to stderr.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    if level == "debug":
        return

    if level in ("warning", "error"):
        style = "yellow" if level == "warning" else "red"
        get_console(stderr=True).print(message, style=style, markup=False)
    else:
        get_console().print(message, markup=False, highlight=False)
