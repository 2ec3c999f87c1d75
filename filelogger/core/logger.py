"""Diagnostics logging for filelogger.

The library only ever adds or removes its own loguru sinks, filtered to the
"filelogger" namespace. Sinks installed by the host application are left
untouched.
"""

import sys
from pathlib import Path

from loguru import logger

LIBRARY_NAME = "filelogger"

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

_handler_ids: list[int] = []


def setup_logger(
    level: str = "INFO",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    console: bool = True,
) -> list[int]:
    """Install filelogger's diagnostics sinks, replacing any it installed before.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a diagnostics file. Rotated and zipped.
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")
        console: Also write filelogger records to stderr

    Returns:
        Handler ids of the sinks now installed
    """
    teardown_logger()

    if console:
        _handler_ids.append(
            logger.add(
                sys.stderr,
                format=CONSOLE_FORMAT,
                level=level,
                colorize=True,
                filter=LIBRARY_NAME,
            )
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        _handler_ids.append(
            logger.add(
                log_path,
                format=FILE_FORMAT,
                level=level,
                filter=LIBRARY_NAME,
                rotation=rotation,
                retention=retention,
                compression="zip",
                backtrace=True,
                diagnose=True,
            )
        )

    logger.info(f"filelogger diagnostics at level={level}, file={log_file or 'none'}")
    return list(_handler_ids)


def teardown_logger() -> None:
    """Remove the sinks installed by setup_logger, flushing any diagnostics file."""
    while _handler_ids:
        handler_id = _handler_ids.pop()
        try:
            logger.remove(handler_id)
        except ValueError:
            # Already removed by the host (e.g. a global logger.remove())
            logger.debug(f"Diagnostics sink {handler_id} was already removed")
