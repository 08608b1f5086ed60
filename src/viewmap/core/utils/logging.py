"""
Logging configuration using loguru.

Library code just does ``from loguru import logger``; the CLI calls
``configure_logging()`` once with the validated settings.
"""

import sys

from loguru import logger

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Send log records to stderr and, optionally, a rotating file.

    stdout is left alone so emitted rows can be piped.

    Args:
        level: One of LOG_LEVELS, any case.
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string for the stderr sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.

    Raises:
        ValueError: If *level* is not a known level name.
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")

    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            rotation=rotation,
            retention=retention,
        )


def configure_logging(settings, level: str | None = None) -> None:
    """Apply the ``logging`` section of a ``ViewMapConfig``; *level* overrides it."""
    log_file = str(settings.logging.file) if settings.logging.file else None
    setup_logging(level=level or settings.logging.level, log_file=log_file)
