import os
import sys

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def setup_logger(
    *, json_logs: bool = False, level: str = "INFO", log_file: str | None = None
) -> None:
    """Configure loguru for the scanner.

    Console goes to stderr so ``--json`` output on stdout stays parseable.
    LOG_LEVEL env overrides ``level``. ``log_file`` adds a rotating DEBUG
    sink that also captures the fail-open check details.
    """
    console_level = os.getenv("LOG_LEVEL", level).upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, serialize=True, level=console_level)
    else:
        logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    if log_file:
        logger.add(
            log_file,
            rotation="20 MB",
            retention="7 days",
            compression="gz",
            level="DEBUG",
            serialize=json_logs,
        )
