"""
Logging setup built on loguru.
"""
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} | {message}"
)


def setup_logging(
    level: str = "INFO",
    logs_dir: Optional[Union[str, Path]] = None,
    rotation: str = "1 day",
    retention: str = "30 days",
) -> None:
    """
    Replace loguru's default handler with the pipeline's sinks.

    Args:
        level: Console logging level (DEBUG, INFO, WARNING, ERROR)
        logs_dir: Directory for rotating log files; console only when None
        rotation: When to rotate logs (e.g., "1 day", "50 MB")
        retention: How long to keep logs (e.g., "30 days")
    """
    logger.remove()

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if logs_dir is not None:
        log_path = Path(logs_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # Runtime log (all messages at INFO and above)
        logger.add(
            log_path / "runtime.log",
            format=FILE_FORMAT,
            level="INFO",
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )

        # Error log (ERROR and above only), kept longer
        logger.add(
            log_path / "errors.log",
            format=FILE_FORMAT,
            level="ERROR",
            rotation=rotation,
            retention="60 days",
            encoding="utf-8",
        )

    logger.debug(f"Logging initialized: level={level}, dir={logs_dir}")
