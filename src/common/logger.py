"""
Logging configuration for the 2-3 tree project.

Every module asks for its logger through get_logger(__name__); the first
call configures the root logger from config.py unless setup_logging() was
already called explicitly (the CLIs do that to honour --log-level).

Usage:
    from src.common.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("Root split, height is now 3")
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Track if logging has been set up
_logging_initialized = False


def setup_logging(
    level: Optional[str] = None,
    log_to_file: Optional[bool] = None,
    log_file_path: Optional[str] = None,
    force: bool = False
) -> None:
    """
    Initialize logging configuration for the project.

    Only the first call has an effect unless force is True, which lets a
    CLI re-apply its own --log-level after modules were already imported.

    Args:
        level: Log level name. If None, uses config.LOG_LEVEL.
        log_to_file: Whether to also log to a file.
                     If None, uses config.LOG_TO_FILE.
        log_file_path: Path to log file.
                       If None, uses config.LOG_FILE_PATH.
        force: Reconfigure even if logging was already set up.
    """
    global _logging_initialized

    if _logging_initialized and not force:
        return

    # Import config here to avoid circular imports
    import config

    level = level or config.LOG_LEVEL
    log_to_file = log_to_file if log_to_file is not None else config.LOG_TO_FILE
    log_file_path = log_file_path or config.LOG_FILE_PATH

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers (prevents duplicate logs)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_to_file:
        file_handler = logging.FileHandler(log_file_path)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _logging_initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module name.

    Automatically initializes logging if not already done.

    Args:
        name: Name for the logger, typically __name__ of the calling module.

    Returns:
        Configured logger instance.
    """
    if not _logging_initialized:
        setup_logging()

    return logging.getLogger(name)
