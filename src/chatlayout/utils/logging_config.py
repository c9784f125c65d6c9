"""
Centralized logging configuration for chatlayout.
Ensures all logging goes to files and never to stdout/stderr so that
rendered layouts in the terminal are not interleaved with log lines.
"""
import logging

from chatlayout import config


def _file_handler(level: int = logging.NOTSET) -> logging.FileHandler:
    logs_dir = config.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(logs_dir / config.LOG_FILE_NAME, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(config.LOG_FORMAT))
    return file_handler


def setup_logging(verbose: bool = False):
    """Setup centralized logging for the entire application.

    Args:
        verbose: Enable debug level logging if True
    """
    # Clear any existing handlers to avoid stdout/stderr leakage
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    level = logging.DEBUG if verbose else logging.INFO
    file_handler = _file_handler(level)

    logging.root.setLevel(level)
    logging.root.handlers = [file_handler]

    logger = logging.getLogger('chatlayout')
    logger.setLevel(level)
    logger.handlers = [file_handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance that's guaranteed to only log to files.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance configured for file-only output
    """
    logger = logging.getLogger(name)

    # Ensure this logger doesn't accidentally write to stdout/stderr
    logger.propagate = False

    if not logger.handlers:
        logger.addHandler(_file_handler())

    return logger
