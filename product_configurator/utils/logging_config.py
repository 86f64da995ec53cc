"""
Logging configuration for the product configurator.
"""
import os
import logging
from datetime import datetime
import threading
from typing import Optional

# Track if logging has been initialized
_logging_initialized = False
_logging_lock = threading.Lock()

# File logging is opt-in; console logging is always on
DEFAULT_LOG_DIR = os.environ.get("CONFIGURATOR_LOG_DIR")
DEFAULT_LOG_LEVEL = os.environ.get("CONFIGURATOR_LOG_LEVEL", "WARNING").upper()


def setup_logging(log_level=None, log_dir: Optional[str] = DEFAULT_LOG_DIR, force: bool = False):
    """
    Set up logging configuration.

    Args:
        log_level: Logging level (default: CONFIGURATOR_LOG_LEVEL or WARNING)
        log_dir: Directory for log files; no file is written when None
        force: Reconfigure even if logging was already initialized

    Returns:
        logging.Logger: Configured logger
    """
    global _logging_initialized

    if log_level is None:
        log_level = getattr(logging, DEFAULT_LOG_LEVEL, logging.WARNING)

    # Use lock to prevent race conditions when multiple threads try to initialize logging
    with _logging_lock:
        if _logging_initialized and not force:
            return logging.getLogger()

        # Configure root logger
        logger = logging.getLogger()
        logger.setLevel(log_level)

        # Clear any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Create a console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        log_file = None
        if log_dir:
            # Create logs directory if it doesn't exist
            os.makedirs(log_dir, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"configurator_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if log_file:
            logger.info(f"Logging initialized. Log file: {log_file}")
        else:
            logger.info("Logging initialized (console only).")

        _logging_initialized = True

        return logger


def get_logger(name):
    """
    Get a logger for a specific module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        logging.Logger: Logger instance
    """
    # Initialize root logger if not done already
    if not _logging_initialized:
        setup_logging()

    return logging.getLogger(name)
