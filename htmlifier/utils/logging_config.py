"""
Centralised logging configuration for the HTMLifier
Single source of truth for all logging setup
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Callable, Dict, Any

# Signature of the progress callback passed through a conversion: (message, type)
# where type is one of LOG_TYPES
LogCallback = Callable[[str, str], None]

LOG_TYPES = ('status', 'progress', 'error')

_LOG_TYPE_LEVELS = {
    'status': logging.INFO,
    'progress': logging.DEBUG,
    'error': logging.ERROR
}


def setup_logging(config: Dict[str, Any]) -> logging.Logger:
    """
    Set up logging configuration based on config settings

    Args:
        config: Logging configuration dictionary

    Returns:
        Configured logger instance
    """
    # Get logging configuration with defaults
    log_level = config.get('level', 'INFO').upper()
    log_format = config.get('format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    log_to_file = config.get('log_to_file', False)
    log_file_path = config.get('log_file_path', 'htmlifier.log')
    max_file_size_mb = config.get('max_file_size_mb', 10)
    backup_count = config.get('backup_count', 5)

    logger = logging.getLogger('htmlifier')
    logger.setLevel(getattr(logging, log_level))

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_to_file:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            max_bytes = max_file_size_mb * 1024 * 1024  # Convert MB to bytes
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(getattr(logging, log_level))
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            logger.info(f"Logging to file: {log_file_path}")

        except OSError as e:
            logger.warning(f"Failed to set up file logging: {e}")

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get logger instance for a specific module

    Args:
        name: Module name (optional)

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f'htmlifier.{name}')
    else:
        return logging.getLogger('htmlifier')


def create_log_callback(logger: logging.Logger = None) -> LogCallback:
    """
    Build a conversion log callback that writes onto a standard logger

    status messages are logged at INFO, progress at DEBUG and error at ERROR.
    Unknown types fall back to INFO.

    Args:
        logger: Target logger (defaults to the htmlifier.conversion logger)

    Returns:
        Callable accepting (message, type)
    """
    target = logger or get_logger('conversion')

    def log(message: str, log_type: str = 'status') -> None:
        target.log(_LOG_TYPE_LEVELS.get(log_type, logging.INFO), message)

    return log


def log_processing_step(logger: logging.Logger, step_name: str, details: str = None) -> None:
    """
    Log processing step with consistent formatting

    Args:
        logger: Logger instance
        step_name: Name of processing step
        details: Additional details (optional)
    """
    separator = "=" * 50
    logger.info(separator)
    logger.info(f"PROCESSING STEP: {step_name.upper()}")
    if details:
        logger.info(f"Details: {details}")
    logger.info(separator)


def log_performance_metric(logger: logging.Logger, operation: str,
                          duration_seconds: float, files_processed: int = None) -> None:
    """
    Log performance metrics for operations

    Args:
        logger: Logger instance
        operation: Name of operation
        duration_seconds: Duration in seconds
        files_processed: Number of files processed (optional)
    """
    message = f"Performance - {operation}: {duration_seconds:.2f}s"

    if files_processed is not None:
        rate = files_processed / duration_seconds if duration_seconds > 0 else 0
        message += f" ({files_processed:,} files, {rate:.0f} files/sec)"

    logger.info(message)
