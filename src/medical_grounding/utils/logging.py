# ============================================================================
# src/medical_grounding/utils/logging.py
# ============================================================================
"""
Logging configuration and utilities for the medical grounding library.
"""

import logging
import sys
import time
from functools import wraps
from pathlib import Path
from typing import Optional
from datetime import datetime, timezone
import json

from .exceptions import ConfigurationError


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_json: Optional[bool] = None
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to logging_settings.LOG_LEVEL.
        log_file: Optional file path for logging
        format_json: Whether to use JSON format. Defaults to logging_settings.LOG_JSON.

    Raises:
        ConfigurationError: unknown level name
    """
    from ..config import logging_settings

    level = level or logging_settings.LOG_LEVEL
    if format_json is None:
        format_json = logging_settings.LOG_JSON

    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ConfigurationError(f"Unknown log level: {level}")

    if format_json:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers,
        force=True
    )


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Fields passed through `extra={"document_id": ...}`
        for key in ('document_id', 'recognizer'):
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data)


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually __name__)
    """
    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str):
    """
    Decorator to log operation performance at DEBUG level.

    Args:
        logger: Logger instance
        operation: Operation name
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()

            try:
                result = func(*args, **kwargs)
                duration = time.perf_counter() - start
                logger.debug(f"{operation} completed in {duration:.3f}s")
                return result

            except Exception as e:
                duration = time.perf_counter() - start
                logger.error(f"{operation} failed after {duration:.3f}s: {str(e)}")
                raise

        return wrapper
    return decorator
