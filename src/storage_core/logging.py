"""
Logging configuration and utilities for storage-core
"""
import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional
import json
import time
from functools import wraps


# Attributes every LogRecord carries; anything else came in through ``extra``
_RECORD_ATTRIBUTES = frozenset([
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'lineno', 'funcName', 'created', 'msecs', 'relativeCreated',
    'thread', 'threadName', 'processName', 'process', 'taskName',
    'exc_info', 'exc_text', 'stack_info', 'message', 'asctime',
])


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Set up logging configuration for storage-core.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to
        json_format: Use JSON format for structured logging

    Returns:
        Configured package logger
    """
    if json_format:
        formatter_class = JsonFormatter
        format_string = None
    else:
        formatter_class = logging.Formatter
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'class': formatter_class.__module__ + '.' + formatter_class.__name__,
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'level': level,
                'formatter': 'standard',
                'stream': sys.stdout,
            },
        },
        'loggers': {
            'storage_core': {
                'level': level,
                'handlers': ['console'],
                'propagate': False,
            },
        }
    }

    if format_string:
        logging_config['formatters']['standard']['format'] = format_string

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logging_config['handlers']['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': level,
            'formatter': 'standard',
            'filename': str(log_file),
            'maxBytes': 10 * 1024 * 1024,  # 10MB
            'backupCount': 5,
        }
        logging_config['loggers']['storage_core']['handlers'].append('file')

    logging.config.dictConfig(logging_config)

    logger = logging.getLogger('storage_core')
    logger.debug(f"Logging initialized with level: {level}")
    if log_file:
        logger.debug(f"Log file: {log_file}")

    return logger


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


def timed_operation(operation_name: str = None):
    """Decorator to time function execution."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            name = operation_name or f"{func.__module__}.{func.__name__}"
            logger = logging.getLogger('storage_core.performance')

            start_time = time.time()
            try:
                result = func(*args, **kwargs)
                duration = time.time() - start_time
                logger.debug(f"Operation '{name}' completed", extra={
                    'operation': name,
                    'duration_ms': round(duration * 1000, 2),
                    'success': True
                })
                return result
            except Exception as e:
                duration = time.time() - start_time
                logger.error(f"Operation '{name}' failed", extra={
                    'operation': name,
                    'duration_ms': round(duration * 1000, 2),
                    'success': False,
                    'error': str(e),
                    'error_type': type(e).__name__
                })
                raise
        return wrapper
    return decorator


def get_logger(name: str = 'storage_core') -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)


def configure_logging_from_env() -> logging.Logger:
    """Configure logging from environment variables."""
    level = os.getenv('STORAGE_CORE_LOG_LEVEL', 'INFO').upper()
    log_file = os.getenv('STORAGE_CORE_LOG_FILE')
    json_format = os.getenv('STORAGE_CORE_LOG_JSON', 'false').lower() == 'true'

    return setup_logging(
        level=level,
        log_file=Path(log_file) if log_file else None,
        json_format=json_format
    )
