"""
Structured Logging Utilities

Provides the logging setup for the service and helpers for adding
structured context to log messages.
"""

import inspect
import logging
import sys
from contextvars import ContextVar, Token
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from sqlalchemy.exc import StatementError


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Keyword arguments copied into the log context by log_operation
_CONTEXT_KEYS = ("user_id", "task_id", "email")


def configure_logging(log_dir: Optional[Path] = None, level: Optional[str] = None) -> Path:
    """
    Attach a rotating file handler and a console handler to the root logger.

    Args:
        log_dir: Directory for backend.log (defaults to TASKS_LOG_DIR)
        level: Log level name (defaults to TASKS_LOG_LEVEL)

    Returns:
        Path of the log file
    """
    from config.app_config import LOG_DIR, LOG_LEVEL

    log_dir = Path(log_dir or LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "backend.log"
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)

    log_formatter = logging.Formatter(LOG_FORMAT)

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(f"Logging initialized: {log_file}")
    return log_file


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Task created", extra={
            "user_id": user.id,
            "task_id": task.id,
        })
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)



def set_logging_context(**kwargs) -> Token:
    """
    Add keys to the logging context for the current operation.

    This context will be automatically included in all StructuredLogger
    messages within the current context.

    Returns:
        Token to pass to reset_logging_context when the operation ends
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    return _logging_context.set(context)


def reset_logging_context(token: Token):
    """Restore the logging context that was active before set_logging_context."""
    _logging_context.reset(token)


def describe_error(e: Exception) -> str:
    """
    Render an exception for log records without bound statement parameters.

    SQLAlchemy statement errors embed the INSERT/UPDATE parameters, which
    carry password hashes and tokens; only the driver message is kept.
    """
    if isinstance(e, StatementError):
        return str(e.orig) if e.orig is not None else type(e).__name__
    return str(e)


def _operation_context(operation_name: str, args, kwargs) -> Dict[str, Any]:
    context = {"operation": operation_name}

    for key in _CONTEXT_KEYS:
        if key in kwargs:
            context[key] = kwargs[key]

    # Mapped entities passed positionally contribute their table and id
    for arg in args:
        table = getattr(arg, "__tablename__", None)
        if table and getattr(arg, "id", None) is not None:
            context["entity"] = table
            context["entity_id"] = arg.id
            break

    return context


def _failure_context(e: Exception) -> Dict[str, Any]:
    return {"error": describe_error(e), "error_type": type(e).__name__}


def log_operation(operation_name: str):
    """
    Decorator to log operation start/end with structured context.

    The operation's context is also pushed onto the logging context for the
    duration of the call, so StructuredLogger messages emitted inside it
    carry the same operation and entity keys.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("create_record")
        def create(self, obj):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            token = set_logging_context(**_operation_context(operation_name, args, kwargs))

            try:
                logger.debug(f"Starting {operation_name}")
                result = await func(*args, **kwargs)
                logger.info(f"Completed {operation_name}")
                return result
            except Exception as e:
                logger.error(f"Failed {operation_name}", extra=_failure_context(e))
                raise
            finally:
                reset_logging_context(token)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            token = set_logging_context(**_operation_context(operation_name, args, kwargs))

            try:
                logger.debug(f"Starting {operation_name}")
                result = func(*args, **kwargs)
                logger.info(f"Completed {operation_name}")
                return result
            except Exception as e:
                logger.error(f"Failed {operation_name}", extra=_failure_context(e))
                raise
            finally:
                reset_logging_context(token)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
