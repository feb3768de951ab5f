"""Core utilities package."""

from .exceptions import (InvalidAttributeError, InvalidColumnError,
                         MissingPermissionsError, NoActionsError,
                         ScopeFilterError)
from .logging import (LoggerAdapter, get_logger, get_logger_with_context,
                      log_event, setup_logging)

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggerAdapter",
    "get_logger_with_context",
    "log_event",
    "ScopeFilterError",
    "InvalidColumnError",
    "InvalidAttributeError",
    "NoActionsError",
    "MissingPermissionsError",
]
