"""Shared building blocks for composable XML construction.

This module provides the outcome types and error taxonomy threaded through
every builder operation, together with configuration objects and logging
utilities used by the fluent builder API.
"""

from .result import (
    BuilderError,
    Err,
    Ok,
    Outcome,
    OutcomeAccessError,
)
from .config import (
    BuilderConfig,
    ConfigError,
    ConfigValidationError,
    DeclarationConfig,
    LoggingConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "BuilderError",
    "Err",
    "Ok",
    "Outcome",
    "OutcomeAccessError",
    "BuilderConfig",
    "ConfigError",
    "ConfigValidationError",
    "DeclarationConfig",
    "LoggingConfig",
    "CorrelationLogger",
    "get_logger",
]
