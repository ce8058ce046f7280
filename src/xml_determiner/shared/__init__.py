"""Shared utilities for document validation.

This module provides configuration objects, result types and logging helpers
used by the API, CLI and tools layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    ValidatorConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    ValidationMetrics,
    ValidationResult,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ValidatorConfig",
    "CorrelationLogger",
    "get_logger",
    "ValidationMetrics",
    "ValidationResult",
]
