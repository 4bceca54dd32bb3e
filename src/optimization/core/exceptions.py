"""
Exceptions raised by the optimization engine.

Infeasible items are not errors: the matcher silently leaves them out of a
candidate. Only contract violations at the boundary are raised.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class OptimizationError(Exception):
    """Base exception for optimization errors."""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_code = error_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)


class InvalidInputError(OptimizationError, ValueError):
    """Raised before any search work when the caller breaks the input contract."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="invalid_input", details=details)


class ConfigurationError(OptimizationError, ValueError):
    """Raised when an optimizer configuration is inconsistent."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, error_code="invalid_configuration", details=details)
