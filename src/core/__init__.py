"""
Core functionality for the capacity optimizer.

This package contains process-level settings and observability setup shared
by everything built on the optimizer.
"""

from src.core.config import Settings, settings
from src.core.observability import configure_observability

__all__ = [
    "Settings",
    "settings",
    "configure_observability",
]
