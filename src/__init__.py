"""
Capacity Optimizer - Source Package

This package contains the genetic capacity optimization engine, the shared
time and capability primitives, and the resource simulation layer built on
top of the engine.
"""

__version__ = "1.0.0"

# Package-level imports for convenience
from src.core.config import settings

__all__ = [
    "settings",
    "__version__",
]
