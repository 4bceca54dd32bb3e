"""
Genetic Capacity Optimizer.

This module implements a genetic-algorithm search for the most valuable set
of items that a pool of time-bound, reusable capacity units can serve. Every
item is either fully served or left out; a capacity unit serves at most one
item per overlapping time window.
"""

from src.optimization.core.config import (
    OptimizerConfig,
    EvolutionParameters,
    LoggingConfig,
    create_default_config,
    create_test_config
)
from src.optimization.core.dimensions import (
    CapacityDimension,
    WeightDimension,
    TotalCapacity,
    TotalWeight
)
from src.optimization.core.engine import OptimizationEngine
from src.optimization.core.exceptions import (
    OptimizationError,
    InvalidInputError,
    ConfigurationError
)
from src.optimization.core.model import Item, Allocation, Result

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "OptimizerConfig",
    "EvolutionParameters",
    "LoggingConfig",
    "create_default_config",
    "create_test_config",
    # Dimensions
    "CapacityDimension",
    "WeightDimension",
    "TotalCapacity",
    "TotalWeight",
    # Engine
    "OptimizationEngine",
    # Errors
    "OptimizationError",
    "InvalidInputError",
    "ConfigurationError",
    # Model
    "Item",
    "Allocation",
    "Result",
]
