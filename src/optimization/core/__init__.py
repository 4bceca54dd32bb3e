"""Core components of the genetic capacity optimizer."""

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
from src.optimization.core.engine import OptimizationEngine, by_value_descending
from src.optimization.core.exceptions import (
    OptimizationError,
    InvalidInputError,
    ConfigurationError
)
from src.optimization.core.matcher import CapacityMatcher, CapacityUsage
from src.optimization.core.model import Item, Allocation, Result
from src.optimization.core.population import Population, Candidate

__all__ = [
    "OptimizerConfig",
    "EvolutionParameters",
    "LoggingConfig",
    "create_default_config",
    "create_test_config",
    "CapacityDimension",
    "WeightDimension",
    "TotalCapacity",
    "TotalWeight",
    "OptimizationEngine",
    "by_value_descending",
    "OptimizationError",
    "InvalidInputError",
    "ConfigurationError",
    "CapacityMatcher",
    "CapacityUsage",
    "Item",
    "Allocation",
    "Result",
    "Population",
    "Candidate",
]
