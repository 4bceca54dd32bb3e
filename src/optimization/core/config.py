"""
Optimizer Configuration Module.

This module defines configuration classes for the genetic capacity optimizer,
including evolution parameters and logging settings.
"""

from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import timedelta
import json
import os

from src.optimization.core.exceptions import ConfigurationError


class EvolutionParameters(BaseModel):
    """Parameters controlling the genetic search."""

    model_config = ConfigDict(validate_assignment=True)

    generations: int = Field(
        default=5,
        ge=0,
        le=1000,
        description="Number of breeding rounds after the initial population"
    )
    population_size: int = Field(
        default=200,
        ge=1,
        le=100000,
        description="Number of candidates bred per generation"
    )
    survivors_per_generation: int = Field(
        default=20,
        ge=1,
        description="Top candidates kept after each scoring round"
    )
    mutation_rate: float = Field(
        default=0.1,
        ge=0.0,
        lt=1.0,
        description="Probability of one pairwise swap per mutation step"
    )
    skip_item_chance: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Probability of skipping an item while seeding the initial population"
    )

    @field_validator('survivors_per_generation')
    def validate_survivors(cls, v, info):
        """Ensure survivors do not outnumber the population."""
        if 'population_size' in info.data and v > info.data['population_size']:
            raise ValueError('Survivors per generation must not exceed population size')
        return v


class LoggingConfig(BaseModel):
    """Configuration for logging and monitoring."""

    enable_logging: bool = Field(
        default=True,
        description="Enable evolution progress logging"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_interval: int = Field(
        default=1,
        ge=1,
        description="Generations between progress logs"
    )
    metrics_export: bool = Field(
        default=True,
        description="Send generation statistics to logfire"
    )


class OptimizerConfig(BaseModel):
    """Main configuration class for the optimizer."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    evolution: EvolutionParameters = Field(
        default_factory=EvolutionParameters,
        description="Evolution parameters"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging and monitoring configuration"
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Seed of the engine's random source"
    )
    max_runtime: Optional[timedelta] = Field(
        default=None,
        description="Checked between generations; remaining generations are skipped once exceeded"
    )

    @classmethod
    def from_env(cls) -> "OptimizerConfig":
        """Create configuration from environment variables."""
        config_dict = {}

        if generations := os.getenv("OPTIMIZER_GENERATIONS"):
            config_dict.setdefault("evolution", {})["generations"] = int(generations)
        if pop_size := os.getenv("OPTIMIZER_POPULATION_SIZE"):
            config_dict.setdefault("evolution", {})["population_size"] = int(pop_size)
        if survivors := os.getenv("OPTIMIZER_SURVIVORS"):
            config_dict.setdefault("evolution", {})["survivors_per_generation"] = int(survivors)
        if mutation_rate := os.getenv("OPTIMIZER_MUTATION_RATE"):
            config_dict.setdefault("evolution", {})["mutation_rate"] = float(mutation_rate)
        if skip_chance := os.getenv("OPTIMIZER_SKIP_ITEM_CHANCE"):
            config_dict.setdefault("evolution", {})["skip_item_chance"] = float(skip_chance)

        if random_seed := os.getenv("OPTIMIZER_RANDOM_SEED"):
            config_dict["random_seed"] = int(random_seed)

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> "OptimizerConfig":
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls(**data)

    def validate_consistency(self) -> None:
        """Validate configuration consistency across components."""
        # Assignment validation only sees one field at a time
        if self.evolution.survivors_per_generation > self.evolution.population_size:
            raise ConfigurationError(
                f"Survivors per generation ({self.evolution.survivors_per_generation}) must not "
                f"exceed population size ({self.evolution.population_size})",
                details={
                    "survivors_per_generation": self.evolution.survivors_per_generation,
                    "population_size": self.evolution.population_size,
                }
            )


def create_default_config() -> OptimizerConfig:
    """Create the default configuration (5 generations of 200, 20 survivors, 10% mutation)."""
    return OptimizerConfig()


def create_test_config() -> OptimizerConfig:
    """Create a configuration suitable for testing (smaller, seeded, quiet)."""
    return OptimizerConfig(
        evolution=EvolutionParameters(
            generations=3,
            population_size=40,
            survivors_per_generation=8,
            mutation_rate=0.1
        ),
        logging=LoggingConfig(
            enable_logging=False,
            metrics_export=False
        ),
        random_seed=42
    )
