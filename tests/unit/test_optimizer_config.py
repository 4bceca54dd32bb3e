"""
Unit tests for optimizer configuration and process settings.

Tests cover:
- Default search budget
- Environment overrides
- Parameter validation and consistency checks
- Saving and loading
"""

import pytest
from datetime import timedelta
from pathlib import Path

from pydantic import ValidationError

from src.core.config import Settings
from src.optimization import (
    ConfigurationError,
    EvolutionParameters,
    OptimizationEngine,
    OptimizerConfig,
    create_default_config,
    create_test_config,
)


class TestOptimizerConfiguration:
    """Test suite for optimizer configuration."""

    def test_default_config_creation(self):
        """Test the default search budget."""
        config = OptimizerConfig()

        assert config.evolution.generations == 5
        assert config.evolution.population_size == 200
        assert config.evolution.survivors_per_generation == 20
        assert config.evolution.mutation_rate == 0.1
        assert config.evolution.skip_item_chance == 0.0
        assert config.random_seed is None
        assert config.max_runtime is None

    def test_config_from_environment(self, monkeypatch):
        """Test loading configuration from environment variables."""
        monkeypatch.setenv("OPTIMIZER_POPULATION_SIZE", "300")
        monkeypatch.setenv("OPTIMIZER_GENERATIONS", "8")
        monkeypatch.setenv("OPTIMIZER_MUTATION_RATE", "0.2")
        monkeypatch.setenv("OPTIMIZER_RANDOM_SEED", "42")

        config = OptimizerConfig.from_env()

        assert config.evolution.population_size == 300
        assert config.evolution.generations == 8
        assert config.evolution.mutation_rate == 0.2
        assert config.evolution.survivors_per_generation == 20
        assert config.random_seed == 42

    def test_evolution_parameters_validation(self):
        """Test validation of evolution parameters."""
        params = EvolutionParameters(population_size=50, survivors_per_generation=50)
        assert params.survivors_per_generation == 50

        with pytest.raises(ValidationError):
            EvolutionParameters(mutation_rate=1.5)

        with pytest.raises(ValidationError):
            EvolutionParameters(population_size=0)

        with pytest.raises(ValidationError):
            EvolutionParameters(population_size=10, survivors_per_generation=11)

    def test_mutation_rate_must_stay_below_one(self, monkeypatch):
        """A certain swap would make the geometric mutation loop endless."""
        assert EvolutionParameters(mutation_rate=0.99).mutation_rate == 0.99

        with pytest.raises(ValidationError):
            EvolutionParameters(mutation_rate=1.0)

        params = EvolutionParameters()
        with pytest.raises(ValidationError):
            params.mutation_rate = 1.0

        monkeypatch.setenv("OPTIMIZER_MUTATION_RATE", "1.0")
        with pytest.raises(ValidationError):
            OptimizerConfig.from_env()

    def test_extra_fields_are_rejected(self):
        with pytest.raises(ValidationError):
            OptimizerConfig(crossover_rate=0.8)

    def test_config_consistency_validation(self):
        """Survivors outnumbering the population are caught before a run."""
        config = OptimizerConfig()
        config.evolution.population_size = 10

        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_consistency()

        assert exc_info.value.error_code == "invalid_configuration"
        assert exc_info.value.details["population_size"] == 10

        with pytest.raises(ConfigurationError):
            OptimizationEngine(config)

    def test_config_save_and_load(self, tmp_path: Path):
        """Test saving and loading configuration."""
        config = create_test_config()
        config.max_runtime = timedelta(seconds=30)
        path = tmp_path / "optimizer.json"

        config.save(str(path))
        loaded = OptimizerConfig.load(str(path))

        assert loaded.evolution.population_size == config.evolution.population_size
        assert loaded.evolution.generations == config.evolution.generations
        assert loaded.random_seed == 42
        assert loaded.max_runtime == timedelta(seconds=30)

    def test_predefined_configurations(self):
        default = create_default_config()
        assert default.evolution.population_size == 200

        test = create_test_config()
        assert test.evolution.population_size == 40
        assert test.evolution.generations == 3
        assert test.logging.enable_logging is False
        assert test.random_seed == 42


class TestSettings:
    """Test suite for process settings."""

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOGFIRE_SERVICE_NAME", "staffing-simulator")

        settings = Settings()

        assert settings.is_production()
        assert settings.get_logfire_settings()["service_name"] == "staffing-simulator"

    def test_empty_token_is_not_sent(self):
        settings = Settings(logfire_token="")

        assert settings.get_logfire_settings()["token"] is None
