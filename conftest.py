"""
PyTest configuration and fixtures for the capacity optimizer.

This module provides shared test fixtures: calendar slots used across the
scenarios, configured engines, and a local-only logfire setup.
"""

import os
import sys
from datetime import timedelta

import pytest
import logfire

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.core.config import settings
from src.optimization.core.config import create_test_config
from src.optimization.core.engine import OptimizationEngine
from src.shared.time_slot import TimeSlot


# Override settings for testing
settings.environment = "testing"
settings.logfire_environment = "testing"
settings.logfire_token = None

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def jan_1() -> TimeSlot:
    return TimeSlot.create_daily_time_slot_at_utc(2021, 1, 1)


@pytest.fixture
def jan_2() -> TimeSlot:
    return TimeSlot.create_daily_time_slot_at_utc(2021, 1, 2)


@pytest.fixture
def jan_3() -> TimeSlot:
    return TimeSlot.create_daily_time_slot_at_utc(2021, 1, 3)


@pytest.fixture
def jan_1_to_jan_3() -> TimeSlot:
    return TimeSlot.create_time_slot_at_utc_of_duration(2021, 1, 1, timedelta(days=3))


@pytest.fixture
def engine() -> OptimizationEngine:
    """Engine with the default search budget."""
    return OptimizationEngine()


@pytest.fixture
def test_engine() -> OptimizationEngine:
    """Small, seeded, quiet engine."""
    return OptimizationEngine(create_test_config())
