"""
Resource Simulation.

Models projects that demand capabilities at given times and resources that
bring capabilities at given times, and uses the optimization engine to pick
the most profitable staffing or to price an additional resource.
"""

from src.simulation.models import (
    ProjectId,
    Demand,
    Demands,
    SimulatedProject,
    AvailableResourceCapability,
    SimulatedCapabilities,
    AdditionalPricedCapability,
)
from src.simulation.builders import SimulatedProjectsBuilder, AvailableCapabilitiesBuilder
from src.simulation.facade import SimulationFacade

__all__ = [
    # Models
    "ProjectId",
    "Demand",
    "Demands",
    "SimulatedProject",
    "AvailableResourceCapability",
    "SimulatedCapabilities",
    "AdditionalPricedCapability",
    # Builders
    "SimulatedProjectsBuilder",
    "AvailableCapabilitiesBuilder",
    # Facade
    "SimulationFacade",
]
