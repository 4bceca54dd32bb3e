"""
Simulation Facade.

Answers staffing questions ("which projects should we take?", "does it pay
off to hire one more person?") by translating projects and resources into
items and capacities of the optimization engine.
"""

from typing import List, Optional, Sequence

import logfire

from src.optimization.core.dimensions import TotalCapacity, TotalWeight
from src.optimization.core.engine import OptimizationEngine
from src.optimization.core.model import Item, Result
from src.simulation.models import (
    AdditionalPricedCapability,
    SimulatedCapabilities,
    SimulatedProject,
)


class SimulationFacade:
    """Entry point of the simulation layer."""

    def __init__(self, optimization_engine: Optional[OptimizationEngine] = None):
        self.optimization_engine = optimization_engine or OptimizationEngine()

    def what_is_the_optimal_setup(
        self,
        projects: Sequence[SimulatedProject],
        total_capability: SimulatedCapabilities
    ) -> Result:
        """
        Pick the most profitable projects the available capabilities can staff.

        Chosen items are named after their project ids.
        """
        with logfire.span("Simulate Optimal Setup", projects=len(projects), capabilities=len(total_capability)):
            return self.optimization_engine.calculate(
                self.to_items(projects),
                self.to_capacity(total_capability)
            )

    def profit_after_buying_new_capability(
        self,
        projects: Sequence[SimulatedProject],
        capabilities_without_new_one: SimulatedCapabilities,
        new_priced_capability: AdditionalPricedCapability
    ) -> float:
        """Return the profit gained by buying the capability, net of its price."""
        return self.optimization_engine.evaluate_acquisition_value(
            self.to_items(projects),
            self.to_capacity(capabilities_without_new_one),
            new_priced_capability.available_resource_capability,
            new_priced_capability.value
        )

    @staticmethod
    def to_capacity(capabilities: SimulatedCapabilities) -> TotalCapacity:
        return TotalCapacity.of(*capabilities.capabilities)

    @staticmethod
    def to_items(projects: Sequence[SimulatedProject]) -> List[Item]:
        return [
            Item(
                name=str(project.project_id),
                value=project.calculate_value(),
                total_weight=TotalWeight.of(*project.missing_demands)
            )
            for project in projects
        ]
