"""
Fluent builders for simulation inputs.

Example:
    projects = (SimulatedProjectsBuilder()
                .with_project(project_id)
                .that_requires(Demand.demand_for(Capability.skill("JAVA"), jan_1))
                .that_can_earn(100)
                .build())
"""

import uuid
from typing import Callable, Dict, List, Optional

from src.shared.capability import Capability, CapabilitySelector
from src.shared.time_slot import TimeSlot
from src.simulation.models import (
    AvailableResourceCapability,
    Demand,
    Demands,
    ProjectId,
    SimulatedCapabilities,
    SimulatedProject,
)


class SimulatedProjectsBuilder:
    """Builds simulated projects in declaration order."""

    def __init__(self):
        self._current: Optional[ProjectId] = None
        self._project_ids: List[ProjectId] = []
        self._demands: Dict[ProjectId, List[Demand]] = {}
        self._values: Dict[ProjectId, Callable[[], float]] = {}

    def with_project(self, project_id: ProjectId) -> "SimulatedProjectsBuilder":
        self._current = project_id
        if project_id not in self._demands:
            self._project_ids.append(project_id)
            self._demands[project_id] = []
        return self

    def that_requires(self, *demands: Demand) -> "SimulatedProjectsBuilder":
        """Add demands to the current project; repeated calls accumulate."""
        self._demands[self._require_current()].extend(demands)
        return self

    def that_can_earn(self, earnings: float) -> "SimulatedProjectsBuilder":
        self._values[self._require_current()] = lambda: earnings
        return self

    def that_can_generate_reputation_loss(self, factor: float) -> "SimulatedProjectsBuilder":
        """Value the current project by the reputation loss avoided when it is taken."""
        self._values[self._require_current()] = lambda: factor
        return self

    def build(self) -> List[SimulatedProject]:
        return [
            SimulatedProject(
                project_id=project_id,
                value=self._values.get(project_id, lambda: 0.0),
                missing_demands=Demands.of(*self._demands[project_id])
            )
            for project_id in self._project_ids
        ]

    def _require_current(self) -> ProjectId:
        if self._current is None:
            raise ValueError("Call with_project() before describing a project")
        return self._current


class AvailableCapabilitiesBuilder:
    """
    Builds the capabilities resources bring to a simulation.

    Each ``that_is_available_at`` call records one capability of the current
    employee, so an employee can be available at several slots.
    """

    def __init__(self):
        self._capabilities: List[AvailableResourceCapability] = []
        self._current_resource: Optional[uuid.UUID] = None
        self._current_selector: Optional[CapabilitySelector] = None

    def with_employee(self, resource_id: uuid.UUID) -> "AvailableCapabilitiesBuilder":
        self._current_resource = resource_id
        self._current_selector = None
        return self

    def that_brings(self, capability: Capability) -> "AvailableCapabilitiesBuilder":
        self._current_selector = CapabilitySelector.can_just_perform(capability)
        return self

    def that_brings_simultaneously(self, *capabilities: Capability) -> "AvailableCapabilitiesBuilder":
        self._current_selector = CapabilitySelector.can_perform_all_at_the_time(capabilities)
        return self

    def that_is_available_at(self, time_slot: TimeSlot) -> "AvailableCapabilitiesBuilder":
        if self._current_resource is None:
            raise ValueError("Call with_employee() before declaring availability")
        if self._current_selector is None:
            raise ValueError("Declare what the employee brings before their availability")
        self._capabilities.append(
            AvailableResourceCapability(self._current_resource, self._current_selector, time_slot)
        )
        return self

    def build(self) -> SimulatedCapabilities:
        return SimulatedCapabilities(self._capabilities)
