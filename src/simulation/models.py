"""
Simulation models: projects with time-bound demands and resources with
time-bound capabilities, expressed as weights and capacities of the
optimization engine.
"""

import uuid
from dataclasses import dataclass, field
from typing import Callable, Iterable, Tuple, Union

from src.optimization.core.dimensions import CapacityDimension, WeightDimension
from src.shared.capability import Capability, CapabilitySelector
from src.shared.time_slot import TimeSlot


@dataclass(frozen=True)
class ProjectId:
    """Identifier of a simulated project."""

    project_id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def new_one(cls) -> "ProjectId":
        return cls()

    def __str__(self) -> str:
        return str(self.project_id)


@dataclass(frozen=True)
class AvailableResourceCapability(CapacityDimension):
    """
    What one resource can do and when.

    A plain ``Capability`` passed as ``capability_selector`` is wrapped into a
    selector that can perform just that capability.
    """

    resource_id: uuid.UUID
    capability_selector: Union[CapabilitySelector, Capability]
    time_slot: TimeSlot

    def __post_init__(self):
        if isinstance(self.capability_selector, Capability):
            object.__setattr__(
                self,
                "capability_selector",
                CapabilitySelector.can_just_perform(self.capability_selector)
            )

    def performs(self, capability: Capability) -> bool:
        return self.capability_selector.can_perform(capability)


@dataclass(frozen=True)
class Demand(WeightDimension):
    """A need for one capability during a time slot."""

    capability: Capability
    slot: TimeSlot

    @classmethod
    def demand_for(cls, capability: Capability, slot: TimeSlot) -> "Demand":
        return cls(capability, slot)

    def is_satisfied_by(self, capacity: CapacityDimension) -> bool:
        """Satisfied by a resource that performs the capability for the whole slot."""
        if not isinstance(capacity, AvailableResourceCapability):
            return False
        return capacity.performs(self.capability) and self.slot.within(capacity.time_slot)

    def get_time_slot(self) -> TimeSlot:
        return self.slot


@dataclass(frozen=True)
class Demands:
    all: Tuple[Demand, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "all", tuple(self.all))

    @classmethod
    def of(cls, *demands: Demand) -> "Demands":
        return cls(demands)

    def __iter__(self):
        return iter(self.all)

    def __len__(self) -> int:
        return len(self.all)


@dataclass
class SimulatedProject:
    """
    A project competing for resources.

    The value is supplied lazily so that it can be derived from earnings or
    from the reputation loss avoided by taking the project.
    """

    project_id: ProjectId
    value: Callable[[], float]
    missing_demands: Demands

    def calculate_value(self) -> float:
        return self.value()


@dataclass(frozen=True)
class SimulatedCapabilities:
    """Immutable set of resource capabilities available to a simulation."""

    capabilities: Tuple[AvailableResourceCapability, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "capabilities", tuple(self.capabilities))

    @classmethod
    def none(cls) -> "SimulatedCapabilities":
        return cls()

    def add(self, *new_capabilities: AvailableResourceCapability) -> "SimulatedCapabilities":
        """Return a copy extended with the given capabilities."""
        return SimulatedCapabilities(self.capabilities + tuple(new_capabilities))

    def add_all(self, new_capabilities: Iterable[AvailableResourceCapability]) -> "SimulatedCapabilities":
        return self.add(*new_capabilities)

    def __len__(self) -> int:
        return len(self.capabilities)


@dataclass(frozen=True)
class AdditionalPricedCapability:
    """A capability that can be bought for ``value``."""

    value: float
    available_resource_capability: AvailableResourceCapability
