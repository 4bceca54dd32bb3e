"""
Weight and capacity abstractions for the optimization engine.

This module is the single extension point of the solver: a domain plugs in
by providing capacity descriptors (``CapacityDimension``) and requirement
predicates (``WeightDimension``). The engine never looks inside either.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from src.shared.time_slot import TimeSlot


class CapacityDimension(ABC):
    """
    Marker base class for a capacity-unit descriptor.

    A capacity unit is an atomic, reusable capability (e.g. "this resource
    offers skill X during slot T"). It can be used once per overlapping
    time window within a single candidate solution.
    """


class WeightDimension(ABC):
    """
    A single typed requirement of an item.

    Implementations decide which capacity descriptors satisfy them and may
    carry a required time slot. A requirement without a time slot is not
    time-exclusive.
    """

    @abstractmethod
    def is_satisfied_by(self, capacity: CapacityDimension) -> bool:
        """
        Test whether a capacity unit satisfies this requirement.

        Args:
            capacity: Capacity descriptor to test

        Returns:
            True if the capacity can fulfil the requirement
        """
        pass

    @abstractmethod
    def get_time_slot(self) -> Optional[TimeSlot]:
        """Return the required time slot, or None if the requirement is not time-bound."""
        pass


@dataclass(frozen=True)
class TotalWeight:
    """Ordered sequence of requirements making up an item's total weight."""

    weight_components: Tuple[WeightDimension, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "weight_components", tuple(self.weight_components))

    @classmethod
    def zero(cls) -> "TotalWeight":
        return cls()

    @classmethod
    def of(cls, *components: WeightDimension) -> "TotalWeight":
        return cls(tuple(components))

    def components(self) -> Tuple[WeightDimension, ...]:
        return self.weight_components

    @property
    def is_zero(self) -> bool:
        return len(self.weight_components) == 0


@dataclass(frozen=True)
class TotalCapacity:
    """
    Immutable pool of capacity units for one optimization run.

    Units are identified by position, so two equal descriptors still count
    as two separate units.
    """

    capacity_dimensions: Tuple[CapacityDimension, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "capacity_dimensions", tuple(self.capacity_dimensions))

    @classmethod
    def of(cls, *capacities: CapacityDimension) -> "TotalCapacity":
        return cls(tuple(capacities))

    @classmethod
    def zero(cls) -> "TotalCapacity":
        return cls()

    def capacities(self) -> Tuple[CapacityDimension, ...]:
        return self.capacity_dimensions

    @property
    def size(self) -> int:
        return len(self.capacity_dimensions)

    def add(self, capacity: CapacityDimension) -> "TotalCapacity":
        return TotalCapacity(self.capacity_dimensions + (capacity,))

    def add_all(self, capacities: Iterable[CapacityDimension]) -> "TotalCapacity":
        return TotalCapacity(self.capacity_dimensions + tuple(capacities))
