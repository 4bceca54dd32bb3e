"""
Unit tests for the capacity matcher.

Tests cover:
- All-or-nothing matching of an item's requirements
- Time exclusivity of a capacity unit within one candidate
- Requirements without a time slot
- Skipping while seeding
"""

import random
import uuid
from typing import Optional

from src.optimization.core.dimensions import (
    CapacityDimension,
    TotalCapacity,
    TotalWeight,
    WeightDimension,
)
from src.optimization.core.matcher import CapacityMatcher, CapacityUsage
from src.optimization.core.model import Item
from src.shared import Capability, CapabilitySelector, TimeSlot
from src.simulation import AvailableResourceCapability, Demand


JAVA = Capability.skill("JAVA")
PYTHON = Capability.skill("PYTHON")


class AnyCapacity(WeightDimension):
    """Requirement met by any unit at any time."""

    def is_satisfied_by(self, capacity: CapacityDimension) -> bool:
        return True

    def get_time_slot(self) -> Optional[TimeSlot]:
        return None


def resource(capability, slot: TimeSlot) -> AvailableResourceCapability:
    return AvailableResourceCapability(uuid.uuid4(), capability, slot)


def item(name: str, value: float, *demands) -> Item:
    return Item(name, value, TotalWeight.of(*demands))


def matcher_for(*capacities) -> CapacityMatcher:
    return CapacityMatcher(TotalCapacity.of(*capacities), random.Random(7))


class TestCapacityUsage:
    """Test suite for the per-candidate usage overlay."""

    def test_commit_blocks_overlapping_slots_only(self, jan_1, jan_2, jan_1_to_jan_3):
        usage = CapacityUsage(2)
        usage.commit(0, [jan_1])

        assert not usage.is_free_at(0, jan_1)
        assert not usage.is_free_at(0, jan_1_to_jan_3)
        assert usage.is_free_at(0, jan_2)
        assert usage.is_free_at(1, jan_1)
        assert usage.used_time_slots(0) == [jan_1]


class TestCapacityMatcher:
    """Test suite for building candidates from orderings."""

    def test_single_item_is_allocated(self, jan_1):
        unit = resource(JAVA, jan_1)
        project = item("p1", 10, Demand.demand_for(JAVA, jan_1))

        candidate = matcher_for(unit).build_candidate([project])

        assert candidate.contains(project)
        assert candidate.value == 10
        assert candidate.allocations[project.item_id].capacities == [unit]

    def test_unit_serves_one_item_per_slot(self, jan_1):
        first = item("first", 1, Demand.demand_for(JAVA, jan_1))
        second = item("second", 100, Demand.demand_for(JAVA, jan_1))

        candidate = matcher_for(resource(JAVA, jan_1)).build_candidate([first, second])

        assert candidate.items() == [first]

    def test_unit_serves_consecutive_days(self, jan_1, jan_2, jan_1_to_jan_3):
        monday = item("monday", 1, Demand.demand_for(JAVA, jan_1))
        tuesday = item("tuesday", 1, Demand.demand_for(JAVA, jan_2))

        candidate = matcher_for(resource(JAVA, jan_1_to_jan_3)).build_candidate([monday, tuesday])

        assert len(candidate) == 2

    def test_demand_outside_availability_is_not_matched(self, jan_1, jan_2):
        project = item("p1", 10, Demand.demand_for(JAVA, jan_2))

        candidate = matcher_for(resource(JAVA, jan_1)).build_candidate([project])

        assert len(candidate) == 0

    def test_partially_matched_item_reserves_nothing(self, jan_1):
        """An item missing one requirement leaves its other choices free."""
        greedy = item("greedy", 50, Demand.demand_for(JAVA, jan_1), Demand.demand_for(PYTHON, jan_1))
        modest = item("modest", 5, Demand.demand_for(JAVA, jan_1))

        candidate = matcher_for(resource(JAVA, jan_1)).build_candidate([greedy, modest])

        assert not candidate.contains(greedy)
        assert candidate.contains(modest)

    def test_simultaneous_unit_covers_several_requirements_of_one_item(self, jan_1):
        both = resource(CapabilitySelector.can_perform_all_at_the_time([JAVA, PYTHON]), jan_1)
        project = item("p1", 99, Demand.demand_for(JAVA, jan_1), Demand.demand_for(PYTHON, jan_1))
        other = item("p2", 9, Demand.demand_for(JAVA, jan_1))

        candidate = matcher_for(both).build_candidate([project, other])

        assert candidate.items() == [project]
        assert candidate.allocations[project.item_id].capacities == [both]

    def test_requirement_without_time_slot_records_unit_without_blocking(self, jan_1):
        unit = resource(JAVA, jan_1)
        untimed = item("untimed", 3, AnyCapacity())
        timed = item("timed", 4, Demand.demand_for(JAVA, jan_1))

        candidate = matcher_for(unit).build_candidate([untimed, timed])

        assert candidate.allocations[untimed.item_id].capacities == [unit]
        assert candidate.contains(timed)

    def test_certain_skip_leaves_candidate_empty(self, jan_1):
        project = item("p1", 10, Demand.demand_for(JAVA, jan_1))

        candidate = matcher_for(resource(JAVA, jan_1)).build_candidate([project], skip_chance=1.0)

        assert len(candidate) == 0
        assert candidate.value == 0

    def test_item_listed_twice_is_matched_once(self, jan_1):
        """A repeated item must not hold a second unit away from other items."""
        repeated = item("repeated", 10, Demand.demand_for(JAVA, jan_1))
        other = item("other", 4, Demand.demand_for(JAVA, jan_1))

        candidate = matcher_for(resource(JAVA, jan_1), resource(JAVA, jan_1)).build_candidate(
            [repeated, repeated, other]
        )

        assert candidate.items() == [repeated, other]
        assert candidate.value == 14

    def test_pool_is_shared_but_not_consumed(self, jan_1):
        """Every candidate starts from a fresh usage overlay."""
        matcher = matcher_for(resource(JAVA, jan_1))
        project = item("p1", 10, Demand.demand_for(JAVA, jan_1))

        first = matcher.build_candidate([project])
        second = matcher.build_candidate([project], generation=3)

        assert first.contains(project)
        assert second.contains(project)
        assert second.generation == 3
