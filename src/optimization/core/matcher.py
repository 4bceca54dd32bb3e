"""
Capacity Matcher.

Turns an ordering of items into a concrete candidate solution by greedily
assigning capacity units to each item's requirements. The matcher is a
first-fit matcher: which unit wins is decided only by the random shuffle of
the pool done once per candidate.
"""

import random
from typing import Dict, List, Optional, Sequence

from src.shared.time_slot import TimeSlot
from src.optimization.core.dimensions import TotalCapacity, TotalWeight
from src.optimization.core.model import Allocation, Item
from src.optimization.core.population import Candidate


class CapacityUsage:
    """
    Usage overlay for one candidate under construction.

    Maps a unit's position in the pool to the time slots already committed on
    it. The pool itself is never mutated; every candidate gets a fresh overlay.
    """

    def __init__(self, unit_count: int):
        self._used: Dict[int, List[TimeSlot]] = {index: [] for index in range(unit_count)}

    def used_time_slots(self, unit: int) -> List[TimeSlot]:
        return self._used[unit]

    def is_free_at(self, unit: int, time_slot: TimeSlot) -> bool:
        return all(not used.overlaps_with(time_slot) for used in self._used[unit])

    def commit(self, unit: int, time_slots: Sequence[TimeSlot]) -> None:
        self._used[unit].extend(time_slots)


class CapacityMatcher:
    """Builds candidates from item orderings against one capacity pool."""

    def __init__(self, total_capacity: TotalCapacity, rng: random.Random):
        """
        Initialize the matcher.

        Args:
            total_capacity: Read-only pool shared by every candidate of the run
            rng: Random source of the owning engine
        """
        self.total_capacity = total_capacity
        self.rng = rng

    def build_candidate(
        self,
        ordered_items: Sequence[Item],
        skip_chance: float = 0.0,
        generation: int = 0
    ) -> Candidate:
        """
        Assign capacity to items in the given order.

        Args:
            ordered_items: Items in matching order
            skip_chance: Probability of passing over an item without trying it
            generation: Generation recorded on the candidate

        Returns:
            Candidate holding every fully matched item (possibly none)
        """
        capacities = self.total_capacity.capacities()
        unit_order = list(range(len(capacities)))
        self.rng.shuffle(unit_order)
        usage = CapacityUsage(len(capacities))

        allocations: Dict[str, Allocation] = {}
        for item in ordered_items:
            # An item listed twice is matched once
            if item.item_id in allocations:
                continue
            if skip_chance > 0 and self.rng.random() < skip_chance:
                continue

            chosen = self.match_capacities(item.total_weight, unit_order, usage)
            if chosen is None:
                continue

            for unit, time_slots in chosen.items():
                usage.commit(unit, time_slots)

            allocations[item.item_id] = Allocation(
                item=item,
                capacities=[capacities[unit] for unit in chosen]
            )

        return Candidate(allocations=allocations, generation=generation)

    def match_capacities(
        self,
        total_weight: TotalWeight,
        unit_order: Sequence[int],
        usage: CapacityUsage
    ) -> Optional[Dict[int, List[TimeSlot]]]:
        """
        Pick one unit per requirement, or nothing at all.

        Only slots committed by earlier items block a unit; choices made for
        this item are committed by the caller once every requirement matched.

        Returns:
            Chosen unit positions mapped to the slots they must reserve, or
            None when any requirement cannot be met
        """
        capacities = self.total_capacity.capacities()
        result: Dict[int, List[TimeSlot]] = {}

        for component in total_weight.components():
            time_slot = component.get_time_slot()
            matching_unit = None
            for unit in unit_order:
                if not component.is_satisfied_by(capacities[unit]):
                    continue
                if time_slot is not None and not usage.is_free_at(unit, time_slot):
                    continue
                matching_unit = unit
                break

            if matching_unit is None:
                return None

            reserved = result.setdefault(matching_unit, [])
            if time_slot is not None:
                reserved.append(time_slot)

        return result
