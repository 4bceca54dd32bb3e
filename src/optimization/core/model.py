"""
Items, allocations and results of the optimization engine.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List

from src.optimization.core.dimensions import CapacityDimension, TotalWeight


@dataclass(eq=False)
class Item:
    """
    A unit of work competing for capacity.

    Items are compared and hashed by identity. Two items with the same name,
    value and requirements are still two distinct entries, and candidate
    solutions key them by ``item_id``.
    """

    name: str
    value: float
    total_weight: TotalWeight = field(default_factory=TotalWeight.zero)
    item_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def is_weight_zero(self) -> bool:
        """An item without requirements is always included and consumes nothing."""
        return self.total_weight.is_zero

    def __repr__(self) -> str:
        return f"Item(name={self.name!r}, value={self.value!r}, components={len(self.total_weight.components())})"


@dataclass
class Allocation:
    """The capacity units chosen to satisfy one included item."""

    item: Item
    capacities: List[CapacityDimension] = field(default_factory=list)


@dataclass
class Result:
    """
    Outcome of an optimization run.

    Attributes:
        profit: Sum of the values of all chosen items, zero-weight items included
        chosen_items: Items of the winning candidate in matching order, followed
            by every zero-weight item
        item_to_capacities: Allocations of the winning candidate keyed by item_id
            (zero-weight items have none)
    """

    profit: float
    chosen_items: List[Item]
    item_to_capacities: Dict[str, Allocation] = field(default_factory=dict)

    def capacities_for(self, item: Item) -> List[CapacityDimension]:
        """Get the capacity units assigned to an item (empty if none)."""
        allocation = self.item_to_capacities.get(item.item_id)
        return list(allocation.capacities) if allocation else []

    def is_chosen(self, item: Item) -> bool:
        return any(chosen is item for chosen in self.chosen_items)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to a dictionary summary."""
        return {
            "profit": self.profit,
            "chosen_items": [
                {"item_id": item.item_id, "name": item.name, "value": item.value}
                for item in self.chosen_items
            ],
            "allocated_capacities": {
                item_id: len(allocation.capacities)
                for item_id, allocation in self.item_to_capacities.items()
            },
        }
