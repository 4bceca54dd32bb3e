"""
Population Management for the Capacity Optimizer.

This module manages populations of candidate solutions throughout the
genetic search, including parent selection, survivor selection and
statistics tracking.
"""

from typing import List, Optional, Dict, Any, Tuple
from dataclasses import dataclass, field
import random
import uuid
import numpy as np
from datetime import datetime

from src.optimization.core.model import Allocation, Item


@dataclass
class Candidate:
    """
    One complete trial assignment of items to capacity units.

    An item appears in ``allocations`` only if every one of its requirements
    was matched.
    """

    allocations: Dict[str, Allocation] = field(default_factory=dict)
    candidate_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    parent_ids: List[str] = field(default_factory=list)
    generation: int = 0
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def value(self) -> float:
        """Sum of the values of the included items."""
        return sum(allocation.item.value for allocation in self.allocations.values())

    def contains(self, item: Item) -> bool:
        return item.item_id in self.allocations

    def items(self) -> List[Item]:
        """Included items in matching order."""
        return [allocation.item for allocation in self.allocations.values()]

    def __len__(self) -> int:
        return len(self.allocations)

    def to_dict(self) -> Dict[str, Any]:
        """Convert candidate to dictionary representation."""
        return {
            "candidate_id": self.candidate_id,
            "value": self.value,
            "items": [item.name for item in self.items()],
            "parent_ids": self.parent_ids,
            "generation": self.generation,
            "created_at": self.created_at.isoformat()
        }


class Population:
    """
    Manages the candidates of one optimization run.

    The population is scored by candidate value only: no normalization and no
    penalty terms.
    """

    def __init__(self, candidates: Optional[List[Candidate]] = None, generation: int = 0):
        self.candidates: List[Candidate] = list(candidates or [])
        self.generation = generation
        self.statistics: Dict[str, Any] = {}
        self.history: List[Dict[str, Any]] = []

    def __len__(self) -> int:
        return len(self.candidates)

    def add_candidates(self, candidates: List[Candidate]) -> None:
        self.candidates.extend(candidates)

    def select_survivors(self, count: int) -> List[Candidate]:
        """
        Keep the top ``count`` candidates by value.

        The sort is stable, so among equal values earlier candidates win.
        """
        self.candidates = sorted(
            self.candidates,
            key=lambda c: c.value,
            reverse=True
        )[:count]
        return self.candidates

    def select_parents(self, rng: random.Random) -> Tuple[Candidate, Candidate]:
        """
        Pick two parents uniformly from the current candidates.

        Draws are independent and with replacement, so a candidate may be
        crossed with itself.
        """
        if not self.candidates:
            raise ValueError("Cannot select parents from an empty population")
        first = self.candidates[rng.randrange(len(self.candidates))]
        second = self.candidates[rng.randrange(len(self.candidates))]
        return first, second

    def best(self) -> Optional[Candidate]:
        """Highest-valued candidate, first one on ties."""
        if not self.candidates:
            return None
        return max(self.candidates, key=lambda c: c.value)

    def advance_generation(self) -> None:
        self.generation += 1

    def calculate_statistics(self) -> Dict[str, Any]:
        """Calculate population statistics."""
        if not self.candidates:
            return {}

        values = np.array([c.value for c in self.candidates], dtype=float)
        sizes = np.array([len(c) for c in self.candidates], dtype=float)

        stats = {
            "generation": self.generation,
            "population_size": len(self.candidates),
            "best_value": float(values.max()),
            "worst_value": float(values.min()),
            "avg_value": float(values.mean()),
            "value_std": float(values.std()),
            "avg_included_items": float(sizes.mean()),
            "unique_values": int(np.unique(values).size)
        }

        self.statistics = stats
        return stats

    def record_history(self) -> None:
        """Record current population state in history."""
        stats = self.calculate_statistics()

        self.history.append({
            **stats,
            "timestamp": datetime.now().isoformat()
        })

        # Limit history size
        max_history = 100
        if len(self.history) > max_history:
            self.history = self.history[-max_history:]
