"""
Genetic operators over item orderings.

A candidate is encoded by the order in which items are offered to the
capacity matcher, so crossover and mutation both produce orderings.
"""

import random
from typing import List, Sequence, Tuple

from src.optimization.core.model import Item
from src.optimization.core.population import Candidate


def random_outcome(chance: float, rng: random.Random) -> bool:
    """Draw a biased coin that lands heads with probability ``chance``."""
    return rng.random() < chance


def swap_two_random_items(ordering: List[Item], rng: random.Random) -> None:
    """
    Swap two uniformly chosen positions in place.

    Both positions are drawn independently, so the swap may be a no-op.
    """
    if not ordering:
        return
    index_a = rng.randrange(len(ordering))
    index_b = rng.randrange(len(ordering))
    ordering[index_a], ordering[index_b] = ordering[index_b], ordering[index_a]


def mutate_ordering(ordering: List[Item], mutation_rate: float, rng: random.Random) -> int:
    """
    Keep swapping while the biased coin keeps landing heads.

    The number of swaps is geometric with mean ``rate / (1 - rate)``.

    Returns:
        Number of swaps applied

    Raises:
        ValueError: If the rate is 1 or more, which would never stop
    """
    if mutation_rate >= 1.0:
        raise ValueError(f"Mutation rate must be below 1, got {mutation_rate}")
    swaps = 0
    while random_outcome(mutation_rate, rng):
        swap_two_random_items(ordering, rng)
        swaps += 1
    return swaps


def partition_by_inclusion(
    parent_a: Candidate,
    parent_b: Candidate,
    items: Sequence[Item]
) -> Tuple[List[Item], List[Item], List[Item]]:
    """
    Split items by how many parents include them.

    Returns:
        Tuple of (in_both, in_one, in_none), each in the original item order
    """
    in_both, in_one, in_none = [], [], []
    for item in items:
        included = parent_a.contains(item) + parent_b.contains(item)
        if included == 2:
            in_both.append(item)
        elif included == 1:
            in_one.append(item)
        else:
            in_none.append(item)
    return in_both, in_one, in_none


def crossover_ordering(
    parent_a: Candidate,
    parent_b: Candidate,
    items: Sequence[Item],
    rng: random.Random
) -> List[Item]:
    """
    Combine two parents into a child ordering.

    Items kept by both parents go first in their original order, items kept
    by exactly one parent follow in random order, and items neither parent
    managed to place come last, cheapest first.

    Args:
        parent_a: First parent
        parent_b: Second parent
        items: All searchable items in their original order
        rng: Random number generator

    Returns:
        Child ordering (mutation not yet applied)
    """
    in_both, in_one, in_none = partition_by_inclusion(parent_a, parent_b, items)

    rng.shuffle(in_one)
    ordering = in_both
    ordering.extend(in_one)
    ordering.extend(sorted(in_none, key=lambda item: item.value))
    return ordering
