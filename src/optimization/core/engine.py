"""
Genetic Optimization Engine.

This module implements the engine that searches for the most valuable subset
of items that a capacity pool can serve: it seeds a population through the
capacity matcher, breeds children via crossover and mutation, and keeps the
best candidates of every generation.
"""

import random
import threading
import numbers
from functools import cmp_to_key
from typing import Callable, List, Optional, Sequence
from datetime import datetime
import logging

import logfire

from src.optimization.core.config import OptimizerConfig
from src.optimization.core.dimensions import CapacityDimension, TotalCapacity
from src.optimization.core.exceptions import InvalidInputError
from src.optimization.core.matcher import CapacityMatcher
from src.optimization.core.model import Item, Result
from src.optimization.core.operators import (
    crossover_ordering,
    mutate_ordering,
    random_outcome,
    swap_two_random_items,
)
from src.optimization.core.population import Candidate, Population


Comparator = Callable[[Item, Item], int]


def by_value_descending(first: Item, second: Item) -> int:
    """Default seeding order: most valuable items first."""
    return (second.value > first.value) - (second.value < first.value)


class OptimizationEngine:
    """
    Main engine for the genetic capacity search.

    One engine owns one random source. ``calculate`` holds a lock for the
    whole run, so concurrent callers sharing an engine are serialized; use
    one engine per thread for parallel runs.
    """

    def __init__(
        self,
        config: Optional[OptimizerConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the optimization engine.

        Args:
            config: Optimizer configuration (defaults to the standard search budget)
            logger: Optional logger instance
        """
        self.config = config or OptimizerConfig()
        self.config.validate_consistency()
        self.logger = logger or self._setup_logger()

        self.rng = random.Random(self.config.random_seed)
        self._lock = threading.Lock()

        # State tracking
        self.start_time: Optional[datetime] = None
        self.total_candidates_built = 0

    def _setup_logger(self) -> logging.Logger:
        """Setup default logger."""
        logger = logging.getLogger("capacity_optimizer.engine")
        logger.setLevel(getattr(logging, self.config.logging.log_level))

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def calculate(
        self,
        items: Sequence[Item],
        total_capacity: TotalCapacity,
        comparator: Optional[Comparator] = None
    ) -> Result:
        """
        Find a near-optimal selection of items for the capacity pool.

        Args:
            items: Candidate items (zero-weight items are always included)
            total_capacity: Capacity pool of this run
            comparator: Optional cmp-style function ordering the seed population;
                defaults to descending value

        Returns:
            Result of the best candidate found

        Raises:
            InvalidInputError: If the inputs break the contract; raised before
                any search work
        """
        items = self._validate_inputs(items, total_capacity, comparator)
        comparator = comparator or by_value_descending

        with self._lock:
            return self._run(items, total_capacity, comparator)

    def evaluate_acquisition_value(
        self,
        items: Sequence[Item],
        total_capacity: TotalCapacity,
        new_capacity: CapacityDimension,
        price: float
    ) -> float:
        """
        Compute the marginal profit of buying one more capacity unit.

        Runs two independent optimizations, without and with the new unit.

        Returns:
            (profit with the unit - profit without it) - price
        """
        if new_capacity is None:
            raise InvalidInputError("New capacity must not be None")
        if isinstance(price, bool) or not isinstance(price, numbers.Real):
            raise InvalidInputError(
                f"Price must be a number, got {type(price).__name__}",
                details={"price": repr(price)}
            )
        items = self._validate_inputs(items, total_capacity, None)

        with logfire.span("Evaluate Acquisition", price=price):
            without = self.calculate(items, total_capacity)
            with_new = self.calculate(items, total_capacity.add(new_capacity))

            gain = with_new.profit - without.profit
            marginal = gain - price
            self._log(
                f"Acquisition gain {gain:.2f} at price {price:.2f}: marginal value {marginal:.2f}"
            )
            return marginal

    def _validate_inputs(
        self,
        items: Sequence[Item],
        total_capacity: TotalCapacity,
        comparator: Optional[Comparator]
    ) -> List[Item]:
        """Check the boundary contract and return the items as a list."""
        if items is None:
            raise InvalidInputError("Items must not be None")
        try:
            items = list(items)
        except TypeError as e:
            raise InvalidInputError(f"Items must be iterable, got {type(items).__name__}") from e
        if total_capacity is None:
            raise InvalidInputError("Total capacity must not be None")
        if not isinstance(total_capacity, TotalCapacity):
            raise InvalidInputError(
                f"Total capacity must be a TotalCapacity, got {type(total_capacity).__name__}"
            )
        invalid = [index for index, item in enumerate(items) if not isinstance(item, Item)]
        if invalid:
            raise InvalidInputError(
                f"{len(invalid)} entries are not items",
                details={"positions": invalid}
            )
        if comparator is not None and not callable(comparator):
            raise InvalidInputError("Comparator must be callable")
        return items

    def _run(self, items: List[Item], total_capacity: TotalCapacity, comparator: Comparator) -> Result:
        automatically_included = [item for item in items if item.is_weight_zero]
        searchable = [item for item in items if not item.is_weight_zero]
        guaranteed_value = sum(item.value for item in automatically_included)

        with logfire.span("Capacity Optimization",
                          items=len(searchable),
                          capacities=total_capacity.size,
                          generations=self.config.evolution.generations,
                          population_size=self.config.evolution.population_size):

            self.start_time = datetime.now()
            self._log(
                f"Starting optimization of {len(searchable)} items "
                f"({len(automatically_included)} always included) over {total_capacity.size} capacities"
            )

            matcher = CapacityMatcher(total_capacity, self.rng)
            population = self._initialize_population(searchable, matcher, comparator)

            for generation in range(self.config.evolution.generations):
                if self._should_terminate():
                    self._log(f"Runtime limit reached, stopping before generation {generation + 1}")
                    break

                with logfire.span("Generation", generation=generation + 1):
                    self._create_next_generation(population, searchable, matcher)
                    population.select_survivors(self.config.evolution.survivors_per_generation)
                    population.record_history()

                    if (generation + 1) % self.config.logging.log_interval == 0:
                        self._log_progress(population)

            best = population.best() or Candidate()
            chosen_items = best.items() + automatically_included
            result = Result(
                profit=best.value + guaranteed_value,
                chosen_items=chosen_items,
                item_to_capacities=dict(best.allocations)
            )

            elapsed_time = datetime.now() - self.start_time
            self._log(
                f"Optimization completed in {elapsed_time}: profit {result.profit:.2f}, "
                f"{len(chosen_items)} items chosen"
            )
            return result

    def _initialize_population(
        self,
        items: List[Item],
        matcher: CapacityMatcher,
        comparator: Comparator
    ) -> Population:
        """Seed the population from the comparator ordering."""
        with logfire.span("Initialize Population"):
            evolution = self.config.evolution
            ordered_items = sorted(items, key=cmp_to_key(comparator))
            population = Population(generation=0)

            for _ in range(evolution.population_size):
                # Swaps accumulate on the shared ordering across candidates
                if random_outcome(evolution.mutation_rate, self.rng):
                    swap_two_random_items(ordered_items, self.rng)
                population.add_candidates([
                    matcher.build_candidate(ordered_items, evolution.skip_item_chance, generation=0)
                ])

            self.total_candidates_built += evolution.population_size
            population.select_survivors(evolution.survivors_per_generation)
            population.record_history()

            self.logger.debug(f"Initialized population, best seed value {population.best().value:.2f}")
            return population

    def _create_next_generation(
        self,
        population: Population,
        items: List[Item],
        matcher: CapacityMatcher
    ) -> None:
        """Fill the population back up with crossover children of the survivors."""
        population.advance_generation()
        survivors = Population(population.candidates)

        children = []
        while len(population) + len(children) < self.config.evolution.population_size:
            parent_a, parent_b = survivors.select_parents(self.rng)
            children.append(self._crossover(parent_a, parent_b, items, matcher, population.generation))

        population.add_candidates(children)
        self.total_candidates_built += len(children)

    def _crossover(
        self,
        parent_a: Candidate,
        parent_b: Candidate,
        items: List[Item],
        matcher: CapacityMatcher,
        generation: int
    ) -> Candidate:
        """Breed one child from two parents."""
        ordering = crossover_ordering(parent_a, parent_b, items, self.rng)
        mutate_ordering(ordering, self.config.evolution.mutation_rate, self.rng)

        child = matcher.build_candidate(ordering, 0.0, generation=generation)
        child.parent_ids = [parent_a.candidate_id, parent_b.candidate_id]
        return child

    def _should_terminate(self) -> bool:
        """Cooperative runtime check between generations."""
        if self.config.max_runtime is None or self.start_time is None:
            return False
        return datetime.now() - self.start_time > self.config.max_runtime

    def _log(self, message: str) -> None:
        if self.config.logging.enable_logging:
            self.logger.info(message)

    def _log_progress(self, population: Population) -> None:
        """Log evolution progress."""
        stats = population.statistics

        self._log(
            f"Generation {population.generation}: "
            f"Best: {stats.get('best_value', 0):.2f}, "
            f"Avg: {stats.get('avg_value', 0):.2f}, "
            f"Unique values: {stats.get('unique_values', 0)}"
        )

        if self.config.logging.metrics_export:
            metrics = {
                "evolution_generation": population.generation,
                **{k: v for k, v in stats.items() if k != "generation"}
            }
            logfire.info("Evolution Progress", **metrics)
