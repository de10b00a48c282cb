"""Main simulation engine.

One run turns a frozen world snapshot and a configuration into Metrics:
    Phase A: Feasibility gate (houses, capacity, workplaces, food places)
    Phase B: Population assignment (housing slots, random work/food draws)
    Phase C: Trip simulation through the memoised distance oracle
    Phase D: Boundary commute estimate and metrics aggregation

A failed gate raises a FeasibilityError before any resident exists.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from mobility.core.config import SimulationConfig
from mobility.core.state import Metrics, Person, WorldSnapshot
from mobility.integration.metrics import aggregate_metrics
from mobility.network.distance import DistanceOracle
from mobility.network.roads import RoadGraph
from mobility.population.assignment import assign_population, subscription_counts
from mobility.population.feasibility import check_feasibility
from mobility.travel.boundary import estimate_boundary_commute
from mobility.travel.trips import simulate_trips

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Metrics together with the per-leg log they were reduced from."""

    metrics: Metrics
    legs: pd.DataFrame
    people: list[Person]


def build_oracle(world: WorldSnapshot, config: SimulationConfig) -> DistanceOracle:
    graph: Optional[RoadGraph] = None
    if config.distance_mode == "road":
        graph = RoadGraph(world.grid.rows, world.grid.cols, world.roads)
    return DistanceOracle(config.distance_mode, config.cell_size_m, graph)


def _log_oversubscription(people: list[Person], config: SimulationConfig) -> None:
    crowded = [
        b for b, n in subscription_counts(people, "work").items()
        if n > config.jobs_per_workplace
    ]
    if crowded:
        logger.info(
            "%d workplace(s) drew more than %d workers",
            len(crowded), config.jobs_per_workplace,
        )


def run_detailed(
    world: WorldSnapshot,
    config: SimulationConfig,
    rng: Optional[np.random.Generator] = None,
) -> RunResult:
    """Run the full simulation and keep the intermediate leg log.

    Parameters
    ----------
    world : WorldSnapshot
        Grid, roads and buildings, unchanged for the whole run.
    config : SimulationConfig
        Run parameters. ``config.random_seed`` seeds the work/food draws
        unless ``rng`` is given.
    rng : np.random.Generator, optional
        Source for the assignment draws.

    Raises
    ------
    FeasibilityError
        When the building stock cannot support the population.
    ValueError
        When the configuration is out of range.
    """
    errors = config.validate()
    if errors:
        raise ValueError("; ".join(errors))
    if rng is None:
        rng = np.random.default_rng(config.random_seed)

    # Phase A
    check_feasibility(world, config)

    # Phase B
    people = assign_population(world, config.population, rng)
    _log_oversubscription(people, config)

    # Phase C
    oracle = build_oracle(world, config)
    legs = simulate_trips(people, oracle, config)
    oracle.log_stats()

    # Phase D
    boundary = estimate_boundary_commute(len(world.workplaces), config)
    metrics = aggregate_metrics(legs, config.population, boundary)

    logger.info(
        "Run complete: %d residents, %d drivers, %d unreachable legs, %.1f kg CO2/day",
        metrics.population, metrics.drivers_count, metrics.unreachable_legs,
        metrics.total_emissions_kg_per_day,
    )
    return RunResult(metrics=metrics, legs=legs, people=people)


def run_simulation(
    world: WorldSnapshot,
    config: Optional[SimulationConfig] = None,
    rng: Optional[np.random.Generator] = None,
) -> Metrics:
    """Run one simulation and return its Metrics."""
    if config is None:
        config = SimulationConfig()
    return run_detailed(world, config, rng).metrics
