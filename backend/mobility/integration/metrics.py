"""Leg log to Metrics aggregation.

Reduces the per-leg trip records into per-resident daily averages and city
totals, then folds in the boundary commute penalty.
"""

import pandas as pd

from mobility.core.state import BoundaryCommute, Metrics
from mobility.travel.trips import DRIVE, UNREACHABLE, WALK


def aggregate_metrics(legs: pd.DataFrame, population: int, boundary: BoundaryCommute) -> Metrics:
    """Build the Metrics record for one run.

    Updates:
        - Walked/driven metres and travel time averaged over the population.
        - Leg emissions summed and the boundary penalty added.
        - Drivers counted once per resident with any driven or unreachable leg.
    """
    per_person: float = float(max(population, 1))

    walked: float = float(legs.loc[legs["mode"] == WALK, "distance_m"].sum())
    driven: float = float(legs.loc[legs["mode"] == DRIVE, "distance_m"].sum())
    time_h: float = float(legs["time_h"].sum())
    leg_emissions: float = float(legs["emissions_kg"].sum())

    car_legs: pd.DataFrame = legs[legs["mode"].isin([DRIVE, UNREACHABLE])]
    drivers: int = int(car_legs["person_id"].nunique())
    unreachable: int = int((legs["mode"] == UNREACHABLE).sum())

    return Metrics(
        population=population,
        avg_walk_m_per_day=walked / per_person,
        avg_drive_m_per_day=driven / per_person,
        avg_travel_time_min_per_day=time_h / per_person * 60.0,
        total_emissions_kg_per_day=leg_emissions + boundary.penalty_kg,
        drivers_count=drivers,
        unreachable_legs=unreachable,
        travel_in=boundary.travel_in,
        travel_out=boundary.travel_out,
        leg_emissions_kg_per_day=leg_emissions,
    )


def mode_share(legs: pd.DataFrame) -> dict[str, float]:
    """Fraction of legs walked, driven and unreachable."""
    n = len(legs)
    if n == 0:
        return {WALK: 0.0, DRIVE: 0.0, UNREACHABLE: 0.0}
    counts = legs["mode"].value_counts()
    return {m: float(counts.get(m, 0)) / n for m in (WALK, DRIVE, UNREACHABLE)}
