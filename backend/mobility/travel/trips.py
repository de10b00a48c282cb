"""Trip simulator.

Each resident makes three legs a day (house -> work -> food -> house). Every
leg is measured through the distance oracle and then walked or driven:

    drive  iff  distance_m > walk_max_m
    time_h      = (distance_m / 1000) / speed_kmh
    emissions   = (distance_m / 1000) * emissions_kg_per_km

A leg with no road connection is recorded as unreachable. It accrues no
distance, time or emissions, but its resident is counted as a driver.
"""

import math

import numpy as np
import pandas as pd

from mobility.core.config import MIN_SPEED_KMH, SimulationConfig
from mobility.core.state import Person
from mobility.network.distance import DistanceOracle


WALK = "walk"
DRIVE = "drive"
UNREACHABLE = "unreachable"

LEG_COLUMNS: list[str] = [
    "person_id",
    "leg",
    "origin_row",
    "origin_col",
    "dest_row",
    "dest_col",
    "distance_m",
    "mode",
    "time_h",
    "emissions_kg",
]


def choose_mode(distance_m: float, walk_max_m: float) -> str:
    return DRIVE if distance_m > walk_max_m else WALK


def leg_cost(distance_m: float, mode: str, config: SimulationConfig) -> tuple[float, float]:
    """Travel time (hours) and emissions (kg) of one reachable leg."""
    if mode == DRIVE:
        speed = config.car_speed_kmh
        kg_per_km = config.car_emissions_kg_per_km
    else:
        speed = config.walk_speed_kmh
        kg_per_km = config.walk_emissions_kg_per_km
    km = distance_m / 1000.0
    return km / max(speed, MIN_SPEED_KMH), km * kg_per_km


def simulate_trips(
    people: list[Person],
    oracle: DistanceOracle,
    config: SimulationConfig,
) -> pd.DataFrame:
    """Route every resident's daily legs.

    Returns
    -------
    pd.DataFrame
        One row per leg with columns LEG_COLUMNS. Unreachable legs carry
        NaN distance and zero time and emissions.
    """
    records: list[dict] = []
    for p in people:
        for leg, origin, dest in p.legs():
            d = oracle.distance(origin, dest)
            if d is None or not math.isfinite(d):
                mode = UNREACHABLE
                distance, time_h, emissions = np.nan, 0.0, 0.0
            else:
                mode = choose_mode(d, config.walk_max_m)
                distance = d
                time_h, emissions = leg_cost(d, mode, config)
            records.append({
                "person_id": p.id,
                "leg": leg,
                "origin_row": origin.row,
                "origin_col": origin.col,
                "dest_row": dest.row,
                "dest_col": dest.col,
                "distance_m": distance,
                "mode": mode,
                "time_h": time_h,
                "emissions_kg": emissions,
            })
    return pd.DataFrame(records, columns=LEG_COLUMNS)
