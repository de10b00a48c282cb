"""Boundary commute estimate.

A closed grid cannot house all of its own workers, or employ all of its own
residents, when job capacity and population disagree. The difference is
assumed to cross the city edge every day; those commuters are not routed,
they add a flat per-person emissions penalty instead.
"""

from mobility.core.config import SimulationConfig
from mobility.core.state import BoundaryCommute


def estimate_boundary_commute(workplace_count: int, config: SimulationConfig) -> BoundaryCommute:
    jobs_inside = workplace_count * max(1, config.jobs_per_workplace)
    travel_in = max(0, jobs_inside - config.population)
    travel_out = max(0, config.population - jobs_inside)
    penalty = (travel_in + travel_out) * max(0.0, config.boundary_penalty_kg_per_person)
    return BoundaryCommute(
        jobs_capacity_inside=jobs_inside,
        travel_in=travel_in,
        travel_out=travel_out,
        penalty_kg=penalty,
    )
