"""Population generation and building assignment.

Housing is filled slot by slot in building order, so the i-th resident
always lands in the same house. Workplaces and food places are independent
uniform draws: feasibility only guarantees enough jobs and meals in
aggregate, and a single building can end up over-subscribed.
"""

import logging

import numpy as np

from mobility.core.state import Building, Person, WorldSnapshot

logger = logging.getLogger(__name__)


def expand_housing_slots(houses: list[Building]) -> list[Building]:
    """Repeat every house once per unit of capacity, keeping building order."""
    slots: list[Building] = []
    for h in houses:
        slots.extend([h] * h.capacity)
    return slots


def assign_population(
    world: WorldSnapshot,
    population: int,
    rng: np.random.Generator,
) -> list[Person]:
    """Create ``population`` residents with a house, a workplace and a food place.

    Parameters
    ----------
    world : WorldSnapshot
        Buildings to draw from. Must already have passed the feasibility gate.
    population : int
        Number of residents to create.
    rng : np.random.Generator
        Source of the workplace and food place draws.

    Returns
    -------
    list[Person]
        Residents ordered by id.
    """
    slots = expand_housing_slots(world.houses)
    if len(slots) < population:
        raise ValueError(f"{len(slots)} housing slots cannot hold population {population}")

    works = world.workplaces
    foods = world.food_places
    work_idx: np.ndarray = rng.integers(0, len(works), size=population)
    food_idx: np.ndarray = rng.integers(0, len(foods), size=population)

    people = [
        Person(id=i, house=slots[i], work=works[int(work_idx[i])], food=foods[int(food_idx[i])])
        for i in range(population)
    ]
    logger.info(
        "Assigned %d residents to %d houses, %d workplaces, %d food places",
        len(people), len(world.houses), len(works), len(foods),
    )
    return people


def subscription_counts(people: list[Person], kind: str) -> dict:
    """Residents drawn to each building of ``kind`` ("house", "work" or "food")."""
    counts: dict[Building, int] = {}
    for p in people:
        b = getattr(p, kind)
        counts[b] = counts.get(b, 0) + 1
    return counts
