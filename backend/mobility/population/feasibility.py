"""Feasibility gate run before any resident is created."""

import logging
import math

from mobility.core.config import SimulationConfig
from mobility.core.errors import (
    FeasibilityError,
    InsufficientFood,
    InsufficientHousing,
    InsufficientWorkplaces,
    NoFoodPlaces,
    NoHouses,
    NoWorkplaces,
)
from mobility.core.state import WorldSnapshot

logger = logging.getLogger(__name__)


def required_workplaces(population: int, jobs_per_workplace: int) -> int:
    return math.ceil(population / max(1, jobs_per_workplace))


def required_food_places(population: int, meals_per_food_place: int) -> int:
    return math.ceil(population / max(1, meals_per_food_place))


def check_feasibility(world: WorldSnapshot, config: SimulationConfig) -> None:
    """Raise the first FeasibilityError the building stock runs into.

    Checks, in order:
        1. At least one house, workplace and food place.
        2. Total housing capacity covers the population.
        3. Enough workplaces for ceil(population / jobs_per_workplace).
        4. Enough food places for ceil(population / meals_per_food_place).
    """
    houses = world.houses
    works = world.workplaces
    foods = world.food_places

    try:
        if not houses:
            raise NoHouses()
        if not works:
            raise NoWorkplaces()
        if not foods:
            raise NoFoodPlaces()

        capacity = world.housing_capacity
        if capacity < config.population:
            raise InsufficientHousing(capacity, config.population)

        need_work = required_workplaces(config.population, config.jobs_per_workplace)
        if len(works) < need_work:
            raise InsufficientWorkplaces(len(works), need_work)

        need_food = required_food_places(config.population, config.meals_per_food_place)
        if len(foods) < need_food:
            raise InsufficientFood(len(foods), need_food)
    except FeasibilityError as e:
        logger.warning("Infeasible plan: %s", e)
        raise
