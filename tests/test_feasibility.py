import pytest

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
from mobility.core.state import FOOD, HOUSE, WORK, Building, WorldSnapshot
from mobility.population.feasibility import (
    check_feasibility,
    required_food_places,
    required_workplaces,
)


def world(*buildings) -> WorldSnapshot:
    return WorldSnapshot.build(6, 6, [], buildings)


def test_requires_a_house_first():
    with pytest.raises(NoHouses):
        check_feasibility(world(), SimulationConfig(population=1))


def test_requires_a_workplace():
    with pytest.raises(NoWorkplaces):
        check_feasibility(world(Building(HOUSE, 0, 0, 1, 5)), SimulationConfig(population=1))


def test_requires_a_food_place():
    w = world(Building(HOUSE, 0, 0, 1, 5), Building(WORK, 1, 1))
    with pytest.raises(NoFoodPlaces):
        check_feasibility(w, SimulationConfig(population=1))


def test_housing_shortfall_reported_before_workplace_shortfall():
    # 10 beds for 100 people, and 1 workplace where 2 are needed
    w = world(Building(HOUSE, 0, 0, 2, 5), Building(WORK, 1, 1), Building(FOOD, 2, 2))
    config = SimulationConfig(population=100, jobs_per_workplace=80)

    with pytest.raises(InsufficientHousing) as exc:
        check_feasibility(w, config)

    assert exc.value.capacity == 10
    assert exc.value.population == 100
    assert exc.value.shortfall == 90


def test_workplace_shortfall():
    w = world(Building(HOUSE, 0, 0, 10, 20), Building(WORK, 1, 1), Building(FOOD, 2, 2))
    with pytest.raises(InsufficientWorkplaces) as exc:
        check_feasibility(w, SimulationConfig(population=100, jobs_per_workplace=80))
    assert (exc.value.have, exc.value.need) == (1, 2)


def test_food_shortfall():
    w = world(
        Building(HOUSE, 0, 0, 10, 20),
        Building(WORK, 1, 1),
        Building(WORK, 1, 2),
        Building(FOOD, 2, 2),
    )
    config = SimulationConfig(population=100, jobs_per_workplace=80, meals_per_food_place=40)
    with pytest.raises(InsufficientFood) as exc:
        check_feasibility(w, config)
    assert (exc.value.have, exc.value.need) == (1, 3)


def test_feasible_plan_passes():
    w = world(Building(HOUSE, 0, 0, 1, 5), Building(WORK, 1, 1), Building(FOOD, 2, 2))
    check_feasibility(w, SimulationConfig(population=5))


def test_zero_population_only_needs_one_of_each():
    w = world(Building(HOUSE, 0, 0), Building(WORK, 1, 1), Building(FOOD, 2, 2))
    check_feasibility(w, SimulationConfig(population=0))


def test_errors_share_a_base_and_serialize():
    err = InsufficientWorkplaces(have=3, need=4)
    assert isinstance(err, FeasibilityError)
    assert err.to_dict() == {
        "kind": "insufficient_workplaces",
        "message": "Insufficient workplaces: have 3, need 4.",
        "have": 3,
        "need": 4,
    }


def test_required_counts_round_up():
    assert required_workplaces(2100, 80) == 27
    assert required_food_places(2100, 200) == 11
    assert required_workplaces(0, 80) == 0
