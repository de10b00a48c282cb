import pytest

from mobility.core.config import SimulationConfig
from mobility.core.state import HOUSE
from mobility.housing.cost import house_cost
from mobility.scenarios.default_city import build_default_city
from mobility.scenarios.demo_grid import build_demo_grid
from mobility.scenarios.registry import SCENARIOS, build_scenario


def test_default_city_layout():
    plan, config = build_default_city()

    assert (plan.grid.rows, plan.grid.cols) == (25, 30)
    assert len(plan.roads) == 430
    assert plan.count(HOUSE) == 117
    assert plan.total_workplaces == 32
    assert plan.total_food_places == 11
    assert plan.total_housing_capacity == 117 * 18
    assert all(b.location not in plan.roads for b in plan.buildings)
    assert config.population == 2100


def test_default_city_charges_housing():
    plan, _ = build_default_city()
    assert plan.budget.budget_spent == 117 * house_cost(3, 6)
    assert plan.budget.revenue == 32 * 2_000_000
    assert plan.budget.available >= 0


def test_default_city_runs_on_roads():
    plan, config = build_default_city()
    metrics = plan.simulate(config)

    assert metrics is not None
    assert metrics.population == 2100
    assert metrics.unreachable_legs == 0
    assert metrics.travel_in == 32 * 80 - 2100
    assert metrics.travel_out == 0
    assert metrics.avg_walk_m_per_day + metrics.avg_drive_m_per_day > 0


def test_default_city_food_scatter_depends_on_seed():
    a, _ = build_default_city(seed=1)
    b, _ = build_default_city(seed=1)
    assert a.snapshot() == b.snapshot()


def test_demo_grid_stops_at_housing_gate():
    plan, config = build_demo_grid()

    assert plan.total_housing_capacity == 216
    assert plan.budget.budget_spent == 0
    assert plan.simulate(config) is None
    assert plan.status_message.startswith("Not enough housing capacity (216) for population (250)")


def test_demo_grid_runs_once_population_fits():
    plan, config = build_demo_grid()
    metrics = plan.simulate(SimulationConfig(population=200, random_seed=config.random_seed))
    assert metrics is not None
    assert metrics.unreachable_legs == 0


def test_registry():
    assert set(SCENARIOS) == {"default_city", "demo_grid"}
    plan, _ = build_scenario("demo_grid")
    assert plan.grid.rows == 18
    with pytest.raises(KeyError):
        build_scenario("atlantis")
