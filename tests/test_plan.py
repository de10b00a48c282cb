import pytest

from mobility.core.config import BudgetState, GridSpec, SimulationConfig
from mobility.core.errors import InsufficientBudget, PlacementError
from mobility.core.plan import CityPlan
from mobility.core.state import FOOD, HOUSE, WORK, Cell
from mobility.housing.cost import house_cost


def small_plan(budget_total: float = 5_000_000) -> CityPlan:
    return CityPlan(grid=GridSpec(rows=6, cols=6), budget=BudgetState(budget_total=budget_total))


def test_grid_bounds_enforced():
    with pytest.raises(ValueError):
        CityPlan(grid=GridSpec(rows=5, cols=6))
    assert GridSpec(rows=3, cols=99).clamp() == GridSpec(rows=6, cols=40)


def test_house_placement_charges_budget():
    plan = small_plan()
    plan.place_building(HOUSE, (1, 1), floors=2, base_capacity=3)
    assert plan.budget.budget_spent == house_cost(2, 3)
    assert plan.total_housing_capacity == 6


def test_house_rejected_when_over_budget_leaves_state_unchanged():
    plan = small_plan(budget_total=10_000)
    with pytest.raises(InsufficientBudget):
        plan.place_building(HOUSE, (1, 1))
    assert plan.buildings == []
    assert plan.budget.budget_spent == 0
    assert plan.status_message.startswith("Not enough budget")


def test_workplaces_earn_revenue_for_housing():
    plan = small_plan(budget_total=0)
    with pytest.raises(InsufficientBudget):
        plan.place_building(HOUSE, (1, 1))

    plan.place_building(WORK, (2, 2))
    assert plan.budget.revenue == 2_000_000
    plan.place_building(HOUSE, (1, 1))
    assert plan.budget.available == 2_000_000 - 13_000


def test_removing_house_refunds_cost():
    plan = small_plan()
    plan.place_building(HOUSE, (1, 1), floors=3, base_capacity=4)
    removed = plan.remove_at((1, 1))
    assert removed.kind == HOUSE
    assert plan.budget.budget_spent == 0
    assert plan.building_at((1, 1)) is None


def test_refund_of_uncharged_house_clamps_at_zero():
    plan = small_plan()
    plan.place_building(HOUSE, (1, 1), floors=3, base_capacity=4, charge_budget=False)
    plan.remove_at((1, 1))
    assert plan.budget.budget_spent == 0


def test_removing_workplace_drops_revenue():
    plan = small_plan()
    plan.place_building(WORK, (2, 2))
    plan.remove_at((2, 2))
    assert plan.budget.revenue == 0


def test_occupied_and_out_of_bounds_cells_rejected():
    plan = small_plan()
    plan.place_building(FOOD, (0, 0))
    with pytest.raises(PlacementError):
        plan.place_building(WORK, (0, 0))
    with pytest.raises(PlacementError) as exc:
        plan.place_building(WORK, (6, 0))
    assert exc.value.to_dict()["row"] == 6


def test_building_replaces_road_and_blocks_new_road():
    plan = small_plan()
    plan.set_road((1, 1))
    plan.place_building(WORK, (1, 1))
    assert Cell(1, 1) not in plan.roads
    assert plan.set_road((1, 1)) is False
    assert Cell(1, 1) not in plan.roads


def test_toggle_and_remove_road():
    plan = small_plan()
    assert plan.toggle_road((3, 3)) is True
    assert plan.toggle_road((3, 3)) is False
    plan.set_road((4, 4))
    assert plan.remove_at((4, 4)) is None
    assert plan.roads == set()


def test_draw_road_line_skips_buildings():
    plan = small_plan()
    plan.place_building(FOOD, (2, 1))
    marked = plan.draw_road_line((0, 0), (2, 3))
    assert marked == 5
    assert plan.roads == {Cell(0, 0), Cell(1, 0), Cell(2, 0), Cell(2, 2), Cell(2, 3)}


def test_auto_grid_leaves_buildings_alone():
    plan = small_plan()
    plan.place_building(WORK, (0, 1))
    added = plan.auto_grid()
    assert added == 19
    assert Cell(0, 1) not in plan.roads


def test_simulate_stores_metrics_then_clears_on_failure():
    plan = small_plan()
    plan.place_building(HOUSE, (0, 0), base_capacity=5)
    plan.place_building(WORK, (0, 5))
    plan.place_building(FOOD, (5, 0))
    config = SimulationConfig(population=5, distance_mode="manhattan")

    metrics = plan.simulate(config)
    assert metrics is not None
    assert plan.last_metrics is metrics
    assert plan.status_message == ""

    plan.remove_at((5, 0))
    assert plan.simulate(config) is None
    assert plan.last_metrics is None
    assert plan.status_message == "Place at least one food place."


def test_snapshot_is_detached_from_later_edits():
    plan = small_plan()
    plan.set_road((0, 0))
    snap = plan.snapshot()
    plan.set_road((0, 1))
    assert snap.roads == frozenset({Cell(0, 0)})


def test_clear_resets_plan():
    plan = small_plan()
    plan.auto_grid()
    plan.place_building(WORK, (1, 1))
    plan.place_building(HOUSE, (2, 2))
    plan.clear()
    assert plan.roads == set() and plan.buildings == []
    assert plan.budget.budget_spent == 0 and plan.budget.revenue == 0
