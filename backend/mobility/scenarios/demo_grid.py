"""Scenario: small demo grid.

Six houses, three workplaces and three food places on an 18x24 lattice.
The stock holds 216 residents against a target of 250, so a run stops at
the housing gate until houses are added or raised.
"""

from mobility.core.config import BudgetState, GridSpec, ScenarioMetadata, SimulationConfig
from mobility.core.plan import CityPlan
from mobility.core.state import FOOD, HOUSE, WORK


ROWS: int = 18
COLS: int = 24
POPULATION: int = 250
BUDGET_TOTAL: float = 5_000_000

HOUSE_CELLS: list[tuple[int, int]] = [(2, 2), (2, 8), (2, 14), (8, 2), (8, 8), (8, 14)]
WORK_CELLS: list[tuple[int, int]] = [(14, 2), (14, 8), (14, 14)]
FOOD_CELLS: list[tuple[int, int]] = [(11, 5), (5, 11), (17, 11)]

METADATA = ScenarioMetadata(
    name="Demo grid",
    description=(
        "Small 18x24 lattice with six houses, three workplaces and three food "
        "places. Housing falls short of the 250 target population."
    ),
    tags=["demo", "infeasible"],
)


def build_demo_grid(seed: int = 42) -> tuple[CityPlan, SimulationConfig]:
    """Build the demo plan; its houses are existing stock and cost nothing."""
    plan = CityPlan(grid=GridSpec(rows=ROWS, cols=COLS), budget=BudgetState(budget_total=BUDGET_TOTAL))
    plan.auto_grid()

    for i, cell in enumerate(HOUSE_CELLS):
        plan.place_building(HOUSE, cell, 2 + (i % 3), 12, charge_budget=False)
    for i, cell in enumerate(WORK_CELLS):
        plan.place_building(WORK, cell, 4 + (i % 2), 30)
    for cell in FOOD_CELLS:
        plan.place_building(FOOD, cell, 1, 50)

    config = SimulationConfig(
        population=POPULATION,
        walk_max_m=800.0,
        car_speed_kmh=35.0,
        walk_speed_kmh=4.8,
        car_emissions_kg_per_km=0.2,
        walk_emissions_kg_per_km=0.0,
        random_seed=seed,
    )
    return plan, config
