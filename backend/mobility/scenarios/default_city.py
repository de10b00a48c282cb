"""Scenario: the default 25x30 city.

A lattice of roads every third row and column, a residential quarter packed
into the bottom-left, an office quarter in the top-right and food places
scattered at random free cells. Housing is charged against a 75M budget.
"""

import numpy as np

from mobility.core.config import BudgetState, GridSpec, ScenarioMetadata, SimulationConfig
from mobility.core.plan import CityPlan
from mobility.core.state import FOOD, HOUSE, WORK, Cell


ROWS: int = 25
COLS: int = 30
POPULATION: int = 2100
BUDGET_TOTAL: float = 75_000_000

HOUSE_COUNT: int = 117
HOUSE_FLOORS: int = 3
HOUSE_BASE_CAPACITY: int = 6

WORK_COUNT: int = 32
WORK_BASE_CAPACITY: int = 30

FOOD_COUNT: int = 11
FOOD_BASE_CAPACITY: int = 50

METADATA = ScenarioMetadata(
    name="Default city",
    description=(
        "25x30 grid with roads every 3 cells, 117 three-storey houses in the "
        "south-west, 32 workplaces in the north-east and 11 scattered food places."
    ),
    tags=["default", "road"],
)


def _take(candidates, count: int, blocked: set) -> list[Cell]:
    """First ``count`` candidate cells not already blocked, in candidate order."""
    chosen: list[Cell] = []
    for cell in candidates:
        if len(chosen) >= count:
            break
        if cell in blocked:
            continue
        blocked.add(cell)
        chosen.append(cell)
    return chosen


def build_default_city(seed: int = 42) -> tuple[CityPlan, SimulationConfig]:
    """Build the default city plan and its simulation configuration.

    Parameters
    ----------
    seed : int
        Seeds both the food place scatter and the run's assignment draws.
    """
    plan = CityPlan(grid=GridSpec(rows=ROWS, cols=COLS), budget=BudgetState(budget_total=BUDGET_TOTAL))
    plan.auto_grid()
    blocked: set[Cell] = set(plan.roads)

    # Houses: bottom-left quarter, then a sweep from the bottom-right corner
    house_row_start = int(ROWS * 0.6)
    house_col_end = int(COLS * 0.4)
    quarter = (Cell(r, c) for r in range(ROWS - 1, house_row_start - 1, -1) for c in range(house_col_end - 1, -1, -1))
    sweep = (Cell(r, c) for r in range(ROWS - 1, -1, -1) for c in range(COLS - 1, -1, -1))
    houses = _take(quarter, HOUSE_COUNT, blocked)
    houses += _take(sweep, HOUSE_COUNT - len(houses), blocked)

    # Workplaces: top-right quarter, then a sweep from the top-left corner
    work_row_end = int(ROWS * 0.4)
    work_col_start = int(COLS * 0.6)
    quarter = (Cell(r, c) for r in range(work_row_end) for c in range(work_col_start, COLS))
    sweep = (Cell(r, c) for r in range(ROWS) for c in range(COLS))
    works = _take(quarter, WORK_COUNT, blocked)
    works += _take(sweep, WORK_COUNT - len(works), blocked)

    # Food: random free cells
    rng = np.random.default_rng(seed)
    cells = [Cell(r, c) for r in range(ROWS) for c in range(COLS)]
    order = rng.permutation(len(cells))
    foods = _take((cells[int(i)] for i in order), FOOD_COUNT, blocked)

    # Workplace revenue has to be on the books before housing is charged
    for cell in works:
        plan.place_building(WORK, cell, 1, WORK_BASE_CAPACITY)
    for cell in houses:
        plan.place_building(HOUSE, cell, HOUSE_FLOORS, HOUSE_BASE_CAPACITY)
    for cell in foods:
        plan.place_building(FOOD, cell, 1, FOOD_BASE_CAPACITY)

    config = SimulationConfig(population=POPULATION, random_seed=seed)
    return plan, config
