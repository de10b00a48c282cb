"""Mutable city plan edited between simulation runs.

The plan owns roads, buildings and the construction budget. It keeps a cell
from being both road and building, charges the housing budget gate when a
house is placed and refunds it when the house is removed. Runs always see an
immutable snapshot.
"""

import logging
from typing import Optional

from mobility.core.config import (
    AUTO_GRID_SPACING,
    BudgetState,
    GridSpec,
    HousingCostParams,
    SimulationConfig,
)
from mobility.core.engine import run_simulation
from mobility.core.errors import FeasibilityError, InsufficientBudget, PlacementError
from mobility.core.state import FOOD, HOUSE, WORK, Building, Cell, Metrics, WorldSnapshot
from mobility.housing.budget import charge, refund, workplace_revenue
from mobility.housing.cost import house_cost
from mobility.network.layout import lattice_roads, manhattan_path

logger = logging.getLogger(__name__)


class CityPlan:
    """Roads, buildings and budget of the city being edited."""

    def __init__(
        self,
        grid: Optional[GridSpec] = None,
        budget: Optional[BudgetState] = None,
        cost_params: Optional[HousingCostParams] = None,
    ):
        self.grid: GridSpec = grid or GridSpec()
        errors = self.grid.validate()
        if errors:
            raise ValueError("; ".join(errors))
        self.budget: BudgetState = budget or BudgetState()
        self.cost_params: HousingCostParams = cost_params or HousingCostParams()
        self.roads: set[Cell] = set()
        self.buildings: list[Building] = []
        self.last_metrics: Optional[Metrics] = None
        self.status_message: str = ""

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def in_bounds(self, cell) -> bool:
        r, c = cell
        return 0 <= r < self.grid.rows and 0 <= c < self.grid.cols

    def building_at(self, cell) -> Optional[Building]:
        cell = Cell(*cell)
        for b in self.buildings:
            if b.location == cell:
                return b
        return None

    def count(self, kind: str) -> int:
        return sum(1 for b in self.buildings if b.kind == kind)

    @property
    def total_housing_capacity(self) -> int:
        return sum(b.capacity for b in self.buildings if b.kind == HOUSE)

    @property
    def total_workplaces(self) -> int:
        return self.count(WORK)

    @property
    def total_food_places(self) -> int:
        return self.count(FOOD)

    def quote_house(self, floors: int, base_capacity: int) -> int:
        return house_cost(floors, base_capacity, self.cost_params)

    def _sync_revenue(self) -> None:
        self.budget.revenue = workplace_revenue(self.total_workplaces)

    # ------------------------------------------------------------------
    # Roads
    # ------------------------------------------------------------------

    def set_road(self, cell, on: bool = True) -> bool:
        """Mark or clear a road; building cells and out-of-bounds cells are ignored.

        Returns True when the cell is a road afterwards.
        """
        cell = Cell(*cell)
        if not self.in_bounds(cell):
            return False
        if on:
            if self.building_at(cell) is not None:
                return False
            self.roads.add(cell)
            return True
        self.roads.discard(cell)
        return False

    def toggle_road(self, cell) -> bool:
        return self.set_road(cell, Cell(*cell) not in self.roads)

    def draw_road_line(self, start, end) -> int:
        """Mark the L-shaped Manhattan path from ``start`` to ``end`` as road."""
        marked = {c for c in manhattan_path(start, end) if self.set_road(c, True)}
        return len(marked)

    def auto_grid(self, spacing: int = AUTO_GRID_SPACING) -> int:
        """Add a regular road lattice every ``spacing`` rows and columns."""
        added = 0
        for cell in sorted(lattice_roads(self.grid.rows, self.grid.cols, spacing)):
            if cell not in self.roads and self.set_road(cell, True):
                added += 1
        logger.info("Auto grid added %d road cells (spacing %d)", added, spacing)
        return added

    def clear(self) -> None:
        """Remove every road and building and reset spending."""
        self.roads.clear()
        self.buildings.clear()
        self.budget.budget_spent = 0.0
        self._sync_revenue()
        self.last_metrics = None

    # ------------------------------------------------------------------
    # Buildings
    # ------------------------------------------------------------------

    def place_building(
        self,
        kind: str,
        cell,
        floors: int = 1,
        base_capacity: int = 1,
        charge_budget: bool = True,
    ) -> Building:
        """Place a building, charging the budget gate for houses.

        ``charge_budget=False`` places pre-existing housing stock without
        touching the budget.

        Raises
        ------
        PlacementError
            The cell is outside the grid or already holds a building.
        InsufficientBudget
            A house costs more than the available budget. Nothing changes.
        """
        cell = Cell(*cell)
        if not self.in_bounds(cell):
            raise PlacementError(f"Cell {tuple(cell)} is outside the grid.", cell.row, cell.col)
        if self.building_at(cell) is not None:
            raise PlacementError(f"Cell {tuple(cell)} already holds a building.", cell.row, cell.col)

        building = Building(kind=kind, row=cell.row, col=cell.col, floors=floors, base_capacity=base_capacity)
        if kind == HOUSE and charge_budget:
            try:
                charge(self.budget, self.quote_house(floors, base_capacity))
            except InsufficientBudget as e:
                self.status_message = e.message
                raise

        self.roads.discard(cell)
        self.buildings.append(building)
        if kind == WORK:
            self._sync_revenue()
        self.status_message = ""
        return building

    def remove_at(self, cell) -> Optional[Building]:
        """Remove whatever stands on ``cell``; a house's cost is refunded."""
        cell = Cell(*cell)
        self.roads.discard(cell)
        building = self.building_at(cell)
        if building is None:
            return None
        if building.kind == HOUSE:
            refund(self.budget, self.quote_house(building.floors, building.base_capacity))
        self.buildings.remove(building)
        if building.kind == WORK:
            self._sync_revenue()
        return building

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def snapshot(self) -> WorldSnapshot:
        return WorldSnapshot(
            grid=self.grid,
            roads=frozenset(self.roads),
            buildings=tuple(self.buildings),
        )

    def simulate(self, config: SimulationConfig) -> Optional[Metrics]:
        """Run the engine on a snapshot of the plan.

        On an infeasible plan the previous metrics are cleared, the reason is
        kept in ``status_message`` and None is returned.
        """
        try:
            metrics = run_simulation(self.snapshot(), config)
        except FeasibilityError as e:
            self.last_metrics = None
            self.status_message = e.message
            return None
        self.last_metrics = metrics
        self.status_message = ""
        return metrics
