"""Pydantic models for API request/response schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from mobility.core.config import (
    DEFAULT_BUDGET_TOTAL,
    DEFAULT_CELL_SIZE_M,
    DEFAULT_COLS,
    DEFAULT_ROWS,
    MAX_CELL_SIZE_M,
    MAX_GRID_DIM,
    MAX_POPULATION,
    MIN_CELL_SIZE_M,
    MIN_GRID_DIM,
)


class BuildingModel(BaseModel):
    """A building on the grid."""

    kind: Literal["house", "work", "food"] = Field(..., description="Building kind")
    row: int = Field(..., ge=0, description="Grid row")
    col: int = Field(..., ge=0, description="Grid column")
    floors: int = Field(default=1, ge=1, description="Number of floors")
    base_capacity: int = Field(default=1, ge=1, description="Capacity per floor")


class WorldModel(BaseModel):
    """Grid dimensions, road cells and buildings to simulate."""

    rows: int = Field(default=DEFAULT_ROWS, ge=MIN_GRID_DIM, le=MAX_GRID_DIM)
    cols: int = Field(default=DEFAULT_COLS, ge=MIN_GRID_DIM, le=MAX_GRID_DIM)
    roads: list[tuple[int, int]] = Field(
        default_factory=list, description="Road cells as [row, col] pairs"
    )
    buildings: list[BuildingModel] = Field(default_factory=list)


class SimulationConfigModel(BaseModel):
    """Run parameters; mirrors SimulationConfig."""

    population: int = Field(default=2100, ge=0, le=MAX_POPULATION)
    walk_max_m: float = Field(default=800.0, ge=0.0, description="Longest walked leg in metres")
    car_speed_kmh: float = Field(default=35.0, gt=0.0)
    walk_speed_kmh: float = Field(default=4.8, gt=0.0)
    car_emissions_kg_per_km: float = Field(default=0.2, ge=0.0)
    walk_emissions_kg_per_km: float = Field(default=0.0, ge=0.0)
    distance_mode: Literal["road", "euclidean", "manhattan"] = "road"
    jobs_per_workplace: int = Field(default=80, ge=1)
    meals_per_food_place: int = Field(default=200, ge=1)
    boundary_penalty_kg_per_person: float = Field(default=15.0, ge=0.0)
    cell_size_m: float = Field(default=DEFAULT_CELL_SIZE_M, ge=MIN_CELL_SIZE_M, le=MAX_CELL_SIZE_M)
    random_seed: Optional[int] = Field(
        default=None, description="Seed for work/food draws; server default when omitted"
    )


class SimulationRunRequest(BaseModel):
    """Request to run one simulation."""

    world: WorldModel
    config: SimulationConfigModel = Field(default_factory=SimulationConfigModel)


class MetricsModel(BaseModel):
    """Aggregate daily mobility metrics."""

    population: int
    avg_walk_m_per_day: float
    avg_drive_m_per_day: float
    avg_travel_time_min_per_day: float
    total_emissions_kg_per_day: float
    drivers_count: int
    unreachable_legs: int
    travel_in: int = Field(..., description="Inbound boundary commuters")
    travel_out: int = Field(..., description="Outbound boundary commuters")


class HeadlinePoint(BaseModel):
    """One bar of the headline chart."""

    metric: str
    value: float


class SimulationRunResponse(BaseModel):
    """Metrics of a completed run."""

    metrics: MetricsModel
    headline: list[HeadlinePoint]
    mode_share: dict[str, float] = Field(
        default_factory=dict, description="Fraction of legs walked, driven and unreachable"
    )


class HousingCostParamsModel(BaseModel):
    house_base_cost: float = Field(default=13_000.0, ge=0.0)
    cap_exp: float = Field(default=1.5, ge=0.0)
    floor_exp: float = Field(default=1.6, ge=0.0)
    hi_rise_threshold: int = Field(default=6, ge=0)
    hi_rise_penalty: float = Field(default=50_000.0, ge=0.0)


class BudgetModel(BaseModel):
    budget_total: float = Field(default=DEFAULT_BUDGET_TOTAL, ge=0.0)
    budget_spent: float = Field(default=0.0, ge=0.0)
    workplaces: int = Field(default=0, ge=0, description="Workplaces on the grid (drives revenue)")


class HouseQuoteRequest(BaseModel):
    """Request a cost quote for a house against a budget."""

    floors: int = Field(..., ge=1)
    base_capacity: int = Field(..., ge=1)
    params: HousingCostParamsModel = Field(default_factory=HousingCostParamsModel)
    budget: BudgetModel = Field(default_factory=BudgetModel)


class HouseQuoteResponse(BaseModel):
    cost: int
    available: float
    remaining: float = Field(..., description="Available budget left after paying the cost")
    affordable: bool


class PredefinedScenario(BaseModel):
    """A predefined city plan with its run configuration."""

    id: str = Field(..., description="Unique scenario identifier")
    name: str = Field(..., description="Short display name")
    description: str = Field(..., description="What the scenario sets up")
    tags: list[str] = Field(default_factory=list)
    world: WorldModel
    config: SimulationConfigModel
    budget: BudgetModel
