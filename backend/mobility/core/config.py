"""Simulation, grid and budget configuration."""

from dataclasses import dataclass, field, replace


# Grid bounds accepted by the editor
MIN_GRID_DIM = 6
MAX_GRID_DIM = 40
MIN_CELL_SIZE_M = 10.0
MAX_CELL_SIZE_M = 200.0

DEFAULT_ROWS = 18
DEFAULT_COLS = 24
DEFAULT_CELL_SIZE_M = 50.0

MAX_POPULATION = 10_000

# Spacing of the auto-generated road lattice
AUTO_GRID_SPACING = 3

# Budget revenue credited per workplace on the grid
REVENUE_PER_WORKPLACE = 2_000_000
DEFAULT_BUDGET_TOTAL = 5_000_000

# Guard against zero speeds in the travel-time model (km/h)
MIN_SPEED_KMH = 1e-6

DISTANCE_MODES = ("road", "euclidean", "manhattan")


@dataclass(frozen=True)
class SimulationConfig:
    """Scalar parameters of one simulation run."""

    population: int = 2100
    walk_max_m: float = 800.0  # legs longer than this are driven
    car_speed_kmh: float = 35.0
    walk_speed_kmh: float = 4.8
    car_emissions_kg_per_km: float = 0.2
    walk_emissions_kg_per_km: float = 0.0
    distance_mode: str = "road"
    jobs_per_workplace: int = 80
    meals_per_food_place: int = 200
    boundary_penalty_kg_per_person: float = 15.0  # kg CO2 per boundary commuter per day
    cell_size_m: float = DEFAULT_CELL_SIZE_M
    random_seed: int = 42

    def validate(self) -> list[str]:
        """Return list of validation errors, empty if valid."""
        errors = []
        if not 0 <= self.population <= MAX_POPULATION:
            errors.append(f"population must be 0-{MAX_POPULATION}, got {self.population}")
        if self.walk_max_m < 0:
            errors.append(f"walk_max_m must be >= 0, got {self.walk_max_m}")
        if self.car_speed_kmh <= 0:
            errors.append(f"car_speed_kmh must be > 0, got {self.car_speed_kmh}")
        if self.walk_speed_kmh <= 0:
            errors.append(f"walk_speed_kmh must be > 0, got {self.walk_speed_kmh}")
        if self.car_emissions_kg_per_km < 0:
            errors.append(f"car_emissions_kg_per_km must be >= 0, got {self.car_emissions_kg_per_km}")
        if self.walk_emissions_kg_per_km < 0:
            errors.append(f"walk_emissions_kg_per_km must be >= 0, got {self.walk_emissions_kg_per_km}")
        if self.distance_mode not in DISTANCE_MODES:
            errors.append(f"distance_mode must be one of {', '.join(DISTANCE_MODES)}, got {self.distance_mode!r}")
        if self.jobs_per_workplace < 1:
            errors.append(f"jobs_per_workplace must be >= 1, got {self.jobs_per_workplace}")
        if self.meals_per_food_place < 1:
            errors.append(f"meals_per_food_place must be >= 1, got {self.meals_per_food_place}")
        if self.boundary_penalty_kg_per_person < 0:
            errors.append(
                f"boundary_penalty_kg_per_person must be >= 0, got {self.boundary_penalty_kg_per_person}"
            )
        if not MIN_CELL_SIZE_M <= self.cell_size_m <= MAX_CELL_SIZE_M:
            errors.append(
                f"cell_size_m must be {MIN_CELL_SIZE_M:g}-{MAX_CELL_SIZE_M:g}, got {self.cell_size_m}"
            )
        return errors

    def clamp(self) -> "SimulationConfig":
        """Return a copy with every numeric value clamped to its valid range."""
        return replace(
            self,
            population=max(0, min(MAX_POPULATION, int(self.population))),
            walk_max_m=max(0.0, self.walk_max_m),
            car_speed_kmh=max(MIN_SPEED_KMH, self.car_speed_kmh),
            walk_speed_kmh=max(MIN_SPEED_KMH, self.walk_speed_kmh),
            car_emissions_kg_per_km=max(0.0, self.car_emissions_kg_per_km),
            walk_emissions_kg_per_km=max(0.0, self.walk_emissions_kg_per_km),
            jobs_per_workplace=max(1, int(self.jobs_per_workplace)),
            meals_per_food_place=max(1, int(self.meals_per_food_place)),
            boundary_penalty_kg_per_person=max(0.0, self.boundary_penalty_kg_per_person),
            cell_size_m=max(MIN_CELL_SIZE_M, min(MAX_CELL_SIZE_M, self.cell_size_m)),
        )


@dataclass(frozen=True)
class GridSpec:
    """Dimensions of the city lattice."""

    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    def validate(self) -> list[str]:
        errors = []
        if not MIN_GRID_DIM <= self.rows <= MAX_GRID_DIM:
            errors.append(f"rows must be {MIN_GRID_DIM}-{MAX_GRID_DIM}, got {self.rows}")
        if not MIN_GRID_DIM <= self.cols <= MAX_GRID_DIM:
            errors.append(f"cols must be {MIN_GRID_DIM}-{MAX_GRID_DIM}, got {self.cols}")
        return errors

    def clamp(self) -> "GridSpec":
        return GridSpec(
            rows=max(MIN_GRID_DIM, min(MAX_GRID_DIM, int(self.rows))),
            cols=max(MIN_GRID_DIM, min(MAX_GRID_DIM, int(self.cols))),
        )


@dataclass(frozen=True)
class HousingCostParams:
    """Coefficients of the housing construction cost curve."""

    house_base_cost: float = 13_000.0
    cap_exp: float = 1.5
    floor_exp: float = 1.6
    hi_rise_threshold: int = 6  # floors above this pay the high-rise penalty
    hi_rise_penalty: float = 50_000.0


@dataclass
class BudgetState:
    """Construction budget consulted when houses are placed or removed."""

    budget_total: float = DEFAULT_BUDGET_TOTAL
    budget_spent: float = 0.0
    revenue: float = 0.0

    @property
    def available(self) -> float:
        return self.budget_total + self.revenue - self.budget_spent


@dataclass
class ScenarioMetadata:
    """Descriptive fields attached to a predefined scenario."""

    name: str = ""
    description: str = ""
    tags: list[str] = field(default_factory=list)
