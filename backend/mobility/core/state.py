"""Simulation state data structures."""

from dataclasses import asdict, dataclass, field
from typing import NamedTuple, Optional

from mobility.core.config import GridSpec


HOUSE = "house"
WORK = "work"
FOOD = "food"
BUILDING_KINDS = (HOUSE, WORK, FOOD)


class Cell(NamedTuple):
    """One grid square addressed by (row, col)."""

    row: int
    col: int


@dataclass(frozen=True)
class Building:
    """A house, workplace or food place occupying one cell."""

    kind: str
    row: int
    col: int
    floors: int = 1
    base_capacity: int = 1

    def __post_init__(self):
        if self.kind not in BUILDING_KINDS:
            raise ValueError(f"kind must be one of {', '.join(BUILDING_KINDS)}, got {self.kind!r}")
        if self.floors < 1:
            raise ValueError(f"floors must be >= 1, got {self.floors}")
        if self.base_capacity < 1:
            raise ValueError(f"base_capacity must be >= 1, got {self.base_capacity}")

    @property
    def location(self) -> Cell:
        return Cell(self.row, self.col)

    @property
    def capacity(self) -> int:
        return self.floors * self.base_capacity


@dataclass(frozen=True)
class WorldSnapshot:
    """Immutable copy of the grid, roads and buildings consumed by one run."""

    grid: GridSpec
    roads: frozenset = frozenset()
    buildings: tuple = ()

    def __post_init__(self):
        for cell in self.roads:
            if not self.in_bounds(cell):
                raise ValueError(f"road cell {tuple(cell)} outside {self.grid.rows}x{self.grid.cols} grid")
        seen: set[Cell] = set()
        for b in self.buildings:
            if not self.in_bounds(b.location):
                raise ValueError(f"building at {tuple(b.location)} outside {self.grid.rows}x{self.grid.cols} grid")
            if b.location in seen:
                raise ValueError(f"more than one building at {tuple(b.location)}")
            if b.location in self.roads:
                raise ValueError(f"building at {tuple(b.location)} sits on a road cell")
            seen.add(b.location)

    @classmethod
    def build(cls, rows: int, cols: int, roads=(), buildings=()) -> "WorldSnapshot":
        """Build a snapshot from plain iterables of (row, col) pairs and buildings."""
        return cls(
            grid=GridSpec(rows=rows, cols=cols),
            roads=frozenset(Cell(r, c) for r, c in roads),
            buildings=tuple(buildings),
        )

    def in_bounds(self, cell) -> bool:
        r, c = cell
        return 0 <= r < self.grid.rows and 0 <= c < self.grid.cols

    def of_kind(self, kind: str) -> list[Building]:
        """Buildings of one kind, in placement order."""
        return [b for b in self.buildings if b.kind == kind]

    @property
    def houses(self) -> list[Building]:
        return self.of_kind(HOUSE)

    @property
    def workplaces(self) -> list[Building]:
        return self.of_kind(WORK)

    @property
    def food_places(self) -> list[Building]:
        return self.of_kind(FOOD)

    @property
    def housing_capacity(self) -> int:
        return sum(h.capacity for h in self.houses)


@dataclass
class Person:
    """A resident created for a single run."""

    id: int
    house: Optional[Building] = None
    work: Optional[Building] = None
    food: Optional[Building] = None

    def legs(self) -> list[tuple[str, Cell, Cell]]:
        """The three daily trip legs as (name, origin, destination)."""
        return [
            ("house_to_work", self.house.location, self.work.location),
            ("work_to_food", self.work.location, self.food.location),
            ("food_to_house", self.food.location, self.house.location),
        ]


@dataclass
class BoundaryCommute:
    """Commuters implied by a jobs/housing imbalance across the city edge."""

    jobs_capacity_inside: int = 0
    travel_in: int = 0
    travel_out: int = 0
    penalty_kg: float = 0.0


@dataclass
class Metrics:
    """Aggregate daily mobility metrics produced by one run."""

    population: int = 0
    avg_walk_m_per_day: float = 0.0
    avg_drive_m_per_day: float = 0.0
    avg_travel_time_min_per_day: float = 0.0
    total_emissions_kg_per_day: float = 0.0
    drivers_count: int = 0
    unreachable_legs: int = 0
    travel_in: int = 0
    travel_out: int = 0
    leg_emissions_kg_per_day: float = field(default=0.0, repr=False)

    def snapshot(self) -> dict:
        """Capture the metrics as a plain dict."""
        data = asdict(self)
        data.pop("leg_emissions_kg_per_day")
        return data

    def headline(self) -> list[dict]:
        """The four headline numbers shown in the editor's bar chart."""
        return [
            {"metric": "Avg walk (m)", "value": self.avg_walk_m_per_day},
            {"metric": "Avg drive (m)", "value": self.avg_drive_m_per_day},
            {"metric": "Avg time (min)", "value": self.avg_travel_time_min_per_day},
            {"metric": "Total CO2 (kg)", "value": self.total_emissions_kg_per_day},
        ]
