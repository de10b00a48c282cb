import pytest

from mobility.core.config import SimulationConfig
from mobility.core.state import FOOD, HOUSE, WORK, Building, WorldSnapshot


def small_city(roads=None) -> WorldSnapshot:
    """6x6 grid: one house at (0,0) for five, a workplace at (0,5), food at (5,0).

    Roads default to all of row 0 and column 0 except the building cells.
    """
    buildings = [
        Building(HOUSE, 0, 0, floors=1, base_capacity=5),
        Building(WORK, 0, 5),
        Building(FOOD, 5, 0),
    ]
    if roads is None:
        occupied = {b.location for b in buildings}
        line = {(0, c) for c in range(6)} | {(r, 0) for r in range(6)}
        roads = sorted(line - occupied)
    return WorldSnapshot.build(6, 6, roads, buildings)


@pytest.fixture
def city() -> WorldSnapshot:
    return small_city()


@pytest.fixture
def roadless_city() -> WorldSnapshot:
    return small_city(roads=[])


@pytest.fixture
def walk_config() -> SimulationConfig:
    return SimulationConfig(
        population=5,
        walk_max_m=1000.0,
        distance_mode="manhattan",
        cell_size_m=50.0,
    )
