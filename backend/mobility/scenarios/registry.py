"""Registry of predefined scenarios."""

from typing import Callable

from mobility.core.config import ScenarioMetadata, SimulationConfig
from mobility.core.plan import CityPlan
from mobility.scenarios import default_city, demo_grid


ScenarioBuilder = Callable[..., tuple[CityPlan, SimulationConfig]]

SCENARIOS: dict[str, tuple[ScenarioMetadata, ScenarioBuilder]] = {
    "default_city": (default_city.METADATA, default_city.build_default_city),
    "demo_grid": (demo_grid.METADATA, demo_grid.build_demo_grid),
}


def build_scenario(name: str, seed: int = 42) -> tuple[CityPlan, SimulationConfig]:
    if name not in SCENARIOS:
        raise KeyError(f"Unknown scenario '{name}'. Available: {', '.join(SCENARIOS)}")
    _, builder = SCENARIOS[name]
    return builder(seed=seed)
