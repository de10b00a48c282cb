"""Routes for predefined city scenarios."""

from fastapi import APIRouter

from api.models import (
    BudgetModel,
    BuildingModel,
    PredefinedScenario,
    SimulationConfigModel,
    WorldModel,
)
from mobility.core.plan import CityPlan
from mobility.scenarios.registry import SCENARIOS

router = APIRouter(prefix="/scenarios", tags=["scenarios"])


def _world_model(plan: CityPlan) -> WorldModel:
    return WorldModel(
        rows=plan.grid.rows,
        cols=plan.grid.cols,
        roads=sorted((c.row, c.col) for c in plan.roads),
        buildings=[
            BuildingModel(kind=b.kind, row=b.row, col=b.col, floors=b.floors, base_capacity=b.base_capacity)
            for b in plan.buildings
        ],
    )


def _build_predefined_scenarios() -> list[PredefinedScenario]:
    """Build the list of predefined scenarios."""
    scenarios = []
    for scenario_id, (meta, builder) in SCENARIOS.items():
        plan, config = builder()
        scenarios.append(PredefinedScenario(
            id=scenario_id,
            name=meta.name,
            description=meta.description,
            tags=list(meta.tags),
            world=_world_model(plan),
            config=SimulationConfigModel(**vars(config)),
            budget=BudgetModel(
                budget_total=plan.budget.budget_total,
                budget_spent=plan.budget.budget_spent,
                workplaces=plan.total_workplaces,
            ),
        ))
    return scenarios


PREDEFINED_SCENARIOS = _build_predefined_scenarios()


@router.get("/predefined", response_model=list[PredefinedScenario])
async def get_predefined_scenarios() -> list[PredefinedScenario]:
    """Return the predefined city plans.

    These serve as starting points for users to explore the simulator.
    """
    return PREDEFINED_SCENARIOS
