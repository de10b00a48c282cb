"""Routes for running simulations."""

import asyncio
import logging
import os

from fastapi import APIRouter, HTTPException

from api.models import (
    HeadlinePoint,
    MetricsModel,
    SimulationConfigModel,
    SimulationRunRequest,
    SimulationRunResponse,
    WorldModel,
)
from mobility.core.config import SimulationConfig
from mobility.core.engine import run_detailed
from mobility.core.errors import FeasibilityError
from mobility.core.state import Building, WorldSnapshot
from mobility.integration.metrics import mode_share

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


def default_seed() -> int:
    return int(os.environ.get("MOBILITY_RANDOM_SEED", 42))


def to_snapshot(world: WorldModel) -> WorldSnapshot:
    """Convert a request world into an engine snapshot.

    Raises:
        ValueError: If cells fall outside the grid or two buildings share a cell.
    """
    buildings = [
        Building(kind=b.kind, row=b.row, col=b.col, floors=b.floors, base_capacity=b.base_capacity)
        for b in world.buildings
    ]
    occupied = {b.location for b in buildings}
    # A building cell is never a road
    roads = [cell for cell in world.roads if tuple(cell) not in occupied]
    return WorldSnapshot.build(world.rows, world.cols, roads, buildings)


def to_config(config: SimulationConfigModel) -> SimulationConfig:
    fields = config.model_dump()
    if fields["random_seed"] is None:
        fields["random_seed"] = default_seed()
    return SimulationConfig(**fields)


@router.post("/run", response_model=SimulationRunResponse)
async def run(request: SimulationRunRequest) -> SimulationRunResponse:
    """Run one simulation synchronously and return its metrics.

    An infeasible plan is reported as 422 with the structured reason.
    """
    try:
        world = to_snapshot(request.world)
        config = to_config(request.config)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid simulation request: {str(e)}")

    # Run in a worker thread so the event loop keeps serving requests
    loop = asyncio.get_running_loop()
    try:
        result = await loop.run_in_executor(None, run_detailed, world, config)
    except FeasibilityError as e:
        raise HTTPException(status_code=422, detail=e.to_dict())

    metrics = result.metrics
    return SimulationRunResponse(
        metrics=MetricsModel(**metrics.snapshot()),
        headline=[HeadlinePoint(**point) for point in metrics.headline()],
        mode_share=mode_share(result.legs),
    )
