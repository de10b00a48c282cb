"""Routes for housing cost quotes."""

from fastapi import APIRouter

from api.models import HouseQuoteRequest, HouseQuoteResponse
from mobility.core.config import BudgetState, HousingCostParams
from mobility.housing.budget import can_afford, workplace_revenue
from mobility.housing.cost import house_cost

router = APIRouter(prefix="/housing", tags=["housing"])


@router.post("/quote", response_model=HouseQuoteResponse)
async def quote_house(request: HouseQuoteRequest) -> HouseQuoteResponse:
    """Price a house and check it against the available budget.

    Nothing is committed; placement itself belongs to the editor.
    """
    params = HousingCostParams(**request.params.model_dump())
    budget = BudgetState(
        budget_total=request.budget.budget_total,
        budget_spent=request.budget.budget_spent,
        revenue=workplace_revenue(request.budget.workplaces),
    )
    cost = house_cost(request.floors, request.base_capacity, params)
    return HouseQuoteResponse(
        cost=cost,
        available=budget.available,
        remaining=budget.available - cost,
        affordable=can_afford(budget, cost),
    )
