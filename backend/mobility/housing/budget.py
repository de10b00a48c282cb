"""Budget gate applied when houses are placed or removed."""

import logging

from mobility.core.config import REVENUE_PER_WORKPLACE, BudgetState
from mobility.core.errors import InsufficientBudget

logger = logging.getLogger(__name__)


def workplace_revenue(workplace_count: int) -> float:
    """Budget revenue credited by the workplaces on the grid."""
    return float(workplace_count * REVENUE_PER_WORKPLACE)


def can_afford(budget: BudgetState, cost: float) -> bool:
    return cost <= budget.available


def charge(budget: BudgetState, cost: float) -> None:
    """Commit ``cost`` against the budget.

    Raises InsufficientBudget and leaves the budget untouched when the cost
    exceeds the available funds.
    """
    available = budget.available
    if cost > available:
        logger.warning("Rejected house costing %.0f with %.0f available", cost, available)
        raise InsufficientBudget(cost, available)
    budget.budget_spent += cost


def refund(budget: BudgetState, cost: float) -> None:
    """Return ``cost`` to the budget; spending never drops below zero."""
    budget.budget_spent = max(0.0, budget.budget_spent - cost)
