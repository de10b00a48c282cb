"""Housing construction cost model.

Cost grows super-linearly in both base capacity and floor count, and a
quadratic penalty kicks in above the high-rise threshold:

    cost = round(base * cap**cap_exp * floors**floor_exp + penalty)
    penalty = hi_rise_penalty * (floors - threshold)**2   if floors > threshold
"""

import math

from mobility.core.config import HousingCostParams


DEFAULT_COST_PARAMS = HousingCostParams()


def high_rise_penalty(floors: int, params: HousingCostParams = DEFAULT_COST_PARAMS) -> float:
    """Quadratic penalty for every floor above the high-rise threshold."""
    excess = floors - params.hi_rise_threshold
    if excess <= 0:
        return 0.0
    return params.hi_rise_penalty * excess ** 2


def house_cost(floors: int, base_capacity: int, params: HousingCostParams = DEFAULT_COST_PARAMS) -> int:
    """Monetary cost of a house, rounded half-up to a whole unit."""
    raw = (
        params.house_base_cost
        * base_capacity ** params.cap_exp
        * floors ** params.floor_exp
        + high_rise_penalty(floors, params)
    )
    return int(math.floor(raw + 0.5))
