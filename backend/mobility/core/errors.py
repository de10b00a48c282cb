"""Structured, recoverable failures raised by the engine and the city plan.

Every error carries a ``kind`` and the numbers that explain it so callers can
report the reason without parsing the message.
"""


class MobilityError(Exception):
    """Base class for all recoverable grid-city errors."""

    kind: str = "mobility_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> dict:
        return {}

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message, **self.details()}


# ---------------------------------------------------------------------------
# Feasibility
# ---------------------------------------------------------------------------

class FeasibilityError(MobilityError):
    """The building stock cannot support the configured population."""

    kind = "feasibility_error"


class NoHouses(FeasibilityError):
    kind = "no_houses"

    def __init__(self):
        super().__init__("Place at least one house.")


class NoWorkplaces(FeasibilityError):
    kind = "no_workplaces"

    def __init__(self):
        super().__init__("Place at least one workplace.")


class NoFoodPlaces(FeasibilityError):
    kind = "no_food_places"

    def __init__(self):
        super().__init__("Place at least one food place.")


class InsufficientHousing(FeasibilityError):
    kind = "insufficient_housing"

    def __init__(self, capacity: int, population: int):
        self.capacity = capacity
        self.population = population
        super().__init__(
            f"Not enough housing capacity ({capacity}) for population ({population}). "
            "Raise floors, base capacity, or add houses."
        )

    @property
    def shortfall(self) -> int:
        return self.population - self.capacity

    def details(self) -> dict:
        return {"capacity": self.capacity, "population": self.population, "shortfall": self.shortfall}


class InsufficientWorkplaces(FeasibilityError):
    kind = "insufficient_workplaces"

    def __init__(self, have: int, need: int):
        self.have = have
        self.need = need
        super().__init__(f"Insufficient workplaces: have {have}, need {need}.")

    def details(self) -> dict:
        return {"have": self.have, "need": self.need}


class InsufficientFood(FeasibilityError):
    kind = "insufficient_food"

    def __init__(self, have: int, need: int):
        self.have = have
        self.need = need
        super().__init__(f"Insufficient food places: have {have}, need {need}.")

    def details(self) -> dict:
        return {"have": self.have, "need": self.need}


# ---------------------------------------------------------------------------
# Placement time
# ---------------------------------------------------------------------------

class InsufficientBudget(MobilityError):
    """A house costs more than the budget currently available."""

    kind = "insufficient_budget"

    def __init__(self, cost: float, available: float):
        self.cost = cost
        self.available = available
        super().__init__(
            f"Not enough budget for this house. Cost ${cost:,.0f} | "
            f"Remaining ${available - cost:,.0f}"
        )

    def details(self) -> dict:
        return {"cost": self.cost, "available": self.available}


class PlacementError(MobilityError):
    """A building cannot go on the requested cell."""

    kind = "placement_error"

    def __init__(self, message: str, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(message)

    def details(self) -> dict:
        return {"row": self.row, "col": self.col}
