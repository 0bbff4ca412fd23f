import math
from numbers import Real

from calculator.domain.types import FuelCalculation

LITRES_PER_100KM_BASE = 100.0


class InvalidInputError(Exception):
    def __init__(self, field: str, value, message: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message or f"{field} must be a finite number greater than zero, got {value!r}")


def require_positive(field: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(field, value, f"{field} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(field, value)
    return value


def require_finite_result(field: str, value: float) -> float:
    if not math.isfinite(value):
        raise InvalidInputError(field, value, f"{field} is out of range for the given inputs, got {value!r}")
    return value


def compute(distance: float, fuel_efficiency: float, fuel_price: float) -> FuelCalculation:
    """Compute the fuel cost of a trip.

    ``fuel_efficiency`` is expressed in litres per 100 km, so the fuel needed is
    ``distance * fuel_efficiency / 100``. All three inputs must be finite and
    strictly positive; anything else raises :class:`InvalidInputError`.
    """
    distance = require_positive("distance", distance)
    fuel_efficiency = require_positive("fuel_efficiency", fuel_efficiency)
    fuel_price = require_positive("fuel_price", fuel_price)

    fuel_needed = require_finite_result("fuel_needed", distance * (fuel_efficiency / LITRES_PER_100KM_BASE))
    total_cost = require_finite_result("total_cost", fuel_needed * fuel_price)
    cost_per_km = require_finite_result("cost_per_km", total_cost / distance)

    return FuelCalculation(
        distance=distance,
        fuel_efficiency=fuel_efficiency,
        fuel_price=fuel_price,
        fuel_needed=fuel_needed,
        total_cost=total_cost,
        cost_per_km=cost_per_km,
    )


def compute_round_trip(distance: float, fuel_efficiency: float, fuel_price: float) -> FuelCalculation:
    distance = require_positive("distance", distance)
    return compute(distance * 2, fuel_efficiency, fuel_price)
