import math
from collections.abc import Sequence

from calculator.domain.calculator import InvalidInputError, compute
from calculator.domain.types import FuelCalculation, TripComparison, TripInputs


def _as_trip_inputs(field: str, inputs: TripInputs | Sequence[float]) -> TripInputs:
    if isinstance(inputs, TripInputs):
        return inputs
    if isinstance(inputs, (str, bytes)) or not isinstance(inputs, Sequence) or len(inputs) != 3:
        raise InvalidInputError(
            field,
            inputs,
            f"{field} must be TripInputs or a (distance, fuel_efficiency, fuel_price) sequence",
        )
    distance, fuel_efficiency, fuel_price = inputs
    return TripInputs(distance=distance, fuel_efficiency=fuel_efficiency, fuel_price=fuel_price)


def compare(calc1: FuelCalculation, calc2: FuelCalculation) -> TripComparison:
    """Compare two calculations; savings is ``calc1.total_cost - calc2.total_cost``."""
    for field, calc in (("vehicle1", calc1), ("vehicle2", calc2)):
        if not math.isfinite(calc.total_cost):
            raise InvalidInputError(field, calc.total_cost, f"{field} total cost must be finite")

    return TripComparison(
        vehicle1=calc1,
        vehicle2=calc2,
        savings=calc1.total_cost - calc2.total_cost,
    )


def compare_trips(
    vehicle1_inputs: TripInputs | Sequence[float],
    vehicle2_inputs: TripInputs | Sequence[float],
) -> TripComparison:
    first = _as_trip_inputs("vehicle1", vehicle1_inputs)
    second = _as_trip_inputs("vehicle2", vehicle2_inputs)
    return compare(
        compute(first.distance, first.fuel_efficiency, first.fuel_price),
        compute(second.distance, second.fuel_efficiency, second.fuel_price),
    )
