from calculator.domain.calculator import InvalidInputError, compute, compute_round_trip
from calculator.domain.comparator import compare, compare_trips
from calculator.domain.efficiency import (
    EfficiencyCategory,
    annual_fuel_cost,
    efficiency_category,
    fuel_needed,
    l_per_100km_to_mpg,
    max_distance,
    mpg_to_l_per_100km,
)
from calculator.domain.types import AnnualFuelCost, FuelCalculation, TripComparison, TripInputs

__all__ = [
    "AnnualFuelCost",
    "EfficiencyCategory",
    "FuelCalculation",
    "InvalidInputError",
    "TripComparison",
    "TripInputs",
    "annual_fuel_cost",
    "compare",
    "compare_trips",
    "compute",
    "compute_round_trip",
    "efficiency_category",
    "fuel_needed",
    "l_per_100km_to_mpg",
    "max_distance",
    "mpg_to_l_per_100km",
]
