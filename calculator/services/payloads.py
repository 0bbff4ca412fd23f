from typing import Any

from calculator.domain.types import AnnualFuelCost, FuelCalculation, TripComparison


def _number(value: float, decimal_places: int | None) -> float:
    if decimal_places is None:
        return float(value)
    return round(float(value), decimal_places)


def fuel_calculation_payload(calc: FuelCalculation, decimal_places: int | None = None) -> dict[str, Any]:
    return {
        "distance": _number(calc.distance, decimal_places),
        "fuelEfficiency": _number(calc.fuel_efficiency, decimal_places),
        "fuelPrice": _number(calc.fuel_price, decimal_places),
        "fuelNeeded": _number(calc.fuel_needed, decimal_places),
        "totalCost": _number(calc.total_cost, decimal_places),
        "costPerKm": _number(calc.cost_per_km, decimal_places),
    }


def trip_comparison_payload(comparison: TripComparison, decimal_places: int | None = None) -> dict[str, Any]:
    return {
        "vehicle1": fuel_calculation_payload(comparison.vehicle1, decimal_places),
        "vehicle2": fuel_calculation_payload(comparison.vehicle2, decimal_places),
        "savings": _number(comparison.savings, decimal_places),
    }


def annual_fuel_cost_payload(annual: AnnualFuelCost, decimal_places: int | None = None) -> dict[str, Any]:
    return {
        "monthlyDistance": _number(annual.monthly_distance, decimal_places),
        "monthlyCost": _number(annual.monthly_cost, decimal_places),
        "annualDistance": _number(annual.annual_distance, decimal_places),
        "annualCost": _number(annual.annual_cost, decimal_places),
    }
