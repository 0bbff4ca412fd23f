from dataclasses import dataclass


@dataclass(frozen=True)
class TripInputs:
    distance: float
    fuel_efficiency: float
    fuel_price: float


@dataclass(frozen=True)
class FuelCalculation:
    """Result of one fuel cost evaluation.

    Distances are kilometres, efficiency is litres per 100 km and the price is
    per litre. The last three fields are derived from the first three.
    """

    distance: float
    fuel_efficiency: float
    fuel_price: float
    fuel_needed: float
    total_cost: float
    cost_per_km: float


@dataclass(frozen=True)
class TripComparison:
    vehicle1: FuelCalculation
    vehicle2: FuelCalculation
    # vehicle1.total_cost - vehicle2.total_cost; positive when vehicle2 is cheaper
    savings: float


@dataclass(frozen=True)
class AnnualFuelCost:
    monthly_distance: float
    monthly_cost: float
    annual_distance: float
    annual_cost: float
