from enum import Enum

from calculator.domain.calculator import (
    LITRES_PER_100KM_BASE,
    compute,
    require_finite_result,
    require_positive,
)
from calculator.domain.types import AnnualFuelCost

# 1 US mpg == 235.214583 / x L/100km, and the relation is its own inverse.
MPG_L_PER_100KM_FACTOR = 235.214583
MONTHS_PER_YEAR = 12


class EfficiencyCategory(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"
    VERY_POOR = "very_poor"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    EfficiencyCategory.EXCELLENT: "Excellent (5 L/100km or less)",
    EfficiencyCategory.GOOD: "Good (5-6.7 L/100km)",
    EfficiencyCategory.AVERAGE: "Average (6.7-10 L/100km)",
    EfficiencyCategory.POOR: "Poor (10-20 L/100km)",
    EfficiencyCategory.VERY_POOR: "Very Poor (over 20 L/100km)",
}

# Upper bounds in L/100km, equivalent to 20, 15, 10 and 5 km/l.
_CATEGORY_THRESHOLDS = (
    (LITRES_PER_100KM_BASE / 20, EfficiencyCategory.EXCELLENT),
    (LITRES_PER_100KM_BASE / 15, EfficiencyCategory.GOOD),
    (LITRES_PER_100KM_BASE / 10, EfficiencyCategory.AVERAGE),
    (LITRES_PER_100KM_BASE / 5, EfficiencyCategory.POOR),
)


def fuel_needed(distance: float, fuel_efficiency: float) -> float:
    distance = require_positive("distance", distance)
    fuel_efficiency = require_positive("fuel_efficiency", fuel_efficiency)
    return require_finite_result("fuel_needed", distance * (fuel_efficiency / LITRES_PER_100KM_BASE))


def max_distance(fuel_amount: float, fuel_efficiency: float) -> float:
    """Kilometres that ``fuel_amount`` litres cover at ``fuel_efficiency`` L/100km."""
    fuel_amount = require_positive("fuel_amount", fuel_amount)
    fuel_efficiency = require_positive("fuel_efficiency", fuel_efficiency)
    return require_finite_result("max_distance", fuel_amount * LITRES_PER_100KM_BASE / fuel_efficiency)


def mpg_to_l_per_100km(mpg: float) -> float:
    mpg = require_positive("mpg", mpg)
    return require_finite_result("l_per_100km", MPG_L_PER_100KM_FACTOR / mpg)


def l_per_100km_to_mpg(l_per_100km: float) -> float:
    l_per_100km = require_positive("l_per_100km", l_per_100km)
    return require_finite_result("mpg", MPG_L_PER_100KM_FACTOR / l_per_100km)


def efficiency_category(fuel_efficiency: float) -> EfficiencyCategory:
    fuel_efficiency = require_positive("fuel_efficiency", fuel_efficiency)
    for upper_bound, category in _CATEGORY_THRESHOLDS:
        if fuel_efficiency <= upper_bound:
            return category
    return EfficiencyCategory.VERY_POOR


def annual_fuel_cost(monthly_distance: float, fuel_efficiency: float, fuel_price: float) -> AnnualFuelCost:
    monthly_distance = require_positive("monthly_distance", monthly_distance)
    monthly = compute(monthly_distance, fuel_efficiency, fuel_price)
    return AnnualFuelCost(
        monthly_distance=monthly.distance,
        monthly_cost=monthly.total_cost,
        annual_distance=require_finite_result("annual_distance", monthly.distance * MONTHS_PER_YEAR),
        annual_cost=require_finite_result("annual_cost", monthly.total_cost * MONTHS_PER_YEAR),
    )
