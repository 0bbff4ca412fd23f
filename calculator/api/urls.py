from django.urls import path

from calculator.api.views import (
    AnnualCostView,
    CompareView,
    ConvertEfficiencyView,
    EfficiencyCategoryView,
    FuelCostView,
    FuelNeededView,
    MaxDistanceView,
    RoundTripView,
)

urlpatterns = [
    path("fuel-cost/", FuelCostView.as_view(), name="fuel-cost"),
    path("round-trip/", RoundTripView.as_view(), name="round-trip"),
    path("compare/", CompareView.as_view(), name="compare"),
    path("fuel-needed/", FuelNeededView.as_view(), name="fuel-needed"),
    path("max-distance/", MaxDistanceView.as_view(), name="max-distance"),
    path("convert-efficiency/", ConvertEfficiencyView.as_view(), name="convert-efficiency"),
    path("efficiency-category/", EfficiencyCategoryView.as_view(), name="efficiency-category"),
    path("annual-cost/", AnnualCostView.as_view(), name="annual-cost"),
]
