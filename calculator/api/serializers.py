import json
import math
from typing import Any

from rest_framework import serializers

from calculator.domain.efficiency import EfficiencyCategory
from calculator.domain.types import FuelCalculation, TripComparison


class PositiveFloatField(serializers.FloatField):
    default_error_messages = {
        "not_finite": "Ensure this value is a finite number.",
        "not_positive": "Ensure this value is greater than zero.",
    }

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        if not math.isfinite(value):
            self.fail("not_finite")
        if value <= 0:
            self.fail("not_positive")
        return value


class TripInputsSerializer(serializers.Serializer):
    distance = PositiveFloatField()
    fuelEfficiency = PositiveFloatField()
    fuelPrice = PositiveFloatField()


class TripComparisonRequestSerializer(serializers.Serializer):
    vehicle1 = TripInputsSerializer()
    vehicle2 = TripInputsSerializer()


class FuelNeededRequestSerializer(serializers.Serializer):
    distance = PositiveFloatField()
    fuelEfficiency = PositiveFloatField()


class MaxDistanceRequestSerializer(serializers.Serializer):
    fuelAmount = PositiveFloatField()
    fuelEfficiency = PositiveFloatField()


class ConvertEfficiencyRequestSerializer(serializers.Serializer):
    MPG_TO_L_PER_100KM = "mpg_to_l_per_100km"
    L_PER_100KM_TO_MPG = "l_per_100km_to_mpg"

    value = PositiveFloatField()
    direction = serializers.ChoiceField(choices=[MPG_TO_L_PER_100KM, L_PER_100KM_TO_MPG])


class EfficiencyCategoryRequestSerializer(serializers.Serializer):
    fuelEfficiency = PositiveFloatField()


class EfficiencyCategoryResponseSerializer(serializers.Serializer):
    category = serializers.ChoiceField(choices=[category.value for category in EfficiencyCategory])
    label = serializers.CharField()


class AnnualCostRequestSerializer(serializers.Serializer):
    monthlyDistance = PositiveFloatField()
    fuelEfficiency = PositiveFloatField()
    fuelPrice = PositiveFloatField()


class FuelCalculationSerializer(serializers.Serializer):
    """Validates a serialized FuelCalculation record and rebuilds the domain value."""

    distance = serializers.FloatField()
    fuelEfficiency = serializers.FloatField()
    fuelPrice = serializers.FloatField()
    fuelNeeded = serializers.FloatField()
    totalCost = serializers.FloatField()
    costPerKm = serializers.FloatField()

    def create(self, validated_data):
        return FuelCalculation(
            distance=validated_data["distance"],
            fuel_efficiency=validated_data["fuelEfficiency"],
            fuel_price=validated_data["fuelPrice"],
            fuel_needed=validated_data["fuelNeeded"],
            total_cost=validated_data["totalCost"],
            cost_per_km=validated_data["costPerKm"],
        )


class TripComparisonSerializer(serializers.Serializer):
    vehicle1 = FuelCalculationSerializer()
    vehicle2 = FuelCalculationSerializer()
    savings = serializers.FloatField()

    def create(self, validated_data):
        vehicle1 = FuelCalculationSerializer().create(validated_data["vehicle1"])
        vehicle2 = FuelCalculationSerializer().create(validated_data["vehicle2"])
        return TripComparison(vehicle1=vehicle1, vehicle2=vehicle2, savings=validated_data["savings"])


def _load_record(source: str | bytes | dict[str, Any]) -> Any:
    if isinstance(source, (str, bytes)):
        try:
            return json.loads(source)
        except ValueError as exc:
            raise serializers.ValidationError({"non_field_errors": [f"Invalid JSON: {exc}"]}) from exc
    return source


def parse_fuel_calculation(source: str | bytes | dict[str, Any]) -> FuelCalculation:
    serializer = FuelCalculationSerializer(data=_load_record(source))
    serializer.is_valid(raise_exception=True)
    return serializer.save()


def parse_trip_comparison(source: str | bytes | dict[str, Any]) -> TripComparison:
    serializer = TripComparisonSerializer(data=_load_record(source))
    serializer.is_valid(raise_exception=True)
    return serializer.save()
