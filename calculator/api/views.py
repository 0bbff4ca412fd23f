import logging

from django.conf import settings
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from calculator.api.serializers import (
    AnnualCostRequestSerializer,
    ConvertEfficiencyRequestSerializer,
    EfficiencyCategoryRequestSerializer,
    EfficiencyCategoryResponseSerializer,
    FuelCalculationSerializer,
    FuelNeededRequestSerializer,
    MaxDistanceRequestSerializer,
    TripComparisonRequestSerializer,
    TripComparisonSerializer,
    TripInputsSerializer,
)
from calculator.domain import (
    InvalidInputError,
    TripInputs,
    annual_fuel_cost,
    compare_trips,
    compute,
    compute_round_trip,
    efficiency_category,
    fuel_needed,
    l_per_100km_to_mpg,
    max_distance,
    mpg_to_l_per_100km,
)
from calculator.services.payloads import (
    annual_fuel_cost_payload,
    fuel_calculation_payload,
    trip_comparison_payload,
)

logger = logging.getLogger(__name__)

INVALID_INPUT_RESPONSE = OpenApiResponse(description="Validation error or rejected input.")


def _decimal_places() -> int | None:
    return settings.RESULT_DECIMAL_PLACES


def _round(value: float) -> float:
    places = _decimal_places()
    return value if places is None else round(value, places)


def _trip_inputs(payload) -> TripInputs:
    return TripInputs(
        distance=payload["distance"],
        fuel_efficiency=payload["fuelEfficiency"],
        fuel_price=payload["fuelPrice"],
    )


def _invalid_input(view_name: str, exc: InvalidInputError) -> Response:
    logger.info("%s rejected %s=%r: %s", view_name, exc.field, exc.value, exc)
    return Response({"detail": str(exc), "field": exc.field}, status=status.HTTP_400_BAD_REQUEST)


class FuelCostView(APIView):
    @extend_schema(
        request=TripInputsSerializer,
        responses={200: FuelCalculationSerializer, 400: INVALID_INPUT_RESPONSE},
    )
    def post(self, request):
        serializer = TripInputsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        inputs = _trip_inputs(serializer.validated_data)
        try:
            result = compute(inputs.distance, inputs.fuel_efficiency, inputs.fuel_price)
        except InvalidInputError as exc:
            return _invalid_input("fuel-cost", exc)

        return Response(fuel_calculation_payload(result, _decimal_places()), status=status.HTTP_200_OK)


class RoundTripView(APIView):
    @extend_schema(
        request=TripInputsSerializer,
        responses={200: FuelCalculationSerializer, 400: INVALID_INPUT_RESPONSE},
    )
    def post(self, request):
        serializer = TripInputsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        inputs = _trip_inputs(serializer.validated_data)
        try:
            result = compute_round_trip(inputs.distance, inputs.fuel_efficiency, inputs.fuel_price)
        except InvalidInputError as exc:
            return _invalid_input("round-trip", exc)

        return Response(fuel_calculation_payload(result, _decimal_places()), status=status.HTTP_200_OK)


class CompareView(APIView):
    @extend_schema(
        request=TripComparisonRequestSerializer,
        responses={200: TripComparisonSerializer, 400: INVALID_INPUT_RESPONSE},
    )
    def post(self, request):
        serializer = TripComparisonRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payload = serializer.validated_data
        try:
            comparison = compare_trips(_trip_inputs(payload["vehicle1"]), _trip_inputs(payload["vehicle2"]))
        except InvalidInputError as exc:
            return _invalid_input("compare", exc)

        return Response(trip_comparison_payload(comparison, _decimal_places()), status=status.HTTP_200_OK)


class FuelNeededView(APIView):
    @extend_schema(
        request=FuelNeededRequestSerializer,
        responses={
            200: OpenApiResponse(response=OpenApiTypes.OBJECT, description="Litres needed for the distance."),
            400: INVALID_INPUT_RESPONSE,
        },
    )
    def post(self, request):
        serializer = FuelNeededRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payload = serializer.validated_data
        try:
            litres = fuel_needed(payload["distance"], payload["fuelEfficiency"])
        except InvalidInputError as exc:
            return _invalid_input("fuel-needed", exc)

        return Response({"fuelNeeded": _round(litres)}, status=status.HTTP_200_OK)


class MaxDistanceView(APIView):
    @extend_schema(
        request=MaxDistanceRequestSerializer,
        responses={
            200: OpenApiResponse(response=OpenApiTypes.OBJECT, description="Kilometres reachable with the fuel."),
            400: INVALID_INPUT_RESPONSE,
        },
    )
    def post(self, request):
        serializer = MaxDistanceRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payload = serializer.validated_data
        try:
            distance = max_distance(payload["fuelAmount"], payload["fuelEfficiency"])
        except InvalidInputError as exc:
            return _invalid_input("max-distance", exc)

        return Response({"maxDistance": _round(distance)}, status=status.HTTP_200_OK)


class ConvertEfficiencyView(APIView):
    @extend_schema(
        request=ConvertEfficiencyRequestSerializer,
        responses={
            200: OpenApiResponse(response=OpenApiTypes.OBJECT, description="Converted efficiency value."),
            400: INVALID_INPUT_RESPONSE,
        },
    )
    def post(self, request):
        serializer = ConvertEfficiencyRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payload = serializer.validated_data
        if payload["direction"] == ConvertEfficiencyRequestSerializer.MPG_TO_L_PER_100KM:
            convert = mpg_to_l_per_100km
        else:
            convert = l_per_100km_to_mpg
        try:
            value = convert(payload["value"])
        except InvalidInputError as exc:
            return _invalid_input("convert-efficiency", exc)

        return Response({"value": _round(value)}, status=status.HTTP_200_OK)


class EfficiencyCategoryView(APIView):
    @extend_schema(
        request=EfficiencyCategoryRequestSerializer,
        responses={200: EfficiencyCategoryResponseSerializer, 400: INVALID_INPUT_RESPONSE},
    )
    def post(self, request):
        serializer = EfficiencyCategoryRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            category = efficiency_category(serializer.validated_data["fuelEfficiency"])
        except InvalidInputError as exc:
            return _invalid_input("efficiency-category", exc)

        return Response({"category": category.value, "label": category.label}, status=status.HTTP_200_OK)


class AnnualCostView(APIView):
    @extend_schema(
        request=AnnualCostRequestSerializer,
        responses={
            200: OpenApiResponse(response=OpenApiTypes.OBJECT, description="Monthly and annual fuel cost."),
            400: INVALID_INPUT_RESPONSE,
        },
    )
    def post(self, request):
        serializer = AnnualCostRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payload = serializer.validated_data
        try:
            annual = annual_fuel_cost(payload["monthlyDistance"], payload["fuelEfficiency"], payload["fuelPrice"])
        except InvalidInputError as exc:
            return _invalid_input("annual-cost", exc)

        return Response(annual_fuel_cost_payload(annual, _decimal_places()), status=status.HTTP_200_OK)
