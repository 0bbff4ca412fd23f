import math

from django.test import SimpleTestCase

from calculator.domain.calculator import InvalidInputError, compute
from calculator.domain.comparator import compare, compare_trips
from calculator.domain.types import FuelCalculation, TripInputs


class TripComparatorTests(SimpleTestCase):
    def test_compares_reference_vehicles(self):
        comparison = compare(compute(100, 8, 1.5), compute(100, 6, 1.5))

        self.assertAlmostEqual(comparison.vehicle1.total_cost, 12.0, places=9)
        self.assertAlmostEqual(comparison.vehicle2.total_cost, 9.0, places=9)
        self.assertAlmostEqual(comparison.savings, 3.0, places=9)

    def test_keeps_inputs_unchanged(self):
        first = compute(80, 5.5, 1.9)
        second = compute(80, 9.1, 1.7)

        comparison = compare(first, second)

        self.assertIs(comparison.vehicle1, first)
        self.assertIs(comparison.vehicle2, second)

    def test_savings_is_signed(self):
        cheap = compute(300, 4.8, 1.65)
        expensive = compute(300, 10.2, 1.65)

        forward = compare(expensive, cheap)
        backward = compare(cheap, expensive)

        self.assertGreater(forward.savings, 0)
        self.assertEqual(forward.savings, -backward.savings)

    def test_identical_vehicles_have_no_savings(self):
        calc = compute(42, 6.0, 1.5)
        self.assertEqual(compare(calc, calc).savings, 0.0)

    def test_rejects_non_finite_total_cost(self):
        broken = FuelCalculation(
            distance=1.0,
            fuel_efficiency=1.0,
            fuel_price=1.0,
            fuel_needed=math.inf,
            total_cost=math.inf,
            cost_per_km=math.inf,
        )
        with self.assertRaises(InvalidInputError) as ctx:
            compare(compute(100, 8, 1.5), broken)
        self.assertEqual(ctx.exception.field, "vehicle2")

    def test_compare_trips_from_raw_inputs(self):
        comparison = compare_trips(
            TripInputs(distance=100, fuel_efficiency=8, fuel_price=1.5),
            (100, 6, 1.5),
        )

        self.assertEqual(comparison.vehicle1, compute(100, 8, 1.5))
        self.assertEqual(comparison.vehicle2, compute(100, 6, 1.5))
        self.assertAlmostEqual(comparison.savings, 3.0, places=9)

    def test_compare_trips_propagates_input_errors(self):
        with self.assertRaises(InvalidInputError) as ctx:
            compare_trips((100, 8, 1.5), (0, 6, 1.5))
        self.assertEqual(ctx.exception.field, "distance")

    def test_compare_trips_rejects_malformed_inputs(self):
        for bad_inputs in ((100, 8), "100,8,1.5", None):
            with self.subTest(bad_inputs=bad_inputs):
                with self.assertRaises(InvalidInputError) as ctx:
                    compare_trips((100, 8, 1.5), bad_inputs)
                self.assertEqual(ctx.exception.field, "vehicle2")
