from django.test import SimpleTestCase

from calculator.domain.calculator import InvalidInputError, compute
from calculator.domain.efficiency import (
    EfficiencyCategory,
    annual_fuel_cost,
    efficiency_category,
    fuel_needed,
    l_per_100km_to_mpg,
    max_distance,
    mpg_to_l_per_100km,
)


class EfficiencyHelperTests(SimpleTestCase):
    def test_fuel_needed_matches_compute(self):
        self.assertAlmostEqual(fuel_needed(350, 7.2), compute(350, 7.2, 1.0).fuel_needed)

    def test_max_distance_inverts_fuel_needed(self):
        litres = fuel_needed(480, 6.4)
        self.assertAlmostEqual(max_distance(litres, 6.4), 480.0, places=9)

    def test_max_distance_for_full_tank(self):
        self.assertAlmostEqual(max_distance(50, 5), 1000.0, places=9)

    def test_mpg_conversion(self):
        self.assertAlmostEqual(mpg_to_l_per_100km(30), 7.8405, places=4)
        self.assertAlmostEqual(l_per_100km_to_mpg(7.8404861), 30.0, places=4)
        self.assertAlmostEqual(l_per_100km_to_mpg(mpg_to_l_per_100km(42.0)), 42.0, places=9)

    def test_efficiency_category_boundaries(self):
        cases = [
            (3.9, EfficiencyCategory.EXCELLENT),
            (5.0, EfficiencyCategory.EXCELLENT),
            (5.5, EfficiencyCategory.GOOD),
            (6.6, EfficiencyCategory.GOOD),
            (6.7, EfficiencyCategory.AVERAGE),
            (10.0, EfficiencyCategory.AVERAGE),
            (14.0, EfficiencyCategory.POOR),
            (20.0, EfficiencyCategory.POOR),
            (25.0, EfficiencyCategory.VERY_POOR),
        ]
        for fuel_efficiency, expected in cases:
            with self.subTest(fuel_efficiency=fuel_efficiency):
                self.assertEqual(efficiency_category(fuel_efficiency), expected)

    def test_every_category_has_label(self):
        for category in EfficiencyCategory:
            self.assertTrue(category.label)
        self.assertEqual(EfficiencyCategory.GOOD.label, "Good (5-6.7 L/100km)")

    def test_annual_cost_is_twelve_months(self):
        annual = annual_fuel_cost(1500, 7.0, 1.6)

        self.assertEqual(annual.monthly_distance, 1500.0)
        self.assertAlmostEqual(annual.monthly_cost, 168.0, places=9)
        self.assertEqual(annual.annual_distance, 18000.0)
        self.assertAlmostEqual(annual.annual_cost, 2016.0, places=9)

    def test_helpers_reject_non_positive_inputs(self):
        calls = [
            (fuel_needed, (0, 7.0), "distance"),
            (max_distance, (-1, 7.0), "fuel_amount"),
            (max_distance, (40, 0), "fuel_efficiency"),
            (mpg_to_l_per_100km, (0,), "mpg"),
            (l_per_100km_to_mpg, (-5,), "l_per_100km"),
            (efficiency_category, (0,), "fuel_efficiency"),
            (annual_fuel_cost, (0, 7.0, 1.6), "monthly_distance"),
        ]
        for func, args, field in calls:
            with self.subTest(func=func.__name__, args=args):
                with self.assertRaises(InvalidInputError) as ctx:
                    func(*args)
                self.assertEqual(ctx.exception.field, field)

    def test_helpers_reject_results_that_overflow(self):
        calls = [
            (fuel_needed, (1e308, 1e308), "fuel_needed"),
            (max_distance, (1e307, 1e-10), "max_distance"),
            (mpg_to_l_per_100km, (1e-310,), "l_per_100km"),
            (l_per_100km_to_mpg, (1e-310,), "mpg"),
            (annual_fuel_cost, (1e308, 100.0, 1.0), "annual_distance"),
            (annual_fuel_cost, (1e307, 100.0, 10.0), "annual_cost"),
        ]
        for func, args, field in calls:
            with self.subTest(func=func.__name__, args=args):
                with self.assertRaises(InvalidInputError) as ctx:
                    func(*args)
                self.assertEqual(ctx.exception.field, field)
