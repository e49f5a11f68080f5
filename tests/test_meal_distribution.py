"""Tests for splitting daily targets across meals."""

import unittest

from nutrition_planner.config import MEAL_NAMES
from nutrition_planner.meal_distribution import (
    DistributionError,
    default_distributions,
    distribution_for_meal,
    distributions_frame,
    distributions_from_frame,
    meal_targets,
    meal_targets_frame,
    split_daily_targets,
    validate_distributions,
)
from nutrition_planner.models import MealDistribution, TargetResult

# male, 80 kg, 180 cm, 30 y, moderate, fat_loss
RESULT = TargetResult(bmr=1780, tdee=2759, final_target_calories=2259,
                      protein_grams=198, carb_grams=198, fat_grams=75)


class TestDefaults(unittest.TestCase):
    def test_defaults_are_valid(self):
        validate_distributions(default_distributions())

    def test_defaults_are_copies(self):
        first = default_distributions()
        first[0].calories_pct = 99
        self.assertEqual(default_distributions()[0].calories_pct, 20)

    def test_one_per_meal(self):
        self.assertEqual([d.meal_name for d in default_distributions()], list(MEAL_NAMES))


class TestLookup(unittest.TestCase):
    def test_custom_wins(self):
        custom = [MealDistribution("Breakfast", 50, 50, 50, 50)]
        self.assertEqual(distribution_for_meal("Breakfast", custom).calories_pct, 50)
        self.assertEqual(distribution_for_meal("Lunch", custom).calories_pct, 25)

    def test_unknown_meal_is_zero(self):
        self.assertEqual(distribution_for_meal("Midnight Feast"), MealDistribution("Midnight Feast"))


class TestValidation(unittest.TestCase):
    def test_wrong_count(self):
        with self.assertRaisesRegex(DistributionError, "Must have 6 meal entries"):
            validate_distributions(default_distributions()[:5])

    def test_sum_not_100(self):
        dists = default_distributions()
        dists[0].calories_pct = 10
        with self.assertRaises(DistributionError) as ctx:
            validate_distributions(dists)
        self.assertEqual(
            str(ctx.exception),
            "Total Calorie percentages must sum to 100%. Current sum: 90.0%",
        )

    def test_small_rounding_is_tolerated(self):
        dists = default_distributions()
        dists[0].fat_pct = 20.05
        validate_distributions(dists)

    def test_out_of_range(self):
        dists = default_distributions()
        dists[1].protein_pct = -5
        dists[2].protein_pct = 40
        with self.assertRaises(DistributionError):
            validate_distributions(dists)

    def test_is_value_error(self):
        self.assertTrue(issubclass(DistributionError, ValueError))


class TestSplit(unittest.TestCase):
    def test_meal_targets(self):
        breakfast = meal_targets(RESULT, "Breakfast")
        # 2259 * 20% = 451.8, 198 * 20% = 39.6, 75 * 20% = 15
        self.assertEqual((breakfast.calories, breakfast.protein, breakfast.carbs, breakfast.fat),
                         (452, 40, 40, 15))

    def test_halves_round_up(self):
        lunch = meal_targets(RESULT, "Lunch")
        # 198 * 25% = 49.5, 75 * 25% = 18.75
        self.assertEqual((lunch.protein, lunch.fat), (50, 19))

    def test_custom_distribution(self):
        custom = [MealDistribution("Breakfast", 50, 50, 50, 50)]
        self.assertEqual(meal_targets(RESULT, "Breakfast", custom).calories, 1130)

    def test_split_daily_targets(self):
        daily = split_daily_targets(RESULT)
        self.assertEqual([m.meal_name for m in daily.meals], list(MEAL_NAMES))
        # per-meal rounding keeps the totals close to the daily values
        self.assertAlmostEqual(daily.totals()["calories"], 2259, delta=3)
        self.assertAlmostEqual(daily.totals()["protein"], 198, delta=3)


class TestFrames(unittest.TestCase):
    def test_frame_round_trip(self):
        dists = default_distributions()
        self.assertEqual(distributions_from_frame(distributions_frame(dists)), dists)

    def test_blank_cells_are_zero(self):
        df = distributions_frame(default_distributions())
        df.loc[0, "Fat %"] = None
        self.assertEqual(distributions_from_frame(df)[0].fat_pct, 0)

    def test_meal_targets_frame_has_total_row(self):
        df = meal_targets_frame(split_daily_targets(RESULT))
        self.assertEqual(len(df), len(MEAL_NAMES) + 1)
        self.assertEqual(df.iloc[-1]["Meal"], "Total")
        self.assertEqual(df.iloc[-1]["Calories"], df.iloc[:-1]["Calories"].sum())


if __name__ == "__main__":
    unittest.main()
