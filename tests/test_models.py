"""Tests for data models."""

import unittest

from nutrition_planner.models import (
    DailyMealTargets,
    MealTargets,
    Profile,
    TargetResult,
    UserProfile,
)


class TestProfile(unittest.TestCase):
    def test_from_dict_accepts_record_keys(self):
        profile = Profile.from_dict({
            "gender": "female", "currentWeight": 62.5, "height": 168, "age": 41,
            "activityLevel": "light", "dietGoal": "recomp", "waist_current": 80,
        })
        self.assertEqual(profile.weight_kg, 62.5)
        self.assertEqual(profile.height_cm, 168)
        self.assertEqual(profile.activity_level, "light")
        self.assertEqual(profile.diet_goal, "recomp")
        self.assertTrue(profile.is_complete())

    def test_missing_fields(self):
        profile = Profile(gender="", weight_kg=70, height_cm=None, age=0, activity_level="light")
        self.assertEqual(profile.missing_fields(), ["gender", "height_cm", "diet_goal"])
        self.assertFalse(profile.is_complete())

    def test_profile_is_immutable(self):
        profile = Profile(gender="male")
        with self.assertRaises(AttributeError):
            profile.gender = "female"

    def test_user_profile_snapshot(self):
        user = UserProfile(id=3, name="Sam", gender="other", age=28, weight_kg=70,
                           height_cm=170, activity_level="active", diet_goal="maintain",
                           goal_weight_kg=68)
        snap = user.snapshot()
        self.assertEqual(snap, Profile("other", 70, 170, 28, "active", "maintain", 68))


class TestTargetResult(unittest.TestCase):
    def test_macro_calories(self):
        result = TargetResult(1780, 2759, 2259, 198, 198, 75)
        self.assertEqual(result.macro_calories(), 198 * 4 + 198 * 4 + 75 * 9)

    def test_as_dict(self):
        result = TargetResult(1780, 2759, 2259, 198, 198, 75)
        self.assertEqual(result.as_dict()["final_target_calories"], 2259)
        self.assertEqual(len(result.as_dict()), 6)


class TestDailyMealTargets(unittest.TestCase):
    def test_totals(self):
        daily = DailyMealTargets(meals=[
            MealTargets("Breakfast", 450, 40, 40, 15),
            MealTargets("Lunch", 565, 50, 50, 19),
        ])
        self.assertEqual(daily.totals(), {"calories": 1015, "protein": 90, "carbs": 90, "fat": 34})

    def test_totals_empty(self):
        self.assertEqual(DailyMealTargets().totals()["calories"], 0)


if __name__ == "__main__":
    unittest.main()
