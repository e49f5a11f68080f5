"""Tests for profile persistence."""

import os
import sqlite3
import tempfile
import unittest

from nutrition_planner.db import init_db
from nutrition_planner.macro_calculator import compute_daily_targets
from nutrition_planner.meal_distribution import default_distributions
from nutrition_planner.models import MealDistribution, UserProfile
from nutrition_planner.profile_store import (
    load_meal_distributions,
    load_profile,
    save_meal_distributions,
    save_profile,
    update_profile,
)


class TestProfileStore(unittest.TestCase):
    def setUp(self):
        self.db_fd, self.db_path = tempfile.mkstemp(suffix=".db")
        init_db(self.db_path)
        self.profile = UserProfile(
            id=None, name="Test User", gender="female", age=35, weight_kg=65,
            height_cm=168, activity_level="light", diet_goal="recomp",
        )

    def tearDown(self):
        os.close(self.db_fd)
        os.unlink(self.db_path)

    def test_save_and_load(self):
        user_id = save_profile(self.profile, self.db_path)
        self.assertGreater(user_id, 0)

        loaded = load_profile(user_id, self.db_path)
        self.assertEqual(loaded.name, "Test User")
        self.assertEqual(loaded.snapshot(), self.profile.snapshot())
        self.assertIsNotNone(loaded.created_at)

    def test_load_missing(self):
        self.assertIsNone(load_profile(42, self.db_path))

    def test_partial_profile(self):
        user_id = save_profile(UserProfile(id=None, name="New", gender=""), self.db_path)
        loaded = load_profile(user_id, self.db_path)
        self.assertIsNone(loaded.gender)
        self.assertIsNone(compute_daily_targets(loaded))

    def test_update(self):
        user_id = save_profile(self.profile, self.db_path)
        loaded = load_profile(user_id, self.db_path)
        loaded.weight_kg = 62
        loaded.diet_goal = "fat_loss"
        update_profile(loaded, self.db_path)

        reloaded = load_profile(user_id, self.db_path)
        self.assertEqual(reloaded.weight_kg, 62)
        self.assertEqual(reloaded.diet_goal, "fat_loss")

    def test_update_requires_id(self):
        with self.assertRaises(ValueError):
            update_profile(self.profile, self.db_path)

    def test_invalid_gender_rejected(self):
        self.profile.gender = "robot"
        with self.assertRaises(sqlite3.IntegrityError):
            save_profile(self.profile, self.db_path)

    def test_meal_distributions(self):
        user_id = save_profile(self.profile, self.db_path)
        self.assertEqual(load_meal_distributions(user_id, self.db_path), [])

        dists = default_distributions()
        save_meal_distributions(user_id, dists, self.db_path)
        self.assertEqual(load_meal_distributions(user_id, self.db_path), dists)

    def test_meal_distributions_replaced(self):
        user_id = save_profile(self.profile, self.db_path)
        save_meal_distributions(user_id, default_distributions(), self.db_path)
        save_meal_distributions(user_id, [MealDistribution("Breakfast", 100, 100, 100, 100)], self.db_path)

        loaded = load_meal_distributions(user_id, self.db_path)
        self.assertEqual(len(loaded), 1)
        self.assertEqual(loaded[0].calories_pct, 100)


if __name__ == "__main__":
    unittest.main()
