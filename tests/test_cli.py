"""Tests for the command-line interface."""

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from nutrition_planner.cli import main
from nutrition_planner.config import MEAL_NAMES
from nutrition_planner.db import init_db
from nutrition_planner.profile_store import load_profile, save_meal_distributions
from nutrition_planner.models import MealDistribution

BODY_ARGS = [
    "--gender", "male", "--age", "30", "--weight", "80kg", "--height", "180cm",
    "--activity", "moderate", "--goal", "fat_loss",
]


class TestCLI(unittest.TestCase):
    def setUp(self):
        self.db_fd, self.db_path = tempfile.mkstemp(suffix=".db")
        init_db(self.db_path)

    def tearDown(self):
        os.close(self.db_fd)
        os.unlink(self.db_path)

    def run_cli(self, *args):
        out = io.StringIO()
        with redirect_stdout(out):
            main(["--db", self.db_path, "--log-level", "WARNING", *args])
        return out.getvalue()

    def test_targets(self):
        output = self.run_cli("targets", *BODY_ARGS)
        self.assertIn("BMR:      1780 kcal", output)
        self.assertIn("Target:   2259 kcal/day", output)
        self.assertIn("Recommended protein for your activity level: 96g", output)

    def test_targets_imperial_input(self):
        args = list(BODY_ARGS)
        args[args.index("80kg")] = "176.37lb"
        output = self.run_cli("targets", *args)
        self.assertIn("BMR:      1780 kcal", output)

    def test_targets_incomplete(self):
        with self.assertRaises(SystemExit) as ctx:
            self.run_cli("targets", "--gender", "male", "--age", "30")
        self.assertEqual(ctx.exception.code, 1)

    def test_invalid_choice_rejected(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                self.run_cli("targets", "--goal", "bulk")
        self.assertEqual(ctx.exception.code, 2)

    def test_profile_create_and_update(self):
        output = self.run_cli("profile", "create", "--name", "Alex", *BODY_ARGS)
        self.assertIn("Profile created (ID: 1)", output)
        self.assertIn("Target:   2259 kcal/day", output)

        self.run_cli("profile", "update", "--goal", "maintain")
        self.assertEqual(load_profile(1, self.db_path).diet_goal, "maintain")

        output = self.run_cli("macros")
        self.assertIn("Target:   2759 kcal/day", output)

    def test_show_without_profile(self):
        with self.assertRaises(SystemExit):
            self.run_cli("profile", "show")

    def test_meals(self):
        self.run_cli("profile", "create", "--name", "Alex", *BODY_ARGS)
        output = self.run_cli("meals")
        self.assertIn("Breakfast", output)
        self.assertIn("Evening Snack", output)

    def test_meals_ignores_invalid_saved_distribution(self):
        self.run_cli("profile", "create", "--name", "Alex", *BODY_ARGS)
        save_meal_distributions(1, [MealDistribution("Breakfast", 100, 100, 100, 100)], self.db_path)
        output = self.run_cli("meals", "--custom")
        # default 20% breakfast share of 2259 kcal
        self.assertIn("452", output)

    def test_meals_custom_uses_saved_distribution(self):
        self.run_cli("profile", "create", "--name", "Alex", *BODY_ARGS)
        saved = [MealDistribution(name) for name in MEAL_NAMES]
        saved[0] = MealDistribution("Breakfast", 40, 40, 40, 40)
        saved[2] = MealDistribution("Lunch", 60, 60, 60, 60)
        save_meal_distributions(1, saved, self.db_path)

        # 40% of 2259 kcal
        self.assertIn("904", self.run_cli("meals", "--custom"))
        self.assertNotIn("904", self.run_cli("meals"))

    def test_custom(self):
        self.run_cli("profile", "create", "--name", "Alex", *BODY_ARGS)
        output = self.run_cli("custom", "--calories", "2000", "--protein-per-kg", "2")
        self.assertIn("Target:   2000 kcal/day", output)
        self.assertIn("Protein:  160g (640 kcal)", output)


if __name__ == "__main__":
    unittest.main()
