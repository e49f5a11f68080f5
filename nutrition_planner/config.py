"""Application configuration and constants."""

import os
from types import MappingProxyType

from nutrition_planner.models import ActivityLevel, MacroSplit, MealDistribution, NutritionTables

# Database
DB_DIR = os.path.join(os.path.expanduser("~"), ".nutrition_planner")
DB_PATH = os.environ.get("NUTRITION_PLANNER_DB", os.path.join(DB_DIR, "nutrition_planner.db"))

# Logging
LOG_LEVEL = os.environ.get("NUTRITION_PLANNER_LOG_LEVEL", "INFO")

# Fallbacks when an activity key is not in the table
DEFAULT_ACTIVITY_FACTOR = 1.2
DEFAULT_PROTEIN_FACTOR_PER_KG = 0.8

# Activity levels for TDEE and protein recommendations
ACTIVITY_LEVELS = (
    ActivityLevel("sedentary", "Sedentary (little or no exercise)", 1.2, 0.8),
    ActivityLevel("light", "Lightly active (1-3 days/week)", 1.375, 1.0),
    ActivityLevel("moderate", "Moderately active (3-5 days/week)", 1.55, 1.2),
    ActivityLevel("active", "Very active (6-7 days/week)", 1.725, 1.4),
    ActivityLevel("very_active", "Extra active (physical job or 2x training)", 1.9, 1.6),
)

DIET_GOALS = ("fat_loss", "muscle_gain", "recomp", "maintain")

GENDERS = ("male", "female", "other")

# Goal-based calorie adjustments (kcal added to TDEE)
GOAL_CALORIE_ADJUSTMENTS = MappingProxyType({
    "fat_loss": -500,
    "muscle_gain": 300,
    "recomp": -200,
    "maintain": 0,
})

# Goal-based macro splits (protein%, carbs%, fat%)
GOAL_MACRO_SPLITS = MappingProxyType({
    "fat_loss": MacroSplit(protein=0.35, carbs=0.35, fat=0.30),
    "muscle_gain": MacroSplit(protein=0.30, carbs=0.50, fat=0.20),
    "recomp": MacroSplit(protein=0.40, carbs=0.35, fat=0.25),
})
DEFAULT_MACRO_SPLIT = MacroSplit(protein=0.25, carbs=0.50, fat=0.25)

DEFAULT_TABLES = NutritionTables(
    activity_levels=ACTIVITY_LEVELS,
    goal_calorie_adjustments=GOAL_CALORIE_ADJUSTMENTS,
    goal_macro_splits=GOAL_MACRO_SPLITS,
    default_macro_split=DEFAULT_MACRO_SPLIT,
)

# Macro calorie multipliers (calories per gram)
CALORIES_PER_GRAM = MappingProxyType({
    "protein": 4,
    "carbs": 4,
    "fat": 9,
})

# Energy in one kg of body weight, for weekly weight change estimates
KCAL_PER_KG_BODY_WEIGHT = 7700

# Custom plan defaults
DEFAULT_CUSTOM_PROTEIN_PER_KG = 1.6
DEFAULT_REMAINING_CARB_PCT = 50

# Meals of the day and how daily targets are split across them (percent)
MEAL_NAMES = (
    "Breakfast",
    "Morning Snack",
    "Lunch",
    "Afternoon Snack",
    "Dinner",
    "Evening Snack",
)

DEFAULT_MEAL_DISTRIBUTIONS = (
    MealDistribution("Breakfast", 20, 20, 20, 20),
    MealDistribution("Morning Snack", 10, 10, 10, 10),
    MealDistribution("Lunch", 25, 25, 25, 25),
    MealDistribution("Afternoon Snack", 10, 10, 10, 10),
    MealDistribution("Dinner", 25, 25, 25, 25),
    MealDistribution("Evening Snack", 10, 10, 10, 10),
)
