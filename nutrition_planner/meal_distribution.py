"""Splitting daily targets across the meals of the day."""

import logging
from dataclasses import replace
from typing import Optional

import pandas as pd

from nutrition_planner.config import DEFAULT_MEAL_DISTRIBUTIONS, MEAL_NAMES
from nutrition_planner.macro_calculator import round_half_up
from nutrition_planner.models import DailyMealTargets, MealDistribution, MealTargets, TargetResult

logger = logging.getLogger(__name__)

PCT_FIELDS = (
    ("calories_pct", "Calorie"),
    ("protein_pct", "Protein"),
    ("carbs_pct", "Carbohydrate"),
    ("fat_pct", "Fat"),
)
SUM_TOLERANCE = 0.1


class DistributionError(ValueError):
    """Raised when a set of meal distributions is not usable."""


def default_distributions() -> list:
    """Fresh copies of the default distributions, one per meal."""
    return [replace(d) for d in DEFAULT_MEAL_DISTRIBUTIONS]


def distribution_for_meal(meal_name: str, custom: Optional[list] = None) -> MealDistribution:
    """Pick the user's distribution for a meal, falling back to the default one."""
    for source in (custom or [], DEFAULT_MEAL_DISTRIBUTIONS):
        for dist in source:
            if dist.meal_name == meal_name:
                return dist
    logger.debug("No distribution for meal %r, using zeros", meal_name)
    return MealDistribution(meal_name)


def validate_distributions(distributions: list) -> None:
    """Check a full set of distributions.

    Requires one entry per meal, every percentage within 0-100, and each
    percentage column summing to 100.
    """
    if len(distributions) != len(MEAL_NAMES):
        raise DistributionError(f"Must have {len(MEAL_NAMES)} meal entries.")

    for dist in distributions:
        for attr, _ in PCT_FIELDS:
            value = getattr(dist, attr)
            if value < 0:
                raise DistributionError(f"{dist.meal_name}: % must be >= 0")
            if value > 100:
                raise DistributionError(f"{dist.meal_name}: % must be <= 100")

    for attr, label in PCT_FIELDS:
        total = sum(float(getattr(d, attr) or 0) for d in distributions)
        if abs(total - 100) > SUM_TOLERANCE:
            raise DistributionError(
                f"Total {label} percentages must sum to 100%. Current sum: {total:.1f}%"
            )


def meal_targets(result: TargetResult, meal_name: str, custom: Optional[list] = None) -> MealTargets:
    """Targets for one meal: each daily value times the meal's share."""
    dist = distribution_for_meal(meal_name, custom)
    return MealTargets(
        meal_name=meal_name,
        calories=round_half_up(result.final_target_calories * dist.calories_pct / 100),
        protein=round_half_up(result.protein_grams * dist.protein_pct / 100),
        carbs=round_half_up(result.carb_grams * dist.carbs_pct / 100),
        fat=round_half_up(result.fat_grams * dist.fat_pct / 100),
    )


def split_daily_targets(result: TargetResult, custom: Optional[list] = None) -> DailyMealTargets:
    """Targets for every meal of the day, in meal order."""
    return DailyMealTargets(meals=[meal_targets(result, name, custom) for name in MEAL_NAMES])


def distributions_frame(distributions: list) -> pd.DataFrame:
    """Tabular view of distributions for editing in the UI."""
    return pd.DataFrame(
        [
            {
                "Meal": d.meal_name,
                "Calories %": float(d.calories_pct),
                "Protein %": float(d.protein_pct),
                "Carbs %": float(d.carbs_pct),
                "Fat %": float(d.fat_pct),
            }
            for d in distributions
        ]
    )


def distributions_from_frame(df: pd.DataFrame) -> list:
    """Inverse of distributions_frame; blank cells count as 0."""
    df = df.fillna(0)
    return [
        MealDistribution(
            meal_name=str(row["Meal"]),
            calories_pct=float(row["Calories %"]),
            protein_pct=float(row["Protein %"]),
            carbs_pct=float(row["Carbs %"]),
            fat_pct=float(row["Fat %"]),
        )
        for _, row in df.iterrows()
    ]


def meal_targets_frame(daily: DailyMealTargets) -> pd.DataFrame:
    """Per-meal targets as a table, with a totals row."""
    rows = [
        {"Meal": m.meal_name, "Calories": m.calories, "Protein (g)": m.protein,
         "Carbs (g)": m.carbs, "Fat (g)": m.fat}
        for m in daily.meals
    ]
    totals = daily.totals()
    rows.append({"Meal": "Total", "Calories": totals["calories"], "Protein (g)": totals["protein"],
                 "Carbs (g)": totals["carbs"], "Fat (g)": totals["fat"]})
    return pd.DataFrame(rows)
