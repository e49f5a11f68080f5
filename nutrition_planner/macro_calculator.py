"""Daily calorie and macro target calculation.

Uses:
- Mifflin-St Jeor equation for Basal Metabolic Rate (BMR)
- Activity multipliers for Total Daily Energy Expenditure (TDEE)
- Goal-specific calorie offsets and macro splits

Inputs are not range-checked here: forms validate before calling, and
out-of-range numbers simply flow through the arithmetic.

References:
- Mifflin MD, St Jeor ST, et al. (1990). "A new predictive equation for
  resting energy expenditure in healthy individuals." Am J Clin Nutr.
"""

import logging
import math
from typing import Mapping, Optional, Union

from nutrition_planner.config import (
    CALORIES_PER_GRAM,
    DEFAULT_ACTIVITY_FACTOR,
    DEFAULT_CUSTOM_PROTEIN_PER_KG,
    DEFAULT_PROTEIN_FACTOR_PER_KG,
    DEFAULT_REMAINING_CARB_PCT,
    DEFAULT_TABLES,
    KCAL_PER_KG_BODY_WEIGHT,
)
from nutrition_planner.models import (
    ActivityLevel,
    MacroSplit,
    NutritionTables,
    Profile,
    TargetResult,
    TargetSummary,
    UserProfile,
)

logger = logging.getLogger(__name__)

ProfileLike = Union[Profile, UserProfile, Mapping]


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves going up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def lookup_activity_level(key: Optional[str], tables: NutritionTables = DEFAULT_TABLES) -> ActivityLevel:
    """Return the table row for `key`, or a row carrying the default factors."""
    level = tables.activity_level(key)
    if level is None:
        logger.debug("Unknown activity level %r, using defaults", key)
        return ActivityLevel(
            value=key or "",
            label="Unknown",
            activity_factor=DEFAULT_ACTIVITY_FACTOR,
            protein_factor_per_kg=DEFAULT_PROTEIN_FACTOR_PER_KG,
        )
    return level


def compute_bmr(gender: Optional[str], weight_kg: float, height_cm: float, age: float) -> float:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Male:   BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) + 5
    Female: BMR = 10 × weight(kg) + 6.25 × height(cm) − 5 × age(y) − 161
    Anything else is the mean of the two.
    """
    bmr_male = 10 * weight_kg + 6.25 * height_cm - 5 * age + 5
    bmr_female = 10 * weight_kg + 6.25 * height_cm - 5 * age - 161
    if gender == "male":
        return bmr_male
    if gender == "female":
        return bmr_female
    return (bmr_male + bmr_female) / 2


def compute_tdee(bmr: float, activity_level: Optional[str], tables: NutritionTables = DEFAULT_TABLES) -> float:
    """Calculate Total Daily Energy Expenditure.

    TDEE = BMR × activity factor (1.2 when the level is unknown)
    """
    return bmr * lookup_activity_level(activity_level, tables).activity_factor


def compute_recommended_protein(
    weight_kg: float, activity_level: Optional[str], tables: NutritionTables = DEFAULT_TABLES
) -> float:
    """Recommended daily protein in grams (0.8 g/kg when the level is unknown)."""
    return weight_kg * lookup_activity_level(activity_level, tables).protein_factor_per_kg


def adjust_calories_for_goal(tdee: float, diet_goal: Optional[str], tables: NutritionTables = DEFAULT_TABLES) -> float:
    """Apply the goal's calorie deficit or surplus to TDEE."""
    adjustment = tables.goal_calorie_adjustments.get(diet_goal)
    if not adjustment:
        return tdee
    return tdee + adjustment


def macro_split_for_goal(diet_goal: Optional[str], tables: NutritionTables = DEFAULT_TABLES) -> MacroSplit:
    return tables.goal_macro_splits.get(diet_goal, tables.default_macro_split)


def _as_profile(profile: ProfileLike) -> Profile:
    if isinstance(profile, Profile):
        return profile
    if isinstance(profile, UserProfile):
        return profile.snapshot()
    return Profile.from_dict(profile)


def compute_daily_targets(profile: ProfileLike, tables: NutritionTables = DEFAULT_TABLES) -> Optional[TargetResult]:
    """Calculate daily calorie and macro targets for a profile.

    Steps:
    1. Check that every required profile value is present
    2. Calculate BMR via Mifflin-St Jeor
    3. Multiply by activity factor to get TDEE
    4. Apply goal-based calorie offset
    5. Split calories into macros based on goal, converting with 4/4/9 kcal/g

    Returns None when the profile is missing required values.
    """
    profile = _as_profile(profile)
    missing = profile.missing_fields()
    if missing:
        logger.info("Not enough profile data for targets, missing: %s", ", ".join(missing))
        return None

    bmr = compute_bmr(profile.gender, profile.weight_kg, profile.height_cm, profile.age)
    tdee = compute_tdee(bmr, profile.activity_level, tables)
    target_calories = adjust_calories_for_goal(tdee, profile.diet_goal, tables)
    split = macro_split_for_goal(profile.diet_goal, tables)

    result = TargetResult(
        bmr=bmr,
        tdee=tdee,
        final_target_calories=target_calories,
        protein_grams=round_half_up(target_calories * split.protein / CALORIES_PER_GRAM["protein"]),
        carb_grams=round_half_up(target_calories * split.carbs / CALORIES_PER_GRAM["carbs"]),
        fat_grams=round_half_up(target_calories * split.fat / CALORIES_PER_GRAM["fat"]),
    )
    logger.debug(
        "Targets for goal=%s activity=%s: %.1f kcal (P%d C%d F%d)",
        profile.diet_goal, profile.activity_level, target_calories,
        result.protein_grams, result.carb_grams, result.fat_grams,
    )
    return result


def daily_targets_dict(profile: ProfileLike, tables: NutritionTables = DEFAULT_TABLES) -> dict:
    """Same as compute_daily_targets, as a plain dict ({} when data is missing)."""
    result = compute_daily_targets(profile, tables)
    if result is None:
        return {}
    return result.as_dict()


def _pct(part: float, total: float) -> int:
    return round_half_up(part / total * 100)


def summarize_targets(result: TargetResult, weight_kg: Optional[float] = None) -> TargetSummary:
    """Rounded view of a TargetResult with per-macro calories and percentages."""
    protein_calories = result.protein_grams * CALORIES_PER_GRAM["protein"]
    carb_calories = result.carb_grams * CALORIES_PER_GRAM["carbs"]
    fat_calories = result.fat_grams * CALORIES_PER_GRAM["fat"]
    total = protein_calories + carb_calories + fat_calories

    return TargetSummary(
        final_target_calories=round_half_up(result.final_target_calories),
        protein_grams=result.protein_grams,
        protein_calories=protein_calories,
        protein_pct=_pct(protein_calories, total) if total > 0 else None,
        carb_grams=result.carb_grams,
        carb_calories=carb_calories,
        carb_pct=_pct(carb_calories, total) if total > 0 else None,
        fat_grams=result.fat_grams,
        fat_calories=fat_calories,
        fat_pct=_pct(fat_calories, total) if total > 0 else None,
        bmr=round_half_up(result.bmr),
        tdee=round_half_up(result.tdee),
        weight_kg=weight_kg,
        weekly_weight_change_kg=estimate_weekly_weight_change(result.tdee, result.final_target_calories),
    )


def estimate_weekly_weight_change(tdee: Optional[float], daily_calories: Optional[float]) -> Optional[float]:
    """Expected kg lost per week (negative means gained) eating `daily_calories`."""
    if not tdee or daily_calories is None:
        return None
    return (tdee - daily_calories) * 7 / KCAL_PER_KG_BODY_WEIGHT


def compute_custom_targets(
    base: TargetSummary,
    weight_kg: Optional[float] = None,
    custom_total_calories: Optional[float] = None,
    custom_protein_per_kg: Optional[float] = None,
    remaining_carb_pct: Optional[float] = None,
) -> Optional[TargetSummary]:
    """Build a plan from user overrides on top of the calculated targets.

    Protein is set per kg of body weight; whatever calories remain are
    split between carbs (`remaining_carb_pct`) and fat. Returns None when
    no usable body weight is available.
    """
    weight = weight_kg or base.weight_kg
    if not weight or weight <= 0:
        return None

    if custom_total_calories is not None and custom_total_calories > 0:
        total_calories = custom_total_calories
    else:
        total_calories = base.final_target_calories or 0

    if custom_protein_per_kg is not None and custom_protein_per_kg >= 0:
        protein_per_kg = custom_protein_per_kg
    elif base.protein_grams and base.weight_kg and base.weight_kg > 0:
        protein_per_kg = base.protein_grams / base.weight_kg
    else:
        protein_per_kg = DEFAULT_CUSTOM_PROTEIN_PER_KG

    protein_grams = weight * protein_per_kg
    protein_calories = protein_grams * CALORIES_PER_GRAM["protein"]
    remaining = total_calories - protein_calories

    carb_calories = fat_calories = 0.0
    if remaining > 0:
        carb_ratio = (remaining_carb_pct if remaining_carb_pct is not None else DEFAULT_REMAINING_CARB_PCT) / 100
        carb_calories = remaining * carb_ratio
        fat_calories = remaining * (1 - carb_ratio)
    carb_calories = max(0.0, carb_calories)
    fat_calories = max(0.0, fat_calories)

    final_total = protein_calories + carb_calories + fat_calories
    if final_total > 0:
        protein_pct = _pct(protein_calories, final_total)
        carb_pct = _pct(carb_calories, final_total)
        fat_pct = _pct(fat_calories, final_total)
    else:
        protein_pct = 100 if protein_grams > 0 else 0
        carb_pct = fat_pct = 0

    weekly_change = estimate_weekly_weight_change(base.tdee, final_total) if final_total else None

    logger.debug(
        "Custom plan: %.0f kcal, %.2f g/kg protein, %s%% of remainder to carbs",
        final_total, protein_per_kg, remaining_carb_pct,
    )
    return TargetSummary(
        final_target_calories=round_half_up(final_total),
        protein_grams=round_half_up(protein_grams),
        protein_calories=round_half_up(protein_calories),
        protein_pct=protein_pct,
        carb_grams=round_half_up(carb_calories / CALORIES_PER_GRAM["carbs"]),
        carb_calories=round_half_up(carb_calories),
        carb_pct=carb_pct,
        fat_grams=round_half_up(fat_calories / CALORIES_PER_GRAM["fat"]),
        fat_calories=round_half_up(fat_calories),
        fat_pct=fat_pct,
        bmr=base.bmr,
        tdee=base.tdee,
        weight_kg=weight,
        weekly_weight_change_kg=weekly_change,
    )


def format_targets(targets: Union[TargetResult, TargetSummary]) -> str:
    """Format targets for display."""
    if isinstance(targets, TargetResult):
        targets = summarize_targets(targets)
    lines = []
    if targets.bmr is not None:
        lines.append(f"BMR:      {targets.bmr} kcal")
    if targets.tdee is not None:
        lines.append(f"TDEE:     {targets.tdee} kcal")
    lines += [
        f"Target:   {targets.final_target_calories} kcal/day",
        f"Protein:  {targets.protein_grams}g ({targets.protein_calories} kcal)",
        f"Carbs:    {targets.carb_grams}g ({targets.carb_calories} kcal)",
        f"Fat:      {targets.fat_grams}g ({targets.fat_calories} kcal)",
    ]
    if targets.weekly_weight_change_kg is not None:
        change = 0.0 - targets.weekly_weight_change_kg
        lines.append(f"Weight:   {change:+.2f} kg/week (est.)")
    return "\n".join(lines)
