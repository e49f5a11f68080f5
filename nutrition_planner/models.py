"""Data models for the nutrition planning application."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Mapping, Optional


@dataclass(frozen=True)
class ActivityLevel:
    """A row of the activity-level reference table."""
    value: str
    label: str
    activity_factor: float
    protein_factor_per_kg: float


@dataclass(frozen=True)
class MacroSplit:
    """Fractions of daily calories going to each macro. Sums to 1.0."""
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class NutritionTables:
    """Lookup tables the calculator reads from.

    Calculator lookups take one as `tables`, defaulting to config.DEFAULT_TABLES.
    """
    activity_levels: tuple
    goal_calorie_adjustments: Mapping[str, float]
    goal_macro_splits: Mapping[str, MacroSplit]
    default_macro_split: MacroSplit

    def activity_level(self, key: str) -> Optional[ActivityLevel]:
        for level in self.activity_levels:
            if level.value == key:
                return level
        return None


# Record keys used by the web forms -> snapshot field names
_PROFILE_KEY_ALIASES = {
    "weightKg": "weight_kg",
    "currentWeight": "weight_kg",
    "current_weight": "weight_kg",
    "heightCm": "height_cm",
    "height": "height_cm",
    "ageYears": "age",
    "activityKey": "activity_level",
    "activityLevel": "activity_level",
    "activity_factor_key": "activity_level",
    "dietGoal": "diet_goal",
    "dietGoalOnboarding": "diet_goal",
    "goalWeight": "goal_weight_kg",
    "goal_weight_1m": "goal_weight_kg",
}

REQUIRED_PROFILE_FIELDS = (
    "gender", "weight_kg", "height_cm", "age", "activity_level", "diet_goal",
)


@dataclass(frozen=True)
class Profile:
    """Snapshot of the profile values the calculator needs.

    Every field is optional: onboarding forms fill it in over several steps.
    """
    gender: Optional[str] = None  # male, female, other
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    age: Optional[float] = None
    activity_level: Optional[str] = None  # sedentary, light, etc.
    diet_goal: Optional[str] = None  # fat_loss, muscle_gain, recomp, maintain
    goal_weight_kg: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Profile":
        """Build a snapshot from a plain record, ignoring unknown keys."""
        values = {}
        for key, value in data.items():
            name = _PROFILE_KEY_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value
        return cls(**values)

    def missing_fields(self) -> list:
        """Names of required fields that are absent.

        None is absent everywhere; an empty string is also absent for the
        string fields. A numeric 0 counts as present.
        """
        missing = []
        for name in REQUIRED_PROFILE_FIELDS:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and value == ""):
                missing.append(name)
        return missing

    def is_complete(self) -> bool:
        return not self.missing_fields()


@dataclass
class UserProfile:
    """A stored user profile."""
    id: Optional[int]
    name: str
    gender: Optional[str] = None
    age: Optional[int] = None
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None
    activity_level: Optional[str] = None
    diet_goal: Optional[str] = None
    goal_weight_kg: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def snapshot(self) -> Profile:
        return Profile(
            gender=self.gender,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            age=self.age,
            activity_level=self.activity_level,
            diet_goal=self.diet_goal,
            goal_weight_kg=self.goal_weight_kg,
        )


@dataclass(frozen=True)
class TargetResult:
    """Daily calorie and macro targets.

    bmr, tdee and final_target_calories are left unrounded; the gram
    values are whole numbers.
    """
    bmr: float
    tdee: float
    final_target_calories: float
    protein_grams: int
    carb_grams: int
    fat_grams: int

    def macro_calories(self) -> float:
        """Calories reconstructed from the rounded gram values."""
        return self.protein_grams * 4 + self.carb_grams * 4 + self.fat_grams * 9

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class TargetSummary:
    """Rounded targets with per-macro calories and percentages, for display."""
    final_target_calories: int
    protein_grams: int
    protein_calories: int
    protein_pct: Optional[int]
    carb_grams: int
    carb_calories: int
    carb_pct: Optional[int]
    fat_grams: int
    fat_calories: int
    fat_pct: Optional[int]
    bmr: Optional[int] = None
    tdee: Optional[int] = None
    weight_kg: Optional[float] = None
    weekly_weight_change_kg: Optional[float] = None


@dataclass
class MealDistribution:
    """Share of each daily target (in percent) allotted to one meal."""
    meal_name: str
    calories_pct: float = 0.0
    protein_pct: float = 0.0
    carbs_pct: float = 0.0
    fat_pct: float = 0.0


@dataclass
class MealTargets:
    """Calorie and macro targets for a single meal."""
    meal_name: str
    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass
class DailyMealTargets:
    """Per-meal targets for a whole day."""
    meals: list = field(default_factory=list)  # List[MealTargets]

    def totals(self) -> dict:
        return {
            "calories": sum(m.calories for m in self.meals),
            "protein": sum(m.protein for m in self.meals),
            "carbs": sum(m.carbs for m in self.meals),
            "fat": sum(m.fat for m in self.meals),
        }
