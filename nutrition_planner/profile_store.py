"""Profile persistence layer - user profiles and their meal distributions."""

import logging
from typing import Optional

from nutrition_planner.db import get_connection, DB_PATH
from nutrition_planner.models import MealDistribution, UserProfile

logger = logging.getLogger(__name__)


def _row_to_profile(row) -> UserProfile:
    return UserProfile(
        id=row["id"],
        name=row["name"],
        gender=row["gender"],
        age=row["age"],
        weight_kg=row["weight_kg"],
        height_cm=row["height_cm"],
        activity_level=row["activity_level"],
        diet_goal=row["diet_goal"],
        goal_weight_kg=row["goal_weight_kg"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def save_profile(profile: UserProfile, db_path: str = DB_PATH) -> int:
    """Insert a new profile. Returns the user ID."""
    with get_connection(db_path) as conn:
        cursor = conn.execute(
            """INSERT INTO users (name, gender, age, weight_kg, height_cm,
               activity_level, diet_goal, goal_weight_kg)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (profile.name, profile.gender or None, profile.age, profile.weight_kg,
             profile.height_cm, profile.activity_level, profile.diet_goal,
             profile.goal_weight_kg),
        )
        user_id = cursor.lastrowid
    logger.info("Created profile %d (%s)", user_id, profile.name)
    return user_id


def update_profile(profile: UserProfile, db_path: str = DB_PATH) -> None:
    if profile.id is None:
        raise ValueError("Cannot update a profile without an ID")
    with get_connection(db_path) as conn:
        conn.execute(
            """UPDATE users SET name=?, gender=?, age=?, weight_kg=?, height_cm=?,
               activity_level=?, diet_goal=?, goal_weight_kg=?,
               updated_at=CURRENT_TIMESTAMP
               WHERE id=?""",
            (profile.name, profile.gender or None, profile.age, profile.weight_kg,
             profile.height_cm, profile.activity_level, profile.diet_goal,
             profile.goal_weight_kg, profile.id),
        )
    logger.info("Updated profile %d", profile.id)


def load_profile(user_id: int = 1, db_path: str = DB_PATH) -> Optional[UserProfile]:
    with get_connection(db_path) as conn:
        row = conn.execute("SELECT * FROM users WHERE id = ?", (user_id,)).fetchone()
        if not row:
            return None
        return _row_to_profile(row)


def save_meal_distributions(user_id: int, distributions: list, db_path: str = DB_PATH) -> None:
    """Replace the user's meal distributions with `distributions`."""
    with get_connection(db_path) as conn:
        conn.execute("DELETE FROM meal_distributions WHERE user_id = ?", (user_id,))
        conn.executemany(
            """INSERT INTO meal_distributions
               (user_id, meal_name, position, calories_pct, protein_pct, carbs_pct, fat_pct)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            [
                (user_id, d.meal_name, i, d.calories_pct, d.protein_pct, d.carbs_pct, d.fat_pct)
                for i, d in enumerate(distributions)
            ],
        )
    logger.info("Saved %d meal distributions for user %d", len(distributions), user_id)


def load_meal_distributions(user_id: int, db_path: str = DB_PATH) -> list:
    """The user's saved distributions in meal order; empty if none saved."""
    with get_connection(db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM meal_distributions WHERE user_id = ? ORDER BY position",
            (user_id,),
        ).fetchall()
    return [
        MealDistribution(
            meal_name=row["meal_name"],
            calories_pct=row["calories_pct"],
            protein_pct=row["protein_pct"],
            carbs_pct=row["carbs_pct"],
            fat_pct=row["fat_pct"],
        )
        for row in rows
    ]
