"""Database setup and access layer using SQLite."""

import logging
import os
import sqlite3
from contextlib import contextmanager

from nutrition_planner.config import DB_PATH

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    gender TEXT CHECK(gender IS NULL OR gender IN ('male', 'female', 'other')),
    age INTEGER,
    weight_kg REAL,
    height_cm REAL,
    activity_level TEXT,
    diet_goal TEXT,
    goal_weight_kg REAL,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS meal_distributions (
    user_id INTEGER NOT NULL,
    meal_name TEXT NOT NULL,
    position INTEGER NOT NULL,
    calories_pct REAL NOT NULL DEFAULT 0,
    protein_pct REAL NOT NULL DEFAULT 0,
    carbs_pct REAL NOT NULL DEFAULT 0,
    fat_pct REAL NOT NULL DEFAULT 0,
    PRIMARY KEY (user_id, meal_name),
    FOREIGN KEY (user_id) REFERENCES users(id) ON DELETE CASCADE
);
"""


def init_db(db_path: str = DB_PATH) -> None:
    """Initialize the database, creating tables if they don't exist."""
    db_dir = os.path.dirname(db_path)
    if db_dir:
        os.makedirs(db_dir, exist_ok=True)
    with get_connection(db_path) as conn:
        conn.executescript(SCHEMA_SQL)
    logger.debug("Database ready at %s", db_path)


@contextmanager
def get_connection(db_path: str = DB_PATH):
    """Context manager for database connections."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()
