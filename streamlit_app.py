"""Streamlit frontend for the Nutrition Planner.

Main entry point for the multi-page Streamlit application.
"""

import streamlit as st

from nutrition_planner.app_logging import configure_logging
from nutrition_planner.db import init_db
from nutrition_planner.macro_calculator import compute_daily_targets, summarize_targets
from nutrition_planner.profile_store import load_profile

st.set_page_config(
    page_title="Nutrition Planner",
    page_icon="🥗",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Initialize logging and DB once per session
if 'db_initialized' not in st.session_state:
    configure_logging()
    init_db()
    st.session_state.db_initialized = True

if 'user_profile' not in st.session_state:
    st.session_state.user_profile = None
if 'target_summary' not in st.session_state:
    st.session_state.target_summary = None

# Load user profile if it exists
if st.session_state.user_profile is None:
    user = load_profile()
    if user:
        st.session_state.user_profile = user
        result = compute_daily_targets(user)
        if result is not None:
            st.session_state.target_summary = summarize_targets(result, user.weight_kg)

# Sidebar: Show current user info
with st.sidebar:
    st.markdown("## 🥗 Nutrition Planner")
    st.markdown("---")

    if st.session_state.user_profile:
        user = st.session_state.user_profile
        st.success(f"👤 **{user.name}**")
        if user.diet_goal:
            st.caption(f"Goal: {user.diet_goal.replace('_', ' ').title()}")

        summary = st.session_state.target_summary
        if summary:
            st.metric("Daily Target", f"{summary.final_target_calories} kcal")
            col1, col2, col3 = st.columns(3)
            col1.metric("P", f"{summary.protein_grams}g")
            col2.metric("C", f"{summary.carb_grams}g")
            col3.metric("F", f"{summary.fat_grams}g")
        else:
            st.caption("Complete your profile to see targets")
    else:
        st.warning("⚠️ No profile found")
        st.caption("Create one in the Profile page")

st.title("🥗 Nutrition Planner")

st.markdown("""
Welcome! This app turns a few facts about you into daily calorie and macro targets.

### Getting Started

1. **📋 Profile** - Enter your age, gender, height, weight, activity level and diet goal.
   Your targets are calculated with the Mifflin-St Jeor equation:
   - **BMR** - calories burned at rest
   - **TDEE** - BMR scaled by your activity level
   - **Target** - TDEE adjusted for your goal (fat loss, muscle gain, recomp or maintenance)

2. **🧮 Calorie Planner** - Override total calories, protein per kg and the carb/fat
   split to build your own plan.

3. **🍽️ Meal Targets** - Split your daily targets across six meals and snacks.

All data is stored locally in a SQLite database at `~/.nutrition_planner/nutrition_planner.db`.
""")
