"""Calorie Planner Page.

Start from the calculated targets and override total calories, protein
per kg and the carb/fat split of the remaining calories.
"""

import streamlit as st

from nutrition_planner.config import DEFAULT_REMAINING_CARB_PCT
from nutrition_planner.macro_calculator import (
    compute_custom_targets,
    compute_daily_targets,
    summarize_targets,
)
from nutrition_planner.profile_store import load_profile
from pages.components.charts import create_macro_pie_chart
from pages.components.targets_display import render_incomplete_profile, render_targets

st.set_page_config(page_title="Calorie Planner | Nutrition Planner", page_icon="🧮", layout="wide")
st.title("🧮 Calorie Planner")

user = st.session_state.get("user_profile") or load_profile()
if not user:
    st.warning("⚠️ No profile found. Please create a profile first in the Profile page.")
    st.stop()

result = compute_daily_targets(user)
if result is None:
    render_incomplete_profile(user.snapshot().missing_fields())
    st.stop()

base = summarize_targets(result, user.weight_kg)
render_targets(base, title="Calculated Targets")

st.divider()
st.markdown("### Customize")

col1, col2, col3 = st.columns(3)
with col1:
    custom_calories = st.number_input(
        "Total calories (kcal)",
        min_value=0,
        max_value=10000,
        value=0,
        step=50,
        help="Leave at 0 to use the calculated target",
    )
with col2:
    default_per_kg = base.protein_grams / user.weight_kg if user.weight_kg else 1.6
    protein_per_kg = st.number_input(
        "Protein (g per kg)",
        min_value=0.0,
        max_value=5.0,
        value=round(default_per_kg, 2),
        step=0.1,
    )
with col3:
    carb_pct = st.slider(
        "Carbs (% of remaining calories)",
        min_value=0,
        max_value=100,
        value=DEFAULT_REMAINING_CARB_PCT,
        help="The rest of the non-protein calories go to fat",
    )

custom = compute_custom_targets(
    base,
    custom_total_calories=custom_calories or None,
    custom_protein_per_kg=protein_per_kg,
    remaining_carb_pct=carb_pct,
)

if custom is None:
    st.error("A positive body weight is required for a custom plan.")
else:
    render_targets(custom, title="Your Custom Plan")
    if custom.protein_calories > 0 and custom.carb_calories == 0 and custom.fat_calories == 0:
        st.warning("Protein alone uses up the calorie budget; carbs and fat are set to 0.")
    st.plotly_chart(create_macro_pie_chart(custom), use_container_width=True)
