"""Meal Targets Page.

Split the daily targets across the meals of the day.
"""

import streamlit as st

from nutrition_planner.macro_calculator import compute_daily_targets
from nutrition_planner.meal_distribution import (
    DistributionError,
    default_distributions,
    distributions_frame,
    distributions_from_frame,
    meal_targets_frame,
    split_daily_targets,
    validate_distributions,
)
from nutrition_planner.profile_store import load_meal_distributions, load_profile, save_meal_distributions
from pages.components.charts import create_meal_split_chart
from pages.components.targets_display import render_incomplete_profile

st.set_page_config(page_title="Meal Targets | Nutrition Planner", page_icon="🍽️", layout="wide")
st.title("🍽️ Meal Targets")

user = st.session_state.get("user_profile") or load_profile()
if not user:
    st.warning("⚠️ No profile found. Please create a profile first in the Profile page.")
    st.stop()

result = compute_daily_targets(user)
if result is None:
    render_incomplete_profile(user.snapshot().missing_fields())
    st.stop()

distributions = load_meal_distributions(user.id) or default_distributions()

st.markdown("### Distribution (% of daily targets)")
st.caption("Each column must add up to 100%.")
edited = st.data_editor(
    distributions_frame(distributions),
    disabled=["Meal"],
    hide_index=True,
    use_container_width=True,
)
edited_distributions = distributions_from_frame(edited)

col1, col2 = st.columns(2)
with col1:
    if st.button("💾 Save Distribution", use_container_width=True):
        try:
            validate_distributions(edited_distributions)
        except DistributionError as e:
            st.error(f"⚠️ {e}")
        else:
            save_meal_distributions(user.id, edited_distributions)
            st.success("✅ Distribution saved")
with col2:
    if st.button("↩️ Reset to Defaults", use_container_width=True):
        save_meal_distributions(user.id, default_distributions())
        st.rerun()

try:
    validate_distributions(edited_distributions)
    active = edited_distributions
except DistributionError as e:
    st.warning(f"{e} Showing the saved distribution instead.")
    active = distributions

daily = split_daily_targets(result, active)

st.markdown("### Targets per Meal")
st.dataframe(meal_targets_frame(daily), hide_index=True, use_container_width=True)
st.plotly_chart(create_meal_split_chart(daily), use_container_width=True)
