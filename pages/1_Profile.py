"""Profile Management Page.

Create and update the user profile and show the resulting daily targets.
"""

import streamlit as st

from nutrition_planner.config import ACTIVITY_LEVELS, DIET_GOALS, GENDERS
from nutrition_planner.macro_calculator import (
    compute_daily_targets,
    compute_recommended_protein,
    summarize_targets,
)
from nutrition_planner.models import UserProfile
from nutrition_planner.profile_store import load_profile, save_profile, update_profile
from nutrition_planner.units import format_height, format_weight
from pages.components.charts import create_energy_bar_chart, create_macro_pie_chart
from pages.components.targets_display import render_incomplete_profile, render_targets

st.set_page_config(page_title="Profile | Nutrition Planner", page_icon="📋", layout="wide")
st.title("📋 Profile")

GOAL_DESCRIPTIONS = {
    "fat_loss": "500 kcal daily deficit",
    "muscle_gain": "300 kcal daily surplus",
    "recomp": "200 kcal daily deficit, high protein",
    "maintain": "Maintain current weight",
}

user = load_profile()

if user:
    st.markdown("### Current Profile")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Name", user.name)
        st.metric("Age", f"{user.age} years" if user.age is not None else "-")
    with col2:
        st.metric("Weight", format_weight(user.weight_kg) if user.weight_kg is not None else "-")
        st.metric("Height", format_height(user.height_cm) if user.height_cm is not None else "-")
    with col3:
        st.metric("Gender", (user.gender or "-").capitalize())
        st.metric("Activity", (user.activity_level or "-").replace('_', ' ').title())
        st.metric("Goal", (user.diet_goal or "-").replace('_', ' ').title())

    result = compute_daily_targets(user)
    if result is None:
        render_incomplete_profile(user.snapshot().missing_fields())
    else:
        summary = summarize_targets(result, user.weight_kg)
        render_targets(summary)

        protein = compute_recommended_protein(user.weight_kg, user.activity_level)
        st.caption(f"Minimum recommended protein for your activity level: {protein:.0f}g")

        col1, col2 = st.columns(2)
        with col1:
            st.plotly_chart(create_macro_pie_chart(summary), use_container_width=True)
        with col2:
            st.plotly_chart(create_energy_bar_chart(summary), use_container_width=True)

    st.divider()
    st.markdown("### Update Profile")
else:
    st.info("No profile found. Create your profile below to get started!")

activity_values = [level.value for level in ACTIVITY_LEVELS]
activity_labels = {level.value: level.label for level in ACTIVITY_LEVELS}

with st.form("profile_form"):
    name = st.text_input("Name*", value=user.name if user else "")

    col1, col2 = st.columns(2)
    with col1:
        age = st.number_input(
            "Age*",
            min_value=13,
            max_value=120,
            value=user.age if user and user.age else 30,
        )
    with col2:
        gender = st.selectbox(
            "Gender*",
            GENDERS,
            index=GENDERS.index(user.gender) if user and user.gender in GENDERS else 0,
        )

    st.markdown("#### Body Measurements")
    col1, col2, col3 = st.columns(3)
    with col1:
        weight_kg = st.number_input(
            "Current weight (kg)*",
            min_value=20.0,
            max_value=300.0,
            value=float(user.weight_kg) if user and user.weight_kg else 75.0,
            step=0.5,
        )
    with col2:
        height_cm = st.number_input(
            "Height (cm)*",
            min_value=100.0,
            max_value=250.0,
            value=float(user.height_cm) if user and user.height_cm else 175.0,
            step=0.5,
        )
    with col3:
        goal_weight_kg = st.number_input(
            "Goal weight in 1 month (kg)",
            min_value=0.0,
            max_value=300.0,
            value=float(user.goal_weight_kg) if user and user.goal_weight_kg else 0.0,
            step=0.5,
            help="Leave at 0 to skip",
        )

    st.markdown("#### Activity & Goals")
    col1, col2 = st.columns(2)
    with col1:
        activity = st.selectbox(
            "Activity Level*",
            activity_values,
            index=activity_values.index(user.activity_level)
            if user and user.activity_level in activity_values else 2,
            format_func=lambda v: activity_labels[v],
        )
    with col2:
        diet_goal = st.selectbox(
            "Diet Goal*",
            DIET_GOALS,
            index=DIET_GOALS.index(user.diet_goal) if user and user.diet_goal in DIET_GOALS else 0,
            format_func=lambda v: v.replace('_', ' ').title(),
        )
        st.caption(GOAL_DESCRIPTIONS.get(diet_goal, ""))

    st.markdown("---")
    submitted = st.form_submit_button(
        "💾 Save Profile" if not user else "💾 Update Profile",
        use_container_width=True
    )

    if submitted:
        if not name or not name.strip():
            st.error("⚠️ Name is required")
        else:
            profile = UserProfile(
                id=user.id if user else None,
                name=name.strip(),
                gender=gender,
                age=int(age),
                weight_kg=weight_kg,
                height_cm=height_cm,
                activity_level=activity,
                diet_goal=diet_goal,
                goal_weight_kg=goal_weight_kg or None,
            )

            saved = False
            try:
                if user:
                    update_profile(profile)
                else:
                    profile.id = save_profile(profile)
                saved = True
            except Exception as e:
                st.error(f"❌ Error saving profile: {e}")

            if saved:
                st.session_state.user_profile = profile
                result = compute_daily_targets(profile)
                st.session_state.target_summary = (
                    summarize_targets(result, profile.weight_kg) if result is not None else None
                )
                st.rerun()

st.markdown("---")
st.caption("💡 **Tip:** Targets use the Mifflin-St Jeor equation for BMR, scaled by your activity level.")
