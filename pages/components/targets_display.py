"""Target display components for Streamlit pages."""

import streamlit as st

from nutrition_planner.models import TargetSummary


def render_targets(summary: TargetSummary, title: str = "Daily Targets"):
    """Render calorie and macro targets as metrics.

    Args:
        summary: Rounded targets to display
        title: Section title (default "Daily Targets")
    """
    st.markdown(f"### {title}")
    cols = st.columns(6)
    cols[0].metric("BMR", f"{summary.bmr} kcal" if summary.bmr is not None else "-")
    cols[1].metric("TDEE", f"{summary.tdee} kcal" if summary.tdee is not None else "-")
    cols[2].metric("Target", f"{summary.final_target_calories} kcal")
    cols[3].metric("Protein", f"{summary.protein_grams}g")
    cols[4].metric("Carbs", f"{summary.carb_grams}g")
    cols[5].metric("Fat", f"{summary.fat_grams}g")

    if summary.protein_pct is not None:
        st.caption(
            f"Macros: {summary.protein_pct}% protein | "
            f"{summary.carb_pct}% carbs | "
            f"{summary.fat_pct}% fat"
        )

    if summary.weekly_weight_change_kg is not None:
        change = summary.weekly_weight_change_kg
        if change > 0:
            st.caption(f"Estimated loss: {change:.2f} kg/week")
        elif change < 0:
            st.caption(f"Estimated gain: {-change:.2f} kg/week")
        else:
            st.caption("Estimated weight change: none (maintenance)")


def render_incomplete_profile(missing: list):
    """Explain which profile values are needed before targets can be shown."""
    labels = ", ".join(name.replace('_', ' ') for name in missing)
    st.info(f"Not enough information to calculate targets yet. Missing: {labels}")
