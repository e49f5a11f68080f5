"""Chart components using Plotly for data visualization."""

import plotly.express as px
import plotly.graph_objects as go

from nutrition_planner.models import DailyMealTargets, TargetSummary

MACRO_COLORS = ['#FF6B6B', '#4ECDC4', '#FFE66D']


def create_macro_pie_chart(summary: TargetSummary):
    """Create pie chart of macro calorie distribution.

    Args:
        summary: TargetSummary with per-macro calories

    Returns:
        Plotly figure
    """
    fig = px.pie(
        names=['Protein', 'Carbs', 'Fat'],
        values=[summary.protein_calories, summary.carb_calories, summary.fat_calories],
        title="Macro Calorie Distribution",
        color_discrete_sequence=MACRO_COLORS,
    )
    fig.update_traces(textposition='inside', textinfo='percent+label')
    return fig


def create_energy_bar_chart(summary: TargetSummary):
    """BMR, TDEE and target calories side by side."""
    labels, values = [], []
    for label, value in (("BMR", summary.bmr), ("TDEE", summary.tdee),
                         ("Target", summary.final_target_calories)):
        if value is not None:
            labels.append(label)
            values.append(value)

    fig = go.Figure(go.Bar(x=labels, y=values, marker_color=['#95A5A6', '#3498DB', '#2ECC71'][:len(values)]))
    fig.update_layout(title="Daily Energy (kcal)", yaxis_title="kcal")
    return fig


def create_meal_split_chart(daily: DailyMealTargets):
    """Stacked bar of macro grams per meal.

    Args:
        daily: DailyMealTargets with one entry per meal

    Returns:
        Plotly figure
    """
    meals = [m.meal_name for m in daily.meals]
    fig = go.Figure()
    for name, attr, color in (("Protein", "protein", MACRO_COLORS[0]),
                              ("Carbs", "carbs", MACRO_COLORS[1]),
                              ("Fat", "fat", MACRO_COLORS[2])):
        fig.add_trace(go.Bar(name=name, x=meals, y=[getattr(m, attr) for m in daily.meals],
                             marker_color=color))

    fig.update_layout(
        barmode='stack',
        title='Macros per Meal',
        xaxis_title="Meal",
        yaxis_title="Grams",
        legend_title="Macros",
    )
    return fig
