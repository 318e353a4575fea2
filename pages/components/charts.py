"""Chart components using Plotly for data visualization."""

import plotly.graph_objects as go
import plotly.express as px
import pandas as pd


def create_daily_calories_chart(plan: dict):
    """Create bar chart of planned calories per day against the daily target.

    Args:
        plan: Weekly plan as returned by ``service.plan_to_dict``

    Returns:
        Plotly figure
    """
    df = pd.DataFrame(
        [(d["day"], d["calories"], "Rest" if d["rest_day"] else "Workout") for d in plan["days"]],
        columns=["Day", "Calories", "Type"],
    )

    fig = px.bar(
        df,
        x="Day",
        y="Calories",
        color="Type",
        title="Planned Calories per Day",
        color_discrete_map={"Workout": "#4ECDC4", "Rest": "#B0BEC5"},
    )

    fig.add_hline(
        y=plan["target_calories"],
        line_dash="dash",
        annotation_text="Target",
        line_color="red",
    )

    fig.update_layout(
        xaxis_title="Day",
        yaxis_title="Calories (kcal)",
        hovermode="x unified",
    )

    return fig


def create_macro_pie_chart(plan: dict):
    """Create pie chart of the week's macro calorie distribution.

    Args:
        plan: Weekly plan as returned by ``service.plan_to_dict``

    Returns:
        Plotly figure
    """
    protein = sum(d["protein_g"] for d in plan["days"])
    carbs = sum(d["carbs_g"] for d in plan["days"])
    fat = sum(d["fat_g"] for d in plan["days"])

    if protein + carbs + fat == 0:
        fig = go.Figure()
        fig.add_annotation(
            text="No meals planned",
            xref="paper", yref="paper",
            x=0.5, y=0.5, showarrow=False
        )
        return fig

    fig = px.pie(
        names=["Protein", "Carbs", "Fat"],
        values=[protein * 4, carbs * 4, fat * 9],  # 4/4/9 kcal per gram
        title="Weekly Macro Calorie Distribution",
        color_discrete_sequence=['#FF6B6B', '#4ECDC4', '#FFE66D']
    )

    fig.update_traces(textposition='inside', textinfo='percent+label')

    return fig


def create_budget_gauge(weekly_cost: float, weekly_budget: float):
    """Create gauge chart of weekly spend against the weekly budget.

    Args:
        weekly_cost: Planned cost for the week
        weekly_budget: Daily budget x 7

    Returns:
        Plotly figure
    """
    upper = max(weekly_budget, weekly_cost) * 1.2 or 1

    if weekly_cost <= weekly_budget * 0.9:
        color = "darkgreen"
    elif weekly_cost <= weekly_budget:
        color = "orange"
    else:
        color = "red"

    fig = go.Figure(go.Indicator(
        mode="gauge+number+delta",
        value=weekly_cost,
        title={'text': "Weekly Food Cost"},
        delta={'reference': weekly_budget},
        gauge={
            'axis': {'range': [0, upper]},
            'bar': {'color': color},
            'threshold': {
                'line': {'color': "red", 'width': 4},
                'thickness': 0.75,
                'value': weekly_budget
            }
        }
    ))

    return fig
