"""Streamlit frontend for the Workout & Meal Planner.

Main entry point: collect a profile, generate the 7-day plan and show it.
"""

import streamlit as st

from fit_planner.config import (
    ACTIVITY_MULTIPLIERS,
    DEFAULT_SEED,
    GOAL_CALORIE_ADJUSTMENTS,
    PROFILE_DEFAULTS,
    SESSION_MINUTES_RANGE,
    WORKOUT_DAYS_RANGE,
)
from fit_planner.models import Experience
from fit_planner.service import build_plan_response
from pages.components.charts import (
    create_budget_gauge,
    create_daily_calories_chart,
    create_macro_pie_chart,
)
from pages.components.plan_display import render_day, shopping_frame

st.set_page_config(
    page_title="Workout & Meal Planner",
    page_icon="🏋️",
    layout="wide",
    initial_sidebar_state="expanded"
)

if 'plan_response' not in st.session_state:
    st.session_state.plan_response = None

d = PROFILE_DEFAULTS

st.title("🏋️ Personalized Workout & Meal Planner")
st.markdown(
    "Generate a 7-day workout and meal plan from your body stats, goal, "
    "diet, equipment, schedule and budget."
)

with st.form("profile_form"):
    st.markdown("#### About You")
    col1, col2, col3 = st.columns(3)
    with col1:
        name = st.text_input("Name", value=d["name"])
        age = st.number_input("Age", min_value=13, max_value=100, value=d["age"])
    with col2:
        sex = st.selectbox("Sex", ["male", "female"])
        height_cm = st.number_input("Height (cm)", min_value=100.0, max_value=250.0, value=d["height_cm"])
    with col3:
        weight_kg = st.number_input("Weight (kg)", min_value=30.0, max_value=250.0, value=d["weight_kg"])
        region = st.text_input("Region", value=d["region"])

    st.markdown("#### Activity & Goals")
    col1, col2, col3 = st.columns(3)
    with col1:
        activity = st.selectbox("Activity Level", list(ACTIVITY_MULTIPLIERS.keys()), index=2)
    with col2:
        experience = st.selectbox("Experience", [e.value for e in Experience])
    with col3:
        goal = st.selectbox("Goal", list(GOAL_CALORIE_ADJUSTMENTS.keys()), index=1)

    st.markdown("#### Diet")
    cols = st.columns(5)
    vegetarian = cols[0].checkbox("Vegetarian")
    vegan = cols[1].checkbox("Vegan")
    lactose_free = cols[2].checkbox("Lactose-free")
    gluten_free = cols[3].checkbox("Gluten-free")
    halal = cols[4].checkbox("Halal")
    col1, col2, col3 = st.columns(3)
    allergies = col1.text_input("Allergies", placeholder="e.g. peanut, egg")
    dislikes = col2.text_input("Disliked ingredients", placeholder="e.g. tofu")
    cuisines = col3.text_input("Preferred cuisines", placeholder="e.g. Indian, South Indian, Western")

    st.markdown("#### Equipment")
    cols = st.columns(5)
    has_gym = cols[0].checkbox("Gym access")
    has_dumbbells = cols[1].checkbox("Dumbbells")
    has_bands = cols[2].checkbox("Resistance bands")
    has_mat = cols[3].checkbox("Yoga mat")
    can_run_outside = cols[4].checkbox("Can run outside")

    st.markdown("#### Schedule & Budget")
    col1, col2, col3, col4 = st.columns(4)
    with col1:
        days = st.slider("Workout days / week", *WORKOUT_DAYS_RANGE, value=d["workout_days_per_week"])
    with col2:
        minutes = st.slider("Minutes / session", *SESSION_MINUTES_RANGE, value=d["minutes_per_workout"], step=5)
    with col3:
        budget = st.number_input("Daily food budget", min_value=0.0, value=d["daily_food_budget"], step=10.0)
    with col4:
        seed = st.number_input("Seed", min_value=0, value=DEFAULT_SEED, help="Same seed, same plan")

    submitted = st.form_submit_button("✨ Generate Plan", type="primary", use_container_width=True)

if submitted:
    form = {
        "name": name, "age": age, "sex": sex, "height_cm": height_cm, "weight_kg": weight_kg,
        "activity_level": activity, "experience": experience, "goal": goal,
        "vegetarian": vegetarian, "vegan": vegan, "lactose_free": lactose_free,
        "gluten_free": gluten_free, "halal": halal,
        "allergies": allergies, "disliked_ingredients": dislikes, "preferred_cuisines": cuisines,
        "has_gym": has_gym, "has_dumbbells": has_dumbbells, "has_resistance_bands": has_bands,
        "has_yoga_mat": has_mat, "can_run_outside": can_run_outside,
        "workout_days_per_week": days, "minutes_per_workout": minutes,
        "daily_food_budget": budget, "region": region,
    }
    with st.spinner("🔄 Generating your plan..."):
        try:
            st.session_state.plan_response = build_plan_response(form, seed=int(seed))
        except Exception as e:
            st.error(f"❌ Failed to generate plan: {e}")
            st.stop()

response = st.session_state.plan_response

if response:
    plan = response["plan"]
    st.divider()
    st.markdown(f"### Plan for {response['profile']['name']}")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Target", f"{response['daily_calories']} kcal/day")
    col2.metric("Weekly Target", f"{plan['weekly_target_calories']} kcal")
    col3.metric("Weekly Budget", f"{response['weekly_budget']:.2f}")
    col4.metric("Weekly Cost", f"{response['weekly_cost']:.2f}")

    if response["days_without_meals"]:
        st.warning(
            "⚠️ No suitable meal options on "
            + ", ".join(response["days_without_meals"])
            + ". Try relaxing your diet or cuisine filters."
        )

    col1, col2, col3 = st.columns([3, 2, 2])
    with col1:
        st.plotly_chart(create_daily_calories_chart(plan), use_container_width=True)
    with col2:
        st.plotly_chart(create_macro_pie_chart(plan), use_container_width=True)
    with col3:
        st.plotly_chart(
            create_budget_gauge(response["weekly_cost"], response["weekly_budget"]),
            use_container_width=True,
        )

    st.markdown("### Weekly Schedule")
    for day in plan["days"]:
        render_day(day, response["daily_budget"])
        st.divider()

    st.markdown("### 🛒 Shopping List")
    if response["shopping_list"]:
        st.dataframe(shopping_frame(response["shopping_list"]), hide_index=True)
    else:
        st.info("Nothing to buy.")

st.markdown("---")
st.caption(
    "💡 **Tip:** Calorie targets use the Mifflin-St Jeor equation. "
    "Browse every exercise and meal on the Catalog page."
)
