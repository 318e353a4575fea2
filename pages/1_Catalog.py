"""Catalog Browser Page.

Search and filter the exercise and meal reference data.
"""

import pandas as pd
import streamlit as st

from fit_planner.catalog import default_catalog
from fit_planner.service import exercise_to_dict, meal_to_dict

st.set_page_config(page_title="Catalog | Workout & Meal Planner", page_icon="📚", layout="wide")
st.title("📚 Catalog Browser")

catalog = default_catalog()
st.caption(
    f"Catalog version {catalog.version}: "
    f"{len(catalog.exercises)} exercises, {len(catalog.meals)} meals"
)

exercises_tab, meals_tab = st.tabs(["🏋️ Exercises", "🍛 Meals"])

with exercises_tab:
    df = pd.DataFrame([exercise_to_dict(e) for e in catalog.exercises])

    col1, col2 = st.columns(2)
    with col1:
        groups = st.multiselect("Muscle group", sorted(df["muscle_group"].unique()))
    with col2:
        equipment = st.multiselect("Equipment", sorted(df["equipment"].unique()))

    if groups:
        df = df[df["muscle_group"].isin(groups)]
    if equipment:
        df = df[df["equipment"].isin(equipment)]

    st.dataframe(df, hide_index=True, use_container_width=True)

with meals_tab:
    df = pd.DataFrame([meal_to_dict(m) for m in catalog.meals])
    df["ingredients"] = df["ingredients"].apply(", ".join)

    col1, col2, col3 = st.columns([2, 2, 1])
    with col1:
        search_query = st.text_input("🔍 Search meals by name", placeholder="e.g., rice, oats...")
    with col2:
        cuisines = st.multiselect("Cuisine", sorted(df["cuisine"].unique()))
    with col3:
        max_cost = st.number_input("Max cost", min_value=0.0, value=0.0, step=5.0, help="0 = no limit")

    flag_cols = st.columns(5)
    flags = {
        "vegetarian": flag_cols[0].checkbox("Vegetarian"),
        "vegan": flag_cols[1].checkbox("Vegan"),
        "lactose_free": flag_cols[2].checkbox("Lactose-free"),
        "gluten_free": flag_cols[3].checkbox("Gluten-free"),
        "halal": flag_cols[4].checkbox("Halal"),
    }

    if search_query:
        df = df[df["name"].str.contains(search_query, case=False, regex=False)]
    if cuisines:
        df = df[df["cuisine"].isin(cuisines)]
    if max_cost > 0:
        df = df[df["cost"] <= max_cost]
    for column, required in flags.items():
        if required:
            df = df[df[column]]

    st.markdown(f"**{len(df)}** meals")
    st.dataframe(df, hide_index=True, use_container_width=True)
