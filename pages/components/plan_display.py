"""Plan display components for Streamlit pages."""

import pandas as pd
import streamlit as st


def exercises_frame(day: dict) -> pd.DataFrame:
    """Tabulate a day's exercises."""
    return pd.DataFrame(
        [
            {
                "Exercise": e["name"],
                "Group": e["muscle_group"],
                "Equipment": e["equipment"],
                "Intensity": e["intensity"],
                "Minutes": e["minutes"],
            }
            for e in day["exercises"]
        ],
        columns=["Exercise", "Group", "Equipment", "Intensity", "Minutes"],
    )


def meals_frame(day: dict) -> pd.DataFrame:
    """Tabulate a day's meals."""
    return pd.DataFrame(
        [
            {
                "Meal": m["name"],
                "Cuisine": m["cuisine"],
                "Calories": m["calories"],
                "Protein (g)": m["protein_g"],
                "Carbs (g)": m["carbs_g"],
                "Fat (g)": m["fat_g"],
                "Cost": m["cost"],
            }
            for m in day["meals"]
        ],
        columns=["Meal", "Cuisine", "Calories", "Protein (g)", "Carbs (g)", "Fat (g)", "Cost"],
    )


def shopping_frame(shopping_list: dict) -> pd.DataFrame:
    df = pd.DataFrame(list(shopping_list.items()), columns=["Ingredient", "Servings"])
    return df.sort_values(["Servings", "Ingredient"], ascending=[False, True]).reset_index(drop=True)


def render_day(day: dict, daily_budget: float):
    """Render one day: workout table, meal table and totals.

    Args:
        day: Day dict from ``service.day_to_dict``
        daily_budget: Budget the day's cost is compared against

    Color coding of calories vs target:
        - Green: within 10%
        - Orange: within 20%
        - Red: otherwise
    """
    label = "😴 Rest" if day["rest_day"] else f"🏋️ Workout (~{day['workout_minutes']} min)"
    st.markdown(f"#### {day['day']} - {label}")

    col1, col2 = st.columns([2, 3])

    with col1:
        if day["rest_day"]:
            st.caption("Rest day: no workout scheduled.")
        elif day["exercises"]:
            st.dataframe(exercises_frame(day), hide_index=True, use_container_width=True)
        else:
            st.info("No exercises available for your equipment.")

    with col2:
        if not day["meals"]:
            st.warning("⚠️ No suitable meal options for your dietary filters.")
        else:
            st.dataframe(meals_frame(day), hide_index=True, use_container_width=True)

    cols = st.columns(5)
    cols[0].metric("Calories", f"{day['calories']}/{day['target_calories']}")
    cols[1].metric("Protein", f"{day['protein_g']}g")
    cols[2].metric("Carbs", f"{day['carbs_g']}g")
    cols[3].metric("Fat", f"{day['fat_g']}g")
    cols[4].metric("Cost", f"{day['cost']:.2f}", delta=f"{daily_budget - day['cost']:.2f} left")

    target = day["target_calories"]
    cal_pct = (day["calories"] / target * 100) if target > 0 else 0
    if 90 <= cal_pct <= 110:
        st.success(f"{cal_pct:.0f}% of calorie target")
    elif 80 <= cal_pct <= 120:
        st.warning(f"{cal_pct:.0f}% of calorie target")
    else:
        st.error(f"{cal_pct:.0f}% of calorie target")
