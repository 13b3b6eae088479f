# This file contains the chart builders and renderers for the prediction and model performance pages.
# Builders return Altair charts so encodings can be checked without a running Streamlit session.
# Renderers add the section heading, tooltip, and a consistent empty state.

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

PRIMARY_COLOR = "#8884d8"
SECONDARY_COLOR = "#82ca9d"
REFERENCE_COLOR = "#ff7300"


def build_history_chart(history_df: pd.DataFrame) -> alt.Chart:
    # Numbered labels keep repeated car names as separate points.
    labels = [f"{index}. {name}" for index, name in enumerate(history_df["name"], start=1)]
    frame = history_df.assign(label=labels)
    return (
        alt.Chart(frame)
        .mark_line(point=True, color=PRIMARY_COLOR)
        .encode(
            x=alt.X("label:N", title="Car", sort=None),
            y=alt.Y("price:Q", title="Predicted Price ($)"),
            tooltip=[
                alt.Tooltip("name:N", title="Car"),
                alt.Tooltip("year:Q", title="Year", format="d"),
                alt.Tooltip("miles:Q", title="Miles", format=","),
                alt.Tooltip("price:Q", title="Predicted Price", format="$,.2f"),
            ],
        )
        .properties(height=300)
    )


def build_actual_vs_predicted_chart(
    points_df: pd.DataFrame,
    reference_df: pd.DataFrame,
    *,
    axis_max: float,
) -> alt.LayerChart:
    domain = [0, axis_max]
    points = (
        alt.Chart(points_df)
        .mark_circle(color=PRIMARY_COLOR, opacity=0.6, clip=True)
        .encode(
            x=alt.X("actual:Q", title="Actual Price ($)", scale=alt.Scale(domain=domain)),
            y=alt.Y("predicted:Q", title="Predicted Price ($)", scale=alt.Scale(domain=domain)),
            tooltip=[
                alt.Tooltip("actual:Q", title="Actual", format="$,.0f"),
                alt.Tooltip("predicted:Q", title="Predicted", format="$,.0f"),
                alt.Tooltip("year:Q", title="Year", format="d"),
                alt.Tooltip("miles:Q", title="Miles", format=","),
            ],
        )
    )
    reference = (
        alt.Chart(reference_df)
        .mark_line(color=REFERENCE_COLOR, strokeWidth=2)
        .encode(x="actual:Q", y="predicted:Q")
    )
    return alt.layer(points, reference).properties(height=400)


def build_price_distribution_chart(distribution_df: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(distribution_df)
        .mark_bar(color=SECONDARY_COLOR)
        .encode(
            x=alt.X("range:N", title="Price range", sort=None),
            y=alt.Y("count:Q", title="Number of Cars"),
            tooltip=["range:N", alt.Tooltip("count:Q", title="Number of Cars")],
        )
        .properties(height=300)
    )


def build_accuracy_chart(accuracy_df: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(accuracy_df)
        .mark_bar(color=PRIMARY_COLOR)
        .encode(
            x=alt.X("range:N", title="Price range", sort=None),
            y=alt.Y("accuracy:Q", title="Accuracy (%)", scale=alt.Scale(domain=[0, 100])),
            tooltip=["range:N", alt.Tooltip("accuracy:Q", title="Accuracy (%)", format=".1f")],
        )
        .properties(height=300)
    )


def build_year_performance_chart(year_df: pd.DataFrame) -> alt.Chart:
    return (
        alt.Chart(year_df)
        .mark_line(point=True, color=PRIMARY_COLOR)
        .encode(
            x=alt.X("year:O", title="Model year"),
            y=alt.Y("rmse:Q", title="RMSE ($)"),
            tooltip=["year:O", alt.Tooltip("rmse:Q", title="RMSE", format="$,.2f")],
        )
        .properties(height=280)
    )


def _render(chart: alt.Chart | alt.LayerChart, *, title: str, help_text: str) -> None:
    st.subheader(title, help=help_text)
    st.altair_chart(chart, use_container_width=True)


def render_history_chart(history_df: pd.DataFrame, *, help_text: str) -> None:
    if history_df.empty:
        return
    _render(build_history_chart(history_df), title="Prediction History", help_text=help_text)


def render_actual_vs_predicted(
    points_df: pd.DataFrame,
    reference_df: pd.DataFrame,
    *,
    axis_max: float,
    help_text: str,
) -> None:
    if points_df.empty:
        st.subheader("Actual vs Predicted Prices", help=help_text)
        st.info("No evaluation points were returned by the backend.")
        return
    _render(
        build_actual_vs_predicted_chart(points_df, reference_df, axis_max=axis_max),
        title="Actual vs Predicted Prices",
        help_text=help_text,
    )


def render_price_distribution(distribution_df: pd.DataFrame, *, help_text: str) -> None:
    if distribution_df.empty:
        st.subheader("Price Range Distribution", help=help_text)
        st.info("No price distribution available.")
        return
    _render(
        build_price_distribution_chart(distribution_df),
        title="Price Range Distribution",
        help_text=help_text,
    )


def render_accuracy_by_range(accuracy_df: pd.DataFrame, *, help_text: str) -> None:
    if accuracy_df.empty:
        st.subheader("Prediction Accuracy by Price Range", help=help_text)
        st.info("No accuracy breakdown available.")
        return
    _render(
        build_accuracy_chart(accuracy_df),
        title="Prediction Accuracy by Price Range",
        help_text=help_text,
    )


def render_year_performance(year_df: pd.DataFrame, *, help_text: str) -> None:
    if year_df.empty:
        st.subheader("RMSE by Model Year", help=help_text)
        st.info("No per-year performance available.")
        return
    _render(build_year_performance_chart(year_df), title="RMSE by Model Year", help_text=help_text)
