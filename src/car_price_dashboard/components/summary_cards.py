# This file renders the compact metric cards used on both dashboard pages.
# The functions expect display-ready strings and do not perform any computation.

from __future__ import annotations

import streamlit as st


def render_model_metric_cards(
    *,
    r2: str,
    rmse: str,
    mae: str,
    sample_size: str,
    tooltips: dict[str, str],
) -> None:
    col1, col2, col3, col4 = st.columns(4)

    col1.metric("R² Score", r2, help=tooltips["r2_card"])
    col2.metric("RMSE", rmse, help=tooltips["rmse_card"])
    col3.metric("MAE", mae, help=tooltips["mae_card"])
    col4.metric("Sample Size", sample_size, help=tooltips["sample_size_card"])


def render_prediction_detail_cards(*, car: str, year: str, miles: str) -> None:
    col1, col2, col3 = st.columns(3)

    col1.metric("Car", car)
    col2.metric("Year", year)
    col3.metric("Miles", miles)
