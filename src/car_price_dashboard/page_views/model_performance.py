# This file renders the model performance page from the backend's precomputed statistics.
# It shows headline error metrics, the actual-vs-predicted scatter, and the distribution breakdowns.
# The page has three non-loaded states: loading, a static error message, and no data.

from __future__ import annotations

import streamlit as st

from src.car_price_dashboard.components.charts import (
    render_accuracy_by_range,
    render_actual_vs_predicted,
    render_price_distribution,
    render_year_performance,
)
from src.car_price_dashboard.components.summary_cards import render_model_metric_cards
from src.car_price_dashboard.components.tables import render_table
from src.car_price_dashboard.dashboard_config import DashboardConfig
from src.car_price_dashboard.data_access import DashboardDataAccess, ModelAnalytics
from src.car_price_dashboard.formatting import (
    format_count,
    format_currency_metric,
    format_r2,
)
from src.car_price_dashboard.ui_text import (
    EMPTY_MODEL_ANALYTICS,
    LOADING_MODEL_ANALYTICS,
    MODEL_PAGE_TITLE,
)
from src.car_price_dashboard.view_frames import (
    accuracy_by_range_frame,
    error_percentiles_frame,
    identity_line_frame,
    price_distribution_frame,
    scatter_points_frame,
    year_performance_frame,
)


def render(
    *,
    config: DashboardConfig,
    data_access: DashboardDataAccess,
    tooltips: dict[str, str],
) -> None:
    with st.spinner(LOADING_MODEL_ANALYTICS):
        result = data_access.load_model_analytics()

    if result.error:
        st.error(result.error)
        return
    if result.data is None:
        st.info(EMPTY_MODEL_ANALYTICS)
        return

    st.header(MODEL_PAGE_TITLE)
    _render_loaded(result.data, config=config, tooltips=tooltips)


def _render_loaded(
    analytics: ModelAnalytics,
    *,
    config: DashboardConfig,
    tooltips: dict[str, str],
) -> None:
    stats = analytics.stats
    st.caption(f"Statistics generated at {stats.timestamp}")

    render_model_metric_cards(
        r2=format_r2(stats.metrics.r2),
        rmse=format_currency_metric(stats.metrics.rmse),
        mae=format_currency_metric(stats.metrics.mae),
        sample_size=format_count(stats.sample_size),
        tooltips=tooltips,
    )

    render_actual_vs_predicted(
        scatter_points_frame(analytics.scatter),
        identity_line_frame(config.scatter_axis_max),
        axis_max=config.scatter_axis_max,
        help_text=tooltips["actual_vs_predicted_chart"],
    )
    render_price_distribution(
        price_distribution_frame(stats),
        help_text=tooltips["price_distribution_chart"],
    )
    render_accuracy_by_range(
        accuracy_by_range_frame(stats),
        help_text=tooltips["accuracy_by_range_chart"],
    )
    render_year_performance(
        year_performance_frame(stats),
        help_text=tooltips["year_performance_chart"],
    )

    errors = stats.error_distribution
    col1, col2 = st.columns(2)
    col1.metric("Mean Error", format_currency_metric(errors.mean_error))
    col2.metric("Error Std Dev", format_currency_metric(errors.std_error))

    percentiles_df = error_percentiles_frame(stats)
    percentiles_df["error"] = percentiles_df["error"].map(format_currency_metric)
    render_table(
        percentiles_df,
        title="Error Distribution",
        empty_message="No error percentiles available.",
        help_text=tooltips["error_distribution"],
    )
