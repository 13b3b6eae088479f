# This file shapes backend analytics payloads into chart-ready DataFrames.
# It exists so chart components receive tidy frames and the reshaping can be tested without Streamlit.
# The helpers never compute metrics; they only re-arrange what the backend already reported.

from __future__ import annotations

import logging

import pandas as pd

from src.car_price_dashboard.schemas import ModelStats, ScatterData

LOGGER = logging.getLogger("dashboard")


def scatter_points_frame(scatter: ScatterData) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "actual": scatter.actual,
            "predicted": scatter.predicted,
            "year": scatter.years,
            "miles": scatter.miles,
        },
        columns=["actual", "predicted", "year", "miles"],
    )


def identity_line_frame(axis_max: float) -> pd.DataFrame:
    """Endpoints of the y = x reference line drawn over the scatter plot."""

    return pd.DataFrame({"actual": [0.0, float(axis_max)], "predicted": [0.0, float(axis_max)]})


def _parse_year(key: str) -> int | None:
    # Float-typed year columns serialize as "2015.0".
    try:
        return int(float(key))
    except (ValueError, OverflowError):
        return None


def year_performance_frame(stats: ModelStats) -> pd.DataFrame:
    rows = []
    for key, rmse in stats.year_performance.items():
        year = _parse_year(key)
        if year is None:
            LOGGER.warning("Skipping unparseable year_performance key %r", key)
            continue
        rows.append({"year": year, "rmse": float(rmse)})
    if not rows:
        return pd.DataFrame(columns=["year", "rmse"])
    return pd.DataFrame(rows).sort_values("year").reset_index(drop=True)


def price_distribution_frame(stats: ModelStats) -> pd.DataFrame:
    distribution = stats.price_distribution
    return pd.DataFrame(
        {"range": distribution.labels, "count": distribution.values},
        columns=["range", "count"],
    )


def accuracy_by_range_frame(stats: ModelStats) -> pd.DataFrame:
    rows = [
        {"range": label, "accuracy": float(accuracy) * 100.0}
        for label, accuracy in stats.accuracy_by_range.items()
    ]
    return pd.DataFrame(rows, columns=["range", "accuracy"])


def error_percentiles_frame(stats: ModelStats) -> pd.DataFrame:
    percentiles = stats.error_distribution.error_percentiles
    return pd.DataFrame(
        {
            "percentile": ["25th", "50th", "75th"],
            "error": [percentiles.p25, percentiles.p50, percentiles.p75],
        }
    )
