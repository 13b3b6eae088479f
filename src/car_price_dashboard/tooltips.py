# This file defines tooltip text for metric cards and charts.
# A single dictionary keeps explanations consistent between pages and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "r2_card": "Share of price variance explained by the model; 1.0 is a perfect fit.",
    "rmse_card": "Root mean squared error in dollars; large misses weigh more heavily.",
    "mae_card": "Mean absolute error in dollars; the typical size of a miss.",
    "sample_size_card": "Number of evaluation cars the statistics were computed on.",
    "actual_vs_predicted_chart": "Each point is one evaluation car; points on the orange line were priced exactly.",
    "price_distribution_chart": "How many evaluation cars fall into each price range.",
    "accuracy_by_range_chart": "Share of predictions within tolerance for each price range.",
    "year_performance_chart": "RMSE per model year; spikes show years the model prices poorly.",
    "error_distribution": "Spread of prediction errors across the evaluation set.",
    "prediction_history_chart": "Your most recent predictions in this session.",
    "car_search": "Type part of a model name to narrow the list below.",
}
