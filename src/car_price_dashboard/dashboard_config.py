# This file defines runtime configuration for the car price dashboard.
# It exists so the backend address, timeouts, and UI limits can be tuned through environment variables.
# Keeping these values centralized avoids hard-coded behavior scattered across the pages.

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date

from dotenv import load_dotenv


@dataclass(frozen=True)
class DashboardConfig:
    api_base_url: str
    request_timeout_seconds: int
    search_debounce_ms: int
    history_size: int
    min_model_year: int
    scatter_axis_max: int

    @property
    def search_debounce_seconds(self) -> float:
        return max(0, self.search_debounce_ms) / 1000.0

    def max_model_year(self) -> int:
        return date.today().year


def load_dashboard_config(*, load_env: bool = True) -> DashboardConfig:
    if load_env:
        load_dotenv()

    api_base_url = os.getenv("DASHBOARD_API_BASE_URL")
    if not api_base_url:
        api_host = os.getenv("PREDICTION_API_HOST", "localhost")
        api_port = os.getenv("PREDICTION_API_PORT", "5000")
        api_base_url = f"http://{api_host}:{api_port}"

    return DashboardConfig(
        api_base_url=api_base_url.rstrip("/"),
        request_timeout_seconds=int(os.getenv("DASHBOARD_REQUEST_TIMEOUT_SECONDS", "8")),
        search_debounce_ms=int(os.getenv("DASHBOARD_SEARCH_DEBOUNCE_MS", "300")),
        history_size=max(1, int(os.getenv("DASHBOARD_HISTORY_SIZE", "5"))),
        min_model_year=int(os.getenv("DASHBOARD_MIN_MODEL_YEAR", "1900")),
        scatter_axis_max=int(os.getenv("DASHBOARD_SCATTER_AXIS_MAX", "100000")),
    )
