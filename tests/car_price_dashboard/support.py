"""
Shared fakes for dashboard tests.
They stand in for `requests.Session` and for the backend payloads the dashboard consumes.
"""

from __future__ import annotations

from typing import Any

from src.car_price_dashboard.dashboard_config import DashboardConfig


class FakeResponse:
    def __init__(
        self, *, status_code: int = 200, payload: Any = None, invalid_json: bool = False
    ) -> None:
        self.status_code = status_code
        self._payload = payload if payload is not None else {}
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    def __init__(
        self, responses: list[FakeResponse] | None = None, raise_error: Exception | None = None
    ) -> None:
        self.responses = responses or []
        self.raise_error = raise_error
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, params: dict[str, Any] | None, timeout: int) -> FakeResponse:
        self.calls.append({"method": "GET", "url": url, "params": params, "timeout": timeout})
        return self._next()

    def post(self, url: str, json: dict[str, Any] | None, timeout: int) -> FakeResponse:
        self.calls.append({"method": "POST", "url": url, "json": json, "timeout": timeout})
        return self._next()

    def _next(self) -> FakeResponse:
        if self.raise_error is not None:
            raise self.raise_error
        return self.responses.pop(0)


def build_test_config(**overrides: Any) -> DashboardConfig:
    values: dict[str, Any] = {
        "api_base_url": "http://localhost:5000",
        "request_timeout_seconds": 5,
        "search_debounce_ms": 300,
        "history_size": 5,
        "min_model_year": 1900,
        "scatter_axis_max": 100000,
    }
    values.update(overrides)
    return DashboardConfig(**values)


def model_stats_payload() -> dict[str, Any]:
    return {
        "metrics": {"mse": 4_000_000.0, "rmse": 2000.0, "mae": 1450.5, "r2": 0.91234},
        "price_distribution": {
            "labels": ["$0-10k", "$10k-20k", "$20k+"],
            "values": [120, 340, 90],
        },
        "error_distribution": {
            "mean_error": -35.2,
            "std_error": 1980.4,
            "error_percentiles": {"25th": -900.0, "50th": 15.0, "75th": 1020.0},
        },
        "accuracy_by_range": {"$0-10k": 0.82, "$10k-20k": 0.9, "$20k+": 0.75},
        "year_performance": {"2018": 1800.0, "2012": 2500.0, "2015": 2100.0},
        "sample_size": 1234,
        "timestamp": "2026-10-01T12:00:00",
    }


def scatter_payload() -> dict[str, Any]:
    return {
        "actual": [12000.0, 25000.0, 8000.0],
        "predicted": [12500.0, 23000.0, 9100.0],
        "years": [2015, 2019, 2010],
        "miles": [60000, 20000, 120000],
    }
