# This file probes a running prediction backend against the contract the dashboard relies on.
# It exists so a backend deployment can be checked before pointing the dashboard at it.
# Each route is called through the dashboard's own client, so payloads are validated by the same schemas.
# ruff: noqa: E402

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from pydantic import ValidationError

from src.car_price_dashboard.api_client import ApiUnavailableError, PredictionApiClient
from src.car_price_dashboard.dashboard_config import load_dashboard_config
from src.car_price_dashboard.schemas import PredictionRequest
from src.common.logging import configure_logging

_PROBE_ERRORS = (ApiUnavailableError, ValueError, ValidationError)


def _probe(label: str, call: Callable[[], str]) -> bool:
    try:
        detail = call()
    except _PROBE_ERRORS as exc:
        print(f"FAIL {label}: {exc}")
        return False
    print(f"OK   {label}: {detail}")
    return True


def run_checks(client: PredictionApiClient, *, search: str = "") -> int:
    cars: list[str] = []

    def check_cars() -> str:
        response = client.get_cars(search)
        cars.extend(response.cars)
        return f"{len(response.cars)} cars returned (total={response.total})"

    def check_predict() -> str:
        if not cars:
            raise ValueError("no car model available to probe /predict")
        request = PredictionRequest(name=cars[0], year=2015, miles=50000)
        response = client.predict(request)
        if not response.success:
            raise ValueError(f"backend rejected probe prediction: {response.error}")
        return f"{request.name} -> {response.predicted_price}"

    def check_stats() -> str:
        stats = client.get_model_stats()
        return f"r2={stats.metrics.r2:.4f} sample_size={stats.sample_size}"

    def check_scatter() -> str:
        scatter = client.get_prediction_scatter()
        return f"{len(scatter.actual)} points"

    results = [
        _probe("GET /cars", check_cars),
        _probe("POST /predict", check_predict),
        _probe("GET /model-stats", check_stats),
        _probe("GET /prediction-scatter", check_scatter),
    ]
    return 0 if all(results) else 1


def main(argv: list[str] | None = None) -> int:
    config = load_dashboard_config()
    parser = argparse.ArgumentParser(description="Check the prediction backend contract.")
    parser.add_argument("--base-url", default=config.api_base_url)
    parser.add_argument("--search", default="", help="Optional search term for /cars.")
    parser.add_argument("--timeout", type=int, default=config.request_timeout_seconds)
    args = parser.parse_args(argv)

    configure_logging()
    client = PredictionApiClient(base_url=args.base_url, timeout_seconds=args.timeout)
    print(f"Checking prediction backend at {client.base_url}")
    return run_checks(client, search=args.search)


if __name__ == "__main__":
    raise SystemExit(main())
