# This file is the single data interface for the car price dashboard pages.
# It exists so pages receive either ready-to-render data or one static error message per view.
# Transport, HTTP, and payload-validation failures are logged here and never reach the page code.
# The module performs no caching; every call goes to the backend.

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import ValidationError

from src.car_price_dashboard.api_client import ApiUnavailableError, PredictionApiClient
from src.car_price_dashboard.dashboard_config import DashboardConfig
from src.car_price_dashboard.history import PredictionRecord
from src.car_price_dashboard.schemas import ModelStats, PredictionRequest, ScatterData
from src.car_price_dashboard.ui_text import (
    ERROR_CAR_CATALOG,
    ERROR_MODEL_ANALYTICS,
    ERROR_PREDICTION_FAILED,
    ERROR_PREDICTION_SERVICE,
)

LOGGER = logging.getLogger("dashboard")

T = TypeVar("T")

_BACKEND_ERRORS = (ApiUnavailableError, ValueError, ValidationError)


@dataclass(frozen=True)
class ViewResult(Generic[T]):
    data: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ModelAnalytics:
    stats: ModelStats
    scatter: ScatterData


class DashboardDataAccess:
    def __init__(
        self,
        *,
        config: DashboardConfig,
        api_client: PredictionApiClient | None = None,
    ) -> None:
        self.config = config
        self.api_client = api_client or PredictionApiClient(
            base_url=config.api_base_url,
            timeout_seconds=config.request_timeout_seconds,
        )

    def search_cars(self, term: str) -> ViewResult[list[str]]:
        try:
            response = self.api_client.get_cars(term.strip())
        except _BACKEND_ERRORS as exc:
            LOGGER.warning("Car catalog lookup failed search=%r: %s", term, exc)
            return ViewResult(data=[], error=ERROR_CAR_CATALOG)
        return ViewResult(data=list(response.cars))

    def predict(self, request: PredictionRequest) -> ViewResult[PredictionRecord]:
        try:
            response = self.api_client.predict(request)
        except _BACKEND_ERRORS as exc:
            LOGGER.warning("Prediction request failed car=%r: %s", request.name, exc)
            return ViewResult(error=ERROR_PREDICTION_SERVICE)

        if not response.success or response.predicted_price is None:
            LOGGER.info("Backend rejected prediction car=%r error=%r", request.name, response.error)
            return ViewResult(error=response.error or ERROR_PREDICTION_FAILED)

        return ViewResult(
            data=PredictionRecord(
                name=request.name,
                year=request.year,
                miles=request.miles,
                price=float(response.predicted_price),
            )
        )

    def load_model_analytics(self) -> ViewResult[ModelAnalytics]:
        with ThreadPoolExecutor(max_workers=2, thread_name_prefix="analytics") as executor:
            stats_future = executor.submit(self.api_client.get_model_stats)
            scatter_future = executor.submit(self.api_client.get_prediction_scatter)
            try:
                stats = stats_future.result()
                scatter = scatter_future.result()
            except _BACKEND_ERRORS as exc:
                LOGGER.warning("Model analytics load failed: %s", exc)
                return ViewResult(error=ERROR_MODEL_ANALYTICS)

        return ViewResult(data=ModelAnalytics(stats=stats, scatter=scatter))
