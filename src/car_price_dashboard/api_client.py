# This file implements the HTTP client for the car price prediction backend.
# It exists so dashboard pages can call the four backend routes without embedding request details everywhere.
# The client validates payloads with the schema models and converts transport failures into one clear exception type.
# Keeping API calls here keeps the static error messages in data_access.py simple.

from __future__ import annotations

import logging
from typing import Any

import requests

from src.car_price_dashboard.schemas import (
    CarsResponse,
    ModelStats,
    PredictionRequest,
    PredictionResponse,
    ScatterData,
)

LOGGER = logging.getLogger("dashboard")


class ApiUnavailableError(RuntimeError):
    """Raised when the backend cannot be reached or responds with an unusable payload."""


class PredictionApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int = 8,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def get_cars(self, search: str = "") -> CarsResponse:
        params = {"search": search} if search else None
        payload = self._request_json("GET", "/cars", params=params)
        return CarsResponse.model_validate(payload)

    def predict(self, request: PredictionRequest) -> PredictionResponse:
        # The backend reports rejected inputs as `success: false` with a 4xx status.
        payload = self._request_json(
            "POST",
            "/predict",
            json_body=request.model_dump(),
            accept_client_errors=True,
        )
        return PredictionResponse.model_validate(payload)

    def get_model_stats(self) -> ModelStats:
        payload = self._request_json("GET", "/model-stats")
        return ModelStats.model_validate(payload)

    def get_prediction_scatter(self) -> ScatterData:
        payload = self._request_json("GET", "/prediction-scatter")
        return ScatterData.model_validate(payload)

    def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: dict[str, Any] | None = None,
        accept_client_errors: bool = False,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            if method == "POST":
                response = self.session.post(url, json=json_body, timeout=self.timeout_seconds)
            else:
                response = self.session.get(url, params=params, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            LOGGER.warning("Backend request failed method=%s url=%s error=%s", method, url, exc)
            raise ApiUnavailableError(f"API request failed for {url}: {exc}") from exc

        if response.status_code >= 500:
            raise ApiUnavailableError(
                f"API request failed with status {response.status_code} for {url}"
            )
        if response.status_code >= 400 and not accept_client_errors:
            raise ValueError(
                f"API request was rejected with status {response.status_code} for {url}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            if response.status_code >= 400:
                raise ValueError(
                    f"API request was rejected with status {response.status_code} for {url}"
                ) from exc
            raise ApiUnavailableError(f"API did not return valid JSON for {url}") from exc

        if not isinstance(payload, dict):
            raise ApiUnavailableError(f"Unexpected payload shape from {url}")
        return payload
