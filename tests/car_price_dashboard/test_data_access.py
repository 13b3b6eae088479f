# This test file verifies that every dashboard view turns backend failures into its static message.
# It also checks that successful predictions come back as history-ready records.

from __future__ import annotations

import threading

from src.car_price_dashboard.api_client import ApiUnavailableError
from src.car_price_dashboard.data_access import DashboardDataAccess
from src.car_price_dashboard.schemas import (
    CarsResponse,
    ModelStats,
    PredictionRequest,
    PredictionResponse,
    ScatterData,
)
from tests.car_price_dashboard.support import (
    build_test_config,
    model_stats_payload,
    scatter_payload,
)


class _ApiDownClient:
    def get_cars(self, search: str = "") -> CarsResponse:
        raise ApiUnavailableError("api unavailable")

    def predict(self, request: PredictionRequest) -> PredictionResponse:
        raise ApiUnavailableError("api unavailable")

    def get_model_stats(self) -> ModelStats:
        raise ApiUnavailableError("api unavailable")

    def get_prediction_scatter(self) -> ScatterData:
        raise ApiUnavailableError("api unavailable")


class _StubClient:
    def __init__(self, *, prediction: PredictionResponse | None = None) -> None:
        self.prediction = prediction or PredictionResponse(predicted_price=18500.0, success=True)
        self.searches: list[str] = []
        self.threads: set[str] = set()

    def get_cars(self, search: str = "") -> CarsResponse:
        self.searches.append(search)
        return CarsResponse(cars=["Audi A4", "Audi A6"], total=2)

    def predict(self, request: PredictionRequest) -> PredictionResponse:
        return self.prediction

    def get_model_stats(self) -> ModelStats:
        self.threads.add(threading.current_thread().name)
        return ModelStats.model_validate(model_stats_payload())

    def get_prediction_scatter(self) -> ScatterData:
        self.threads.add(threading.current_thread().name)
        return ScatterData.model_validate(scatter_payload())


class _BadScatterClient(_StubClient):
    def get_prediction_scatter(self) -> ScatterData:
        raise ValueError("API request was rejected with status 404")


def _request() -> PredictionRequest:
    return PredictionRequest(name="Audi A4", year=2016, miles=42000)


def test_search_cars_returns_catalog_and_strips_term() -> None:
    client = _StubClient()
    access = DashboardDataAccess(config=build_test_config(), api_client=client)

    result = access.search_cars("  audi ")

    assert result.ok
    assert result.data == ["Audi A4", "Audi A6"]
    assert client.searches == ["audi"]


def test_search_cars_failure_clears_catalog() -> None:
    access = DashboardDataAccess(config=build_test_config(), api_client=_ApiDownClient())

    result = access.search_cars("audi")

    assert result.data == []
    assert result.error == "Failed to load car models"


def test_predict_success_builds_record() -> None:
    access = DashboardDataAccess(config=build_test_config(), api_client=_StubClient())

    result = access.predict(_request())

    assert result.ok
    assert result.data is not None
    assert result.data.name == "Audi A4"
    assert result.data.year == 2016
    assert result.data.miles == 42000
    assert result.data.price == 18500.0


def test_predict_transport_failure_uses_connection_message() -> None:
    access = DashboardDataAccess(config=build_test_config(), api_client=_ApiDownClient())

    result = access.predict(_request())

    assert result.data is None
    assert result.error == "Failed to connect to prediction service"


def test_predict_rejection_surfaces_backend_error() -> None:
    client = _StubClient(prediction=PredictionResponse(success=False, error="Unknown car model"))
    access = DashboardDataAccess(config=build_test_config(), api_client=client)

    result = access.predict(_request())

    assert result.error == "Unknown car model"


def test_predict_rejection_without_detail_uses_default_message() -> None:
    client = _StubClient(prediction=PredictionResponse(success=False))
    access = DashboardDataAccess(config=build_test_config(), api_client=client)

    result = access.predict(_request())

    assert result.error == "Prediction failed"


def test_load_model_analytics_fetches_both_payloads() -> None:
    client = _StubClient()
    access = DashboardDataAccess(config=build_test_config(), api_client=client)

    result = access.load_model_analytics()

    assert result.ok
    assert result.data is not None
    assert result.data.stats.sample_size == 1234
    assert len(result.data.scatter.actual) == 3
    assert all(name.startswith("analytics") for name in client.threads)


def test_load_model_analytics_fails_when_either_request_fails() -> None:
    access = DashboardDataAccess(config=build_test_config(), api_client=_BadScatterClient())

    result = access.load_model_analytics()

    assert result.data is None
    assert result.error == "Failed to load model analytics data"


def test_load_model_analytics_backend_down() -> None:
    access = DashboardDataAccess(config=build_test_config(), api_client=_ApiDownClient())

    result = access.load_model_analytics()

    assert result.error == "Failed to load model analytics data"
