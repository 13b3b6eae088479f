# This file defines the request and response models of the prediction backend.
# It exists so every payload the dashboard consumes is validated once, at the client boundary.
# Pages work with these typed objects instead of raw dictionaries.
# The backend owns the contract; these models only describe what the dashboard relies on.

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CarsResponse(BaseModel):
    cars: list[str]
    total: int = Field(ge=0)


class PredictionRequest(BaseModel):
    name: str = Field(min_length=1)
    year: int = Field(ge=1900)
    miles: int = Field(ge=0)


class PredictionResponse(BaseModel):
    predicted_price: float | None = None
    success: bool
    error: str | None = None


class RegressionMetrics(BaseModel):
    mse: float
    rmse: float
    mae: float
    r2: float


class PriceDistribution(BaseModel):
    labels: list[str]
    values: list[int]

    @model_validator(mode="after")
    def _check_lengths(self) -> PriceDistribution:
        if len(self.labels) != len(self.values):
            raise ValueError("price_distribution labels and values must have the same length")
        return self


class ErrorPercentiles(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    p25: float = Field(alias="25th")
    p50: float = Field(alias="50th")
    p75: float = Field(alias="75th")


class ErrorDistribution(BaseModel):
    mean_error: float
    std_error: float
    error_percentiles: ErrorPercentiles


class ModelStats(BaseModel):
    metrics: RegressionMetrics
    price_distribution: PriceDistribution
    error_distribution: ErrorDistribution
    accuracy_by_range: dict[str, float]
    year_performance: dict[str, float]
    sample_size: int = Field(ge=0)
    timestamp: str


class ScatterData(BaseModel):
    actual: list[float]
    predicted: list[float]
    years: list[int]
    miles: list[float]

    @model_validator(mode="after")
    def _check_lengths(self) -> ScatterData:
        lengths = {len(self.actual), len(self.predicted), len(self.years), len(self.miles)}
        if len(lengths) > 1:
            raise ValueError("prediction scatter arrays must have the same length")
        return self
