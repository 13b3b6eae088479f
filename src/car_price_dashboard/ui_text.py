# This file stores copy blocks for headings, loading states, and error messages.
# It exists so wording stays consistent between pages and tests.

from __future__ import annotations

APP_TITLE = "Car Price Prediction"

PREDICTION_PAGE_TITLE = "Car Price Prediction Dashboard"
MODEL_PAGE_TITLE = "Model Performance Analytics"

CAR_PLACEHOLDER = "Select a car model"
SEARCH_PLACEHOLDER = "Start typing to search..."
SEARCHING = "Loading..."
SUBMIT_IDLE = "Predict Price"
SUBMIT_BUSY = "Predicting..."

ERROR_CAR_CATALOG = "Failed to load car models"
ERROR_PREDICTION_SERVICE = "Failed to connect to prediction service"
ERROR_PREDICTION_FAILED = "Prediction failed"
ERROR_MODEL_ANALYTICS = "Failed to load model analytics data"

LOADING_MODEL_ANALYTICS = "Loading model analytics..."
EMPTY_MODEL_ANALYTICS = "No data available"
EMPTY_PREDICTION = "Submit a car to see its predicted price."
