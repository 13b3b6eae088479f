# This file renders the car prediction form and validates its inputs.
# The search box narrows the model list through the backend catalogue.
# Streamlit submits the search term on Enter or blur, and each submitted change is debounced.
# Year and mileage accept digits only; anything else is stripped as the user types.
# Validation happens before any request so the backend only sees complete inputs.

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from datetime import date
from typing import Any

import streamlit as st
from pydantic import ValidationError

from src.car_price_dashboard.dashboard_config import DashboardConfig
from src.car_price_dashboard.data_access import DashboardDataAccess, ViewResult
from src.car_price_dashboard.formatting import digits_only
from src.car_price_dashboard.schemas import PredictionRequest
from src.car_price_dashboard.search import SearchDebouncer
from src.car_price_dashboard.ui_text import (
    CAR_PLACEHOLDER,
    SEARCH_PLACEHOLDER,
    SEARCHING,
    SUBMIT_IDLE,
)

SEARCH_KEY = "car_search"
CAR_KEY = "car_name"
YEAR_KEY = "car_year"
MILES_KEY = "car_miles"
CARS_STATE_KEY = "available_cars"
CARS_ERROR_KEY = "car_catalog_error"
DEBOUNCER_KEY = "car_search_debouncer"
PREDICTION_ERROR_KEY = "prediction_error"


def initial_form_values(today: date | None = None) -> dict[str, str]:
    current_year = (today or date.today()).year
    return {CAR_KEY: "", YEAR_KEY: str(current_year), MILES_KEY: "0"}


def build_prediction_request(
    *,
    name: str,
    year_text: str,
    miles_text: str,
    min_year: int,
    max_year: int,
) -> tuple[PredictionRequest | None, list[str]]:
    errors: list[str] = []
    year_digits = digits_only(year_text)
    miles_digits = digits_only(miles_text)

    if not name:
        errors.append("Select a car model.")
    if not year_digits:
        errors.append("Year is required.")
    elif not min_year <= int(year_digits) <= max_year:
        errors.append(f"Year must be between {min_year} and {max_year}.")
    if not miles_digits:
        errors.append("Miles is required.")

    if errors:
        return None, errors
    try:
        request = PredictionRequest(name=name, year=int(year_digits), miles=int(miles_digits))
    except ValidationError as exc:
        return None, [_validation_message(error) for error in exc.errors()]
    return request, []


def _validation_message(error: Mapping[str, Any]) -> str:
    field = ".".join(str(part) for part in error.get("loc", ()))
    return f"{field.capitalize()}: {error.get('msg', 'invalid value')}."


def car_options(cars: list[str], selected: str) -> list[str]:
    options = [CAR_PLACEHOLDER, *cars]
    if selected and selected not in cars:
        options.append(selected)
    return options


def _sanitize(key: str) -> None:
    st.session_state[key] = digits_only(st.session_state.get(key))


def _ensure_state(config: DashboardConfig) -> SearchDebouncer:
    for key, value in initial_form_values().items():
        st.session_state.setdefault(key, value)
    st.session_state.setdefault(CARS_STATE_KEY, [])
    st.session_state.setdefault(CARS_ERROR_KEY, None)
    if DEBOUNCER_KEY not in st.session_state:
        st.session_state[DEBOUNCER_KEY] = SearchDebouncer(
            delay_seconds=config.search_debounce_seconds
        )
    return st.session_state[DEBOUNCER_KEY]


def apply_catalog_result(state: MutableMapping[str, Any], result: ViewResult[list[str]]) -> None:
    state[CARS_STATE_KEY] = result.data or []
    state[CARS_ERROR_KEY] = result.error
    # A reachable backend makes an earlier prediction connection error stale.
    if result.error is None:
        state[PREDICTION_ERROR_KEY] = None


def _refresh_catalog(
    *, term: str, debouncer: SearchDebouncer, data_access: DashboardDataAccess
) -> None:
    if not debouncer.settle(term):
        return
    status = st.empty()
    status.caption(SEARCHING)
    result = data_access.search_cars(term)
    status.empty()
    apply_catalog_result(st.session_state, result)
    debouncer.record(term)


def render_prediction_form(
    *,
    config: DashboardConfig,
    data_access: DashboardDataAccess,
    tooltips: dict[str, str],
) -> PredictionRequest | None:
    """Render the form and return a validated request when the user submits."""

    debouncer = _ensure_state(config)

    st.subheader("Predict Car Price")
    term = st.text_input(
        "Search Car Model",
        key=SEARCH_KEY,
        placeholder=SEARCH_PLACEHOLDER,
        help=tooltips["car_search"],
    )
    _refresh_catalog(term=term, debouncer=debouncer, data_access=data_access)

    selected = st.session_state.get(CAR_KEY) or ""
    options = car_options(st.session_state[CARS_STATE_KEY], selected)
    choice = st.selectbox(
        "Car model",
        options=options,
        index=options.index(selected) if selected in options else 0,
        label_visibility="collapsed",
    )
    st.session_state[CAR_KEY] = "" if choice == CAR_PLACEHOLDER else choice

    max_year = config.max_model_year()
    st.text_input(
        "Year",
        key=YEAR_KEY,
        on_change=_sanitize,
        args=(YEAR_KEY,),
        help=f"Model year between {config.min_model_year} and {max_year}.",
    )
    st.text_input("Miles", key=MILES_KEY, on_change=_sanitize, args=(MILES_KEY,))

    if not st.button(SUBMIT_IDLE, type="primary", use_container_width=True):
        return None

    request, errors = build_prediction_request(
        name=st.session_state[CAR_KEY],
        year_text=st.session_state[YEAR_KEY],
        miles_text=st.session_state[MILES_KEY],
        min_year=config.min_model_year,
        max_year=max_year,
    )
    for message in errors:
        st.warning(message)
    return request
