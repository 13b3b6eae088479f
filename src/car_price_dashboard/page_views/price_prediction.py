# This file renders the home page: the prediction form, the latest result, and the session history.
# A successful prediction is appended to a rolling history kept in session state.
# Failures surface as one static message and leave the previous result in place.

from __future__ import annotations

import streamlit as st

from src.car_price_dashboard.components.charts import render_history_chart
from src.car_price_dashboard.components.prediction_form import (
    CARS_ERROR_KEY,
    PREDICTION_ERROR_KEY,
    render_prediction_form,
)
from src.car_price_dashboard.components.summary_cards import render_prediction_detail_cards
from src.car_price_dashboard.dashboard_config import DashboardConfig
from src.car_price_dashboard.data_access import DashboardDataAccess
from src.car_price_dashboard.formatting import format_miles, format_price
from src.car_price_dashboard.history import PredictionHistory, PredictionRecord
from src.car_price_dashboard.ui_text import EMPTY_PREDICTION, PREDICTION_PAGE_TITLE, SUBMIT_BUSY

HISTORY_KEY = "prediction_history"


def price_headline(record: PredictionRecord) -> str:
    return f"Predicted Price: {format_price(record.price)}"


def _history(config: DashboardConfig) -> PredictionHistory:
    if HISTORY_KEY not in st.session_state:
        st.session_state[HISTORY_KEY] = PredictionHistory(max_items=config.history_size)
    return st.session_state[HISTORY_KEY]


def render(
    *,
    config: DashboardConfig,
    data_access: DashboardDataAccess,
    tooltips: dict[str, str],
) -> None:
    st.header(PREDICTION_PAGE_TITLE)
    history = _history(config)

    form_col, result_col = st.columns(2)

    with form_col:
        request = render_prediction_form(config=config, data_access=data_access, tooltips=tooltips)
        if request is not None:
            with st.spinner(SUBMIT_BUSY):
                result = data_access.predict(request)
            st.session_state[PREDICTION_ERROR_KEY] = result.error
            if result.data is not None:
                history.append(result.data)

        error = st.session_state.get(PREDICTION_ERROR_KEY) or st.session_state.get(CARS_ERROR_KEY)
        if error:
            st.error(error)

    with result_col:
        st.subheader("Prediction Results")
        latest = history.latest
        if latest is None:
            st.caption(EMPTY_PREDICTION)
        else:
            # A bare dollar sign opens LaTeX in Streamlit markdown.
            headline = price_headline(latest).replace("$", "\\$")
            st.markdown(f"### :green[{headline}]")
            render_prediction_detail_cards(
                car=latest.name,
                year=str(latest.year),
                miles=format_miles(latest.miles),
            )

    render_history_chart(history.to_frame(), help_text=tooltips["prediction_history_chart"])
