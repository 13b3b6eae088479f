# This file is the Streamlit entrypoint for the car price dashboard.
# It wires configuration, logging, and the shared navigation chrome, then dispatches to the selected page.
# Run it with `streamlit run src/car_price_dashboard/app.py`.
# ruff: noqa: E402

from __future__ import annotations

import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import streamlit as st

from src.car_price_dashboard.components.navigation import render_navigation
from src.car_price_dashboard.dashboard_config import load_dashboard_config
from src.car_price_dashboard.data_access import DashboardDataAccess
from src.car_price_dashboard.page_views import model_performance, price_prediction
from src.car_price_dashboard.tooltips import TOOLTIPS
from src.car_price_dashboard.ui_text import APP_TITLE
from src.common.logging import configure_logging

PAGES = {
    "home": price_prediction.render,
    "model": model_performance.render,
}


@st.cache_resource
def get_data_access() -> DashboardDataAccess:
    config = load_dashboard_config()
    return DashboardDataAccess(config=config)


def main() -> None:
    st.set_page_config(page_title=APP_TITLE, layout="wide")
    configure_logging()

    config = load_dashboard_config()
    data_access = get_data_access()

    page = render_navigation(title=APP_TITLE)
    PAGES[page](config=config, data_access=data_access, tooltips=TOOLTIPS)


if __name__ == "__main__":
    main()
