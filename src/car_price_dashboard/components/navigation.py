# This file renders the navigation chrome shared by every dashboard page.
# The selected page is mirrored into the `page` query parameter so pages can be deep-linked.

from __future__ import annotations

from dataclasses import dataclass

import streamlit as st


@dataclass(frozen=True)
class NavItem:
    name: str
    key: str


NAV_ITEMS: tuple[NavItem, ...] = (
    NavItem(name="Home", key="home"),
    NavItem(name="Model Performance", key="model"),
)

DEFAULT_PAGE = NAV_ITEMS[0].key


def resolve_page_key(requested: str | None) -> str:
    keys = {item.key for item in NAV_ITEMS}
    return requested if requested in keys else DEFAULT_PAGE


def render_navigation(*, title: str) -> str:
    st.sidebar.title(title)

    current = resolve_page_key(st.query_params.get("page"))
    labels = [item.name for item in NAV_ITEMS]
    index = next(i for i, item in enumerate(NAV_ITEMS) if item.key == current)

    selected_label = st.sidebar.radio("Navigation", options=labels, index=index)
    selected = next(item.key for item in NAV_ITEMS if item.name == selected_label)

    if st.query_params.get("page") != selected:
        st.query_params["page"] = selected
    return selected
