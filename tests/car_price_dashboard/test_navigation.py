# This test file checks the page keys used by the shared navigation chrome.

from __future__ import annotations

from src.car_price_dashboard.components.navigation import NAV_ITEMS, resolve_page_key


def test_nav_items_cover_both_pages() -> None:
    assert [(item.name, item.key) for item in NAV_ITEMS] == [
        ("Home", "home"),
        ("Model Performance", "model"),
    ]


def test_unknown_page_falls_back_to_home() -> None:
    assert resolve_page_key("model") == "model"
    assert resolve_page_key("admin") == "home"
    assert resolve_page_key(None) == "home"
