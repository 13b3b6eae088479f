# This package groups reusable Streamlit components used by the dashboard pages.
# Sharing these helpers keeps page modules focused on layout and copy.

__all__ = ["charts", "navigation", "prediction_form", "summary_cards", "tables"]
