# This package contains the Streamlit dashboard for the car price prediction service.
# It lets users request a price for a specific car and review how well the backend model performs.
# The modules separate the HTTP client, view shaping, UI components, and page rendering.

__all__ = ["app"]
