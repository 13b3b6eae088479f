# This package holds the top-level page renderers of the dashboard.
# Each page owns its layout, charts, and copy; app.py only dispatches between them.

__all__ = ["model_performance", "price_prediction"]
