"""Fluent client for the Image-Charts chart rendering API."""

from __future__ import annotations

__version__ = "6.1.0"

from .builder import ChartConfig, ImageCharts  # noqa: E402
from .errors import ImageChartsError  # noqa: E402
from .parameters import PARAMETERS, ChartParameter  # noqa: E402

__all__ = [
    "__version__",
    "ChartConfig",
    "ChartParameter",
    "ImageCharts",
    "ImageChartsError",
    "PARAMETERS",
]
