"""Deterministic synthetic sensor forecasts for presentation."""

from .base import ForecastData, ForecastDataPoint, ForecastParams, ForecastResult, ForecastStats
from .errors import ForecastConfigError
from .generator import confidence_percent, generate_single_forecast
from .horizon import horizon_is_recognized, resolve_horizon_days
from .pipeline import generate_all_forecasts, variable_seed
from .random_source import mulberry32
from .ranges import ARGO_RANGES, VARIABLES, range_of
from .serialization import forecast_data_to_dict, forecast_data_to_json

__all__ = [
    "ARGO_RANGES",
    "VARIABLES",
    "ForecastConfigError",
    "ForecastData",
    "ForecastDataPoint",
    "ForecastParams",
    "ForecastResult",
    "ForecastStats",
    "confidence_percent",
    "forecast_data_to_dict",
    "forecast_data_to_json",
    "generate_all_forecasts",
    "generate_single_forecast",
    "horizon_is_recognized",
    "mulberry32",
    "range_of",
    "resolve_horizon_days",
    "variable_seed",
]
