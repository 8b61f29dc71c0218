"""Shared forecasting datatypes for synthetic sensor series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

import numpy as np

from .errors import ForecastConfigError
from .ranges import ARGO_RANGES

HISTORICAL = "historical"
FORECAST = "forecast"


@dataclass(frozen=True)
class ForecastParams:
  """Generation inputs shared by every requested variable."""

  training_days: int
  horizon: str
  variables: Tuple[str, ...]

  def __post_init__(self) -> None:
    if isinstance(self.training_days, bool) or not isinstance(self.training_days, int):
      raise ForecastConfigError(
          f"training_days must be an integer, got {type(self.training_days).__name__}."
      )
    if self.training_days <= 0:
      raise ForecastConfigError("training_days must be positive.")
    if not isinstance(self.horizon, str):
      raise ForecastConfigError("horizon must be a string such as '7d' or '3 months'.")
    if isinstance(self.variables, str):
      raise ForecastConfigError("variables must be a sequence of variable names, not a string.")
    variables = tuple(self.variables)
    if not variables:
      raise ForecastConfigError("At least one variable is required.")
    unknown = [name for name in variables if name not in ARGO_RANGES]
    if unknown:
      raise ForecastConfigError(
          f"Unknown variable(s) {', '.join(map(str, unknown))}; expected one of {', '.join(ARGO_RANGES)}."
      )
    object.__setattr__(self, "variables", variables)

  @classmethod
  def from_dict(cls, payload: Mapping[str, object]) -> "ForecastParams":
    """Builds params from either snake_case or presentation-layer camelCase keys."""
    training_days = payload.get("training_days", payload.get("trainingDays"))
    if training_days is None:
      raise ForecastConfigError("trainingDays is required.")
    if "horizon" not in payload:
      raise ForecastConfigError("horizon is required.")
    return cls(
        training_days=training_days,  # type: ignore[arg-type]
        horizon=payload["horizon"],  # type: ignore[arg-type]
        variables=tuple(payload.get("variables") or ()),  # type: ignore[arg-type]
    )


@dataclass(frozen=True)
class ForecastDataPoint:
  """One labelled sample of a generated series."""

  day: str
  value: float
  type: str
  confidence: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class ForecastStats:
  """Summary statistics computed over the forecast segment only."""

  min: float
  max: float
  trend: float
  confidence: int
  narrative: str


@dataclass(frozen=True)
class ForecastResult:
  """Historical and forecast points generated for a single variable."""

  variable: str
  data: Tuple[ForecastDataPoint, ...]
  stats: ForecastStats
  range: Tuple[float, float]
  seed: Optional[int] = None

  @property
  def historical(self) -> Tuple[ForecastDataPoint, ...]:
    return tuple(point for point in self.data if point.type == HISTORICAL)

  @property
  def forecast(self) -> Tuple[ForecastDataPoint, ...]:
    return tuple(point for point in self.data if point.type == FORECAST)

  @property
  def horizon_days(self) -> int:
    return len(self.forecast)

  @property
  def values(self) -> np.ndarray:
    return np.asarray([point.value for point in self.data], dtype=np.float64)

  @property
  def point_forecast(self) -> np.ndarray:
    return np.asarray([point.value for point in self.forecast], dtype=np.float64)

  @property
  def confidence_bands(self) -> np.ndarray:
    """Forecast bands as an array of shape (horizon_days, 2)."""
    bands = [point.confidence for point in self.forecast if point.confidence is not None]
    return np.asarray(bands, dtype=np.float64).reshape(-1, 2)


@dataclass(frozen=True)
class ForecastData:
  """Top-level output handed to the presentation layer."""

  params: ForecastParams
  results: Tuple[ForecastResult, ...]
  narrative: str

  def result_for(self, variable: str) -> Optional[ForecastResult]:
    return next((result for result in self.results if result.variable == variable), None)

