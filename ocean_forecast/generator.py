"""Synthetic historical series and extrapolated forecast for one variable."""

from __future__ import annotations

import logging
import math
from typing import List

import numpy as np

from .base import FORECAST, HISTORICAL, ForecastDataPoint, ForecastParams, ForecastResult, ForecastStats
from .horizon import resolve_horizon_days
from .narrative import round_half_up, variable_narrative
from .random_source import RandomSource, mulberry32
from .ranges import range_of

logger = logging.getLogger(__name__)

ANNUAL_PERIOD = 365
MONTHLY_PERIOD = 30
SINUSOID_WEIGHT = 0.25
HISTORICAL_NOISE = 0.1

SEASONAL_NAIVE_MAX_TRAINING = 20
TREND_MIN_TRAINING = 30
NOISE_SPAN = 0.2
TREND_SPAN = 0.01
SEASONAL_SCALE = 0.1
BAND_HALF_WIDTH = 0.075
DECAY_DAYS = 120


def confidence_percent(training_days: int) -> int:
  """Integer confidence percent; exceeds 100 past 100 training days."""
  return round_half_up(training_days / 100 * 80 + 20)


def _clamp(value: float, lower: float, upper: float) -> float:
  return max(lower, min(upper, value))


def _historical_values(
    training_days: int, low: float, high: float, random: RandomSource
) -> np.ndarray:
  """Two weighted sinusoids plus seeded noise, scaled into [low, high]."""
  span = high - low
  steps = np.arange(training_days, dtype=np.float64)
  sinusoidal = (
      np.sin((steps / ANNUAL_PERIOD) * np.pi * 2) * SINUSOID_WEIGHT
      + np.sin((steps / MONTHLY_PERIOD) * np.pi * 2) * SINUSOID_WEIGHT
  )
  noise = (np.asarray([random() for _ in range(training_days)], dtype=np.float64) - 0.5) * HISTORICAL_NOISE
  normalized = 0.5 + 0.5 * (sinusoidal + noise)
  return np.clip(low + normalized * span, low, high)


def _seasonal_naive(history: np.ndarray, step: int, last_val: float) -> float:
  """Value one monthly period back from the synthetic position, minus last_val.

  Positions before the start of the history fall back to last_val, so the
  component is zero there.
  """
  index = len(history) - (MONTHLY_PERIOD - (step % MONTHLY_PERIOD))
  reference = float(history[index]) if 0 <= index < len(history) else last_val
  return reference - last_val


def generate_single_forecast(
    variable: str, params: ForecastParams, seed: int
) -> ForecastResult:
  """Builds the historical + forecast series, bands, stats and narrative."""
  random = mulberry32(seed)
  training_days = params.training_days
  horizon_days = resolve_horizon_days(params.horizon)
  low, high = range_of(variable)
  span = high - low
  logger.debug(
      f"Generating {variable}: seed={seed}, training_days={training_days}, horizon_days={horizon_days}"
  )

  history = _historical_values(training_days, low, high, random)
  historical_points: List[ForecastDataPoint] = [
      ForecastDataPoint(day=f"D-{training_days - i}", value=float(value), type=HISTORICAL)
      for i, value in enumerate(history)
  ]

  last_val = float(history[-1]) if len(history) else low + span / 2
  seasonal_amplitude = (training_days / 100) * 0.5 if training_days > TREND_MIN_TRAINING else 0.0
  trend = (random() - 0.5) * (span * TREND_SPAN) if training_days > TREND_MIN_TRAINING else 0.0
  # Goes negative past DECAY_DAYS; the noise keeps the sign flip, the band does not.
  decay = 1 - training_days / DECAY_DAYS
  half_width = span * BAND_HALF_WIDTH * max(decay, 0.0)

  forecast_points: List[ForecastDataPoint] = []
  for i in range(horizon_days):
    if training_days <= SEASONAL_NAIVE_MAX_TRAINING:
      seasonal = _seasonal_naive(history, i, last_val)
    else:
      seasonal = (
          math.sin(((training_days + i) / ANNUAL_PERIOD) * math.pi * 2)
          * span * SEASONAL_SCALE * seasonal_amplitude
      )
    noise = (random() - 0.5) * span * NOISE_SPAN * decay
    next_val = _clamp(last_val + seasonal + trend + noise, low, high)
    lower = max(low, next_val - half_width)
    upper = min(high, next_val + half_width)
    forecast_points.append(
        ForecastDataPoint(day=f"D+{i + 1}", value=next_val, type=FORECAST, confidence=(lower, upper))
    )
    last_val = next_val

  forecast_values = np.asarray([point.value for point in forecast_points], dtype=np.float64)
  forecast_min = float(np.min(forecast_values))
  forecast_max = float(np.max(forecast_values))
  forecast_trend = float((forecast_values[-1] - forecast_values[0]) / horizon_days)
  confidence = confidence_percent(training_days)

  stats = ForecastStats(
      min=forecast_min,
      max=forecast_max,
      trend=forecast_trend,
      confidence=confidence,
      narrative=variable_narrative(
          training_days, confidence, forecast_min, forecast_max, forecast_trend
      ),
  )
  return ForecastResult(
      variable=variable,
      data=tuple(historical_points + forecast_points),
      stats=stats,
      range=(low, high),
      seed=seed,
  )
