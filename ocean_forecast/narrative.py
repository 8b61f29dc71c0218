"""Human-readable summaries for single-variable and combined forecasts."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from .base import ForecastParams, ForecastResult

HIGH_UNCERTAINTY_MAX_TRAINING = 20
BALANCED_MAX_TRAINING = 50
STABLE_TREND_THRESHOLD = 0.01
STABLE_SALINITY_TREND = 0.001


def round_half_up(value: float) -> int:
  return int(math.floor(value + 0.5))


def _confidence_clause(training_days: int, confidence: int) -> str:
  if training_days <= HIGH_UNCERTAINTY_MAX_TRAINING:
    return f"High uncertainty ({confidence}% confidence) due to short training period. Bands are wide. "
  if training_days <= BALANCED_MAX_TRAINING:
    return f"Balanced confidence ({confidence}%) with some seasonal patterns emerging. "
  return f"Strong confidence ({confidence}%) with clear seasonal cycle. Bands are narrow. "


def _trend_clause(trend: float) -> str:
  if abs(trend * 100) > STABLE_TREND_THRESHOLD:
    direction = "warming" if trend > 0 else "cooling"
    return f"A {direction} trend of approx. {trend:.3f}/day is detected."
  return "The trend appears stable."


def variable_narrative(
    training_days: int,
    confidence: int,
    forecast_min: float,
    forecast_max: float,
    trend: float,
) -> str:
  """Confidence tier, forecast value range and trend for one variable."""
  return (
      _confidence_clause(training_days, confidence)
      + f"Forecast shows values between {forecast_min:.2f} and {forecast_max:.2f}. "
      + _trend_clause(trend)
  )


def _first(results: Sequence[ForecastResult], variable: str) -> Optional[ForecastResult]:
  return next((result for result in results if result.variable == variable), None)


def overall_confidence(results: Sequence[ForecastResult]) -> int:
  """Average per-variable confidence, rounded half up."""
  return round_half_up(sum(result.stats.confidence for result in results) / len(results))


def overall_narrative(results: Sequence[ForecastResult], params: ForecastParams) -> str:
  """Markdown summary of cross-variable trends for the presentation layer."""
  lines: List[str] = [
      f"This forecast for the next **{params.horizon}**, based on **{params.training_days} days** "
      "of historical data, suggests the following key trends:\n\n"
  ]

  temperature = _first(results, "temperature")
  if temperature is not None:
    change = "gradual increase" if temperature.stats.trend > 0 else "slight decrease"
    lines.append(
        f"*   **Temperature:** A {change} is anticipated, with values remaining within the historical range. "
        "Peak temperature is expected around the end of the forecast period.\n"
    )

  chlorophyll = _first(results, "chlorophyll")
  if chlorophyll is not None:
    change = "modest rise" if chlorophyll.stats.trend > 0 else "slight decline"
    lines.append(
        f"*   **Chlorophyll:** We expect a {change} in chlorophyll, consistent with seasonal patterns. "
        "No significant bloom events are forecasted.\n"
    )

  if _first(results, "oxygen") is not None:
    lines.append(
        "*   **Oxygen:** Oxygen levels are projected to remain stable, with minor fluctuations potentially "
        "linked to temperature shifts. Overall ocean health appears steady.\n"
    )

  salinity = _first(results, "salinity")
  if salinity is not None and abs(salinity.stats.trend) < STABLE_SALINITY_TREND:
    lines.append(
        "*   **Salinity & pH:** Both salinity and pH are expected to show minimal variation, "
        "indicating stable chemical conditions.\n"
    )

  lines.append(
      f"\n**Confidence:** The overall confidence in this forecast is **{overall_confidence(results)}%**. "
      "Longer training periods generally yield higher confidence."
  )
  return "".join(lines)
