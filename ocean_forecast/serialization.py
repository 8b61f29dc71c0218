"""JSON-ready export of generated forecasts for the presentation layer."""

from __future__ import annotations

import json
from typing import Dict, List

from .base import ForecastData, ForecastDataPoint, ForecastParams, ForecastResult


def params_to_dict(params: ForecastParams) -> Dict[str, object]:
  return {
      "trainingDays": params.training_days,
      "horizon": params.horizon,
      "variables": list(params.variables),
  }


def _point_to_dict(point: ForecastDataPoint) -> Dict[str, object]:
  payload: Dict[str, object] = {"day": point.day, "value": point.value, "type": point.type}
  if point.confidence is not None:
    payload["confidence"] = list(point.confidence)
  return payload


def result_to_dict(result: ForecastResult) -> Dict[str, object]:
  stats = result.stats
  return {
      "variable": result.variable,
      "data": [_point_to_dict(point) for point in result.data],
      "stats": {
          "min": stats.min,
          "max": stats.max,
          "trend": stats.trend,
          "confidence": stats.confidence,
          "narrative": stats.narrative,
      },
      "range": list(result.range),
  }


def forecast_data_to_dict(data: ForecastData) -> Dict[str, object]:
  """Plain dict/list structure keyed the way the dashboard expects."""
  results: List[Dict[str, object]] = [result_to_dict(result) for result in data.results]
  return {"params": params_to_dict(data.params), "results": results, "narrative": data.narrative}


def forecast_data_to_json(data: ForecastData, *, indent: int = 2) -> str:
  return json.dumps(forecast_data_to_dict(data), indent=indent)
