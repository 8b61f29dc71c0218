"""Runs the single-variable generator across every requested variable."""

from __future__ import annotations

import logging
from typing import Mapping, Union

from .base import ForecastData, ForecastParams
from .generator import generate_single_forecast
from .narrative import overall_narrative

logger = logging.getLogger(__name__)


def variable_seed(params: ForecastParams, index: int) -> int:
  """Seed for the variable at ``index``: training days offset by position."""
  return params.training_days + index


def generate_all_forecasts(params: Union[ForecastParams, Mapping[str, object]]) -> ForecastData:
  """Generates one result per requested variable plus the overall narrative."""
  if not isinstance(params, ForecastParams):
    params = ForecastParams.from_dict(params)

  results = tuple(
      generate_single_forecast(variable, params, variable_seed(params, index))
      for index, variable in enumerate(params.variables)
  )
  logger.debug(f"Generated {len(results)} forecast(s) for horizon {params.horizon!r}")
  return ForecastData(params=params, results=results, narrative=overall_narrative(results, params))
