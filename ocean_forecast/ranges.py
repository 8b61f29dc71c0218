"""Physically plausible bounds for each supported sensor variable."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import ForecastConfigError

ARGO_RANGES: Mapping[str, Tuple[float, float]] = MappingProxyType({
    "temperature": (26.51, 29.27),
    "salinity": (35.28, 35.70),
    "ph": (7.9297, 8.0356),
    "oxygen": (5.4508, 6.1149),
    "chlorophyll": (0.94599, 1.27193),
    "nitrate": (1.63915, 2.08097),
    "bbp700": (0.003708, 0.024895),
    "cdom": (0.25337, 0.31673),
    "downwelling_par": (168.58, 226.57),
})

VARIABLES: Tuple[str, ...] = tuple(ARGO_RANGES)


def range_of(variable: str) -> Tuple[float, float]:
  """Returns the (min, max) bound used to scale and clamp a variable."""
  try:
    return ARGO_RANGES[variable]
  except KeyError as exc:
    raise ForecastConfigError(
        f"Unknown variable '{variable}'; expected one of {', '.join(VARIABLES)}."
    ) from exc
