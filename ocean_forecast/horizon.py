"""Resolution of horizon descriptors such as '7d' or '3 months' into days."""

from __future__ import annotations

import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_DAYS = 30

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> Optional[int]:
  match = _LEADING_INT.match(text)
  return int(match.group(1)) if match else None


def _explicit_days(horizon: str) -> Optional[int]:
  """Day count of a recognized horizon, None when the 30-day fallback applies."""
  if horizon.endswith("d"):
    days = _leading_int(horizon[:-1])
    return days if days is not None and days > 0 else None
  if "month" in horizon:
    return DEFAULT_HORIZON_DAYS
  return None


def horizon_is_recognized(horizon: str) -> bool:
  """False when ``resolve_horizon_days`` has to fall back to the default."""
  return _explicit_days(horizon) is not None


def resolve_horizon_days(horizon: str) -> int:
  """Returns the forecast length in days; never raises for string input.

  A trailing 'd' reads the leading integer as a day count. Month
  descriptors resolve to 30 days, and so does anything unparseable.
  """
  days = _explicit_days(horizon)
  if days is None:
    logger.debug(f"Unrecognized horizon {horizon!r}; using {DEFAULT_HORIZON_DAYS} days")
    return DEFAULT_HORIZON_DAYS
  return days
