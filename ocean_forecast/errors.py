"""Exceptions raised at the configuration boundary."""


class ForecastConfigError(ValueError):
  """Raised when forecast parameters cannot describe a valid run."""
