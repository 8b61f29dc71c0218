import pytest

from ocean_forecast import ARGO_RANGES, VARIABLES, ForecastConfigError, range_of


def test_all_variables_present():
  assert VARIABLES == (
      "temperature",
      "salinity",
      "ph",
      "oxygen",
      "chlorophyll",
      "nitrate",
      "bbp700",
      "cdom",
      "downwelling_par",
  )


@pytest.mark.parametrize("variable", VARIABLES)
def test_bounds_are_ordered(variable):
  low, high = range_of(variable)
  assert low < high


def test_exact_bounds():
  assert range_of("temperature") == (26.51, 29.27)
  assert range_of("ph") == (7.9297, 8.0356)
  assert range_of("downwelling_par") == (168.58, 226.57)


def test_table_is_read_only():
  with pytest.raises(TypeError):
    ARGO_RANGES["temperature"] = (0.0, 1.0)


def test_unknown_variable_rejected():
  with pytest.raises(ForecastConfigError):
    range_of("turbidity")
