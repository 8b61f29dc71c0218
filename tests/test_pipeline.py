import pytest

from ocean_forecast import (
    ForecastConfigError,
    ForecastParams,
    generate_all_forecasts,
    generate_single_forecast,
    variable_seed,
)


@pytest.fixture
def params():
  return ForecastParams(training_days=40, horizon="14d", variables=("temperature", "salinity"))


def test_seeds_offset_by_position(params):
  data = generate_all_forecasts(params)
  assert [result.seed for result in data.results] == [40, 41]
  assert variable_seed(params, 0) == 40
  assert variable_seed(params, 1) == 41


def test_results_match_direct_generation(params):
  data = generate_all_forecasts(params)
  assert data.results[0] == generate_single_forecast("temperature", params, 40)
  assert data.results[1] == generate_single_forecast("salinity", params, 41)


def test_order_and_duplicates_preserved():
  params = ForecastParams(training_days=25, horizon="7d", variables=("oxygen", "ph", "oxygen"))
  data = generate_all_forecasts(params)
  assert [result.variable for result in data.results] == ["oxygen", "ph", "oxygen"]
  assert data.results[0].seed == 25
  assert data.results[2].seed == 27
  assert data.result_for("oxygen") is data.results[0]
  assert data.result_for("cdom") is None


def test_pipeline_is_reproducible(params):
  assert generate_all_forecasts(params) == generate_all_forecasts(params)


def test_accepts_camel_case_mapping():
  data = generate_all_forecasts({"trainingDays": 30, "horizon": "7d", "variables": ["temperature"]})
  assert data.params == ForecastParams(training_days=30, horizon="7d", variables=("temperature",))
  assert len(data.results[0].data) == 37
  assert data.results[0].stats.confidence == 44


def test_overall_narrative_preamble_and_confidence(params):
  data = generate_all_forecasts(params)
  assert data.narrative.startswith(
      "This forecast for the next **14d**, based on **40 days** of historical data"
  )
  assert "**Confidence:** The overall confidence in this forecast is **52%**." in data.narrative


def test_overall_confidence_rounds_half_up():
  params = ForecastParams(training_days=1, horizon="7d", variables=("temperature",))
  data = generate_all_forecasts(params)
  assert data.results[0].stats.confidence == 21
  assert "**21%**" in data.narrative


def _run(training_days, horizon, *variables):
  return generate_all_forecasts(
      ForecastParams(training_days=training_days, horizon=horizon, variables=variables)
  )


def test_temperature_increase_clause():
  data = _run(30, "7d", "temperature")
  assert data.results[0].stats.trend > 0.01
  assert "*   **Temperature:** A gradual increase is anticipated" in data.narrative


def test_temperature_decrease_clause(params):
  data = generate_all_forecasts(params)
  assert data.result_for("temperature").stats.trend < -0.01
  assert "*   **Temperature:** A slight decrease is anticipated" in data.narrative


def test_clauses_only_for_requested_variables():
  params = ForecastParams(training_days=60, horizon="7d", variables=("nitrate",))
  narrative = generate_all_forecasts(params).narrative
  assert "**Temperature:**" not in narrative
  assert "**Chlorophyll:**" not in narrative
  assert "**Oxygen:**" not in narrative
  assert "**Salinity & pH:**" not in narrative


def test_chlorophyll_rise_and_oxygen_clauses():
  data = _run(60, "7d", "chlorophyll", "oxygen")
  assert data.result_for("chlorophyll").stats.trend > 0.001
  assert "We expect a modest rise in chlorophyll" in data.narrative
  assert "*   **Oxygen:** Oxygen levels are projected to remain stable" in data.narrative


def test_chlorophyll_decline_clause():
  data = _run(25, "7d", "chlorophyll")
  assert data.results[0].stats.trend < -0.001
  assert "We expect a slight decline in chlorophyll" in data.narrative


def test_salinity_clause_present_for_flat_trend():
  data = _run(2, "30d", "salinity")
  assert abs(data.results[0].stats.trend) < 0.001
  assert "*   **Salinity & pH:** Both salinity and pH are expected to show minimal variation" in data.narrative


def test_salinity_clause_absent_for_moving_trend():
  data = _run(40, "30d", "salinity")
  assert abs(data.results[0].stats.trend) > 0.001
  assert "**Salinity & pH:**" not in data.narrative


@pytest.mark.parametrize("kwargs", [
    dict(training_days=0, horizon="7d", variables=("temperature",)),
    dict(training_days=-3, horizon="7d", variables=("temperature",)),
    dict(training_days=True, horizon="7d", variables=("temperature",)),
    dict(training_days=7.5, horizon="7d", variables=("temperature",)),
    dict(training_days=30, horizon=7, variables=("temperature",)),
    dict(training_days=30, horizon="7d", variables=()),
    dict(training_days=30, horizon="7d", variables="temperature"),
    dict(training_days=30, horizon="7d", variables=("temperature", "turbidity")),
])
def test_invalid_configuration_rejected(kwargs):
  with pytest.raises(ForecastConfigError):
    ForecastParams(**kwargs)


def test_missing_keys_rejected():
  with pytest.raises(ForecastConfigError):
    ForecastParams.from_dict({"horizon": "7d", "variables": ["temperature"]})
  with pytest.raises(ForecastConfigError):
    ForecastParams.from_dict({"trainingDays": 10, "variables": ["temperature"]})


def test_params_are_frozen(params):
  with pytest.raises(AttributeError):
    params.training_days = 10
