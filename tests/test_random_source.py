import pytest

from ocean_forecast.random_source import mulberry32


def _draw(seed, count=50):
  random = mulberry32(seed)
  return [random() for _ in range(count)]


@pytest.mark.parametrize("seed", [0, 1, 40, 2**31 - 1, 123456789])
def test_values_in_unit_interval(seed):
  for value in _draw(seed, 500):
    assert 0.0 <= value < 1.0


def test_same_seed_same_stream():
  assert _draw(42) == _draw(42)


def test_different_seeds_diverge():
  assert _draw(40) != _draw(41)


def test_seed_wraps_to_32_bits():
  assert _draw(-1) == _draw(2**32 - 1)
  assert _draw(7) == _draw(7 + 2**32)


def test_generators_do_not_share_state():
  first = mulberry32(5)
  second = mulberry32(5)
  a = first()
  first()
  assert second() == a


def test_matches_reference_stream():
  random = mulberry32(40)
  assert [random() for _ in range(3)] == [0.6392705824691802, 0.8165256746578962, 0.0265142775606364]
