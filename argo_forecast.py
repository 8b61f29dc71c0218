"""Command-line entry point for generating synthetic sensor forecasts."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from ocean_forecast import (
    VARIABLES,
    ForecastConfigError,
    ForecastParams,
    forecast_data_to_json,
    generate_all_forecasts,
    horizon_is_recognized,
    resolve_horizon_days,
)

DEFAULT_TRAINING_DAYS = 60
DEFAULT_HORIZON = "30d"


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
      description="Generate deterministic synthetic forecasts for ocean sensor variables."
  )
  parser.add_argument(
      "--training-days",
      type=int,
      default=DEFAULT_TRAINING_DAYS,
      help=f"Length of the synthetic historical window in days (default: {DEFAULT_TRAINING_DAYS}).",
  )
  parser.add_argument(
      "--horizon",
      default=DEFAULT_HORIZON,
      help="Forecast horizon such as 7d, 30d or '3 months'. Unrecognized values fall back to 30 days.",
  )
  parser.add_argument(
      "--variables",
      nargs="+",
      default=["temperature"],
      choices=VARIABLES,
      help="Variables to forecast, in output order (default: temperature).",
  )
  parser.add_argument("--json-path", help="Write the full forecast payload as JSON to this path.")
  parser.add_argument(
      "--chart-path",
      help="Render a plotly chart to this path (.html for interactive output, image formats need kaleido).",
  )
  parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
  return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
  parser = build_parser()
  args = parser.parse_args(argv)

  if args.verbose:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

  try:
    params = ForecastParams(
        training_days=args.training_days,
        horizon=args.horizon,
        variables=tuple(args.variables),
    )
  except ForecastConfigError as exc:
    parser.error(str(exc))

  if not horizon_is_recognized(params.horizon):
    print(
        f"Warning: horizon '{params.horizon}' not recognized; using {resolve_horizon_days(params.horizon)} days.",
        file=sys.stderr,
    )
  if params.training_days > 120:
    print(
        "Warning: training windows above 120 days invert the forecast noise and collapse the confidence bands.",
        file=sys.stderr,
    )

  data = generate_all_forecasts(params)

  for result in data.results:
    print(f"[{result.variable}] seed={result.seed} points={len(result.data)} {result.stats.narrative}")
  print()
  print(data.narrative)

  if args.json_path:
    Path(args.json_path).write_text(forecast_data_to_json(data), encoding="utf-8")
    print(f"\nSaved forecast JSON to {args.json_path}")

  if args.chart_path:
    from ocean_forecast.plotting import build_forecast_figure, write_forecast_figure

    written = write_forecast_figure(build_forecast_figure(data), args.chart_path)
    print(f"Saved chart to {written}")

  return 0


if __name__ == "__main__":
  raise SystemExit(main())
