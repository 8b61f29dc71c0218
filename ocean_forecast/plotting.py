"""Plotly rendering of historical and forecast segments with confidence bands."""

from __future__ import annotations

import logging
from pathlib import Path

from .base import ForecastData

logger = logging.getLogger(__name__)


def _import_plotly():
  try:
    import plotly.graph_objects as go
    from plotly.subplots import make_subplots
  except ImportError as exc:  # pragma: no cover
    raise SystemExit("plotly is required for plotting; install with `pip install plotly`.") from exc
  return go, make_subplots


def build_forecast_figure(data: ForecastData):
  """One subplot row per variable: history, forecast and shaded band."""
  if not data.results:
    raise ValueError("At least one forecast result is required for rendering.")

  go, make_subplots = _import_plotly()
  num_rows = len(data.results)
  fig = make_subplots(
      rows=num_rows,
      cols=1,
      vertical_spacing=0.09 if num_rows > 1 else 0.04,
      subplot_titles=[result.variable for result in data.results],
  )

  for row_index, result in enumerate(data.results, start=1):
    showlegend = row_index == 1
    history = result.historical
    forecast = result.forecast
    forecast_days = [point.day for point in forecast]
    bands = result.confidence_bands

    fig.add_trace(
        go.Scatter(
            x=[point.day for point in history],
            y=[point.value for point in history],
            mode="lines",
            name="historical",
            line=dict(color="#1f77b4", width=2.0),
            legendgroup="historical",
            showlegend=showlegend,
        ),
        row=row_index,
        col=1,
    )

    if len(bands):
      fig.add_trace(
          go.Scatter(
              x=forecast_days,
              y=bands[:, 1],
              mode="lines",
              line=dict(color="rgba(255,127,14,0)"),
              showlegend=False,
              hoverinfo="skip",
          ),
          row=row_index,
          col=1,
      )
      fig.add_trace(
          go.Scatter(
              x=forecast_days,
              y=bands[:, 0],
              mode="lines",
              line=dict(color="rgba(255,127,14,0)"),
              fill="tonexty",
              fillcolor="rgba(255,127,14,0.18)",
              name="confidence band",
              hoverinfo="skip",
              legendgroup="interval",
              showlegend=showlegend,
          ),
          row=row_index,
          col=1,
      )

    fig.add_trace(
        go.Scatter(
            x=forecast_days,
            y=result.point_forecast,
            mode="lines",
            name="forecast",
            line=dict(color="#ff7f0e", width=2.0),
            legendgroup="forecast",
            showlegend=showlegend,
        ),
        row=row_index,
        col=1,
    )

    low, high = result.range
    fig.update_yaxes(range=[low, high], row=row_index, col=1)
    xref = "x domain" if row_index == 1 else f"x{row_index} domain"
    yref = "y domain" if row_index == 1 else f"y{row_index} domain"
    fig.add_annotation(
        text=f"Confidence: {result.stats.confidence}%",
        xref=xref,
        yref=yref,
        x=0.98,
        y=0.98,
        showarrow=False,
        font=dict(size=12),
        align="right",
        bgcolor="rgba(255,255,255,0.85)",
        bordercolor="rgba(0,0,0,0.15)",
        borderwidth=1,
        borderpad=4,
    )

  fig.update_layout(
      template="simple_white",
      legend=dict(orientation="h", yanchor="bottom", y=-0.22, x=0.5, xanchor="center", font=dict(size=11)),
      margin=dict(l=50, r=20, t=90, b=120),
      hovermode="x unified",
      title=dict(
          text=f"Synthetic forecast, horizon {data.params.horizon}, {data.params.training_days} training days",
          x=0.5,
          xanchor="center",
      ),
      height=max(360, 320 * num_rows),
  )
  return fig


def write_forecast_figure(fig, chart_path: str) -> Path:
  """Writes HTML for .html/.htm paths, a static image otherwise.

  Static export needs kaleido; when it is unavailable the figure is saved
  as HTML next to the requested path and that path is returned instead.
  """
  output_path = Path(chart_path)
  suffix = output_path.suffix.lower()
  if suffix in {".html", ".htm"}:
    fig.write_html(str(output_path), include_plotlyjs="cdn")
    return output_path
  try:
    fig.write_image(str(output_path), scale=2)
  except (ValueError, ImportError) as exc:
    fallback = output_path.with_suffix(output_path.suffix + ".html" if suffix else ".html")
    fig.write_html(str(fallback), include_plotlyjs="cdn")
    logger.warning(f"Plotly static export failed ({exc}); saved interactive HTML to {fallback}")
    return fallback
  return output_path
