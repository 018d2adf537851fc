"""
Chart specifications.

A :class:`~app.schemas.progress.ChartSpec` describes a multi-axis line
chart without committing to a renderer: every series gets its own colour
and its own y-axis (weight in kg and age in years do not share a scale),
and all series share one x-axis of ``dd/MM`` date labels.

Series recorded on different days are first aligned onto the union of
their dates; a series simply has a gap where it has no point.  A series
with fewer than two real points cannot show a trend and is left out of
the chart (it still appears in the report's metric table).

Serialization to a concrete renderer (a Chart.js configuration, or a
QuickChart-style image URL) happens only at the boundary, in
:func:`to_chartjs_config` and :func:`to_chart_url`.
"""

from __future__ import annotations

import datetime
import json
import logging
from typing import Any, Optional
from urllib.parse import quote

from app.schemas.progress import ChartAxis, ChartDataset, ChartSpec, TimeSeriesPoint

logger = logging.getLogger(__name__)

PALETTE = ["#3e95cd", "#8e5ea2", "#3cba9f", "#e8c3b9", "#c45850", "#ffc107", "#20c997", "#6f42c1", "#fd7e14",
           "#007bff", ]

DATE_LABEL_FORMAT = "%d/%m"

MIN_TREND_POINTS = 2


# ======================================================================
# Axis alignment
# ======================================================================


def align_series(named_series: dict[str, list[TimeSeriesPoint]],
                 ) -> tuple[list[datetime.date], dict[str, list[Optional[float]]]]:
    """Put several series on one ascending date axis.

    Returns:
        ``(dates, values)`` where ``values[name][i]`` is the value of
        *name* on ``dates[i]`` or ``None``.
    """
    dates = sorted({p.date for points in named_series.values() for p in points})
    index = {day: i for i, day in enumerate(dates)}

    aligned: dict[str, list[Optional[float]]] = {}
    for name, points in named_series.items():
        values: list[Optional[float]] = [None] * len(dates)
        for point in points:
            i = index[point.date]
            if values[i] is None:
                values[i] = point.value
        aligned[name] = values
    return dates, aligned


def format_date_labels(dates: list[datetime.date]) -> list[str]:
    return [d.strftime(DATE_LABEL_FORMAT) for d in dates]


def _point_count(values: list[Optional[float]]) -> int:
    return sum(1 for v in values if v is not None)


# ======================================================================
# Chart construction
# ======================================================================


def build_line_chart(key: str, title: str, labels: list[str],
                     series: dict[str, list[Optional[float]]], ) -> Optional[ChartSpec]:
    """Build a multi-axis line chart over a shared label set.

    Args:
        key: Stable identifier of the chart within a report.
        title: Human readable chart title.
        labels: Shared x-axis labels.
        series: Series label → values, each as long as *labels*.

    Returns:
        The chart, or ``None`` when no series has at least two points.
    """
    datasets: list[ChartDataset] = []
    axes: list[ChartAxis] = []

    for label, values in series.items():
        if len(values) != len(labels):
            raise ValueError(f"Series '{label}' has {len(values)} values for {len(labels)} labels")
        if _point_count(values) < MIN_TREND_POINTS:
            logger.debug("Omitting series %r from chart %r: fewer than %d points", label, key, MIN_TREND_POINTS)
            continue

        index = len(datasets)
        color = PALETTE[index % len(PALETTE)]
        axis_id = f"y-axis-{index}"
        datasets.append(ChartDataset(label=label, values=tuple(values), color=color, axis_id=axis_id))
        axes.append(ChartAxis(id=axis_id, label=label, position="right" if index % 2 == 0 else "left", color=color,
                              draw_grid=index == 0, ))

    if not datasets:
        return None

    return ChartSpec(key=key, title=title, labels=tuple(labels), datasets=tuple(datasets), axes=tuple(axes))


def build_time_series_chart(key: str, title: str,
                            named_series: dict[str, list[TimeSeriesPoint]], ) -> Optional[ChartSpec]:
    """Align dated series and build a chart from them."""
    dates, aligned = align_series(named_series)
    return build_line_chart(key, title, format_date_labels(dates), aligned)


# ======================================================================
# Renderer boundary
# ======================================================================


def to_chartjs_config(spec: ChartSpec) -> dict[str, Any]:
    """Chart.js (v2 options layout) configuration for *spec*."""
    datasets = [{
        "label": ds.label,
        "data": list(ds.values),
        "borderColor": ds.color,
        "yAxisID": ds.axis_id,
        "fill": False,
        "tension": 0.1,
        "spanGaps": True,
        "pointRadius": 3,
        "borderWidth": 2,
    } for ds in spec.datasets]

    y_axes = [{
        "id": axis.id,
        "type": "linear",
        "position": axis.position,
        "display": True,
        "ticks": {"fontColor": axis.color},
        "gridLines": {"drawOnChartArea": axis.draw_grid},
        "scaleLabel": {"display": True, "labelString": axis.label, "fontColor": axis.color},
    } for axis in spec.axes]

    return {
        "type": "line",
        "data": {"labels": list(spec.labels), "datasets": datasets},
        "options": {
            "responsive": True,
            "title": {"display": True, "text": spec.title},
            "tooltips": {"mode": "index", "intersect": False},
            "scales": {
                "xAxes": [{"ticks": {"autoSkip": True, "maxRotation": 0}, "gridLines": {"display": False}}],
                "yAxes": y_axes,
            },
            "legend": {"position": "top"},
        },
    }


def to_chart_url(spec: ChartSpec, base_url: str, width: int = 750, height: int = 400) -> str:
    """Image URL for a QuickChart-compatible rendering service."""
    config = json.dumps(to_chartjs_config(spec), separators=(",", ":"))
    return f"{base_url}?width={width}&height={height}&bkg=white&c={quote(config, safe='')}"
