"""
Per-metric time series construction.

Measurement entries are sparse: a weigh-in may record weight only, or the
full scale read-out, and a trainee may log several entries on the same day.
This module turns those entries into clean series:

- one point per calendar day, **first entry wins** (duplicates never average),
- strictly ascending dates (input order is never trusted),
- only finite numeric values (``None``, ``""``, ``"abc"``, NaN and inf are
  dropped silently, never coerced to zero).

The *baseline* of a metric is its earliest-ever valid value, independent of
the reporting window, and is what "progress since start" is measured from.
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Any, Iterable, Optional

from app.schemas.progress import DateRange, MeasurementSample, TimeSeriesPoint

logger = logging.getLogger(__name__)


# ======================================================================
# Value validation
# ======================================================================


def coerce_value(raw: Any) -> Optional[float]:
    """Return *raw* as a finite float, or ``None`` if it is not one.

    Booleans are rejected even though they are ``int`` subclasses.
    Numeric strings (``"81.5"``) are accepted, as the record store keeps
    some legacy values as text.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


# ======================================================================
# Sample extraction
# ======================================================================


def samples_from_entries(entries: Iterable[Any], metrics: Iterable[str]) -> list[MeasurementSample]:
    """Flatten measurement rows into one sample per (entry, metric).

    Entries are any objects with ``user_id``, ``date`` and one attribute
    per metric.  A metric the entry does not carry yields a sample with
    ``value=None`` so absence is explicit downstream.
    """
    metric_list = list(metrics)
    samples: list[MeasurementSample] = []
    for entry in entries:
        for metric in metric_list:
            samples.append(MeasurementSample(subject_id=entry.user_id, date=_as_date(entry.date), metric=metric,
                                             value=getattr(entry, metric, None), ))
    return samples


def _as_date(value: datetime.date | datetime.datetime) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def _valid_points(metric: str, samples: Iterable[MeasurementSample]) -> list[TimeSeriesPoint]:
    """All valid points for *metric*, stably sorted by date."""
    points = []
    for sample in samples:
        if sample.metric != metric:
            continue
        value = coerce_value(sample.value)
        if value is None:
            continue
        points.append(TimeSeriesPoint(date=sample.date, value=value))
    # Stable sort keeps store order within a day, so "first seen" survives.
    points.sort(key=lambda p: p.date)
    return points


def _first_per_day(points: list[TimeSeriesPoint]) -> list[TimeSeriesPoint]:
    deduped: list[TimeSeriesPoint] = []
    for point in points:
        if deduped and deduped[-1].date == point.date:
            continue
        deduped.append(point)
    return deduped


# ======================================================================
# Public API
# ======================================================================


def build_series(metric: str, samples: Iterable[MeasurementSample], start: datetime.date,
                 end: datetime.date, ) -> list[TimeSeriesPoint]:
    """Build the in-window series of *metric*.

    Args:
        metric: Metric key, e.g. ``"weight"``.
        samples: Samples of one subject, in store order (any date order).
        start: First day of the window (inclusive).
        end: Last day of the window (inclusive, whole day).

    Returns:
        Points sorted ascending by date with at most one point per day.
        Empty when the subject has no valid value in the window.
    """
    window = DateRange(start=start, end=end)
    points = [p for p in _valid_points(metric, samples) if window.contains(p.date)]
    series = _first_per_day(points)
    logger.debug("Built %s series with %d points for %s..%s", metric, len(series), start, end)
    return series


def build_full_history(metric: str, samples: Iterable[MeasurementSample]) -> list[TimeSeriesPoint]:
    """Like :func:`build_series` but without a window."""
    return _first_per_day(_valid_points(metric, samples))


def find_baseline(metric: str, samples: Iterable[MeasurementSample]) -> Optional[float]:
    """Earliest-ever valid value of *metric*, or ``None``."""
    history = build_full_history(metric, samples)
    if not history:
        return None
    return history[0].value


def latest_value(series: list[TimeSeriesPoint]) -> Optional[float]:
    """Last value of an already built series, or ``None`` when empty."""
    if not series:
        return None
    return series[-1].value


def group_samples_by_subject(samples: Iterable[MeasurementSample]) -> dict[int, list[MeasurementSample]]:
    """Partition samples per subject, preserving store order within each."""
    grouped: dict[int, list[MeasurementSample]] = {}
    for sample in samples:
        grouped.setdefault(sample.subject_id, []).append(sample)
    return grouped
