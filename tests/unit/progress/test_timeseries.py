"""Tests for per-metric time series construction.

Pure unit tests: samples are built in memory, no database involved.
"""

import datetime
from types import SimpleNamespace

import pytest

from app.progress.timeseries import (
    _first_per_day,
    build_full_history,
    build_series,
    coerce_value,
    find_baseline,
    group_samples_by_subject,
    latest_value,
    samples_from_entries,
)
from app.schemas.progress import MeasurementSample, TimeSeriesPoint

DAY0 = datetime.date(2026, 3, 1)


# ======================================================================
# Helpers
# ======================================================================


def _day(offset: int) -> datetime.date:
    return DAY0 + datetime.timedelta(days=offset)


def _make_sample(offset: int, value, metric: str = "weight", subject_id: int = 1) -> MeasurementSample:
    return MeasurementSample(subject_id=subject_id, date=_day(offset), metric=metric, value=value)


# ======================================================================
# coerce_value
# ======================================================================


class TestCoerceValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (80, 80.0),
            (80.5, 80.5),
            ("81.5", 81.5),
            (" 70 ", 70.0),
            (0, 0.0),
            (-3, -3.0),
        ],
    )
    def test_numeric_values(self, raw, expected):
        assert coerce_value(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", float("nan"), float("inf"), True, False, [1], {}])
    def test_invalid_values(self, raw):
        assert coerce_value(raw) is None


# ======================================================================
# build_series
# ======================================================================


class TestBuildSeries:
    def test_first_sample_of_the_day_wins(self):
        """Two samples on the same day never average."""
        samples = [_make_sample(2, 80), _make_sample(2, 70)]
        series = build_series("weight", samples, _day(0), _day(10))
        assert series == [TimeSeriesPoint(date=_day(2), value=80.0)]

    def test_unsorted_input_is_sorted(self):
        samples = [_make_sample(5, 88), _make_sample(1, 90), _make_sample(3, 89)]
        series = build_series("weight", samples, _day(0), _day(10))
        assert [p.date for p in series] == [_day(1), _day(3), _day(5)]
        assert [p.value for p in series] == [90.0, 89.0, 88.0]

    def test_dates_strictly_increasing(self):
        samples = [_make_sample(d, 80 + d) for d in (4, 1, 4, 2, 1, 9, 2)]
        series = build_series("weight", samples, _day(0), _day(10))
        dates = [p.date for p in series]
        assert all(a < b for a, b in zip(dates, dates[1:]))

    def test_first_seen_survives_sorting(self):
        """The earlier-seen sample of a day wins even when a later day comes between."""
        samples = [_make_sample(3, 81), _make_sample(1, 90), _make_sample(3, 79)]
        series = build_series("weight", samples, _day(0), _day(10))
        assert series[-1] == TimeSeriesPoint(date=_day(3), value=81.0)

    def test_invalid_values_are_dropped_not_zeroed(self):
        samples = [_make_sample(1, None), _make_sample(2, ""), _make_sample(3, "abc"), _make_sample(4, 85)]
        series = build_series("weight", samples, _day(0), _day(10))
        assert series == [TimeSeriesPoint(date=_day(4), value=85.0)]

    def test_invalid_first_sample_does_not_hide_valid_one_same_day(self):
        samples = [_make_sample(2, None), _make_sample(2, 77)]
        series = build_series("weight", samples, _day(0), _day(10))
        assert series == [TimeSeriesPoint(date=_day(2), value=77.0)]

    def test_window_is_inclusive(self):
        samples = [_make_sample(-1, 1), _make_sample(0, 2), _make_sample(10, 3), _make_sample(11, 4)]
        series = build_series("weight", samples, _day(0), _day(10))
        assert [p.value for p in series] == [2.0, 3.0]

    def test_other_metrics_ignored(self):
        samples = [_make_sample(1, 30, metric="bmi"), _make_sample(2, 80)]
        series = build_series("weight", samples, _day(0), _day(10))
        assert len(series) == 1
        assert series[0].value == 80.0

    def test_no_data_is_empty(self):
        assert build_series("weight", [], _day(0), _day(10)) == []

    def test_inverted_window_rejected(self):
        with pytest.raises(ValueError):
            build_series("weight", [], _day(10), _day(0))

    def test_repeated_calls_are_equal(self):
        samples = [_make_sample(5, 88), _make_sample(1, 90), _make_sample(1, 91)]
        first = build_series("weight", samples, _day(0), _day(10))
        second = build_series("weight", samples, _day(0), _day(10))
        assert first == second


# ======================================================================
# Baseline and history
# ======================================================================


class TestBaseline:
    def test_baseline_predates_window(self):
        samples = [_make_sample(1, 90), _make_sample(-20, 92), _make_sample(5, 88)]
        assert find_baseline("weight", samples) == 92.0

    def test_baseline_skips_invalid_values(self):
        samples = [_make_sample(-30, "n/a"), _make_sample(-20, 92)]
        assert find_baseline("weight", samples) == 92.0

    def test_no_baseline(self):
        assert find_baseline("weight", [_make_sample(1, None)]) is None

    def test_full_history_has_no_window(self):
        samples = [_make_sample(-400, 100), _make_sample(400, 70)]
        assert [p.value for p in build_full_history("weight", samples)] == [100.0, 70.0]

    def test_latest_value(self):
        series = [TimeSeriesPoint(date=_day(1), value=90), TimeSeriesPoint(date=_day(5), value=88)]
        assert latest_value(series) == 88.0
        assert latest_value([]) is None


# ======================================================================
# Helpers over samples
# ======================================================================


class TestSampleHelpers:
    def test_samples_from_entries(self):
        entries = [
            SimpleNamespace(user_id=3, date=datetime.datetime(2026, 3, 2, 7, 30), weight=80.5, bmi=None),
        ]
        samples = samples_from_entries(entries, ["weight", "bmi", "visceral_fat"])
        assert [(s.metric, s.value) for s in samples] == [("weight", 80.5), ("bmi", None), ("visceral_fat", None)]
        assert all(s.date == datetime.date(2026, 3, 2) for s in samples)
        assert all(s.subject_id == 3 for s in samples)

    def test_group_by_subject_preserves_order(self):
        samples = [_make_sample(2, 1, subject_id=1), _make_sample(1, 2, subject_id=2),
                   _make_sample(1, 3, subject_id=1)]
        grouped = group_samples_by_subject(samples)
        assert [s.value for s in grouped[1]] == [1, 3]
        assert [s.value for s in grouped[2]] == [2]

    def test_first_per_day_keeps_first(self):
        points = [TimeSeriesPoint(date=_day(1), value=1), TimeSeriesPoint(date=_day(1), value=2)]
        assert _first_per_day(points) == [TimeSeriesPoint(date=_day(1), value=1)]
