"""Tests for chart specification building and renderer serialization."""

import datetime
import json
from urllib.parse import unquote

import pytest

from app.progress.charts import (
    PALETTE,
    align_series,
    build_line_chart,
    build_time_series_chart,
    format_date_labels,
    to_chart_url,
    to_chartjs_config,
)
from app.schemas.progress import TimeSeriesPoint

DAY0 = datetime.date(2026, 3, 1)


def _points(values: dict[int, float]) -> list[TimeSeriesPoint]:
    return [TimeSeriesPoint(date=DAY0 + datetime.timedelta(days=d), value=v) for d, v in sorted(values.items())]


# ======================================================================
# align_series
# ======================================================================


class TestAlignSeries:
    def test_union_of_dates_with_gaps(self):
        dates, values = align_series({"a": _points({0: 1, 4: 2}), "b": _points({2: 3, 4: 4})})
        assert dates == [DAY0, DAY0 + datetime.timedelta(days=2), DAY0 + datetime.timedelta(days=4)]
        assert values == {"a": [1.0, None, 2.0], "b": [None, 3.0, 4.0]}

    def test_empty(self):
        assert align_series({}) == ([], {})

    def test_date_labels(self):
        assert format_date_labels([datetime.date(2026, 3, 9), datetime.date(2026, 12, 25)]) == ["09/03", "25/12"]


# ======================================================================
# build_line_chart
# ======================================================================


class TestBuildLineChart:
    def test_one_axis_per_series(self):
        chart = build_line_chart("k", "Title", ["a", "b", "c"], {
            "Weight": [90, 89, 88],
            "BMI": [30, None, 29],
            "Age": [40, 39, 39],
        })
        assert [ds.label for ds in chart.datasets] == ["Weight", "BMI", "Age"]
        assert [ds.color for ds in chart.datasets] == PALETTE[:3]
        assert [ax.position for ax in chart.axes] == ["right", "left", "right"]
        assert [ax.draw_grid for ax in chart.axes] == [True, False, False]
        assert [ds.axis_id for ds in chart.datasets] == [ax.id for ax in chart.axes]

    def test_series_with_single_point_omitted(self):
        chart = build_line_chart("k", "Title", ["a", "b"], {"Weight": [90, 88], "BMI": [None, 30]})
        assert [ds.label for ds in chart.datasets] == ["Weight"]

    @pytest.mark.parametrize("values", [[None, None], [1, None], []])
    def test_no_trend_no_chart(self, values):
        labels = ["x"] * len(values)
        assert build_line_chart("k", "Title", labels, {"Weight": values}) is None

    def test_length_mismatch_rejected(self):
        with pytest.raises(ValueError):
            build_line_chart("k", "Title", ["a", "b"], {"Weight": [1, 2, 3]})

    def test_time_series_chart(self):
        chart = build_time_series_chart("overview", "Overview", {
            "Weight (kg)": _points({0: 90, 5: 88}),
            "BMI": _points({5: 29}),
        })
        assert chart.labels == ("01/03", "06/03")
        assert len(chart.datasets) == 1


# ======================================================================
# Renderer boundary
# ======================================================================


class TestRenderer:
    def _chart(self):
        return build_line_chart("k", "Progress", ["01/03", "08/03"], {"Weight": [90, 88], "Reps": [8, 10]})

    def test_chartjs_config(self):
        config = to_chartjs_config(self._chart())
        assert config["type"] == "line"
        assert config["data"]["labels"] == ["01/03", "08/03"]
        assert config["data"]["datasets"][0]["data"] == [90.0, 88.0]
        assert config["data"]["datasets"][1]["yAxisID"] == "y-axis-1"
        y_axes = config["options"]["scales"]["yAxes"]
        assert [a["position"] for a in y_axes] == ["right", "left"]
        assert y_axes[0]["gridLines"]["drawOnChartArea"] is True
        assert config["options"]["title"]["text"] == "Progress"

    def test_chart_url_round_trips_config(self):
        chart = self._chart()
        url = to_chart_url(chart, "https://quickchart.io/chart", 800, 300)
        assert url.startswith("https://quickchart.io/chart?width=800&height=300&bkg=white&c=")
        encoded = url.split("&c=", 1)[1]
        assert json.loads(unquote(encoded)) == to_chartjs_config(chart)
