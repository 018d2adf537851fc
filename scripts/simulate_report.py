"""What would a monthly report look like for a sample trainee?

Runs the pure progress engine on hand-written measurements and workouts
(no database) and prints the metrics table, exercise summaries and chart
URLs.

Usage:
    python scripts/simulate_report.py
"""

import datetime
import sys
from pathlib import Path
from types import SimpleNamespace

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.core.config import settings
from app.progress.charts import to_chart_url
from app.progress.report import assemble_report
from app.schemas.progress import REPORT_KIND_MONTHLY, AggregationRequest, DateRange, MeasurementSample

TODAY = datetime.date(2026, 3, 31)
START = datetime.date(2026, 3, 1)
SUBJECT_ID = 1

# (date, weight, fat %, visceral fat)
RAW_MEASUREMENTS = [
    ("2026-01-10", 92.0, 31.5, 12),
    ("2026-02-14", 90.8, 30.9, 12),
    ("2026-03-02", 90.1, 30.2, 11),
    ("2026-03-09", 89.6, None, 11),
    ("2026-03-16", 89.0, 29.4, None),
    ("2026-03-30", 88.0, 28.8, 10),
]

# (date, exercise, [(weight, repetitions), ...])
RAW_WORKOUTS = [
    ("2026-03-03", "Back Squat", [(60, 8), (70, 6), (75, 5)]),
    ("2026-03-03", "Bench Press", [(40, 10), (45, 8)]),
    ("2026-03-10", "Back Squat", [(62.5, 8), (72.5, 6), (77.5, 5)]),
    ("2026-03-10", "Plank", [(None, None)]),
    ("2026-03-17", "Back Squat", [(65, 8), (75, 5)]),
    ("2026-03-17", "Bench Press", [(42.5, 10), (47.5, 8)]),
    ("2026-03-24", "Walking Lunge", [(None, 20), (None, 20)]),
]


def _samples() -> list[MeasurementSample]:
    samples = []
    for day, weight, fat, visceral in RAW_MEASUREMENTS:
        date = datetime.date.fromisoformat(day)
        for metric, value in (("weight", weight), ("fat_percentage", fat), ("visceral_fat", visceral)):
            samples.append(MeasurementSample(subject_id=SUBJECT_ID, date=date, metric=metric, value=value))
    return samples


def _workouts() -> list[SimpleNamespace]:
    by_date: dict[str, list[dict]] = {}
    for day, name, sets in RAW_WORKOUTS:
        by_date.setdefault(day, []).append(
            {"name": name, "sets": [{"weight": w, "repetitions": r, "completed": True} for w, r in sets]})
    return [SimpleNamespace(date=datetime.date.fromisoformat(day), status="completed",
                            sections={"exercises": entries}) for day, entries in by_date.items()]


def main():
    request = AggregationRequest(subject_scope=(SUBJECT_ID,),
                                 metric_set=("weight", "fat_percentage", "visceral_fat"),
                                 date_range=DateRange(start=START, end=TODAY), )
    bundle = assemble_report(request, _samples(), _workouts(), REPORT_KIND_MONTHLY,
                             datetime.datetime.combine(TODAY, datetime.time(9, 0)), )
    report = bundle.report

    print("=" * 65)
    print(f"  MONTHLY REPORT  {report.period_start} -> {report.period_end}")
    print("=" * 65)

    print()
    print(f"  {'Metric':<22}{'Baseline':>10}{'Latest':>10}{'Change':>10}")
    print("  " + "-" * 52)
    for row in report.metrics_table:
        print(f"  {row.label:<22}{row.baseline:>10.1f}{row.latest:>10.1f}{row.delta:>+10.1f}")

    print()
    print("  TOP EXERCISES")
    print("  " + "-" * 52)
    for summary in report.exercise_summaries:
        print(f"  {summary.exercise_name:<22} x{summary.occurrence_count}  "
              f"max {summary.period_max_weight:g} kg, {summary.period_max_repetitions:g} reps, "
              f"volume {summary.period_max_volume:g} kg")

    print()
    print("  CHARTS")
    print("  " + "-" * 52)
    for spec in report.chart_specs:
        url = to_chart_url(spec, settings.CHART_RENDER_URL, settings.CHART_WIDTH, settings.CHART_HEIGHT)
        print(f"  {spec.title}: {len(url)} chars")

    print()
    print("  SIDE EFFECTS")
    print("  " + "-" * 52)
    for effect in bundle.side_effects:
        print(f"  {effect.effect}: {effect.model_dump(exclude={'effect'})}")


if __name__ == "__main__":
    main()
