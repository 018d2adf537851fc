"""Tests for exercise progress analysis.

Workouts are plain namespaces carrying ``date``, ``status`` and
``sections``, like the stored rows.
"""

import datetime
from types import SimpleNamespace

import pytest

from app.progress.exercises import (
    analyze_exercise_progress,
    collect_histories,
    compute_period_records,
    is_valid_set,
    iter_exercise_entries,
    rank_histories,
    summarize_occurrence,
)

DAY0 = datetime.date(2026, 3, 1)
DAY_END = datetime.date(2026, 3, 31)


# ======================================================================
# Helpers
# ======================================================================


def _set(weight=None, repetitions=None, completed=True) -> dict:
    return {"weight": weight, "repetitions": repetitions, "duration": None, "completed": completed}


def _entry(name: str, *sets: dict) -> dict:
    return {"name": name, "sets": list(sets)}


def _make_workout(offset: int, *entries: dict, section: str = "exercises", status: str = "completed"):
    return SimpleNamespace(date=DAY0 + datetime.timedelta(days=offset), status=status,
                           sections={section: list(entries)})


# ======================================================================
# Sets and occurrences
# ======================================================================


class TestValidSet:
    @pytest.mark.parametrize(
        "exercise_set, expected",
        [
            (_set(50, 10), True),
            (_set(0, 8, completed=False), True),
            (_set(None, 12), True),
            (_set(20, None), True),
            (_set(None, None), False),
            (_set("", ""), False),
            (None, False),
            ("10x50", False),
        ],
    )
    def test_validity(self, exercise_set, expected):
        assert is_valid_set(exercise_set) is expected


class TestSummarizeOccurrence:
    def test_volume_ignores_completion_flag(self):
        """10×50 + 8×0 = 500; the unticked set still counts."""
        occurrence = summarize_occurrence("Squat", DAY0, [_set(50, 10), _set(0, 8, completed=False)])
        assert occurrence.volume == 500.0
        assert occurrence.max_weight == 50.0
        assert occurrence.max_repetitions == 10.0

    def test_bodyweight_sets(self):
        occurrence = summarize_occurrence("Push-up", DAY0, [_set(None, 15), _set(None, 12)])
        assert occurrence.volume == 0.0
        assert occurrence.max_weight == 0.0
        assert occurrence.max_repetitions == 15.0

    def test_string_numbers(self):
        occurrence = summarize_occurrence("Row", DAY0, [_set("22.5", "8")])
        assert occurrence.volume == 180.0

    def test_no_valid_set(self):
        assert summarize_occurrence("Plank", DAY0, [_set(), None]) is None


# ======================================================================
# Histories and ranking
# ======================================================================


class TestHistories:
    def test_sections_are_unified_by_name(self):
        workout = SimpleNamespace(date=DAY0, status="completed", sections={
            "exercises": [_entry("Squat", _set(60, 5))],
            "part_1": [_entry("Squat", _set(40, 10))],
            "part_2": [_entry("Lunge", _set(20, 12))],
        })
        histories = collect_histories([workout])
        assert [(h.exercise_name, h.frequency) for h in histories] == [("Squat", 2), ("Lunge", 1)]

    def test_section_order(self):
        sections = {"custom": [_entry("C")], "exercises": [_entry("D")], "part_2": [_entry("B")],
                    "part_1": [_entry("A")]}
        assert [e["name"] for e in iter_exercise_entries(sections)] == ["A", "B", "D", "C"]

    def test_invalid_occurrence_not_counted(self):
        workouts = [
            _make_workout(1, _entry("Squat", _set(60, 5))),
            _make_workout(2, _entry("Squat", _set())),
            _make_workout(3, _entry("Squat")),
            _make_workout(4, {"sets": [_set(10, 10)]}),
        ]
        histories = collect_histories(workouts)
        assert [(h.exercise_name, h.frequency) for h in histories] == [("Squat", 1)]

    @pytest.mark.parametrize("name", [42, 3.5, ["Squat"], "", "   "])
    def test_entries_without_a_usable_name_are_skipped(self, name):
        workouts = [
            _make_workout(1, {"name": name, "sets": [_set(10, 5)]}, _entry("Squat", _set(60, 5))),
        ]
        histories = collect_histories(workouts)
        assert [(h.exercise_name, h.frequency) for h in histories] == [("Squat", 1)]

    def test_numeric_name_does_not_abort_analysis(self):
        workouts = [_make_workout(1, {"name": 42, "sets": [_set(10, 5)]})]
        assert analyze_exercise_progress(workouts, DAY0, DAY_END) == []

    def test_more_frequent_ranks_higher(self):
        workouts = [_make_workout(d, _entry("Lunge", _set(20, 10))) for d in (1, 2)]
        workouts += [_make_workout(d, _entry("Squat", _set(60, 5))) for d in (3, 4, 5, 6, 7)]
        ranked = rank_histories(collect_histories(workouts))
        assert [h.exercise_name for h in ranked] == ["Squat", "Lunge"]

    def test_ties_keep_first_seen_order(self):
        workouts = [_make_workout(1, _entry("B", _set(1, 1)), _entry("A", _set(1, 1)), _entry("C", _set(1, 1)))]
        ranked = rank_histories(collect_histories(workouts))
        assert [h.exercise_name for h in ranked] == ["B", "A", "C"]

    def test_top_n(self):
        names = ["A", "B", "C", "D", "E", "F", "G"]
        workouts = [_make_workout(i, *[_entry(n, _set(10, 10)) for n in names[:i + 1]]) for i in range(len(names))]
        ranked = rank_histories(collect_histories(workouts), top_n=5)
        assert [h.exercise_name for h in ranked] == ["A", "B", "C", "D", "E"]

    def test_period_records(self):
        workouts = [
            _make_workout(5, _entry("Squat", _set(70, 3), _set(50, 8))),
            _make_workout(1, _entry("Squat", _set(60, 10))),
        ]
        summary = compute_period_records(collect_histories(workouts)[0])
        assert [o.workout_date for o in summary.history] == [DAY0 + datetime.timedelta(days=1),
                                                             DAY0 + datetime.timedelta(days=5)]
        assert summary.occurrence_count == 2
        assert summary.period_max_weight == 70.0
        assert summary.period_max_repetitions == 10.0
        assert summary.period_max_volume == 610.0


# ======================================================================
# analyze_exercise_progress
# ======================================================================


class TestAnalyzeExerciseProgress:
    def test_only_completed_workouts_in_period(self):
        workouts = [
            _make_workout(1, _entry("Squat", _set(60, 5))),
            _make_workout(2, _entry("Squat", _set(200, 5)), status="active"),
            _make_workout(-1, _entry("Squat", _set(300, 5))),
            _make_workout(40, _entry("Squat", _set(400, 5))),
        ]
        summaries = analyze_exercise_progress(workouts, DAY0, DAY_END)
        assert len(summaries) == 1
        assert summaries[0].occurrence_count == 1
        assert summaries[0].period_max_weight == 60.0

    def test_no_workouts(self):
        assert analyze_exercise_progress([], DAY0, DAY_END) == []
