"""
Exercise progress analysis.

Completed workouts store their exercises in several sections (warm-up
parts, main block, free list).  For progress purposes an exercise is
identified by its exact name only, whatever section it appears in.  Entries
without a textual name cannot be identified and are skipped.

For every exercise *occurrence* (one exercise entry in one workout) we
keep the heaviest set, the most repetitions and the volume::

    volume = Σ repetitions × weight      over the occurrence's valid sets

A set is valid when it records a weight or a repetition count.  The
completion flag does not matter: volume is work done, not work ticked off.
Occurrences without any valid set are dropped and do not count towards
the exercise's frequency.

Exercises are ranked by frequency (most performed first, ties keep the
order in which exercises were first met) and the top N get a period
summary: max weight, max repetitions, max single-occurrence volume.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Iterable, Optional

from app.models.workout import WORKOUT_STATUS_COMPLETED
from app.progress.timeseries import coerce_value
from app.schemas.progress import (DateRange, ExerciseHistory, ExerciseOccurrence, ExerciseSummary, )

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5

# Sections are visited in this order; unknown sections follow in stored order.
SECTION_ORDER = ["part_1", "part_2", "part_3", "exercises"]


# ======================================================================
# Sets and occurrences
# ======================================================================


def _is_recorded(raw: Any) -> bool:
    return raw is not None and raw != ""


def is_valid_set(exercise_set: Any) -> bool:
    """A set counts when it exists and records weight or repetitions."""
    if not isinstance(exercise_set, dict):
        return False
    return _is_recorded(exercise_set.get("weight")) or _is_recorded(exercise_set.get("repetitions"))


def _number(raw: Any) -> float:
    """Numeric value of a set field; unrecorded or unparsable counts as 0."""
    value = coerce_value(raw)
    return value if value is not None else 0.0


def summarize_occurrence(exercise_name: str, workout_date: datetime.date,
                         sets: Iterable[Any], ) -> Optional[ExerciseOccurrence]:
    """Reduce one exercise entry to its occurrence figures.

    Returns ``None`` when the entry has no valid set.
    """
    valid_sets = [s for s in sets if is_valid_set(s)]
    if not valid_sets:
        return None

    weights = [_number(s.get("weight")) for s in valid_sets]
    repetitions = [_number(s.get("repetitions")) for s in valid_sets]
    volume = sum(r * w for r, w in zip(repetitions, weights))

    return ExerciseOccurrence(exercise_name=exercise_name, workout_date=workout_date,
                              max_weight=max([0.0, *weights]), max_repetitions=max([0.0, *repetitions]),
                              volume=volume, )


def iter_exercise_entries(sections: dict) -> Iterable[dict]:
    """All exercise entries of a workout, section by section."""
    ordered = [name for name in SECTION_ORDER if name in sections]
    ordered += [name for name in sections if name not in SECTION_ORDER]
    for name in ordered:
        for entry in sections.get(name) or []:
            if isinstance(entry, dict):
                yield entry


# ======================================================================
# Histories and ranking
# ======================================================================


def collect_histories(workouts: Iterable[Any]) -> list[ExerciseHistory]:
    """Group valid occurrences by exercise name.

    Workouts are any objects with ``date`` and ``sections``.  Histories
    come back in first-seen order with occurrences in workout order.
    """
    occurrences: dict[str, list[ExerciseOccurrence]] = {}
    for workout in workouts:
        for entry in iter_exercise_entries(workout.sections or {}):
            name = entry.get("name")
            sets = entry.get("sets")
            if not isinstance(name, str) or not name.strip() or not sets:
                continue
            occurrence = summarize_occurrence(name, workout.date, sets)
            if occurrence is None:
                continue
            occurrences.setdefault(name, []).append(occurrence)

    return [ExerciseHistory(exercise_name=name, occurrences=tuple(items)) for name, items in occurrences.items()]


def rank_histories(histories: Iterable[ExerciseHistory], top_n: int = DEFAULT_TOP_N) -> list[ExerciseHistory]:
    """Most frequent exercises first; ``sorted`` is stable so ties keep order."""
    ranked = sorted(histories, key=lambda h: h.frequency, reverse=True)
    return ranked[:top_n]


def compute_period_records(history: ExerciseHistory) -> ExerciseSummary:
    """Period bests of one exercise, with its history sorted by date."""
    ordered = tuple(sorted(history.occurrences, key=lambda o: o.workout_date))
    return ExerciseSummary(exercise_name=history.exercise_name, occurrence_count=len(ordered), history=ordered,
                           period_max_weight=max([0.0, *(o.max_weight for o in ordered)]),
                           period_max_repetitions=max([0.0, *(o.max_repetitions for o in ordered)]),
                           period_max_volume=max([0.0, *(o.volume for o in ordered)]), )


# ======================================================================
# Main entry point
# ======================================================================


def analyze_exercise_progress(workouts: Iterable[Any], start: datetime.date, end: datetime.date,
                              top_n: int = DEFAULT_TOP_N, ) -> list[ExerciseSummary]:
    """Summaries of the *top_n* most performed exercises in ``[start, end]``.

    Only completed workouts are considered; in-progress workouts may hold
    partial data.  An empty list means nothing qualified.
    """
    window = DateRange(start=start, end=end)
    period_workouts = [w for w in workouts if
                       getattr(w, "status", WORKOUT_STATUS_COMPLETED) == WORKOUT_STATUS_COMPLETED and window.contains(
                           w.date)]

    histories = collect_histories(period_workouts)
    top = rank_histories(histories, top_n)
    logger.debug("Found %d exercises in %d workouts, keeping %d", len(histories), len(period_workouts), len(top))
    return [compute_period_records(h) for h in top]
