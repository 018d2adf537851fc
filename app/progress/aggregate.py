"""
Group-level aggregation by forward fill.

Trainees in a group weigh in on different days, so their series never
share a date axis.  The group trend is built on the union of every
member's recording dates; on each date every member contributes their
*most recently known* value:

    total(d) = Σ_members last_known(member, d)

where ``last_known`` starts at the member's baseline and is replaced only
when the member records a new in-window value.  A member who stops
recording keeps contributing their stale value.  Nothing is interpolated
and nothing drops to zero.

Only *qualifying* members take part: a member without a finite, positive
baseline has no defined starting point and is excluded entirely.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Iterable, Optional

from app.progress.timeseries import coerce_value
from app.schemas.progress import (GroupMember, GroupSummary, GroupTrend, GroupTrendPoint, MemberProgress, )

logger = logging.getLogger(__name__)


# ======================================================================
# Qualification
# ======================================================================


def is_qualifying_baseline(value: Any) -> bool:
    """A baseline qualifies when it is a finite number greater than zero."""
    baseline = coerce_value(value)
    return baseline is not None and baseline > 0


def select_qualifying(members: Iterable[GroupMember]) -> list[GroupMember]:
    """Members with a valid baseline, in input order."""
    qualifying = []
    for member in members:
        if is_qualifying_baseline(member.baseline):
            qualifying.append(member)
        else:
            logger.debug("Excluding subject %s from aggregation: invalid baseline %r", member.subject_id,
                         member.baseline)
    return qualifying


# ======================================================================
# Forward-fill aggregation
# ======================================================================


def _updates_by_date(members: list[GroupMember],
                     window_start: datetime.date, ) -> dict[datetime.date, dict[int, float]]:
    """Map each in-window date to the members' values recorded that day."""
    updates: dict[datetime.date, dict[int, float]] = {}
    for member in members:
        for point in member.series:
            if point.date < window_start:
                continue
            # First value of the day wins, matching the series builder.
            updates.setdefault(point.date, {}).setdefault(member.subject_id, point.value)
    return updates


def _total(last_known: dict[int, float]) -> float:
    return round(sum(last_known.values()), 1)


def aggregate_forward_fill(members: Iterable[GroupMember], window_start: datetime.date, ) -> Optional[GroupTrend]:
    """Compute the forward-filled group total over the window.

    Args:
        members: Group members with baseline and in-window series.
        window_start: First day of the window; the date-zero point is
            placed here.

    Returns:
        :class:`GroupTrend` whose points are strictly ascending by date,
        or ``None`` when no member qualifies.

    The first point is the date-zero total (Σ baselines).  A member
    recording *on* ``window_start`` is an ordinary in-window sample, so
    that value replaces the member's baseline in the date-zero point
    rather than producing a second point with the same date.
    """
    qualifying = select_qualifying(members)
    if not qualifying:
        return None

    last_known: dict[int, float] = {m.subject_id: coerce_value(m.baseline) for m in qualifying}
    updates = _updates_by_date(qualifying, window_start)

    if window_start in updates:
        last_known.update(updates[window_start])
    points = [GroupTrendPoint(date=window_start, total=_total(last_known))]

    for day in sorted(updates):
        if day == window_start:
            continue
        last_known.update(updates[day])
        points.append(GroupTrendPoint(date=day, total=_total(last_known)))

    logger.debug("Aggregated %d members into %d points from %s", len(qualifying), len(points), window_start)
    return GroupTrend(window_start=window_start, member_count=len(qualifying), points=tuple(points))


# ======================================================================
# Member summary
# ======================================================================


def summarize_members(members: Iterable[GroupMember], window_start: datetime.date, ) -> Optional[GroupSummary]:
    """Per-member start/current values and group totals.

    ``current_value`` is the member's latest in-window value, or the
    baseline when they have not recorded in the window.  Members are
    sorted by name.  Returns ``None`` when no member qualifies.
    """
    qualifying = select_qualifying(members)
    if not qualifying:
        return None

    rows: list[MemberProgress] = []
    for member in qualifying:
        start_value = coerce_value(member.baseline)
        in_window = [p for p in member.series if p.date >= window_start]
        current_value = max(in_window, key=lambda p: p.date).value if in_window else start_value
        rows.append(MemberProgress(subject_id=member.subject_id, name=member.name, start_value=start_value,
                                   current_value=current_value, change=round(current_value - start_value, 1), ))

    rows.sort(key=lambda r: r.name.casefold())

    total_start = sum(r.start_value for r in rows)
    total_current = sum(r.current_value for r in rows)
    return GroupSummary(member_count=len(rows), total_start=round(total_start, 1),
                        total_current=round(total_current, 1), total_change=round(total_current - total_start, 1),
                        members=tuple(rows), )
