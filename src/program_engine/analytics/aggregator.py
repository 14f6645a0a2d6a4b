"""Summary statistics over historical workout results.

All functions are pure: they take a collection of results and return new
values without mutation or I/O. Day arithmetic works on calendar dates
(``datetime.date``), so results are compared at day granularity with no
timezone conversion.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from program_engine.models.result import AdvancedWorkoutResult

Results = Sequence[AdvancedWorkoutResult]


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------


def total_volume(results: Results) -> float:
    """Sum of ``total_volume_load`` across results."""
    return float(sum(r.total_volume_load for r in results))


def total_reps(results: Results) -> int:
    return int(sum(r.total_reps for r in results))


def total_duration(results: Results) -> int:
    """Total training time in seconds."""
    return int(sum(r.total_duration_seconds for r in results))


def average_quality(results: Results) -> float:
    """Mean self-rated quality over results that have one; 0.0 if none do."""
    ratings = [r.workout_quality for r in results if r.workout_quality is not None]
    if not ratings:
        return 0.0
    return float(np.mean(np.array(ratings, dtype=np.float64)))


# ---------------------------------------------------------------------------
# Streaks
# ---------------------------------------------------------------------------


def _distinct_ordinals_desc(dates: Iterable[date]) -> np.ndarray:
    ordinals = np.unique(np.fromiter((d.toordinal() for d in dates), dtype=np.int64))
    return ordinals[::-1]


def current_streak(results: Results, today: date) -> int:
    """Consecutive training days ending today (or yesterday).

    Walks distinct dates newest first from a cursor at *today*. A date no
    more than one day before the cursor counts and becomes the new cursor;
    the first larger gap ends the streak. Dates after *today* are ignored.

    Args:
        results: Historical results in any order.
        today: Reference date for the walk.

    Returns:
        Number of days in the streak.
    """
    ordinals = _distinct_ordinals_desc(r.date for r in results if r.date <= today)
    if ordinals.size == 0:
        return 0
    cursor_gaps = -np.diff(np.concatenate(([today.toordinal()], ordinals)))
    breaks = np.flatnonzero(cursor_gaps > 1)
    return int(breaks[0]) if breaks.size else int(ordinals.size)


def longest_streak(results: Results) -> int:
    """Longest run of training days exactly one calendar day apart."""
    ordinals = _distinct_ordinals_desc(r.date for r in results)
    if ordinals.size == 0:
        return 0
    gaps = -np.diff(ordinals)
    # Split the gap sequence wherever consecutive dates are not adjacent
    boundaries = np.flatnonzero(gaps != 1)
    edges = np.concatenate(([-1], boundaries, [gaps.size]))
    return int(np.diff(edges).max())


# ---------------------------------------------------------------------------
# Frequency
# ---------------------------------------------------------------------------


def workouts_by_day_of_week(results: Results) -> tuple[int, ...]:
    """Result count per weekday, index 0 = Sunday ... 6 = Saturday."""
    # date.weekday() is Monday-based; shift so Sunday lands on 0
    days = np.fromiter(((r.date.weekday() + 1) % 7 for r in results), dtype=np.int64)
    return tuple(int(n) for n in np.bincount(days, minlength=7))


def weekly_volume(results: Results) -> dict[date, float]:
    """Volume load per training week, keyed by the week's Monday."""
    if not results:
        return {}
    frame = pd.DataFrame({
        "date": pd.to_datetime([r.date for r in results]),
        "volume": [r.total_volume_load for r in results],
    })
    week_start = frame["date"] - pd.to_timedelta(frame["date"].dt.weekday, unit="D")
    totals = frame.groupby(week_start)["volume"].sum().sort_index()
    return {ts.date(): float(v) for ts, v in totals.items()}
