"""Date-window selection of results."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

import pandas as pd

from program_engine.models.enums import RECENT_RESULTS_DAYS, RECENT_RESULTS_LIMIT, Period
from program_engine.models.result import AdvancedWorkoutResult

_PERIOD_OFFSETS = {
    Period.WEEK: pd.DateOffset(weeks=1),
    Period.MONTH: pd.DateOffset(months=1),
    Period.YEAR: pd.DateOffset(years=1),
}


def period_start(period: Period, today: date) -> date | None:
    """First date inside *period*, or None for ``Period.ALL``.

    Month and year steps clamp to the last valid day (Mar 31 -> Feb 28/29).
    """
    offset = _PERIOD_OFFSETS.get(period)
    if offset is None:
        return None
    return (pd.Timestamp(today) - offset).date()


def filter_by_period(
    results: Sequence[AdvancedWorkoutResult], period: Period, today: date
) -> list[AdvancedWorkoutResult]:
    start = period_start(period, today)
    if start is None:
        return list(results)
    return [r for r in results if r.date >= start]


def recent_results(
    results: Sequence[AdvancedWorkoutResult],
    today: date,
    days: int = RECENT_RESULTS_DAYS,
    limit: int = RECENT_RESULTS_LIMIT,
) -> list[AdvancedWorkoutResult]:
    """Newest-first results from the last *days* days, at most *limit*."""
    cutoff = today - timedelta(days=days)
    recent = [r for r in results if r.date >= cutoff]
    recent.sort(key=lambda r: r.date, reverse=True)
    return recent[:limit]
