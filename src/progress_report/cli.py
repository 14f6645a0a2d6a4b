"""Progress report: pull a user's workout history and print summary statistics.

Usage:
    python -m progress_report --user 42
    python -m progress_report --user 42 --period month --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

from fitness_client import FitnessClient
from program_engine.analytics import ProgressSummary, summarize
from program_engine.errors import CollaboratorFailure
from program_engine.execution import format_elapsed
from program_engine.models.enums import Period
from program_engine.registry import display_info
from program_engine.serialization import result_to_wire

from progress_report.config import (
    FITNESS_API_PASSWORD,
    FITNESS_API_TIMEOUT_S,
    FITNESS_API_URL,
    FITNESS_API_USERNAME,
    FITNESS_USER_ID,
)

logger = logging.getLogger(__name__)

_WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def summary_to_dict(summary: ProgressSummary) -> dict:
    """JSON-compatible view of a summary."""
    return {
        "period": summary.period.name.lower(),
        "totalWorkouts": summary.total_workouts,
        "totalVolume": summary.total_volume,
        "totalReps": summary.total_reps,
        "totalDurationSeconds": summary.total_duration_seconds,
        "averageQuality": round(summary.average_quality, 2),
        "currentStreak": summary.current_streak,
        "longestStreak": summary.longest_streak,
        "personalRecords": [
            {
                "exerciseName": pr.exercise_name,
                "weight": pr.weight,
                "weightUnit": pr.weight_unit.name,
                "reps": pr.reps,
                "date": pr.date.isoformat(),
            }
            for pr in summary.personal_records
        ],
        "oneRepMax": summary.one_rep_max,
        "workoutsByDayOfWeek": dict(zip(_WEEKDAYS, summary.workouts_by_day_of_week)),
        "workoutTypes": {
            display_info(wt).display_name: n for wt, n in summary.workout_type_breakdown.items()
        },
        "weeklyVolume": {d.isoformat(): v for d, v in summary.weekly_volume.items()},
        "recent": [result_to_wire(r) for r in summary.recent],
    }


def format_summary(summary: ProgressSummary) -> str:
    """Plain-text report."""
    lines = [
        f"Progress ({summary.period.name.lower()})",
        f"  Workouts:        {summary.total_workouts}",
        f"  Total volume:    {summary.total_volume:,.0f}",
        f"  Total reps:      {summary.total_reps}",
        f"  Training time:   {format_elapsed(summary.total_duration_seconds)}",
        f"  Avg quality:     {summary.average_quality:.1f}/10",
        f"  Current streak:  {summary.current_streak} day(s)",
        f"  Longest streak:  {summary.longest_streak} day(s)",
    ]

    if summary.personal_records:
        lines.append("Personal records")
        for pr in summary.personal_records:
            reps = f" x {pr.reps}" if pr.reps is not None else ""
            lines.append(
                f"  {pr.exercise_name}: {pr.weight:g}{pr.weight_unit.name.lower()}{reps}"
                f" ({pr.date.isoformat()})"
            )

    if summary.workout_type_breakdown:
        lines.append("Workout types")
        for wt, count in summary.workout_type_breakdown.items():
            lines.append(f"  {display_info(wt).display_name}: {count}")

    lines.append(
        "By weekday  "
        + "  ".join(f"{d} {n}" for d, n in zip(_WEEKDAYS, summary.workouts_by_day_of_week))
    )
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="progress_report", description="Summarize a user's workout history"
    )
    parser.add_argument(
        "--user", default=FITNESS_USER_ID, help="User id (default: $FITNESS_USER_ID)"
    )
    parser.add_argument(
        "--period",
        choices=[p.name.lower() for p in Period],
        default="all",
        help="Look-back window for totals",
    )
    parser.add_argument(
        "--today", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD)"
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    return parser


def main(argv: list[str] | None = None, client: FitnessClient | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args(argv)
    if not args.user:
        logger.error("No user id given (use --user or set FITNESS_USER_ID)")
        return 2

    if client is None:
        client = FitnessClient(
            base_url=FITNESS_API_URL,
            username=FITNESS_API_USERNAME,
            password=FITNESS_API_PASSWORD,
            timeout_s=FITNESS_API_TIMEOUT_S,
        )

    try:
        with client:
            results = client.fetch_results_by_user(args.user)
    except CollaboratorFailure as exc:
        logger.error("Failed to fetch results for user %s: %s", args.user, exc)
        return 1

    logger.info("Fetched %d results for user %s", len(results), args.user)
    summary = summarize(results, args.today or date.today(), Period[args.period.upper()])

    if args.json:
        print(json.dumps(summary_to_dict(summary), indent=2))
    else:
        print(format_summary(summary))
    return 0


if __name__ == "__main__":
    sys.exit(main())
