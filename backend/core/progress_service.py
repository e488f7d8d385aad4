"""
Progress history merging and best-lift reporting.

The day-completion flow records at most one entry per calendar date for each
(user, lift). Resubmitting the same day only ever raises the stored values.
"""

import logging
from datetime import date
from typing import Dict, Iterable, Optional

from backend.core.one_rep_max import COMPETITION_LIFTS, LiftSummary
from domain.models import ProgressEntry, ProgressRecord

logger = logging.getLogger(__name__)

TOTAL_KEY = "Total"


def merge_daily_best(
    record: ProgressRecord,
    summary: LiftSummary,
    on: date,
) -> ProgressRecord:
    """
    Merge a lift summary into the record's entry for ``on``.

    An existing entry for the date is raised to the max of stored and new
    values (never lowered); otherwise a new entry is appended.

    Args:
        record: Progress record for the summary's lift (mutated in place)
        summary: Best actual/estimated max from the submitted sets
        on: Calendar date of the submission

    Returns:
        The same record, for chaining
    """
    entry = record.entry_for(on)
    if entry is None:
        record.history.append(
            ProgressEntry(
                date=on,
                estimated_max=summary.best_e1rm,
                actual_max=summary.actual_max,
            )
        )
        logger.info(
            f"New progress entry for {record.exercise_name} on {on.isoformat()} "
            f"(user {record.user_id})"
        )
        return record

    entry.estimated_max = max(entry.estimated_max or 0, summary.best_e1rm)
    entry.actual_max = max(entry.actual_max or 0, summary.actual_max)
    return record


def best_lifts(records: Iterable[ProgressRecord]) -> Dict[str, Dict[str, float]]:
    """
    Compute all-time best estimated and actual max per competition lift.

    Returns:
        Dict keyed by each competition lift plus ``"Total"``; each value is
        ``{"estimated": float, "actual": float}``. Lifts without history are 0.
    """
    by_name: Dict[str, Optional[ProgressRecord]] = {name: None for name in COMPETITION_LIFTS}
    for record in records:
        if record.exercise_name in by_name:
            by_name[record.exercise_name] = record

    result: Dict[str, Dict[str, float]] = {}
    total_estimated = 0.0
    total_actual = 0.0
    for name, record in by_name.items():
        history = record.history if record else []
        estimated = max((e.estimated_max or 0 for e in history), default=0)
        actual = max((e.actual_max or 0 for e in history), default=0)
        result[name] = {"estimated": estimated, "actual": actual}
        total_estimated += estimated
        total_actual += actual

    result[TOTAL_KEY] = {"estimated": total_estimated, "actual": total_actual}
    return result
