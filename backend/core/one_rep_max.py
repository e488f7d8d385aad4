"""
One-rep-max estimation for competition lifts.

This module provides the e1RM formula shared by the preview endpoint and the
day-completion aggregation:

    e1RM = round(weight * (1 + (reps + (10 - rpe)) / 30))

RPE (rate of perceived exertion) defaults to 10 when absent. Rounding is
half-up so that server-side results match estimates shown by clients.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from domain.models import Exercise, WorkSet

# Exact, case-sensitive names that trigger progress tracking
COMP_SQUAT = "Comp SQ"
COMP_BENCH = "Comp BP"
COMP_DEADLIFT = "Comp DL"
COMPETITION_LIFTS = (COMP_SQUAT, COMP_BENCH, COMP_DEADLIFT)

DEFAULT_RPE = 10.0


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a submitted numeric field to float.

    Accepts ints, floats and numeric strings. Returns None for missing,
    boolean, non-numeric or non-finite values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def effective_rpe(value: Any) -> float:
    """RPE used by the formula: missing, zero or non-numeric means 10."""
    rpe = to_number(value)
    return rpe if rpe else DEFAULT_RPE


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_1rm(weight: float, reps: float, rpe: float = DEFAULT_RPE) -> float:
    """
    Estimate a one-rep max from weight, reps and RPE.

    A single rep at RPE 10 is a true max and returns ``weight`` unchanged.

    Args:
        weight: Weight lifted
        reps: Reps completed
        rpe: Perceived exertion (0-10), default 10

    Returns:
        Estimated 1RM, rounded half-up to a whole number

    Examples:
        >>> calculate_1rm(100, 1, 10)
        100
        >>> calculate_1rm(100, 5, 8)
        123
    """
    if reps == 1 and rpe == 10:
        return weight
    return _round_half_up(weight * (1 + (reps + (10 - rpe)) / 30))


def estimate_set(work_set: WorkSet) -> Optional[float]:
    """
    Estimate the 1RM for a submitted set.

    Returns:
        The estimate, or None when weight or reps are not positive numbers
    """
    weight = to_number(work_set.weight)
    reps = to_number(work_set.reps)
    if weight is None or reps is None or weight <= 0 or reps <= 0:
        return None
    return calculate_1rm(weight, reps, effective_rpe(work_set.rpe))


@dataclass
class LiftSummary:
    """Best actual and estimated max across the valid sets of one exercise."""

    exercise_name: str
    actual_max: float = 0
    best_e1rm: float = 0

    @property
    def has_data(self) -> bool:
        return self.best_e1rm > 0 or self.actual_max > 0


def summarize_sets(exercise_name: str, sets: Iterable[WorkSet]) -> LiftSummary:
    """Aggregate the heaviest weight and best e1RM over valid sets."""
    summary = LiftSummary(exercise_name=exercise_name)
    for work_set in sets:
        estimate = estimate_set(work_set)
        if estimate is None:
            continue
        summary.actual_max = max(summary.actual_max, to_number(work_set.weight))
        summary.best_e1rm = max(summary.best_e1rm, estimate)
    return summary


def summarize_competition_lifts(exercises: Iterable[Exercise]) -> Dict[str, LiftSummary]:
    """
    Summarize every competition lift in a submitted day.

    Non-competition exercises, exercises without sets and exercises without a
    single valid set are skipped. A lift listed more than once is folded into
    one summary.

    Returns:
        Mapping of exercise name to its summary, in submission order
    """
    summaries: Dict[str, LiftSummary] = {}
    for exercise in exercises:
        if exercise.name not in COMPETITION_LIFTS or not exercise.sets:
            continue
        current = summarize_sets(exercise.name, exercise.sets)
        if not current.has_data:
            continue
        previous = summaries.get(exercise.name)
        if previous is not None:
            current.actual_max = max(current.actual_max, previous.actual_max)
            current.best_e1rm = max(current.best_e1rm, previous.best_e1rm)
        summaries[exercise.name] = current
    return summaries
