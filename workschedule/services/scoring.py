"""Preference scoring among eligible workers (lower is better)."""

from __future__ import annotations

from typing import Sequence

from workschedule.config import ScoreWeights
from workschedule.domain.models import ParsedShift, ShiftAssignment, Worker
from workschedule.services.timeplan import previous_day_index, rest_hours


def calculate_worker_score(
    worker: Worker,
    day_index: int,
    shift: ParsedShift,
    current: Sequence[ShiftAssignment],
    weights: ScoreWeights | None = None,
) -> int:
    """
    Score a candidate for a slot. Lower score = better candidate.

    Args:
        worker: Candidate worker (already eligible)
        day_index: Weekday index of the slot
        shift: Parsed shift of the slot
        current: The worker's assignments so far in this run
        weights: ScoreWeights from config

    Returns:
        Integer score
    """
    weights = weights or ScoreWeights()

    # 1. Load balancing
    score = weights.per_assigned_shift * len(current)

    # 2. Short rest after the previous day's shift
    if not worker.is_flexible and has_short_rest(day_index, shift, current, weights.short_rest_threshold_hours):
        score += weights.short_rest_penalty

    # 3. Spread night shifts
    if shift.is_night_shift and not any(a.shift.is_night_shift for a in current):
        score += weights.first_night_penalty

    return score


def has_short_rest(
    day_index: int,
    shift: ParsedShift,
    current: Sequence[ShiftAssignment],
    threshold_hours: float,
) -> bool:
    prev_idx = previous_day_index(day_index)
    return any(
        rest_hours(a.shift, shift) < threshold_hours
        for a in current
        if a.day_index == prev_idx
    )
