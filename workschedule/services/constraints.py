"""Hard eligibility rules for assigning a worker to a slot."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set

from workschedule.config import SchedulerConfig
from workschedule.domain.models import (
    ParsedShift,
    RestrictionKey,
    RestrictionMaps,
    ShiftAssignment,
    Slot,
    Worker,
)
from workschedule.services.restrictions import allow_list_owners, is_rest_day_slot
from workschedule.services.timeplan import (
    next_day_index,
    previous_day_index,
    rest_hours,
    shifts_overlap,
)

# worker name -> assignments made so far in the current run
History = Dict[str, List[ShiftAssignment]]

EXCLUDED = "excluded"
NOT_IN_ALLOW_LIST = "not_in_allow_list"
REST_DAY = "rest_day"
DAILY_HOURS = "daily_hours"
OVERLAP = "overlap"
INSUFFICIENT_REST = "insufficient_rest"


def violates_rest_day(worker: Worker, day_label: str, shift: ParsedShift, cfg: SchedulerConfig) -> bool:
    if not worker.observes_rest_day or worker.is_flexible:
        return False
    return is_rest_day_slot(day_label, shift, cfg)


def violates_max_hours(
    day_label: str,
    shift: ParsedShift,
    current: Sequence[ShiftAssignment],
    max_hours: float,
) -> bool:
    day_hours = sum(a.shift.duration_hours for a in current if a.day_label == day_label)
    return day_hours + shift.duration_hours > max_hours


def has_same_day_overlap(day_label: str, shift: ParsedShift, current: Sequence[ShiftAssignment]) -> bool:
    return any(shifts_overlap(a.shift, shift) for a in current if a.day_label == day_label)


def has_insufficient_rest(
    day_index: int,
    shift: ParsedShift,
    current: Sequence[ShiftAssignment],
    min_rest: float,
) -> bool:
    """
    Check rest against the previous calendar day and, for night shifts, the next one.

    Every shift on the neighbouring day must clear ``min_rest``.
    """
    prev_idx = previous_day_index(day_index)
    for prev in current:
        if prev.day_index == prev_idx and rest_hours(prev.shift, shift) < min_rest:
            return True

    if shift.is_night_shift:
        next_idx = next_day_index(day_index)
        for nxt in current:
            if nxt.day_index == next_idx and rest_hours(shift, nxt.shift) < min_rest:
                return True

    return False


def check_eligibility(
    worker: Worker,
    day_label: str,
    day_index: int,
    shift: ParsedShift,
    restrictions: RestrictionMaps,
    current: Sequence[ShiftAssignment],
    cfg: SchedulerConfig,
    allow_list_workers: Optional[Set[str]] = None,
) -> Optional[str]:
    """
    Apply the hard rules in order and return the first one that fails.

    Args:
        worker: Candidate worker
        day_label: Label of the slot's day
        day_index: Weekday index of the slot's day (0..6)
        shift: Parsed shift of the slot
        restrictions: cannot-work / can-only-work maps
        current: The worker's assignments so far in this run
        cfg: SchedulerConfig with thresholds
        allow_list_workers: Workers in allow-list mode, from
            ``allow_list_owners(can_only_work, roster_names)``. When omitted,
            ownership is judged against this worker's name alone, so "Dan"
            also claims "Dan-Li-..." keys; pass the roster-derived set
            whenever names share a prefix

    Returns:
        None when eligible, otherwise the failing rule's name
    """
    key = RestrictionKey(worker.name, day_label, shift.shift_name)

    # 1. Explicit exclusion
    if restrictions.is_excluded(key):
        return EXCLUDED

    # 2. Allow-list mode
    if allow_list_workers is None:
        allow_list_workers = allow_list_owners(restrictions.can_only_work, [worker.name])
    if worker.name in allow_list_workers and not restrictions.is_allowed(key):
        return NOT_IN_ALLOW_LIST

    # 3. Rest-day observance
    if violates_rest_day(worker, day_label, shift, cfg):
        return REST_DAY

    # 4. Daily hour cap
    if violates_max_hours(day_label, shift, current, cfg.limits.daily_cap(worker.is_flexible)):
        return DAILY_HOURS

    # 5. Same-day overlap
    if has_same_day_overlap(day_label, shift, current):
        return OVERLAP

    # 6. Cross-midnight rest
    if has_insufficient_rest(day_index, shift, current, cfg.limits.min_rest(worker.is_flexible)):
        return INSUFFICIENT_REST

    return None


def can_assign_worker(
    worker: Worker,
    day_label: str,
    day_index: int,
    shift: ParsedShift,
    restrictions: RestrictionMaps,
    current: Sequence[ShiftAssignment],
    cfg: SchedulerConfig | None = None,
    allow_list_workers: Optional[Set[str]] = None,
) -> bool:
    """True if the worker passes every hard rule for the slot."""
    reason = check_eligibility(
        worker,
        day_label,
        day_index,
        shift,
        restrictions,
        current,
        cfg or SchedulerConfig(),
        allow_list_workers,
    )
    return reason is None


def eligible_workers(
    slot: Slot,
    workers: Sequence[Worker],
    restrictions: RestrictionMaps,
    history: History,
    cfg: SchedulerConfig,
    allow_list_workers: Set[str],
) -> List[Worker]:
    """Workers eligible for the slot, in roster order."""
    return [
        w
        for w in workers
        if check_eligibility(
            w,
            slot.day_label,
            slot.day_index,
            slot.shift,
            restrictions,
            history.get(w.name, []),
            cfg,
            allow_list_workers,
        )
        is None
    ]
