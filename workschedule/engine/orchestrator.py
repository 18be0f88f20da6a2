"""Public entry point: run a scheduler and attach the status message."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Sequence, Tuple

from workschedule.config import SchedulerConfig
from workschedule.diagnostics import generate_status_message
from workschedule.domain.models import RestrictionMaps, ScheduleResult, ShiftTemplate, Worker

from .base import BaseScheduler
from .greedy import GreedyScheduler

logger = logging.getLogger(__name__)


def build_week_schedule(
    workers: Sequence[Worker],
    restrictions: RestrictionMaps,
    template: ShiftTemplate,
    cfg: SchedulerConfig | None = None,
    scheduler: BaseScheduler | None = None,
) -> ScheduleResult:
    """
    Build a complete week schedule.

    Args:
        workers: Roster
        restrictions: cannot-work / can-only-work maps (rest-day exclusions
            derived by the caller must already be merged in)
        template: Week template
        cfg: SchedulerConfig (defaults when omitted)
        scheduler: Strategy to run (GreedyScheduler when omitted)

    Returns:
        ScheduleResult including the status message
    """
    cfg = cfg or SchedulerConfig()
    scheduler = scheduler or GreedyScheduler()
    logger.info(
        "Building schedule with %s scheduler: %d workers, %d shifts x %d days",
        scheduler.get_name(),
        len(workers),
        len(template.shift_rows),
        len(template.enabled_days),
    )
    result = scheduler.make_schedule(workers, restrictions, template, cfg)
    result.message = generate_status_message(result.unfilled)
    if result.unfilled:
        logger.warning("%d slots unfilled: %s", len(result.unfilled), ", ".join(result.unfilled))
    return result


def generate(
    workers: Sequence[Worker],
    cannot_work: Mapping[str, bool],
    can_only_work: Mapping[str, bool],
    template: ShiftTemplate,
    cfg: SchedulerConfig | None = None,
) -> Tuple[Dict[str, List[str]], List[str], str]:
    """
    Generate a weekly schedule.

    Returns:
        ``(schedule, unfilled, message)`` where ``schedule`` maps every
        ``"<dayLabel>-<shiftName>"`` slot key to its assigned worker names
        (empty when unfilled) and ``unfilled`` lists the empty slot keys.
    """
    restrictions = RestrictionMaps(cannot_work=dict(cannot_work), can_only_work=dict(can_only_work))
    return build_week_schedule(workers, restrictions, template, cfg).as_tuple()
