"""Greedy scarcity-first assignment engine."""

from __future__ import annotations

import logging
from typing import List, Sequence, Set

from workschedule.config import SchedulerConfig
from workschedule.domain.models import (
    RestrictionMaps,
    ScheduleResult,
    ShiftAssignment,
    ShiftTemplate,
    Slot,
    Worker,
)
from workschedule.services.constraints import History, eligible_workers
from workschedule.services.restrictions import allow_list_owners
from workschedule.services.scoring import calculate_worker_score
from workschedule.services.timeplan import parse_shift_hours

from .base import BaseScheduler

logger = logging.getLogger(__name__)


def build_slots(template: ShiftTemplate, cfg: SchedulerConfig) -> List[Slot]:
    """One slot per enabled day x shift row; each row is parsed once."""
    parsed = [parse_shift_hours(row, cfg) for row in template.shift_rows]
    return [
        Slot(day_label=day.day_label, day_index=day.day_index, shift=shift)
        for day in template.enabled_days
        for shift in parsed
    ]


class GreedyScheduler(BaseScheduler):
    """
    Single-pass greedy scheduler.

    Slots are ordered by how many workers are eligible against an empty
    assignment state (fewest first). Each slot then gets the lowest-scoring
    worker that is eligible given the assignments made so far, or is left
    unfilled. No backtracking.
    """

    name = "greedy"

    def make_schedule(
        self,
        workers: Sequence[Worker],
        restrictions: RestrictionMaps,
        template: ShiftTemplate,
        cfg: SchedulerConfig,
    ) -> ScheduleResult:
        slots = build_slots(template, cfg)
        names = [w.name for w in workers]
        allow_list = allow_list_owners(restrictions.can_only_work, names)
        history: History = {name: [] for name in names}

        # Scarcity is estimated once, against the empty state; sort is stable
        initial: History = {name: [] for name in names}
        ordered = sorted(
            slots,
            key=lambda s: len(eligible_workers(s, workers, restrictions, initial, cfg, allow_list)),
        )

        result = ScheduleResult(schedule={s.key: [] for s in slots})
        for slot in ordered:
            self._assign_slot(slot, workers, restrictions, history, cfg, allow_list, result)

        logger.info(
            "Greedy run finished: %d slots, %d filled, %d unfilled",
            len(slots),
            len(slots) - len(result.unfilled),
            len(result.unfilled),
        )
        return result

    def _assign_slot(
        self,
        slot: Slot,
        workers: Sequence[Worker],
        restrictions: RestrictionMaps,
        history: History,
        cfg: SchedulerConfig,
        allow_list: Set[str],
        result: ScheduleResult,
    ) -> None:
        candidates = eligible_workers(slot, workers, restrictions, history, cfg, allow_list)
        if not candidates:
            logger.debug("Slot %s: no eligible workers, left unfilled", slot.key)
            result.unfilled.append(slot.key)
            return

        # min() keeps the first of equal scores, so roster order breaks ties
        chosen = min(
            candidates,
            key=lambda w: calculate_worker_score(
                w, slot.day_index, slot.shift, history[w.name], cfg.weights
            ),
        )
        result.schedule[slot.key] = [chosen.name]
        history[chosen.name].append(
            ShiftAssignment(
                worker_name=chosen.name,
                day_label=slot.day_label,
                day_index=slot.day_index,
                shift=slot.shift,
            )
        )
        logger.debug("Slot %s: assigned %s (%d candidates)", slot.key, chosen.name, len(candidates))
