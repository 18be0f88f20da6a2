"""Strategy interface accepted by ``build_week_schedule``."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from workschedule.config import SchedulerConfig
from workschedule.domain.models import RestrictionMaps, ScheduleResult, ShiftTemplate, Worker


class BaseScheduler(ABC):
    """
    Turns a roster, restriction maps and a week template into a ScheduleResult.

    Instances hold no run state; one scheduler serves any number of runs.
    """

    name = "unnamed"

    @abstractmethod
    def make_schedule(
        self,
        workers: Sequence[Worker],
        restrictions: RestrictionMaps,
        template: ShiftTemplate,
        cfg: SchedulerConfig,
    ) -> ScheduleResult:
        """Every slot key goes in ``schedule``; the empty ones also go in ``unfilled``."""

    def get_name(self) -> str:
        return self.name
