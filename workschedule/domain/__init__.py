"""Domain models for the scheduling core."""

from .models import (
    DayColumn,
    ParsedShift,
    RestrictionKey,
    RestrictionMaps,
    ScheduleResult,
    ShiftAssignment,
    ShiftRow,
    ShiftTemplate,
    Slot,
    Worker,
    restriction_key,
    slot_key,
)

__all__ = [
    "DayColumn",
    "ParsedShift",
    "RestrictionKey",
    "RestrictionMaps",
    "ScheduleResult",
    "ShiftAssignment",
    "ShiftRow",
    "ShiftTemplate",
    "Slot",
    "Worker",
    "restriction_key",
    "slot_key",
]
