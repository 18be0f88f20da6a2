"""Domain models for weekly shift scheduling."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class Worker:
    """Worker on the roster. The name is the identity used by every map."""

    name: str
    observes_rest_day: bool = False
    is_flexible: bool = False

    def __repr__(self) -> str:
        return (
            f"<Worker(name='{self.name}', rest_day={self.observes_rest_day}, "
            f"flexible={self.is_flexible})>"
        )


@dataclass(frozen=True)
class ShiftRow:
    """One shift type, reused across every enabled day."""

    shift_name: str
    time_range_text: str  # e.g. "06:45-15:00"


@dataclass(frozen=True)
class DayColumn:
    """Day column of the template (0=first day of week .. 6=last)."""

    day_label: str
    day_index: int
    enabled: bool = True


@dataclass(frozen=True)
class ShiftTemplate:
    """Week structure: ordered shift rows x ordered day columns."""

    shift_rows: Tuple[ShiftRow, ...] = ()
    day_columns: Tuple[DayColumn, ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from callers but keep the template immutable
        object.__setattr__(self, "shift_rows", tuple(self.shift_rows))
        object.__setattr__(self, "day_columns", tuple(self.day_columns))

    @property
    def enabled_days(self) -> List[DayColumn]:
        return [d for d in self.day_columns if d.enabled]

    def slot_keys(self) -> List[str]:
        """All slot keys in template order (day-major)."""
        return [
            slot_key(day.day_label, row.shift_name)
            for day in self.enabled_days
            for row in self.shift_rows
        ]


@dataclass(frozen=True)
class ParsedShift:
    """Structured form of a ShiftRow's time range."""

    shift_name: str
    start_time: time
    end_time: time
    duration_hours: float
    is_night_shift: bool
    raw_text: str

    @property
    def is_overnight(self) -> bool:
        return not self.end_time > self.start_time


@dataclass(frozen=True)
class Slot:
    """One (day, shift) cell requiring at most one worker."""

    day_label: str
    day_index: int
    shift: ParsedShift

    @property
    def key(self) -> str:
        return slot_key(self.day_label, self.shift.shift_name)


@dataclass(frozen=True)
class ShiftAssignment:
    """Run-local record of a filled slot."""

    worker_name: str
    day_label: str
    day_index: int
    shift: ParsedShift


@dataclass(frozen=True)
class RestrictionKey:
    """Composite (worker, day, shift) restriction identifier."""

    worker: str
    day: str
    shift: str

    @property
    def key(self) -> str:
        return restriction_key(self.worker, self.day, self.shift)


def slot_key(day_label: str, shift_name: str) -> str:
    """Serialized slot key: ``"<dayLabel>-<shiftName>"``."""
    return f"{day_label}-{shift_name}"


def restriction_key(worker_name: str, day_label: str, shift_name: str) -> str:
    """Serialized restriction key: ``"<workerName>-<dayLabel>-<shiftName>"``."""
    return f"{worker_name}-{day_label}-{shift_name}"


@dataclass(frozen=True)
class RestrictionMaps:
    """
    Per-worker availability restrictions.

    Both maps are keyed by ``"<workerName>-<dayLabel>-<shiftName>"``. Only
    ``True`` values carry meaning; ``False`` entries are ignored.
    """

    cannot_work: Mapping[str, bool] = field(default_factory=dict)
    can_only_work: Mapping[str, bool] = field(default_factory=dict)

    def is_excluded(self, key: RestrictionKey) -> bool:
        return self.cannot_work.get(key.key) is True

    def is_allowed(self, key: RestrictionKey) -> bool:
        return self.can_only_work.get(key.key) is True


@dataclass
class ScheduleResult:
    """Outcome of one scheduling run."""

    schedule: Dict[str, List[str]] = field(default_factory=dict)
    unfilled: List[str] = field(default_factory=list)
    message: str = ""

    def as_tuple(self) -> Tuple[Dict[str, List[str]], List[str], str]:
        return self.schedule, self.unfilled, self.message
