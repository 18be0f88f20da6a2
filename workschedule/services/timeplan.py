"""Time-range parsing and wall-clock interval arithmetic."""

from __future__ import annotations

import logging
from datetime import time
from typing import List, Optional, Tuple

from workschedule.config import SchedulerConfig
from workschedule.domain.models import ParsedShift, ShiftRow

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


def parse_time_string(time_str: str) -> time:
    """
    Parse an ``HH:MM`` string into a time.

    Raises:
        ValueError: If the string is not two numeric components or out of range
    """
    parts = time_str.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time string: {time_str!r}")
    hour_s, minute_s = parts[0].strip(), parts[1].strip()
    if not (hour_s.isdigit() and minute_s.isdigit()):
        raise ValueError(f"Invalid time string: {time_str!r}")
    return time(int(hour_s), int(minute_s))


def _parse_range(text: str) -> Optional[Tuple[time, time]]:
    parts = text.split("-")
    if len(parts) != 2:
        return None
    try:
        return parse_time_string(parts[0]), parse_time_string(parts[1])
    except ValueError:
        return None


def is_valid_time_range(text: str) -> bool:
    """True if ``text`` parses without falling back to the default shift."""
    return _parse_range(text) is not None


def to_minutes(t: time) -> int:
    return t.hour * 60 + t.minute


def duration_hours(start: time, end: time) -> float:
    """Wall-clock duration; wraps through midnight when end is not after start."""
    start_m, end_m = to_minutes(start), to_minutes(end)
    if end_m > start_m:
        return (end_m - start_m) / 60.0
    return (MINUTES_PER_DAY - start_m + end_m) / 60.0


def calculate_shift_hours(start_hm: str, end_hm: str) -> float:
    return duration_hours(parse_time_string(start_hm), parse_time_string(end_hm))


def is_night(start: time, end: time, cfg: SchedulerConfig) -> bool:
    return start.hour >= cfg.night_start_hour or end.hour <= cfg.night_end_hour


def parse_shift_hours(shift_row: ShiftRow, cfg: SchedulerConfig | None = None) -> ParsedShift:
    """
    Parse a shift row's time range into a ParsedShift.

    Never raises: malformed input yields the configured default shift
    (08:00-16:00 unless overridden), which carries the row's name and raw text.
    """
    cfg = cfg or SchedulerConfig()
    parsed = _parse_range(shift_row.time_range_text)
    if parsed is None:
        logger.warning(
            "Unparseable time range %r for shift '%s'; using default %s-%s",
            shift_row.time_range_text,
            shift_row.shift_name,
            cfg.default_shift.start,
            cfg.default_shift.end,
        )
        start = parse_time_string(cfg.default_shift.start)
        end = parse_time_string(cfg.default_shift.end)
    else:
        start, end = parsed

    return ParsedShift(
        shift_name=shift_row.shift_name,
        start_time=start,
        end_time=end,
        duration_hours=duration_hours(start, end),
        is_night_shift=is_night(start, end, cfg),
        raw_text=shift_row.time_range_text,
    )


def shift_segments(shift: ParsedShift) -> List[Tuple[int, int]]:
    """Minute ranges covered by the shift on its day's clock; overnight shifts wrap."""
    start_m, end_m = to_minutes(shift.start_time), to_minutes(shift.end_time)
    if not shift.is_overnight:
        return [(start_m, end_m)]
    segments = [(start_m, MINUTES_PER_DAY)]
    if end_m > 0:
        segments.append((0, end_m))
    return segments


def shifts_overlap(first: ParsedShift, second: ParsedShift) -> bool:
    """True if the two shifts overlap or share an endpoint."""
    for a_start, a_end in shift_segments(first):
        for b_start, b_end in shift_segments(second):
            if a_start <= b_end and b_start <= a_end:
                return True
    return False


def rest_hours(earlier: ParsedShift, later: ParsedShift) -> float:
    """
    Elapsed hours between ``earlier`` ending and ``later`` starting one calendar day after it.

    An overnight ``earlier`` already ends on the later day, so the result can be
    zero or negative when the two shifts collide.
    """
    end_m = to_minutes(earlier.end_time)
    if not earlier.is_overnight:
        end_m -= MINUTES_PER_DAY
    return (to_minutes(later.start_time) - end_m) / 60.0


def previous_day_index(day_index: int) -> int:
    return (day_index - 1) % 7


def next_day_index(day_index: int) -> int:
    return (day_index + 1) % 7
