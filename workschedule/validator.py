from __future__ import annotations

from typing import List, Mapping, Sequence

import pandas as pd

from .config import SchedulerConfig
from .domain.models import RestrictionMaps, ShiftTemplate, Worker, restriction_key
from .engine.greedy import build_slots
from .services.restrictions import allow_list_owners
from .services.timeplan import shifts_overlap

FRAME_COLUMNS = [
    "slot",
    "day_label",
    "day_index",
    "shift_name",
    "worker",
    "start_time",
    "end_time",
    "duration_hours",
    "is_night_shift",
]


def schedule_to_frame(
    schedule: Mapping[str, List[str]],
    template: ShiftTemplate,
    cfg: SchedulerConfig | None = None,
) -> pd.DataFrame:
    """One row per (slot, assigned worker), in template order."""
    rows = []
    for slot in build_slots(template, cfg or SchedulerConfig()):
        for name in schedule.get(slot.key, []):
            rows.append(
                {
                    "slot": slot.key,
                    "day_label": slot.day_label,
                    "day_index": slot.day_index,
                    "shift_name": slot.shift.shift_name,
                    "worker": name,
                    "start_time": slot.shift.start_time.strftime("%H:%M"),
                    "end_time": slot.shift.end_time.strftime("%H:%M"),
                    "duration_hours": slot.shift.duration_hours,
                    "is_night_shift": slot.shift.is_night_shift,
                }
            )
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def validate_schedule(
    schedule: Mapping[str, List[str]],
    unfilled: Sequence[str],
    workers: Sequence[Worker],
    restrictions: RestrictionMaps,
    template: ShiftTemplate,
    cfg: SchedulerConfig | None = None,
) -> None:
    """
    Re-check a finished schedule against the hard invariants.

    Raises:
        ValueError: On the first violated invariant
    """
    cfg = cfg or SchedulerConfig()
    slots = {s.key: s for s in build_slots(template, cfg)}

    # Coverage: exactly the template's slots
    missing = [k for k in slots if k not in schedule]
    if missing:
        raise ValueError(f"Schedule is missing slots: {missing}")
    extra = [k for k in schedule if k not in slots]
    if extra:
        raise ValueError(f"Schedule contains slots not in the template: {extra}")

    # Unfilled list matches the empty slots
    if len(set(unfilled)) != len(unfilled):
        raise ValueError("Unfilled list contains duplicate slots")
    empty = {k for k, names in schedule.items() if not names}
    if set(unfilled) != empty:
        raise ValueError(
            f"Unfilled slots {sorted(unfilled)} do not match empty slots {sorted(empty)}"
        )

    crowded = [k for k, names in schedule.items() if len(names) > 1]
    if crowded:
        raise ValueError(f"Slots with more than one worker: {crowded}")

    names = [w.name for w in workers]
    known = set(names)
    allow_list = allow_list_owners(restrictions.can_only_work, names)
    for key, assigned in schedule.items():
        slot = slots[key]
        for name in assigned:
            if name not in known:
                raise ValueError(f"Slot {key} references unknown worker '{name}'")
            rkey = restriction_key(name, slot.day_label, slot.shift.shift_name)
            if restrictions.cannot_work.get(rkey) is True:
                raise ValueError(f"Worker '{name}' assigned to excluded slot {key}")
            if name in allow_list and restrictions.can_only_work.get(rkey) is not True:
                raise ValueError(f"Worker '{name}' assigned outside their allow-list: {key}")

    # No double booking per worker per day
    df = schedule_to_frame(schedule, template, cfg)
    for (name, day), group in df.groupby(["worker", "day_label"], sort=False):
        day_shifts = [slots[k].shift for k in group["slot"]]
        for i, first in enumerate(day_shifts):
            for second in day_shifts[i + 1:]:
                if shifts_overlap(first, second):
                    raise ValueError(
                        f"Worker '{name}' has overlapping shifts on {day}: "
                        f"{first.raw_text} overlaps {second.raw_text}"
                    )


def worker_load(
    schedule: Mapping[str, List[str]],
    template: ShiftTemplate,
    cfg: SchedulerConfig | None = None,
) -> pd.DataFrame:
    df = schedule_to_frame(schedule, template, cfg)
    if df.empty:
        return pd.DataFrame(columns=["shifts", "hours", "night_shifts"])
    load = df.groupby("worker").agg(
        shifts=("slot", "count"),
        hours=("duration_hours", "sum"),
        night_shifts=("is_night_shift", "sum"),
    )
    return load.sort_values(["shifts", "hours"], ascending=False)


def summarize_schedule(
    schedule: Mapping[str, List[str]],
    unfilled: Sequence[str],
    template: ShiftTemplate,
    cfg: SchedulerConfig | None = None,
) -> str:
    df = schedule_to_frame(schedule, template, cfg)
    if df.empty:
        return f"No assignments. Unfilled slots: {len(unfilled)}"

    days = [d.day_label for d in template.enabled_days]
    shifts = [r.shift_name for r in template.shift_rows]
    grid = (
        df.groupby(["day_label", "shift_name"], sort=False)["worker"]
        .agg(", ".join)
        .unstack()
        .reindex(index=days, columns=shifts)
        .fillna("-")
    )
    load = worker_load(schedule, template, cfg)

    lines = ["Assignments per day per shift:"]
    lines.append(grid.to_string())
    lines.append("")
    lines.append("Load per worker (week):")
    lines.append(load.to_string())
    lines.append("")
    lines.append(f"Filled: {len(df)}  Unfilled: {len(unfilled)}")
    return "\n".join(lines)
