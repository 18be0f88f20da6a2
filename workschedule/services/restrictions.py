"""Restriction-map helpers: allow-list ownership and rest-day exclusions."""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Sequence, Set

from workschedule.config import SchedulerConfig
from workschedule.domain.models import ParsedShift, ShiftTemplate, Worker, restriction_key
from workschedule.services.timeplan import parse_shift_hours


def key_owner(key: str, names: Iterable[str]) -> str | None:
    """Worker name a restriction key belongs to (longest ``"<name>-"`` prefix)."""
    owner = None
    for name in names:
        if key.startswith(f"{name}-") and (owner is None or len(name) > len(owner)):
            owner = name
    return owner


def allow_list_owners(can_only_work: Mapping[str, bool], names: Sequence[str]) -> Set[str]:
    """Names of workers with at least one ``True`` can-only entry."""
    owners: Set[str] = set()
    for key, value in can_only_work.items():
        if value is not True:
            continue
        owner = key_owner(key, names)
        if owner is not None:
            owners.add(owner)
    return owners


def is_rest_day_slot(day_label: str, shift: ParsedShift, cfg: SchedulerConfig) -> bool:
    """Slot falls on the rest day, or on its eve at/after the cutoff hour."""
    policy = cfg.rest_day
    if policy.is_rest_day(day_label):
        return True
    return policy.is_eve(day_label) and shift.start_time.hour >= policy.eve_cutoff_hour


def rest_day_exclusions(
    workers: Sequence[Worker],
    template: ShiftTemplate,
    cfg: SchedulerConfig | None = None,
) -> Dict[str, bool]:
    """cannot-work entries for every non-flexible rest-day observer."""
    cfg = cfg or SchedulerConfig()
    observers = [w for w in workers if w.observes_rest_day and not w.is_flexible]
    if not observers:
        return {}

    parsed = [parse_shift_hours(row, cfg) for row in template.shift_rows]
    blocks: Dict[str, bool] = {}
    for day in template.enabled_days:
        for shift in parsed:
            if not is_rest_day_slot(day.day_label, shift, cfg):
                continue
            for worker in observers:
                blocks[restriction_key(worker.name, day.day_label, shift.shift_name)] = True
    return blocks


def merge_restrictions(*maps: Mapping[str, bool]) -> Dict[str, bool]:
    """Union of restriction maps; a ``True`` entry in any map wins."""
    merged: Dict[str, bool] = {}
    for mapping in maps:
        for key, value in mapping.items():
            merged[key] = merged.get(key, False) or value is True
    return merged
