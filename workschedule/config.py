"""Load and validate scheduler configuration (JSON or YAML)."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List

import yaml


@dataclass
class RuleLimits:
    max_daily_hours: float = 12.0
    flexible_max_daily_hours: float = 16.0
    min_rest_hours: float = 11.0
    flexible_min_rest_hours: float = 8.0

    def daily_cap(self, is_flexible: bool) -> float:
        return self.flexible_max_daily_hours if is_flexible else self.max_daily_hours

    def min_rest(self, is_flexible: bool) -> float:
        return self.flexible_min_rest_hours if is_flexible else self.min_rest_hours


@dataclass
class ScoreWeights:
    per_assigned_shift: int = 10
    short_rest_penalty: int = 5
    short_rest_threshold_hours: float = 13.0
    first_night_penalty: int = 3


@dataclass
class RestDayPolicy:
    eve_labels: List[str] = field(default_factory=lambda: ["Fri", "שישי"])
    rest_labels: List[str] = field(default_factory=lambda: ["Sat", "שבת"])
    eve_cutoff_hour: int = 15

    def is_eve(self, day_label: str) -> bool:
        return _label_matches(day_label, self.eve_labels)

    def is_rest_day(self, day_label: str) -> bool:
        return _label_matches(day_label, self.rest_labels)


@dataclass
class DefaultShift:
    start: str = "08:00"
    end: str = "16:00"


@dataclass
class SchedulerConfig:
    limits: RuleLimits = field(default_factory=RuleLimits)
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    rest_day: RestDayPolicy = field(default_factory=RestDayPolicy)
    default_shift: DefaultShift = field(default_factory=DefaultShift)
    night_start_hour: int = 18
    night_end_hour: int = 6


_SECTIONS = {
    "limits": RuleLimits,
    "weights": ScoreWeights,
    "rest_day": RestDayPolicy,
    "default_shift": DefaultShift,
}


def _label_matches(day_label: str, labels: List[str]) -> bool:
    folded = day_label.casefold()
    return any(lbl.casefold() in folded for lbl in labels if lbl)


def _build_section(name: str, cls, raw: Any):
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(raw).__name__}")
    allowed = {f.name for f in fields(cls)}
    unknown = set(raw) - allowed
    if unknown:
        raise ValueError(f"Unknown keys in config section '{name}': {sorted(unknown)}")
    return cls(**raw)


def config_from_dict(data: Dict[str, Any] | None) -> SchedulerConfig:
    data = data or {}
    if not isinstance(data, dict):
        raise ValueError("Config document must be a mapping")
    top_level = {f.name for f in fields(SchedulerConfig)}
    unknown = set(data) - top_level
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    kwargs: Dict[str, Any] = {}
    for name, cls in _SECTIONS.items():
        kwargs[name] = _build_section(name, cls, data.get(name))
    for name in ("night_start_hour", "night_end_hour"):
        if name in data:
            kwargs[name] = int(data[name])
    cfg = SchedulerConfig(**kwargs)

    if cfg.limits.max_daily_hours <= 0 or cfg.limits.flexible_max_daily_hours <= 0:
        raise ValueError("Daily hour caps must be positive")
    if not 0 <= cfg.rest_day.eve_cutoff_hour <= 23:
        raise ValueError("rest_day.eve_cutoff_hour must be within 0..23")

    from workschedule.services.timeplan import parse_time_string

    for name in ("start", "end"):
        value = getattr(cfg.default_shift, name)
        try:
            parse_time_string(str(value))
        except ValueError:
            raise ValueError(f"default_shift.{name} must be HH:MM, got {value!r}") from None
    return cfg


def load_config(path: str | Path | None = None) -> SchedulerConfig:
    """Load config from a JSON or YAML file; defaults when no path is given."""
    if path is None:
        return SchedulerConfig()
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text) if text.strip() else {}
    else:
        data = yaml.safe_load(text)
    return config_from_dict(data)
