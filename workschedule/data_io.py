from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pandas as pd
import yaml

from .domain.models import DayColumn, ScheduleResult, ShiftRow, ShiftTemplate, Worker, restriction_key

_TRUE_STRINGS = {"1", "true", "yes", "y", "t"}

RESTRICTION_KINDS = {"cannot", "can_only"}


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return False
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def _read_csv(path: str | Path, required: List[str]) -> pd.DataFrame:
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    # Normalize column names
    df.columns = df.columns.str.lower().str.strip()
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing required columns {missing}")
    return df


def read_workers(path: str | Path) -> List[Worker]:
    """
    Read the roster from CSV.

    Columns: ``name`` (required), ``observes_rest_day``, ``is_flexible``.
    Row order is kept: it is the tie-break order of the scheduler.
    """
    df = _read_csv(path, ["name"])
    df["name"] = df["name"].str.strip()
    if (df["name"] == "").any():
        raise ValueError(f"{path}: worker names must be non-empty")
    duplicated = df.loc[df["name"].duplicated(), "name"].tolist()
    if duplicated:
        raise ValueError(f"{path}: duplicate worker names {duplicated}")

    workers = []
    for _, row in df.iterrows():
        workers.append(
            Worker(
                name=row["name"],
                observes_rest_day=_as_bool(row.get("observes_rest_day")),
                is_flexible=_as_bool(row.get("is_flexible")),
            )
        )
    return workers


def read_restrictions(path: str | Path) -> Tuple[Dict[str, bool], Dict[str, bool]]:
    """
    Read restrictions from CSV into ``(cannot_work, can_only_work)``.

    Columns: ``worker, day, shift, kind`` with kind ``cannot`` or ``can_only``.
    """
    df = _read_csv(path, ["worker", "day", "shift", "kind"])
    cannot_work: Dict[str, bool] = {}
    can_only_work: Dict[str, bool] = {}
    for _, row in df.iterrows():
        kind = row["kind"].strip().lower().replace("-", "_").replace(" ", "_")
        if kind not in RESTRICTION_KINDS:
            raise ValueError(f"{path}: unknown restriction kind '{row['kind']}'")
        key = restriction_key(row["worker"].strip(), row["day"].strip(), row["shift"].strip())
        target = cannot_work if kind == "cannot" else can_only_work
        target[key] = True
    return cannot_work, can_only_work


def _load_document(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)


def template_from_dict(data: Dict[str, Any]) -> ShiftTemplate:
    if not isinstance(data, dict) or "shifts" not in data or "days" not in data:
        raise ValueError("Template document needs 'shifts' and 'days'")

    rows = []
    for item in data["shifts"] or []:
        if "name" not in item:
            raise ValueError(f"Shift entry without a name: {item}")
        rows.append(ShiftRow(shift_name=str(item["name"]), time_range_text=str(item.get("hours", ""))))

    days = []
    for position, item in enumerate(data["days"] or []):
        if "label" not in item:
            raise ValueError(f"Day entry without a label: {item}")
        days.append(
            DayColumn(
                day_label=str(item["label"]),
                day_index=int(item.get("index", position)),
                enabled=_as_bool(item.get("enabled", True)),
            )
        )

    # Slot keys must be unique
    checks = [
        ("shift names", [r.shift_name for r in rows]),
        ("day labels", [d.day_label for d in days]),
    ]
    for what, labels in checks:
        duplicated = sorted({x for x in labels if labels.count(x) > 1})
        if duplicated:
            raise ValueError(f"Template has duplicate {what}: {duplicated}")
    return ShiftTemplate(shift_rows=rows, day_columns=days)


def read_template(path: str | Path) -> ShiftTemplate:
    """Read a week template from YAML or JSON."""
    return template_from_dict(_load_document(Path(path)))


def write_schedule_json(path: str | Path, result: ScheduleResult) -> None:
    payload = {
        "schedule": result.schedule,
        "unfilled": result.unfilled,
        "message": result.message,
    }
    Path(path).write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def read_schedule_json(path: str | Path) -> ScheduleResult:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return ScheduleResult(
        schedule={k: list(v) for k, v in data.get("schedule", {}).items()},
        unfilled=list(data.get("unfilled", [])),
        message=data.get("message", ""),
    )
