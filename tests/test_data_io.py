"""Tests for CSV / YAML / JSON input helpers."""

import pytest

from workschedule.data_io import (
    read_restrictions,
    read_schedule_json,
    read_template,
    read_workers,
    template_from_dict,
    write_schedule_json,
)
from workschedule.domain.models import ScheduleResult, Worker


def test_read_workers(tmp_path):
    csv_file = tmp_path / "workers.csv"
    csv_file.write_text(
        "Name,Observes_Rest_Day,Is_Flexible\n"
        "Avi,false,false\n"
        "Dana,yes,\n"
        "Noa,0,1\n"
    )
    workers = read_workers(csv_file)
    assert workers == [
        Worker("Avi"),
        Worker("Dana", observes_rest_day=True),
        Worker("Noa", is_flexible=True),
    ]


def test_read_workers_name_only(tmp_path):
    csv_file = tmp_path / "workers.csv"
    csv_file.write_text("name\nAvi\nDana\n")
    assert [w.name for w in read_workers(csv_file)] == ["Avi", "Dana"]


def test_duplicate_workers_rejected(tmp_path):
    csv_file = tmp_path / "workers.csv"
    csv_file.write_text("name\nAvi\nAvi\n")
    with pytest.raises(ValueError, match="duplicate"):
        read_workers(csv_file)


def test_read_restrictions(tmp_path):
    csv_file = tmp_path / "restrictions.csv"
    csv_file.write_text(
        "worker,day,shift,kind\n"
        "Avi,Mon,Morning,cannot\n"
        "Dana,Tue,Night,can-only\n"
    )
    cannot, can_only = read_restrictions(csv_file)
    assert cannot == {"Avi-Mon-Morning": True}
    assert can_only == {"Dana-Tue-Night": True}


def test_unknown_restriction_kind(tmp_path):
    csv_file = tmp_path / "restrictions.csv"
    csv_file.write_text("worker,day,shift,kind\nAvi,Mon,Morning,maybe\n")
    with pytest.raises(ValueError, match="unknown restriction kind"):
        read_restrictions(csv_file)


def test_missing_columns(tmp_path):
    csv_file = tmp_path / "restrictions.csv"
    csv_file.write_text("worker,day\nAvi,Mon\n")
    with pytest.raises(ValueError, match="missing required columns"):
        read_restrictions(csv_file)


def test_read_template_yaml(tmp_path):
    path = tmp_path / "template.yaml"
    path.write_text(
        "shifts:\n"
        "  - {name: Morning, hours: '06:45-15:00'}\n"
        "  - {name: Night, hours: '22:30-07:00'}\n"
        "days:\n"
        "  - {label: Sun, index: 0}\n"
        "  - {label: Mon}\n"
        "  - {label: Sat, index: 6, enabled: false}\n"
    )
    template = read_template(path)
    assert [r.shift_name for r in template.shift_rows] == ["Morning", "Night"]
    assert template.shift_rows[1].time_range_text == "22:30-07:00"
    assert [(d.day_label, d.day_index) for d in template.enabled_days] == [("Sun", 0), ("Mon", 1)]
    assert template.slot_keys() == ["Sun-Morning", "Sun-Night", "Mon-Morning", "Mon-Night"]


def test_template_requires_shifts_and_days(tmp_path):
    path = tmp_path / "template.json"
    path.write_text('{"shifts": []}')
    with pytest.raises(ValueError):
        read_template(path)


@pytest.mark.parametrize(
    "shifts, days",
    [
        ([{"name": "Morning"}, {"name": "Morning"}], [{"label": "Mon"}]),
        ([{"name": "Morning"}], [{"label": "Mon"}, {"label": "Mon", "index": 2}]),
    ],
)
def test_duplicate_slot_names_rejected(shifts, days):
    with pytest.raises(ValueError, match="duplicate"):
        template_from_dict({"shifts": shifts, "days": days})


def test_schedule_json(tmp_path):
    path = tmp_path / "schedule.json"
    result = ScheduleResult(schedule={"שבת-בוקר": ["Avi"], "Mon-Night": []}, unfilled=["Mon-Night"], message="x")
    write_schedule_json(path, result)
    assert "שבת" in path.read_text(encoding="utf-8")
    assert read_schedule_json(path) == result
