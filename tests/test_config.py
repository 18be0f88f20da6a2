"""Tests for configuration loading."""

import json
from pathlib import Path

import pytest

from workschedule.config import SchedulerConfig, config_from_dict, load_config

REPO_ROOT = Path(__file__).resolve().parent.parent


def test_defaults():
    cfg = load_config()
    assert cfg.limits.daily_cap(False) == 12.0
    assert cfg.limits.daily_cap(True) == 16.0
    assert cfg.limits.min_rest(False) == 11.0
    assert cfg.limits.min_rest(True) == 8.0
    assert cfg.weights.short_rest_threshold_hours == 13.0
    assert cfg.rest_day.eve_cutoff_hour == 15


def test_sample_config_matches_defaults():
    assert load_config(REPO_ROOT / "scheduler_config.yaml") == SchedulerConfig()


def test_yaml_overrides(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("limits:\n  max_daily_hours: 10\nrest_day:\n  rest_labels: [Sun]\n")
    cfg = load_config(path)
    assert cfg.limits.max_daily_hours == 10
    assert cfg.limits.flexible_max_daily_hours == 16.0
    assert cfg.rest_day.is_rest_day("sunday")
    assert not cfg.rest_day.is_rest_day("Saturday")


def test_json_config(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"weights": {"first_night_penalty": 4}, "night_start_hour": 20}))
    cfg = load_config(path)
    assert cfg.weights.first_night_penalty == 4
    assert cfg.night_start_hour == 20


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("limits:\n  max_weekly_hours: 40\n")
    with pytest.raises(ValueError, match="Unknown keys"):
        load_config(path)


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_config("does/not/exist.yaml")


@pytest.mark.parametrize("start, end", [("8", "16:00"), ("08:00", "25:00"), ("8am", "4pm")])
def test_malformed_default_shift_rejected(start, end):
    with pytest.raises(ValueError, match="default_shift"):
        config_from_dict({"default_shift": {"start": start, "end": end}})


def test_custom_default_shift(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("default_shift:\n  start: '09:00'\n  end: '17:30'\n")
    cfg = load_config(path)
    assert (cfg.default_shift.start, cfg.default_shift.end) == ("09:00", "17:30")
