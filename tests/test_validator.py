import pytest

from conftest import make_template
from workschedule.domain.models import RestrictionMaps, Worker
from workschedule.validator import schedule_to_frame, summarize_schedule, validate_schedule, worker_load

TEMPLATE = make_template([("Morning", "08:00-16:00"), ("Late", "14:00-22:00")], [("Mon", 0), ("Tue", 1)])
WORKERS = [Worker("A"), Worker("B")]
NO_RESTRICTIONS = RestrictionMaps()


def _schedule(**overrides):
    schedule = {"Mon-Morning": ["A"], "Mon-Late": ["B"], "Tue-Morning": ["B"], "Tue-Late": []}
    schedule.update({k.replace("_", "-"): v for k, v in overrides.items()})
    return schedule


def test_valid_schedule_passes():
    validate_schedule(_schedule(), ["Tue-Late"], WORKERS, NO_RESTRICTIONS, TEMPLATE)


def test_missing_slot_fails():
    schedule = _schedule()
    del schedule["Tue-Late"]
    with pytest.raises(ValueError, match="missing"):
        validate_schedule(schedule, [], WORKERS, NO_RESTRICTIONS, TEMPLATE)


def test_unfilled_must_match_empty_slots():
    with pytest.raises(ValueError, match="Unfilled"):
        validate_schedule(_schedule(), [], WORKERS, NO_RESTRICTIONS, TEMPLATE)


def test_unknown_worker_fails():
    with pytest.raises(ValueError, match="unknown worker"):
        validate_schedule(_schedule(Tue_Late=["Z"]), [], WORKERS, NO_RESTRICTIONS, TEMPLATE)


def test_excluded_assignment_fails():
    restrictions = RestrictionMaps(cannot_work={"A-Mon-Morning": True})
    with pytest.raises(ValueError, match="excluded"):
        validate_schedule(_schedule(), ["Tue-Late"], WORKERS, restrictions, TEMPLATE)


def test_allow_list_violation_fails():
    restrictions = RestrictionMaps(can_only_work={"B-Tue-Morning": True})
    with pytest.raises(ValueError, match="allow-list"):
        validate_schedule(_schedule(), ["Tue-Late"], WORKERS, restrictions, TEMPLATE)


def test_double_booking_fails():
    with pytest.raises(ValueError, match="overlapping"):
        validate_schedule(_schedule(Mon_Late=["A"]), ["Tue-Late"], WORKERS, NO_RESTRICTIONS, TEMPLATE)


def test_schedule_to_frame():
    df = schedule_to_frame(_schedule(), TEMPLATE)
    assert list(df["slot"]) == ["Mon-Morning", "Mon-Late", "Tue-Morning"]
    assert list(df["worker"]) == ["A", "B", "B"]
    assert df["duration_hours"].sum() == 24.0


def test_worker_load():
    load = worker_load(_schedule(), TEMPLATE)
    assert load.loc["B", "shifts"] == 2
    assert load.loc["A", "hours"] == 8.0


def test_summarize_schedule():
    text = summarize_schedule(_schedule(), ["Tue-Late"], TEMPLATE)
    assert "Assignments per day per shift:" in text
    assert "Load per worker (week):" in text
    assert "Filled: 3  Unfilled: 1" in text


def test_summarize_empty_schedule():
    schedule = {k: [] for k in TEMPLATE.slot_keys()}
    assert summarize_schedule(schedule, TEMPLATE.slot_keys(), TEMPLATE) == "No assignments. Unfilled slots: 4"
