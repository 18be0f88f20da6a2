"""Pytest configuration and shared fixtures."""

import pytest

from workschedule.domain.models import DayColumn, ShiftRow, ShiftTemplate, Worker

WEEK_DAYS = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def pytest_configure(config):
    """Configure pytest."""
    # Add custom markers
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )


def make_template(shifts, days):
    """Build a template from ``[(name, hours)]`` and ``[(label, index)]``."""
    return ShiftTemplate(
        shift_rows=[ShiftRow(name, hours) for name, hours in shifts],
        day_columns=[DayColumn(label, index) for label, index in days],
    )


@pytest.fixture
def week_template():
    """Three 8-hour shifts on all seven days."""
    return make_template(
        [("Morning", "07:00-15:00"), ("Evening", "15:00-23:00"), ("Night", "23:00-07:00")],
        [(label, i) for i, label in enumerate(WEEK_DAYS)],
    )


@pytest.fixture
def roster():
    return [
        Worker("Avi"),
        Worker("Dana", observes_rest_day=True),
        Worker("Noa", is_flexible=True),
        Worker("Yoni"),
        Worker("Maya", observes_rest_day=True, is_flexible=True),
        Worker("Eli"),
        Worker("Tal"),
    ]
